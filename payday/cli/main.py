"""Command-line entry point: compute, adjust, list and edit"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, ValidationError

from payday.cli.formatting import breakdown_lines, describe_payment, format_currency, payment_line
from payday.cli.schemas import (
    AdjustRequest,
    ComputeRequest,
    EditRequest,
    ListRequest,
    translate_validation_error,
)
from payday.config import settings
from payday.domain.exceptions import DomainException, InvalidInputError
from payday.domain.projection import build_projection
from payday.infrastructure.editor import edit_file
from payday.infrastructure.observability.logging import log_adjustment, log_projection, setup_logging
from payday.infrastructure.storage.payment_file import PaymentFileRepository
from payday.utils.date_utils import day_of_month

logger = logging.getLogger(__name__)


def run_compute(request: ComputeRequest, repo: PaymentFileRepository) -> int:
    """Print the balance left at the reference day"""
    store = repo.load()
    current_day = request.current_day if request.current_day is not None else day_of_month()

    projection = build_projection(request.balance, current_day, request.reference_day, store)
    log_projection(current_day, request.reference_day, projection.wraps, len(projection.due), projection.total_due)

    if request.breakdown:
        for line in breakdown_lines(projection):
            print(line)
    print(format_currency(projection.projected_balance))
    return 0


def run_adjust(request: AdjustRequest, repo: PaymentFileRepository) -> int:
    """Change one bill and write the file back"""
    store = repo.load()
    payment = store.adjust(request.name, amount=request.amount, day_paid=request.day_paid)
    if store.dirty:
        repo.save(store)
    log_adjustment(request.name, request.amount, request.day_paid)

    print(describe_payment(payment))
    return 0


def run_list(request: ListRequest, repo: PaymentFileRepository) -> int:
    """Print bill names in alphabetical order"""
    store = repo.load()
    for payment in store.sorted_by_name():
        print(payment_line(payment, request.show_amount, request.show_day_paid))
    return 0


def run_edit(request: EditRequest, repo: PaymentFileRepository) -> int:
    """Open the payment file in an editor, then check it still loads"""
    if repo.ensure_exists():
        print(f"Created {repo.path}", file=sys.stderr)
    edit_file(repo.path)
    repo.load()
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payday",
        description="Project your bank balance forward to payday.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Payment file to use (default: {settings.payments_file})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level for diagnostics on stderr",
    )

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    compute = commands.add_parser("compute", help="For computing the balance at the given reset date.")
    compute.add_argument("balance", help="Current balance of your account.")
    compute.add_argument(
        "-r",
        "--reference-day",
        "--reset-day",
        dest="reference_day",
        default=None,
        help=f"Day your bill cycle resets, normally pay day (default: {settings.default_reference_day}).",
    )
    compute.add_argument(
        "-d",
        "--current-day",
        dest="current_day",
        default=None,
        help="Day of month to project from (default: today).",
    )
    compute.add_argument("--breakdown", action="store_true", help="List the bills still to come out.")
    compute.set_defaults(handler=run_compute, request_model=ComputeRequest)

    adjust = commands.add_parser("adjust", help="For adjusting a bill.")
    adjust.add_argument("name", help="Bill item to adjust.")
    adjust.add_argument("-a", "--amount", default=None, help="New bill amount.")
    adjust.add_argument("-d", "--day-paid", dest="day_paid", default=None, help="New day that the bill is paid on.")
    adjust.set_defaults(handler=run_adjust, request_model=AdjustRequest)

    list_ = commands.add_parser("list", help="For listing all the bills.")
    list_.add_argument("-a", "--amount", dest="show_amount", action="store_true", help="Include the bill amount.")
    list_.add_argument("-d", "--day-paid", dest="show_day_paid", action="store_true", help="Include the day the bill is paid.")
    list_.set_defaults(handler=run_list, request_model=ListRequest)

    edit = commands.add_parser("edit", help="For editing the bill config.")
    edit.set_defaults(handler=run_edit, request_model=EditRequest)

    return parser


def build_request(args: argparse.Namespace) -> BaseModel:
    """
    Validate parsed arguments into the subcommand's request model.

    Raises:
        InvalidInputError: Amount or day input is malformed or out of range
    """
    fields = {
        name: value
        for name, value in vars(args).items()
        if name in args.request_model.model_fields and value is not None
    }
    if args.request_model is ComputeRequest:
        fields.setdefault("reference_day", settings.default_reference_day)

    try:
        return args.request_model(**fields)
    except ValidationError as e:
        raise translate_validation_error(e) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or settings.log_level)

    try:
        request = build_request(args)
    except InvalidInputError as e:
        parser.error(str(e))

    handler: Callable[[BaseModel, PaymentFileRepository], int] = args.handler
    repo = PaymentFileRepository(args.config)

    try:
        return handler(request, repo)
    except DomainException as e:
        logger.warning(f"{args.command} failed: {e}", extra={"command": args.command})
        print(f"error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())
