"""Hands the payment file to the user's text editor"""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from payday.config import settings
from payday.domain.exceptions import EditorError

logger = logging.getLogger(__name__)

FALLBACK_EDITOR = "vi"


def resolve_editor(editor: str | None = None) -> list[str]:
    """Editor command: explicit, then settings, then $VISUAL, $EDITOR, vi"""
    command = (
        editor
        or settings.editor
        or os.environ.get("VISUAL")
        or os.environ.get("EDITOR")
        or FALLBACK_EDITOR
    )
    return shlex.split(command)


def edit_file(path: Path, editor: str | None = None) -> None:
    """
    Open a file in an external editor and wait for it to exit.

    Raises:
        EditorError: If the editor cannot be started or exits non-zero
    """
    command = resolve_editor(editor) + [str(path)]
    logger.debug("Launching editor", extra={"command": command})

    try:
        result = subprocess.run(command, check=False)
    except OSError as e:
        raise EditorError(f"could not launch editor {command[0]!r}: {e}") from e

    if result.returncode != 0:
        raise EditorError(f"editor {command[0]!r} exited with status {result.returncode}")
