"""YAML-backed persistence for the payment store"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from payday.config import settings
from payday.domain.exceptions import ConfigNotFoundError, ConfigUnreadableError
from payday.domain.store import PaymentStore
from payday.infrastructure.storage.schemas import PaymentFile, PaymentRecord

logger = logging.getLogger(__name__)

SKELETON = "payments: []\n"


class PaymentFileRepository:
    """Loads and saves the payment store as a human-editable YAML file"""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else settings.payments_file

    def exists(self) -> bool:
        return self.path.is_file()

    def _read_raw(self) -> Dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigNotFoundError(self.path) from e
        except OSError as e:
            raise ConfigUnreadableError(self.path, e.strerror or str(e)) from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigUnreadableError(self.path, f"invalid YAML: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigUnreadableError(self.path, "top level must be a mapping with a `payments` key")
        return data

    def load(self) -> PaymentStore:
        """
        Read the payment file into a PaymentStore.

        Raises:
            ConfigNotFoundError: The file does not exist
            ConfigUnreadableError: The file cannot be read, is not valid YAML,
                or does not match the payment file schema
            DuplicatePaymentError: Two payments share a name
        """
        raw = self._read_raw()
        try:
            parsed = PaymentFile.model_validate(raw)
        except ValidationError as e:
            raise ConfigUnreadableError(self.path, _summarize(e)) from e

        store = PaymentStore(record.to_domain() for record in parsed.payments)
        logger.debug("Loaded payment file", extra={"path": str(self.path), "payments": len(store)})
        return store

    def save(self, store: PaymentStore) -> None:
        """
        Write the whole store back in the order it was loaded.

        The file is replaced atomically: a temporary file in the same
        directory is written first, then moved over the old one.
        """
        document = PaymentFile(payments=[PaymentRecord.from_domain(p) for p in store])
        text = yaml.safe_dump(document.to_yaml_data(), sort_keys=False, allow_unicode=True)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            if self.path.exists():
                # mkstemp creates 0600; keep the permissions the user gave the file
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        store.dirty = False
        logger.info("Saved payment file", extra={"path": str(self.path), "payments": len(store)})

    def ensure_exists(self) -> bool:
        """Create an empty payment file if there is none. Returns True if created."""
        if self.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(SKELETON, encoding="utf-8")
        logger.info("Created payment file", extra={"path": str(self.path)})
        return True


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
