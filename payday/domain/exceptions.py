"""Domain-specific exceptions"""

from pathlib import Path


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PaymentNotFoundError(DomainException):
    """No payment with the requested name exists in the store"""

    def __init__(self, name: str):
        super().__init__(f"{name} not found")
        self.name = name


class DuplicatePaymentError(DomainException):
    """More than one payment shares the same name"""

    def __init__(self, name: str):
        super().__init__(f"duplicate payment name: {name}")
        self.name = name


class ConfigError(DomainException):
    """Payment file could not be used"""

    pass


class ConfigNotFoundError(ConfigError):
    """Payment file does not exist"""

    def __init__(self, path: Path):
        super().__init__(f"no payment file found at {path} (run `payday edit` to create one)")
        self.path = path


class ConfigUnreadableError(ConfigError):
    """Payment file exists but is malformed or cannot be read"""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"cannot read payment file {path}: {reason}")
        self.path = path
        self.reason = reason


class EditorError(DomainException):
    """External editor could not be launched or failed"""

    pass


class InvalidInputError(DomainException):
    """Command-line input failed validation"""

    pass


class InvalidAmountError(InvalidInputError):
    """Amount is not a decimal or is negative"""

    pass


class InvalidDayError(InvalidInputError):
    """Day of month is not an integer in range"""

    pass
