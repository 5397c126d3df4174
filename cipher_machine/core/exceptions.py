from typing import Any


class CipherMachineError(Exception):
    """Base exception for all cipher machine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherMachineError):
    """Raised when a cipher parameter is rejected before encryption."""

    reason: str = "validation_error"


class InvalidKeywordError(ValidationError):
    """Raised when a keyword is empty or contains non-alphabetic characters."""

    reason = "empty_or_non_alphabetic_keyword"

    def __init__(self, cipher_name: str, keyword: str):
        self.empty = not keyword
        if self.empty:
            message = f"{cipher_name} cipher requires a keyword. Please enter a keyword."
        else:
            message = "Keyword must contain only alphabetic characters."
        super().__init__(message, {"cipher": cipher_name, "empty": self.empty})


class InvalidShiftError(ValidationError):
    """Raised when a Caesar shift of zero is requested."""

    reason = "zero_shift"

    def __init__(self, shift: int):
        super().__init__(
            "Caesar cipher requires a shift value between 1 and 25. "
            "Please adjust the shift value.",
            {"shift": shift},
        )


class EngineError(CipherMachineError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
