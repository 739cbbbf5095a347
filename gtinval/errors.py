# gtinval/errors.py
from __future__ import annotations


class FixError(ValueError):
    """Base class for codes that cannot be normalized."""

    def __init__(self, code: str, length: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.length = length

    @property
    def kind(self) -> str:
        return type(self).__name__


class TooLong(FixError):
    def __init__(self, code: str, length: int, size: int) -> None:
        super().__init__(code, length, f"GTIN-{length} too long: {size} characters after trimming")
        self.size = size


class BadCharacter(FixError):
    def __init__(self, code: str, length: int, char: str, position: int) -> None:
        super().__init__(
            code, length, f"GTIN-{length} has non-digit {char!r} at position {position}"
        )
        self.char = char
        self.position = position


class BadChecksum(FixError):
    def __init__(self, code: str, length: int, expected: int, found: int) -> None:
        super().__init__(
            code, length, f"GTIN-{length} check digit is {found}, expected {expected}"
        )
        self.expected = expected
        self.found = found
