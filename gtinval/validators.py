# gtinval/validators.py
from __future__ import annotations

from typing import Callable, Literal, Sequence

from gtinval.errors import BadCharacter, BadChecksum, TooLong

Variant = Literal[8, 12, 13, 14]
VARIANTS: tuple[int, ...] = (8, 12, 13, 14)

_DIGITS = frozenset("0123456789")


def is_ascii_numeric(code: str) -> bool:
    """'0'-'9' only; str.isdigit() would also accept other scripts."""
    return all(ch in _DIGITS for ch in code)


def zero_pad(code: str, size: int) -> str:
    if len(code) >= size:
        return code
    return "0" * (size - len(code)) + code


def compute_check_digit(digits: Sequence[int]) -> int:
    total = 0
    for i, d in enumerate(reversed(digits)):  # right→left
        total += d * (3 if i % 2 == 0 else 1)  # 3,1,3,1...
    return (10 - (total % 10)) % 10


def _check(code: str, length: int) -> bool:
    if len(code) != length or not is_ascii_numeric(code):
        return False
    payload = [int(ch) for ch in code[:-1]]
    return compute_check_digit(payload) == int(code[-1])


def _fix(code: str, length: int) -> str:
    fixed = code.strip()
    if len(fixed) > length:
        raise TooLong(code, length, len(fixed))
    fixed = zero_pad(fixed, length)
    if len(fixed) != length:
        raise TooLong(code, length, len(fixed))

    for pos, ch in enumerate(fixed):
        if ch not in _DIGITS:
            raise BadCharacter(code, length, ch, pos)

    # the check digit is verified, never rewritten
    expected = compute_check_digit([int(ch) for ch in fixed[:-1]])
    found = int(fixed[-1])
    if expected != found:
        raise BadChecksum(code, length, expected, found)
    return fixed


def check8(code: str) -> bool:
    """True if `code` is exactly 8 ASCII digits with a correct check digit (GTIN-8/EAN-8)."""
    return _check(code, 8)


def check12(code: str) -> bool:
    """True if `code` is a valid GTIN-12 (UPC-A).

    >>> check12("036000291452")
    True
    >>> check12("36000291452")
    False
    """
    return _check(code, 12)


def check13(code: str) -> bool:
    """True if `code` is a valid GTIN-13 (EAN-13)."""
    return _check(code, 13)


def check14(code: str) -> bool:
    """True if `code` is a valid GTIN-14."""
    return _check(code, 14)


def fix8(code: str) -> str:
    """Trim and zero-pad `code` to a GTIN-8; raises FixError if it still doesn't validate."""
    return _fix(code, 8)


def fix12(code: str) -> str:
    """
    Normalize a GTIN-12 (UPC-A).

    Strips surrounding whitespace and restores leading zeros lost by software
    that stored the code as an integer. The check digit is never altered.

    >>> fix12(" 87248795257 ")
    '087248795257'

    Raises TooLong, BadCharacter or BadChecksum (all FixError).
    """
    return _fix(code, 12)


def fix13(code: str) -> str:
    """
    Normalize a GTIN-13 (EAN-13). Same policy as fix12, target length 13.
    """
    return _fix(code, 13)


def fix14(code: str) -> str:
    """Normalize a GTIN-14; see fix12 for the correction policy."""
    return _fix(code, 14)


CHECKERS: dict[int, Callable[[str], bool]] = {
    8: check8,
    12: check12,
    13: check13,
    14: check14,
}
FIXERS: dict[int, Callable[[str], str]] = {
    8: fix8,
    12: fix12,
    13: fix13,
    14: fix14,
}
