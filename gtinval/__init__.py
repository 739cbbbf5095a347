from gtinval.errors import BadCharacter, BadChecksum, FixError, TooLong
from gtinval.validators import (
    check8,
    check12,
    check13,
    check14,
    compute_check_digit,
    fix8,
    fix12,
    fix13,
    fix14,
)

__all__ = [
    "BadCharacter",
    "BadChecksum",
    "FixError",
    "TooLong",
    "check8",
    "check12",
    "check13",
    "check14",
    "compute_check_digit",
    "fix8",
    "fix12",
    "fix13",
    "fix14",
]
