# gtinval/frames.py
from __future__ import annotations

import pandas as pd

from gtinval.errors import FixError
from gtinval.validators import CHECKERS, FIXERS


def _as_text(v: object) -> str:
    # codes read as numbers lose their leading zeros; fix* restores them
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def check_column(df: pd.DataFrame, column: str = "gtin", variant: int = 13) -> pd.Series:
    """Boolean mask of rows whose `column` is already a valid code (no correction)."""
    checker = CHECKERS[variant]
    return df[column].map(lambda v: False if pd.isna(v) else checker(_as_text(v))).astype(bool)


def fix_column(
    df: pd.DataFrame,
    column: str = "gtin",
    variant: int = 13,
) -> tuple[pd.DataFrame, dict]:
    """
    Returns (fixed_df, errors_dict).
    fixed_df holds the rows that could be normalized, with `column` replaced
    by the normalized code. errors_dict maps the 0-based position of each
    dropped row to the error kind ("TooLong", "BadCharacter", "BadChecksum"
    or "Missing"); positions stay unambiguous when index labels repeat.
    """
    fixer = FIXERS[variant]
    ok_positions: list[int] = []
    fixed: list[str] = []
    errors: dict[int, str] = {}

    for pos, v in enumerate(df[column]):
        if pd.isna(v):
            errors[pos] = "Missing"
            continue
        try:
            fixed.append(fixer(_as_text(v)))
        except FixError as e:
            errors[pos] = e.kind
        else:
            ok_positions.append(pos)

    res = df.iloc[ok_positions].copy()
    res[column] = fixed  # plain list: no alignment on index labels
    return res, errors
