from __future__ import annotations

import csv
import io
from pathlib import Path

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from gtinval.config import Settings, load_settings, save_settings
from gtinval.frames import fix_column
from gtinval.models import CodeEntry, describe_error
from gtinval.validators import VARIANTS

# ---------- Paths / constants ----------
DATA_DIR = Path("data")
CFG_PATH = DATA_DIR / "config.json"
VARIANT_LABELS = {8: "GTIN-8 (EAN-8)", 12: "GTIN-12 (UPC-A)", 13: "GTIN-13 (EAN-13)", 14: "GTIN-14"}


# ---------- Helpers ----------
def dataframe_to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    buf.write("sep=,\n")  # <-- Excel hint to use comma
    df.to_csv(buf, index=False, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    return buf.getvalue().encode("utf-8-sig")  # BOM for Excel


st.set_page_config(page_title="GTIN check", layout="wide")
st.title("GTIN check")

# ---------- Settings ----------
if "cfg" not in st.session_state:
    st.session_state.cfg = load_settings(CFG_PATH)

cfg: Settings = st.session_state.cfg

with st.sidebar.expander("Settings", expanded=True):
    variant = st.selectbox(
        "Code type",
        VARIANTS,
        index=VARIANTS.index(cfg.variant),
        format_func=VARIANT_LABELS.get,
    )
    column = st.text_input("CSV column", cfg.column)
    keep_invalid = st.checkbox("Show invalid rows", value=cfg.keep_invalid)

    new_cfg = Settings(variant=variant, column=column.strip() or "gtin", keep_invalid=keep_invalid)
    if new_cfg != cfg:
        st.session_state.cfg = cfg = new_cfg
        save_settings(CFG_PATH, cfg)

# ---------- Single code ----------
st.subheader(f"Check a {VARIANT_LABELS[cfg.variant]}")
raw = st.text_input("Code")

if st.button("Validate"):
    try:
        entry = CodeEntry(variant=cfg.variant, gtin=raw)
        if entry.gtin != raw:
            st.success(f"Valid after normalization: {entry.gtin}")
        else:
            st.success(f"Valid: {entry.gtin}")
    except ValidationError as ve:
        st.error("; ".join([describe_error(e) for e in ve.errors()]))

# ---------- CSV batch ----------
st.subheader("Check a CSV")
file = st.file_uploader(f"CSV with a '{cfg.column}' column", type=["csv"])
if file is not None:
    try:
        up = pd.read_csv(file, dtype=str, keep_default_na=False, na_values=[""])
    except (ValueError, pd.errors.ParserError) as e:
        st.error(f"Upload failed: {e}")
    else:
        if cfg.column not in up.columns:
            st.error(f"Missing column: {cfg.column}")
        else:
            fixed, errors = fix_column(up, column=cfg.column, variant=cfg.variant)
            st.success(f"{len(fixed)} valid rows, {len(errors)} invalid.")

            if errors:
                counts = pd.Series(errors).value_counts()
                st.warning("Dropped rows → " + ", ".join(f"{k}: {v}" for k, v in counts.items()))
                if cfg.keep_invalid:
                    bad = up.iloc[list(errors)].copy()
                    bad["error"] = list(errors.values())
                    st.dataframe(bad, use_container_width=True)

            st.dataframe(fixed, use_container_width=True)
            st.download_button(
                "Download normalized CSV",
                data=dataframe_to_csv_bytes(fixed),
                file_name="gtins.csv",
                mime="text/csv",
            )
