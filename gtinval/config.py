from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from gtinval.validators import Variant


class Settings(BaseModel):
    variant: Variant = 13
    column: str = "gtin"
    keep_invalid: bool = False


def load_settings(path: Path) -> Settings:
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            known = {k: data[k] for k in data if k in Settings.model_fields}
            return Settings(**known)
        except (OSError, ValueError, TypeError, ValidationError):
            pass
    return Settings()


def save_settings(path: Path, settings: Settings) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(settings.model_dump(), indent=2, sort_keys=True), encoding="utf-8"
        )
    except OSError:
        # best-effort; don't crash the UI on FS errors
        pass
