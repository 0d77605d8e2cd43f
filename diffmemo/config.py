from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

__all__ = [
    "ENV_VARS",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
]

ENV_VARS = (
    "DIFFMEMO_EXTRA_CLASS",
    "DIFFMEMO_MISSING_CLASS",
    "DIFFMEMO_LINE_BREAK",
    "DIFFMEMO_LOG_LEVEL",
)

_CLASS_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Markup and logging options, passed explicitly to the renderer."""

    extra_class: str = "extra"
    missing_class: str = "missing"
    line_break: str = "<br>"
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


DEFAULT_SETTINGS = Settings()


def _get_str(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_class_name(name: str, default: str) -> str:
    v = _get_str(name, default)
    if not _CLASS_NAME_RE.fullmatch(v):
        raise RuntimeError(f"Invalid CSS class name for {name}: {v}")
    return v


def _get_line_break(name: str, default: str) -> str:
    # Escaped user text never holds a raw "<", so a tag cannot collide with it
    v = _get_str(name, default)
    if not (v.startswith("<") and v.endswith(">")):
        raise RuntimeError(f"Invalid line break tag for {name}: {v}")
    return v


def _get_log_level(name: str, default: str) -> str:
    v = _get_str(name, default).upper()
    if v not in _LOG_LEVELS:
        raise RuntimeError(f"Invalid log level for {name}: {v}")
    return v


def load_settings() -> Settings:
    load_dotenv()

    extra_class = _get_class_name("DIFFMEMO_EXTRA_CLASS", DEFAULT_SETTINGS.extra_class)
    missing_class = _get_class_name(
        "DIFFMEMO_MISSING_CLASS", DEFAULT_SETTINGS.missing_class
    )
    if extra_class == missing_class:
        raise RuntimeError(
            f"DIFFMEMO_EXTRA_CLASS and DIFFMEMO_MISSING_CLASS must differ: {extra_class}"
        )
    line_break = _get_line_break("DIFFMEMO_LINE_BREAK", DEFAULT_SETTINGS.line_break)
    log_level = _get_log_level("DIFFMEMO_LOG_LEVEL", DEFAULT_SETTINGS.log_level)

    return Settings(
        extra_class=extra_class,
        missing_class=missing_class,
        line_break=line_break,
        log_level=log_level,
    )
