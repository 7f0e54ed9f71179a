from __future__ import annotations

from .handlers import (
    CHANGEFREQ_VALUES,
    OptionHandler,
    w3_date,
    today,
    handle_lastmod,
    handle_changefreq,
    handle_priority,
    lastmod_from_file,
)
from .registry import OptionRegistry, RESERVED_NAMES, default_handlers

__all__ = [
    "CHANGEFREQ_VALUES",
    "OptionHandler",
    "w3_date",
    "today",
    "handle_lastmod",
    "handle_changefreq",
    "handle_priority",
    "lastmod_from_file",
    "OptionRegistry",
    "RESERVED_NAMES",
    "default_handlers",
]
