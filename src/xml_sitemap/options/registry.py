from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List, Optional

from xml_sitemap.errors import (
    DuplicateOptionError,
    InvalidTypeError,
    InvalidValueError,
    UnknownOptionError,
)
from xml_sitemap.logging import get_logger
from xml_sitemap.options.handlers import (
    OptionHandler,
    handle_changefreq,
    handle_lastmod,
    handle_priority,
)

log = get_logger(__name__)

# Keys with a fixed meaning on entry-like mappings
RESERVED_NAMES = frozenset({"loc", "url", "file"})

# Options are written as unprefixed child elements of <url>
_ELEMENT_NAME = re.compile(r"[^\W\d][\w.-]*")


def default_handlers() -> Dict[str, Optional[OptionHandler]]:
    return {
        "lastmod": handle_lastmod,
        "changefreq": handle_changefreq,
        "priority": handle_priority,
    }


class OptionRegistry:
    """Ordered set of option names allowed on a url entry, each with an optional handler."""

    def __init__(self, handlers: Optional[Dict[str, Optional[OptionHandler]]] = None):
        self._handlers: Dict[str, Optional[OptionHandler]] = dict(
            default_handlers() if handlers is None else handlers
        )

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    @property
    def names(self) -> List[str]:
        return list(self._handlers)

    @property
    def handlers(self) -> Dict[str, OptionHandler]:
        return {name: h for name, h in self._handlers.items() if h is not None}

    def handler(self, name: str) -> Optional[OptionHandler]:
        if name not in self._handlers:
            raise UnknownOptionError(name, self.names)
        return self._handlers[name]

    def add(self, name: str, handler: Optional[OptionHandler] = None, overwrite: bool = False) -> None:
        if not isinstance(name, str):
            raise InvalidTypeError(f"Option name must be a string, found {type(name).__name__}.")
        if name in RESERVED_NAMES:
            raise InvalidValueError(f"{name!r} is reserved and can't be used as an option name.")
        if not _ELEMENT_NAME.fullmatch(name):
            raise InvalidValueError(f"{name!r} is not a valid XML element name.")
        if handler is not None and not callable(handler):
            raise InvalidTypeError(f"Handler for {name!r} must be callable.")
        if name in self._handlers:
            if not overwrite:
                raise DuplicateOptionError(name)
            if handler is not None:
                self._handlers[name] = handler
            log.debug("Overwrote option %s", name)
            return
        self._handlers[name] = handler
        log.debug("Added option %s", name)

    def remove(self, name: str) -> bool:
        """Drop ``name``; returns whether it was registered."""
        if name not in self._handlers:
            return False
        del self._handlers[name]
        return True

    def normalize(self, name: str, value: Any) -> Any:
        """Normalize ``value`` for ``name``; ``None`` means clear the field and skips validation."""
        if value is None:
            return None
        handler = self.handler(name)
        if handler is None:
            return value
        return handler(value)
