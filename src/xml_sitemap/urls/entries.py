from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import singledispatch
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from xml_sitemap.errors import (
    DuplicateUrlError,
    InvalidTypeError,
    MissingLocationError,
    NotFoundError,
)
from xml_sitemap.options.registry import OptionRegistry
from xml_sitemap.urls.host import HostResolver

UrlInput = Union[str, Mapping, List[Any], Tuple[Any, ...]]


@dataclass
class UrlEntry:
    """One ``<url>`` of the sitemap: its location plus the options set on it."""
    loc: str
    options: Dict[str, Any] = field(default_factory=dict)

    def get(self, option: str) -> Any:
        return self.options.get(option)

    def to_dict(self) -> Dict[str, Any]:
        return {"loc": self.loc, **self.options}


@dataclass
class UrlSpec:
    """A single url reference with the options to apply to it."""
    url: str
    options: Dict[str, Any] = field(default_factory=dict)


def parse_url_object(url_object: Any) -> Tuple[str, Dict[str, Any]]:
    """Split an entry-like mapping into its url and its options.

    ``url`` takes priority over ``loc``. The caller's mapping is not modified.
    """
    if not isinstance(url_object, Mapping):
        raise InvalidTypeError(f"Expected a url object mapping, found {type(url_object).__name__}.")
    options = dict(url_object)
    if isinstance(options.get("url"), str):
        url = options.pop("url")
        options.pop("loc", None)
    elif isinstance(options.get("loc"), str):
        url = options.pop("loc")
    else:
        raise MissingLocationError("Url not found in url object. Does it have a `loc` or `url`?")
    return url, options


@singledispatch
def url_specs(value: Any, options: Optional[Mapping] = None) -> List[UrlSpec]:
    """Flatten any accepted ``add`` argument into an ordered list of :class:`UrlSpec`."""
    raise InvalidTypeError(f"Can't add a url from {type(value).__name__}.")


@url_specs.register
def _(value: str, options: Optional[Mapping] = None) -> List[UrlSpec]:
    if options is not None and not isinstance(options, Mapping):
        raise InvalidTypeError(f"Options must be a mapping, found {type(options).__name__}.")
    return [UrlSpec(value, dict(options or {}))]


@url_specs.register
def _(value: Mapping, options: Optional[Mapping] = None) -> List[UrlSpec]:
    url, inline = parse_url_object(value)
    return [UrlSpec(url, inline)]


@url_specs.register(list)
@url_specs.register(tuple)
def _(value: Any, options: Optional[Mapping] = None) -> List[UrlSpec]:
    specs: List[UrlSpec] = []
    for item in value:
        if isinstance(item, (list, tuple)):
            raise InvalidTypeError("Nested url sequences are not supported.")
        specs.extend(url_specs(item))
    return specs


class UrlStore:
    """Ordered urls and their entries, kept index-aligned.

    ``urls[i]`` is always ``entries[i].loc``. Every url argument is resolved
    through the host resolver before use.
    """

    def __init__(self, registry: OptionRegistry, resolver: HostResolver):
        self._registry = registry
        self._resolver = resolver
        self._urls: List[str] = []
        self._entries: List[UrlEntry] = []

    @property
    def urls(self) -> List[str]:
        return list(self._urls)

    @property
    def entries(self) -> List[UrlEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[UrlEntry]:
        return iter(list(self._entries))

    def resolve(self, ref: str) -> str:
        return self._resolver.resolve(ref)

    def has_url(self, ref: str) -> bool:
        return self.resolve(ref) in self._urls

    def index(self, ref: str) -> int:
        url = self.resolve(ref)
        try:
            return self._urls.index(url)
        except ValueError:
            raise NotFoundError(url) from None

    def get(self, ref: str) -> UrlEntry:
        return self._entries[self.index(ref)]

    def build_entry(self, location: str, options: Optional[Mapping] = None) -> UrlEntry:
        if not isinstance(location, str):
            raise InvalidTypeError("Expected url to be a string.")
        normalized: Dict[str, Any] = {}
        for name, value in (options or {}).items():
            value = self._registry.normalize(name, value)
            if value is not None:
                normalized[name] = value
        return UrlEntry(location, normalized)

    def append(self, entry: UrlEntry) -> UrlEntry:
        if entry.loc in self._urls:
            raise DuplicateUrlError(entry.loc)
        self._urls.append(entry.loc)
        self._entries.append(entry)
        return entry

    def pop(self, ref: str) -> UrlEntry:
        index = self.index(ref)
        del self._urls[index]
        return self._entries.pop(index)

    def strip_option(self, name: str) -> int:
        stripped = 0
        for entry in self._entries:
            if entry.options.pop(name, None) is not None:
                stripped += 1
        return stripped

    def load(self, nodes: List[Mapping]) -> None:
        """Replace the contents with already-serialized url nodes, verbatim."""
        urls: List[str] = []
        entries: List[UrlEntry] = []
        for node in nodes:
            options = dict(node)
            loc = options.pop("loc", None)
            if not isinstance(loc, str):
                raise MissingLocationError("Url node has no `loc`.")
            if loc in urls:
                raise DuplicateUrlError(loc)
            urls.append(loc)
            entries.append(UrlEntry(loc, options))
        self._urls = urls
        self._entries = entries
