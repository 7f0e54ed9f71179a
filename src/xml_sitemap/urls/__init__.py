from __future__ import annotations

from .host import HostResolver
from .entries import UrlEntry, UrlSpec, UrlStore, parse_url_object, url_specs
from .files import FileLinkTable

__all__ = [
    "HostResolver",
    "UrlEntry",
    "UrlSpec",
    "UrlStore",
    "parse_url_object",
    "url_specs",
    "FileLinkTable",
]
