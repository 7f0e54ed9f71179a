from __future__ import annotations

from .config import SITEMAP_XMLNS, SitemapSettings
from .errors import (
    SitemapError,
    InvalidTypeError,
    InvalidValueError,
    UnknownOptionError,
    MissingLocationError,
    SitemapParseError,
    DuplicateOptionError,
    DuplicateUrlError,
    NotFoundError,
)
from .options import (
    CHANGEFREQ_VALUES,
    OptionRegistry,
    w3_date,
    handle_lastmod,
    handle_changefreq,
    handle_priority,
    lastmod_from_file,
)
from .urls import HostResolver, UrlEntry, UrlStore, FileLinkTable, parse_url_object
from .sitemap import Sitemap
from .fetch import fetch_sitemap

__all__ = [
    "SITEMAP_XMLNS",
    "SitemapSettings",
    "SitemapError",
    "InvalidTypeError",
    "InvalidValueError",
    "UnknownOptionError",
    "MissingLocationError",
    "SitemapParseError",
    "DuplicateOptionError",
    "DuplicateUrlError",
    "NotFoundError",
    "CHANGEFREQ_VALUES",
    "OptionRegistry",
    "w3_date",
    "handle_lastmod",
    "handle_changefreq",
    "handle_priority",
    "lastmod_from_file",
    "HostResolver",
    "UrlEntry",
    "UrlStore",
    "FileLinkTable",
    "parse_url_object",
    "Sitemap",
    "fetch_sitemap",
]
