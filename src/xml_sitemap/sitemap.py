from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import httpx

from xml_sitemap.codec import ATTRIBUTES_KEY, tree_to_xml, xml_to_tree
from xml_sitemap.config import SitemapSettings
from xml_sitemap.errors import DuplicateUrlError, InvalidTypeError
from xml_sitemap.fetch import fetch_sitemap
from xml_sitemap.logging import get_logger
from xml_sitemap.options.handlers import NOW, OptionHandler, lastmod_from_file
from xml_sitemap.options.registry import OptionRegistry
from xml_sitemap.paths import ensure_dir, file_exists
from xml_sitemap.urls.entries import UrlEntry, UrlInput, UrlSpec, UrlStore, parse_url_object, url_specs
from xml_sitemap.urls.files import FileLinkTable
from xml_sitemap.urls.host import HostResolver

log = get_logger(__name__)


def _assign(entry: UrlEntry, option: str, value: Any) -> None:
    if value is None:
        entry.options.pop(option, None)
    else:
        entry.options[option] = value


class Sitemap:
    """An editable sitemaps.org ``urlset``.

    Every instance owns its option registry, url entries, file links and
    host, so separate sitemaps never share state. Mutating methods return
    the sitemap for chaining::

        sitemap = (
            Sitemap()
            .set_host("http://domain.com/")
            .add("/about", {"changefreq": "monthly", "priority": 0.5})
            .add({"url": "/blog", "file": "site/blog/index.html"})
        )
        Path("sitemap.xml").write_text(sitemap.xml)

    Url arguments may be relative; they are resolved against the host before
    use. Invalid option values raise, while operations on urls that are not
    in the sitemap (``update``, ``link_file``, ``remove``,
    ``set_option_value`` ...) only log a warning.
    """

    def __init__(self, xml: Optional[bytes | str] = None, settings: Optional[SitemapSettings] = None):
        self.settings = settings or SitemapSettings()
        self._xmlns = self.settings.xmlns
        self._registry = OptionRegistry()
        self._resolver = HostResolver()
        self._store = UrlStore(self._registry, self._resolver)
        self._files = FileLinkTable(self._resolver)
        if xml is not None:
            self._load(xml)
        if self.settings.host:
            self.set_host(self.settings.host)

    @classmethod
    def from_file(cls, path: Path | str, settings: Optional[SitemapSettings] = None) -> "Sitemap":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        return cls(p.read_bytes(), settings)

    @classmethod
    def from_url(
        cls,
        url: str,
        settings: Optional[SitemapSettings] = None,
        client: Optional[httpx.Client] = None,
    ) -> "Sitemap":
        settings = settings or SitemapSettings()
        return cls(fetch_sitemap(url, timeout=settings.timeout, client=client), settings)

    def _load(self, xml: bytes | str) -> None:
        tree = xml_to_tree(xml)
        urlset = tree["urlset"]
        self._xmlns = urlset[ATTRIBUTES_KEY]["xmlns"]
        nodes = urlset.get("url", [])
        for node in nodes:
            for name in node:
                if name != "loc" and name not in self._registry:
                    log.debug("Registering option %s found in loaded sitemap", name)
                    self._registry.add(name)
        self._store.load(nodes)

    # ---- Views ----------------------------------------------------------------

    @property
    def host(self) -> str:
        return self._resolver.host

    @property
    def urls(self) -> List[str]:
        return self._store.urls

    @property
    def files(self) -> Dict[str, str]:
        return self._files.as_dict()

    @property
    def url_options(self) -> List[str]:
        return self._registry.names

    @property
    def option_handlers(self) -> Dict[str, OptionHandler]:
        return self._registry.handlers

    @property
    def tree(self) -> Dict[str, Any]:
        urlset: Dict[str, Any] = {ATTRIBUTES_KEY: {"xmlns": self._xmlns}}
        if len(self._store):
            urlset["url"] = [entry.to_dict() for entry in self._store]
        return {"urlset": urlset}

    @property
    def xml(self) -> str:
        return tree_to_xml(self.tree, pretty_print=self.settings.pretty_print)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self._store.has_url(url)

    def __iter__(self) -> Iterator[UrlEntry]:
        return iter(self._store)

    def __repr__(self) -> str:
        return f"Sitemap(urls={len(self)}, host={self.host!r})"

    # ---- Options --------------------------------------------------------------

    def add_option(self, name: str, handler: Optional[OptionHandler] = None, overwrite: bool = False) -> "Sitemap":
        self._registry.add(name, handler, overwrite)
        return self

    def remove_option(self, name: str) -> "Sitemap":
        """Unregister ``name`` and strip it from every url. Unknown names are ignored."""
        if self._registry.remove(name):
            stripped = self._store.strip_option(name)
            log.debug("Removed option %s from %d url(s)", name, stripped)
        return self

    def normalize_option(self, name: str, value: Any) -> Any:
        return self._registry.normalize(name, value)

    def get_option_value(self, url: str, option: str) -> Any:
        entry = self._store.get(url)
        self._registry.handler(option)
        return entry.get(option)

    def set_option_value(self, url: str, option: str, value: Any) -> "Sitemap":
        """Set one option on a url; ``None`` clears it and ``file`` links a file."""
        if option == "file":
            return self.link_file(url, value)
        value = self._registry.normalize(option, value)
        if not self._store.has_url(url):
            log.warning("%s not in sitemap, can't update its %s.", url, option)
            return self
        _assign(self._store.get(url), option, value)
        return self

    def set_option_values(self, url: str | Mapping, options: Optional[Mapping] = None) -> "Sitemap":
        if isinstance(url, Mapping):
            url, options = parse_url_object(url)
        elif options is None:
            return self
        entry = self._store.get(url)
        options = dict(options)
        file_path = options.pop("file", None)
        normalized = {name: self._registry.normalize(name, value) for name, value in options.items()}
        if file_path is not None and not file_exists(file_path):
            raise FileNotFoundError(file_path)
        for name, value in normalized.items():
            _assign(entry, name, value)
        if file_path is not None:
            self.link_file(entry.loc, file_path)
        return self

    # ---- Urls -----------------------------------------------------------------

    def set_host(self, url: str | Mapping, options: Optional[Mapping] = None) -> "Sitemap":
        """Make ``url`` the base for relative urls and add it (or update it) as an entry."""
        if isinstance(url, Mapping):
            url, options = parse_url_object(url)
        elif not isinstance(url, str):
            raise InvalidTypeError(f"Host must be a string or url object, found {type(url).__name__}.")
        host = self._resolver.set(url)
        log.debug("Host set to %s", host)
        return self.add(host, options)

    def has_url(self, url: str) -> bool:
        return self._store.has_url(url)

    def add(self, url: UrlInput, options: Optional[Mapping] = None) -> "Sitemap":
        """Add a url string, a url object, or a list of either.

        Options must be registered (see :meth:`add_option`); a ``file`` option
        links that file and takes lastmod from it.
        """
        for spec in url_specs(url, options):
            self._add_one(spec)
        return self

    add_url = add
    add_urls = add

    def _add_one(self, spec: UrlSpec) -> None:
        url = self._store.resolve(spec.url)
        options = dict(spec.options)
        if self._store.has_url(url):
            if self._resolver.is_host(url):
                self.set_option_values(url, options)
                return
            raise DuplicateUrlError(url)
        file_path = options.pop("file", None)
        if file_path is not None and not file_exists(file_path):
            raise FileNotFoundError(file_path)
        self._store.append(self._store.build_entry(url, options))
        if file_path is not None:
            self.link_file(url, file_path)

    def remove(self, url: str) -> "Sitemap":
        if not self._store.has_url(url):
            log.warning("%s is not in sitemap.", url)
            return self
        entry = self._store.pop(url)
        if self._files.unlink(entry.loc) is not None:
            log.debug("Dropped file link for removed url %s", entry.loc)
        return self

    remove_url = remove

    def get_url_node(self, url: str) -> UrlEntry:
        return self._store.get(url)

    def build_entry(self, location: str, options: Optional[Mapping] = None) -> UrlEntry:
        return self._store.build_entry(location, options)

    # ---- Files & lastmod ------------------------------------------------------

    def link_file(self, url: str, path: Path | str) -> "Sitemap":
        """Tie ``url``'s lastmod to ``path``'s modification time and sync it now."""
        if not self._store.has_url(url):
            log.warning("%s not in sitemap, can't link file.", url)
            return self
        if not file_exists(path):
            raise FileNotFoundError(path)
        linked = self._files.link(url, path)
        log.debug("Linked %s -> %s", linked, path)
        return self.update(linked)

    def unlink_file(self, url: str) -> "Sitemap":
        """Forget ``url``'s linked file. Its current lastmod is kept."""
        self._files.unlink(url)
        return self

    def _lastmod_for(self, url: str, date: Any = None) -> Any:
        linked = self._files.get(url)
        if linked is not None:
            date = lastmod_from_file(linked)
        if date is None:
            date = NOW
        return self._registry.normalize("lastmod", date)

    def update(self, url: str, date: Any = None) -> "Sitemap":
        """Set ``url``'s lastmod.

        A linked file always wins over ``date``. Otherwise ``None`` and
        ``"now"`` mean today, dates are formatted and other strings are
        stored as given.
        """
        if not self._store.has_url(url):
            log.warning("%s not in sitemap, can't update lastmod.", url)
            return self
        _assign(self._store.get(url), "lastmod", self._lastmod_for(url, date))
        return self

    update_lastmod = update

    def update_all(self, default: Any = None) -> "Sitemap":
        """Refresh linked urls from their files; with ``default``, set every other url to it too.

        Nothing changes if any linked file is missing or ``default`` is invalid.
        """
        pending = [
            (entry, self._lastmod_for(entry.loc, default))
            for entry in self._store
            if default is not None or entry.loc in self._files
        ]
        for entry, value in pending:
            _assign(entry, "lastmod", value)
        return self

    def update_from_file(self, url: str, path: Path | str) -> "Sitemap":
        """Set lastmod from ``path`` once, without linking it."""
        if not self._store.has_url(url):
            log.warning("%s not in sitemap, can't update lastmod from file.", url)
            return self
        return self.update(url, lastmod_from_file(path))

    # ---- Output ---------------------------------------------------------------

    def write(self, path: Path | str, overwrite: Optional[bool] = None) -> Path:
        dst = Path(path)
        if overwrite is None:
            overwrite = self.settings.overwrite
        if dst.exists() and not overwrite:
            raise FileExistsError(dst)
        ensure_dir(dst.parent)
        dst.write_text(self.xml + "\n", encoding="utf-8")
        log.info("Wrote sitemap (%d urls) -> %s", len(self), dst)
        return dst
