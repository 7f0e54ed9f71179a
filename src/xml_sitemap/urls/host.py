from __future__ import annotations

from urllib.parse import urljoin, urlsplit, urlunsplit


def _with_root_path(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme and parts.netloc and not parts.path:
        return urlunsplit(parts._replace(path="/"))
    return url


class HostResolver:
    """Resolves url references against the sitemap's host.

    The resolved string is the canonical key used by the entry store and
    the file-link table, so ``/magic``, ``magic`` and
    ``http://domain.com/magic`` all land on the same entry once the host
    is ``http://domain.com/``. Changing the host only affects later
    resolutions.
    """

    def __init__(self, host: str = ""):
        self.host = ""
        if host:
            self.set(host)

    def set(self, url: str) -> str:
        self.host = _with_root_path(urljoin(url, ""))
        return self.host

    def resolve(self, ref: str) -> str:
        if not self.host:
            return _with_root_path(ref)
        return _with_root_path(urljoin(self.host, ref))

    def is_host(self, url: str) -> bool:
        return bool(self.host) and url == self.host
