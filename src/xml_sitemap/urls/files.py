from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Optional

from xml_sitemap.urls.host import HostResolver


class FileLinkTable:
    """Canonical url -> path of the file whose modification time drives its lastmod."""

    def __init__(self, resolver: HostResolver):
        self._resolver = resolver
        self._links: Dict[str, Path] = {}

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, str) and self._resolver.resolve(ref) in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def link(self, ref: str, path: Path | str) -> str:
        url = self._resolver.resolve(ref)
        self._links[url] = Path(path)
        return url

    def unlink(self, ref: str) -> Optional[Path]:
        return self._links.pop(self._resolver.resolve(ref), None)

    def get(self, ref: str) -> Optional[Path]:
        return self._links.get(self._resolver.resolve(ref))

    def as_dict(self) -> Dict[str, str]:
        return {url: str(path) for url, path in self._links.items()}
