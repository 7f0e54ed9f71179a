from __future__ import annotations

from typing import Optional

import httpx

from xml_sitemap.logging import get_logger

log = get_logger(__name__)


def fetch_sitemap(url: str, timeout: float = 20.0, client: Optional[httpx.Client] = None) -> str:
    """Download the sitemap published at ``url`` and return its XML text.

    Redirects are followed; a non-2xx answer raises ``httpx.HTTPStatusError``.
    Pass ``client`` to reuse a configured ``httpx.Client``.
    """
    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as c:
            return fetch_sitemap(url, timeout=timeout, client=c)
    r = client.get(url)
    r.raise_for_status()
    log.debug("Fetched %s (%d bytes)", r.url, len(r.content))
    return r.text
