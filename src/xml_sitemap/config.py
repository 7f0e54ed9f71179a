from __future__ import annotations

from pydantic import BaseModel, Field

SITEMAP_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"

class SitemapSettings(BaseModel):
    # Applied through Sitemap.set_host when non-empty
    host: str = ""
    xmlns: str = SITEMAP_XMLNS
    pretty_print: bool = True
    timeout: float = Field(default=20.0, gt=0)
    overwrite: bool = True
