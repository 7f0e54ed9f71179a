import os
from datetime import datetime

import pytest

from xml_sitemap import Sitemap

URL = "http://domain.com/"
FILE_DATE = datetime(2016, 1, 1, 12, 0, 0)


@pytest.fixture
def sitemap():
    return Sitemap()


@pytest.fixture
def url():
    return URL


@pytest.fixture
def html_file(tmp_path):
    """An HTML file last modified on 2016-01-01 (local time)."""
    path = tmp_path / "test.html"
    path.write_text("<html><body>hello</body></html>", encoding="utf-8")
    ts = FILE_DATE.timestamp()
    os.utime(path, (ts, ts))
    return path


@pytest.fixture
def sitemap_xml():
    return """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>http://domain.com/</loc>
    <lastmod>2012-12-21</lastmod>
  </url>
  <url>
    <loc>http://domain.com/another-page</loc>
    <lastmod>1999-10-31</lastmod>
    <changefreq>never</changefreq>
  </url>
  <url>
    <loc>http://domain.com/magic</loc>
    <priority>0.9</priority>
  </url>
</urlset>"""
