"""Tests for the Sitemap facade: construction, option values and output."""

import pytest

from xml_sitemap import Sitemap, SitemapSettings
from xml_sitemap.errors import InvalidValueError, NotFoundError, UnknownOptionError

EMPTY = '<?xml version="1.0" encoding="UTF-8"?>\n<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"/>'
URLS = ["http://domain.com/", "http://domain.com/another-page", "http://domain.com/magic"]


class TestEmpty:
    def test_tree(self, sitemap):
        assert sitemap.tree == {"urlset": {"$": {"xmlns": "http://www.sitemaps.org/schemas/sitemap/0.9"}}}

    def test_views(self, sitemap):
        assert sitemap.urls == []
        assert sitemap.files == {}
        assert sitemap.host == ""
        assert sitemap.url_options == ["lastmod", "changefreq", "priority"]
        assert len(sitemap) == 0

    def test_xml(self, sitemap):
        assert sitemap.xml == EMPTY


class TestFromXml:
    def test_loads_urls(self, sitemap_xml):
        assert Sitemap(sitemap_xml).urls == URLS

    def test_round_trip(self, sitemap_xml):
        assert "".join(Sitemap(sitemap_xml).xml.split()) == "".join(sitemap_xml.split())

    def test_values_are_not_revalidated(self):
        xml = (
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            "<url><loc>http://domain.com/</loc><priority>7</priority></url></urlset>"
        )
        sitemap = Sitemap(xml)
        assert sitemap.get_option_value("http://domain.com/", "priority") == "7"

    def test_unknown_fields_become_options(self):
        xml = (
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            "<url><loc>http://domain.com/</loc><foo>bar</foo></url></urlset>"
        )
        sitemap = Sitemap(xml)
        assert sitemap.url_options[-1] == "foo"
        assert sitemap.get_option_value("http://domain.com/", "foo") == "bar"
        sitemap.remove_option("foo")
        assert "<foo>" not in sitemap.xml

    def test_can_be_edited(self, sitemap_xml):
        sitemap = Sitemap(sitemap_xml, SitemapSettings(host="http://domain.com/"))
        sitemap.remove("another-page").update("/magic", "2020-02-02")
        assert sitemap.urls == ["http://domain.com/", "http://domain.com/magic"]
        assert sitemap.get_url_node("magic").to_dict() == {
            "loc": "http://domain.com/magic",
            "priority": "0.9",
            "lastmod": "2020-02-02",
        }

    def test_from_file(self, tmp_path, sitemap_xml):
        path = tmp_path / "sitemap.xml"
        path.write_text(sitemap_xml, encoding="utf-8")
        assert Sitemap.from_file(path).urls == URLS

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Sitemap.from_file(tmp_path / "sitemap.xml")


class TestSettings:
    def test_host_from_settings(self):
        sitemap = Sitemap(settings=SitemapSettings(host="http://domain.com"))
        assert sitemap.host == "http://domain.com/"
        assert sitemap.urls == ["http://domain.com/"]

    def test_compact_output(self, url):
        sitemap = Sitemap(settings=SitemapSettings(pretty_print=False)).add(url)
        assert "\n" not in sitemap.xml.split("\n", 1)[1]

    def test_custom_xmlns(self):
        sitemap = Sitemap(settings=SitemapSettings(xmlns="urn:example"))
        assert 'xmlns="urn:example"' in sitemap.xml

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            SitemapSettings(timeout=0)


class TestOptionValues:
    def test_set_option_value(self, sitemap, url):
        sitemap.add(url).set_option_value(url, "priority", 0.3)
        assert sitemap.get_option_value(url, "priority") == "0.3"
        with pytest.raises(UnknownOptionError):
            sitemap.set_option_value(url, "foo", "bar")

    def test_set_none_clears(self, sitemap, url):
        sitemap.add(url, {"priority": 0.3}).set_option_value(url, "priority", None)
        assert sitemap.get_option_value(url, "priority") is None
        assert sitemap.get_url_node(url).to_dict() == {"loc": url}

    def test_set_on_unknown_url_is_soft(self, sitemap):
        assert sitemap.set_option_value("http://notreal.com/", "priority", 0.3) is sitemap

    def test_set_invalid_value_on_unknown_url_raises(self, sitemap):
        with pytest.raises(InvalidValueError):
            sitemap.set_option_value("http://notreal.com/", "priority", 3)

    def test_set_option_values(self, sitemap, url):
        sitemap.add(url, {"lastmod": "1900-10-31", "priority": 0.7})
        assert sitemap.get_option_value(url, "lastmod") == "1900-10-31"
        assert sitemap.get_option_value(url, "priority") == "0.7"
        assert sitemap.get_option_value(url, "changefreq") is None

        sitemap.set_option_values(url, {"priority": 0.8, "changefreq": "weekly"})

        assert sitemap.get_option_value(url, "lastmod") == "1900-10-31"
        assert sitemap.get_option_value(url, "priority") == "0.8"
        assert sitemap.get_option_value(url, "changefreq") == "weekly"

    def test_set_option_values_is_all_or_nothing(self, sitemap, url):
        sitemap.add(url, {"priority": 0.7})
        with pytest.raises(InvalidValueError):
            sitemap.set_option_values(url, {"changefreq": "weekly", "priority": 2})
        assert sitemap.get_url_node(url).to_dict() == {"loc": url, "priority": "0.7"}

    def test_set_option_values_without_options(self, sitemap, url):
        sitemap.add({"loc": url, "priority": 0.8})
        assert sitemap.set_option_values(url).tree["urlset"]["url"][0] == {"loc": url, "priority": "0.8"}

    def test_set_option_values_url_object_relative(self, sitemap, url):
        sitemap.set_host(url).add(url + "magic")
        sitemap.set_option_values({"url": "/magic", "lastmod": "1900-10-31", "changefreq": "weekly"})
        assert sitemap.get_option_value(url + "magic", "lastmod") == "1900-10-31"
        assert sitemap.get_option_value(url + "magic", "changefreq") == "weekly"

    def test_set_option_values_unknown_url(self, sitemap):
        with pytest.raises(NotFoundError):
            sitemap.set_option_values("http://notreal.com/", {"priority": 0.1})

    def test_get_option_value_errors(self, sitemap, url):
        sitemap.add(url)
        with pytest.raises(NotFoundError):
            sitemap.get_option_value("http://notreal.com/", "lastmod")
        with pytest.raises(UnknownOptionError):
            sitemap.get_option_value(url, "foo")

    def test_get_option_value_relative(self, sitemap, url):
        sitemap.set_host(url).add({"url": url + "magic", "priority": 0.8})
        assert sitemap.get_option_value("magic", "priority") == "0.8"
        assert sitemap.get_option_value("/magic", "priority") == "0.8"

    def test_normalize_option(self, sitemap):
        assert sitemap.normalize_option("priority", 1) == "1"
        assert sitemap.normalize_option("foo", None) is None


class TestWrite:
    def test_write_and_reload(self, tmp_path, url):
        sitemap = Sitemap().add(url, {"changefreq": "daily"})
        dst = sitemap.write(tmp_path / "out" / "sitemap.xml")
        assert dst.read_text(encoding="utf-8").startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert Sitemap.from_file(dst).get_option_value(url, "changefreq") == "daily"

    def test_refuses_overwrite(self, tmp_path, sitemap):
        path = tmp_path / "sitemap.xml"
        path.write_text("keep", encoding="utf-8")
        with pytest.raises(FileExistsError):
            sitemap.write(path, overwrite=False)
        assert path.read_text(encoding="utf-8") == "keep"


def test_xml_output(sitemap, url):
    sitemap.add(url).add(url + "other", {"lastmod": "2012-12-21"})
    assert sitemap.xml == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        "  <url>\n"
        "    <loc>http://domain.com/</loc>\n"
        "  </url>\n"
        "  <url>\n"
        "    <loc>http://domain.com/other</loc>\n"
        "    <lastmod>2012-12-21</lastmod>\n"
        "  </url>\n"
        "</urlset>"
    )


def test_repr(sitemap):
    assert repr(sitemap.set_host("http://domain.com/")) == "Sitemap(urls=1, host='http://domain.com/')"
