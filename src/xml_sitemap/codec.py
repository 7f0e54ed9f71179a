"""Conversion between sitemap XML text and the nested-mapping tree.

The tree has the shape::

    {"urlset": {"$": {"xmlns": "..."}, "url": [{"loc": "...", "lastmod": "..."}, ...]}}

``url`` is absent while the sitemap is empty.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from lxml import etree

from xml_sitemap.config import SITEMAP_XMLNS
from xml_sitemap.errors import MissingLocationError, SitemapParseError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
ATTRIBUTES_KEY = "$"


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        _, _, local = tag.partition("}")
        return local
    _, _, local = tag.rpartition(":")
    return local or tag


def _check_plain_field(el: etree._Element, namespace: str | None) -> None:
    # Fields are stored as name -> text, anything richer can't be written back
    name = _local_name(el.tag)
    if etree.QName(el).namespace != namespace:
        raise SitemapParseError(f"Unsupported extension element <{el.prefix or ''}{':' if el.prefix else ''}{name}> in <url>.")
    if el.attrib:
        raise SitemapParseError(f"Unsupported attributes on <{name}> in <url>.")
    if any(isinstance(c.tag, str) for c in el):
        raise SitemapParseError(f"Unsupported nested elements in <{name}> in <url>.")


def empty_tree(xmlns: str = SITEMAP_XMLNS) -> Dict[str, Any]:
    return {"urlset": {ATTRIBUTES_KEY: {"xmlns": xmlns}}}


def tree_to_xml(tree: Mapping[str, Any], pretty_print: bool = True) -> str:
    urlset = tree["urlset"]
    xmlns = urlset.get(ATTRIBUTES_KEY, {}).get("xmlns", SITEMAP_XMLNS)
    root = etree.Element(f"{{{xmlns}}}urlset", nsmap={None: xmlns})
    for node in urlset.get("url", []):
        url_el = etree.SubElement(root, f"{{{xmlns}}}url")
        # loc first, then fields in the order they were set
        etree.SubElement(url_el, f"{{{xmlns}}}loc").text = str(node["loc"])
        for name, value in node.items():
            if name == "loc":
                continue
            etree.SubElement(url_el, f"{{{xmlns}}}{name}").text = str(value)
    body = etree.tostring(root, encoding="unicode", pretty_print=pretty_print)
    return f"{XML_DECLARATION}\n{body.rstrip()}"


def xml_to_tree(xml_content: bytes | str) -> Dict[str, Any]:
    xml_bytes = xml_content.encode("utf-8") if isinstance(xml_content, str) else xml_content
    if not xml_bytes.strip():
        raise SitemapParseError("Sitemap XML content is empty")

    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
    try:
        root = etree.fromstring(xml_bytes, parser=parser)
    except etree.XMLSyntaxError as e:
        raise SitemapParseError(f"Invalid sitemap XML: {e}") from e

    if _local_name(root.tag) != "urlset":
        raise SitemapParseError(f"Expected a <urlset> root element, found <{_local_name(root.tag)}>")

    namespace = etree.QName(root).namespace
    xmlns = namespace or SITEMAP_XMLNS
    tree = empty_tree(xmlns)
    nodes: List[Dict[str, Any]] = []
    for url_el in root:
        if not isinstance(url_el.tag, str) or _local_name(url_el.tag) != "url":
            continue
        fields: Dict[str, Any] = {}
        for child in url_el:
            if not isinstance(child.tag, str):
                continue
            _check_plain_field(child, namespace)
            name = _local_name(child.tag)
            if name in fields:
                raise SitemapParseError(f"Repeated <{name}> in <url>; only single-valued fields are supported.")
            fields[name] = (child.text or "").strip()
        if "loc" not in fields:
            raise MissingLocationError("Sitemap <url> element has no <loc>.")
        nodes.append({"loc": fields.pop("loc"), **fields})
    if nodes:
        tree["urlset"]["url"] = nodes
    return tree
