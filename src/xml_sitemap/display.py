from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table

from .logging import console
from .sitemap import Sitemap


def print_data(data: Any, renderable: Any, as_json: bool) -> None:
    if as_json:
        console().print_json(data=data)
    else:
        console().print(renderable)


def build_sitemap_render(sitemap: Sitemap, title: str = "Sitemap") -> Table:
    options = sitemap.url_options
    files = sitemap.files
    table = Table(title=f"{title} ({len(sitemap)} urls)", box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Location")
    for name in options:
        table.add_column(name.capitalize())
    table.add_column("File")
    for i, entry in enumerate(sitemap, start=1):
        table.add_row(
            str(i),
            entry.loc,
            *(str(entry.options.get(name, "-")) for name in options),
            files.get(entry.loc, ""),
        )
    return table
