from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import httpx
import typer

from xml_sitemap.config import SitemapSettings
from xml_sitemap.display import build_sitemap_render, print_data
from xml_sitemap.errors import SitemapError
from xml_sitemap.logging import console, get_logger, set_verbose
from xml_sitemap.options.handlers import CHANGEFREQ_VALUES
from xml_sitemap.sitemap import Sitemap

app = typer.Typer(
    name="xml-sitemap",
    add_completion=True,
    no_args_is_help=True,
    help="Create and edit sitemaps.org XML sitemaps.",
)

log = get_logger("xml_sitemap")

_ERRORS = (SitemapError, OSError, httpx.HTTPError)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    set_verbose(verbose)


def _open(path: Path, host: Optional[str]) -> Sitemap:
    return Sitemap.from_file(path, SitemapSettings(host=host or ""))


def _fail(e: Exception) -> typer.Exit:
    console().print(f"[red]Error:[/red] {e}")
    return typer.Exit(1)


@app.command("new")
def new_cmd(
    path: Path = typer.Argument(..., help="Sitemap file to create."),
    host: Optional[str] = typer.Option(None, "--host", help="Base url; added as the first entry."),
    force: bool = typer.Option(False, "--force", "-f", help="Replace an existing file."),
) -> None:
    """Create an empty sitemap."""
    try:
        sitemap = Sitemap(settings=SitemapSettings(host=host or ""))
        dst = sitemap.write(path, overwrite=force)
    except _ERRORS as e:
        raise _fail(e)
    console().print(f"Saved -> {dst}")


@app.command("add")
def add_cmd(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Sitemap file."),
    urls: List[str] = typer.Argument(..., help="Urls to add (relative to --host if given)."),
    host: Optional[str] = typer.Option(None, "--host", help="Base url for relative urls; added as an entry if missing."),
    lastmod: Optional[str] = typer.Option(None, "--lastmod", help="YYYY-MM-DD or 'now'."),
    changefreq: Optional[str] = typer.Option(None, "--changefreq", help=f"One of: {', '.join(CHANGEFREQ_VALUES)}."),
    priority: Optional[float] = typer.Option(None, "--priority", help="Number between 0 and 1."),
    file: Optional[Path] = typer.Option(None, "--file", help="File whose modification time drives lastmod."),
) -> None:
    """Add urls sharing the same options."""
    options = {
        name: value
        for name, value in (("lastmod", lastmod), ("changefreq", changefreq), ("priority", priority), ("file", file))
        if value is not None
    }
    try:
        sitemap = _open(path, host)
        sitemap.add([{"url": url, **options} for url in urls])
        sitemap.write(path)
    except _ERRORS as e:
        raise _fail(e)
    console().print(f"[green]✓[/green] {len(urls)} url(s) added, {len(sitemap)} total")


@app.command("remove")
def remove_cmd(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Sitemap file."),
    urls: List[str] = typer.Argument(..., help="Urls to remove."),
    host: Optional[str] = typer.Option(None, "--host", help="Base url for relative urls; added as an entry if missing."),
) -> None:
    """Remove urls."""
    try:
        sitemap = _open(path, host)
        for url in urls:
            sitemap.remove(url)
        sitemap.write(path)
    except _ERRORS as e:
        raise _fail(e)
    console().print(f"{len(sitemap)} url(s) left")


@app.command("update")
def update_cmd(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Sitemap file."),
    urls: Optional[List[str]] = typer.Argument(None, help="Urls to update (default: all)."),
    host: Optional[str] = typer.Option(None, "--host", help="Base url for relative urls; added as an entry if missing."),
    date: str = typer.Option("now", "--date", help="YYYY-MM-DD or 'now'."),
) -> None:
    """Set lastmod on some or all urls."""
    try:
        sitemap = _open(path, host)
        if urls:
            for url in urls:
                sitemap.update(url, date)
        else:
            sitemap.update_all(date)
        sitemap.write(path)
    except _ERRORS as e:
        raise _fail(e)
    console().print(f"Updated -> {path}")


@app.command("show")
def show_cmd(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Sitemap file."),
    json: bool = typer.Option(False, "--json", help="Raw JSON output."),
) -> None:
    """List the urls of a sitemap."""
    try:
        sitemap = Sitemap.from_file(path)
    except _ERRORS as e:
        raise _fail(e)
    print_data(sitemap.tree, build_sitemap_render(sitemap, title=path.name), json)


@app.command("fetch")
def fetch_cmd(
    url: str = typer.Argument(..., help="Url of a published sitemap.xml."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Save to this file instead of listing."),
    timeout: float = typer.Option(20.0, "--timeout", help="Request timeout in seconds."),
    json: bool = typer.Option(False, "--json", help="Raw JSON output."),
) -> None:
    """Download a published sitemap."""
    try:
        sitemap = Sitemap.from_url(url, SitemapSettings(timeout=timeout))
        if out is not None:
            dst = sitemap.write(out)
            console().print(f"Saved -> {dst}")
            return
    except _ERRORS as e:
        raise _fail(e)
    print_data(sitemap.tree, build_sitemap_render(sitemap, title=url), json)


if __name__ == "__main__":
    app()
