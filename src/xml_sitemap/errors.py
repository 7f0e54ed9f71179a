from __future__ import annotations


class SitemapError(Exception):
    """Base class for every error raised by xml_sitemap."""


class InvalidTypeError(SitemapError, TypeError):
    """A value has a type the operation cannot handle."""


class InvalidValueError(SitemapError, ValueError):
    """A value has the right type but is not allowed."""


class UnknownOptionError(InvalidValueError):
    """An option name is not in the option registry."""
    def __init__(self, option: str, known: list[str]):
        super().__init__(f"Unrecognized option {option!r}. Expected one of {', '.join(known)}.")
        self.option = option


class MissingLocationError(InvalidTypeError):
    """An entry-like mapping carries neither a ``url`` nor a ``loc`` key."""


class SitemapParseError(InvalidValueError):
    """XML text could not be read as a sitemap urlset."""


class DuplicateOptionError(SitemapError):
    def __init__(self, option: str):
        super().__init__(f"Option {option!r} already exists. Pass overwrite=True or call remove_option first.")
        self.option = option


class DuplicateUrlError(SitemapError):
    def __init__(self, url: str):
        super().__init__(f"{url} is already in the sitemap. Use set_option_values to change its options.")
        self.url = url


class NotFoundError(SitemapError, LookupError):
    def __init__(self, url: str, action: str = "get node"):
        super().__init__(f"{url} not in sitemap, can't {action}.")
        self.url = url
