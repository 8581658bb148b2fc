from os import PathLike
from typing import Union
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from joblist.jobs import JobCollection

INDEX_TEMPLATE = "index.html"

_SAFE_SCHEMES = {"", "http", "https"}
_SAFE_LINK_SCHEMES = _SAFE_SCHEMES | {"mailto"}


class RenderError(Exception):
    pass


def safe_url(value: str, *, link: bool = False) -> str:
    """Pass relative and web URLs through; anything else becomes "#"."""
    value = value.strip()
    allowed = _SAFE_LINK_SCHEMES if link else _SAFE_SCHEMES
    try:
        scheme = urlsplit(value).scheme.lower()
    except ValueError:
        return "#"
    if scheme not in allowed:
        return "#"
    return value


class PageRenderer:
    def __init__(self, templates_dir: Union[str, PathLike] = "templates"):
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
        )
        self.env.filters["safe_url"] = safe_url

    def render(self, jobs: JobCollection, year: int) -> str:
        try:
            template = self.env.get_template(INDEX_TEMPLATE)
            return template.render(jobs=jobs, year=year)
        except TemplateError as exc:
            raise RenderError(f"Could not render {INDEX_TEMPLATE}: {exc}") from exc


__all__ = ["PageRenderer", "RenderError", "safe_url"]
