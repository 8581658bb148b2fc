import datetime
from dataclasses import dataclass
from typing import Callable

from fastapi import Request

from joblist.jobs import JobCollection
from joblist.render import PageRenderer


def this_year() -> int:
    return datetime.date.today().year


@dataclass(frozen=True)
class AppState:
    """Read-only data shared by every request for the life of the process."""

    jobs: JobCollection
    renderer: PageRenderer
    current_year: Callable[[], int] = this_year


def get_app_state(request: Request) -> AppState:
    return request.app.state.jobboard


__all__ = ["AppState", "get_app_state", "this_year"]
