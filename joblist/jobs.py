import logging
from os import PathLike
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class JobEntry(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    # Only orders entries in the source file; never rendered or re-sorted.
    key: int
    name: str
    details: str
    tools: str
    screen: str
    link: str


class JobData(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    entries: list[JobEntry]


JobCollection = tuple[JobEntry, ...]


class JobStoreError(Exception):
    """Base class for failures while loading the job file."""


class JobFileError(JobStoreError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class JobParseError(JobStoreError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid job data in {source}: {reason}")


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    if loc:
        return f"{loc}: {err['msg']}"
    return err["msg"]


def parse_job_data(text: Union[str, bytes], *, source: str = "<string>") -> JobCollection:
    """Validate a job document and return its entries in source order.

    One bad entry rejects the whole document.
    """
    try:
        data = JobData.model_validate_json(text)
    except ValidationError as exc:
        raise JobParseError(source, _first_error(exc)) from exc
    return tuple(data.entries)


def load_jobs(path: Union[str, PathLike]) -> JobCollection:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise JobFileError(path, str(exc)) from exc
    jobs = parse_job_data(text, source=str(path))
    logger.info("Loaded %d job entries from %s", len(jobs), path)
    return jobs


__all__ = [
    "JobCollection",
    "JobData",
    "JobEntry",
    "JobFileError",
    "JobParseError",
    "JobStoreError",
    "load_jobs",
    "parse_job_data",
]
