import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app import create_app
from joblist.jobs import JobEntry
from joblist.settings import Settings

ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = ROOT / "templates"


def _entry(**overrides) -> dict:
    data = {
        "key": 1,
        "name": "Test Company",
        "details": "Test details",
        "tools": "Python, FastAPI",
        "screen": "/test.png",
        "link": "https://example.com",
    }
    data.update(overrides)
    return data


@pytest.fixture
def entry():
    return _entry


@pytest.fixture
def templates_dir():
    return TEMPLATES_DIR


@pytest.fixture
def sample_jobs():
    return (JobEntry(**_entry()),)


@pytest.fixture
def static_dir(tmp_path):
    path = tmp_path / "static"
    (path / "css").mkdir(parents=True)
    (path / "css" / "style.css").write_text("body { margin: 0; }\n")
    return path


@pytest.fixture
def settings(static_dir):
    return Settings(templates_dir=TEMPLATES_DIR, static_dir=static_dir)


@pytest.fixture
def make_client(settings):
    def _make(jobs=(), current_year=lambda: 2024, **overrides):
        cfg = settings.model_copy(update=overrides)
        return TestClient(create_app(jobs, cfg, current_year=current_year))

    return _make


@pytest.fixture
def write_db(tmp_path):
    def _write(payload, name="db.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
