"""Shared fixtures: an app wired to a temporary SQLite file and upload dir."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from student_intake.core.config import Settings
from student_intake.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'intake.db'}",
        UPLOAD_DIR=str(tmp_path / "public" / "uploads"),
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    yield application
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upload_dir(settings):
    return Path(settings.UPLOAD_DIR)
