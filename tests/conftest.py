"""
Shared fixtures: every test gets its own submissions file under tmp_path.
"""
import pytest
from fastapi.testclient import TestClient

from contact_api.config.settings import Settings
from contact_api.database.submission_store import SubmissionStore
from contact_api.main import create_app
from contact_api.services.submission_service import SubmissionService


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "submissions.json"


@pytest.fixture
def store(data_file):
    return SubmissionStore(data_file)


@pytest.fixture
def service(store):
    return SubmissionService(store, version="test")


@pytest.fixture
def app_settings(data_file):
    return Settings(DATA_FILE=data_file, STRICT_VALIDATION=False, EXPOSE_SUBMISSIONS=True, STATIC_DIR=None)


@pytest.fixture
def client(app_settings):
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_form():
    return {"fullName": "Jane Doe", "phone": "612345678"}
