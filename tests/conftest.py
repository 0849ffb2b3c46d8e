import json

import pytest
from fastapi.testclient import TestClient

from mailing_lists_api.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "mailing-lists.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def app(data_file):
    return create_app(data_file=str(data_file))


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def seed(data_file):
    def _seed(collection):
        data_file.write_text(json.dumps(collection), encoding="utf-8")

    return _seed
