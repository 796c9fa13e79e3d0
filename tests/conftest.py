"""Shared pytest fixtures for the dashboard API tests."""

from __future__ import annotations

import pytest

from dashboard_api import create_app
from dashboard_api.models import build_sample_dataset


@pytest.fixture
def dataset():
    """The bundled sample dataset."""
    return build_sample_dataset()


@pytest.fixture
def app(dataset):
    app = create_app({"TESTING": True}, dataset=dataset)
    yield app


@pytest.fixture
def client(app):
    """Flask test client bound to the sample dataset."""
    return app.test_client()
