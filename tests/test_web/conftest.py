from __future__ import annotations

import pytest

from zephyr.engine import Engine
from zephyr.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(engine=Engine())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
