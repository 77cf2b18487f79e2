from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from coastfire.app import create_app
from coastfire.config import DEFAULT_PARAMETERS
from coastfire.schemas.coast_fire import ParameterSet


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app({"TESTING": True})
    with app.test_client() as test_client:
        yield test_client


def load_params(**changes) -> ParameterSet:
    """Calculator defaults (age 30 to 65, 50k saved, 1k/month, 7% / 3% / 4%)."""
    return ParameterSet(**{**DEFAULT_PARAMETERS, **changes})


@pytest.fixture()
def params() -> ParameterSet:
    return load_params()
