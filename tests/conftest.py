"""Test fixtures for DrinkMailer."""

import os
from unittest.mock import MagicMock

import pytest
import requests

# Set test environment before importing app modules
os.environ.setdefault("APPS_SCRIPT_BASE", "https://script.example.test/macros/s/TEST/exec")
os.environ.setdefault("DEADLINE_TIMEZONE", "Asia/Taipei")

from frontend.app import workflow
from frontend.app.schemas import RecipientList
from frontend.app.state import WorkflowState


@pytest.fixture
def base_url():
    return os.environ["APPS_SCRIPT_BASE"]


@pytest.fixture
def make_response():
    """Factory for a fake `requests.Response`."""

    def _make(json_data=None, status_code=200, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
        else:
            response.raise_for_status.return_value = None
        return response

    return _make


@pytest.fixture
def recipient_list():
    """Three recipients across two departments; alice and carol are active."""
    return RecipientList.model_validate({
        "list": [
            {"name": "Alice", "email": "alice@corp.test", "dept": "RD", "active": True, "note": "少冰"},
            {"name": "Bob", "email": "bob@corp.test", "dept": "HR", "active": False},
            {"name": "Carol", "email": "carol@corp.test", "dept": "RD", "active": True},
        ],
        "allDepts": ["RD", "HR"],
    })


@pytest.fixture
def loaded_state(recipient_list):
    """A workflow state right after a successful fetch of `recipient_list`."""
    state = WorkflowState()
    generation = workflow.begin_fetch(state)
    workflow.apply_fetch_result(state, generation, recipient_list)
    return state
