"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def api_key():
    key = os.environ.get("FILLOUT_SK")
    if not key:
        pytest.skip("FILLOUT_SK not set")
    return key


@pytest.fixture
def form_id():
    form = os.environ.get("FILLOUT_FORM_ID")
    if not form:
        pytest.skip("FILLOUT_FORM_ID not set")
    return form
