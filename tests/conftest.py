from unittest.mock import MagicMock

import pytest


def make_response(status_code=200, payload=None, json_error=None):
    """Fake requests.Response with just the parts the client reads"""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    return MagicMock()
