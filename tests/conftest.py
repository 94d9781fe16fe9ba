from __future__ import annotations

from typing import Any, Callable
from unittest.mock import Mock

import pytest
import requests

from stellar_tts import StellarTimestampClient


def _make_response(payload: Any = None, status_code: int = 200, text: str = "") -> Mock:
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    return _make_response


@pytest.fixture
def session() -> Mock:
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def client(session: Mock) -> StellarTimestampClient:
    return StellarTimestampClient(session=session)
