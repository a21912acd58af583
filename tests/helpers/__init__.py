"""Test helper utilities."""

from typing import Any, Optional
from unittest.mock import Mock

import requests

API_URL = "http://sensor.local/api/latest"


def make_response(payload: Any = None, status: int = 200, invalid_json: bool = False) -> Mock:
    """Build a stand-in for `requests.Response`."""
    response = Mock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    else:
        response.raise_for_status.return_value = None
    if invalid_json:
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    else:
        response.json.return_value = payload
    return response


def make_payload(gas: Optional[float] = 150, humidity: Optional[float] = 60,
                 temperature: Optional[float] = 28.5, flame: Optional[int] = 0) -> dict:
    """Create a valid endpoint body."""
    return {
        "success": True,
        "data": {"gas": gas, "humidity": humidity, "temperature": temperature, "flame": flame},
    }
