"""
Test helpers shared by several modules.
"""
from __future__ import annotations

import json
from typing import Any

import requests

UPSTREAM_JOKES = {
    "error": False,
    "amount": 3,
    "jokes": [
        {"category": "Programming", "type": "twopart", "setup": "Why do programmers prefer dark mode?",
         "delivery": "Because light attracts bugs.", "id": 11},
        {"category": "Pun", "type": "twopart", "setup": "What do you call a fake noodle?",
         "delivery": "An impasta.", "id": 42},
        {"category": "Misc", "type": "twopart", "setup": "Why did the scarecrow win an award?",
         "delivery": "He was outstanding in his field.", "id": 7},
    ],
}


def make_response(status_code: int, payload: Any = None, *, text: str | None = None) -> requests.Response:
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = "http://upstream.test/"
    if text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = json.dumps(payload).encode("utf-8")
    return resp
