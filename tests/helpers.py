"""
Scripted responses for tests: an httpx.MockTransport that answers every
request with a fixed JSON body.
"""

import json
from typing import Any, List

import httpx

from hookfetch import HTTPTransport

TODO_BODY = {"userId": 1, "id": 1, "title": "t", "completed": False}
NOT_FOUND_BODY = {"message": "not found"}
URL = "https://api.example.com/todos/1"


class MockFetch:
    """Transport stand-in that records each request it answers."""

    def __init__(self, transport: HTTPTransport, requests: List[httpx.Request]):
        self.transport = transport
        self.requests = requests

    async def __call__(self, url, options):
        return await self.transport(url, options)


def mock_fetch(return_data: Any, expected: str = "success", raw_body: bytes = None) -> MockFetch:
    """Build a transport answering with ``return_data`` as JSON.

    expected:
        "success"  -> 200 Success
        "error"    -> 404 Not Found
        "mutated"  -> 200 Success; inspect ``requests`` to see what the
                      ``before`` hook changed
    ``raw_body`` replaces the JSON body with arbitrary bytes.
    """
    if expected not in ("success", "error", "mutated"):
        raise ValueError(f"Unknown expected outcome: {expected}")

    status_code = 404 if expected == "error" else 200
    reason = "Not Found" if expected == "error" else "Success"
    body = raw_body if raw_body is not None else json.dumps(return_data).encode()
    recorded: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(
            status_code,
            content=body,
            headers={"content-type": "application/json"},
            extensions={"reason_phrase": reason.encode()},
        )

    return MockFetch(HTTPTransport(mock_transport=httpx.MockTransport(handler)), recorded)
