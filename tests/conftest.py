"""Shared fixtures for webhook solver tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from webhook_solver.client import HttpResponse
from webhook_solver.models import RuntimeConfig


def json_response(data: Any, status: int = 200) -> HttpResponse:
    return HttpResponse(ok=200 <= status < 300, status_code=status, body=json.dumps(data).encode())


def transport_error(message: str = "connection refused") -> HttpResponse:
    return HttpResponse(ok=False, status_code=None, error=message)


class FakeClient:
    """Records requests and replays queued responses."""

    def __init__(self, post_responses=None, get_responses=None) -> None:
        self.post_responses = list(post_responses or [])
        self.get_responses = list(get_responses or [])
        self.posts: list[dict[str, Any]] = []
        self.gets: list[dict[str, Any]] = []

    def post_json(self, url, payload, headers=None, timeout=None, connect_timeout=None) -> HttpResponse:
        self.posts.append({
            "url": url,
            "payload": payload,
            "headers": headers or {},
            "timeout": timeout,
            "connect_timeout": connect_timeout,
        })
        return self.post_responses.pop(0)

    def get(self, url, timeout=None, connect_timeout=None, deadline=None) -> HttpResponse:
        self.gets.append({
            "url": url,
            "timeout": timeout,
            "connect_timeout": connect_timeout,
            "deadline": deadline,
        })
        return self.get_responses.pop(0)


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def config() -> RuntimeConfig:
    return RuntimeConfig(
        generate_url="https://api.example.com/generateWebhook",
        test_url="https://api.example.com/testWebhook",
        name="Ada Lovelace",
        reg_no="REG1002",
        email="ada@example.com",
        final_query="SELECT 42",
    )
