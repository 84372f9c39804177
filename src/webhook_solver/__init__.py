"""Webhook Solver - request a webhook token and submit the final query."""

__version__ = "0.1.0"

from webhook_solver.models import (
    ExitCode,
    IdentityPayload,
    RunOutcome,
    RuntimeConfig,
    SubmitRequest,
    WebhookResponse,
)
from webhook_solver.client import HttpClient, HttpResponse
from webhook_solver.retry import RetryPolicy, call_with_retry
from webhook_solver.settings import resolve_config
from webhook_solver.core import run

__all__ = [
    "ExitCode",
    "IdentityPayload",
    "RunOutcome",
    "RuntimeConfig",
    "SubmitRequest",
    "WebhookResponse",
    "HttpClient",
    "HttpResponse",
    "RetryPolicy",
    "call_with_retry",
    "resolve_config",
    "run",
]
