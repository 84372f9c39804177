"""Request the webhook/access-token pair and validate it."""

from __future__ import annotations

import logging
import time
from typing import Callable

from webhook_solver.client import HttpClient
from webhook_solver.config import API_CONNECT_TIMEOUT, API_READ_TIMEOUT
from webhook_solver.models import ExitCode, RunOutcome, RuntimeConfig, WebhookResponse
from webhook_solver.retry import AttemptFailed, RetryPolicy, RetryResult, call_with_retry

logger = logging.getLogger(__name__)


def redact_token(token: str | None) -> str:
    if not token:
        return ""
    if len(token) <= 6:
        return "***"
    return token[:3] + "***" + token[-3:]


def request_webhook(
    client: HttpClient,
    config: RuntimeConfig,
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RetryResult[WebhookResponse | None]:
    """POST the identity payload to the generate endpoint, retrying failures.

    A 2xx response with an empty or ``null`` body ends the retries with no
    webhook; the result then succeeds with a ``None`` value.
    """
    policy = policy or RetryPolicy()
    payload = config.identity().to_dict()

    def attempt(n: int) -> WebhookResponse | None:
        logger.info(f"Requesting webhook (attempt {n}/{policy.max_attempts}): {config.generate_url}")
        response = client.post_json(
            config.generate_url,
            payload,
            timeout=API_READ_TIMEOUT,
            connect_timeout=API_CONNECT_TIMEOUT,
        )

        if response.status_code is None:
            raise AttemptFailed(response.error or "no response")
        if not response.ok:
            raise AttemptFailed(f"status {response.status_code}")

        logger.info(f"GenerateWebhook responded with status {response.status_code}")
        if not response.body.strip():
            logger.error("GenerateWebhook returned an empty body")
            return None

        try:
            data = response.json()
            if data is None:
                logger.error("GenerateWebhook returned a null body")
                return None
            return WebhookResponse.model_validate(data)
        except ValueError as e:
            raise AttemptFailed(f"unreadable response body: {e}") from e

    return call_with_retry(attempt, policy, sleep=sleep, label="GenerateWebhook request")


def validate_webhook_response(response: WebhookResponse) -> RunOutcome | None:
    """Return a failing outcome if a required field is blank, else ``None``."""
    if not response.webhook.strip():
        return RunOutcome(
            exit_code=ExitCode.MISSING_WEBHOOK,
            message="Missing 'webhook' in response",
        )

    if not response.access_token.strip():
        return RunOutcome(
            exit_code=ExitCode.MISSING_ACCESS_TOKEN,
            message="Missing 'accessToken' in response",
            webhook=response.webhook,
        )

    token = response.access_token
    logger.info(f"Received webhook: {response.webhook}")
    logger.info(f"Received accessToken (redacted length={len(token)}): {redact_token(token)}")
    return None
