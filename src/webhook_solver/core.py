"""Run the solver from configuration to submission."""

from __future__ import annotations

import logging
import time
from typing import Callable

from webhook_solver.client import HttpClient
from webhook_solver.config import QUESTION_PDF_VIEW_URL
from webhook_solver.fetcher import download_question_pdf
from webhook_solver.models import ExitCode, RunOutcome, RuntimeConfig
from webhook_solver.retry import RetryPolicy
from webhook_solver.submitter import submit_final_query
from webhook_solver.webhook import request_webhook, validate_webhook_response

logger = logging.getLogger(__name__)


def run(
    config: RuntimeConfig,
    client: HttpClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
    policy: RetryPolicy | None = None,
) -> RunOutcome:
    """Execute one run and return its outcome.

    Stages run in a fixed order and the first failing stage decides the
    outcome. Nothing here terminates the process.
    """
    client = client or HttpClient()
    policy = policy or RetryPolicy()

    logger.info("Starting Webhook Solver (even regNo - using Question 2)")
    logger.info(f"Question 2 PDF: {QUESTION_PDF_VIEW_URL}")

    if config.download_pdf:
        download_question_pdf(client)

    result = request_webhook(client, config, policy=policy, sleep=sleep)
    if not result.succeeded or result.value is None:
        logger.error(
            f"Failed to generate webhook after {result.attempts} attempts. "
            f"Exiting with code {int(ExitCode.WEBHOOK_FAILED)}."
        )
        return RunOutcome(
            exit_code=ExitCode.WEBHOOK_FAILED,
            message=f"Failed to generate webhook after {result.attempts} attempts",
        )

    webhook_response = result.value
    failure = validate_webhook_response(webhook_response)
    if failure is not None:
        logger.error(f"{failure.message}. Exiting with code {int(failure.exit_code)}.")
        return failure

    final_query = config.final_query
    if not final_query or not final_query.strip():
        logger.error(
            "FINAL_QUERY not set. Set environment variable FINAL_QUERY or property "
            f"-D final.query=... Exiting with code {int(ExitCode.MISSING_FINAL_QUERY)}."
        )
        return RunOutcome(
            exit_code=ExitCode.MISSING_FINAL_QUERY,
            message="FINAL_QUERY not set",
            webhook=webhook_response.webhook,
        )

    outcome = submit_final_query(
        client,
        config.test_url,
        webhook_response.access_token,
        final_query,
        dry_run=config.dry_run,
    )
    return outcome.model_copy(update={"webhook": webhook_response.webhook})
