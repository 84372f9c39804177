"""Submit the final query to the test endpoint."""

from __future__ import annotations

import logging

from webhook_solver.client import HttpClient
from webhook_solver.config import API_CONNECT_TIMEOUT, API_READ_TIMEOUT
from webhook_solver.models import ExitCode, RunOutcome, SubmitRequest

logger = logging.getLogger(__name__)


def submit_final_query(
    client: HttpClient,
    test_url: str,
    access_token: str,
    final_query: str,
    dry_run: bool = False,
) -> RunOutcome:
    """POST the answer, or only log what would be sent when ``dry_run`` is set.

    The token goes into ``Authorization`` exactly as issued, without a
    ``Bearer`` prefix. Any completed HTTP exchange counts as done, whatever
    its status; only transport failures are reported as errors.
    """
    request = SubmitRequest(final_query=final_query)

    if dry_run:
        logger.info("DRY_RUN=true - not submitting to remote endpoint")
        logger.info(
            f"Would POST to {test_url} with headers Authorization=[{access_token}] "
            f"and body: {request.to_json()}"
        )
        return RunOutcome(exit_code=ExitCode.OK, message="Dry run complete, nothing submitted")

    logger.info(f"Submitting final query to {test_url}")
    response = client.post_json(
        test_url,
        request.to_dict(),
        headers={"Authorization": access_token},
        timeout=API_READ_TIMEOUT,
        connect_timeout=API_CONNECT_TIMEOUT,
    )

    if response.status_code is None:
        logger.error(f"Submission failed: {response.error}")
        return RunOutcome(
            exit_code=ExitCode.SUBMIT_FAILED,
            message=f"Submission failed: {response.error}",
        )

    logger.info(f"Submission response status: {response.status_code}")
    logger.info(f"Submission response body: {response.text}")
    return RunOutcome(
        exit_code=ExitCode.OK,
        message=f"Submitted final query (status {response.status_code})",
        submitted=True,
        response_status=response.status_code,
        response_body=response.text,
    )
