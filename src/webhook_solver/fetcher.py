"""Best-effort download of the question PDF."""

from __future__ import annotations

import logging
from pathlib import Path

from webhook_solver.client import HttpClient
from webhook_solver.config import (
    PDF_CONNECT_TIMEOUT,
    PDF_OUTPUT_PATH,
    PDF_TOTAL_TIMEOUT,
    QUESTION_PDF_URL,
)

logger = logging.getLogger(__name__)


def download_question_pdf(
    client: HttpClient,
    url: str = QUESTION_PDF_URL,
    output: Path = PDF_OUTPUT_PATH,
) -> Path | None:
    """Save the PDF to ``output``. Failures are logged and never raised."""
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Downloading question PDF to {output.resolve()}")

        response = client.get(
            url,
            timeout=PDF_TOTAL_TIMEOUT,
            connect_timeout=PDF_CONNECT_TIMEOUT,
            deadline=PDF_TOTAL_TIMEOUT,
        )
        if response.status_code is None:
            logger.warning(f"PDF download failed: {response.error}")
            return None
        if not response.ok:
            logger.warning(
                f"PDF download failed with status {response.status_code} - continuing without blocking"
            )
            return None

        output.write_bytes(response.body)
        logger.info(f"Downloaded PDF ({len(response.body)} bytes)")
        return output
    except OSError as e:
        logger.warning(f"PDF download failed: {e}")
    except KeyboardInterrupt:
        logger.warning("PDF download interrupted - continuing without it")
    return None
