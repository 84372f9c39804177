"""Configuration and constants for the webhook solver."""

from pathlib import Path

DEFAULT_GENERATE_URL = "https://bfhldevapigw.healthrx.co.in/hiring/generateWebhook/JAVA"
DEFAULT_TEST_URL = "https://bfhldevapigw.healthrx.co.in/hiring/testWebhook/JAVA"

DEFAULT_NAME = "Your Name"
DEFAULT_REG_NO = "000000"
DEFAULT_EMAIL = "your.email@example.com"

QUESTION_PDF_VIEW_URL = "https://drive.google.com/file/d/143MR5cLFrlNEuHzzWJ5RHnEWuijuM9X/view?usp=sharing"
QUESTION_PDF_URL = "https://drive.google.com/uc?export=download&id=143MR5cLFrlNEuHzzWJ5RHnEWuijuM9X"
DOWNLOAD_DIR = Path("downloads")
PDF_OUTPUT_PATH = DOWNLOAD_DIR / "question2.pdf"

API_CONNECT_TIMEOUT = 10
API_READ_TIMEOUT = 20
PDF_CONNECT_TIMEOUT = 15
PDF_TOTAL_TIMEOUT = 30

MAX_ATTEMPTS = 3
BACKOFF_STEP_SECONDS = 1.0

USER_AGENT = "webhook-solver/0.1.0"
