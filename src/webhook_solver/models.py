"""Data models for the webhook solver."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExitCode(IntEnum):
    OK = 0
    MISSING_FINAL_QUERY = 2
    WEBHOOK_FAILED = 3
    MISSING_WEBHOOK = 4
    MISSING_ACCESS_TOKEN = 5
    SUBMIT_FAILED = 6


class IdentityPayload(BaseModel):
    """Identity sent to the generate endpoint."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    reg_no: str = Field(alias="regNo")
    email: str

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class WebhookResponse(BaseModel):
    """Body returned by the generate endpoint.

    Unknown keys are ignored. Missing or null fields become empty strings so
    that presence checks happen in one place, after the request succeeded.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    webhook: str = ""
    access_token: str = Field(default="", alias="accessToken")

    @field_validator("webhook", "access_token", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


class SubmitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    final_query: str = Field(alias="finalQuery")

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class RuntimeConfig(BaseModel):
    """Settings resolved once per run."""

    model_config = ConfigDict(frozen=True)

    generate_url: str
    test_url: str
    name: str
    reg_no: str
    email: str
    dry_run: bool = False
    download_pdf: bool = False
    final_query: str | None = None

    @field_validator("generate_url", "test_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL: {v}")
        return v

    def identity(self) -> IdentityPayload:
        return IdentityPayload(name=self.name, reg_no=self.reg_no, email=self.email)


class RunOutcome(BaseModel):
    """Result of one solver run; the CLI turns it into the process exit status."""

    exit_code: ExitCode
    message: str
    webhook: str | None = None
    submitted: bool = False
    response_status: int | None = None
    response_body: str | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == ExitCode.OK
