"""Resolve runtime settings from system properties and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from webhook_solver.config import (
    DEFAULT_EMAIL,
    DEFAULT_GENERATE_URL,
    DEFAULT_NAME,
    DEFAULT_REG_NO,
    DEFAULT_TEST_URL,
)
from webhook_solver.models import RuntimeConfig

TRUTHY_VALUES = {"1", "true", "yes"}


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True)
class Source:
    """A single place a setting can be read from."""

    kind: str
    key: str

    def lookup(self, environ: Mapping[str, str], properties: Mapping[str, str]) -> str | None:
        if self.kind == "property":
            return properties.get(self.key)
        return environ.get(self.key)


def prop(key: str) -> Source:
    return Source("property", key)


def env(key: str) -> Source:
    return Source("env", key)


@dataclass(frozen=True)
class Setting:
    """A setting with its lookup sources in priority order."""

    sources: tuple[Source, ...]
    default: str | None = None

    def resolve(self, environ: Mapping[str, str], properties: Mapping[str, str]) -> str | None:
        for source in self.sources:
            value = source.lookup(environ, properties)
            if value is not None and value.strip():
                return value
        return self.default


SETTINGS: dict[str, Setting] = {
    "generate_url": Setting((prop("generate.url"), env("GENERATE_URL")), DEFAULT_GENERATE_URL),
    "test_url": Setting((prop("test.url"), env("TEST_URL")), DEFAULT_TEST_URL),
    "name": Setting((prop("user.name"), env("USER_NAME")), DEFAULT_NAME),
    "reg_no": Setting((prop("user.regno"), env("USER_REGNO")), DEFAULT_REG_NO),
    "email": Setting((prop("user.email"), env("USER_EMAIL")), DEFAULT_EMAIL),
    "dry_run": Setting((prop("DRY_RUN"), prop("dry.run"), env("DRY_RUN"))),
    "download_pdf": Setting((prop("DOWNLOAD_PDF"), prop("download.pdf"), env("DOWNLOAD_PDF"))),
    "final_query": Setting((env("FINAL_QUERY"), prop("final.query"))),
}

FLAG_SETTINGS = {"dry_run", "download_pdf"}


def resolve_setting(
    name: str,
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> str | None:
    """Return the first non-blank value for a setting, or its default."""
    if environ is None:
        environ = os.environ
    return SETTINGS[name].resolve(environ, properties or {})


def resolve_final_query(
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> str | None:
    return resolve_setting("final_query", environ, properties)


def resolve_config(
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> RuntimeConfig:
    """Build the immutable runtime configuration for one run."""
    values: dict[str, object] = {}
    for name in SETTINGS:
        if name == "final_query":
            continue
        value = resolve_setting(name, environ, properties)
        values[name] = is_truthy(value) if name in FLAG_SETTINGS else value
    values["final_query"] = resolve_final_query(environ, properties)
    return RuntimeConfig(**values)
