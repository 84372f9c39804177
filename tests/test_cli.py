"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from conftest import FakeClient, json_response
from webhook_solver import cli as cli_module
from webhook_solver.cli import cli, parse_defines

VALID_BODY = {"webhook": "https://hooks.example.com/abc", "accessToken": "tok_1234567890"}


@pytest.fixture
def fake_client(monkeypatch):
    client = FakeClient()
    monkeypatch.setattr(cli_module, "HttpClient", lambda: client)
    return client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DRY_RUN", "DOWNLOAD_PDF", "FINAL_QUERY", "GENERATE_URL", "TEST_URL"):
        monkeypatch.delenv(name, raising=False)


class TestParseDefines:
    def test_pairs(self):
        assert parse_defines(("final.query=a=b", "user.regno=R1")) == {
            "final.query": "a=b",
            "user.regno": "R1",
        }

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_defines(("novalue",))


class TestCli:
    def test_dry_run_exits_zero(self, fake_client):
        fake_client.post_responses = [json_response(VALID_BODY)]
        runner = CliRunner()

        result = runner.invoke(cli, ["--dry-run", "-D", "final.query=42"])

        assert result.exit_code == 0
        assert len(fake_client.posts) == 1

    def test_live_run_uses_properties(self, fake_client):
        fake_client.post_responses = [json_response(VALID_BODY), json_response({"success": True})]
        runner = CliRunner()

        result = runner.invoke(cli, [
            "-D", "generate.url=https://gen.example.com",
            "-D", "test.url=https://test.example.com",
            "-D", "user.regno=REG7",
        ], env={"FINAL_QUERY": "SELECT 1"})

        assert result.exit_code == 0
        assert fake_client.posts[0]["url"] == "https://gen.example.com"
        assert fake_client.posts[0]["payload"]["regNo"] == "REG7"
        assert fake_client.posts[1]["url"] == "https://test.example.com"
        assert fake_client.posts[1]["headers"]["Authorization"] == "tok_1234567890"

    def test_missing_final_query_exit_code(self, fake_client):
        fake_client.post_responses = [json_response(VALID_BODY)]

        result = CliRunner().invoke(cli, [])

        assert result.exit_code == 2

    def test_missing_access_token_exit_code(self, fake_client):
        fake_client.post_responses = [json_response({"webhook": "https://hook"})]

        result = CliRunner().invoke(cli, ["-D", "final.query=42"])

        assert result.exit_code == 5
        assert len(fake_client.posts) == 1

    def test_invalid_define(self, fake_client):
        result = CliRunner().invoke(cli, ["-D", "broken"])

        assert result.exit_code == 1
        assert fake_client.posts == []

    def test_invalid_url(self, fake_client):
        result = CliRunner().invoke(cli, ["-D", "generate.url=ftp://nope"])

        assert result.exit_code == 1

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
