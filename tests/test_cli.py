import json

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from conftest import load_testdata, mock_client
from nursys.cli import main as cli_main

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch):
    """Hace que la CLI hable con un transporte falso en vez de la red."""

    monkeypatch.setattr(cli_main, "_console", Console(width=200))
    seen: list[httpx.Request] = []

    def install(status: int, payload: bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status, content=payload)

        monkeypatch.setattr(cli_main, "build_client", lambda: mock_client(handler))
        return seen

    return install


def test_change_password_rejection_exits_non_zero(serve):
    seen = serve(200, load_testdata("ChangePasswordSubmitResponseMessage_Failed.json"))

    result = runner.invoke(cli_main.app, ["change-password", "--new-password", "short"])

    assert result.exit_code == 1
    assert "FAILED" in result.output
    assert "Password must be between 8 and 50 characters in length." in result.output
    assert json.loads(seen[0].content) == {"NewPassword": "short"}


def test_nurse_lookup_by_ncsbn_id_prints_the_result_hint(serve):
    seen = serve(200, load_testdata("Generic_SubmitResponseMessage.json"))

    result = runner.invoke(cli_main.app, ["nurse-lookup", "--ncsbn-id", "12345678", "--ncsbn-id", "87654321"])

    assert result.exit_code == 0, result.output
    assert "nursys result nurselookup a523e0d4-01e1-4c8d-8dd9-54b269c315b7" in result.output
    assert json.loads(seen[0].content) == {"NurseLookupRequests": [{"NcsbnId": "12345678"}, {"NcsbnId": "87654321"}]}


def test_nurse_lookup_requires_file_or_ids(serve):
    serve(200, b"{}")

    result = runner.invoke(cli_main.app, ["nurse-lookup"])

    assert result.exit_code == 2


def test_manage_nurse_list_reads_requests_from_file(serve, tmp_path):
    seen = serve(202, load_testdata("Generic_SubmitResponseMessage.json"))
    batch = tmp_path / "batch.json"
    batch.write_text(
        json.dumps(
            {
                "ManageNurseListRequests": [
                    {"SubmissionActionCode": "R", "JurisdictionAbbreviation": "TX", "LicenseType": "RN", "LicenseNumber": "1"}
                ]
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli_main.app, ["manage-nurse-list", str(batch)])

    assert result.exit_code == 0, result.output
    assert seen[0].url.path == "/api/managenurselist"
    body = json.loads(seen[0].content)
    assert body["ManageNurseListRequests"][0]["SubmissionActionCode"] == "R"


def test_notification_lookup_sends_the_date_range(serve):
    seen = serve(200, load_testdata("Generic_SubmitResponseMessage.json"))

    result = runner.invoke(cli_main.app, ["notification-lookup", "--start", "2024-01-01", "--end", "2024-01-31"])

    assert result.exit_code == 0, result.output
    assert json.loads(seen[0].content) == {"StartDate": "2024-01-01", "EndDate": "2024-01-31"}


def test_result_nurse_lookup_renders_table_and_exports_json(serve, tmp_path):
    seen = serve(200, load_testdata("NurseLookupRetrieveResponseMessage.json"))
    out = tmp_path / "out" / "lookup.json"

    result = runner.invoke(cli_main.app, ["result", "nurselookup", "5b0c6a8e", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert seen[0].method == "GET"
    assert seen[0].url.params["transactionId"] == "5b0c6a8e"
    assert "JANE DOE" in result.output
    assert "RN (Registered Nurse) #123456" in result.output
    assert "Nurse not found in nurse list." in result.output

    exported = json.loads(out.read_text(encoding="utf-8"))
    assert exported["ProcessingCompleteFlag"] is True
    assert exported["Transaction"]["TransactionDate"] == "2024-01-04T10:20:01.500000-06:00"
    assert exported["Transaction"]["TransactionErrors"] == []


def test_remote_error_exits_with_status(serve):
    serve(403, b'{"error": "Forbidden"}')

    result = runner.invoke(cli_main.app, ["retrieve-documents", "DOC-001"])

    assert result.exit_code == 1
    assert "RemoteError" in result.output
    assert "HTTP status 403" in result.output


def test_missing_configuration_exits_with_usage_code(monkeypatch):
    monkeypatch.setattr(cli_main, "_console", Console(width=200))

    def unconfigured():
        raise ValueError("missing nursys configuration: NURSYS_BASE_URL")

    monkeypatch.setattr(cli_main, "build_client", unconfigured)

    result = runner.invoke(cli_main.app, ["result", "managenurselist", "tx-1"])

    assert result.exit_code == 2
    assert "NURSYS_BASE_URL" in result.output
