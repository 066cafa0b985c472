from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from conftest import RECORDS_PATH, TOKEN_PATH
from lark_nodes.auth.tenant import TenantAuthenticator
from lark_nodes.cli.main import app
from lark_nodes.core.sdk import LarkSDK
from lark_nodes.utils.config import AppConfig

runner = CliRunner()


@pytest.fixture
def patched_http(fake_lark, monkeypatch: pytest.MonkeyPatch):
    def _authenticator(**kwargs):
        return TenantAuthenticator(client=fake_lark.client(), **kwargs)

    def _sdk(**kwargs):
        return LarkSDK(client=fake_lark.client(), **kwargs)

    monkeypatch.setattr("lark_nodes.nodes.authentication.TenantAuthenticator", _authenticator)
    monkeypatch.setattr("lark_nodes.cli.cmd_records.LarkSDK", _sdk)
    return fake_lark


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "lark-nodes" in result.output


def test_config_set_and_show() -> None:
    result = runner.invoke(app, [
        "config", "set",
        "--app-id", "cli_1234567890abcdef",
        "--app-secret", "shh",
        "--app-token", "bascnAPP",
        "--table-id", "tblTABLE",
    ])
    assert result.exit_code == 0

    config = AppConfig.load()
    assert config.app_id == "cli_1234567890abcdef"
    assert config.app_secret == "shh"
    assert config.table_id == "tblTABLE"

    shown = runner.invoke(app, ["config", "show"])
    assert shown.exit_code == 0
    assert "shh" not in shown.output


def test_config_clear() -> None:
    AppConfig(app_id="a", app_secret="b").save()

    result = runner.invoke(app, ["config", "clear", "--force"])

    assert result.exit_code == 0
    assert not AppConfig.load().has_credentials()


def test_env_overrides_config(monkeypatch: pytest.MonkeyPatch) -> None:
    from lark_nodes.cli.common import get_credentials

    AppConfig(app_id="from-file", app_secret="file-secret", table_id="tblFILE").save()
    monkeypatch.setenv("LARK_APP_ID", "from-env")

    credentials, is_feishu = get_credentials(table_id="tblCLI")

    assert credentials.app_id == "from-env"
    assert credentials.app_secret == "file-secret"
    assert credentials.table_id == "tblCLI"
    assert is_feishu is False


def test_token_command(patched_http) -> None:
    patched_http.add("POST", TOKEN_PATH, {"code": 0, "tenant_access_token": "t-cli"})

    result = runner.invoke(app, ["token", "--app-id", "a", "--app-secret", "b", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"tenantAccessToken": "t-cli"}


def test_token_command_without_credentials() -> None:
    result = runner.invoke(app, ["token"])

    assert result.exit_code == 1


def test_records_list_fetches_token_first(patched_http) -> None:
    AppConfig(app_id="a", app_secret="b", app_token="bascnAPP", table_id="tblTABLE").save()
    patched_http.add("POST", TOKEN_PATH, {"code": 0, "tenant_access_token": "t-cli"})
    patched_http.add("GET", RECORDS_PATH, {"code": 0, "data": {"items": [], "has_more": False}})

    result = runner.invoke(app, ["records", "list", "--limit", "3"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"items": [], "has_more": False}
    assert [r.method for r in patched_http.requests] == ["POST", "GET"]
    assert patched_http.requests[1].headers["Authorization"] == "Bearer t-cli"


def test_records_delete_not_found(patched_http) -> None:
    patched_http.add("DELETE", f"{RECORDS_PATH}/recX", {"code": 1254043, "msg": "RecordIdNotFound"}, status=404)

    result = runner.invoke(app, [
        "records", "delete", "recX",
        "--token", "t-given",
        "--app-token", "bascnAPP",
        "--table-id", "tblTABLE",
    ])

    assert result.exit_code == 1
    assert "Record not found" in result.output
    assert len(patched_http.requests) == 1


def test_records_create_rejects_bad_json(patched_http) -> None:
    result = runner.invoke(app, [
        "records", "create", "{bad",
        "--token", "t-given",
        "--app-token", "bascnAPP",
        "--table-id", "tblTABLE",
    ])

    assert result.exit_code == 1
    assert patched_http.requests == []


def test_records_list_closes_http_clients(patched_http) -> None:
    AppConfig(app_id="a", app_secret="b", app_token="bascnAPP", table_id="tblTABLE").save()
    patched_http.add("POST", TOKEN_PATH, {"code": 0, "tenant_access_token": "t-cli"})
    patched_http.add("GET", RECORDS_PATH, {"code": 0, "data": {"items": []}})

    result = runner.invoke(app, ["records", "list"])

    assert result.exit_code == 0
    assert len(patched_http.clients) == 2
    assert all(client.is_closed for client in patched_http.clients)


def test_token_command_closes_client_on_failure(patched_http) -> None:
    patched_http.add("POST", TOKEN_PATH, {"code": 10014, "msg": "app secret invalid"})

    result = runner.invoke(app, ["token", "--app-id", "a", "--app-secret", "b"])

    assert result.exit_code == 1
    assert patched_http.clients[0].is_closed


def test_lark_flag_overrides_saved_feishu(patched_http) -> None:
    AppConfig(app_token="bascnAPP", table_id="tblTABLE", is_feishu=True).save()
    patched_http.add("GET", RECORDS_PATH, {"code": 0, "data": {"items": []}})

    result = runner.invoke(app, ["records", "list", "--lark", "--token", "t-given"])

    assert result.exit_code == 0
    assert patched_http.requests[0].url.host == "open.larksuite.com"


def test_saved_feishu_is_used_by_default(patched_http) -> None:
    AppConfig(app_token="bascnAPP", table_id="tblTABLE", is_feishu=True).save()
    patched_http.add("GET", RECORDS_PATH, {"code": 0, "data": {"items": []}})

    result = runner.invoke(app, ["records", "list", "--token", "t-given"])

    assert result.exit_code == 0
    assert patched_http.requests[0].url.host == "open.feishu.cn"


def test_config_set_lark_clears_feishu() -> None:
    AppConfig(app_id="a", app_secret="b", is_feishu=True).save()

    result = runner.invoke(app, ["config", "set", "--lark"])

    assert result.exit_code == 0
    assert AppConfig.load().is_feishu is False
