import httpx
import pytest
from respx import MockRouter
from typer.testing import CliRunner

from catalog_client import config as catalog_config
from smartblocks_cli import main as cli_main
from smartblocks_cli.main import app

runner = CliRunner()

LISTING = {"smartblocks": [
    {"id": "1", "name": "Weekly Review", "tags": ["review"], "price": 250, "author": "bob"},
    {"id": "2", "name": "Daily Notes", "tags": ["journal"], "price": 0, "author": "alice"},
    {"id": "3", "name": "Mine", "tags": [], "price": 0, "author": "me"},
]}

@pytest.fixture
def catalog_url(monkeypatch):
    monkeypatch.setattr(cli_main.settings, "SMARTBLOCKS_API_URL", "https://catalog.example.com")
    monkeypatch.setattr(cli_main.settings, "SMARTBLOCKS_GRAPH", "me")
    return f"https://catalog.example.com/{catalog_config.STORE_ENDPOINT}"

@pytest.fixture
def respx_mock():
    router = MockRouter(assert_all_called=False)
    with router:
        yield router

def test_main_app_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Browse and search the SmartBlocks Store catalog." in result.stdout
    assert "list" in result.stdout
    assert "show" in result.stdout

def test_main_app_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "SmartBlocks Store CLI version: 0.1.0" in result.stdout

def test_list_marketplace(catalog_url, respx_mock):
    respx_mock.get(catalog_url).mock(return_value=httpx.Response(200, json=LISTING))

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    daily = result.stdout.index("2  Daily Notes  (alice)  FREE")
    weekly = result.stdout.index("1  Weekly Review  (bob)  $2.50")
    assert daily < weekly
    assert "Mine" not in result.stdout

def test_list_installed_and_search(catalog_url, respx_mock):
    respx_mock.get(catalog_url).mock(return_value=httpx.Response(200, json=LISTING))

    result = runner.invoke(app, ["list", "--tab", "installed", "-i", "Daily Notes", "-i", "Mine", "--search", "journal"])

    assert result.exit_code == 0
    assert "2  Daily Notes  (alice)\n" in result.stdout
    assert "FREE" not in result.stdout
    assert "Mine" not in result.stdout

def test_list_published(catalog_url, respx_mock):
    respx_mock.get(catalog_url).mock(return_value=httpx.Response(200, json=LISTING))

    result = runner.invoke(app, ["list", "--tab", "Published"])

    assert result.exit_code == 0
    assert "Mine" in result.stdout
    assert "Weekly Review" not in result.stdout

def test_list_nothing_found(catalog_url, respx_mock):
    respx_mock.get(catalog_url).mock(return_value=httpx.Response(200, json=LISTING))

    result = runner.invoke(app, ["list", "--search", "zzz"])

    assert result.exit_code == 0
    assert "No SmartBlocks Found." in result.stdout

def test_list_error_exits_nonzero(catalog_url, respx_mock):
    respx_mock.get(catalog_url).mock(return_value=httpx.Response(503, text="Service down"))

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1

def test_show_entry(catalog_url, respx_mock):
    record = {"id": "1", "name": "Weekly Review", "tags": ["review", "weekly"], "price": 0,
              "author": "bob", "description": "Look back on the week", "workflow": "[]"}
    respx_mock.get(catalog_url, params={"id": "1"}).mock(return_value=httpx.Response(200, json=record))

    result = runner.invoke(app, ["show", "1"])

    assert result.exit_code == 0
    assert "Weekly Review" in result.stdout
    assert "By bob  FREE" in result.stdout
    assert "Look back on the week" in result.stdout
    assert "- weekly" in result.stdout

def test_show_entry_without_description(catalog_url, respx_mock):
    record = {"id": "9", "name": "Terse", "tags": [], "author": "x"}
    respx_mock.get(catalog_url, params={"id": "9"}).mock(return_value=httpx.Response(200, json=record))

    result = runner.invoke(app, ["show", "9"])

    assert result.exit_code == 0
    assert "No Description" in result.stdout
