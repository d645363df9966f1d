"""Unit tests for CLI argument parsing and command execution."""

import json

import pytest

from ipmaclient import cli
from ipmaclient.cli import create_parser
from ipmaclient.cli import main
from ipmaclient.exceptions import NetworkError
from ipmaclient.services.ipma_service import IPMAService


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep CLI runs from reconfiguring the root logger."""
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.delenv("IPMA_CONFIG_FILE", raising=False)


@pytest.fixture
def patched_service(monkeypatch, mock_api_client):
    """Make the CLI build services around the mocked transport."""
    monkeypatch.setattr(cli, "IPMAService", lambda settings: IPMAService(api_client=mock_api_client))
    return mock_api_client


def test_global_options():
    parser = create_parser()

    args = parser.parse_args(['-v', '--format', 'json', '--log-file', 'test.log', 'locations'])

    assert args.verbose is True
    assert args.format == 'json'
    assert args.log_file == 'test.log'
    assert args.command == 'locations'


def test_forecast_requires_single_target():
    parser = create_parser()

    assert parser.parse_args(['forecast', '--district', '1']).district == 1
    assert parser.parse_args(['forecast', '--island', '41']).island == 41
    with pytest.raises(SystemExit):
        parser.parse_args(['forecast'])
    with pytest.raises(SystemExit):
        parser.parse_args(['forecast', '--district', '1', '--island', '41'])


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_locations_json(patched_service, capsys):
    assert main(['--format', 'json', 'locations']) == 0

    output = json.loads(capsys.readouterr().out)
    assert [loc["name"] for loc in output] == ["Braga", "Lisboa", "Ponta Delgada"]
    assert output[2]["type"] == "island"
    patched_service.aclose.assert_awaited_once()


def test_forecast_table(patched_service, capsys):
    assert main(['forecast', '--district', '1']) == 0

    output = capsys.readouterr().out
    assert "Braga" in output
    assert "Clear sky" in output
    patched_service.fetch_forecast.assert_awaited_once_with(1010500)


def test_init_reports_counts(patched_service, capsys):
    assert main(['--format', 'json', 'init']) == 0

    output = json.loads(capsys.readouterr().out)
    assert output == [{"weather_types": 2, "wind_speed_classes": 1, "districts": 2, "islands": 1}]


def test_unknown_location_exits_with_error(patched_service, capsys):
    assert main(['forecast', '--island', '99']) == 1
    assert capsys.readouterr().out == ""
    patched_service.fetch_forecast.assert_not_awaited()


def test_network_failure_exits_with_error(patched_service):
    patched_service.fetch_current_weather_data.side_effect = NetworkError()

    assert main(['current']) == 1


def test_invalid_config_exits_with_error(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("api:\n  timeout: never\n", encoding="utf-8")

    assert main(['--config', str(config_file), 'locations']) == 1


def test_format_results_empty():
    assert cli.format_results([], 'table') == "No results"
    assert cli.format_results([], 'json') == "[]"
