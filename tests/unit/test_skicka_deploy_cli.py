"""CLI tests for the skicka-deploy command."""

import json

from typer.testing import CliRunner

from skicka_deploy.cli import main
from skicka_deploy.cli._create_app import _create_app
from tests.conftest import minimal_config_dict, write_config

runner = CliRunner()


def test_help_lists_domains():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    for name in ("build", "service", "config"):
        assert name in result.stdout


def test_render_json(deploy_root):
    write_config(minimal_config_dict(deploy_root, listen="0.0.0.0:8080"))

    result = runner.invoke(_create_app(), ["--display", "json", "service", "render"])

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["argv"][1:] == ["--listen", "0.0.0.0:8080"]
    assert "WantedBy=multi-user.target" in output["unit"]


def test_render_yaml_is_default(deploy_root):
    write_config(minimal_config_dict(deploy_root))

    result = runner.invoke(_create_app(), ["service", "render"])

    assert result.exit_code == 0
    assert "enabled: true" in result.stdout


def test_failure_exit_code():
    result = runner.invoke(_create_app(), ["config", "show", "service"])
    assert result.exit_code == 1


def test_invalid_display():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "version"])
    assert result.exit_code == 1


def test_main_returns_exit_code(deploy_root, capsys):
    write_config(minimal_config_dict(deploy_root))
    assert main(["-d", "json", "config", "show", "systemd"]) == 0
    assert json.loads(capsys.readouterr().out)["content"]["unit_name"] == "skicka-test.service"
    assert main(["config", "show", "nixos"]) == 1


def test_main_usage_error():
    assert main(["service", "frobnicate"]) == 2
