"""Unit tests for skicka_deploy.api.config cmd_* functions."""

from skicka_deploy.api.config.cmd_show import cmd_show
from skicka_deploy.api.config.cmd_version import cmd_version
from tests.conftest import minimal_config_dict, run_cmd, write_config


def test_show_lists_sections(deploy_root):
    write_config(minimal_config_dict(deploy_root))
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["content"] == {"sections": ["build", "service", "systemd"]}


def test_show_section(deploy_root):
    write_config(minimal_config_dict(deploy_root, listen="0.0.0.0:8080"))
    result = run_cmd(cmd_show, "service")
    assert result.success is True
    assert result.output["content"]["listen"] == "0.0.0.0:8080"


def test_show_unknown_section(deploy_root):
    write_config(minimal_config_dict(deploy_root))
    result = run_cmd(cmd_show, "nixos")
    assert result.success is False
    assert result.output["errors"] == ["Unknown section: nixos"]


def test_show_without_config():
    result = run_cmd(cmd_show, "service")
    assert result.success is False
    assert result.output["content"] == {}


def test_version():
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output["version"]
