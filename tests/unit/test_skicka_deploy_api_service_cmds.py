"""Unit tests for the skicka_deploy.api.service cmd_* functions."""

import platform
import subprocess
import time

import pytest

from skicka_deploy.api.service.cmd_install import cmd_install
from skicka_deploy.api.service.cmd_render import cmd_render
from skicka_deploy.api.service.cmd_start import cmd_start
from skicka_deploy.api.service.cmd_status import cmd_status
from skicka_deploy.api.service.cmd_stop import cmd_stop
from skicka_deploy.api.service.cmd_uninstall import cmd_uninstall
from skicka_deploy.api.validate_output import validate_output
from tests.conftest import FakeSystemctl, minimal_config_dict, run_cmd, write_config


@pytest.fixture
def systemctl(monkeypatch) -> FakeSystemctl:
    fake = FakeSystemctl()
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr(time, "sleep", lambda _seconds: None)
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    return fake


def test_render_end_to_end(deploy_root):
    write_config(minimal_config_dict(deploy_root, listen="0.0.0.0:8080", motto="Hello, World!"))

    result = run_cmd(cmd_render)

    assert result.success is True
    output = validate_output(cmd_render, result.output)
    assert output["enabled"] is True
    assert output["argv"][1:] == ["--listen", "0.0.0.0:8080", "--motto", "Hello, World!\r\n\r\n"]
    assert "WantedBy=multi-user.target" in output["unit"]
    assert "After=network.target" in output["unit"]
    assert output["script"].startswith("#!/bin/sh\n")
    assert (deploy_root / "state" / "skicka-test-motto.txt").read_bytes() == b"Hello, World!\r\n\r\n"


def test_render_disabled(deploy_root):
    write_config(minimal_config_dict(deploy_root, enable=False, package=None))

    result = run_cmd(cmd_render)

    assert result.success is True
    assert result.output["enabled"] is False
    assert result.output["unit"] == ""
    assert result.output["warnings"] == ["service.enable is false"]


def test_render_misconfiguration(deploy_root):
    write_config(minimal_config_dict(deploy_root, remote=["a"]))

    result = run_cmd(cmd_render)

    assert result.success is False
    assert "service.remote" in result.output["errors"][0]


def test_render_build_failure(deploy_root):
    raw = minimal_config_dict(deploy_root)
    raw["service"]["package"] = str(deploy_root / "missing")
    write_config(raw)

    result = run_cmd(cmd_render)

    assert result.success is False
    assert "Executable not found" in result.output["errors"][0]


def test_render_unwritable_state_dir(deploy_root):
    (deploy_root / "blocker").write_text("not a directory")
    raw = minimal_config_dict(deploy_root, motto="hi")
    raw["systemd"]["state_dir"] = str(deploy_root / "blocker" / "state")
    write_config(raw)

    result = run_cmd(cmd_render)

    assert result.success is False
    assert "Not a directory" in result.output["errors"][0]


def test_install(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root, remote="files.example.com:443"))

    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.output["installed"] is True
    assert result.output["unit_path"] == str(deploy_root / "units" / "skicka-test.service")
    assert (deploy_root / "units" / "skicka-test.service").exists()
    assert systemctl.verbs() == ["daemon-reload", "enable"]


def test_install_disabled_does_nothing(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root, enable=False))

    result = run_cmd(cmd_install)

    assert result.success is False
    assert "disabled" in result.result
    assert systemctl.calls == []


def test_install_build_failure_touches_nothing(systemctl, deploy_root):
    raw = minimal_config_dict(deploy_root, motto="hi")
    raw["service"]["package"] = str(deploy_root / "missing")
    write_config(raw)

    result = run_cmd(cmd_install)

    assert result.success is False
    assert systemctl.calls == []
    assert not (deploy_root / "units").exists()


def test_install_unwritable_state_dir(systemctl, deploy_root):
    (deploy_root / "blocker").write_text("not a directory")
    raw = minimal_config_dict(deploy_root, motto="hi")
    raw["systemd"]["state_dir"] = str(deploy_root / "blocker" / "state")
    write_config(raw)

    result = run_cmd(cmd_install)

    assert result.success is False
    assert result.output["installed"] is False
    assert systemctl.calls == []


def test_install_systemctl_failure(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root))
    systemctl.responses["daemon-reload"] = (1, "", "Access denied")

    result = run_cmd(cmd_install)

    assert result.success is False
    assert "Access denied" in result.output["errors"][0]


def test_install_unsupported_os(systemctl, monkeypatch, deploy_root):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    write_config(minimal_config_dict(deploy_root))

    result = run_cmd(cmd_install)

    assert result.success is False
    assert "Unsupported operating system: darwin" in result.output["errors"][0]


def test_uninstall(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root))
    run_cmd(cmd_install)

    result = run_cmd(cmd_uninstall)

    assert result.success is True
    assert result.output["uninstalled"] is True
    assert not (deploy_root / "units" / "skicka-test.service").exists()


def test_start_stop_status(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root))
    run_cmd(cmd_install)
    systemctl.responses["show"] = (0, "321\n", "")

    started = run_cmd(cmd_start)
    status = run_cmd(cmd_status)
    stopped = run_cmd(cmd_stop)

    assert started.success is True
    assert started.output["running"] is True
    assert status.output["running"] is True
    assert status.output["pid"] == 321
    assert status.output["unit_name"] == "skicka-test.service"
    assert stopped.success is True
    assert stopped.output["stopped"] is True


def test_status_not_installed(systemctl, deploy_root):
    write_config(minimal_config_dict(deploy_root))

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["installed"] is False
    assert result.output["pid"] == -1
    assert result.result == "Service is not installed"


def test_start_without_config(systemctl):
    result = run_cmd(cmd_start)
    assert result.success is False
    assert "Configuration file not found" in result.output["errors"][0]
