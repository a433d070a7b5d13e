"""Shared pytest configuration and fixtures for all tests."""

import json
import stat
import subprocess
from pathlib import Path

import pytest

from skicka_deploy.api.config.SkickaDeployConfig import SkickaDeployConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without host side effects")
    config.addinivalue_line("markers", "integration: tests that spawn real processes")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def make_executable(path: Path, body: str = "exit 0\n") -> Path:
    """Write a small shell script and mark it executable."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def minimal_config_dict(root: Path, **service: object) -> dict:
    """Minimal valid configuration with a pre-built fake skicka under ``root``.

    Keyword arguments override keys of the service section.
    """
    binary = make_executable(root / "bin" / "skicka")
    service_section = {
        "enable": True,
        "package": str(binary),
        "listen": None,
        "remote": None,
        "motto": None,
    }
    service_section.update(service)
    return {
        "build": {"source_dir": str(root / "src")},
        "service": service_section,
        "systemd": {
            "unit_name": "skicka-test.service",
            "unit_dir": str(root / "units"),
            "state_dir": str(root / "state"),
        },
    }


def write_config(config_dict: dict) -> Path:
    """Write a config dict to the active SKICKA_DEPLOY_HOME."""
    path = SkickaDeployConfig.get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_dict), encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeSystemctl:
    """Stands in for subprocess.run; records systemctl calls and answers from a table keyed by verb."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.responses: dict[str, tuple[int, str, str]] = {}

    def __call__(self, cmd, check=False, **kwargs):
        self.calls.append(cmd)
        verb = next(arg for arg in cmd[1:] if not arg.startswith("--"))
        returncode, stdout, stderr = self.responses.get(verb, (0, "", ""))
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    def verbs(self) -> list[str]:
        return [next(arg for arg in cmd[1:] if not arg.startswith("--")) for cmd in self.calls]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def skicka_home(tmp_path, monkeypatch) -> Path:
    """Point SKICKA_DEPLOY_HOME at a per-test directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("SKICKA_DEPLOY_HOME", str(home))
    return home


@pytest.fixture
def deploy_root(tmp_path) -> Path:
    root = tmp_path / "deploy"
    root.mkdir()
    return root


@pytest.fixture
def config_dict(deploy_root) -> dict:
    return minimal_config_dict(deploy_root)


@pytest.fixture
def deploy_config(config_dict) -> SkickaDeployConfig:
    """A validated config that is also saved as the active config file."""
    write_config(config_dict)
    return SkickaDeployConfig.from_dict(config_dict)
