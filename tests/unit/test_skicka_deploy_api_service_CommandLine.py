"""Unit tests for skicka_deploy.api.service.CommandLine."""

import shutil
import subprocess
from pathlib import Path

import pytest

from skicka_deploy.api.service.CommandLine import CommandLine, FileContents
from tests.conftest import make_executable


def test_executable_is_first_arg():
    assert CommandLine(args=("/bin/skicka", "--listen", "x:1")).executable == "/bin/skicka"


def test_executable_must_be_literal(tmp_path):
    with pytest.raises(TypeError):
        CommandLine(args=(FileContents(tmp_path / "x"),)).executable  # noqa: B018


def test_render_shell_quotes_literals():
    command = CommandLine(args=("/opt/my skicka/skicka", "--listen", "0.0.0.0:8080"))
    assert command.render_shell() == "exec '/opt/my skicka/skicka' --listen 0.0.0.0:8080"


def test_render_shell_reads_file_arguments(tmp_path):
    motto = tmp_path / "motto.txt"
    command = CommandLine(args=("/bin/skicka", "--motto", FileContents(motto)))
    lines = command.render_shell().splitlines()
    assert lines[0] == f'arg2="$(cat -- {motto}; printf .)"'
    assert lines[1] == 'exec /bin/skicka --motto "${arg2%.}"'


def test_materialize_reads_current_file_contents(tmp_path):
    motto = tmp_path / "motto.txt"
    command = CommandLine(args=("/bin/skicka", "--motto", FileContents(motto)))
    motto.write_bytes(b"v1\r\n\r\n")
    assert command.materialize() == ["/bin/skicka", "--motto", "v1\r\n\r\n"]
    motto.write_bytes(b"v2\r\n\r\n")
    assert command.materialize()[-1] == "v2\r\n\r\n"


def test_materialize_missing_file(tmp_path):
    command = CommandLine(args=("/bin/skicka", "--motto", FileContents(tmp_path / "missing")))
    with pytest.raises(FileNotFoundError):
        command.materialize()


@pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
@pytest.mark.timeout(10)
def test_shell_passes_same_argv_as_materialize(tmp_path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    # Records each argument it receives into its own file
    binary = make_executable(
        tmp_path / "skicka",
        f'i=0\nfor a in "$@"; do printf "%s" "$a" > "{out_dir}/$i"; i=$((i+1)); done\n',
    )
    motto = tmp_path / "motto.txt"
    motto.write_bytes(b"Hello, World!\r\n\r\n")
    command = CommandLine(args=(str(binary), "--listen", "0.0.0.0:8080", "--motto", FileContents(motto)))

    subprocess.run(["sh", "-c", command.render_shell()], check=True)

    received = [(out_dir / str(i)).read_bytes().decode() for i in range(4)]
    assert received == command.materialize()[1:]
    assert received[-1] == "Hello, World!\r\n\r\n"
