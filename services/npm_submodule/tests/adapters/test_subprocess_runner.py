import os
import subprocess
import sys
from pathlib import Path

import pytest

from npm_submodule.adapters.command_runner import subprocess_runner
from npm_submodule.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from npm_submodule.adapters.errors import CommandNotFound, CommandSpawnError


def test_runner_passes_cwd_and_captures_streams(tmp_path, monkeypatch):
    calls = []

    def _fake_run(argv, **kwargs):
        calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, 0, stdout=b"out", stderr=b"")

    monkeypatch.setattr(subprocess_runner.shutil, "which", lambda program: f"/usr/bin/{program}")
    monkeypatch.setattr(subprocess_runner.subprocess, "run", _fake_run)
    result = SubprocessCommandRunner().run("npm", ["run", "clean"], tmp_path)

    assert result.exit_code == 0
    assert result.stdout == b"out"
    assert result.stderr == b""
    argv, kwargs = calls[0]
    assert argv == ["/usr/bin/npm", "run", "clean"]
    assert kwargs["cwd"] == tmp_path
    assert kwargs["stdin"] == subprocess.DEVNULL
    assert kwargs["stdout"] == subprocess.PIPE
    assert kwargs["stderr"] == subprocess.PIPE
    assert "timeout" not in kwargs


def test_runner_reports_nonzero_exit_without_raising(tmp_path):
    result = SubprocessCommandRunner().run(
        sys.executable,
        ["-c", "import sys; sys.stderr.write('boom'); sys.exit(4)"],
        tmp_path,
    )
    assert result.exit_code == 4
    assert result.stdout == b""
    assert result.stderr == b"boom"


def test_runner_runs_in_working_directory(tmp_path):
    result = SubprocessCommandRunner().run(
        sys.executable, ["-c", "import os; print(os.getcwd(), end='')"], tmp_path
    )
    assert Path(result.stdout.decode()).resolve() == tmp_path.resolve()


def test_runner_closes_stdin(tmp_path):
    result = SubprocessCommandRunner().run(
        sys.executable, ["-c", "import sys; print(repr(sys.stdin.read()), end='')"], tmp_path
    )
    assert result.stdout == b"''"


def test_missing_executable_raises(tmp_path):
    with pytest.raises(CommandNotFound) as exc:
        SubprocessCommandRunner().run("definitely-not-a-real-npm", ["install"], tmp_path)
    assert exc.value.details == {"program": "definitely-not-a-real-npm"}


def test_spawn_failure_is_wrapped(tmp_path, monkeypatch):
    def _boom(argv, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(subprocess_runner.shutil, "which", lambda program: "/usr/bin/npm")
    monkeypatch.setattr(subprocess_runner.subprocess, "run", _boom)
    with pytest.raises(CommandSpawnError) as exc:
        SubprocessCommandRunner().run("npm", ["install"], tmp_path)
    assert isinstance(exc.value.cause, PermissionError)


@pytest.mark.skipif(os.name == "nt", reason="uses a POSIX shell script")
def test_relative_path_entry_resolves_before_changing_directory(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "fakenpm"
    script.write_text('#!/bin/sh\nprintf "%s" "$*"\n')
    script.chmod(0o755)
    (tmp_path / "node_modules" / "foo").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PATH", "bin" + os.pathsep + os.environ.get("PATH", ""))

    result = SubprocessCommandRunner().run("fakenpm", ["run", "clean"], Path("node_modules/foo"))

    assert result.exit_code == 0
    assert result.stdout == b"run clean"
