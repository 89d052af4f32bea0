from __future__ import annotations

import errno
import os
import subprocess

import pytest

from boltzbatch import scheduler as scheduler_mod
from boltzbatch.scheduler import COMMAND_NOT_FOUND, NOT_EXECUTABLE, SbatchScheduler, parse_job_id


@pytest.mark.parametrize(
    "stdout, expected",
    [
        ("Submitted batch job 12345\n", "12345"),
        ("12345;cluster\n", "12345"),
        ("", None),
        ("   \n", None),
        ("sbatch: error: something odd", None),
    ],
)
def test_parse_job_id(stdout, expected):
    assert parse_job_id(stdout) == expected


def test_sbatch_gets_descriptor_on_stdin(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, 0, stdout="Submitted batch job 7\n", stderr="")

    monkeypatch.setattr(scheduler_mod.subprocess, "run", fake_run)

    outcome = SbatchScheduler().submit("#!/bin/bash\necho hi\n")

    assert outcome.ok
    assert outcome.stdout == "Submitted batch job 7\n"
    cmd, kwargs = calls[0]
    assert cmd == ["sbatch"]
    assert kwargs["input"] == "#!/bin/bash\necho hi\n"
    assert kwargs["text"] is True
    assert kwargs["errors"] == "replace"


def test_sbatch_nonzero_exit(monkeypatch):
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="sbatch: error: Invalid account\n")

    monkeypatch.setattr(scheduler_mod.subprocess, "run", fake_run)

    outcome = SbatchScheduler(command="/opt/slurm/bin/sbatch").submit("x")
    assert not outcome.ok
    assert outcome.exit_code == 1
    assert "Invalid account" in outcome.stderr


def test_missing_binary_is_a_failed_outcome(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(scheduler_mod.subprocess, "run", fake_run)

    outcome = SbatchScheduler(command="sbatch").submit("x")
    assert outcome.exit_code == COMMAND_NOT_FOUND
    assert "command not found" in outcome.stderr


def test_non_executable_binary_is_a_failed_outcome(tmp_path):
    sbatch = tmp_path / "sbatch"
    sbatch.write_text("#!/bin/sh\necho 'Submitted batch job 1'\n")
    os.chmod(sbatch, 0o644)

    outcome = SbatchScheduler(command=str(sbatch)).submit("x")
    assert not outcome.ok
    assert outcome.exit_code == NOT_EXECUTABLE
    assert str(sbatch) in outcome.stderr


def test_other_os_errors_are_failed_outcomes(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise OSError(errno.ENOEXEC, "Exec format error")

    monkeypatch.setattr(scheduler_mod.subprocess, "run", fake_run)

    outcome = SbatchScheduler(command="sbatch").submit("x")
    assert outcome.exit_code == NOT_EXECUTABLE
    assert "Exec format error" in outcome.stderr


def test_undecodable_output_does_not_raise(tmp_path):
    sbatch = tmp_path / "sbatch"
    sbatch.write_text("#!/bin/sh\ncat > /dev/null\nprintf 'Submitted batch job 1\\n\\377\\n'\n")
    os.chmod(sbatch, 0o755)

    outcome = SbatchScheduler(command=str(sbatch)).submit("#!/bin/bash\n")
    assert outcome.ok
    assert outcome.stdout.startswith("Submitted batch job 1\n")
    assert "�" in outcome.stdout
    assert parse_job_id(outcome.stdout) is None
