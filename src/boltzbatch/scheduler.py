# scheduler.py
# Thin wrapper around the SLURM submission CLI.
# The rest of the codebase only sees Scheduler.submit(descriptor) -> SubmitOutcome,
# so tests can swap in a stub without spawning anything.

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol


# What a shell reports when the binary is missing or cannot be run
COMMAND_NOT_FOUND = 127
NOT_EXECUTABLE = 126

# "Submitted batch job 12345" or, with --parsable, "12345;cluster"
_JOB_ID_RE = re.compile(r"^\d+(;\S+)?$")


@dataclass(frozen=True)
class SubmitOutcome:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Scheduler(Protocol):
    def submit(self, descriptor: str) -> SubmitOutcome:
        ...


class SbatchScheduler:
    """Submit job scripts by piping them to `sbatch` on stdin."""

    def __init__(self, command: str = "sbatch"):
        self.command = command

    def submit(self, descriptor: str) -> SubmitOutcome:
        try:
            proc = subprocess.run(
                [self.command],
                input=descriptor,
                text=True,
                errors="replace",
                capture_output=True,
                check=False,
            )
        except FileNotFoundError:
            return SubmitOutcome(
                exit_code=COMMAND_NOT_FOUND,
                stderr=f"{self.command}: command not found",
            )
        except PermissionError as e:
            return SubmitOutcome(exit_code=NOT_EXECUTABLE, stderr=f"{self.command}: {e.strerror}")
        except OSError as e:
            return SubmitOutcome(exit_code=NOT_EXECUTABLE, stderr=f"{self.command}: {e}")

        return SubmitOutcome(
            exit_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )


def parse_job_id(stdout: str) -> Optional[str]:
    """
    Pull the job id out of sbatch output (last whitespace-delimited token).

    Returns None if there is no output or the last token is not a job id.
    """
    tokens = (stdout or "").split()
    if not tokens:
        return None
    last = tokens[-1]
    if not _JOB_ID_RE.match(last):
        return None
    return last.split(";", 1)[0]
