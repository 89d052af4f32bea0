from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

import pytest

from boltzbatch.scheduler import SubmitOutcome
from boltzbatch.ui.console import Console, set_console


@dataclass
class StubScheduler:
    """Records descriptors; fails the calls whose 1-based index is in fail_on."""
    fail_on: Set[int] = field(default_factory=set)
    stdout: str = ""
    descriptors: List[str] = field(default_factory=list)

    def submit(self, descriptor: str) -> SubmitOutcome:
        self.descriptors.append(descriptor)
        n = len(self.descriptors)
        if n in self.fail_on:
            return SubmitOutcome(exit_code=1, stderr="sbatch: error: Batch job submission failed")
        return SubmitOutcome(exit_code=0, stdout=self.stdout or f"Submitted batch job {1000 + n}\n")


@pytest.fixture
def make_scheduler():
    return StubScheduler


@pytest.fixture
def stub_scheduler(make_scheduler):
    return make_scheduler()


@pytest.fixture(autouse=True)
def fresh_console():
    set_console(Console())
    yield


@pytest.fixture
def input_dir(tmp_path):
    d = tmp_path / "boltz_inputs"
    d.mkdir()
    for name in ("c.yaml", "a.yaml", "b.yaml"):
        (d / name).write_text("version: 1\n")
    (d / "notes.txt").write_text("ignored\n")
    (d / ".hidden.yaml").write_text("version: 1\n")
    (d / "._a.yaml").write_text("\x00\x05")
    (d / "nested.yaml").mkdir()
    return d
