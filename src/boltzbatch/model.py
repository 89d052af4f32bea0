# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class SubmitConfig:
    """
    Everything one submission pass needs: SLURM resource requests,
    boltz options and where inputs/logs live.

    A field set to None is left out of the job descriptor.
    """
    # Where to look and where SLURM writes logs
    input_dir: str = "boltz_inputs"
    log_dir: str = "slurm_logs"
    suffix: str = ".yaml"
    job_prefix: str = "boltz_"

    # SLURM
    account: Optional[str] = "se85"
    qos: Optional[str] = "sexton01"
    reservation: Optional[str] = "sexton"
    nodelist: Optional[str] = "m3t007"
    ntasks: int = 1
    cpus_per_task: int = 8
    ntasks_per_node: int = 1
    mem: Optional[str] = "64G"
    time: Optional[str] = "01:00:00"
    partition: Optional[str] = "sexton"
    gres: Optional[str] = "gpu:1"

    # Runtime environment on the compute node
    module: Optional[str] = "miniforge3/24.3.0-0"
    conda_env: Optional[str] = "boltz2"

    # boltz predict
    cache_dir: str = "/fs04/scratch2/nx54/jmobbs/docking/cache/"
    use_msa_server: bool = False
    preprocessing_threads: bool = True  # uses cpus_per_task
    override: bool = False
    output_format: Optional[str] = "PDB"  # PDB or mmcif


@dataclass(frozen=True)
class WorkItem:
    """One input file -> one SLURM job."""
    path: Path
    suffix: str = ".yaml"

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        # Strip only the configured suffix, like `basename FILE .yaml`
        if self.suffix and self.name.endswith(self.suffix) and self.name != self.suffix:
            return self.name[: -len(self.suffix)]
        return self.name


@dataclass(frozen=True)
class SubmissionResult:
    item: WorkItem
    ok: bool
    job_id: Optional[str] = None
    exit_code: Optional[int] = None
    reason: Optional[str] = None


@dataclass
class RunSummary:
    """Outcome of a full pass over all work items."""
    config: SubmitConfig
    results: List[SubmissionResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def submitted(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)
