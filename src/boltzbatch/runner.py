# runner.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .model import RunSummary, SubmissionResult, SubmitConfig, WorkItem
from .render import render_descriptor
from .scheduler import Scheduler, SbatchScheduler, parse_job_id
from .ui.console import get_console


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

class BatchError(Exception):
    """Fatal error: the run stops before anything is submitted."""


@dataclass
class InputDirectoryNotFound(BatchError):
    path: str

    def __str__(self) -> str:
        return f"Directory '{self.path}' not found"


@dataclass
class NoInputFiles(BatchError):
    path: str
    suffix: str

    def __str__(self) -> str:
        return f"No {self.suffix} files found in '{self.path}'"


# ----------------------------------------------------------------------
# Discovery
# ----------------------------------------------------------------------

def discover_inputs(config: SubmitConfig) -> List[WorkItem]:
    """
    List the input files for one pass.

    Only regular, non-hidden files directly inside config.input_dir ending
    in config.suffix are picked up (what a shell `*.yaml` glob would see);
    the result is sorted by file name.

    Raises:
      InputDirectoryNotFound: input_dir is missing or not a directory
      NoInputFiles: nothing matched
    """
    input_dir = Path(config.input_dir)
    if not input_dir.is_dir():
        raise InputDirectoryNotFound(path=config.input_dir)

    items = [
        WorkItem(path=p, suffix=config.suffix)
        for p in sorted(input_dir.iterdir(), key=lambda p: p.name)
        if p.is_file() and not p.name.startswith(".") and p.name.endswith(config.suffix)
    ]

    if not items:
        raise NoInputFiles(path=config.input_dir, suffix=config.suffix)

    return items


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def submit_item(config: SubmitConfig, item: WorkItem, scheduler: Scheduler) -> SubmissionResult:
    """
    Render and submit one job. Never raises for scheduler-side problems;
    a rejected or unreadable submission comes back as ok=False.
    """
    outcome = scheduler.submit(render_descriptor(config, item))

    if not outcome.ok:
        reason = (outcome.stderr or outcome.stdout).strip() or "submission failed"
        return SubmissionResult(item=item, ok=False, exit_code=outcome.exit_code, reason=reason)

    job_id = parse_job_id(outcome.stdout)
    if job_id is None:
        return SubmissionResult(
            item=item,
            ok=False,
            exit_code=outcome.exit_code,
            reason=f"unparseable scheduler output: {outcome.stdout.strip()!r}",
        )

    return SubmissionResult(item=item, ok=True, job_id=job_id, exit_code=outcome.exit_code)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def submit_batch(config: SubmitConfig, scheduler: Scheduler | None = None) -> RunSummary:
    """
    Submit one SLURM job per input file, one at a time, in order.

    A failed submission is recorded and the loop moves on; there are no
    retries. Fatal precondition errors are raised before the log directory
    is created or the scheduler is called.
    """
    console = get_console()
    if scheduler is None:
        scheduler = SbatchScheduler()

    items = discover_inputs(config)

    Path(config.log_dir).mkdir(parents=True, exist_ok=True)
    console.print_banner(config, len(items))

    summary = RunSummary(config=config)
    for item in items:
        result = submit_item(config, item, scheduler)
        summary.results.append(result)
        console.print_result(result)

    return summary


def preview_batch(config: SubmitConfig) -> List[WorkItem]:
    """Render every job script and print it; nothing is submitted."""
    console = get_console()
    items = discover_inputs(config)
    for item in items:
        console.print_descriptor(item.name, render_descriptor(config, item))
    console.print_info(f"\n{len(items)} job script(s) rendered, nothing submitted")
    return items
