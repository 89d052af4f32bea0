# render.py
# Turns (SubmitConfig, WorkItem) into the text handed to sbatch.
# Nothing in here touches the filesystem or runs processes.

from __future__ import annotations

import shlex
from pathlib import Path
from typing import List, Optional, Tuple

from .model import SubmitConfig, WorkItem


TOOL_COMMAND = "srun boltz predict"


def job_name(config: SubmitConfig, item: WorkItem) -> str:
    return f"{config.job_prefix}{item.stem}"


def log_paths(config: SubmitConfig, item: WorkItem) -> Tuple[str, str]:
    """Return (stdout log, stderr log) for a work item."""
    log_dir = Path(config.log_dir)
    return str(log_dir / f"{item.stem}.out"), str(log_dir / f"{item.stem}.err")


def tool_args(config: SubmitConfig, item: WorkItem) -> List[str]:
    """
    Build the `boltz predict` argument list for one input file.

    Order matters for anyone diffing against older submissions:
      input, [--use_msa_server], --cache DIR, [--preprocessing-threads N],
      [--override], [--output_format fmt]
    """
    args: List[str] = [str(item.path)]

    if config.use_msa_server:
        args.append("--use_msa_server")

    args += ["--cache", config.cache_dir]

    if config.preprocessing_threads:
        args += ["--preprocessing-threads", str(config.cpus_per_task)]

    if config.override:
        args.append("--override")

    if config.output_format:
        args += ["--output_format", config.output_format.lower()]

    return args


def directives(config: SubmitConfig, item: WorkItem) -> List[Tuple[str, Optional[str]]]:
    output_log, error_log = log_paths(config, item)
    return [
        ("--job-name", job_name(config, item)),
        ("--account", config.account),
        ("--qos", config.qos),
        ("--reservation", config.reservation),
        ("--nodelist", config.nodelist),
        ("--ntasks", str(config.ntasks)),
        ("--cpus-per-task", str(config.cpus_per_task)),
        ("--ntasks-per-node", str(config.ntasks_per_node)),
        ("--mem", config.mem),
        ("--time", config.time),
        ("--partition", config.partition),
        ("--gres", config.gres),
        ("--output", output_log),
        ("--error", error_log),
    ]


def render_header(config: SubmitConfig, item: WorkItem) -> str:
    lines = ["#!/bin/bash"]
    lines += [f"#SBATCH {k}={v}" for k, v in directives(config, item) if v is not None]
    return "\n".join(lines)


def render_body(config: SubmitConfig, item: WorkItem) -> str:
    lines = [
        "# Print job information",
        'echo "Job started at: $(date)"',
        'echo "Running on node: $(hostname)"',
        'echo "Job ID: $SLURM_JOB_ID"',
        f"echo {shlex.quote(f'YAML file: {item.path}')}",
        'echo ""',
        "",
        "# Activate conda environment and run Boltz",
    ]
    if config.module:
        lines.append(f"module load {shlex.quote(config.module)}")
    if config.conda_env:
        lines.append(f"conda activate {shlex.quote(config.conda_env)}")

    quoted = " ".join(shlex.quote(a) for a in tool_args(config, item))
    lines += [
        "",
        f"BOLTZ_ARGS=({quoted})",
        "",
        "# Run Boltz with all arguments",
        f'{TOOL_COMMAND} "${{BOLTZ_ARGS[@]}}"',
        "",
        "# Print completion",
        'echo ""',
        'echo "Job completed at: $(date)"',
        'echo "done"',
    ]
    return "\n".join(lines)


def render_descriptor(config: SubmitConfig, item: WorkItem) -> str:
    """Full job script: #SBATCH header, blank line, body."""
    return render_header(config, item) + "\n\n" + render_body(config, item) + "\n"
