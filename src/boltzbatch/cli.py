# cli.py
from __future__ import annotations

import sys

import click

from boltzbatch.config import DEFAULT_CONFIG, ConfigError, load_config, with_overrides
from boltzbatch.runner import InputDirectoryNotFound, NoInputFiles, preview_batch, submit_batch
from boltzbatch.scheduler import SbatchScheduler
from boltzbatch.ui.console import Console, get_console, set_console


@click.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    envvar="BOLTZBATCH_CONFIG",
    help="Python config file defining CONFIG or config() (defaults to built-in settings)",
)
@click.option("--input-dir", default=None, help="Directory holding the *.yaml inputs")
@click.option("--log-dir", default=None, help="Directory for SLURM .out/.err logs")
@click.option("--sbatch", "sbatch_cmd", default="sbatch", show_default=True, help="Submission command")
@click.option("--dry-run", is_flag=True, default=False, help="Print job scripts instead of submitting")
@click.option(
    "--strict/--no-strict",
    default=False,
    show_default=True,
    help="Exit 1 if any submission failed",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(config_path, input_dir, log_dir, sbatch_cmd, dry_run, strict, debug):
    """Submit one SLURM job running `boltz predict` per YAML input."""
    console = Console(debug=debug)
    set_console(console)

    try:
        config = load_config(config_path) if config_path else DEFAULT_CONFIG
        config = with_overrides(config, input_dir=input_dir, log_dir=log_dir)
        console.print_debug(f"Effective config: {config}")

        if dry_run:
            preview_batch(config)
            return

        summary = submit_batch(config, SbatchScheduler(command=sbatch_cmd))
        console.print_summary(summary)

        if strict and summary.failed:
            sys.exit(1)

    except InputDirectoryNotFound as e:
        console.print_error(
            "Input directory not found",
            str(e),
            suggestion="Create it or point elsewhere:\n  boltzbatch --input-dir path/to/yamls",
        )
        sys.exit(1)
    except NoInputFiles as e:
        console.print_error(
            "No input files",
            str(e),
            suggestion="Nothing was submitted.",
        )
        sys.exit(1)
    except ConfigError as e:
        console.print_error("Failed to load config", str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        get_console().print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


if __name__ == "__main__":
    cli()
