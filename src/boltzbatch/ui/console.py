"""Console output formatting utilities for boltzbatch."""

from __future__ import annotations

import sys
from typing import Optional

from ..model import RunSummary, SubmissionResult, SubmitConfig


RULE = "=" * 60


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def _out(self, message: str = "") -> None:
        # flush so operators can follow long batches live
        print(message, flush=True)

    def print_banner(self, config: SubmitConfig, file_count: int) -> None:
        """Print run start information."""
        self._out(RULE)
        self._out("BOLTZ SLURM JOB SUBMITTER")
        self._out(RULE)
        self._out(f"Found {file_count} YAML files in {config.input_dir}")
        self._out(f"Log directory: {config.log_dir}/")
        self._out(f"Cache directory: {config.cache_dir}")
        self._out(RULE)
        self._out()

    def print_result(self, result: SubmissionResult) -> None:
        """Print one line per submission, as soon as it is known."""
        if result.ok:
            self._out(f"✓ Submitted: {result.item.name} (Job ID: {result.job_id})")
            return
        self._out(f"✗ Failed: {result.item.name}")
        if self.debug and result.reason:
            self.print_debug(f"{result.item.name}: {result.reason} (exit={result.exit_code})")

    def print_summary(self, summary: RunSummary) -> None:
        """Print final results summary and the effective boltz options."""
        config = summary.config
        self._out()
        self._out(RULE)
        self._out("SUBMISSION SUMMARY")
        self._out(RULE)
        self._out(f"Successfully submitted: {summary.submitted} jobs")
        self._out(f"Failed submissions: {summary.failed} jobs")
        self._out()
        self._out("Boltz command configuration:")
        self._out(
            f"  Processing threads: {_flag(config.preprocessing_threads)} "
            f"(CPUs: {config.cpus_per_task})"
        )
        self._out(f"  Override: {_flag(config.override)}")
        self._out(f"  Output format: {config.output_format or ''}")
        self._out(f"  MSA server: {'enabled' if config.use_msa_server else 'disabled'}")
        self._out(RULE)
        self._out()
        self._out("Monitor jobs with: squeue -u $USER")
        self._out(f"View logs in: {config.log_dir}/")
        self._out(RULE)

    def print_descriptor(self, name: str, descriptor: str) -> None:
        """Print a rendered job script (dry run)."""
        self._out(f"\n# ---- {name} ----")
        self._out(descriptor.rstrip("\n"))

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        self._out(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


def _flag(value: bool) -> str:
    return "true" if value else "false"


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
