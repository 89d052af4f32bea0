from .model import SubmitConfig, WorkItem, SubmissionResult, RunSummary
from .runner import submit_batch, preview_batch, discover_inputs
from .scheduler import SbatchScheduler, SubmitOutcome

__all__ = [
    "SubmitConfig",
    "WorkItem",
    "SubmissionResult",
    "RunSummary",
    "submit_batch",
    "preview_batch",
    "discover_inputs",
    "SbatchScheduler",
    "SubmitOutcome",
]
