"""Run workflows."""

from jobfetch.workflows.daily import DailyFetchWorkflow, RunOutcome

__all__ = ["DailyFetchWorkflow", "RunOutcome"]
