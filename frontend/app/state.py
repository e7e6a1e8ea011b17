# frontend/app/state.py
# Holds the per-session state of the recipient/send workflow.
# One WorkflowState lives in a gr.State per browser session, so two organizers never share a selection.

from dataclasses import dataclass, field

from .schemas import Recipient


@dataclass
class WorkflowState:
    # Recipients from the most recent successful fetch.
    recipients: list[Recipient] = field(default_factory=list)
    # Department labels known to the backend, for the filter dropdown.
    all_depts: list[str] = field(default_factory=list)
    # email -> checked, insertion ordered; keys are always emails of `recipients`.
    selected: dict[str, bool] = field(default_factory=dict)

    loading: bool = False
    sending: bool = False
    message: str = ""

    # Incremented by every fetch; a response carrying an older number is discarded.
    fetch_generation: int = 0

    def emails(self) -> list[str]:
        return [r.email for r in self.recipients if r.email]
