# frontend/app/workflow.py
# The recipient/send workflow without any Gradio dependency:
# fetching the list, the selection controller, and order submission.
# handlers.py wraps these functions for the UI; the tests drive them directly.

import logging

from . import api_client
from .errors import FetchError, NoRecipientsSelected, SendError
from .schemas import RecipientList, sanitize_link, validate_form
from .state import WorkflowState

logger = logging.getLogger(__name__)

SENDING_MESSAGE = "寄送中…"


# --- Recipient fetching ---

def begin_fetch(state: WorkflowState) -> int:
    """Marks the state as loading and returns the generation number tagging this fetch."""
    state.fetch_generation += 1
    state.loading = True
    state.message = ""
    return state.fetch_generation


def apply_fetch_result(state: WorkflowState, generation: int, result: RecipientList) -> bool:
    """
    Replaces the list, departments and selection wholesale.
    Returns False (and changes nothing) if a newer fetch has started since `generation`.
    """
    if generation != state.fetch_generation:
        logger.info(f"Discarding stale recipient list (generation {generation}, current {state.fetch_generation}).")
        return False
    state.recipients = list(result.recipients)
    state.all_depts = list(result.all_depts)
    # Recipients flagged active by the backend start out checked.
    state.selected = {r.email: True for r in state.recipients if r.email and r.active}
    state.loading = False
    return True


def apply_fetch_error(state: WorkflowState, generation: int, error: FetchError) -> bool:
    """Records the failure message; the previous list and selection are left untouched."""
    if generation != state.fetch_generation:
        return False
    state.message = error.message
    state.loading = False
    return True


def fetch_recipients(state: WorkflowState, base: str, dept: str | None = None, keyword: str | None = None) -> bool:
    """
    Fetches the (optionally filtered) recipient list into `state`.
    Re-raises FetchError after recording it on the state.
    """
    generation = begin_fetch(state)
    try:
        result = api_client.get_recipients(base, dept, keyword)
    except FetchError as e:
        apply_fetch_error(state, generation, e)
        raise
    return apply_fetch_result(state, generation, result)


# --- Selection controller ---

def toggle_one(state: WorkflowState, email: str, on: bool) -> None:
    if email not in state.emails():
        logger.debug(f"Ignoring toggle for {email!r}: not in the current recipient list.")
        return
    state.selected[email] = bool(on)


def toggle_all(state: WorkflowState, on: bool) -> None:
    """Checks or unchecks every recipient of the current list, and only those."""
    for email in state.emails():
        state.selected[email] = bool(on)


def sync_selection(state: WorkflowState, chosen_emails) -> None:
    """Applies the checkbox group's value as individual toggles, only where the state changed."""
    chosen = set(chosen_emails or [])
    for email in state.emails():
        checked = email in chosen
        if bool(state.selected.get(email)) != checked:
            toggle_one(state, email, checked)


def any_selected(state: WorkflowState) -> bool:
    return any(state.selected.get(email) for email in state.emails())


def selected_emails(state: WorkflowState) -> list[str]:
    return [email for email, checked in state.selected.items() if checked]


def can_submit(state: WorkflowState) -> bool:
    return not (state.loading or state.sending)


# --- Submission ---

def prepare_order(state: WorkflowState, vendor, link, deadline, note, bcc_mode: bool) -> dict:
    """
    Validates the form and the selection, then builds the sendmail payload.
    Raises FormValidationError or NoRecipientsSelected; never touches the network.
    """
    form = validate_form(vendor, link, deadline, note)

    if not any_selected(state):
        state.message = NoRecipientsSelected.default_message
        raise NoRecipientsSelected()

    form = form.model_copy(update={"link": sanitize_link(form.link)})
    return api_client.build_send_payload(form, state.selected, bcc_mode)


def send_order(state: WorkflowState, base: str, payload: dict) -> str:
    """Posts the payload, holding `sending` for the duration. Raises SendError on failure."""
    state.sending = True
    state.message = SENDING_MESSAGE
    try:
        message = api_client.post_sendmail(base, payload)
    except SendError as e:
        state.message = e.message
        raise
    finally:
        state.sending = False

    state.message = message
    return message


def submit_order(state: WorkflowState, base: str, vendor, link, deadline, note, bcc_mode: bool) -> str:
    """prepare_order() followed by send_order(); returns the success message."""
    payload = prepare_order(state, vendor, link, deadline, note, bcc_mode)
    return send_order(state, base, payload)
