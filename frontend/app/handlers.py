# frontend/app/handlers.py
# The "controller" layer: Gradio callbacks that call into workflow.py / api_client.py
# and translate results and errors into component updates and status strings.
# No exception escapes a callback; every failure ends up as a message on screen.

import logging

import gradio as gr
import pandas as pd
import requests

from . import api_client
from . import workflow
from .config import config
from .datetime_picker import compose_deadline, format_deadline
from .errors import FetchError, FormValidationError, NoRecipientsSelected, SendError
from .schemas import DEPT_ALL_VALUE, REQUIRED_MESSAGE
from .state import WorkflowState
from .ui import DEPT_ALL_LABEL, RECIPIENT_COLUMNS

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "載入中…"

# --- UI Logic & Helper Functions ---

def format_status(message: str) -> str:
    """Decorates the status string the same way for every outcome."""
    if not message:
        return ""
    if "成功" in message:
        return f"✅ {message}"
    if "失敗" in message:
        return f"🔴 {message}"
    return message


def field_error(message: str | None) -> str:
    return f"⚠️ {message}" if message else ""


def submit_button_update(state: WorkflowState):
    return gr.update(interactive=workflow.can_submit(state))


def recipient_view(state: WorkflowState):
    """Renders the current list as (table, checkbox group update, department dropdown update)."""
    rows = [
        {"姓名": r.name, "Email": r.email, "部門": r.dept or "-", "備註": r.note or ""}
        for r in state.recipients
    ]
    df = pd.DataFrame(rows, columns=RECIPIENT_COLUMNS)
    checks_update = gr.update(
        choices=[(r.choice_label(), r.email) for r in state.recipients if r.email],
        value=[email for email in state.emails() if state.selected.get(email)]
    )
    dept_update = gr.update(choices=[(DEPT_ALL_LABEL, DEPT_ALL_VALUE)] + [(d, d) for d in state.all_depts])
    return df, checks_update, dept_update

# --- Gradio Callback Handlers ---

def check_endpoint_config():
    """Callback to report on load whether the Apps Script endpoint is configured."""
    if config.is_configured:
        return "🟢 已設定 Apps Script 服務網址"
    return "🔴 尚未設定 Apps Script 服務網址，請以 --apps-script-url 或 APPS_SCRIPT_BASE 指定"


def handle_fetch_recipients(state: WorkflowState, dept=DEPT_ALL_VALUE, keyword=""):
    """
    Callback for the initial load and the '套用篩選' button.
    Outputs: state, table, checkbox group, department dropdown, status, submit button.
    On failure the previous list and selection stay on screen.
    """
    yield state, gr.update(), gr.update(), gr.update(), LOADING_MESSAGE, gr.update(interactive=False)

    try:
        workflow.fetch_recipients(state, config.APPS_SCRIPT_BASE, dept, (keyword or "").strip())
    except FetchError as e:
        gr.Warning(e.message)
        yield state, gr.update(), gr.update(), gr.update(), format_status(state.message), submit_button_update(state)
        return

    df, checks_update, dept_update = recipient_view(state)
    yield state, df, checks_update, dept_update, format_status(state.message), submit_button_update(state)


def handle_selection_change(state: WorkflowState, chosen_emails):
    """Callback for user edits of the recipient checkbox group."""
    workflow.sync_selection(state, chosen_emails)
    return state


def handle_toggle_all(on: bool, state: WorkflowState):
    """Callback for '全選' / '全不選'; main.py binds `on` with functools.partial."""
    workflow.toggle_all(state, on)
    return state, gr.update(value=[email for email in state.emails() if state.selected.get(email)])


def handle_deadline_change(day, time_text):
    """Recomposes the deadline whenever the day or the time changes. Outputs: value, display, error."""
    deadline = compose_deadline(day, time_text, config.TIMEZONE)
    return deadline, format_deadline(deadline), field_error(None if deadline else REQUIRED_MESSAGE)


def handle_submit(state: WorkflowState, vendor, link, deadline, note, bcc_mode):
    """
    Callback for '送出並寄信'.
    Outputs: state, vendor error, link error, deadline error, status, submit button.
    Validation and the recipient check happen before anything is sent.
    """
    try:
        payload = workflow.prepare_order(state, vendor, link, deadline, note, bcc_mode)
    except FormValidationError as e:
        errors = e.field_errors
        yield (
            state,
            field_error(errors.get("vendor")),
            field_error(errors.get("link")),
            field_error(errors.get("deadline")),
            gr.update(),
            submit_button_update(state),
        )
        return
    except NoRecipientsSelected as e:
        gr.Warning(e.message)
        yield state, "", "", "", format_status(e.message), submit_button_update(state)
        return

    yield state, "", "", "", format_status(workflow.SENDING_MESSAGE), gr.update(interactive=False)

    try:
        message = workflow.send_order(state, config.APPS_SCRIPT_BASE, payload)
        gr.Info(message)
    except SendError as e:
        gr.Warning(e.message)

    yield state, "", "", "", format_status(state.message), submit_button_update(state)


def handle_signup(email):
    """Callback for the legacy sign-up form."""
    email = (email or "").strip()
    if "@" not in email:
        msg = "請輸入有效的 Email！"
        gr.Warning(msg)
        return msg
    try:
        payload = api_client.post_signup(config.APPS_SCRIPT_BASE, email)
    except requests.RequestException as e:
        logger.error(f"Sign-up post failed for {email}: {e}")
        msg = f"🔴 送出失敗: {e}"
        gr.Warning(msg)
        return msg
    return f"✅ 已送出：{payload['email']}"
