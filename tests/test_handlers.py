"""Tests for the Gradio callbacks: outputs and status strings, with the network patched out."""

import datetime
from unittest.mock import patch

import pytest

from frontend.app import handlers
from frontend.app.datetime_picker import PLACEHOLDER
from frontend.app.errors import FetchError
from frontend.app.state import WorkflowState

DEADLINE = datetime.datetime(2025, 3, 4, 15, 30, tzinfo=datetime.timezone.utc)

pytestmark = pytest.mark.filterwarnings("ignore::UserWarning")


def test_format_status():
    assert handlers.format_status("") == ""
    assert handlers.format_status("寄送成功") == "✅ 寄送成功"
    assert handlers.format_status("寄送失敗") == "🔴 寄送失敗"
    assert handlers.format_status("寄送中…") == "寄送中…"


def test_fetch_handler_shows_loading_then_list(recipient_list):
    state = WorkflowState()
    with patch("frontend.app.workflow.api_client.get_recipients", return_value=recipient_list):
        outputs = list(handlers.handle_fetch_recipients(state, "ALL", "  "))

    loading, final = outputs
    assert loading[4] == handlers.LOADING_MESSAGE
    assert loading[5]["interactive"] is False

    _, df, checks, dept, status, submit = final
    assert list(df["Email"]) == ["alice@corp.test", "bob@corp.test", "carol@corp.test"]
    assert list(df["部門"]) == ["RD", "HR", "RD"]
    assert checks["value"] == ["alice@corp.test", "carol@corp.test"]
    assert [value for _, value in dept["choices"]] == ["ALL", "RD", "HR"]
    assert status == ""
    assert submit["interactive"] is True


def test_fetch_handler_failure_leaves_list_on_screen(loaded_state):
    with patch("frontend.app.workflow.api_client.get_recipients", side_effect=FetchError("讀取名單失敗：offline")):
        outputs = list(handlers.handle_fetch_recipients(loaded_state, "RD", ""))

    state, df_update, checks_update, _, status, submit = outputs[-1]
    assert df_update == {"__type__": "update"}
    assert checks_update == {"__type__": "update"}
    assert status == "🔴 讀取名單失敗：offline"
    assert submit["interactive"] is True
    assert len(state.recipients) == 3


def test_toggle_all_handler_updates_checkbox_value(loaded_state):
    state, checks = handlers.handle_toggle_all(True, loaded_state)

    assert checks["value"] == ["alice@corp.test", "bob@corp.test", "carol@corp.test"]


def test_deadline_handler_reports_incomplete_time():
    assert handlers.handle_deadline_change("2025-03-04", "12") == (None, PLACEHOLDER, "⚠️ 必填")


def test_deadline_handler_commits_value():
    value, display, error = handlers.handle_deadline_change("2025-03-04", "12:30")

    assert display == "2025/03/04 12:30"
    assert error == ""
    assert value.hour == 12


def test_submit_handler_shows_field_errors(loaded_state):
    outputs = list(handlers.handle_submit(loaded_state, "", "nope", None, "", True))

    assert len(outputs) == 1
    _, vendor_error, link_error, deadline_error, _, _ = outputs[0]
    assert vendor_error == "⚠️ 必填"
    assert link_error == "⚠️ 需要有效網址"
    assert deadline_error == "⚠️ 必填"


def test_submit_handler_requires_a_recipient(loaded_state):
    loaded_state.selected = {}
    with patch("frontend.app.api_client.requests.post") as mock_post:
        outputs = list(handlers.handle_submit(loaded_state, "大茗", "https://x.test/g", DEADLINE, "", True))

    mock_post.assert_not_called()
    assert outputs[-1][4] == "請至少勾選一位收件人"


def test_submit_handler_reports_sending_then_result(loaded_state):
    with patch("frontend.app.workflow.api_client.post_sendmail", return_value="寄送成功"):
        outputs = list(handlers.handle_submit(loaded_state, "大茗", "https://x.test/g", DEADLINE, "", True))

    sending, final = outputs
    assert sending[4] == "寄送中…"
    assert sending[5]["interactive"] is False
    assert final[4] == "✅ 寄送成功"
    assert final[5]["interactive"] is True


def test_signup_handler_rejects_invalid_email():
    with patch("frontend.app.api_client.requests.post") as mock_post:
        assert handlers.handle_signup("not-an-email") == "請輸入有效的 Email！"

    mock_post.assert_not_called()


def test_submit_handler_with_unset_endpoint_ends_with_failure_status(loaded_state):
    with patch("frontend.app.handlers.config.APPS_SCRIPT_BASE", ""):
        outputs = list(handlers.handle_submit(loaded_state, "大茗", "https://x.test/g", DEADLINE, "", True))

    sending, final = outputs
    assert sending[4] == "寄送中…"
    assert final[4].startswith("🔴")
    assert final[5]["interactive"] is True
    assert loaded_state.sending is False
