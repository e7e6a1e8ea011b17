# frontend/app/ui.py
# Builders for the Gradio components. Each builder returns a dict of components;
# main.py wires them to the callbacks in handlers.py.

import gradio as gr

from .datetime_picker import DEFAULT_TIME, PLACEHOLDER
from .schemas import DEPT_ALL_VALUE
from .state import WorkflowState

DEPT_ALL_LABEL = "全部部門"
RECIPIENT_COLUMNS = ["姓名", "Email", "部門", "備註"]


def create_order_tab():
    """Builds the '飲料開團通知' tab: order details, deadline picker, recipient list and send controls."""
    with gr.TabItem("飲料開團通知", id="order_tab") as tab:
        workflow_state = gr.State(WorkflowState())
        deadline_state = gr.State(None)

        gr.Markdown("## 飲料開團通知")
        gr.Markdown("貼上開團資訊，勾選收件人，一鍵寄出。")

        # --- Order details ---
        with gr.Row():
            with gr.Column():
                vendor_input = gr.Textbox(label="店家名稱 *", placeholder="大茗")
                vendor_error = gr.Markdown()
            with gr.Column():
                link_input = gr.Textbox(label="開團平台連結 *", placeholder="https://...")
                link_error = gr.Markdown()

        gr.Markdown("**訂購截止 ***")
        deadline_display = gr.Markdown(PLACEHOLDER)
        with gr.Accordion("📅 選擇日期時間", open=False) as deadline_picker:
            deadline_day = gr.DateTime(label="日期", include_time=False, type="string")
            with gr.Row():
                deadline_time = gr.Textbox(label="時間 (24 小時制)", value=DEFAULT_TIME, placeholder="HH:MM")
                deadline_confirm_btn = gr.Button("✔️ 確定", size="sm")
        deadline_error = gr.Markdown()

        note_input = gr.Textbox(label="備註", lines=3)

        # --- Recipient list ---
        gr.Markdown("### 收件人名單")
        with gr.Row():
            dept_dd = gr.Dropdown(
                label="部門篩選",
                choices=[(DEPT_ALL_LABEL, DEPT_ALL_VALUE)],
                value=DEPT_ALL_VALUE,
                interactive=True
            )
            keyword_input = gr.Textbox(label="關鍵字", placeholder="姓名 / Email / 部門")
            filter_btn = gr.Button("🔍 套用篩選", variant="secondary")
        with gr.Row():
            select_all_btn = gr.Button("全選", variant="secondary")
            select_none_btn = gr.Button("全不選", variant="secondary")

        recipients_table = gr.DataFrame(headers=RECIPIENT_COLUMNS, interactive=False, row_count=(5, "dynamic"), wrap=True)
        recipient_checks = gr.CheckboxGroup(label="勾選收件人", choices=[], interactive=True)

        # --- Send ---
        bcc_checkbox = gr.Checkbox(label="以 BCC 群發（建議）", value=True, info="避免露出所有名單；取消則所有人放在 To。")
        submit_btn = gr.Button("📨 送出並寄信", variant="primary")
        status_output = gr.Markdown()

    components = {
        "tab": tab, "workflow_state": workflow_state, "deadline_state": deadline_state,
        "vendor_input": vendor_input, "vendor_error": vendor_error,
        "link_input": link_input, "link_error": link_error,
        "deadline_display": deadline_display, "deadline_picker": deadline_picker,
        "deadline_day": deadline_day, "deadline_time": deadline_time,
        "deadline_confirm_btn": deadline_confirm_btn, "deadline_error": deadline_error,
        "note_input": note_input,
        "dept_dd": dept_dd, "keyword_input": keyword_input, "filter_btn": filter_btn,
        "select_all_btn": select_all_btn, "select_none_btn": select_none_btn,
        "recipients_table": recipients_table, "recipient_checks": recipient_checks,
        "bcc_checkbox": bcc_checkbox, "submit_btn": submit_btn, "status_output": status_output,
    }
    return components


def create_signup_tab():
    """Builds the legacy email-only sign-up form."""
    with gr.TabItem("訂閱通知", id="signup_tab") as tab:
        gr.Markdown("## 加入飲料開團通知名單")
        email_input = gr.Textbox(label="Email", placeholder="user@example.com")
        submit_btn = gr.Button("Send", variant="primary")
        status_output = gr.Markdown()

    components = {
        "tab": tab, "email_input": email_input, "submit_btn": submit_btn, "status_output": status_output,
    }
    return components
