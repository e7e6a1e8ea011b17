# frontend/app/main.py
# Assembles the UI and wires the event handlers.

import logging
import os
from functools import partial

import gradio as gr

from .config import config
from .logging_config import setup_logging
from . import handlers
from . import ui


def build_demo() -> gr.Blocks:
    """Builds the Gradio Blocks app with every event wired."""
    with gr.Blocks(theme=gr.themes.Soft(primary_hue="indigo", secondary_hue="purple"), title="飲料開團通知系統") as demo:
        # --- 1. Global Components ---
        endpoint_status = gr.Markdown()
        gr.Markdown("# 飲料開團通知系統")
        gr.Markdown("貼上開團資訊、勾選名單，一鍵寄出 🚀")

        # --- 2. Build UI from Tabs ---
        with gr.Tabs():
            order_ui = ui.create_order_tab()
            signup_ui = ui.create_signup_tab()

        # --- 3. Wire Event Handlers ---
        demo.load(handlers.check_endpoint_config, outputs=endpoint_status)

        fetch_outputs = [
            order_ui["workflow_state"],
            order_ui["recipients_table"],
            order_ui["recipient_checks"],
            order_ui["dept_dd"],
            order_ui["status_output"],
            order_ui["submit_btn"],
        ]
        # Initial load uses no filter at all.
        demo.load(handlers.handle_fetch_recipients, inputs=[order_ui["workflow_state"]], outputs=fetch_outputs)
        order_ui["filter_btn"].click(
            handlers.handle_fetch_recipients,
            inputs=[order_ui["workflow_state"], order_ui["dept_dd"], order_ui["keyword_input"]],
            outputs=fetch_outputs
        )

        # Selection Events
        order_ui["recipient_checks"].input(
            handlers.handle_selection_change,
            inputs=[order_ui["workflow_state"], order_ui["recipient_checks"]],
            outputs=order_ui["workflow_state"]
        )
        toggle_outputs = [order_ui["workflow_state"], order_ui["recipient_checks"]]
        order_ui["select_all_btn"].click(partial(handlers.handle_toggle_all, True), inputs=order_ui["workflow_state"], outputs=toggle_outputs)
        order_ui["select_none_btn"].click(partial(handlers.handle_toggle_all, False), inputs=order_ui["workflow_state"], outputs=toggle_outputs)

        # Deadline Picker Events: commit whenever either part changes
        deadline_inputs = [order_ui["deadline_day"], order_ui["deadline_time"]]
        deadline_outputs = [order_ui["deadline_state"], order_ui["deadline_display"], order_ui["deadline_error"]]
        order_ui["deadline_day"].change(handlers.handle_deadline_change, inputs=deadline_inputs, outputs=deadline_outputs)
        order_ui["deadline_time"].change(handlers.handle_deadline_change, inputs=deadline_inputs, outputs=deadline_outputs)
        order_ui["deadline_confirm_btn"].click(lambda: gr.update(open=False), outputs=order_ui["deadline_picker"])

        # Submit Event
        order_ui["submit_btn"].click(
            handlers.handle_submit,
            inputs=[
                order_ui["workflow_state"],
                order_ui["vendor_input"],
                order_ui["link_input"],
                order_ui["deadline_state"],
                order_ui["note_input"],
                order_ui["bcc_checkbox"],
            ],
            outputs=[
                order_ui["workflow_state"],
                order_ui["vendor_error"],
                order_ui["link_error"],
                order_ui["deadline_error"],
                order_ui["status_output"],
                order_ui["submit_btn"],
            ]
        )

        # Legacy Sign-up Events
        signup_ui["submit_btn"].click(handlers.handle_signup, inputs=signup_ui["email_input"], outputs=signup_ui["status_output"])

    return demo


def main():
    """
    Builds the Gradio UI, wires up all the event handlers, and launches the interface.
    """
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "false"
    setup_logging()
    logger = logging.getLogger(__name__)

    if not config.is_configured:
        logger.warning("APPS_SCRIPT_BASE is not set; recipient fetch and send will fail until it is configured.")

    demo = build_demo()

    # --- 4. Launch the App ---
    logger.info(f"DrinkMailer frontend starting on port {config.run_port} ...")
    demo.launch(server_name="0.0.0.0", server_port=config.run_port, inbrowser=False)
