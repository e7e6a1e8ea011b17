# frontend/app/config.py
# Centralizes the frontend configuration. The Apps Script endpoint is injected here
# (command line or environment) instead of being hard-coded in the workflow code.

import argparse
import os

from dotenv import load_dotenv

# Loads frontend/.env if present; real environment variables take precedence.
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '.env')
load_dotenv(dotenv_path=env_path)


class AppConfig:
    """
    Parses command-line arguments (falling back to environment variables)
    and exposes the values the UI and the API client need.
    """
    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(description="DrinkMailer Frontend Launcher", allow_abbrev=False)
        parser.add_argument(
            "--port",
            type=int,
            default=int(os.getenv("FRONTEND_PORT", 10101)),
            help="Port to run the frontend server on (default: 10101)"
        )
        parser.add_argument(
            "--apps-script-url",
            dest="apps_script_url",
            type=str,
            default=os.getenv("APPS_SCRIPT_BASE", ""),
            help="Deployed Google Apps Script Web App URL (env: APPS_SCRIPT_BASE)"
        )
        parser.add_argument(
            "--timezone",
            type=str,
            default=os.getenv("DEADLINE_TIMEZONE", "Asia/Taipei"),
            help="Timezone the order deadline is entered in (default: Asia/Taipei)"
        )

        # parse_known_args keeps Gradio's reload mode and pytest from tripping over unknown flags
        args, _ = parser.parse_known_args(argv)

        self.run_port = args.port
        self.APPS_SCRIPT_BASE = args.apps_script_url.strip()
        self.TIMEZONE = args.timezone

        # Legacy sign-up form: public IP lookup providers, tried in order.
        self.IPIFY_URL = "https://api.ipify.org?format=json"
        self.HTTPBIN_IP_URL = "https://httpbin.org/ip"

    @property
    def is_configured(self) -> bool:
        return bool(self.APPS_SCRIPT_BASE)


# Create a single, globally accessible configuration instance.
config = AppConfig()
