# frontend/run.py
# Entry point for the frontend application.
# Puts the project root on sys.path so the 'frontend.app' package imports the same way
# whether this script is run directly or the project is installed.

import sys
import os


def main():
    """
    Sets up the Python path and runs the frontend application.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    print("Initializing DrinkMailer frontend...")

    from frontend.app.main import main as run_frontend_app

    run_frontend_app()


if __name__ == "__main__":
    main()
