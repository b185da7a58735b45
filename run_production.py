#!/usr/bin/env python3
"""
Production server runner for the Corporate Card Ledger API.

Uses Gunicorn with Uvicorn workers. Designed to be called by systemd or run
manually; for development use run.py instead.
"""
import os
import shutil
import sys
from pathlib import Path

project_root = Path(__file__).parent


def run_server():
    """Run the production server using Gunicorn"""
    gunicorn_bin = shutil.which("gunicorn")
    if gunicorn_bin is None:
        print("Gunicorn not found. Please install: pip install -e .")
        return 1

    print("Starting Corporate Card Ledger (Production Mode)")
    print("=" * 50)
    print(f"Environment: {os.getenv('ENVIRONMENT', 'production')}")
    print(f"Database: {os.getenv('DATABASE_URL', 'sqlite:///./data/card_ledger.db')}")
    print("Config: gunicorn_conf.py")
    print("=" * 50)
    print()

    os.chdir(project_root)
    # Replace the current process so systemd tracks gunicorn directly
    os.execv(gunicorn_bin, [
        gunicorn_bin,
        "-c", "gunicorn_conf.py",
        "card_ledger.main:app"
    ])


if __name__ == "__main__":
    sys.exit(run_server() or 0)
