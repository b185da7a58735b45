#!/usr/bin/env python3
"""Development server with hot reloading. Use run_production.py for deployments."""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent


def run_server():
    """Run the FastAPI server with uvicorn in reload mode"""
    print("Starting Corporate Card Ledger API...")
    print("REST API: http://localhost:8000/api/v1")
    print("RPC:      http://localhost:8000/rpc/<procedure>")
    print("Press Ctrl+C to stop")

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "card_ledger.main:app",
        "--host",
        "0.0.0.0",
        "--port",
        "8000",
        "--reload",
    ]

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nShutting down server...")


if __name__ == "__main__":
    run_server()
