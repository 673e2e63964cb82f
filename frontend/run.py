#!/usr/bin/env python3
"""
Appraisal Quoting Frontend - Run Script
Starts the Streamlit app after checking that the quoting backend answers.
"""

import os
import subprocess
import sys
from pathlib import Path

import requests

FRONTEND_DIR = Path(__file__).resolve().parent

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def backend_status(backend_url: str) -> str | None:
    """Returns the service name reported by /health, or None when unreachable."""
    try:
        resp = requests.get(f"{backend_url}/health", timeout=2)
        resp.raise_for_status()
        return resp.json().get("service", "backend")
    except (requests.exceptions.RequestException, ValueError):
        return None

def main():
    backend_url = os.environ.get("BACKEND_URL", "http://localhost:8000")
    port = os.environ.get("FRONTEND_PORT", "8501")

    print_colored("🚀 Starting the appraisal quoting frontend...", "blue")

    service = backend_status(backend_url)
    if service:
        print_colored(f"✅ {service} is up at {backend_url}", "green")
    else:
        # The catalog and the quote page both need it, but Streamlit can start anyway
        print_colored(f"⚠️  No backend at {backend_url}. Start it with: cd backend && python run.py", "yellow")

    print(f"📍 Frontend: http://localhost:{port}")
    print("Press Ctrl+C to stop the server")

    env = dict(os.environ, BACKEND_URL=backend_url)
    try:
        subprocess.run(
            [sys.executable, "-m", "streamlit", "run", str(FRONTEND_DIR / "app.py"), "--server.port", port],
            check=True,
            env=env,
        )
    except KeyboardInterrupt:
        print_colored("\n👋 Frontend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Streamlit exited with {e.returncode}", "red")
        sys.exit(e.returncode)

if __name__ == "__main__":
    main()
