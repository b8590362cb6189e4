"""Run the worldbanc server with auto-reload for local development.

Usage:
    python start_dev.py            # port from WORLD_BANC_PORT, default 8888

Uses .venv/ when present, otherwise the current interpreter.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
BACKEND_DIR = ROOT_DIR / "backend"
VENV_PYTHON = ROOT_DIR / (".venv/Scripts/python.exe" if os.name == "nt" else ".venv/bin/python")

REQUIRED_MODULES = ("fastapi", "uvicorn", "psutil", "httpx")


def resolve_python() -> str:
    return str(VENV_PYTHON) if VENV_PYTHON.exists() else sys.executable


def check_dependencies(python: str) -> bool:
    """True when the server's runtime packages import under ``python``."""
    imports = "; ".join(f"import {name}" for name in REQUIRED_MODULES)
    result = subprocess.run([python, "-c", imports], capture_output=True, text=True)
    if result.returncode != 0:
        print(f"Missing dependencies. Run: pip install -e '{ROOT_DIR}[dev]'", file=sys.stderr)
        return False
    return True


def server_command(python: str, port: str) -> list[str]:
    return [python, "-m", "uvicorn", "worldbanc.main:app", "--reload", "--host", "0.0.0.0", "--port", port]


def main() -> int:
    python = resolve_python()
    if not check_dependencies(python):
        return 1

    os.environ.setdefault("WORLD_BANC_DEBUG", "true")
    port = os.environ.setdefault("WORLD_BANC_PORT", "8888")
    print(f"Browse: http://localhost:{port}/  (Ctrl+C to stop)")

    proc = subprocess.Popen(server_command(python, port), cwd=BACKEND_DIR)
    try:
        return proc.wait()
    except KeyboardInterrupt:
        proc.terminate()
        try:
            proc.wait(timeout=10)
        except subprocess.TimeoutExpired:
            proc.kill()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
