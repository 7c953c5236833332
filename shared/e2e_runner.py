"""
Run the E2E suite against freshly started processes.

The runner boots three things in sequence and tears them down afterwards:

1. the catalog web server (``wsgi.py``) on a fixed local port, ready once
   its health endpoint answers;
2. a Playwright browser server (``playwright run-server``), ready once it
   prints its listening line;
3. pytest on the E2E suite, pointed at both through ``E2E_BASE_URL`` and
   ``PLAYWRIGHT_WS_ENDPOINT``.

The process exit code is pytest's exit code. Anything that stops pytest
from reporting one (startup failure, Ctrl+C) exits with ``1``.

Usage:
    python -m shared.e2e_runner
    python -m shared.e2e_runner --port 8085 -- -k preview
"""

from __future__ import annotations

import argparse
import logging
import os
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Sequence

from config import BASE_DIR, get_config
from shared.live_stack import wait_for_catalog_healthy

logger = logging.getLogger(__name__)

# Assume failure until pytest reports otherwise
EXIT_FAILURE = 1

BROWSER_SERVER_READY_MESSAGE = "Listening on"
DEFAULT_PYTEST_ARGS = ("-m", "e2e", "tests/e2e")

# Seconds between checks for an early browser server exit
READINESS_POLL_INTERVAL = 0.2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the E2E runner."""
    settings = get_config()
    parser = argparse.ArgumentParser(
        description="Start the catalog and a browser server, then run the E2E suite."
    )
    parser.add_argument(
        "--host",
        default=settings.CATALOG_HOST,
        help="Host the catalog server binds to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.CATALOG_PORT,
        help="Port the catalog server listens on",
    )
    parser.add_argument(
        "--browser-port",
        type=int,
        default=settings.BROWSER_SERVER_PORT,
        help="Port the Playwright browser server listens on",
    )
    parser.add_argument(
        "--startup-timeout",
        type=int,
        default=30,
        help="Seconds to wait for each process to report readiness",
    )
    parser.add_argument(
        "pytest_args",
        nargs="*",
        help="Extra arguments forwarded to pytest (place after --)",
    )
    return parser.parse_args(argv)


def start_web_server(host: str, port: int, timeout: int) -> subprocess.Popen:
    """
    Start the catalog server and wait for its health endpoint.

    Returns:
        The running server process.
    """
    env = {**os.environ, "CATALOG_HOST": host, "CATALOG_PORT": str(port)}
    process = subprocess.Popen(
        [sys.executable, str(BASE_DIR / "wsgi.py")],
        env=env,
        start_new_session=True,
    )
    logger.info(f"Started catalog server (pid {process.pid})")
    try:
        wait_for_catalog_healthy(f"http://{host}:{port}", timeout=timeout)
    except RuntimeError:
        stop_process(process)
        raise
    return process


def start_browser_server(port: int, timeout: int) -> tuple[subprocess.Popen, str]:
    """
    Start a Playwright browser server and wait for its readiness line.

    Output is drained on a background thread for the lifetime of the
    process so a full pipe never blocks the server.

    Returns:
        The running server process and its websocket endpoint.

    Raises:
        RuntimeError: If the server exits or stays silent past ``timeout``.
    """
    process = subprocess.Popen(
        [sys.executable, "-m", "playwright", "run-server", "--port", str(port)],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        start_new_session=True,
    )
    logger.info(f"Started browser server (pid {process.pid})")

    ready = threading.Event()
    output_closed = threading.Event()

    def _drain() -> None:
        for line in process.stdout:
            logger.info(f"[browser-server] {line.rstrip()}")
            if BROWSER_SERVER_READY_MESSAGE in line:
                ready.set()
        output_closed.set()

    threading.Thread(target=_drain, daemon=True).start()

    deadline = time.monotonic() + timeout
    while not ready.wait(READINESS_POLL_INTERVAL):
        exited = output_closed.is_set() or process.poll() is not None
        if exited and not ready.is_set():
            stop_process(process)
            raise RuntimeError(
                f"Browser server exited with code {process.poll()} before reporting readiness"
            )
        if time.monotonic() >= deadline:
            stop_process(process)
            raise RuntimeError(f"Browser server did not report readiness within {timeout}s")

    logger.info("Browser server started")
    return process, f"ws://127.0.0.1:{port}/"


def run_tests(pytest_args: Sequence[str], env: dict[str, str]) -> int:
    """Run pytest in a child process and return its exit code."""
    command = [sys.executable, "-m", "pytest", *pytest_args]
    logger.info(f"Running {' '.join(command)}")
    completed = subprocess.run(command, env=env, cwd=BASE_DIR, check=False)
    return completed.returncode


def stop_process(process: subprocess.Popen | None, timeout: int = 10) -> None:
    """Terminate a child process group, killing it if it does not exit in time."""
    if process is None or process.poll() is not None:
        return
    logger.info(f"Stopping pid {process.pid}")
    try:
        os.killpg(process.pid, signal.SIGTERM)
        process.wait(timeout=timeout)
    except ProcessLookupError:
        return
    except subprocess.TimeoutExpired:
        os.killpg(process.pid, signal.SIGKILL)
        process.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    args = parse_args(argv)
    base_url = f"http://{args.host}:{args.port}"

    exit_code = EXIT_FAILURE
    web_server = None
    browser_server = None

    try:
        web_server = start_web_server(args.host, args.port, args.startup_timeout)
        browser_server, ws_endpoint = start_browser_server(
            args.browser_port, args.startup_timeout
        )
        env = {
            **os.environ,
            "E2E_BASE_URL": base_url,
            "PLAYWRIGHT_WS_ENDPOINT": ws_endpoint,
        }
        exit_code = run_tests([*DEFAULT_PYTEST_ARGS, *args.pytest_args], env)
    except KeyboardInterrupt:
        logger.warning("Interrupted, tearing down")
    except RuntimeError as exc:
        logger.error(str(exc))
    finally:
        stop_process(browser_server)
        stop_process(web_server)

    logger.info(f"Exiting with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
