"""Live-server helpers shared by the E2E runner and the E2E suite."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_catalog_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the catalog health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/api/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_catalog_healthy(url: str, timeout: int = 30, interval: float = 0.5) -> None:
    """Poll the catalog health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_catalog_ready(url):
            logger.info(f"Catalog available on {url}")
            return
        time.sleep(interval)
    raise RuntimeError(f"Catalog at {url} not healthy after {timeout}s")
