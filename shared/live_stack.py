"""Shared live-target helpers for the e2e and API test suites."""

from __future__ import annotations

import logging
import time

import pytest
import requests

logger = logging.getLogger(__name__)


def is_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the target answers with a non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Target %s unreachable: %s", url, exc)
        return False
    return response.status_code < 500


def wait_for_reachable(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the target until it answers or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_reachable(url, timeout=min(interval + 1, timeout)):
            return
        time.sleep(interval)
    raise RuntimeError(f"Target at {url} not reachable after {timeout}s")


def require_reachable(
    url: str,
    *,
    suite_name: str,
    url_env: str,
    timeout: int = 5,
) -> str:
    """
    Return `url` when it is reachable, otherwise skip the calling suite.

    The suites run against public sites, so a missing network is an
    environment condition rather than a test failure.
    """
    if not is_reachable(url, timeout=timeout):
        pytest.skip(
            f"{url} is not reachable; set {url_env} to run {suite_name} tests"
        )
    logger.info("Running %s tests against %s", suite_name, url)
    return url
