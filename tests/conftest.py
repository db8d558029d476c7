"""Pytest fixtures for the prismcentral_solver test suite."""

import logging
import logging.handlers
from collections.abc import Generator
from typing import Any

import pytest

from prismcentral_solver.config import Settings
from prismcentral_solver.models import ChallengeRequest

API_ENDPOINT = "https://prism.example.com:9440/api/nutanix/v3/action_rules/trigger"


@pytest.fixture
def solver_config() -> dict[str, Any]:
    """Return a per-issuer solver config as it appears on the issuer."""
    return {
        "username": "admin",
        "password": "s3cr3t",
        "apiEndpoint": API_ENDPOINT,
        "webhookID": "wh-1",
    }


@pytest.fixture
def challenge_request(solver_config: dict[str, Any]) -> ChallengeRequest:
    """Return a Present challenge request carrying solver_config."""
    return ChallengeRequest(
        uid="6b1f1d2e-0000-4000-8000-000000000001",
        action="Present",
        type="dns-01",
        dnsName="example.com",
        key="abc123",
        resourceNamespace="default",
        resolvedFQDN="_acme-challenge.example.com",
        resolvedZone="example.com.",
        config=solver_config,
    )


@pytest.fixture
def settings() -> Settings:
    """Return settings for an in-process server."""
    return Settings(group_name="acme.example.com")


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name.

        Args:
            level: Filter by log level (e.g., logging.INFO).
            name: Filter by logger name prefix (e.g., "prismcentral_solver.server").

        Returns:
            List of matching log records.
        """
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name."""
        return [r.getMessage() for r in self.get_records(level, name)]

    def clear(self) -> None:
        """Clear all captured log records."""
        self._handler.buffer.clear()


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the prismcentral_solver package during a test.

    Usage:
        def test_something(log_capture):
            # do something that logs
            assert "Successfully presented DNS challenge" in log_capture.get_messages(logging.INFO)
    """
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    package_logger = logging.getLogger("prismcentral_solver")
    original_level = package_logger.level
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(original_level)
        handler.close()
