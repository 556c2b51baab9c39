"""
Unit tests for the shared structured logging setup.
"""

import json
from datetime import datetime

import structlog

from shared.logging import configure_logging, set_submission_id, clear_context


def render(event_dict):
    """Run an event through the configured processors after the stdlib filters."""
    processors = structlog.get_config()["processors"]
    start = next(
        i for i, processor in enumerate(processors)
        if isinstance(processor, structlog.processors.TimeStamper)
    )
    for processor in processors[start:]:
        event_dict = processor(None, "info", event_dict)
    return json.loads(event_dict)


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def setup_method(self):
        configure_logging("documents", "info")

    def teardown_method(self):
        clear_context()
        structlog.reset_defaults()

    def test_timestamp_is_iso_string(self):
        """Test the rendered timestamp stays the ISO value from TimeStamper."""
        line = render({"event": "Document dispatched", "logger": "documents.submitter"})

        assert isinstance(line["timestamp"], str)
        datetime.fromisoformat(line["timestamp"].replace("Z", "+00:00"))

    def test_service_and_submission_context(self):
        """Test service name and submission id are attached to each line."""
        submission_id = set_submission_id("sub-42")

        line = render({"event": "Document dispatched", "logger": "documents.submitter"})

        assert line["service"] == "documents"
        assert line["submission_id"] == submission_id
