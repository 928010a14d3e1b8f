"""Shared test configuration and fixtures."""

import pytest

# Worked example: a header line, two data rows and a comment in between
SAMPLE_CSV = "name,age\nAlice,30\n#comment line\nBob,25\n"


class RecordingTrace:
    """Diagnostic sink that remembers every error() call."""

    def __init__(self):
        self.calls: list[tuple[str, BaseException]] = []

    def error(self, message: str, cause: BaseException) -> None:
        self.calls.append((message, cause))


@pytest.fixture
def sample_csv() -> str:
    """The worked-example CSV text."""
    return SAMPLE_CSV


@pytest.fixture
def recording_trace() -> RecordingTrace:
    """A fresh sink with no recorded calls."""
    return RecordingTrace()
