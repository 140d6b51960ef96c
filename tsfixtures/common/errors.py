# tsfixtures/common/errors.py
from __future__ import annotations


class FixtureError(Exception):
    """Base class for every error raised by tsfixtures."""


class ConfigurationError(FixtureError):
    """Requested fixtures cannot be produced with the given settings."""


class HarnessVerificationError(FixtureError):
    def __init__(self, path, failures):
        self.path = path
        self.failures = list(failures)
        super().__init__(f"{path}: " + "; ".join(self.failures))
