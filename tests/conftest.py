# tests/conftest.py
"""Shared fixtures for the helper toolkit tests."""
import pytest

from hbhelpers.core.helpers.options import Options


class RecordingBlock:
    """Stands in for a template block: records every render of both bodies."""

    def __init__(self):
        self.primary = []
        self.frames = []
        self.inverse_calls = 0

    def fn(self, context, data=None):
        self.primary.append(context)
        self.frames.append(data)
        return f"[{context}]"

    def inverse(self, context=None):
        self.inverse_calls += 1
        return "ELSE"

    def options(self, **hash_args):
        return Options(fn=self.fn, inverse=self.inverse, hash=hash_args, this="THIS")

    @property
    def branches_taken(self):
        return (1 if self.primary else 0) + self.inverse_calls


@pytest.fixture
def block():
    return RecordingBlock()
