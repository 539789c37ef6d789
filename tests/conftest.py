"""Shared fixtures: temporary translation cache and fake enrichment clients."""

import sys
from pathlib import Path

import pytest

# Make the project root importable (generate.py, scripts/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from korvocab.common.cache import TranslationCache


class FakeClient:
    """Stands in for OpenAIClient: replays canned responses, one per call.

    A response that is an Exception instance is raised instead of returned.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete_json(self, system, user):
        self.calls.append((system, user))
        response = self.responses.pop(0) if self.responses else {"translations": []}
        if isinstance(response, Exception):
            raise response
        return response


def entry(korean, english, pronunciation="", example="", original=None):
    data = {
        "korean": korean,
        "english": english,
        "pronunciation": pronunciation,
        "example": example,
    }
    if original is not None:
        data["original"] = original
    return data


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / ".cache"


@pytest.fixture
def cache(cache_dir):
    return TranslationCache(cache_dir)


@pytest.fixture
def fake_client():
    """Factory: fake_client(response, ...) -> FakeClient."""
    return FakeClient
