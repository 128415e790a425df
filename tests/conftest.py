"""Shared pytest fixtures for the thesis topic suggester test suite."""

import os

import pytest

# Set env vars before app.py builds its module-level flow
os.environ.setdefault("API_KEY", "test-key")
os.environ.setdefault("CREDENTIAL_SELECTOR", "none")

from thesis_topics.credentials import CredentialSelector
from thesis_topics.errors import CredentialSelectionError
from thesis_topics.llm.schemas import ApiResponse, ThesisTopic


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Every test starts with a configured key and no interactive selector."""
    monkeypatch.setenv("API_KEY", "test-key")
    monkeypatch.setenv("CREDENTIAL_SELECTOR", "none")


@pytest.fixture
def sample_topics():
    return [
        ThesisTopic(
            title="تحلیل احساسات متون فارسی با مدل‌های ترنسفورمر",
            description="بررسی کارایی مدل‌های زبانی بزرگ در تحلیل احساسات نظرات کاربران فارسی‌زبان.",
            keywords=["تحلیل احساسات", "ترنسفورمر"],
            potentialResearchQuestions=["آیا تنظیم دقیق دقت را بهبود می‌دهد؟"],
        ),
        ThesisTopic(
            title="Graph neural networks for citation recommendation",
            description="Recommend citations from the structure of a paper's reference graph.",
            keywords=["GNN", "recommendation"],
        ),
        ThesisTopic(
            title="Low-resource speech recognition",
            description="Transfer learning for Persian speech recognition with little labelled audio.",
            keywords=[],
            potentialResearchQuestions=[],
        ),
    ]


@pytest.fixture
def sample_response(sample_topics):
    return ApiResponse(topics=sample_topics)


class RecordingGenerate:
    """Stand-in for generate_thesis_topics that records calls."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, keywords):
        self.calls.append(keywords)
        if self.error is not None:
            raise self.error
        return self.response


class StubSelector(CredentialSelector):
    def __init__(self, available=True, fail=False):
        self.available = available
        self.fail = fail
        self.calls = 0

    def select(self):
        self.calls += 1
        if self.fail:
            raise CredentialSelectionError("dialog closed")


@pytest.fixture
def recording_generate():
    return RecordingGenerate


@pytest.fixture
def stub_selector():
    return StubSelector
