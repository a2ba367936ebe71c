import threading
from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.config.settings import Settings
from app.database.repositories.memory_document_repository import InMemoryDocumentRepository
from app.summarization.base import BaseSummarizer
from app.summarization.models import DateItem, Party, Risk, Summary, Term


def full_summary() -> Summary:
    return Summary(
        parties=[
            Party(name="Acme Corp", role="Client"),
            Party(name="Globex LLC", role="Service Provider"),
        ],
        obligations=["Client pays invoices within 30 days"],
        dates=[DateItem(event="Effective date", date="2024-03-01")],
        terms=[Term(title="Payment", description="Net 30")],
        risks=[Risk(title="Late payment", description="No interest clause", severity="low")],
        raw="Service agreement between Acme Corp and Globex LLC.",
    )


class GatedSummarizer(BaseSummarizer):
    """Holds every summarize call until the test opens the gate."""

    def __init__(self, summary: Summary) -> None:
        self.gate = threading.Event()
        self.texts: list[str] = []
        self._summary = summary

    def summarize(self, text: str) -> Summary:
        self.texts.append(text)
        self.gate.wait(timeout=10)
        return self._summary


@pytest.fixture()
def doc_repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture()
def summarizer() -> GatedSummarizer:
    summarizer = GatedSummarizer(full_summary())
    summarizer.gate.set()
    return summarizer


@pytest.fixture()
def app(
    test_settings: Settings,
    doc_repo: InMemoryDocumentRepository,
    summarizer: GatedSummarizer,
) -> FastAPI:
    return create_app(test_settings, doc_repo=doc_repo, summarizer=summarizer)


@pytest.fixture()
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def wait_for_processing(client: TestClient) -> Callable[[], None]:
    """Block until every background pipeline run submitted so far has finished."""

    def _wait() -> None:
        assert client.portal is not None
        client.portal.call(client.app.state.container.task_runner.join)

    return _wait
