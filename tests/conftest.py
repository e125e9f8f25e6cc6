from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cafeteria_api.bootstrap import UseCases, build_app, build_usecases
from tests.fakes import RecordingEventPublisher


@pytest.fixture
def events() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def usecases(events: RecordingEventPublisher) -> UseCases:
    return build_usecases(events=events)


@pytest.fixture
def client(usecases: UseCases) -> TestClient:
    return TestClient(build_app(usecases))
