"""
Shared pytest fixtures.

Each test gets its own store and application, so nothing leaks between
tests through the in-memory state.
"""
import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import create_app
from string_analyzer.store import StringStore


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def populated_store(store):
    for value in ["racecar", "hello", "A man a plan", "noon", "level up", "z"]:
        store.create(value)
    return store


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
