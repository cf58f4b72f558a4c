"""Pytest configuration and fixtures for unit tests."""

import pytest

from grocery_assistant.application.services.deferred_writer import DeferredListWriter
from grocery_assistant.infrastructure.entrypoints.tool_registry import create_tools
from grocery_assistant.infrastructure.storage.in_memory_grocery_list import (
    InMemoryGroceryListStore,
)


@pytest.fixture
def store():
    """Provides a fresh, empty grocery list store for each test."""
    return InMemoryGroceryListStore()


@pytest.fixture
def writer(store):
    return DeferredListWriter(store)


@pytest.fixture
def tools(store, writer):
    """The add_to_list and retrieve_list tools bound to the test store."""
    return {t.name: t for t in create_tools(store, writer)}
