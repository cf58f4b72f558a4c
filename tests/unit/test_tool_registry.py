"""Unit tests for the add_to_list and retrieve_list LangChain tools."""

import json

import pytest

from grocery_assistant.application.use_cases.add_to_list import AddToListUseCase
from grocery_assistant.application.use_cases.retrieve_list import (
    PROCESSING_STATUS,
    RetrieveListUseCase,
)
from grocery_assistant.domain.entities.grocery_list import Category


@pytest.mark.unit
class TestToolRegistry:
    def test_exactly_two_tools_are_registered(self, tools):
        assert set(tools) == {"add_to_list", "retrieve_list"}

    def test_add_schema_restricts_category(self, tools):
        schema = json.dumps(tools["add_to_list"].tool_call_schema.model_json_schema())
        assert "fruits" in schema
        assert "vegetables" in schema

    @pytest.mark.asyncio
    async def test_add_returns_acknowledgment_before_write(self, tools, store, writer):
        result = await tools["add_to_list"].ainvoke({"category": "fruits", "item": "apples"})

        assert result == "Started adding apples to fruits list..."
        await writer.drain()
        assert store.retrieve().fruits == ("apples",)

    @pytest.mark.asyncio
    async def test_retrieve_on_empty_store(self, tools):
        payload = json.loads(await tools["retrieve_list"].ainvoke({}))

        assert payload == {"fruits": [], "vegetables": [], "status": PROCESSING_STATUS}

    @pytest.mark.asyncio
    async def test_retrieve_after_drained_adds(self, tools, writer):
        await tools["add_to_list"].ainvoke({"category": "vegetables", "item": "Spinach"})
        await tools["add_to_list"].ainvoke({"category": "fruits", "item": "Mango"})
        await writer.drain()

        payload = json.loads(await tools["retrieve_list"].ainvoke({}))

        assert payload["fruits"] == ["mango"]
        assert payload["vegetables"] == ["spinach"]
        assert payload["status"] == PROCESSING_STATUS

    @pytest.mark.asyncio
    async def test_retrieve_right_after_add_may_miss_item(self, tools, writer):
        await tools["add_to_list"].ainvoke({"category": "fruits", "item": "apples"})
        payload = json.loads(await tools["retrieve_list"].ainvoke({}))

        # The write may or may not have landed yet; both outcomes are valid.
        assert payload["fruits"] in ([], ["apples"])
        assert payload["status"] == PROCESSING_STATUS

        await writer.drain()
        payload = json.loads(await tools["retrieve_list"].ainvoke({}))
        assert payload["fruits"] == ["apples"]


@pytest.mark.unit
class TestListUseCases:
    @pytest.mark.asyncio
    async def test_same_turn_retrieve_does_not_see_pending_add(self, store, writer):
        add_uc = AddToListUseCase(writer)
        retrieve_uc = RetrieveListUseCase(store)

        ack = add_uc.execute(Category.VEGETABLES, "Carrots")
        payload = retrieve_uc.execute()

        assert ack == "Started adding Carrots to vegetables list..."
        assert payload["vegetables"] == []
        assert payload["status"] == PROCESSING_STATUS

        await writer.drain()
        assert retrieve_uc.execute()["vegetables"] == ["carrots"]
