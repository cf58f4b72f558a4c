"""
LangChain @tool wrappers — Infrastructure entrypoint / Composition Root.

The @tool decorator is a LangChain/LangGraph infrastructure concern and must
NOT appear in the application or domain layers.  This module binds each
application use-case to a tool callable that can be passed to build_agent_graph().
Tool names and argument schemas come from the closed ToolKind set.
"""

import json
from typing import Optional

from langchain_core.tools import tool

from grocery_assistant.application.agent.tool_schemas import (
    AddToListArgs,
    RetrieveListArgs,
    ToolKind,
)
from grocery_assistant.application.services.deferred_writer import DeferredListWriter
from grocery_assistant.application.use_cases.add_to_list import AddToListUseCase
from grocery_assistant.application.use_cases.retrieve_list import RetrieveListUseCase
from grocery_assistant.domain.entities.grocery_list import Category
from grocery_assistant.domain.ports.grocery_list_port import IGroceryListStore


def create_tools(store: IGroceryListStore, writer: DeferredListWriter) -> list:
    """Build and return the two LangChain tools bound to *store*.

    Args:
        store:  IGroceryListStore implementation read by retrieve_list.
        writer: DeferredListWriter wrapping the same store, used by add_to_list.

    Returns:
        List of two tool callables ready to be passed to build_agent_graph().
    """
    add_uc = AddToListUseCase(writer)
    retrieve_uc = RetrieveListUseCase(store)

    @tool(ToolKind.ADD_TO_LIST.value, args_schema=AddToListArgs)
    async def add_to_list(category: Category, item: str) -> str:
        """Add items to the grocery list.

        Call once per item. The category must be 'fruits' or 'vegetables'.
        The add is processed in the background: the reply only confirms that
        it has started, not that it has finished.
        """
        return add_uc.execute(Category(category), item)

    @tool(ToolKind.RETRIEVE_LIST.value, args_schema=RetrieveListArgs)
    async def retrieve_list(dummy: Optional[str] = None) -> str:
        """Retrieve all items from the grocery list.

        Returns JSON with 'fruits', 'vegetables' and a 'status' note. Items
        added moments ago may not appear yet.
        """
        return json.dumps(retrieve_uc.execute())

    return [add_to_list, retrieve_list]
