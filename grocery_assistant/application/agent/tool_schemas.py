"""
Closed set of tools the agent may call, with one typed argument model per tool.
pydantic is used for schema validation; LangChain reads the same models to
publish the tool schemas to the language model.

parse_tool_call() is the only way a raw model tool call becomes a dispatchable
ToolInvocation: unknown names and invalid arguments are rejected here, before
any tool code runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from grocery_assistant.domain.entities.grocery_list import Category
from grocery_assistant.domain.errors import ToolValidationError, UnknownToolError


class ToolKind(str, Enum):
    ADD_TO_LIST = "add_to_list"
    RETRIEVE_LIST = "retrieve_list"


class AddToListArgs(BaseModel):
    category: Category = Field(description="Which list the item belongs to: fruits or vegetables.")
    item: str = Field(min_length=1, description="Name of the grocery item, e.g. 'apples'.")

    @field_validator("item")
    @classmethod
    def _item_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("item must not be blank")
        return value


class RetrieveListArgs(BaseModel):
    # Some providers reject tools with an empty parameter object.
    model_config = ConfigDict(extra="ignore")

    dummy: Optional[str] = Field(default=None, description="Unused. Leave empty.")


TOOL_ARGS_SCHEMAS: dict[ToolKind, type[BaseModel]] = {
    ToolKind.ADD_TO_LIST: AddToListArgs,
    ToolKind.RETRIEVE_LIST: RetrieveListArgs,
}


@dataclass(frozen=True)
class ToolInvocation:
    kind: ToolKind
    args: BaseModel
    call_id: str


def parse_tool_call(tool_call: dict[str, Any]) -> ToolInvocation:
    """Validate a LangChain tool call dict (``name``, ``args``, ``id``).

    Raises:
        UnknownToolError:    if ``name`` is not a ToolKind.
        ToolValidationError: if ``args`` do not match the tool's schema.
    """
    name = tool_call.get("name", "")
    try:
        kind = ToolKind(name)
    except ValueError:
        raise UnknownToolError(name) from None

    try:
        args = TOOL_ARGS_SCHEMAS[kind].model_validate(tool_call.get("args") or {})
    except ValidationError as exc:
        raise ToolValidationError(name, _describe(exc)) from exc

    return ToolInvocation(kind=kind, args=args, call_id=tool_call.get("id") or "")


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'args'}: {err['msg']}"
        for err in exc.errors()
    )
