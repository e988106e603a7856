from typing import ClassVar

from core.models import ToolDefinition  # type: ignore
from tools._common import ListInput  # type: ignore


class ListEstimates(ListInput):
    path: ClassVar[str] = "/estimates"


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="list_estimates",
            title="List Estimates",
            description="List all estimates",
            input_model=ListEstimates,
        ),
    ]
