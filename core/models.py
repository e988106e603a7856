from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Literal, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict

from core.config import EndpointConfig  # type: ignore

if TYPE_CHECKING:
    from core.results import ToolResult  # type: ignore
    from core.transport import ApiClient  # type: ignore

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class RequestSpec:
    """One outbound call: method, path under the API prefix, optional body and query."""

    method: HttpMethod
    path: str
    body: Any = None
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def carries_body(self) -> bool:
        return self.method in ("POST", "PUT") and self.body is not None


class ToolInput(BaseModel):
    """Base class for the typed arguments of a tool.

    Simple tools override `to_request`; composite tools build their requests
    in their own handler.
    """

    model_config = ConfigDict(extra="forbid")

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        raise NotImplementedError(f"{type(self).__name__} does not map to a single request")

    def as_body(self) -> dict[str, Any]:
        """The supplied arguments as a JSON body, unset optionals left out."""
        return self.model_dump(mode="json", exclude_none=True)


Handler = Callable[["ApiClient", Any], Awaitable["ToolResult"]]


async def send_single(client: "ApiClient", request: ToolInput) -> "ToolResult":
    return await client.request(request.to_request(client.config))


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    title: str
    description: str
    input_model: Type[ToolInput]
    handler: Handler = send_single

    def parse(self, arguments: Optional[Mapping[str, Any]]) -> ToolInput:
        return self.input_model.model_validate(dict(arguments or {}))
