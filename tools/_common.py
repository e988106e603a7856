from typing import Annotated, ClassVar, Optional

from pydantic import Field

from core.config import EndpointConfig  # type: ignore
from core.models import RequestSpec, ToolInput  # type: ignore

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

Limit = Annotated[
    Optional[int],
    Field(description="Items per page (defaults to the server's configured page size)"),
]


class ListInput(ToolInput):
    """GET a collection with a `limit` query parameter."""

    path: ClassVar[str] = "/"
    limit: Limit = None

    def query(self, config: EndpointConfig) -> dict:
        return {"limit": self.limit or config.default_page_limit}

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec("GET", self.path, params=self.query(config))


class CreateInput(ToolInput):
    """POST the supplied arguments as the JSON body."""

    path: ClassVar[str] = "/"

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec("POST", self.path, body=self.as_body())
