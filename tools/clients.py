from typing import Annotated, ClassVar, Optional

from pydantic import EmailStr, Field

from core.config import EndpointConfig  # type: ignore
from core.models import ToolDefinition  # type: ignore
from tools._common import CreateInput, ListInput  # type: ignore


class ListClients(ListInput):
    path: ClassVar[str] = "/clients"

    page: Annotated[Optional[int], Field(ge=1, description="Page number for pagination (starts at 1)")] = None
    limit: Annotated[
        Optional[int],
        Field(ge=1, le=100, description="Number of items per page (max: 100, defaults to the configured page size)"),
    ] = None

    def query(self, config: EndpointConfig) -> dict:
        return {"page": self.page or 1, "limit": self.limit or config.default_page_limit}


class CreateClient(CreateInput):
    path: ClassVar[str] = "/clients"

    Name: Annotated[str, Field(min_length=1, description="Full name of the client")]
    EmailAddress: Annotated[EmailStr, Field(description="Primary email address for the client")]
    CompanyName: Annotated[str, Field(min_length=1, description="Name of the client's company or organization")]
    Phone: Annotated[str, Field(description="Primary phone number (e.g., +1-555-123-4567)")]


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="list_clients",
            title="List Clients",
            description=(
                "Retrieve a paginated list of all clients in the JoeAPI system. Returns basic client "
                "information including name, email, company, and contact details."
            ),
            input_model=ListClients,
        ),
        ToolDefinition(
            name="create_client",
            title="Create Client",
            description=(
                "Create a new client record in the JoeAPI system. "
                "Use this when onboarding new clients for construction projects."
            ),
            input_model=CreateClient,
        ),
    ]
