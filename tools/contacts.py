from typing import Annotated, ClassVar, Optional

from pydantic import EmailStr, Field

from core.models import ToolDefinition  # type: ignore
from tools._common import CreateInput, ListInput  # type: ignore


class ListContacts(ListInput):
    path: ClassVar[str] = "/contacts"

    limit: Annotated[
        Optional[int],
        Field(ge=1, le=100, description="Maximum number of contacts to return (defaults to the configured page size)"),
    ] = None


class CreateContact(CreateInput):
    path: ClassVar[str] = "/contacts"

    Name: Annotated[str, Field(min_length=1, description="Full name of the contact person")]
    Email: Annotated[EmailStr, Field(description="Email address for the contact")]
    Phone: Annotated[str, Field(description="Phone number for the contact")]
    City: Annotated[Optional[str], Field(description="City where the contact is located")] = None
    State: Annotated[Optional[str], Field(description="State or province (e.g., CA, NY)")] = None


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="list_contacts",
            title="List Contacts",
            description=(
                "Retrieve a list of all contacts in the system. "
                "Contacts are individuals associated with projects or clients."
            ),
            input_model=ListContacts,
        ),
        ToolDefinition(
            name="create_contact",
            title="Create Contact",
            description=(
                "Create a new contact in the system. "
                "Contacts can be associated with clients, projects, or other entities."
            ),
            input_model=CreateContact,
        ),
    ]
