from typing import Annotated, ClassVar, Optional

from pydantic import Field

from core.models import ToolDefinition, ToolInput  # type: ignore
from core.results import Combined, ToolResult  # type: ignore
from core.transport import ApiClient  # type: ignore
from tools._common import ListInput  # type: ignore
from utils import path_segment  # type: ignore


class ListProposals(ListInput):
    path: ClassVar[str] = "/proposals"


class GetProposalDetails(ToolInput):
    proposalId: Annotated[str, Field(description="UUID of the proposal")]
    includeLines: Annotated[
        Optional[bool], Field(description="If true, fetches proposal lines in a separate request")
    ] = None


async def get_proposal_details(client: ApiClient, request: GetProposalDetails) -> ToolResult:
    """Fetch a proposal and, when asked, its lines.

    The lines are only requested once the proposal itself came back without error.
    """
    proposal = await client.call("GET", f"/proposals/{path_segment(request.proposalId)}")
    if not request.includeLines or proposal.is_error:
        return proposal

    lines = await client.call("GET", "/proposallines", params={"proposalId": request.proposalId})
    return Combined.of(("PROPOSAL", proposal), ("LINES", lines))


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="list_proposals",
            title="List Proposals",
            description="List all proposals",
            input_model=ListProposals,
        ),
        ToolDefinition(
            name="get_proposal_details",
            title="Get Proposal Details",
            description="Get specific proposal details including lines",
            input_model=GetProposalDetails,
            handler=get_proposal_details,
        ),
    ]
