from typing import Annotated, Literal, Optional

from pydantic import Field

from core.config import EndpointConfig  # type: ignore
from core.models import RequestSpec, ToolDefinition, ToolInput  # type: ignore
from core.results import Combined, ToolResult  # type: ignore
from core.transport import ApiClient  # type: ignore


class GetFinancialSummary(ToolInput):
    groupBy: Annotated[Optional[Literal["month", "year", "week"]], Field(description="Group by timeframe")] = None
    startDate: Annotated[str, Field(description="Start date in YYYY-MM-DD format")]
    endDate: Annotated[str, Field(description="End date in YYYY-MM-DD format")]

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec(
            "GET",
            "/transactions/summary",
            params={"groupBy": self.groupBy or "month", "startDate": self.startDate, "endDate": self.endDate},
        )


class GetProjectFinances(ToolInput):
    projectId: Annotated[str, Field(description="UUID of the project")]


async def get_project_finances(client: ApiClient, request: GetProjectFinances) -> ToolResult:
    """Job balances and cost variance for one project.

    Both calls always run, one after the other; a failure in either marks the whole result as an error.
    """
    params = {"projectId": request.projectId}
    balances = await client.call("GET", "/job-balances", params=params)
    variance = await client.call("GET", "/cost-variance", params=params)
    return Combined.of(("JOB BALANCES", balances), ("COST VARIANCE", variance))


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="get_financial_summary",
            title="Get Financial Summary",
            description="Get transaction summary grouped by timeframe",
            input_model=GetFinancialSummary,
        ),
        ToolDefinition(
            name="get_project_finances",
            title="Get Project Finances",
            description="Get financial overview for a specific project",
            input_model=GetProjectFinances,
            handler=get_project_finances,
        ),
    ]
