from typing import Annotated, ClassVar

from pydantic import Field

from core.config import EndpointConfig  # type: ignore
from core.models import RequestSpec, ToolDefinition, ToolInput  # type: ignore
from tools._common import ListInput  # type: ignore
from utils import path_segment  # type: ignore


class GetProjectDetails(ToolInput):
    projectId: Annotated[str, Field(description="UUID of the project")]

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec("GET", f"/project-details/{path_segment(self.projectId)}")


class ListProjectSchedules(ListInput):
    path: ClassVar[str] = "/project-schedules"


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="get_project_details",
            title="Get Project Details",
            description="Get full details of a project",
            input_model=GetProjectDetails,
        ),
        ToolDefinition(
            name="list_project_schedules",
            title="List Project Schedules",
            description="List project schedules",
            input_model=ListProjectSchedules,
        ),
    ]
