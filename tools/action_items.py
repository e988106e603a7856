from typing import Annotated, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from core.config import EndpointConfig  # type: ignore
from core.models import RequestSpec, ToolDefinition, ToolInput  # type: ignore
from tools._common import ISO_DATE_PATTERN, UUID_PATTERN, CreateInput, ListInput  # type: ignore
from utils import path_segment  # type: ignore

ActionItemId = Annotated[str, Field(description="Action item ID")]


class ListActionItems(ListInput):
    path: ClassVar[str] = "/action-items"

    projectId: Annotated[str, Field(description="UUID of the project")]

    def query(self, config: EndpointConfig) -> dict:
        return {"projectId": self.projectId, "limit": self.limit or config.default_page_limit}


class CostChangeDetails(BaseModel):
    model_config = ConfigDict(extra="forbid")

    Amount: Annotated[Union[int, float], Field(description="Cost change amount (positive or negative)")]
    EstimateCategoryId: Annotated[str, Field(pattern=UUID_PATTERN, description="UUID of the estimate category")]
    RequiresClientApproval: Annotated[bool, Field(description="Whether this cost change requires client approval")]


class ScheduleChangeDetails(BaseModel):
    model_config = ConfigDict(extra="forbid")

    NoOfDays: Annotated[int, Field(description="Number of days to adjust schedule (positive or negative)")]
    ConstructionTaskId: Annotated[str, Field(pattern=UUID_PATTERN, description="UUID of the construction task affected")]
    RequiresClientApproval: Annotated[
        bool, Field(description="Whether this schedule change requires client approval")
    ]


class CreateActionItem(CreateInput):
    """ActionTypeId selects which nested change object is meaningful:
    1 = CostChange, 2 = ScheduleChange, 3 = generic task (neither).
    """

    path: ClassVar[str] = "/action-items"

    Title: Annotated[str, Field(min_length=1, description="Brief title summarizing the action item")]
    Description: Annotated[str, Field(min_length=1, description="Detailed description of the action item")]
    ProjectId: Annotated[str, Field(pattern=UUID_PATTERN, description="UUID of the project this action item belongs to")]
    ActionTypeId: Annotated[
        int, Field(ge=1, le=3, description="Type of action: 1=CostChange, 2=ScheduleChange, 3=Generic")
    ]
    DueDate: Annotated[str, Field(pattern=ISO_DATE_PATTERN, description="Due date in ISO format (YYYY-MM-DD)")]
    Status: Annotated[Optional[int], Field(description="Status code (default: 1)")] = None
    Source: Annotated[Optional[int], Field(description="Source identifier (default: 1)")] = None
    InitialComment: Annotated[Optional[str], Field(description="Optional initial comment or note")] = None
    CostChange: Annotated[
        Optional[CostChangeDetails], Field(description="Required when ActionTypeId is 1 (CostChange)")
    ] = None
    ScheduleChange: Annotated[
        Optional[ScheduleChangeDetails], Field(description="Required when ActionTypeId is 2 (ScheduleChange)")
    ] = None


class AddActionItemComment(ToolInput):
    actionItemId: ActionItemId
    comment: Annotated[str, Field(description="Comment text")]

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec(
            "POST", f"/action-items/{path_segment(self.actionItemId)}/comments", body={"Comment": self.comment}
        )


class AssignActionItemSupervisor(ToolInput):
    actionItemId: ActionItemId
    supervisorId: Annotated[int, Field(description="Supervisor user ID")]

    def to_request(self, config: EndpointConfig) -> RequestSpec:
        return RequestSpec(
            "POST",
            f"/action-items/{path_segment(self.actionItemId)}/supervisors",
            body={"SupervisorId": self.supervisorId},
        )


def get_tools() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name="list_action_items",
            title="List Action Items",
            description="List action items for a specific project",
            input_model=ListActionItems,
        ),
        ToolDefinition(
            name="create_action_item",
            title="Create Action Item",
            description=(
                "Create a new action item for a construction project. Action items can track cost changes, "
                "schedule changes, or general tasks. Include CostChange object for type 1, "
                "ScheduleChange object for type 2."
            ),
            input_model=CreateActionItem,
        ),
        ToolDefinition(
            name="add_action_item_comment",
            title="Add Action Item Comment",
            description="Add a comment to an action item",
            input_model=AddActionItemComment,
        ),
        ToolDefinition(
            name="assign_action_item_supervisor",
            title="Assign Action Item Supervisor",
            description="Assign a supervisor to an action item",
            input_model=AssignActionItemSupervisor,
        ),
    ]
