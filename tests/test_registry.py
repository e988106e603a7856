import inspect

import pytest
from mcp.types import CallToolResult

from core.models import ToolDefinition, ToolInput
from core.registry import ToolRegistry, discover_tools, signature_for
from core.results import HandlerFault, Success, UnknownTool

EXPECTED_TOOLS = {
    "list_clients",
    "create_client",
    "list_contacts",
    "create_contact",
    "list_proposals",
    "get_proposal_details",
    "list_estimates",
    "list_action_items",
    "create_action_item",
    "add_action_item_comment",
    "assign_action_item_supervisor",
    "get_project_details",
    "list_project_schedules",
    "get_financial_summary",
    "get_project_finances",
}


class Echo(ToolInput):
    value: int


async def _boom(client, request):
    raise RuntimeError("handler exploded")


async def _echo(client, request):
    return Success({"value": request.value})


class TestDiscovery:

    def test_discovers_full_catalog(self):
        names = [d.name for d in discover_tools()]
        assert set(names) == EXPECTED_TOOLS
        assert len(names) == len(set(names))

    def test_every_definition_has_metadata(self):
        for definition in discover_tools():
            assert definition.title
            assert definition.description
            assert issubclass(definition.input_model, ToolInput)

    def test_registry_loads_catalog_by_default(self, registry):
        assert len(registry) == len(EXPECTED_TOOLS)
        assert "list_clients" in registry
        assert "nope" not in registry

    def test_duplicate_names_rejected(self, client):
        definition = ToolDefinition("echo", "Echo", "Echo a value", Echo, _echo)
        with pytest.raises(ValueError, match="Duplicate tool name: echo"):
            ToolRegistry(client, [definition, definition])


class TestDispatch:

    async def test_unknown_tool_is_error_result(self, registry, fake_api):
        result = await registry.dispatch("delete_everything", {})

        assert isinstance(result, UnknownTool)
        assert result.is_error
        assert "delete_everything" in result.text
        assert fake_api.requests == []

    async def test_handler_exception_becomes_fault(self, client):
        registry = ToolRegistry(client, [ToolDefinition("boom", "Boom", "Always fails", Echo, _boom)])

        result = await registry.dispatch("boom", {"value": 1})

        assert isinstance(result, HandlerFault)
        assert result.is_error
        assert result.text == "Error executing tool boom: handler exploded"

    async def test_invalid_arguments_become_fault(self, client):
        registry = ToolRegistry(client, [ToolDefinition("echo", "Echo", "Echo a value", Echo, _echo)])

        result = await registry.dispatch("echo", {"value": "not a number"})

        assert isinstance(result, HandlerFault)
        assert result.text.startswith("Error executing tool echo: invalid arguments (value:")

    async def test_unexpected_arguments_become_fault(self, client):
        registry = ToolRegistry(client, [ToolDefinition("echo", "Echo", "Echo a value", Echo, _echo)])

        result = await registry.dispatch("echo", {"value": 1, "extra": True})

        assert result.is_error
        assert "extra" in result.text

    async def test_missing_arguments_treated_as_empty(self, client):
        registry = ToolRegistry(client, [ToolDefinition("echo", "Echo", "Echo a value", Echo, _echo)])

        result = await registry.dispatch("echo", None)

        assert isinstance(result, HandlerFault)

    async def test_successful_dispatch_returns_handler_result(self, client):
        registry = ToolRegistry(client, [ToolDefinition("echo", "Echo", "Echo a value", Echo, _echo)])

        result = await registry.dispatch("echo", {"value": 3})

        assert result == Success({"value": 3})

    async def test_default_handler_without_request_mapping_is_fault(self, client):
        registry = ToolRegistry(client, [ToolDefinition("echo", "Echo", "Echo a value", Echo)])

        result = await registry.dispatch("echo", {"value": 3})

        assert isinstance(result, HandlerFault)
        assert "Echo does not map to a single request" in result.text


class TestWrapper:

    def test_signature_mirrors_model_fields(self, registry):
        sig = signature_for(registry.get("get_proposal_details").input_model)

        assert list(sig.parameters) == ["proposalId", "includeLines"]
        assert sig.parameters["proposalId"].default is inspect.Parameter.empty
        assert sig.parameters["includeLines"].default is None
        assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in sig.parameters.values())

    async def test_wrapper_returns_call_tool_result(self, registry, fake_api):
        wrapper = registry._make_wrapper(registry.get("list_clients"))

        result = await wrapper(page=None, limit=None)

        assert isinstance(result, CallToolResult)
        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert dict(fake_api.last.url.params) == {"page": "1", "limit": "7"}

    async def test_wrapper_flags_errors(self, registry, fake_api):
        fake_api.route("/api/v1/project-details/p-1", status=404, body={"error": "not found"})
        wrapper = registry._make_wrapper(registry.get("get_project_details"))

        result = await wrapper(projectId="p-1")

        assert result.isError is True
        assert result.content[0].text.startswith("API Error 404:")
