"""Tests for server bootstrap: tool/resource registration and argument validation."""

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from loco_mcp import server as server_module
from loco_mcp.server import INSTRUCTIONS_RESOURCE, create_server, load_resources, main

EXPECTED_TOOLS = {
    "list_locales",
    "list_assets",
    "get_asset",
    "create_asset",
    "update_asset",
    "delete_asset",
    "get_translations",
    "get_translation",
    "update_translation",
    "list_tags",
    "tag_asset",
    "untag_asset",
}


@pytest.fixture
def server():
    return create_server({"server": {"name": "loco-mcp-test", "version": "9.9.9"}})


class TestRegistration:

    def test_name_version_and_instructions(self, server):
        assert server.name == "loco-mcp-test"
        assert server._mcp_server.version == "9.9.9"
        assert "filter" in server._mcp_server.instructions

    def test_instructions_resource_is_bundled(self):
        stems = [path.stem for path, _ in load_resources()]
        assert INSTRUCTIONS_RESOURCE in stems

    @pytest.mark.asyncio
    async def test_resources_registered(self, server):
        resources = await server.list_resources()
        assert any(str(r.uri).startswith(f"resource://{INSTRUCTIONS_RESOURCE}") for r in resources)
        assert INSTRUCTIONS_RESOURCE in {r.name for r in resources}

    @pytest.mark.asyncio
    async def test_all_tools_registered(self, server):
        tools = await server.list_tools()
        assert {t.name for t in tools} == EXPECTED_TOOLS

    @pytest.mark.asyncio
    async def test_tool_titles_and_descriptions(self, server):
        tools = {t.name: t for t in await server.list_tools()}
        assert tools["tag_asset"].title == "Tag asset"
        assert tools["tag_asset"].description == "Add a tag to an asset. Creates the tag if it doesn't exist."


class TestSchemas:

    @pytest.mark.asyncio
    async def test_create_asset_schema(self, server):
        tools = {t.name: t for t in await server.list_tools()}
        schema = tools["create_asset"].inputSchema

        assert schema["required"] == ["api_key"]
        assert set(schema["properties"]) == {"api_key", "id", "text", "type", "context", "notes"}
        assert schema["properties"]["api_key"]["description"] == "Loco API key for the project"
        assert "html" in str(schema["properties"]["type"])
        assert "xml" in str(schema["properties"]["type"])

    @pytest.mark.asyncio
    async def test_update_translation_schema(self, server):
        tools = {t.name: t for t in await server.list_tools()}
        schema = tools["update_translation"].inputSchema

        assert sorted(schema["required"]) == ["api_key", "asset_id", "locale", "text"]
        assert schema["properties"]["text"]["type"] == "string"


class TestValidation:

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, server, fake_loco, patched_client):
        with pytest.raises(ToolError):
            await server.call_tool("get_asset", {"api_key": "k"})

        assert fake_loco.requests == []

    @pytest.mark.asyncio
    async def test_wrong_primitive_type(self, server, fake_loco, patched_client):
        with pytest.raises(ToolError):
            await server.call_tool("list_tags", {"api_key": 12345})

        assert fake_loco.requests == []

    @pytest.mark.asyncio
    async def test_type_outside_enum(self, server, fake_loco, patched_client):
        with pytest.raises(ToolError):
            await server.call_tool("create_asset", {"api_key": "k", "text": "Hi", "type": "markdown"})

        assert fake_loco.requests == []

    @pytest.mark.asyncio
    async def test_api_error_reaches_caller(self, server, fake_loco, patched_client):
        fake_loco.respond(404, "Asset not found")

        with pytest.raises(ToolError, match=r"Loco API error \(404\): Asset not found"):
            await server.call_tool("get_asset", {"api_key": "k", "asset_id": "missing"})

        assert len(fake_loco.requests) == 1


class TestMain:

    def test_startup_failure_points_at_log_dir(self, tmp_path, monkeypatch, capsys):
        logs_dir = tmp_path / "logs"

        def _fail():
            raise RuntimeError("boom")

        monkeypatch.setattr(server_module, "load_dotenv", lambda: None)
        monkeypatch.setattr(server_module, "get_config", lambda: {"logging": {"logs_dir": str(logs_dir)}})
        monkeypatch.setattr(server_module, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(server_module, "create_server", _fail)

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert str(logs_dir.resolve()) in err
        assert "logs/server.log" not in err
