from importlib import import_module
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import logging
import pkgutil
import sys

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import TextResource

from loco_mcp.core.config import get_config
from loco_mcp.core.logging_config import setup_logging

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
RESOURCES_DIR = PACKAGE_DIR / "resources"
TOOLS_PACKAGE = "loco_mcp.tools"
TOOLS_DIR = PACKAGE_DIR / "tools"
INSTRUCTIONS_RESOURCE = "assistant_instructions"

###################################################### MCP Resources ######################################################


def load_resources(resources_dir: Path = RESOURCES_DIR) -> List[Tuple[Path, str]]:
    """Read every markdown file in `resources_dir` as (path, content)."""
    resource_files: List[Tuple[Path, str]] = []
    if resources_dir.is_dir():
        for file_path in sorted(resources_dir.iterdir()):
            if file_path.is_file() and file_path.suffix == ".md":
                resource_files.append((file_path, file_path.read_text(encoding="utf-8")))
    logger.info(f"Total resources discovered: {len(resource_files)}, resource names: {[p.stem for p, _ in resource_files]}")
    return resource_files


def register_resources(mcp: FastMCP, resource_files: List[Tuple[Path, str]]) -> None:
    for file_path, content in resource_files:
        resource = TextResource(
            uri=f"resource://{file_path.stem.replace(' ', '_')}",
            name=file_path.stem,
            text=content,
            description=f"Contents of {file_path.name}",
            mime_type="text/markdown",
        )
        mcp.add_resource(resource)
    logger.info(f"Total resources loaded into MCP: {len(resource_files)}")


###################################################### MCP Tools ######################################################


def register_tools(mcp: FastMCP, tools_dir: Path = TOOLS_DIR, package: str = TOOLS_PACKAGE) -> List[str]:
    """Import every public module in the tools package and register its `get_tools()` mapping.

    mapping: tool_name -> { 'func': callable, 'title': str, 'description': str }
    """
    registered_tool_names: List[str] = []
    for _finder, name, _ispkg in pkgutil.iter_modules([str(tools_dir)]):
        if name.startswith("_"):
            continue
        module_name = f"{package}.{name}"
        try:
            mod = import_module(module_name)
        except ImportError:
            logger.exception(f"Failed to load tools from module {module_name}")
            continue
        if not hasattr(mod, "get_tools"):
            logger.warning(f"Tools module {module_name} has no get_tools(); skipping")
            continue

        for tool_name, meta in mod.get_tools().items():
            if isinstance(meta, dict):
                func = meta.get("func")
                title = meta.get("title")
                description = meta.get("description")
            else:
                func, title, description = meta, None, None

            if not callable(func):
                logger.warning(f"Tool {tool_name} in {module_name} did not provide a callable; skipping")
                continue

            mcp.add_tool(func, name=tool_name, title=title, description=description)
            logger.info(f"Added tool: {tool_name} (title={title}) from {module_name}")
            registered_tool_names.append(tool_name)

    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return registered_tool_names


###################################################### Server ######################################################


def create_server(config: Optional[Dict] = None) -> FastMCP:
    """Build the FastMCP server with all resources and tools registered."""
    cfg = config if config is not None else (get_config() or {})
    server_cfg = cfg.get("server") or {}

    resource_files = load_resources()
    instructions = next(
        (content for path, content in resource_files if path.stem.lower() == INSTRUCTIONS_RESOURCE), None
    )

    mcp = FastMCP(server_cfg.get("name", "loco-mcp"), instructions=instructions)
    # FastMCP has no version argument; the low-level server reports this one on initialize
    mcp._mcp_server.version = str(server_cfg.get("version", "1.1.0"))
    logger.info(f"MCP server instance created with instructions: {bool(instructions)}")

    register_resources(mcp, resource_files)
    register_tools(mcp)
    return mcp


###################################################### Startup ######################################################


def main() -> None:
    load_dotenv()
    log_cfg = (get_config() or {}).get("logging") or {}
    logs_dir = Path(log_cfg.get("logs_dir") or "logs").resolve()
    setup_logging(
        logs_dir=logs_dir,
        log_file_name=log_cfg.get("log_file_name", "server.log"),
        level=log_cfg.get("level", "INFO"),
    )
    logger.info("Starting MCP server...")
    try:
        mcp = create_server()
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print(f"Unhandled exception occurred. See the server log under {logs_dir} for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
