"""
FastMCP host for the Boomi deployment tools.

Registers queryDeploymentStatus, getComponentDetails and the greeting://{name}
resource, then serves them over stdio. Logs go to stderr; stdout carries the
MCP protocol.
"""

import logging
import os
import sys
from typing import Optional

import httpx
from fastmcp import FastMCP

from . import __version__
from .api_client import BoomiApiClient
from .config import BoomiSettings
from .tools import get_component_details, greeting, query_deployment_status

logger = logging.getLogger("boomi_deploy_mcp")

SERVER_NAME = "Boomi Deployment MCP Server"


def configure_logging(level: Optional[str] = None) -> None:
    """Send package logs to stderr as "[LEVEL] message"."""
    level = (level or os.getenv("BOOMI_LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.propagate = False


def create_server(settings: BoomiSettings, transport: Optional[httpx.BaseTransport] = None) -> FastMCP:
    """Build the FastMCP server with tools bound to the given settings.

    Args:
        settings: Static credentials and output configuration
        transport: Optional httpx transport for the Boomi client (tests)
    """
    mcp = FastMCP(name=SERVER_NAME)
    boomi_client = BoomiApiClient(settings, transport=transport)

    @mcp.tool(name="queryDeploymentStatus")
    def query_deployment_status_tool(environmentId: str) -> str:
        """
        Query Boomi deployments that are not the current version for an environment.

        Args:
            environmentId: Boomi environment ID. Pass "test" to use the
                environment configured on the server.

        Returns:
            Deployment query result as pretty-printed JSON, or "Error: ..." text
        """
        return query_deployment_status(boomi_client, environmentId)

    @mcp.tool(name="getComponentDetails")
    def get_component_details_tool(componentId: str) -> str:
        """
        Get details for a Boomi component.

        Process and profile components are returned as a short summary
        (id, name, type, version, created/modified info, description).
        Other component types are returned as full XML. The XML is also
        saved on the server and its path included in the reply.

        Args:
            componentId: Boomi component ID

        Returns:
            Summary or XML text, or "Error: ..." text
        """
        return get_component_details(boomi_client, componentId, settings.output_dir)

    @mcp.resource("greeting://{name}", name="greeting")
    def greeting_resource(name: str) -> str:
        """Personalized greeting."""
        return greeting(name)

    logger.info("Registered tools: queryDeploymentStatus, getComponentDetails; resource: greeting://{name}")
    return mcp


def main() -> None:
    """Console entry point: run the server over stdio."""
    configure_logging()
    exit_code = 0
    try:
        settings = BoomiSettings.from_env()
        if settings.is_valid():
            logger.info("Static authentication values validated successfully.")

        mcp = create_server(settings)

        logger.info("=" * 60)
        logger.info(" %s v%s", SERVER_NAME, __version__)
        logger.info("=" * 60)
        logger.info("Boomi API:     %s", settings.base_url)
        logger.info("Account:       %s", settings.account_id or "(not set)")
        logger.info("Environment:   %s", settings.environment_id or "(not set)")
        logger.info("Output dir:    %s", settings.output_dir.resolve())
        logger.info("=" * 60)
        logger.info("MCP server is running (stdio)")

        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Process interrupted (SIGINT). Shutting down...")
    except Exception as e:
        logger.exception("Failed to run MCP server: %s", e)
        exit_code = 1
    finally:
        logger.info("Server exited with code: %s.", exit_code)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
