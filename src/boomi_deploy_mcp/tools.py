"""
Tool and resource handlers.

Handlers never raise for domain failures: credential, transport and parse
problems all come back as text starting with "Error: ". Only the greeting
resource rejects malformed input by raising InvalidInputError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .api_client import ApiFailure, BoomiApiClient
from .component_xml import shape_component
from .config import BoomiSettings
from .errors import InvalidInputError, ParseError

logger = logging.getLogger(__name__)

# Passing this as environmentId selects the configured environment
TEST_ENVIRONMENT_SENTINEL = "test"


def build_deployment_query(environment_id: str) -> Dict[str, Any]:
    """Query filter for non-current deployments in one environment."""
    return {
        "QueryFilter": {
            "expression": {
                "operator": "and",
                "nestedExpression": [
                    {
                        "argument": [environment_id],
                        "operator": "EQUALS",
                        "property": "environmentId",
                    },
                    {
                        "argument": [False],
                        "operator": "EQUALS",
                        "property": "current",
                    },
                ],
            }
        }
    }


def resolve_environment_id(settings: BoomiSettings, requested: str) -> str:
    if requested == TEST_ENVIRONMENT_SENTINEL:
        logger.info("Client passed 'test' as environmentId. Using configured value: %s", settings.environment_id)
        return settings.environment_id
    logger.info("Client passed environmentId: %s", requested)
    return requested


def query_deployment_status(boomi_client: BoomiApiClient, environment_id: str) -> str:
    """Query deployment records for an environment and return them as JSON text."""
    environment_id = resolve_environment_id(boomi_client.settings, environment_id)
    result = boomi_client.call(
        boomi_client.deployment_query_endpoint(),
        "POST",
        build_deployment_query(environment_id),
    )

    if isinstance(result, ApiFailure):
        return f"Error: {result.message}\n{json.dumps(result.details or {}, indent=2)}"

    try:
        payload = result.json()
    except ValueError:
        logger.warning("Deployment query returned a non-JSON body (%s)", result.content_type or "no content type")
        return json.dumps(result.body)
    return json.dumps(payload, indent=2)


def get_component_details(boomi_client: BoomiApiClient, component_id: str, output_dir: Path) -> str:
    """Fetch a component's XML, save it, and return a summary or the full document."""
    # Checked here too so no file is written when credentials are missing
    failure = boomi_client.credential_failure()
    if failure is not None:
        return f"Error: {failure.message}"

    result = boomi_client.call(
        boomi_client.component_endpoint(component_id),
        "GET",
        accept="application/xml",
    )
    if isinstance(result, ApiFailure):
        return f"Error: {result.message}"

    try:
        return shape_component(result.body, component_id, output_dir)
    except ParseError as e:
        logger.error("Failed to parse component %s: %s", component_id, e)
        return f"Error: {e}"


def greeting(name: Any) -> str:
    """Resolve the greeting://{name} resource.

    Template variables may arrive as a list; the first entry is used.

    Raises:
        InvalidInputError: If name is not a string
    """
    if isinstance(name, (list, tuple)):
        name = name[0] if name else None
    if not isinstance(name, str):
        raise InvalidInputError("Invalid 'name' type in variables")
    return f"Hello, {name}!"
