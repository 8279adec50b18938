"""
Error taxonomy for the Boomi deployment tools.

Configuration and transport problems are reported back to the MCP client as
data (see api_client.ApiFailure); ParseError is raised by the component
shaper and turned into an "Error: " reply by the tool handler.
InvalidInputError is the only one allowed to reach the protocol layer.
"""


class BoomiMCPError(Exception):
    """Base class for all errors raised by this package."""

    kind = "error"


class ConfigurationError(BoomiMCPError):
    """Required Boomi credentials are missing."""

    kind = "configuration"


class TransportError(BoomiMCPError):
    """Network failure, timeout or non-2xx response from the Boomi API."""

    kind = "transport"


class ParseError(BoomiMCPError):
    """Malformed component XML or an unexpected document shape."""

    kind = "parse"


class InvalidInputError(BoomiMCPError):
    """Resource arguments do not match the declared template."""

    kind = "invalid_input"
