"""
Thin Boomi AtomSphere REST client.

One call = one HTTP request with basic auth and a bounded timeout. Failures
never raise past this module: they come back as ApiFailure so the tool
handlers can render them as ordinary text replies.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import httpx

from .config import BoomiSettings
from .errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

BODY_METHODS = {"POST", "PUT", "PATCH"}


@dataclass
class ApiSuccess:
    """2xx response; body is kept verbatim (JSON or XML text)."""

    body: str
    status: int = 200
    content_type: str = ""

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass
class ApiFailure:
    """Configuration or transport failure reported as data."""

    message: str
    kind: str = TransportError.kind
    details: Dict[str, Any] = field(default_factory=dict)
    status: Optional[int] = None


ApiResult = Union[ApiSuccess, ApiFailure]


class BoomiApiClient:
    """Issues single REST calls against the Boomi platform API."""

    def __init__(self, settings: BoomiSettings, transport: Optional[httpx.BaseTransport] = None):
        """
        Args:
            settings: Credentials, base URL and timeout
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.settings = settings
        self._transport = transport

    def credential_failure(self) -> Optional[ApiFailure]:
        """Return a failure if the static credentials are incomplete, else None."""
        if self.settings.is_valid():
            return None

        if self.settings.diagnostic_file is not None:
            hint = f"Check {self.settings.diagnostic_file} for details."
        else:
            hint = "Check the server log for details."
        return ApiFailure(
            message=f"Missing static values. {hint}",
            kind=ConfigurationError.kind,
            details={"missing": self.settings.missing_fields()},
        )

    def endpoint_url(self, endpoint: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def deployment_query_endpoint(self) -> str:
        return f"{self.settings.account_id}/Deployment/query"

    def component_endpoint(self, component_id: str) -> str:
        return f"{self.settings.account_id}/Component/{component_id}"

    def call(
        self,
        endpoint: str,
        method: str,
        body: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
    ) -> ApiResult:
        """Call a Boomi API endpoint relative to the configured base URL.

        Args:
            endpoint: Path under the base URL, e.g. "<accountId>/Deployment/query"
            method: HTTP method (GET or POST)
            body: JSON payload, sent only for methods that accept one
            accept: Accept header (Component GET only serves application/xml)

        Returns:
            ApiSuccess with the raw body, or ApiFailure describing the problem
        """
        failure = self.credential_failure()
        if failure is not None:
            return failure

        method = method.upper()
        url = self.endpoint_url(endpoint)
        auth = (self.settings.user, self.settings.token)
        request_kwargs: Dict[str, Any] = {"headers": {"Accept": accept}}
        if body is not None and method in BODY_METHODS:
            request_kwargs["json"] = body

        try:
            with httpx.Client(timeout=self.settings.timeout, auth=auth, transport=self._transport) as client:
                response = client.request(method, url, **request_kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return self._failure(endpoint, e, e.response)
        except httpx.TimeoutException as e:
            return self._failure(endpoint, e, None, error_text=f"Request timed out after {self.settings.timeout}s")
        except httpx.RequestError as e:
            return self._failure(endpoint, e, None)

        return ApiSuccess(
            body=response.text,
            status=response.status_code,
            content_type=response.headers.get("content-type", ""),
        )

    def _failure(
        self,
        endpoint: str,
        error: Exception,
        response: Optional[httpx.Response],
        error_text: Optional[str] = None,
    ) -> ApiFailure:
        status = response.status_code if response is not None else None
        details = {
            "message": "Error calling Boomi API",
            "endpoint": endpoint,
            "status": status,
            "statusText": response.reason_phrase if response is not None else None,
            "error": error_text or str(error),
        }
        logger.error("Boomi API Error: %s", json.dumps(details, indent=2))
        return ApiFailure(
            message="Failed to communicate with Boomi API.",
            kind=TransportError.kind,
            details=details,
            status=status,
        )
