"""
Server configuration.

Settings are read once at startup from the environment (optionally backed by
a profile in the local secrets file) and passed explicitly to the API client
and tool handlers.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .local_secrets import LocalSecretsBackend

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.boomi.com/api/rest/v1/"
DEFAULT_TIMEOUT = 10.0
DEFAULT_OUTPUT_DIR = "boomi_components"
DEFAULT_DIAGNOSTIC_FILE = "env_missing.txt"


def _env(*names: str, default: str = "") -> str:
    """Return the first non-empty environment variable among names."""
    for name in names:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return default


@dataclass(frozen=True)
class BoomiSettings:
    """Static Boomi credentials plus the knobs the tools need."""

    user: str = ""
    token: str = ""
    account_id: str = ""
    environment_id: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    diagnostic_file: Optional[Path] = Path(DEFAULT_DIAGNOSTIC_FILE)

    @classmethod
    def from_env(cls) -> "BoomiSettings":
        """Build settings from BOOMI_* environment variables.

        If BOOMI_PROFILE is set, credential fields left empty by the
        environment are filled from that profile in the local secrets file.
        """
        user = _env("BOOMI_USER")
        token = _env("BOOMI_TOKEN")
        account_id = _env("BOOMI_ACCOUNT_ID", "ACCOUNT_ID")
        environment_id = _env("BOOMI_ENVIRONMENT_ID", "ENVIRONMENT_ID")

        profile = _env("BOOMI_PROFILE")
        if profile:
            backend = LocalSecretsBackend(_env("BOOMI_SECRETS_FILE") or None)
            try:
                stored = backend.get_secret(profile)
            except ValueError as e:
                logger.warning("Could not load profile from %s: %s", backend.storage_file, e)
                stored = {}
            user = user or stored.get("username", "")
            token = token or stored.get("password", "")
            account_id = account_id or stored.get("account_id", "")
            environment_id = environment_id or stored.get("environment_id", "")

        timeout_raw = _env("BOOMI_API_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            logger.warning("Invalid BOOMI_API_TIMEOUT '%s', using %ss", timeout_raw, DEFAULT_TIMEOUT)
            timeout = DEFAULT_TIMEOUT

        # An explicitly empty BOOMI_DIAGNOSTIC_FILE turns the marker file off
        diagnostic_raw = os.getenv("BOOMI_DIAGNOSTIC_FILE", DEFAULT_DIAGNOSTIC_FILE).strip()

        return cls(
            user=user,
            token=token,
            account_id=account_id,
            environment_id=environment_id,
            base_url=_env("BOOMI_API_BASE_URL", default=DEFAULT_BASE_URL),
            timeout=timeout,
            output_dir=Path(_env("BOOMI_OUTPUT_DIR", default=DEFAULT_OUTPUT_DIR)),
            diagnostic_file=Path(diagnostic_raw) if diagnostic_raw else None,
        )

    def missing_fields(self) -> List[str]:
        """Names of the credential values that are empty."""
        required = [
            ("BOOMI_USER", self.user),
            ("BOOMI_TOKEN", self.token),
            ("ACCOUNT_ID", self.account_id),
            ("ENVIRONMENT_ID", self.environment_id),
        ]
        return [name for name, value in required if not value]

    def is_valid(self) -> bool:
        """Check that all four credential values are present.

        On failure the missing names are logged and a diagnostic marker file
        is written (best-effort, write errors are logged only).
        """
        missing = self.missing_fields()
        if not missing:
            return True

        message = f"Missing required static authentication values: {', '.join(missing)}"
        logger.error(message)

        if self.diagnostic_file is not None:
            try:
                self.diagnostic_file.write_text(f"{message}\nPlease verify these static values.")
            except OSError as e:
                logger.warning("Could not write diagnostic file %s: %s", self.diagnostic_file, e)

        return False
