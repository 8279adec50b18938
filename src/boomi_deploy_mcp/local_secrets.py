"""
Local file-based credential lookup for development.
Reads Boomi credentials from the same JSON file the local dev server
writes them to, so a saved profile can back the static settings.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_SECRETS_FILE = "~/.boomi_mcp_local_secrets.json"

# Profiles are stored per subject; the local dev user is the only subject.
LOCAL_SUBJECT = "local-dev-user"


class LocalSecretsBackend:
    """Read-only access to the local credential file."""

    def __init__(self, storage_file: str = None):
        """Initialize local secrets backend.

        Args:
            storage_file: Path to JSON file holding credentials.
                         Defaults to ~/.boomi_mcp_local_secrets.json
        """
        if storage_file is None:
            storage_file = DEFAULT_SECRETS_FILE

        self.storage_file = Path(os.path.expanduser(storage_file))

    def _read_data(self) -> Dict:
        """Read all data from storage file."""
        try:
            with open(self.storage_file, 'r') as f:
                return json.load(f)
        except (json.JSONDecodeError, FileNotFoundError):
            return {}

    def get_secret(self, profile: str, subject: str = LOCAL_SUBJECT) -> Dict[str, str]:
        """Retrieve credentials for a profile.

        Args:
            profile: Profile name
            subject: User identifier the profile is stored under

        Returns:
            Credentials dictionary (username, password, account_id,
            and optionally environment_id)

        Raises:
            ValueError: If profile not found
        """
        data = self._read_data()

        if subject not in data:
            raise ValueError(f"No credentials found for user: {subject}")

        if profile not in data[subject]:
            available = list(data[subject].keys())
            raise ValueError(
                f"Profile '{profile}' not found for user {subject}. "
                f"Available profiles: {available}"
            )

        return data[subject][profile]

