"""Shared fixtures for the Boomi deployment MCP tests."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import httpx
import pytest

from boomi_deploy_mcp.api_client import BoomiApiClient
from boomi_deploy_mcp.config import BoomiSettings


@pytest.fixture
def settings(tmp_path):
    return BoomiSettings(
        user='BOOMI_TOKEN.dev@example.com',
        token='secret-token',
        account_id='acct-123',
        environment_id='env-static',
        output_dir=tmp_path / 'components',
        diagnostic_file=tmp_path / 'env_missing.txt',
    )


@pytest.fixture
def empty_settings(tmp_path):
    return BoomiSettings(
        output_dir=tmp_path / 'components',
        diagnostic_file=tmp_path / 'env_missing.txt',
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_client():
    """Build a client whose HTTP calls are answered by the given handler."""
    def _make(settings, handler):
        transport = RecordingTransport(handler)
        return BoomiApiClient(settings, transport=transport), transport
    return _make
