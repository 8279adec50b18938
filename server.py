#!/usr/bin/env python3
"""
Boomi Deployment MCP Server - stdio launcher.

Run directly without installing the package:
    python server.py

Configure with BOOMI_USER, BOOMI_TOKEN, BOOMI_ACCOUNT_ID and
BOOMI_ENVIRONMENT_ID (or BOOMI_PROFILE for a saved local profile).
"""

import sys
from pathlib import Path

# --- Add src to path ---
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from boomi_deploy_mcp.server import main


if __name__ == "__main__":
    main()
