"""
Boomi Deployment MCP Server

Small stdio MCP server proxying two tools to the Boomi AtomSphere REST API:
- queryDeploymentStatus: non-current deployments for an environment
- getComponentDetails: component XML, summarized for processes and profiles

Plus a templated greeting resource (greeting://{name}).
"""

__version__ = "1.0.0"
