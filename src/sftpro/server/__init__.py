"""MCP server exposing the SFT Pro pipeline as tools."""

from sftpro.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
