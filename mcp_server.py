"""
MCP Server Wrapping the todo web app (`mcp_server.py`)
"""

import os

from mcp.server.fastmcp import FastMCP
import requests

TODO_APP_URL = os.environ.get("TODO_APP_URL", "http://localhost:3000")

# Initialize MCP server
mcp = FastMCP("Todo List MCP Server")

# One HTTP session keeps the session cookie, and with it the same todo list
http = requests.Session()


@mcp.resource("todo://list")
def list_todos() -> str:
    """Fetch every todo as an HTML fragment."""
    return filter_todos("all")


@mcp.tool()
def filter_todos(sort: str = "all") -> str:
    """List todos filtered by 'all', 'done' or 'not done'."""
    response = http.get(f"{TODO_APP_URL}/todos", params={"sort": sort})
    response.raise_for_status()
    return response.text


@mcp.tool()
def add_todo(content: str) -> str:
    """Add a new todo and return its HTML fragment."""
    response = http.post(f"{TODO_APP_URL}/todos", data={"content": content})
    response.raise_for_status()
    return response.text


@mcp.tool()
def toggle_todo(todo_id: int) -> str:
    """Flip the done flag of a todo."""
    response = http.put(f"{TODO_APP_URL}/todos/{todo_id}")
    response.raise_for_status()
    return response.text


@mcp.tool()
def delete_todo(todo_id: int) -> bool:
    """Delete a todo."""
    response = http.delete(f"{TODO_APP_URL}/todos/{todo_id}")
    response.raise_for_status()
    return True


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
