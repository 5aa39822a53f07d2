#!/usr/bin/env python3
"""
Command-line client for the temperature MCP server.
Spawns mcp_server.py over stdio and calls get_temperature.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from fastmcp.client import Client
from fastmcp.client.transports import PythonStdioTransport
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config import Config

console = Console()

DEFAULT_SERVER_SCRIPT = Path(__file__).parent / "mcp_server.py"


def _build_transport(server_script, log_dir=None):
    args = ["--quiet"]
    if log_dir:
        args += ["--log-dir", str(log_dir)]
    # stdio subprocesses only inherit a minimal environment by default.
    return PythonStdioTransport(
        script_path=str(server_script), args=args, env=dict(os.environ)
    )


def extract_text(result):
    """Join the text blocks of a CallToolResult."""
    return "\n".join(
        block.text for block in (result.content or []) if hasattr(block, "text")
    )


async def list_tools(server_script=DEFAULT_SERVER_SCRIPT, log_dir=None):
    async with Client(_build_transport(server_script, log_dir)) as client:
        return await client.list_tools()


async def get_temperature(location, unit=None, server_script=DEFAULT_SERVER_SCRIPT, log_dir=None):
    """Call get_temperature on a freshly spawned server; returns the raw CallToolResult."""
    arguments = {"location": location}
    if unit:
        arguments["unit"] = unit
    async with Client(_build_transport(server_script, log_dir)) as client:
        return await client.call_tool_mcp("get_temperature", arguments)


def _print_tools(tools):
    table = Table(title=Config.SERVER_NAME, show_header=True, header_style="bold magenta")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Description", style="green")
    table.add_column("Parameters")
    for t in tools:
        schema = t.inputSchema or {}
        required = set(schema.get("required", []))
        params = ", ".join(
            f"{name}{'' if name in required else '?'}"
            for name in schema.get("properties", {})
        )
        table.add_row(t.name, t.description or "", params)
    console.print(table)


async def _amain(args):
    if args.list_tools:
        with console.status("[bold blue]Listing tools..."):
            tools = await list_tools(args.server, args.log_dir)
        _print_tools(tools)
        return 0

    if not args.location:
        console.print("[red]A location is required unless --list-tools is given.[/red]")
        return 2

    with console.status(f"[bold green]Fetching temperature for {escape(args.location)}..."):
        result = await get_temperature(args.location, args.unit, args.server, args.log_dir)

    text = extract_text(result)
    if result.isError:
        console.print(f"[red]get_temperature failed: {escape(text)}[/red]")
        return 1
    console.print(Panel(Text(text), title="get_temperature", border_style="green"))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Temperature MCP client")
    parser.add_argument("location", nargs="?", help="Location to look up")
    parser.add_argument("--unit", help="celsius/c/metric or fahrenheit/f/imperial")
    parser.add_argument(
        "--server", default=str(DEFAULT_SERVER_SCRIPT), help="Path to mcp_server.py"
    )
    parser.add_argument("--log-dir", help="Log directory passed to the server")
    parser.add_argument(
        "--list-tools", action="store_true", help="List the server's tools and exit"
    )
    args = parser.parse_args(argv)

    try:
        return asyncio.run(_amain(args))
    except KeyboardInterrupt:
        console.print("\n[bold yellow]Interrupted.[/bold yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
