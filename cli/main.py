"""CLI entry point and argument parsing"""

import argparse
import asyncio
import sys
import traceback

from rich.console import Console

from cli.logging_setup import setup_logging
from config.app_config import load_app_config
from exceptions import ConfigurationError, FortemError
from runtime import Runtime, build_runtime
from server import create_server

# stdout belongs to the MCP stdio transport
console = Console(stderr=True)


async def run_login(runtime: Runtime) -> str:
    """Log in once and return the wallet address"""
    await runtime.session.ensure_init()
    return runtime.signer.get_address()


def main():
    """Entry point for the CLI"""
    parser = argparse.ArgumentParser(description="Fortem marketplace MCP server (stdio)")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--network",
        choices=["testnet", "mainnet"],
        default=None,
        help="Override FORTEM_NETWORK (default: testnet)"
    )
    parser.add_argument(
        "--login",
        action="store_true",
        help="Log in once, print the wallet address and exit"
    )

    args = parser.parse_args()
    setup_logging(debug=args.debug)

    try:
        app_config = load_app_config(network_override=args.network)
        runtime = build_runtime(app_config)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    try:
        if args.login:
            address = asyncio.run(run_login(runtime))
            console.print(f"[green]✓ Logged in as[/green] {address}")
            return

        mcp = create_server(runtime)
        mcp.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
    except FortemError as e:
        console.print(f"\n[red]Fatal error:[/red] {e}")
        if args.debug:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
