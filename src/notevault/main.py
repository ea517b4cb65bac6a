"""Unified entry point for notevault.

This module provides a unified entry point that can start different interfaces:
- REST API server for the note editor (default)
- CLI interface
"""

import argparse


def main(argv: list[str] | None = None):
    """Main entry point with interface selection."""
    parser = argparse.ArgumentParser(
        description="notevault - filesystem-first storage for markdown notes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Interfaces:
  api         Start the REST API server used by the editor (default)
  cli         Run a CLI command against the vault

Examples:
  notevault                                  # Start API server
  notevault api --port 8080                  # Start API on custom port
  notevault cli resolve notes/2024-05-16-welcome.md
  notevault cli cleanup notes/2024-05-16-welcome.md --vault ~/Notes
""",
    )

    parser.add_argument(
        "interface",
        nargs="?",
        default="api",
        choices=["api", "cli"],
        help="Which interface to start (default: api)",
    )

    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind API server to (default: 127.0.0.1)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for API server (default: 8421)",
    )

    args, rest = parser.parse_known_args(argv)

    if args.interface == "api":
        if rest:
            parser.error(f"unrecognized arguments: {' '.join(rest)}")

        import uvicorn

        from notevault.core.config import NOTEVAULT_HOST, NOTEVAULT_PORT, setup_logging

        setup_logging()
        host = args.host or NOTEVAULT_HOST or "127.0.0.1"
        port = args.port or NOTEVAULT_PORT

        print(f"Starting notevault API server on {host}:{port}")
        uvicorn.run(
            "notevault.api.app:app",
            host=host,
            port=port,
            reload=False,
        )

    elif args.interface == "cli":
        from notevault.interfaces.cli.app import run_cli

        run_cli(rest)


if __name__ == "__main__":
    main()
