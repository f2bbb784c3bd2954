#!/usr/bin/env python3
"""
Voter Portal CLI — serve the API or query the spreadsheet directly.

USAGE:
  python -m voter_portal.cli serve                       # Start API server
  python -m voter_portal.cli serve --port 8080 --reload

  python -m voter_portal.cli search "ram"                # Print matches as JSON
  python -m voter_portal.cli search "booth 5" --file other.xlsx

  python -m voter_portal.cli inspect                     # Readiness, count, sample rows
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from voter_portal import config
from voter_portal.data.loader import load_snapshot
from voter_portal.logging_utils import configure_logging
from voter_portal.search import debug_summary, project, search_snapshot


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nServer running at http://localhost:{args.port}")
    print(f"Public search: http://localhost:{args.port}/search?q=ram\n")
    uvicorn.run("voter_portal.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def cmd_search(args):
    """Load the workbook once and print matching voters."""
    snapshot = load_snapshot(Path(args.file))
    results = [project(v) for v in search_snapshot(snapshot, args.query, args.limit)]
    print(json.dumps(results, ensure_ascii=False, indent=2))


def cmd_inspect(args):
    """Load the workbook once and print the debug summary."""
    snapshot = load_snapshot(Path(args.file))
    summary = debug_summary(snapshot)
    if snapshot.error:
        summary["error"] = snapshot.error
    print(json.dumps(summary, ensure_ascii=False, indent=2))


def main():
    parser = argparse.ArgumentParser(
        description="Voter Portal — public voter search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=config.PORT, help=f"Port (default {config.PORT})")
    serve_parser.add_argument("--reload", action="store_true", help="Enable code auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search the spreadsheet")
    search_parser.add_argument("query", help="Name or polling station fragment")
    search_parser.add_argument("--file", default=str(config.DATA_FILE), help="Workbook path")
    search_parser.add_argument("--limit", type=int, default=config.SEARCH_LIMIT, help="Max results")
    search_parser.set_defaults(func=cmd_search)

    # inspect subcommand
    inspect_parser = subparsers.add_parser("inspect", help="Show load summary")
    inspect_parser.add_argument("--file", default=str(config.DATA_FILE), help="Workbook path")
    inspect_parser.set_defaults(func=cmd_inspect)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        return

    configure_logging(config.LOG_LEVEL)
    args.func(args)


if __name__ == "__main__":
    main()
