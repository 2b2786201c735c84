"""Command line entry point.

Usage:
    sjd-status serve [--host HOST] [--port PORT]
    sjd-status status [--url URL]
    sjd-status screen NAME
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from sjd_status.core.config.settings import get_settings
from sjd_status.core.logging import configure_logging
from sjd_status.main import run
from sjd_status.modules.screens.views import SCREENS, ScreenNotFoundError, get_screen
from sjd_status.modules.status_display.component import DisplayState, StatusDisplay

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sjd-status", description="SJD status service and client")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="run the health-check server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    status = commands.add_parser("status", help="fetch and render the server status")
    status.add_argument("--url", default=None, help="server address (default: STATUS_SERVER_URL)")

    screen = commands.add_parser("screen", help="render a placeholder screen")
    screen.add_argument("name", help=f"one of: {', '.join(SCREENS)}")
    return parser


async def _render_status(url: str) -> tuple[DisplayState, str]:
    display = StatusDisplay(url)
    try:
        text = await display.settled()
    finally:
        display.unmount()
    return display.state, text


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        run(host=args.host, port=args.port)
        return 0

    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "status":
        state, text = asyncio.run(_render_status(args.url or settings.status_server_url))
        print(text)
        return 0 if state is DisplayState.SUCCESS else 1

    try:
        screen = get_screen(args.name)
    except ScreenNotFoundError:
        parser.error(f"unknown screen {args.name!r}")
    print(screen.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
