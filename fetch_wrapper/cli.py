"""Command-line entry point: send one request through the fetch pipeline."""

import argparse
import asyncio
import json
import logging
import os
from typing import Any

from fetch_wrapper import create_fetch_wrapper, merge_headers
from fetch_wrapper.http_client import HttpxTransport
from fetch_wrapper.settings import Settings


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a single request through the fetch pipeline.")
    parser.add_argument("url", help="Absolute URL, or a path relative to FETCH_BASE_URL.")
    parser.add_argument("-X", "--method", default="GET", help="HTTP method (default: GET).")
    parser.add_argument("-d", "--data", help="JSON payload to send as the request body.")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Extra request header; may be repeated.",
    )
    return parser.parse_args()


def _render(outcome: Any) -> str:
    if isinstance(outcome, BaseException):
        return f"error: {outcome}"
    text = getattr(outcome, "text", None)
    if isinstance(text, str):
        return text
    return json.dumps(outcome, indent=2, default=str)


async def _run(args: argparse.Namespace, settings: Settings) -> Any:
    headers = [tuple(part.strip() for part in item.split(":", 1)) for item in args.header if ":" in item]
    payload = json.loads(args.data) if args.data is not None else None
    wrapper = create_fetch_wrapper(
        singleton=True,
        transport=HttpxTransport.from_settings(settings),
        headers={"Content-Type": "application/json;charset=UTF-8"},
        before_send=merge_headers(headers),
    )
    try:
        request = wrapper.create(args.method.upper())
        return await request(args.url, payload)
    finally:
        await wrapper.aclose()


def main() -> None:
    """Parse arguments, run the request and print the outcome."""
    _configure_logging()
    logger = logging.getLogger("fetch-wrapper")
    args = _parse_args()
    settings = Settings.load()

    try:
        outcome = asyncio.run(_run(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted (Ctrl+C).")
        return
    except Exception:
        logger.exception("Request stopped due to an unexpected error.")
        raise

    print(_render(outcome))
    if isinstance(outcome, BaseException):
        raise SystemExit(1)

