"""Command-line entry point: ``python -m markblog [port]``."""
from __future__ import annotations

import argparse
import logging
import re

import uvicorn

from markblog.core.settings import settings

logger = logging.getLogger("markblog")

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_port(value: str | None, default: int) -> int:
    """Return the leading integer of ``value`` as a port number.

    Trailing garbage is ignored (``"9000abc"`` is 9000). ``default`` is used when
    the value is missing, has no leading digits or is not a usable port.
    """
    match = _LEADING_INT_RE.match(value or "")
    if match is None:
        return default
    port = int(match.group(1))
    return port if 0 < port < 65536 else default


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="markblog", description="Run the markblog server")
    parser.add_argument(
        "port",
        nargs="?",
        default=None,
        help=f"Port to listen on (defaults to {settings.port})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = parse_port(args.port, settings.port)
    logger.info("Server run at http://%s:%d", settings.host, port)

    from markblog.main import app

    uvicorn.run(app, host=settings.host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
