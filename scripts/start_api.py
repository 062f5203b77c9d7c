import logging
import os
import sys

import uvicorn

from storefront.core.config import settings


def _read_port() -> int:
    """Fetch and validate the PORT environment variable."""
    value = os.environ.get("PORT", "8000")
    try:
        return int(value)
    except ValueError as exc:  # pragma: no cover - fatal configuration
        raise SystemExit(f"Invalid PORT '{value}': {exc}") from exc


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = _read_port()
    # One process: the default in-memory database is per process.
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=port, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - last line of defense
        print(f"Failed to start API: {exc}", file=sys.stderr)
        raise
