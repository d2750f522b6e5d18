"""Load configuration and check that a client can be built from it.

Usage::

    python -m netorca_sdk --env-file .env
"""

from __future__ import annotations

import argparse
import logging
import sys

from netorca_sdk.client import NetOrcaClient
from netorca_sdk.config import load_settings
from netorca_sdk.errors import ConfigError, InvalidArgumentError

logger = logging.getLogger("netorca_sdk")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="netorca_sdk", description=__doc__.splitlines()[0])
    parser.add_argument("--env-file", default=".env", help="path to the .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.env_file)
        client = NetOrcaClient.from_settings(settings)
    except (ConfigError, InvalidArgumentError) as exc:
        logger.error("Failed to initialize SDK client: %s", exc)
        return 1

    with client:
        logger.info("SDK client initialized successfully (%s)", client.base_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
