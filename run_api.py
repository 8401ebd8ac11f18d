#!/usr/bin/env python3
"""Entry point for running the API service."""

import sys

import uvicorn
from dotenv import load_dotenv

from services.api.config import ConfigError, load_config
from shared.utils.logging import logging_config, setup_logging


def main():
    load_dotenv()

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Fatal startup error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(level=config.log_level)

    uvicorn.run(
        "services.api.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.environment == "development",
        log_config=logging_config(config.log_level),
    )


if __name__ == "__main__":
    main()
