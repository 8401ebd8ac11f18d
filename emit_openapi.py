#!/usr/bin/env python3
"""Write the OpenAPI document to openapi/openapi.json."""

import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from services.api.app import create_app
from services.api.config import ConfigError, load_config

DEFAULT_OUTPUT = Path("openapi") / "openapi.json"


def emit(output: Path = DEFAULT_OUTPUT) -> Path:
    """
    Build the app and write its OpenAPI document.

    A placeholder API key is used when none is configured; the document does
    not depend on its value.
    """
    os.environ.setdefault("API_KEY", "emit-placeholder")
    app = create_app(load_config())

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    return output


def main():
    load_dotenv()
    try:
        path = emit()
    except ConfigError as e:
        print(f"Failed to emit OpenAPI spec: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"OpenAPI spec written to {path}")


if __name__ == "__main__":
    main()
