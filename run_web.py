#!/usr/bin/env python
"""Web server startup script for local development."""

import os
import sys
from pathlib import Path

from cmsconfig.config import Settings
from cmsconfig.errors import ConfigException


def main():
    """Start the web server in development mode."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    if config_path is not None and not Path(config_path).exists():
        print(f"Configuration file not found: {config_path}")
        sys.exit(1)

    if config_path is not None:
        os.environ["CONFIG_FILE"] = config_path
    os.environ.setdefault("CMSCONFIG_ENVIRONMENT", "development")

    try:
        settings = Settings.load(config_path)
    except ConfigException as e:
        print(e)
        sys.exit(1)

    host = settings.web.host
    port = settings.web.port

    print(f"Starting web service on http://{host}:{port}")
    print("Press Ctrl+C to stop")

    import uvicorn

    uvicorn.run(
        "cmsconfig.api:create_app",
        host=host,
        port=port,
        factory=True,
        reload=True,
    )


if __name__ == "__main__":
    main()
