"""Punto de entrada del servidor de ingesta"""

import sys

import uvicorn

from .api import create_app
from .config import LISTEN_HOST, ConfigError, configure_logging, load_settings


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings=settings)

    print(f"🌡️  Escuchando en {LISTEN_HOST}:{settings.port}")
    uvicorn.run(
        app,
        host=LISTEN_HOST,
        port=settings.port,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
