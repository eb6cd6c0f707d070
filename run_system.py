#!/usr/bin/env python3
"""Script de ejecución principal del servicio de sensores"""

import sys

from sensor_hub_ba.config import ConfigError, load_settings
from sensor_hub_ba.main import main
from sensor_hub_ba.utils import check_influx_connection


def run_check():
    """Solo verifica configuración y conexión con InfluxDB"""
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"❌ {e}")
        return 1

    if check_influx_connection(settings):
        print(f"✅ InfluxDB disponible en {settings.influx_url}")
        return 0
    print(f"❌ InfluxDB no responde en {settings.influx_url}")
    return 1


if __name__ == "__main__":
    if len(sys.argv) > 1:
        command = sys.argv[1]
        if command == "check":
            sys.exit(run_check())
        elif command == "serve":
            main()
        else:
            print("Comandos disponibles: check, serve")
    else:
        main()
