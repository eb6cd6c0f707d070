#!/usr/bin/env python3
"""Servidor API de ingesta de sensores"""

from sensor_hub_ba.main import main

if __name__ == "__main__":
    print("🌡️  Iniciando Sensor Hub API...")
    main()
