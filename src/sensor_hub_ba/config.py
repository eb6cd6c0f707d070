"""Configuración global del servicio de ingesta de sensores"""

import logging
import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

SERVICE_NAME = "sensor-hub-ba"
VERSION = "1.0.0"

# Escucha en todas las interfaces
LISTEN_HOST = "0.0.0.0"

# Destino en InfluxDB (fijos)
INFLUX_BUCKET = "sensors-bucket"
MEASUREMENT = "rpi_sensors"

LOG_FORMAT = "[sensor-hub] %(asctime)s %(levelname)s %(message)s"

REQUIRED_KEYS = ("INFLUX_HOST", "INFLUX_TOKEN", "INFLUX_ORG")
ENV_KEYS = ("PORT", "INFLUX_HOST", "INFLUX_PORT", "INFLUX_TOKEN", "INFLUX_ORG", "LOG_LEVEL")


class ConfigError(RuntimeError):
    """Configuración ausente o inválida; fatal al arrancar"""


class LogLevel(str, Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseModel):
    port: int = Field(default=3000, ge=0, le=65535, validation_alias="PORT")
    influx_host: str = Field(validation_alias="INFLUX_HOST")
    influx_port: int = Field(default=8086, ge=0, le=65535, validation_alias="INFLUX_PORT")
    influx_token: str = Field(validation_alias="INFLUX_TOKEN")
    influx_org: str = Field(validation_alias="INFLUX_ORG")
    log_level: LogLevel = Field(default=LogLevel.INFO, validation_alias="LOG_LEVEL")

    @property
    def influx_url(self) -> str:
        return f"http://{self.influx_host}:{self.influx_port}"


def load_settings() -> Settings:
    """Lee la configuración del entorno (y de .env si existe)"""
    load_dotenv()

    data = {key: os.environ[key] for key in ENV_KEYS if key in os.environ}

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigError(f"Configuración requerida ausente: {', '.join(missing)}")

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        invalid = ", ".join(
            str(err["loc"][0]) for err in e.errors() if err.get("loc")
        )
        raise ConfigError(f"Configuración inválida: {invalid or e}") from e


def configure_logging(level=LogLevel.INFO):
    """Configura el logging del proceso (una sola vez, al arrancar)"""
    logging.basicConfig(level=LogLevel(level).value, format=LOG_FORMAT)
