"""Modelos para la API de sensores"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1


class SensorReading(BaseModel):
    """Lectura tal como la envía el dispositivo"""

    # Sin conversiones de texto a número: solo coerción de tipos JSON.
    # NaN e Infinity no son JSON válido aunque json.loads los acepte
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: str
    rpi_temp: float
    temp: float
    pressure: float
    humidity: float
    ip_address: str
    uptime: int = Field(ge=0, le=UINT64_MAX)


class SensorReadingWithTimestamp(SensorReading):
    timestamp: datetime


def stamp_reading(
    reading: SensorReading, now: Optional[datetime] = None
) -> SensorReadingWithTimestamp:
    """Añade la hora de recepción del servidor a la lectura"""
    if now is None:
        now = datetime.now(timezone.utc)
    return SensorReadingWithTimestamp(**reading.model_dump(), timestamp=now)
