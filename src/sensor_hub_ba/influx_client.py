"""Cliente InfluxDB para las lecturas de sensores"""

import logging
import math

from influxdb_client import Point, WritePrecision
from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync

from .config import INFLUX_BUCKET, MEASUREMENT
from .sensor_models import SensorReadingWithTimestamp

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1

TAGS = ("name", "ip_address")
FLOAT_FIELDS = ("rpi_temp", "temp", "pressure", "humidity")


class SinkError(Exception):
    """Fallo al persistir una lectura"""


class PointBuildError(SinkError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Error construyendo DataPoint: {cause}")


class SinkWriteError(SinkError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Error escribiendo en InfluxDB: {cause}")


def build_point(record: SensorReadingWithTimestamp) -> Point:
    """Construye el punto de serie temporal para una lectura.

    Tags: name, ip_address. Campos: las medidas ambientales como float y
    uptime como entero. El tiempo del punto es la hora de recepción.
    """
    point = Point(MEASUREMENT)
    for tag in TAGS:
        value = getattr(record, tag)
        # Point descarta en silencio las etiquetas vacías
        if not value:
            raise PointBuildError(f"la etiqueta '{tag}' está vacía")
        point = point.tag(tag, value)

    for field in FLOAT_FIELDS:
        value = float(getattr(record, field))
        # El protocolo de línea no admite NaN ni infinitos
        if not math.isfinite(value):
            raise PointBuildError(f"el campo '{field}' no es finito ({value})")
        point = point.field(field, value)

    if record.uptime > INT64_MAX:
        raise PointBuildError(
            f"el campo 'uptime' excede el rango de enteros de InfluxDB ({record.uptime})"
        )
    point = point.field("uptime", int(record.uptime))

    return point.time(record.timestamp, WritePrecision.NS)


class InfluxSink:
    """Destino de escritura en InfluxDB: un punto por petición, sin reintentos"""

    name = "influxdb"

    def __init__(self, client, org: str, bucket: str = INFLUX_BUCKET):
        self.client = client
        self.org = org
        self.bucket = bucket
        self.write_api = client.write_api()

    @classmethod
    def from_settings(cls, settings) -> "InfluxSink":
        """Crea el cliente; debe llamarse dentro del event loop"""
        client = InfluxDBClientAsync(
            url=settings.influx_url,
            token=settings.influx_token,
            org=settings.influx_org,
        )
        return cls(client, org=settings.influx_org)

    async def write(self, record: SensorReadingWithTimestamp) -> None:
        point = build_point(record)
        try:
            await self.write_api.write(bucket=self.bucket, org=self.org, record=point)
        except Exception as e:
            raise SinkWriteError(e) from e
        logger.debug("Punto escrito en %s/%s", self.bucket, MEASUREMENT)

    async def close(self) -> None:
        await self.client.close()
