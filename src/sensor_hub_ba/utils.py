"""Utilidades operativas del servicio"""

import asyncio

from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync


async def _ping(settings) -> bool:
    async with InfluxDBClientAsync(
        url=settings.influx_url,
        token=settings.influx_token,
        org=settings.influx_org,
    ) as client:
        return await client.ping()


def check_influx_connection(settings) -> bool:
    """Verifica la conexión con InfluxDB"""
    try:
        return bool(asyncio.run(_ping(settings)))
    except Exception:
        return False
