"""API REST de ingesta de sensores"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from .config import SERVICE_NAME, VERSION
from .influx_client import InfluxSink, SinkError
from .sensor_models import SensorReading, stamp_reading

logger = logging.getLogger(__name__)


def get_sink(request: Request):
    """Destino de escritura compartido (None en modo solo-log)"""
    return request.app.state.sink


def create_app(settings=None, sink=None) -> FastAPI:
    """Crea la aplicación con el destino de escritura inyectado.

    Si se pasa `sink` se usa tal cual. Si solo se pasan `settings`, el
    cliente InfluxDB se crea una vez al arrancar y se cierra al apagar.
    Sin ninguno de los dos, las lecturas solo se registran en el log.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if app.state.sink is None and settings is not None:
            owned = InfluxSink.from_settings(settings)
            app.state.sink = owned
            logger.info("Cliente InfluxDB listo en %s", settings.influx_url)
        try:
            yield
        finally:
            if owned is not None:
                await owned.close()

    app = FastAPI(
        title="🌡️ Sensor Hub API",
        description="Ingesta de lecturas de sensores Raspberry Pi hacia InfluxDB",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.sink = sink

    @app.exception_handler(SinkError)
    async def sink_error_handler(request: Request, exc: SinkError):
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/")
    async def root():
        """Endpoint raíz con información del servicio"""
        return {
            "message": "🌡️ Sensor Hub API",
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "active",
            "endpoints": {
                "sensors": "POST /sensors",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health_check(sink=Depends(get_sink)):
        """Verificar salud del servicio"""
        return {
            "status": "healthy",
            "sink": sink.name if sink is not None else "log-only",
        }

    @app.post("/sensors")
    async def ingest_sensor_data(reading: SensorReading, sink=Depends(get_sink)):
        """Ingesta de una lectura de sensor"""
        record = stamp_reading(reading)
        logger.info("Lectura de sensor recibida: %r", record)

        if sink is not None:
            await sink.write(record)

        return Response(status_code=200)

    return app
