from typing import Any, Optional

import pytest

from sensor_hub_ba.sensor_models import SensorReadingWithTimestamp

INFLUX_ENV = ("PORT", "INFLUX_HOST", "INFLUX_PORT", "INFLUX_TOKEN", "INFLUX_ORG", "LOG_LEVEL")


class FakeSink:
    """Destino en memoria que registra cada escritura"""

    name = "fake"

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.records: list[SensorReadingWithTimestamp] = []
        self.error = error

    async def write(self, record: SensorReadingWithTimestamp) -> None:
        self.records.append(record)
        if self.error is not None:
            raise self.error


class FakeWriteApi:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self.error = error

    async def write(self, bucket: str, org: str, record: Any) -> bool:
        self.calls.append({"bucket": bucket, "org": org, "record": record})
        if self.error is not None:
            raise self.error
        return True


class FakeInfluxClient:
    """Sustituto de InfluxDBClientAsync"""

    def __init__(self, url: str = "", token: str = "", org: str = "", error: Optional[Exception] = None) -> None:
        self.url = url
        self.token = token
        self.org = org
        self.closed = False
        self._write_api = FakeWriteApi(error)

    def write_api(self) -> FakeWriteApi:
        return self._write_api

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def reading_payload() -> dict[str, Any]:
    return {
        "name": "rpi-1",
        "rpi_temp": 40.2,
        "temp": 21.5,
        "pressure": 1013.2,
        "humidity": 45.0,
        "ip_address": "10.0.0.5",
        "uptime": 3600,
    }


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in INFLUX_ENV:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def influx_env(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    clean_env.setenv("INFLUX_HOST", "influx.local")
    clean_env.setenv("INFLUX_TOKEN", "token-123")
    clean_env.setenv("INFLUX_ORG", "home")
    return clean_env
