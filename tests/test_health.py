import time

from models.schemas import HealthSnapshot
from services.health import HealthProvider


def test_get_health_reads_uptime_and_hostname(mocker):
    mocker.patch("services.health.psutil.boot_time", return_value=time.time() - 120)
    mocker.patch("services.health.platform.node", return_value="build-box")

    snapshot = HealthProvider().get_health()

    assert isinstance(snapshot, HealthSnapshot)
    assert 120 <= snapshot.uptime < 180
    assert snapshot.name == "build-box"


def test_uptime_never_negative(mocker):
    mocker.patch("services.health.psutil.boot_time", return_value=time.time() + 60)

    assert HealthProvider().get_health().uptime == 0


def test_health_endpoint(client, mocker):
    mocker.patch("services.health.platform.node", return_value="build-box")

    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {"uptime", "name"}
    assert isinstance(body["uptime"], (int, float))
    assert body["uptime"] >= 0
    assert body["name"] == "build-box"


def test_health_endpoint_uses_injected_provider(make_client):
    class FixedProvider:
        def get_health(self):
            return HealthSnapshot(uptime=42.5, name="fixed")

    response = make_client(health_provider=FixedProvider()).get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json() == {"uptime": 42.5, "name": "fixed"}


def test_host_query_failure_is_a_500(make_client, log_messages):
    class BrokenProvider:
        def get_health(self):
            raise OSError("no /proc")

    response = make_client(health_provider=BrokenProvider()).get("/api/v1/health")

    assert response.status_code == 500
    assert response.get_json() == {"message": "Internal server error"}
    assert any("Unhandled exception on GET /api/v1/health" in m for m in log_messages)


def test_health_is_only_served_under_the_versioned_prefix(client):
    assert client.get("/health").status_code == 404
    assert client.post("/api/v1/health").status_code == 405
