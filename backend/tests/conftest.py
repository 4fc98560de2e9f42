import sys
from datetime import datetime
from pathlib import Path

import pytest
import pytz
from fastapi.testclient import TestClient

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from edd import main
from edd.api.edd import get_now
from edd.config import Settings, get_settings

IST = pytz.timezone("Asia/Kolkata")


def make_settings(**overrides) -> Settings:
    values = {
        "origin_pin": "411005",
        "mot": "E",
        "delhivery_token": "test-token",
        "delhivery_tat_url": "https://track.delhivery.test/api/dc/expected_tat",
        "geo_providers": ["ipinfo", "keycdn"],
        "ipinfo_token": "",
        "client_ip_headers": ["true-client-ip", "cf-connecting-ip", "x-forwarded-for"],
        "http_timeout_s": 1.0,
        "debug_endpoint": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def ist(year, month, day, hour=10, minute=0) -> datetime:
    return IST.localize(datetime(year, month, day, hour, minute))


@pytest.fixture(name="settings")
def settings_fixture():
    return make_settings()


@pytest.fixture(name="now")
def now_fixture():
    # Monday
    return ist(2025, 1, 6, 10, 0)


@pytest.fixture(name="client")
def client_fixture(settings, now):
    main.app.dependency_overrides[get_settings] = lambda: settings
    main.app.dependency_overrides[get_now] = lambda: now
    client = TestClient(main.app)
    yield client
    main.app.dependency_overrides.clear()
