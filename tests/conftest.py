import pytest

import common.utils as utils
from common.config import get_settings


class FakeApi:
    """Stands in for `common.utils.sportsdb_get`; answers by endpoint."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, endpoint, params=None, error_message="Error desconocido", settings=None):
        self.calls.append((endpoint, dict(params or {})))
        answer = self.responses.get(endpoint)
        if answer is None:
            raise utils.SportsDataError(error_message)
        if isinstance(answer, Exception):
            raise utils.SportsDataError(error_message) from answer
        if callable(answer):
            return answer(params or {})
        return answer


@pytest.fixture
def fake_api(monkeypatch):
    def install(responses):
        api = FakeApi(responses)
        monkeypatch.setattr(utils, "sportsdb_get", api)
        return api
    return install


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("SPORTSDB_BASE_URL", "SPORTSDB_API_KEY", "SPORTSDB_TIMEOUT",
                 "USE_LIVE_TABLE_DATA", "MATCH_LIST_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
