import pytest

PROVIDER_ENV_VARS = (
    "GOOGLE_MAPS_API_KEY",
    "GEMINI_API_KEY",
    "ECOPATH_GOOGLE_MAPS_API_KEY",
    "ECOPATH_GEMINI_API_KEY",
    "ECOPATH_MAX_PARALLEL_EVALUATIONS",
    "ECOPATH_FRONTEND_ALLOWED_ORIGINS",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
