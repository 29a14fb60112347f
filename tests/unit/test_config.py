import pytest

from customer_sync.config import ClientSettings, client_settings_from_env


@pytest.mark.unit
def test_client_settings_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CUSTOMERS_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("CUSTOMERS_API_COLLECTION_PATH", "/v2/customers")
    monkeypatch.setenv("CUSTOMERS_API_TIMEOUT_SECONDS", "2.5")

    settings = client_settings_from_env()

    assert settings == ClientSettings(
        base_url="https://api.example.com",
        collection_path="/v2/customers",
        timeout_seconds=2.5,
    )


@pytest.mark.unit
def test_client_settings_fall_back_on_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CUSTOMERS_API_BASE_URL", "   ")
    monkeypatch.setenv("CUSTOMERS_API_COLLECTION_PATH", "customers")
    monkeypatch.setenv("CUSTOMERS_API_TIMEOUT_SECONDS", "-1")

    settings = client_settings_from_env()

    assert settings == ClientSettings()
