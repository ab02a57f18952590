"""
Tests for the refresh flow module.
"""

from __future__ import annotations

import json
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest
import requests
from pydantic import SecretStr

from bugwatch.config import Settings
from bugwatch.flows import refresh
from bugwatch.schemas import WeatherReading
from bugwatch.store import DataStore

if TYPE_CHECKING:
    from pathlib import Path

NOW = datetime(2024, 7, 1, 12, 0, tzinfo=UTC)

WARM_CLEAR = WeatherReading(
    location="Portland",
    temperature=22,
    condition="Clear",
    humidity=55,
    wind_speed=2,
    icon_url="https://openweathermap.org/img/wn/01d@2x.png",
    timestamp=NOW.timestamp(),
)


def use_settings(monkeypatch: pytest.MonkeyPatch, **overrides: object) -> Settings:
    values: dict[str, object] = {
        "weather_source": "auto",
        "weather_api_key": SecretStr("secret"),
    }
    values.update(overrides)
    settings = Settings(_env_file=None, **values)  # type: ignore[arg-type]
    monkeypatch.setattr(refresh, "get_settings", lambda: settings)
    return settings


@pytest.fixture
def store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DataStore:
    data_store = DataStore(tmp_path)
    monkeypatch.setattr(refresh, "store", data_store)
    # no retry delays in tests
    monkeypatch.setattr(refresh, "fetch_weather", refresh.fetch_weather.with_options(retries=0))
    return data_store


class TestFetchWeather:
    """Test the fetch task."""

    @patch("bugwatch.flows.refresh.fetch_current_weather", return_value=WARM_CLEAR)
    def test_calls_openweathermap(self, mock_fetch: Mock) -> None:
        result = refresh.fetch_weather(45.5, -122.6, "secret")

        assert result == WARM_CLEAR
        mock_fetch.assert_called_once_with(45.5, -122.6, "secret")


class TestCurrentWeather:
    """Test source selection and fallback inside the flow."""

    @patch("bugwatch.flows.refresh.fetch_current_weather", return_value=WARM_CLEAR)
    def test_live_reading(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch)

        weather, source = refresh.current_weather(45.5, -122.6)

        assert weather == WARM_CLEAR
        assert source == refresh.LIVE_SOURCE

    @patch("bugwatch.flows.refresh.fetch_current_weather")
    def test_mock_source_skips_api(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch, weather_source="mock")

        weather, source = refresh.current_weather(0.0, 0.0)

        mock_fetch.assert_not_called()
        assert weather.location == "Springfield"
        assert source == refresh.MOCK_SOURCE

    @patch("bugwatch.flows.refresh.fetch_current_weather")
    def test_auto_without_key_uses_mock(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch, weather_api_key=None)

        _, source = refresh.current_weather(0.0, 0.0)

        mock_fetch.assert_not_called()
        assert source == refresh.MOCK_SOURCE

    @patch(
        "bugwatch.flows.refresh.fetch_current_weather",
        side_effect=requests.ConnectionError("offline"),
    )
    def test_auto_falls_back_on_error(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch)

        weather, source = refresh.current_weather(0.0, 0.0)

        assert weather.location == "Springfield"
        assert source == refresh.MOCK_SOURCE

    @patch(
        "bugwatch.flows.refresh.fetch_current_weather",
        side_effect=requests.ConnectionError("offline"),
    )
    def test_live_propagates_error(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch, weather_source="live")

        with pytest.raises(requests.ConnectionError):
            refresh.current_weather(0.0, 0.0)

    def test_live_without_key_raises(
        self, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch, weather_source="live", weather_api_key=None)

        with pytest.raises(ValueError, match="no weather API key"):
            refresh.current_weather(0.0, 0.0)


class TestSaveWeather:
    """Test caching the weather reading."""

    def test_live_reading_gets_ttl(self, store: DataStore, tmp_path: Path) -> None:
        result = refresh.save_weather(WARM_CLEAR, refresh.LIVE_SOURCE, 45.5, -122.6)

        assert result == tmp_path / "live" / "weather.json"
        saved = json.loads(result.read_text())
        assert saved["meta"]["source"] == "openweathermap.org"
        assert saved["meta"]["location"] == {"lat": 45.5, "lon": -122.6}
        assert "valid_until" in saved["meta"]
        assert saved["data"]["windSpeed"] == 2
        assert saved["data"]["location"] == "Portland"

    def test_mock_reading_has_no_ttl(self, store: DataStore) -> None:
        result = refresh.save_weather(WARM_CLEAR, refresh.MOCK_SOURCE, 45.5, -122.6)

        saved = json.loads(result.read_text())
        assert saved["meta"]["source"] == "mock"
        assert "valid_until" not in saved["meta"]
        assert store.is_fresh(refresh.WEATHER_PATH) is False


class TestRefreshActivity:
    """Test the full refresh flow."""

    @patch("bugwatch.flows.refresh.fetch_current_weather", return_value=WARM_CLEAR)
    def test_fetches_and_writes_report(
        self,
        mock_fetch: Mock,
        store: DataStore,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        use_settings(monkeypatch)

        result = refresh.refresh_activity(lat=45.5, lon=-122.6, today=date(2024, 7, 1))

        assert result["location"] == "Portland"
        assert result["overall"] == "high"
        assert result["flying"] == "high"
        assert (tmp_path / "live" / "weather.json").exists()

        report = json.loads((tmp_path / "derived" / "insect_activity.json").read_text())
        assert "valid_until" not in report["meta"]
        assert report["data"]["weather"]["location"] == "Portland"
        assert report["data"]["insectActivity"]["seasonal"]["insects"][0] == "Mosquitoes"

    @patch("bugwatch.flows.refresh.fetch_current_weather")
    def test_reuses_fresh_weather(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch)
        store.write(
            refresh.WEATHER_PATH,
            WARM_CLEAR.model_dump(mode="json", by_alias=True),
            source="openweathermap.org",
            valid_until=datetime.now(UTC) + timedelta(hours=1),
            location={"lat": 45.5, "lon": -122.6},
        )

        result = refresh.refresh_activity(lat=45.5, lon=-122.6, today=date(2024, 1, 10))

        mock_fetch.assert_not_called()
        assert result["location"] == "Portland"
        assert result["seasonal"] == "low"

    @patch("bugwatch.flows.refresh.fetch_current_weather", return_value=WARM_CLEAR)
    def test_refetches_for_other_location(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch)
        store.write(
            refresh.WEATHER_PATH,
            WARM_CLEAR.model_dump(mode="json", by_alias=True),
            source="openweathermap.org",
            valid_until=datetime.now(UTC) + timedelta(hours=1),
            location={"lat": 45.5, "lon": -122.6},
        )

        refresh.refresh_activity(lat=0.0, lon=0.0, today=date(2024, 1, 10))

        mock_fetch.assert_called_once_with(0.0, 0.0, "secret")

    def test_failed_fetch_is_not_cached_as_live(
        self, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch)
        with patch(
            "bugwatch.flows.refresh.fetch_current_weather",
            side_effect=[requests.ConnectionError("offline"), WARM_CLEAR],
        ) as mock_fetch:
            first = refresh.refresh_activity(lat=45.5, lon=-122.6, today=date(2024, 7, 1))
            meta = store.read_raw(refresh.WEATHER_PATH)["meta"]  # type: ignore[index]

            assert meta["source"] == "mock"
            assert "valid_until" not in meta
            assert first["location"] != "Portland"

            second = refresh.refresh_activity(lat=45.5, lon=-122.6, today=date(2024, 7, 1))

        assert mock_fetch.call_count == 2
        assert second["location"] == "Portland"
        meta = store.read_raw(refresh.WEATHER_PATH)["meta"]  # type: ignore[index]
        assert meta["source"] == "openweathermap.org"
        assert "valid_until" in meta

    @patch("bugwatch.flows.refresh.fetch_current_weather", return_value=WARM_CLEAR)
    def test_defaults_to_configured_location(
        self, mock_fetch: Mock, store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        use_settings(monkeypatch, lat=44.0, lon=-123.0)

        refresh.refresh_activity(today=date(2024, 7, 1))

        mock_fetch.assert_called_once_with(44.0, -123.0, "secret")
        meta = store.read_raw(refresh.WEATHER_PATH)["meta"]  # type: ignore[index]
        assert meta["location"] == {"lat": 44.0, "lon": -123.0}
