import pytest

from sachet.config import Settings
from sachet.models.domain import SegmentationConfig


def test_defaults_describe_accra_headquarters() -> None:
    config = Settings(_env_file=None).segmentation_config()

    assert config == SegmentationConfig()
    assert (config.hq_latitude, config.hq_longitude) == (5.6037, -0.1870)
    assert config.high_volume_threshold == 50
    assert config.local_radius_km == 5.0
    assert config.new_customer_window_days == 30


def test_segmentation_config_follows_overrides() -> None:
    settings = Settings(
        _env_file=None,
        hq_latitude=6.6885,
        hq_longitude=-1.6244,
        hq_label="Kumasi depot",
        high_volume_threshold=100,
    )

    config = settings.segmentation_config()

    assert config.hq_label == "Kumasi depot"
    assert config.high_volume_threshold == 100
    assert config.hq_latitude == 6.6885


def test_allowed_origins_parse_comma_separated_and_json() -> None:
    assert Settings(_env_file=None, frontend_allowed_origins="https://a.test, https://b.test").frontend_allowed_origins == (
        "https://a.test",
        "https://b.test",
    )
    assert Settings(_env_file=None, frontend_allowed_origins='["https://c.test"]').frontend_allowed_origins == (
        "https://c.test",
    )


def test_allowed_origins_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SACHET_FRONTEND_ALLOWED_ORIGINS", "https://a.test,https://b.test")
    assert Settings(_env_file=None).frontend_allowed_origins == ("https://a.test", "https://b.test")

    monkeypatch.setenv("SACHET_FRONTEND_ALLOWED_ORIGINS", '["https://c.test", "https://d.test"]')
    assert Settings(_env_file=None).frontend_allowed_origins == ("https://c.test", "https://d.test")

    monkeypatch.setenv("SACHET_FRONTEND_ALLOWED_ORIGINS", "https://e.test")
    assert Settings(_env_file=None).frontend_allowed_origins == ("https://e.test",)
