import zoneinfo
from datetime import datetime, timedelta, timezone

import pytest

from sachet.models.domain import Customer, SegmentationConfig, SegmentCounts
from sachet.services.customers import parse_timestamp, segment_customers

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
HQ_LAT, HQ_LON = 5.6037, -0.1870


def _customer(
    cid: str,
    bags: int = 10,
    lat: float = 6.6885,
    lon: float = -1.6244,
    last_visit: str | None = "2025-01-01T00:00:00Z",
) -> Customer:
    return Customer(
        id=cid,
        business_name=f"Shop {cid}",
        contact_name="Ama",
        phone="0240000000",
        gps_address="GA-000-0000",
        latitude=lat,
        longitude=lon,
        average_bags=bags,
        last_visit=last_visit,
    )


def test_empty_collection_yields_zero_counts() -> None:
    assert segment_customers([], now=NOW) == SegmentCounts(high_volume=0, local=0, new=0)


def test_high_volume_threshold_is_strict() -> None:
    bags = [80, 10, 60, 5, 90, 20, 51, 50]
    customers = [_customer(f"C{i}", bags=value) for i, value in enumerate(bags)]

    counts = segment_customers(customers, now=NOW)

    assert counts.high_volume == 4
    assert counts.high_volume + (len(customers) - counts.high_volume) == len(customers)


def test_local_segment_uses_distance_from_hq() -> None:
    customers = [
        _customer("at-hq", lat=HQ_LAT, lon=HQ_LON),
        _customer("nearby", lat=5.58, lon=-0.19),  # about 2.6 km
        _customer("tema", lat=5.6698, lon=-0.0166),  # about 20 km
    ]

    assert segment_customers(customers, now=NOW).local == 2


def test_local_segment_radius_is_inclusive() -> None:
    customer = _customer("edge", lat=5.55, lon=-0.20)  # about 6.14 km
    config = SegmentationConfig(local_radius_km=6.2)
    tight = SegmentationConfig(local_radius_km=6.0)

    assert segment_customers([customer], config, NOW).local == 1
    assert segment_customers([customer], tight, NOW).local == 0


def test_reference_point_comes_from_config() -> None:
    kumasi = SegmentationConfig(hq_latitude=6.6885, hq_longitude=-1.6244)
    customers = [_customer("kumasi"), _customer("accra", lat=HQ_LAT, lon=HQ_LON)]

    assert segment_customers(customers, kumasi, NOW).local == 1
    assert segment_customers(customers, now=NOW).local == 1


def test_new_customer_window_boundaries() -> None:
    exactly_30 = (NOW - timedelta(days=30)).isoformat()
    just_after = (NOW - timedelta(days=30) + timedelta(seconds=1)).isoformat()
    day_31 = (NOW - timedelta(days=31)).isoformat()

    customers = [
        _customer("30d", last_visit=exactly_30),
        _customer("29d", last_visit=just_after),
        _customer("31d", last_visit=day_31),
    ]

    assert segment_customers(customers, now=NOW).new == 2


def test_new_customer_accepts_zulu_and_naive_timestamps() -> None:
    customers = [
        _customer("zulu", last_visit="2026-10-10T08:15:00.000Z"),
        _customer("naive", last_visit="2026-10-01T00:00:00"),
    ]
    assert segment_customers(customers, now=NOW).new == 2


def test_missing_or_invalid_last_visit_is_not_new() -> None:
    customers = [_customer("none", last_visit=None), _customer("junk", last_visit="yesterday")]
    assert segment_customers(customers, now=NOW).new == 0


def test_window_subtracts_calendar_days_across_dst_change() -> None:
    try:
        new_york = zoneinfo.ZoneInfo("America/New_York")
    except zoneinfo.ZoneInfoNotFoundError:
        pytest.skip("time zone database not available")

    now = datetime(2026, 11, 20, 12, 0, tzinfo=new_york)
    # Same wall-clock time 30 calendar days earlier, before the DST change
    boundary = datetime(2026, 10, 21, 12, 0, tzinfo=new_york).isoformat()

    assert segment_customers([_customer("dst", last_visit=boundary)], now=now).new == 1


def test_segments_overlap() -> None:
    recent = (NOW - timedelta(days=2)).isoformat()
    customer = _customer("all", bags=75, lat=HQ_LAT, lon=HQ_LON, last_visit=recent)

    assert segment_customers([customer], now=NOW) == SegmentCounts(high_volume=1, local=1, new=1)


def test_parse_timestamp_defaults_to_utc() -> None:
    assert parse_timestamp("2026-10-01T00:00:00") == datetime(2026, 10, 1, tzinfo=timezone.utc)
    assert parse_timestamp("") is None


def test_antipodal_headquarters_counts_nobody_as_local() -> None:
    config = SegmentationConfig(hq_latitude=80.05814743531747, hq_longitude=28.530813846926918)
    customer = _customer("far", lat=-80.05814743531747, lon=208.530813846926918)

    counts = segment_customers([customer], config, NOW)

    assert counts.local == 0
    assert counts.high_volume == 0
