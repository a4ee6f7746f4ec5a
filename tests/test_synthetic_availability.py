"""
SyntheticAvailabilityGateway tests.

The generator is a pure function of its inputs: same entity id and labels,
same answer, every time.
"""

from datetime import date

import pytest

from src.adapters.synthetic_availability import (
    SITE_TYPE_POOL,
    SyntheticAvailabilityGateway,
    draw,
    entity_seed,
    splitmix64,
)
from src.domain.errors import QueryValidationError

TODAY = date(2024, 1, 15)
ENTITY_IDS = ["demo-camp-1", "lake-side", "koa-yosemite", "x", "ChIJ96WqKniB3YgRVVsUtlDsTL0"]


@pytest.fixture
def gateway():
    return SyntheticAvailabilityGateway(today=lambda: TODAY)


# ---------------------------------------------------------------------------
# The seeded draw
# ---------------------------------------------------------------------------


def test_seed_is_sum_of_code_points():
    assert entity_seed("ab") == 97 + 98
    assert entity_seed("") == 0


def test_splitmix64_known_value():
    # First output of the reference generator seeded with 0.
    assert splitmix64(0) == 0xE220A8397B1DCDAF


@pytest.mark.parametrize("lo,hi", [(3, 5), (0, 6), (30, 150), (0, 100)])
def test_draw_stays_in_range(lo, hi):
    values = {draw(seed, lo, hi, offset) for seed in range(300) for offset in (0, 100, 200)}
    assert min(values) >= lo
    assert max(values) <= hi


def test_draw_covers_whole_range():
    assert {draw(seed, 3, 5) for seed in range(200)} == {3, 4, 5}


def test_draw_is_deterministic_and_offset_sensitive():
    assert draw(1234, 0, 1_000_000, 7) == draw(1234, 0, 1_000_000, 7)
    assert len({draw(1234, 0, 1_000_000, offset) for offset in range(50)}) > 45


# ---------------------------------------------------------------------------
# Template mode
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("entity_id", ENTITY_IDS)
def test_template_mode_shape(gateway, entity_id):
    record = gateway.get_availability(entity_id)
    names = [s.name for s in record.site_types]

    assert 3 <= len(names) <= 5
    assert len(set(names)) == len(names), "site types must be distinct"
    assert set(names) <= set(SITE_TYPE_POOL)
    assert all(30 <= s.price <= 150 for s in record.site_types)


@pytest.mark.parametrize("entity_id", ENTITY_IDS)
def test_template_mode_fully_deterministic(entity_id):
    a = SyntheticAvailabilityGateway().get_availability(entity_id, check_in=TODAY)
    b = SyntheticAvailabilityGateway().get_availability(entity_id, check_in=TODAY)
    assert a == b


def test_pool_too_small_is_rejected():
    gateway = SyntheticAvailabilityGateway(pool=("Tent Site", "Cabin"))
    with pytest.raises(ValueError, match="distinct site types"):
        gateway.get_availability("demo-camp-1", check_in=TODAY)


# ---------------------------------------------------------------------------
# Label mode
# ---------------------------------------------------------------------------


def test_labels_kept_in_order(gateway):
    record = gateway.get_availability("demo-camp-1", labels=["Tent Site", "Cabin"])
    assert [s.name for s in record.site_types] == ["Tent Site", "Cabin"]


def test_label_mode_repeatable(gateway):
    calls = [
        gateway.get_availability("demo-camp-1", labels=["Tent Site", "Cabin"])
        for _ in range(5)
    ]
    assert all(c.site_types == calls[0].site_types for c in calls)


def test_label_mode_uses_documented_draws(gateway):
    seed = entity_seed("demo-camp-1")
    record = gateway.get_availability("demo-camp-1", labels=["Tent Site", "Cabin"])
    for index, site in enumerate(record.site_types):
        assert site.price == draw(seed, 40, 150, offset=index * 100)
        assert site.available == (draw(seed, 0, 100, offset=index * 200) > 30)


def test_every_label_becomes_a_site_type(gateway):
    labels = [f"Site {i}" for i in range(12)]
    record = gateway.get_availability("lake-side", labels=labels)
    assert len(record.site_types) == 12
    assert all(40 <= s.price <= 150 for s in record.site_types)


def test_empty_labels_fall_back_to_template(gateway):
    assert gateway.get_availability("lake-side", labels=[]) == gateway.get_availability("lake-side")


# ---------------------------------------------------------------------------
# Derived availability and dates
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("entity_id", ENTITY_IDS)
@pytest.mark.parametrize("labels", [None, ["Tent Site", "Cabin"], ["A", "B", "C", "D", "E", "F"]])
def test_available_is_or_of_site_types(gateway, entity_id, labels):
    record = gateway.get_availability(entity_id, labels=labels)
    assert record.available == any(s.available for s in record.site_types)
    assert record.to_dict()["available"] == record.available


def test_dates_default_to_today_and_tomorrow(gateway):
    record = gateway.get_availability("demo-camp-1")
    assert record.to_dict()["checkIn"] == "2024-01-15"
    assert record.to_dict()["checkOut"] == "2024-01-16"


def test_explicit_dates_are_kept(gateway):
    record = gateway.get_availability(
        "demo-camp-1", check_in=date(2024, 7, 1), check_out=date(2024, 7, 4)
    )
    assert (record.check_in, record.check_out) == (date(2024, 7, 1), date(2024, 7, 4))


def test_backwards_dates_rejected(gateway):
    with pytest.raises(QueryValidationError):
        gateway.get_availability(
            "demo-camp-1", check_in=date(2024, 1, 16), check_out=date(2024, 1, 15)
        )
