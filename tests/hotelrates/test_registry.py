"""
Tests for hotelrates.registry and the per-site URL builders.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from hotelrates.base import pick_visible_price
from hotelrates.registry import (
    TARGETS,
    SiteDescriptor,
    get_available_targets,
    get_target,
    get_targets,
    load_source_config,
)
from hotelrates.schema import DateWindow
from hotelrates.sites import booking, goibibo, makemytrip, oyo, quoted_locality

CHECKIN = "2024-01-01"
CHECKOUT = "2024-01-02"
WINDOW = DateWindow(checkin=CHECKIN, checkout=CHECKOUT)


class TestRegistry:
    def test_order_is_stable(self):
        assert get_available_targets() == ["booking", "mmt", "goibibo", "oyo"]

    def test_keys_unique(self):
        keys = [t.key for t in TARGETS]
        assert len(keys) == len(set(keys))

    def test_display_names(self):
        assert [t.name for t in TARGETS] == ["Booking.com", "MakeMyTrip", "Goibibo", "OYO"]

    def test_default_settle_delays(self):
        assert {t.key: t.settle_delay_ms for t in TARGETS} == {
            "booking": 4000,
            "mmt": 6000,
            "goibibo": 5000,
            "oyo": 5000,
        }

    def test_all_targets_share_strategy(self):
        assert all(t.pick_price is pick_visible_price for t in TARGETS)

    def test_get_target(self):
        assert get_target("goibibo").name == "Goibibo"

    def test_get_target_unknown_raises(self):
        with pytest.raises(ValueError, match="No site registered"):
            get_target("expedia")

    def test_descriptor_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            TARGETS[0].key = "other"


class TestGetTargets:
    def test_no_overrides(self):
        assert [t.key for t in get_targets(config={})] == get_available_targets()

    def test_subset_keeps_registry_order(self):
        targets = get_targets(["oyo", "booking"], config={})
        assert [t.key for t in targets] == ["booking", "oyo"]

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="No site registered"):
            get_targets(["booking", "nope"], config={})

    def test_disabled_site_dropped(self):
        targets = get_targets(config={"mmt": {"enabled": False}})
        assert [t.key for t in targets] == ["booking", "goibibo", "oyo"]

    def test_settle_delay_override(self):
        targets = get_targets(["oyo"], config={"oyo": {"settle_delay_ms": 9000}})
        assert targets[0].settle_delay_ms == 9000
        # Registry entry itself is untouched
        assert get_target("oyo").settle_delay_ms == 5000

    def test_bundled_config_matches_defaults(self):
        assert [(t.key, t.settle_delay_ms) for t in get_targets()] == [
            (t.key, t.settle_delay_ms) for t in TARGETS
        ]


class TestLoadSourceConfig:
    def test_reads_sources(self, tmp_path):
        path = tmp_path / "rate-sources.json"
        path.write_text(json.dumps({"sources": {"oyo": {"enabled": False}}}), encoding="utf-8")
        assert load_source_config(path) == {"oyo": {"enabled": False}}

    def test_missing_file(self, tmp_path):
        assert load_source_config(tmp_path / "missing.json") == {}

    def test_default_file(self):
        config = load_source_config()
        assert set(config) == {"booking", "mmt", "goibibo", "oyo"}


class TestUrlBuilders:
    def test_booking(self):
        url = booking.build_search_url(CHECKIN, CHECKOUT)
        assert url.startswith("https://www.booking.com/searchresults.html?")
        assert "ss=Kondapur%2C%20Hyderabad" in url
        assert f"checkin={CHECKIN}" in url
        assert f"checkout={CHECKOUT}" in url
        assert "group_adults=2" in url
        assert "no_rooms=1" in url
        assert "order=price" in url

    def test_makemytrip(self):
        url = makemytrip.build_search_url(CHECKIN, CHECKOUT)
        assert url.startswith("https://www.makemytrip.com/hotels/hotel-listing/?")
        assert f"checkin={CHECKIN}" in url
        assert f"checkout={CHECKOUT}" in url
        assert "locusId=CTHYD" in url
        assert "searchText=Kondapur%2C%20Hyderabad" in url
        assert "roomStayQualifier=1e2e0e" in url

    def test_goibibo_strips_date_punctuation(self):
        url = goibibo.build_search_url(CHECKIN, CHECKOUT)
        assert url.startswith("https://www.goibibo.com/hotels/hotels-in-hyderabad-ct/?")
        assert "check_in=20240101" in url
        assert "check_out=20240102" in url
        assert CHECKIN not in url
        assert "nearby=Kondapur" in url
        assert "r=1-2-0" in url

    def test_oyo(self):
        url = oyo.build_search_url(CHECKIN, CHECKOUT)
        assert url.startswith("https://www.oyorooms.com/search?")
        assert "location=Kondapur%2C%20Hyderabad" in url
        assert f"checkin={CHECKIN}" in url
        assert f"checkout={CHECKOUT}" in url
        assert "guests=2" in url
        assert "rooms=1" in url

    def test_builders_are_pure(self):
        for target in TARGETS:
            assert target.url(WINDOW) == target.url(WINDOW)

    def test_descriptor_url_uses_window(self):
        for target in TARGETS:
            assert target.url(WINDOW) == target.build_url(CHECKIN, CHECKOUT)

    def test_mmt_occupancy_token(self):
        assert makemytrip.room_stay_qualifier(adults=3, rooms=2) == "2e3e0e"

    def test_compact_date(self):
        assert goibibo.compact_date("2024-12-31") == "20241231"

    def test_quoted_locality(self):
        assert quoted_locality("Kondapur, Hyderabad") == "Kondapur%2C%20Hyderabad"


class TestSiteDescriptor:
    def test_custom_descriptor(self):
        target = SiteDescriptor(
            key="demo",
            name="Demo",
            build_url=lambda ci, co: f"https://demo.test/?in={ci}&out={co}",
            settle_delay_ms=0,
        )
        assert target.url(WINDOW) == "https://demo.test/?in=2024-01-01&out=2024-01-02"
        assert target.pick_price is pick_visible_price
