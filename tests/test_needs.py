"""Tests for need drain, zone recharge and the combined tick update.

Covers:
- clamp bounds, idempotence and monotonicity
- Drain/recharge multipliers per level
- Drain never raises a need and stays in [0, 100]
- Recharge touches only the zone's need
- Drain-then-recharge ordering and dt linearity
- net_need_change agreeing with update_needs
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from unicorn_ranch.core.enums import NeedType, Zone
from unicorn_ranch.core.models import Needs
from unicorn_ranch.engine.constants import (
    BASE_DRAIN,
    BASE_RECHARGE,
    DRAIN_GROWTH,
    RECHARGE_GROWTH,
    ZONE_RECHARGE,
)
from unicorn_ranch.engine.needs import (
    apply_drain,
    apply_recharge,
    clamp,
    drain_multiplier,
    net_need_change,
    recharge_multiplier,
    update_needs,
)

_SAMPLE_NEEDS = [
    Needs(100, 100, 100, 100),
    Needs(50, 50, 50, 50),
    Needs(0, 0, 0, 0),
    Needs(0.05, 99.99, 12.5, 73.0),
    Needs(3, 0, 100, 42),
]


def _half() -> Needs:
    return Needs(50, 50, 50, 50)


class TestClamp:

    def test_within_bounds(self):
        assert clamp(50, 0, 100) == 50
        assert clamp(0, 0, 100) == 0
        assert clamp(100, 0, 100) == 100

    def test_below_min(self):
        assert clamp(-10, 0, 100) == 0
        assert clamp(-999, 0, 100) == 0

    def test_above_max(self):
        assert clamp(101, 0, 100) == 100
        assert clamp(999, 0, 100) == 100

    def test_negative_range(self):
        assert clamp(-50, -100, -10) == -50
        assert clamp(-150, -100, -10) == -100
        assert clamp(0, -100, -10) == -10

    def test_floats(self):
        assert clamp(0.5, 0, 1) == 0.5
        assert clamp(-0.1, 0, 1) == 0
        assert clamp(1.5, 0, 1) == 1

    def test_idempotent(self):
        for v in (-20.0, -0.5, 0.0, 33.3, 100.0, 250.0):
            once = clamp(v, 0, 100)
            assert clamp(once, 0, 100) == once

    def test_monotonic(self):
        values = [-50.0, -1.0, 0.0, 0.5, 42.0, 99.9, 100.0, 140.0]
        clamped = [clamp(v, 0, 100) for v in values]
        assert clamped == sorted(clamped)


class TestMultipliers:

    def test_level_one_is_baseline(self):
        assert drain_multiplier(1) == 1.0
        assert recharge_multiplier(1) == 1.0

    def test_known_levels(self):
        assert drain_multiplier(2) == pytest.approx(1.8)
        assert drain_multiplier(3) == pytest.approx(2.6)
        assert recharge_multiplier(2) == pytest.approx(1.3)
        assert recharge_multiplier(3) == pytest.approx(1.6)

    def test_constant_step_per_level(self):
        for level in range(2, 30):
            assert drain_multiplier(level) - drain_multiplier(level - 1) == pytest.approx(DRAIN_GROWTH)
            assert recharge_multiplier(level) - recharge_multiplier(level - 1) == pytest.approx(RECHARGE_GROWTH)

    def test_drain_outgrows_recharge(self):
        for level in range(2, 50):
            assert drain_multiplier(level) > recharge_multiplier(level)

    def test_relative_growth(self):
        """Drain grows more from level 1 to 10 than recharge does."""
        assert drain_multiplier(10) / drain_multiplier(1) > recharge_multiplier(10) / recharge_multiplier(1)


class TestApplyDrain:

    def test_drains_all_needs_at_level_one(self):
        result = apply_drain(_half(), 1, 1.0)
        assert result == Needs(49, 49, 49, 49)

    def test_drains_faster_at_higher_levels(self):
        low = apply_drain(_half(), 1, 1.0)
        high = apply_drain(_half(), 3, 1.0)
        assert high.hunger < low.hunger
        assert high.hunger == pytest.approx(50 - 2.6)

    def test_never_below_zero(self):
        result = apply_drain(Needs(0.5, 0.5, 0.5, 0.5), 5, 10.0)
        assert result == Needs(0, 0, 0, 0)

    def test_proportional_to_dt(self):
        small = apply_drain(_half(), 1, 0.5)
        large = apply_drain(_half(), 1, 1.0)
        assert 50 - large.thirst == pytest.approx(2 * (50 - small.thirst))

    def test_does_not_mutate_input(self):
        needs = _half()
        apply_drain(needs, 1, 1.0)
        assert needs == Needs(50, 50, 50, 50)

    def test_bounded_and_non_increasing(self):
        for needs in _SAMPLE_NEEDS:
            for level in (1, 2, 7):
                for dt in (0.0, 0.016, 0.1, 1.0, 60.0):
                    result = apply_drain(needs, level, dt)
                    for before, after in zip(needs.values(), result.values()):
                        assert 0 <= after <= 100
                        assert after <= before

    def test_zero_dt_is_noop(self):
        needs = Needs(10, 20, 30, 40)
        assert apply_drain(needs, 4, 0.0) == needs


class TestApplyRecharge:

    @pytest.mark.parametrize("zone, need", [
        (Zone.LAKE, NeedType.THIRST),
        (Zone.FIELD, NeedType.HUNGER),
        (Zone.BARN, NeedType.ENERGY),
        (Zone.PLAY, NeedType.FUN),
    ])
    def test_zone_recharges_only_its_need(self, zone, need):
        result = apply_recharge(_half(), zone, 1, 1.0)
        assert result.get(need) == pytest.approx(50 + BASE_RECHARGE[zone])
        for other in NeedType:
            if other is not need:
                assert result.get(other) == 50

    def test_barn_is_fastest(self):
        assert BASE_RECHARGE[Zone.BARN] == 8.0
        assert BASE_RECHARGE[Zone.LAKE] == BASE_RECHARGE[Zone.FIELD] == BASE_RECHARGE[Zone.PLAY] == 6.0

    def test_no_zone_changes_nothing(self):
        needs = Needs(10, 20, 30, 40)
        assert apply_recharge(needs, Zone.NONE, 1, 1.0) == needs
        assert apply_recharge(needs, None, 1, 1.0) == needs

    def test_unknown_tag_changes_nothing(self):
        needs = Needs(10, 20, 30, 40)
        assert apply_recharge(needs, "volcano", 3, 1.0) == needs
        assert apply_recharge(needs, "", 3, 1.0) == needs

    def test_accepts_string_tags(self):
        result = apply_recharge(_half(), "lake", 1, 1.0)
        assert result.thirst == pytest.approx(56)

    @pytest.mark.parametrize("tag", ["Lake", "LAKE", " lake", "Barn"])
    def test_miscased_tags_change_nothing(self, tag):
        needs = _half()
        assert apply_recharge(needs, tag, 1, 1.0) == needs
        assert net_need_change(NeedType.ENERGY, tag, 1, 1.0) == pytest.approx(-1.0)

    def test_capped_at_100(self):
        result = apply_recharge(Needs(98, 98, 98, 98), Zone.BARN, 1, 1.0)
        assert result.energy == 100

    def test_faster_at_higher_levels(self):
        low = apply_recharge(_half(), Zone.LAKE, 1, 1.0)
        high = apply_recharge(_half(), Zone.LAKE, 3, 1.0)
        assert high.thirst == pytest.approx(50 + 6 * 1.6)
        assert high.thirst > low.thirst

    def test_other_fields_untouched_everywhere(self):
        for needs in _SAMPLE_NEEDS:
            for zone, entry in ZONE_RECHARGE.items():
                for level in (1, 4):
                    result = apply_recharge(needs, zone, level, 0.25)
                    for n in NeedType:
                        if n is not entry.need:
                            assert result.get(n) == needs.get(n)

    def test_does_not_mutate_input(self):
        needs = _half()
        apply_recharge(needs, Zone.PLAY, 1, 1.0)
        assert needs.fun == 50


class TestUpdateNeeds:

    def test_lake_scenario(self):
        result = update_needs(_half(), Zone.LAKE, 1, 0.1)
        assert result.thirst > 50
        assert result.hunger == pytest.approx(49.9)
        assert result.energy == pytest.approx(49.9)
        assert result.fun == pytest.approx(49.9)

    def test_field_net_gain_at_level_one(self):
        assert update_needs(_half(), Zone.FIELD, 1, 0.1).hunger > 50

    def test_drain_then_recharge(self):
        """A need sitting at 100 in its own zone drains first, then refills to the cap."""
        result = update_needs(Needs(100, 100, 100, 100), Zone.LAKE, 1, 0.5)
        assert result.thirst == 100
        assert result.hunger == pytest.approx(99.5)

    def test_recharge_cannot_undo_floor(self):
        """Drain clamps at 0 before the zone refills, so the refill starts from 0."""
        result = update_needs(Needs(0.5, 0.5, 0.5, 0.5), Zone.LAKE, 1, 1.0)
        assert result.thirst == pytest.approx(6.0)

    def test_linear_in_dt(self):
        needs = _half()
        for zone in Zone:
            for level in (1, 2, 5):
                single = update_needs(needs, zone, level, 0.2)
                double = update_needs(needs, zone, level, 0.4)
                for n in NeedType:
                    assert double.get(n) - needs.get(n) == pytest.approx(2 * (single.get(n) - needs.get(n)))

    def test_high_level_stays_in_range(self):
        result = update_needs(_half(), Zone.LAKE, 50, 0.1)
        assert 0 <= result.thirst <= 100


class TestNetNeedChange:

    def test_negative_outside_matching_zone(self):
        assert net_need_change(NeedType.HUNGER, Zone.LAKE, 1, 1.0) == pytest.approx(-1.0)

    def test_positive_in_matching_zone(self):
        assert net_need_change(NeedType.THIRST, Zone.LAKE, 1, 1.0) == pytest.approx(5.0)

    def test_no_zone(self):
        assert net_need_change(NeedType.FUN, None, 1, 1.0) == pytest.approx(-1.0)
        assert net_need_change(NeedType.FUN, Zone.NONE, 1, 1.0) == pytest.approx(-1.0)

    def test_drain_increases_with_level(self):
        assert net_need_change(NeedType.ENERGY, None, 3, 1.0) < net_need_change(NeedType.ENERGY, None, 1, 1.0)

    def test_proportional_to_dt(self):
        a = net_need_change(NeedType.ENERGY, Zone.BARN, 2, 0.5)
        b = net_need_change(NeedType.ENERGY, Zone.BARN, 2, 1.0)
        assert b == pytest.approx(2 * a)

    def test_matches_update_needs_away_from_bounds(self):
        needs = _half()
        for zone in Zone:
            for level in (1, 3, 6):
                stepped = update_needs(needs, zone, level, 0.1)
                for n in NeedType:
                    expected = stepped.get(n) - needs.get(n)
                    assert net_need_change(n, zone, level, 0.1) == pytest.approx(expected)


class TestConstants:

    def test_base_drain_covers_every_need(self):
        assert set(BASE_DRAIN) == set(NeedType)
        assert all(rate == 1.0 for rate in BASE_DRAIN.values())

    def test_zone_table_is_exhaustive_and_one_to_one(self):
        assert set(ZONE_RECHARGE) == set(Zone) - {Zone.NONE}
        needs = [entry.need for entry in ZONE_RECHARGE.values()]
        assert len(set(needs)) == len(needs) == 4

    def test_growth_constants(self):
        assert DRAIN_GROWTH == 0.80
        assert RECHARGE_GROWTH == 0.30

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            BASE_DRAIN[NeedType.HUNGER] = 2.0
