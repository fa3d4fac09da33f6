"""Unit tests for applying In/Out events to zones."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from parkzone.schemas.log_entry import LogEntryCreate, LogType
from parkzone.schemas.zone import Zone
from parkzone.services.reconciliation import apply_event, compute_available_space


def make_zone(capacity=100, cars_in=0, cars_out=0, name="Red"):
    return Zone(id=name, name=name, capacity=capacity, cars_in=cars_in,
                cars_out=cars_out, available_space=capacity - (cars_in - cars_out))


def make_event(type_=LogType.IN, count=1, zone_id="Red"):
    return LogEntryCreate(zone_id=zone_id, type=type_, car_count=count)


class TestApplyEvent:
    def test_in_adds_to_cars_in_only(self):
        zone = apply_event(make_zone(cars_in=4, cars_out=2), make_event(LogType.IN, 3))
        assert zone.cars_in == 7
        assert zone.cars_out == 2

    def test_out_adds_to_cars_out_only(self):
        zone = apply_event(make_zone(cars_in=4, cars_out=2), make_event(LogType.OUT, 3))
        assert zone.cars_in == 4
        assert zone.cars_out == 5

    def test_out_event_recomputes_available(self):
        zone = apply_event(make_zone(capacity=50, cars_in=5), make_event(LogType.OUT, 3))
        assert zone.cars_out == 3
        assert zone.available_space == 48

    def test_overfull_zone_reports_capacity(self):
        zone = apply_event(make_zone(capacity=100, cars_in=10), make_event(LogType.IN, 95))
        assert zone.cars_in == 105
        assert zone.available_space == 100

    def test_input_zone_not_mutated(self):
        original = make_zone(cars_in=1)
        apply_event(original, make_event(LogType.IN, 5))
        assert original.cars_in == 1

    def test_identity_fields_kept(self):
        zone = apply_event(make_zone(name="Blue"), make_event(zone_id="Blue"))
        assert zone.id == "Blue"
        assert zone.name == "Blue"
        assert zone.capacity == 100


class TestAvailableSpacePolicy:
    @pytest.mark.parametrize("capacity,cars_in,cars_out,expected", [
        (50, 5, 3, 48),
        (10, 10, 0, 0),
        (10, 0, 0, 10),
        (10, 2, 7, 10),    # more out than in → clamped down to capacity
        (10, 11, 0, 10),   # negative → capacity, not 0
        (0, 0, 0, 0),
    ])
    def test_policy(self, capacity, cars_in, cars_out, expected):
        assert compute_available_space(capacity, cars_in, cars_out) == expected

    @pytest.mark.parametrize("cars_in,cars_out", [(0, 0), (3, 1), (40, 0), (0, 40), (99, 98)])
    def test_always_within_bounds(self, cars_in, cars_out):
        assert 0 <= compute_available_space(20, cars_in, cars_out) <= 20
