import math

import pytest

from civic.models import Zone
from civic.services.zoning import classify, describe, list_zones


def test_missing_coordinates_are_unassigned():
    assert classify(None, 10.0) == Zone.UNASSIGNED
    assert classify(11.0, None) == Zone.UNASSIGNED
    assert classify(None, None) == Zone.UNASSIGNED


def test_outside_district_is_unassigned():
    assert classify(5.0, 5.0) == Zone.UNASSIGNED
    assert classify(11.36, 77.00) == Zone.UNASSIGNED
    assert classify(10.24, 77.00) == Zone.UNASSIGNED
    assert classify(11.00, 76.64) == Zone.UNASSIGNED
    assert classify(11.00, 77.46) == Zone.UNASSIGNED


def test_district_bounds_are_inclusive():
    assert classify(11.35, 77.00) == Zone.NORTH
    assert classify(10.25, 77.00) == Zone.SOUTH
    assert classify(11.00, 77.45) == Zone.EAST
    assert classify(11.00, 76.65) == Zone.WEST


def test_north_threshold_is_strict():
    assert classify(11.05, 77.00) != Zone.NORTH
    assert classify(11.05, 77.00) == Zone.CENTRAL
    assert classify(11.06, 77.00) == Zone.NORTH


def test_south_threshold_is_strict():
    assert classify(10.85, 77.00) != Zone.SOUTH
    assert classify(10.85, 77.00) == Zone.CENTRAL
    assert classify(10.84, 77.00) == Zone.SOUTH


def test_city_belt_partition():
    assert classify(11.0, 77.20) == Zone.EAST
    assert classify(11.0, 76.90) == Zone.WEST
    assert classify(11.0, 77.00) == Zone.CENTRAL


def test_city_belt_longitude_thresholds_are_strict():
    assert classify(11.0, 77.10) == Zone.CENTRAL
    assert classify(11.0, 76.95) == Zone.CENTRAL


def test_latitude_bands_take_precedence_over_longitude():
    # Far east but north of the city belt
    assert classify(11.20, 77.40) == Zone.NORTH
    assert classify(10.50, 76.70) == Zone.SOUTH


@pytest.mark.parametrize('lat,lng', [
    (math.nan, 77.0), (11.0, math.nan), (math.inf, 77.0), (-90.0, -180.0), (0.0, 0.0),
])
def test_classify_is_total(lat, lng):
    assert classify(lat, lng) == Zone.UNASSIGNED


def test_known_localities():
    assert classify(11.29, 76.94) == Zone.NORTH    # Mettupalayam
    assert classify(10.59, 77.01) == Zone.SOUTH    # Pollachi
    assert classify(10.99, 77.13) == Zone.EAST     # Sulur
    assert classify(10.91, 76.90) == Zone.WEST     # Madukkarai
    assert classify(11.016, 76.955) == Zone.CENTRAL  # Gandhipuram


def test_every_zone_has_a_description():
    for zone in Zone:
        assert describe(zone)
    assert 'no coordinates' in describe(Zone.UNASSIGNED)
    assert [z['zone'] for z in list_zones()] == [z.name for z in Zone]
