import math
import pytest

from models.models import ScoredCandidate
from utils.geo import EARTH_RADIUS_M, filter_nearby, haversine_distance, radius_to_zoom
from test_data import LONDON_OBSERVER, LONDON_PINS


def test_haversine_zero_for_same_point():
    assert haversine_distance(51.5, -0.12, 51.5, -0.12) == 0


def test_haversine_one_degree_longitude_at_equator():
    # 2πR / 360
    assert haversine_distance(0, 0, 0, 1) == pytest.approx(111_194.9, rel=1e-4)


def test_haversine_is_symmetric():
    d1 = haversine_distance(51.5080, -0.1281, 48.8566, 2.3522)
    d2 = haversine_distance(48.8566, 2.3522, 51.5080, -0.1281)
    assert d1 == pytest.approx(d2)


def test_haversine_london_paris():
    d = haversine_distance(51.5074, -0.1278, 48.8566, 2.3522)
    assert d == pytest.approx(343_500, rel=0.005)


def test_concrete_scenario_keeps_only_close_candidate(make_geo_question):
    a = make_geo_question("a", 0, 0.01)
    b = make_geo_question("b", 0, 1)
    result = filter_nearby(0, 0, [a, b], radius_m=5000, cap=10)
    assert [c.id for c in result] == ["a"]
    assert result[0].distance_m == pytest.approx(1112, rel=0.01)


def test_empty_candidates_give_empty_result():
    assert filter_nearby(10, 10, [], radius_m=5000, cap=10) == []


def test_results_are_sorted_and_within_radius(make_geo_question):
    candidates = [make_geo_question(name, lat, lng) for name, lat, lng in LONDON_PINS]
    radius = 25_000
    result = filter_nearby(*LONDON_OBSERVER, candidates, radius_m=radius, cap=30)
    assert [c.id for c in result] == ["national_gallery", "big_ben", "tower_bridge", "heathrow"]
    distances = [c.distance_m for c in result]
    assert distances == sorted(distances)
    assert all(d <= radius for d in distances)


def test_cap_truncates_nearest_first(make_geo_question):
    candidates = [make_geo_question(name, lat, lng) for name, lat, lng in LONDON_PINS]
    result = filter_nearby(*LONDON_OBSERVER, candidates, radius_m=200_000, cap=2)
    assert [c.id for c in result] == ["national_gallery", "big_ben"]


def test_output_length_bounded_by_cap_and_matches(make_geo_question):
    candidates = [make_geo_question(name, lat, lng) for name, lat, lng in LONDON_PINS]
    for cap in (1, 3, 10):
        result = filter_nearby(*LONDON_OBSERVER, candidates, radius_m=5000, cap=cap)
        # national_gallery, big_ben and tower_bridge are within 5 km
        assert len(result) == min(cap, 3)


def test_radius_is_inclusive(make_geo_question):
    q = make_geo_question("edge", 0, 0.01)
    exact = haversine_distance(0, 0, 0, 0.01)
    assert len(filter_nearby(0, 0, [q], radius_m=exact, cap=5)) == 1


def test_equal_distances_keep_input_order(make_geo_question):
    north = make_geo_question("north", 0.01, 0)
    south = make_geo_question("south", -0.01, 0)
    east = make_geo_question("east", 0, 0.01)
    result = filter_nearby(0, 0, [south, north, east], radius_m=5000, cap=10)
    assert [c.id for c in result][:2] == ["south", "north"]


def test_filter_does_not_mutate_input(make_geo_question):
    candidates = [make_geo_question(name, lat, lng) for name, lat, lng in LONDON_PINS]
    snapshot = list(candidates)
    result = filter_nearby(*LONDON_OBSERVER, candidates, radius_m=5000, cap=10)
    assert candidates == snapshot
    assert result is not candidates
    assert all(isinstance(c, ScoredCandidate) for c in result)


def test_filtering_own_output_is_idempotent(make_geo_question):
    candidates = [make_geo_question(name, lat, lng) for name, lat, lng in LONDON_PINS]
    first = filter_nearby(*LONDON_OBSERVER, candidates, radius_m=25_000, cap=30)
    second = filter_nearby(*LONDON_OBSERVER, first, radius_m=25_000, cap=30)
    assert [c.id for c in second] == [c.id for c in first]
    assert [c.distance_m for c in second] == pytest.approx([c.distance_m for c in first])


@pytest.mark.parametrize(
    "radius,zoom",
    [(500, 15), (1000, 15), (5000, 13), (25000, 11), (50000, 9)],
)
def test_radius_to_zoom(radius, zoom):
    assert radius_to_zoom(radius) == zoom


HALF_CIRCUMFERENCE_M = math.pi * EARTH_RADIUS_M


@pytest.mark.parametrize(
    "lat1,lng1,lat2,lng2",
    [
        (8, 0, -8, 180),
        (0, 0, 0, 180),
        (90, 0, -90, 0),
        (90, 45, 90, -135),
        (-90, 0, 51.5, -0.12),
        (0, 180, 0, -180),
        (45, 179.9, 45, -179.9),
        (-33.87, 151.21, 33.87, -28.79),
    ],
)
def test_haversine_is_bounded_at_coordinate_extremes(lat1, lng1, lat2, lng2):
    d = haversine_distance(lat1, lng1, lat2, lng2)
    assert 0 <= d <= HALF_CIRCUMFERENCE_M + 1e-6


def test_antipodal_distance_is_half_circumference():
    assert haversine_distance(8, 0, -8, 180) == pytest.approx(HALF_CIRCUMFERENCE_M)


def test_across_antimeridian_is_short():
    assert haversine_distance(45, 179.9, 45, -179.9) == pytest.approx(15_725, rel=0.01)


def test_antipodal_candidate_is_filtered_out(make_geo_question):
    far_side = make_geo_question("far_side", -8, 180)
    assert filter_nearby(8, 0, [far_side], radius_m=5000, cap=10) == []


def test_antipodal_candidate_does_not_break_nearby_results(make_geo_question):
    near = make_geo_question("near", 8, 0.01)
    far_side = make_geo_question("far_side", -8, 180)
    result = filter_nearby(8, 0, [far_side, near], radius_m=5000, cap=10)
    assert [c.id for c in result] == ["near"]
