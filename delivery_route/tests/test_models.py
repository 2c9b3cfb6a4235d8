# delivery_route/tests/test_models.py
import pytest
from pydantic import ValidationError

from delivery_route.config import RouteConfig, DEFAULT_CONFIG
from delivery_route.distance import euclidean_distance, vertex_distance
from delivery_route.models import Depot, Customer, Vehicle, Instance, parse_vertices


def test_customer_accepts_both_quantity_spellings():
    a = Customer(x=1, y=2, demand=7)
    b = Customer(x=1.0, y=2.0, quantity_to_deliver=7)
    assert a == b
    assert hash(a) == hash(b)
    assert a.demand == a.quantity_to_deliver == 7
    assert a.coords == (1.0, 2.0)


def test_location_is_normalized_into_xy():
    assert Customer(location=[3, 4], demand=1) == Customer(x=3, y=4, demand=1)
    assert Depot(location=[0, 0]).coords == (0.0, 0.0)


@pytest.mark.parametrize("kwargs", [
    {"x": 0, "y": 0, "demand": -1},                      # negative quantity
    {"x": 0, "y": 0, "demand": 1.5},                     # fractional quantity
    {"x": float("nan"), "y": 0, "demand": 1},            # non-finite position
    {"y": 0, "demand": 1},                               # missing coordinate
    {"location": [1], "demand": 1},                      # short location
    {"location": 5, "demand": 1},                        # location not a sequence
    {"location": [1, 2], "x": 1, "demand": 1},           # both coordinate formats
])
def test_customer_rejects_invalid_input(kwargs):
    with pytest.raises(ValidationError):
        Customer(**kwargs)


def test_vertices_are_frozen():
    c = Customer(x=0, y=0, demand=1)
    with pytest.raises(ValidationError):
        c.x = 5.0


def test_depot_and_customer_at_same_point_differ():
    assert Depot(x=1, y=1) != Customer(x=1, y=1, demand=0)
    assert len({Depot(x=1, y=1), Depot(x=1, y=1), Customer(x=1, y=1, demand=0)}) == 2


def test_parse_vertices_dispatches_on_kind():
    out = parse_vertices([
        {"kind": "depot", "x": 0, "y": 0},
        {"kind": "customer", "x": 3, "y": 4, "demand": 2},
    ])
    assert isinstance(out[0], Depot)
    assert isinstance(out[1], Customer)
    assert out[1].quantity_to_deliver == 2

    with pytest.raises(ValidationError):
        parse_vertices([{"kind": "warehouse", "x": 0, "y": 0}])


def test_vehicle_defaults_to_configured_capacity():
    assert Vehicle().capacity == DEFAULT_CONFIG.default_vehicle_capacity == 100
    assert Vehicle() == Vehicle()
    assert Vehicle(capacity=5) != Vehicle()
    with pytest.raises(ValidationError):
        Vehicle(capacity=0)
    with pytest.raises(ValidationError):
        RouteConfig(default_vehicle_capacity=-3)


def test_instance_yields_vertex_set():
    inst = Instance.model_validate({
        "depot": {"x": 0, "y": 0},
        "customers": [{"x": 3, "y": 4, "demand": 1}, {"location": [6, 8], "demand": 2}],
    })
    vs = inst.vertices()
    assert inst.depot in vs
    assert len(vs) == 3


def test_euclidean_distance():
    assert euclidean_distance(0, 0, 3, 4) == 5.0
    assert euclidean_distance(3, 4, 0, 0) == euclidean_distance(0, 0, 3, 4)
    assert euclidean_distance(2, 2, 2, 2) == 0.0
    assert vertex_distance(Depot(x=0, y=0), Customer(x=6, y=8, demand=0)) == 10.0
