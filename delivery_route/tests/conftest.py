# delivery_route/tests/conftest.py
import pytest

from delivery_route.models import Depot, Customer, Vehicle


@pytest.fixture
def depot():
    return Depot(x=0.0, y=0.0)


@pytest.fixture
def customer_a():
    """3-4-5 triangle: 5 away from the origin depot."""
    return Customer(x=3.0, y=4.0, demand=5)


@pytest.fixture
def customer_b():
    """Collinear with A, 10 away from the origin depot."""
    return Customer(x=6.0, y=8.0, demand=5)


@pytest.fixture
def small_vehicle():
    return Vehicle(capacity=10)
