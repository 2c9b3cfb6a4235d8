""" Route is the mutable delivery plan of one vehicle: depot -> customers (in visiting order) -> depot.

It validates its vertex set on construction (exactly one depot, demand within the vehicle's capacity), keeps
total distance and total demand recomputed after every add/remove, and compares by value. The customer sequence
is only handed out as a tuple; structural changes go through add_customer/remove_customer.

A Route is not safe for concurrent mutation; callers sharing one across threads must lock around it. """

from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional, Tuple
import logging

from ..distance import vertex_distance
from ..exceptions import (
    CapacityExceededError,
    DepotNotFoundError,
    EmptyVertexSetError,
    MultipleDepotsError,
)
from .customer import Customer
from .depot import Depot
from .snapshot import RouteSnapshot
from .vehicle import Vehicle
from .vertex import parse_vertices

logger = logging.getLogger(__name__)


def _require_customer(c: Any) -> Customer:
    if not isinstance(c, Customer):
        raise TypeError(f"expected a Customer, got {type(c).__name__}")
    return c


class Route:
    def __init__(self, depot: Depot, customers: Iterable[Customer] = (), vehicle: Optional[Vehicle] = None):
        if not isinstance(depot, Depot):
            raise DepotNotFoundError(f"expected a Depot, got {type(depot).__name__}")
        self._depot = depot                                  # shared with other routes, never copied
        self._vehicle = vehicle if vehicle is not None else Vehicle()
        self._customers: List[Customer] = [_require_customer(c) for c in customers]

        demand = self._sum_demand()
        if demand > self._vehicle.capacity:
            raise CapacityExceededError(demand, self._vehicle.capacity)

        self._total_distance = 0.0
        self._total_demand = 0
        self._recompute()

    @classmethod
    def construct(cls, vertices: Iterable[Any], vehicle: Optional[Vehicle] = None) -> "Route":
        """
        Build a Route from a vertex collection (typically a set holding one Depot and the customers).

        Customers keep the collection's iteration order. Raw dicts tagged with `kind` are validated into models;
        model instances pass through untouched, so the depot stays the caller's object.

        Raises EmptyVertexSetError, DepotNotFoundError, MultipleDepotsError or CapacityExceededError.
        """
        items = list(vertices)
        if not items:
            raise EmptyVertexSetError("The vertex collection is empty")

        depots: List[Depot] = []
        customers: List[Customer] = []
        for v in parse_vertices(items):
            match v.kind:
                case "customer":
                    customers.append(v)
                case "depot":
                    depots.append(v)

        if not depots:
            raise DepotNotFoundError("No depot found in the vertex collection")
        if len(depots) > 1:
            raise MultipleDepotsError(f"Expected exactly one depot, found {len(depots)}")

        route = cls(depots[0], customers, vehicle)
        logger.debug("Constructed route with %d customers, demand %d/%d, distance %.3f",
                     len(route), route.total_demand, route.vehicle.capacity, route.total_distance)
        return route

    # ---- mutation ----

    def add_customer(self, c: Customer) -> bool:
        """Append `c` if the vehicle can still carry it. Returns False (route untouched) otherwise."""
        c = _require_customer(c)
        demand = self._sum_demand() + c.quantity_to_deliver   # from the sequence, not the cached total
        if demand > self._vehicle.capacity:
            logger.debug("Rejected customer at %s: demand %d > capacity %d",
                         c.coords, demand, self._vehicle.capacity)
            return False
        self._customers.append(c)
        self._recompute()
        return True

    def remove_customer(self, c: Customer) -> None:
        """Drop the first customer equal to `c`; absent customers are ignored."""
        c = _require_customer(c)
        try:
            self._customers.remove(c)
        except ValueError:
            logger.debug("Customer at %s not on route; nothing removed", c.coords)
        self._recompute()

    # ---- derived fields ----

    def _sum_demand(self) -> int:
        return sum(c.quantity_to_deliver for c in self._customers)

    def _recompute(self) -> None:
        if not self._customers:
            self._total_distance = 0.0
            self._total_demand = 0
            return

        if len(self._customers) == 1:                         # out and back
            self._total_distance = vertex_distance(self._depot, self._customers[0]) * 2
            self._total_demand = self._customers[0].quantity_to_deliver
            return

        # depot -> first, consecutive customers, last -> depot
        dist = vertex_distance(self._depot, self._customers[0])
        for a, b in zip(self._customers, self._customers[1:]):
            dist += vertex_distance(a, b)
        dist += vertex_distance(self._customers[-1], self._depot)
        self._total_distance = dist
        self._total_demand = self._sum_demand()

    # ---- accessors ----

    @property
    def total_distance(self) -> float:
        return self._total_distance

    @property
    def total_demand(self) -> int:
        return self._total_demand

    @property
    def depot(self) -> Depot:
        return self._depot

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def vehicle(self) -> Vehicle:
        return self._vehicle

    @property
    def remaining_capacity(self) -> int:
        return self._vehicle.capacity - self._total_demand

    def snapshot(self) -> RouteSnapshot:
        return RouteSnapshot(
            depot=self._depot,
            customers=tuple(self._customers),
            vehicle=self._vehicle,
            total_distance=self._total_distance,
            total_demand=self._total_demand,
        )

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(tuple(self._customers))

    def __contains__(self, c: object) -> bool:
        return c in self._customers

    # ---- value semantics ----

    def _key(self) -> Tuple:
        return (tuple(self._customers), self._depot, self._total_distance, self._total_demand, self._vehicle)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Route):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (f"Route(depot={self._depot.coords}, customers={len(self._customers)}, "
                f"demand={self._total_demand}/{self._vehicle.capacity}, distance={self._total_distance:.3f})")
