"""
Error hierarchy raised while building a Route.
All of them are raised synchronously by Route construction and never recovered internally.
"""


class RouteError(Exception):
    """Base class for route-related errors."""


class EmptyVertexSetError(RouteError, ValueError):
    """The vertex collection handed to Route.construct is empty."""


class DepotNotFoundError(RouteError, ValueError):
    """No Depot vertex was found in the vertex collection."""


class MultipleDepotsError(RouteError, ValueError):
    """More than one Depot vertex was found; a route starts and ends at exactly one."""


class CapacityExceededError(RouteError, ValueError):
    def __init__(self, demand: int, capacity: int):
        self.demand = demand
        self.capacity = capacity
        super().__init__(demand, capacity)

    def __str__(self) -> str:
        return f"Vehicle capacity exceeded: demand {self.demand} > capacity {self.capacity}"
