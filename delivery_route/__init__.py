# Delivery route core: validated vertex models and a capacity-constrained Route
# whose total distance and demand stay consistent after every mutation.

from .config import RouteConfig, DEFAULT_CONFIG
from .distance import euclidean_distance, vertex_distance
from .exceptions import (
    RouteError,
    EmptyVertexSetError,
    DepotNotFoundError,
    MultipleDepotsError,
    CapacityExceededError,
)
from .models import (
    Depot, Customer, Vertex, parse_vertices,
    Vehicle, Instance, RouteSnapshot, Route,
)
