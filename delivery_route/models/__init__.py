from .depot import Depot
from .customer import Customer
from .vertex import Vertex, parse_vertices
from .vehicle import Vehicle
from .instance import Instance
from .snapshot import RouteSnapshot
from .route import Route
