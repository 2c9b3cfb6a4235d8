""" The Instance model is a plain-data container for the vertices of one delivery problem.
It holds:

Depot: the single start/end point.
Customers: delivery stops with their quantities.

In short: Instance validates raw input and hands Route.construct a ready-made vertex set. """

from typing import FrozenSet, List                 # Type hints for lists and the returned vertex set
from pydantic import BaseModel, Field              # Pydantic base class for data validation and parsing
from .depot import Depot                           # Import Depot model (start/end point)
from .customer import Customer                     # Import Customer model (demand points)
from .vertex import Vertex                         # Tagged union of both


class Instance(BaseModel):                         # Top-level model describing the vertex set of a route
    depot: Depot                                   # Single depot (required)
    customers: List[Customer] = Field(default_factory=list)   # Customers to serve

    def vertices(self) -> FrozenSet[Vertex]:       # Depot + customers as a set (duplicate customers collapse)
        return frozenset([self.depot, *self.customers])
