""" The Depot Pydantic model represents the single start/end point of a route.

It carries no demand; several routes built from the same vertex set share one Depot instance. """

from typing import Literal                          # Literal tag for the vertex variant
from .base import VertexBase                        # Shared position fields + coords


class Depot(VertexBase):                            # Depot data model (entry point/exit for the vehicle)
    kind: Literal["depot"] = "depot"                # Variant tag used for dispatch
