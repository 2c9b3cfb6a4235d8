""" The VertexBase Pydantic model is the common shape of every point a route visits.

It:

Holds a 2D position (x, y); location=[x, y] is accepted as an alternative input and normalized into x/y.
Is frozen, so vertices compare and hash by value and can be collected into sets.
Exposes .coords for unified coordinate access.

Concrete variants (Depot, Customer) add a literal `kind` tag used to tell them apart. """

from typing import Any, Tuple                          # Type hints for raw input and coordinate tuples
from pydantic import BaseModel, ConfigDict, FiniteFloat, model_validator


class VertexBase(BaseModel):                           # Positioned point shared by depots and customers
    model_config = ConfigDict(frozen=True, extra="forbid")

    x: FiniteFloat                                     # X-coordinate
    y: FiniteFloat                                     # Y-coordinate

    @model_validator(mode="before")                    # Normalize location=[x, y] *before* field parsing
    @classmethod
    def _coerce_location(cls, data: Any):
        if not isinstance(data, dict) or "location" not in data:
            return data
        data = dict(data)
        loc = data.pop("location")
        if loc is None:                                # Explicit None → fall back to (x, y)
            return data
        if not isinstance(loc, (list, tuple)) or len(loc) < 2:   # Must be a sequence carrying both coordinates
            raise ValueError("location must be [x, y]")
        if "x" in data or "y" in data:                 # Two coordinate formats at once is ambiguous
            raise ValueError("Provide either (x,y) or location=[x,y], not both")
        data["x"], data["y"] = loc[0], loc[1]
        return data

    @property
    def coords(self) -> Tuple[float, float]:           # Unified coordinate accessor
        return float(self.x), float(self.y)
