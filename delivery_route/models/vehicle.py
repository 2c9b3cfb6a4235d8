# Defines the Vehicle model: the capacity constraint holder of a route.

from pydantic import BaseModel, ConfigDict, Field, PositiveInt    # Pydantic BaseModel and positive-int constraint
from ..config import DEFAULT_CONFIG                               # Default capacity for a fresh vehicle


class Vehicle(BaseModel):                                         # Vehicle data model
    model_config = ConfigDict(frozen=True, extra="forbid")

    capacity: PositiveInt = Field(                                # Maximum load, fixed once built
        default_factory=lambda: DEFAULT_CONFIG.default_vehicle_capacity,
    )
