# delivery_route/models/snapshot.py
from pydantic import BaseModel, ConfigDict, NonNegativeFloat, NonNegativeInt, model_validator
from typing import Tuple

from .customer import Customer
from .depot import Depot
from .vehicle import Vehicle


class RouteSnapshot(BaseModel):
    # read-only picture of a Route: depot -> customers... -> depot
    model_config = ConfigDict(frozen=True)

    depot: Depot
    customers: Tuple[Customer, ...]
    vehicle: Vehicle
    total_distance: NonNegativeFloat
    total_demand: NonNegativeInt

    @model_validator(mode="after")
    def _check_load(self):
        if self.total_demand != sum(c.quantity_to_deliver for c in self.customers):
            raise ValueError("total_demand does not match the customers' quantities")
        if self.total_demand > self.vehicle.capacity:
            raise ValueError(
                f"total_demand {self.total_demand} exceeds vehicle capacity {self.vehicle.capacity}"
            )
        return self
