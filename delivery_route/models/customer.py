""" This file defines the Customer Pydantic model, a delivery stop with a required quantity.

It ensures the quantity to deliver is a non-negative integer; `demand=` is accepted as a shorter spelling. """

from typing import Literal                                  # Literal tag for the vertex variant
from pydantic import AliasChoices, Field, NonNegativeInt    # Field aliasing + non-negative int constraint
from .base import VertexBase                                # Shared position fields + coords


class Customer(VertexBase):                                 # Customer data model
    kind: Literal["customer"] = "customer"                  # Variant tag used for dispatch
    quantity_to_deliver: NonNegativeInt = Field(            # Quantity delivered at this stop
        validation_alias=AliasChoices("quantity_to_deliver", "demand"),
    )

    @property
    def demand(self) -> int:                                # Alias used by route accounting
        return self.quantity_to_deliver
