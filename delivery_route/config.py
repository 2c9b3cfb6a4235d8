# Defines default settings shared by vehicles and routes.

from pydantic import BaseModel, PositiveInt        # Pydantic BaseModel for validation + positive int constraint


class RouteConfig(BaseModel):                      # Model for route/vehicle defaults
    default_vehicle_capacity: PositiveInt = 100    # Capacity given to a default-constructed Vehicle


DEFAULT_CONFIG = RouteConfig()                     # Module-wide defaults used when no config is supplied
