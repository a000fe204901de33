from .i_info_gateway import IInfoGateway
from .i_location_provider import ILocationProvider

__all__ = [
    "IInfoGateway",
    "ILocationProvider",
]
