from .routes import VARIANTS, RouteNotFound, RouteTable, route_table

__version__ = "1.0.0"

__all__ = ["VARIANTS", "RouteNotFound", "RouteTable", "route_table", "__version__"]
