from .dimension import get_dimension

__all__ = ["get_dimension"]
