from .dimension_selector import DimensionSelector

__all__ = ["DimensionSelector"]
