"""Water-management simulation of regions, water sources and canals."""

__version__ = "0.1.0"
__all__ = ["model", "manager", "solution", "simulator", "generator"]