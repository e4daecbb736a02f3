"""Read .ber tile maps and check their tiles, shape, walls and reachability."""

__version__ = "0.1.0"
__all__ = ["mapfile", "reach", "cli"]