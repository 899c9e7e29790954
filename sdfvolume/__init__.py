"""Sample signed distance functions onto voxel grids, preview slices and export raw volumes."""

__version__ = "0.1.0"
__all__ = ["cli", "sdflib", "volume"]