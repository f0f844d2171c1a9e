"""A simulated 3D printer that reads layers from CSV, exports them and fetches their images."""

__version__ = "0.1.0"