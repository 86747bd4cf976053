"""3D vectors, matrices, a free-look camera, a transform pipeline and a BMP reader."""

__version__ = "0.1.0"
__all__ = ["bmp", "camera", "matrix", "pipeline", "vectors", "vertex"]