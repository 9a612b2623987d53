"""Binary STL loading, distance-based model streaming and first-person camera control."""

__version__ = "0.1.0"
__all__ = ["stl", "model", "modellist", "player"]