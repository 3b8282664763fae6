"""
Математический суб‑пакет: Vec3.
"""

from objtri.math.vec3 import Vec3

__all__ = ["Vec3"]
