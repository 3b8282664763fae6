"""
Пакет mesh – выходная модель (Vertex, Model).
"""

from objtri.mesh.model import DEFAULT_OBJECT_NAME, Model, Vertex

__all__ = ["DEFAULT_OBJECT_NAME", "Model", "Vertex"]
