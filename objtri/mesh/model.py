# objtri/mesh/model.py
# -*- coding: utf-8 -*-
"""
Результат разбора: плоский буфер вершин и список индексов треугольников.
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

import numpy as np

from objtri.math.vec3 import Vec3

DEFAULT_OBJECT_NAME = "Object"


class Vertex(NamedTuple):
    """Вершина выходного буфера: позиция + текстурная координата (без нормали)."""
    position: Vec3
    texcoord: Vec3


class Model:
    """
    Неизменяемая треугольная модель.

    ``triangles`` – тройки индексов в ``vertices``; вершины не
    объединяются, поэтому ``triangles[i] == i``.
    """

    __slots__ = ("_name", "_vertices", "_triangles")

    def __init__(self, name: str = DEFAULT_OBJECT_NAME,
                 vertices: Tuple[Vertex, ...] = (),
                 triangles: Tuple[int, ...] = ()):
        self._name = name
        self._vertices = tuple(vertices)
        self._triangles = tuple(triangles)

    @property
    def name(self) -> str:
        return self._name

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def triangles(self) -> Tuple[int, ...]:
        return self._triangles

    @property
    def triangle_count(self) -> int:
        return len(self._triangles) // 3

    # -----------------------------------------------------------------
    def to_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Буферы для загрузки в GPU:
        positions (N, 3) float32, texcoords (N, 2) float32, indices (N,) uint32.
        """
        positions = Vec3.stack(v.position for v in self._vertices)
        texcoords = Vec3.stack(v.texcoord for v in self._vertices)[:, 0:2]
        indices = np.array(self._triangles, dtype=np.uint32)
        return positions, np.ascontiguousarray(texcoords), indices

    def __eq__(self, other) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (self._name == other._name
                and self._vertices == other._vertices
                and self._triangles == other._triangles)

    def __hash__(self) -> int:
        return hash((self._name, self._vertices, self._triangles))

    def __repr__(self) -> str:
        return (f"Model({self._name!r}, vertices={len(self._vertices)}, "
                f"triangles={self.triangle_count})")
