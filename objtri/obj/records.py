# objtri/obj/records.py
# -*- coding: utf-8 -*-
"""
Промежуточные записи разбора: угол грани, грань и весь документ.
"""
from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

from objtri.math.vec3 import Vec3


class FaceCorner(NamedTuple):
    """Тройка индексов угла грани (1‑based, как записано в файле)."""
    vertex_index: int
    texcoord_index: Optional[int] = None
    normal_index: Optional[int] = None


class Face(NamedTuple):
    """Треугольная грань; offset – позиция записи ``f`` в исходном тексте."""
    corners: Tuple[FaceCorner, FaceCorner, FaceCorner]
    offset: int = 0

    @property
    def vertex_indices(self) -> Tuple[int, int, int]:
        return tuple(c.vertex_index for c in self.corners)

    @property
    def texcoord_indices(self) -> Tuple[Optional[int], ...]:
        return tuple(c.texcoord_index for c in self.corners)

    @property
    def normal_indices(self) -> Tuple[Optional[int], ...]:
        return tuple(c.normal_index for c in self.corners)


class ObjDocument(NamedTuple):
    """Всё, что грамматика извлекла из текста, до сборки меша."""
    material_library: Optional[str]
    object_name: Optional[str]
    positions: Tuple[Vec3, ...]
    texcoords: Tuple[Vec3, ...]
    normals: Tuple[Vec3, ...]
    material: Optional[str]
    group: Optional[str]
    smooth: Optional[bool]
    faces: Tuple[Face, ...]
    source: str = ""

    def __repr__(self) -> str:
        return (f"ObjDocument(name={self.object_name!r}, v={len(self.positions)}, "
                f"vt={len(self.texcoords)}, vn={len(self.normals)}, f={len(self.faces)})")
