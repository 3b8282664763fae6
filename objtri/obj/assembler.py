# objtri/obj/assembler.py
# -*- coding: utf-8 -*-
"""
Сборка меша из разобранных массивов.

Каждый угол каждой грани превращается в новую вершину – без
объединения одинаковых вершин, поэтому индексы треугольников
всегда идут подряд: 0, 1, 2, …
"""
from __future__ import annotations

from typing import Optional, Sequence

from objtri.math.vec3 import Vec3
from objtri.mesh.model import DEFAULT_OBJECT_NAME, Model, Vertex
from objtri.obj.errors import ObjIndexError
from objtri.obj.records import Face, ObjDocument


def _resolve(items: Sequence[Vec3], index: int, kind: str, face: Face,
             source: Optional[str]) -> Vec3:
    """1‑based индекс → элемент массива; 0 и выход за границы – ошибка."""
    if index < 1 or index > len(items):
        raise ObjIndexError(kind, index, len(items), face.offset, source)
    return items[index - 1]


def assemble(positions: Sequence[Vec3],
             texcoords: Sequence[Vec3],
             faces: Sequence[Face],
             name: str = DEFAULT_OBJECT_NAME,
             source: Optional[str] = None) -> Model:
    vertices = []
    triangles = []
    zero = Vec3.zero()

    for face in faces:
        for corner in face.corners:
            position = _resolve(positions, corner.vertex_index, "vertex", face, source)
            if corner.texcoord_index is None:
                texcoord = zero
            else:
                texcoord = _resolve(texcoords, corner.texcoord_index, "texcoord", face, source)
            vertices.append(Vertex(position, texcoord))
            triangles.append(len(vertices) - 1)

    return Model(name, vertices, triangles)


def build_model(document: ObjDocument, default_name: str = DEFAULT_OBJECT_NAME) -> Model:
    """ObjDocument → Model; имя берётся из записи ``o`` или default_name."""
    name = document.object_name if document.object_name is not None else default_name
    return assemble(document.positions, document.texcoords, document.faces,
                    name, document.source or None)
