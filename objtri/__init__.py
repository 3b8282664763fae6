"""
objtri – Wavefront OBJ → треугольный меш.

Разбирает текст OBJ (mtllib, o, v, vt, vn, usemtl, g, s, f) и
собирает плоский буфер вершин (позиция + texcoord) и список
индексов треугольников.
"""

from objtri.utils import logger
from objtri.math import Vec3
from objtri.mesh import DEFAULT_OBJECT_NAME, Model, Vertex
from objtri.obj import (
    Face,
    FaceCorner,
    ObjDocument,
    ObjIndexError,
    ObjParseError,
    ObjSyntaxError,
    Section,
    build_model,
    parse_obj,
    parse_obj_document,
)
from objtri.utils.loader import (
    load_obj,
    load_obj_arrays,
    load_obj_document,
    material_library_path,
)

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "DEFAULT_OBJECT_NAME",
    "Model",
    "Vertex",
    "Face",
    "FaceCorner",
    "ObjDocument",
    "ObjParseError",
    "ObjSyntaxError",
    "ObjIndexError",
    "Section",
    "build_model",
    "parse_obj",
    "parse_obj_document",
    "load_obj",
    "load_obj_arrays",
    "load_obj_document",
    "material_library_path",
]
