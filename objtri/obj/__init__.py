"""
Пакет obj – грамматика Wavefront OBJ и сборка треугольного меша.
"""

from objtri.obj.errors import ObjIndexError, ObjParseError, ObjSyntaxError, Section
from objtri.obj.records import Face, FaceCorner, ObjDocument
from objtri.obj.assembler import assemble, build_model
from objtri.obj.parser import parse_obj, parse_obj_document

__all__ = [
    "ObjParseError",
    "ObjSyntaxError",
    "ObjIndexError",
    "Section",
    "Face",
    "FaceCorner",
    "ObjDocument",
    "assemble",
    "build_model",
    "parse_obj",
    "parse_obj_document",
]
