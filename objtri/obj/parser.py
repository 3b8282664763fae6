# objtri/obj/parser.py
# -*- coding: utf-8 -*-
"""
Конвейер разбора OBJ.

Секции читаются в фиксированном порядке из одного общего курсора:

    mtllib → o → v* → vt* → vn* → usemtl → g → s → f*

Группа ``g`` (не больше одной) может стоять также перед ``usemtl``
или после ``s``.

Отсутствующая необязательная секция даёт ``None``/пустой список и не
двигает курсор.  Первая же ошибка прерывает разбор.
"""
from __future__ import annotations

from typing import Union

from objtri.mesh.model import DEFAULT_OBJECT_NAME, Model
from objtri.obj.assembler import build_model
from objtri.obj.cursor import Cursor
from objtri.obj.errors import ObjParseError, ObjSyntaxError, Section
from objtri.obj.lexer import ignorable_lines
from objtri.obj.records import ObjDocument
from objtri.obj.sections import (
    face_list,
    material_library_section,
    object_name_section,
    polygon_group_section,
    smooth_shading_section,
    texture_coordinate_list,
    use_material_section,
    vertex_list,
    vertex_normal_list,
)
from objtri.utils.logger import logger


def _as_text(data: Union[str, bytes]) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ObjParseError(f"OBJ input is not valid UTF-8: {exc}", exc.start) from exc


def parse_obj_document(data: Union[str, bytes]) -> ObjDocument:
    """Разобрать текст OBJ в ObjDocument (без сборки меша)."""
    text = _as_text(data)
    cur = Cursor(text)

    cur, _ = ignorable_lines(cur)
    cur, mtllib = material_library_section(cur)
    cur, name = object_name_section(cur)
    cur, positions = vertex_list(cur)
    cur, texcoords = texture_coordinate_list(cur)
    cur, normals = vertex_normal_list(cur)
    # ``g`` принимается один раз: до ``usemtl``, до ``s`` или прямо перед гранями
    cur, group = polygon_group_section(cur)
    cur, material = use_material_section(cur)
    if group is None:
        cur, group = polygon_group_section(cur)
    cur, smooth = smooth_shading_section(cur)
    if group is None:
        cur, group = polygon_group_section(cur)
    cur, faces = face_list(cur)

    cur, _ = ignorable_lines(cur)
    if not cur.at_end:
        raise ObjSyntaxError(Section.FACES, cur.pos, text,
                             "unexpected content after face list")

    document = ObjDocument(
        material_library=mtllib,
        object_name=name,
        positions=tuple(positions),
        texcoords=tuple(texcoords),
        normals=tuple(normals),
        material=material,
        group=group,
        smooth=smooth,
        faces=tuple(faces),
        source=text,
    )
    logger.debug(f"[ObjParser] Parsed {document!r}")
    return document


def parse_obj(data: Union[str, bytes], default_name: str = DEFAULT_OBJECT_NAME) -> Model:
    """
    Текст OBJ → Model (плоский буфер вершин + список индексов треугольников).

    Бросает ObjSyntaxError, если секция не совпала с грамматикой, и
    ObjIndexError, если индекс грани выходит за пределы массивов.
    """
    return build_model(parse_obj_document(data), default_name)
