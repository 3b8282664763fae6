# objtri/obj/sections.py
# -*- coding: utf-8 -*-
"""
Парсеры секций OBJ – по одному на вид записи.

Правило для всех записей: пока ключевое слово (``v``, ``vt``, ``f`` …)
не распознано, парсер возвращает ``None`` и курсор не двигается.
Если ключевое слово совпало, а содержимое строки – нет, это уже
синтаксическая ошибка с именем секции и позицией.

Функции ``*_section`` / ``*_list`` дополнительно пропускают пустые
строки и комментарии перед записями.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from objtri.math.vec3 import Vec3
from objtri.obj.cursor import Cursor, Result, optional
from objtri.obj.errors import ObjSyntaxError, Section
from objtri.obj.lexer import (
    float_literal,
    identifier,
    ignorable_lines,
    keyword,
    line_end,
    space,
    spaces,
    unsigned_integer,
)
from objtri.obj.records import Face, FaceCorner

SMOOTHING_VALUES = {"on": True, "1": True, "off": False, "0": False}


def _expect(res: Result, section: Section, cur: Cursor, detail: str):
    """Распаковать результат обязательного элемента или бросить ObjSyntaxError."""
    if res is None:
        raise ObjSyntaxError(section, cur.pos, cur.text, detail)
    return res


def _floats(cur: Cursor, section: Section, names: str) -> Tuple[Cursor, List[float]]:
    """``spaces float`` для каждой компоненты из names."""
    values = []
    for name in names:
        cur, _ = _expect(spaces(cur), section, cur, f"expected space before {name}")
        cur, value = _expect(float_literal(cur), section, cur, f"expected number for {name}")
        values.append(value)
    return cur, values


def _named_record(tag: str, section: Section, cur: Cursor) -> Result[str]:
    """``tag spaces identifier line_end`` – mtllib, o, usemtl, g."""
    res = keyword(tag, cur)
    if res is None:
        return None
    cur, _ = res
    cur, _ = _expect(spaces(cur), section, cur, f"expected space after '{tag}'")
    cur, name = _expect(identifier(cur), section, cur, "expected a name")
    cur, _ = _expect(line_end(cur), section, cur, "expected end of line after name")
    return cur, name


# ---------------------------------------------------------------------
# отдельные записи
# ---------------------------------------------------------------------
def material_library(cur: Cursor) -> Result[str]:
    return _named_record("mtllib", Section.MATERIAL_LIBRARY, cur)


def object_name(cur: Cursor) -> Result[str]:
    return _named_record("o", Section.OBJECT_NAME, cur)


def use_material(cur: Cursor) -> Result[str]:
    return _named_record("usemtl", Section.USE_MATERIAL, cur)


def polygon_group(cur: Cursor) -> Result[str]:
    return _named_record("g", Section.GROUP, cur)


def vertex(cur: Cursor) -> Result[Vec3]:
    res = keyword("v", cur)
    if res is None:
        return None
    cur, (x, y, z) = _floats(res[0], Section.VERTICES, "xyz")
    cur, _ = _expect(line_end(cur), Section.VERTICES, cur, "expected end of line after z")
    return cur, Vec3(x, y, z)


def texture_coordinates(cur: Cursor) -> Result[Vec3]:
    """``vt u v [w]`` – третья компонента допускается, но отбрасывается."""
    res = keyword("vt", cur)
    if res is None:
        return None
    cur, (u, v) = _floats(res[0], Section.TEXCOORDS, "uv")
    cur, _ = optional(_third_component, cur)
    cur, _ = _expect(line_end(cur), Section.TEXCOORDS, cur, "expected end of line after v")
    return cur, Vec3(u, v, 0.0)


def _third_component(cur: Cursor) -> Result[float]:
    res = spaces(cur)
    if res is None:
        return None
    return float_literal(res[0])


def vertex_normal(cur: Cursor) -> Result[Vec3]:
    res = keyword("vn", cur)
    if res is None:
        return None
    cur, (x, y, z) = _floats(res[0], Section.NORMALS, "xyz")
    cur, _ = _expect(line_end(cur), Section.NORMALS, cur, "expected end of line after z")
    return cur, Vec3(x, y, z)


def smooth_shading(cur: Cursor) -> Result[bool]:
    res = keyword("s", cur)
    if res is None:
        return None
    cur, _ = _expect(spaces(res[0]), Section.SMOOTHING, res[0], "expected space after 's'")
    for word, flag in SMOOTHING_VALUES.items():
        if cur.startswith(word):
            tail = line_end(cur.advance(len(word)))
            if tail is not None:
                return tail[0], flag
    raise ObjSyntaxError(Section.SMOOTHING, cur.pos, cur.text,
                         "expected one of 'on', 'off', '1', '0'")


def face_index(cur: Cursor) -> Result[FaceCorner]:
    """``v``, ``v/vt/vn`` или ``v//vn``."""
    cur, v = _expect(unsigned_integer(cur), Section.FACES, cur, "expected vertex index")
    if not cur.startswith("/"):
        return cur, FaceCorner(v)
    cur, t = optional(unsigned_integer, cur.advance(1))
    if not cur.startswith("/"):
        raise ObjSyntaxError(Section.FACES, cur.pos, cur.text,
                             "expected '/' before normal index")
    cur, n = _expect(unsigned_integer(cur.advance(1)), Section.FACES, cur.advance(1),
                     "expected normal index")
    return cur, FaceCorner(v, t, n)


def face(cur: Cursor) -> Result[Face]:
    res = keyword("f", cur)
    if res is None:
        return None
    cur = res[0]
    offset = cur.pos - 1
    corners = []
    for _ in range(3):
        cur, _ = _expect(space(cur), Section.FACES, cur, "expected three face corners")
        cur, corner = face_index(cur)
        corners.append(corner)
    tail = line_end(cur)
    if tail is None:
        raise ObjSyntaxError(Section.FACES, cur.pos, cur.text,
                             "only triangular faces are supported")
    return tail[0], Face(tuple(corners), offset)


# ---------------------------------------------------------------------
# секции: пропуск пустых строк/комментариев + запись(и)
# ---------------------------------------------------------------------
def _preceded_by_ignorable(record: Callable[[Cursor], Result]) -> Callable[[Cursor], Result]:
    def parse(cur: Cursor) -> Result:
        after, _ = ignorable_lines(cur)
        return record(after)
    parse.__name__ = record.__name__
    return parse


def _section(record: Callable[[Cursor], Result], cur: Cursor) -> Tuple[Cursor, Optional[object]]:
    """Необязательная одиночная запись: при отсутствии курсор не двигается."""
    return optional(_preceded_by_ignorable(record), cur)


def _records(record: Callable[[Cursor], Result], cur: Cursor) -> Tuple[Cursor, list]:
    """Ноль или более записей одного вида с комментариями между ними."""
    item = _preceded_by_ignorable(record)
    values = []
    while True:
        res = item(cur)
        if res is None:
            return cur, values
        cur, value = res
        values.append(value)


def material_library_section(cur: Cursor) -> Tuple[Cursor, Optional[str]]:
    return _section(material_library, cur)


def object_name_section(cur: Cursor) -> Tuple[Cursor, Optional[str]]:
    return _section(object_name, cur)


def vertex_list(cur: Cursor) -> Tuple[Cursor, List[Vec3]]:
    return _records(vertex, cur)


def texture_coordinate_list(cur: Cursor) -> Tuple[Cursor, List[Vec3]]:
    return _records(texture_coordinates, cur)


def vertex_normal_list(cur: Cursor) -> Tuple[Cursor, List[Vec3]]:
    return _records(vertex_normal, cur)


def use_material_section(cur: Cursor) -> Tuple[Cursor, Optional[str]]:
    return _section(use_material, cur)


def polygon_group_section(cur: Cursor) -> Tuple[Cursor, Optional[str]]:
    return _section(polygon_group, cur)


def smooth_shading_section(cur: Cursor) -> Tuple[Cursor, Optional[bool]]:
    return _section(smooth_shading, cur)


def face_list(cur: Cursor) -> Tuple[Cursor, List[Face]]:
    return _records(face, cur)
