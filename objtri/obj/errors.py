# objtri/obj/errors.py
# -*- coding: utf-8 -*-
"""
Ошибки разбора OBJ.

* ObjSyntaxError – грамматика секции не совпала (после того как
  ключевое слово записи уже распознано).
* ObjIndexError  – текст синтаксически верен, но индекс угла грани
  выходит за пределы прочитанных массивов.

Обе ошибки фатальны: первая же ошибка прерывает весь разбор.
"""
from __future__ import annotations

from enum import Enum


class Section(Enum):
    """Именованные секции OBJ‑конвейера (в порядке разбора)."""
    LEADING_COMMENTS = "leading comments"
    MATERIAL_LIBRARY = "material reference"
    OBJECT_NAME = "object name"
    VERTICES = "vertex list"
    TEXCOORDS = "texcoord list"
    NORMALS = "normal list"
    USE_MATERIAL = "material use"
    GROUP = "polygon group"
    SMOOTHING = "smoothing flag"
    FACES = "face list"


def line_and_column(source: str | None, offset: int) -> tuple[int | None, int | None]:
    """Номер строки и столбца (с 1) для байтового смещения в тексте."""
    if source is None:
        return None, None
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


class ObjParseError(ValueError):
    """Базовая ошибка: текст не удалось превратить в модель."""

    def __init__(self, message: str, offset: int | None = None,
                 source: str | None = None):
        self.offset = offset
        self.line, self.column = (
            line_and_column(source, offset) if offset is not None else (None, None)
        )
        if self.line is not None:
            message = f"{message} (line {self.line}, column {self.column})"
        super().__init__(message)


class ObjSyntaxError(ObjParseError):
    """Секция не совпала с грамматикой."""

    def __init__(self, section: Section, offset: int, source: str | None = None,
                 detail: str = ""):
        self.section = section
        self.detail = detail
        message = f"Unable to parse OBJ file: error reading {section.value}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, offset, source)


class ObjIndexError(ObjParseError):
    """Индекс угла грани равен 0 или больше длины массива."""

    def __init__(self, kind: str, index: int, count: int, offset: int,
                 source: str | None = None):
        self.kind = kind
        self.index = index
        self.count = count
        super().__init__(
            f"Face {kind} index {index} out of range (1..{count})", offset, source
        )
