# objtri/obj/lexer.py
# -*- coding: utf-8 -*-
"""
Лексические примитивы OBJ: пробелы, идентификаторы, концы строк,
комментарии, числа.  Все функции без состояния.
"""
from __future__ import annotations

import re

from objtri.obj.cursor import Cursor, Result, optional

_SPACES = re.compile(r" +")
_IDENTIFIER = re.compile(r"[\w.]+")
_COMMENT_TEXT = re.compile(r"#((?:[^\r\n]|\r(?!\n))*)")
_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_UNSIGNED = re.compile(r"\d+")


# ---------------------------------------------------------------------
# пробелы
# ---------------------------------------------------------------------
def space(cur: Cursor) -> Result[str]:
    if cur.startswith(" "):
        return cur.advance(1), " "
    return None


def spaces(cur: Cursor) -> Result[str]:
    res = cur.match(_SPACES)
    if res is None:
        return None
    nxt, m = res
    return nxt, m.group(0)


def identifier(cur: Cursor) -> Result[str]:
    """Имя объекта, группы, материала или файла: буквы, цифры, '.', '_'."""
    res = cur.match(_IDENTIFIER)
    if res is None:
        return None
    nxt, m = res
    return nxt, m.group(0)


# ---------------------------------------------------------------------
# строки
# ---------------------------------------------------------------------
def line_terminator(cur: Cursor) -> Result[str]:
    if cur.startswith("\n"):
        return cur.advance(1), "\n"
    if cur.startswith("\r\n"):
        return cur.advance(2), "\r\n"
    return None


def end_of_input(cur: Cursor) -> Result[str]:
    if cur.at_end:
        return cur, ""
    return None


def comment_line(cur: Cursor) -> Result[str]:
    """'#' + текст до конца строки; возвращает текст комментария."""
    res = cur.match(_COMMENT_TEXT)
    if res is None:
        return None
    nxt, m = res
    end = line_terminator(nxt) or end_of_input(nxt)
    if end is None:
        return None
    return end[0], m.group(1)


def blank_line(cur: Cursor) -> Result[str]:
    cur, _ = optional(spaces, cur)
    return line_terminator(cur)


def ignorable_line(cur: Cursor) -> Result[str]:
    return blank_line(cur) or comment_line(cur)


def ignorable_lines(cur: Cursor) -> Result[list]:
    """Ноль или более пустых строк / комментариев (всегда успешен)."""
    lines = []
    while True:
        res = ignorable_line(cur)
        if res is None:
            return cur, lines
        cur, text = res
        lines.append(text)


def line_end(cur: Cursor) -> Result[str]:
    """Хвост строки с данными: пробелы, затем перевод строки, комментарий или EOF."""
    cur, _ = optional(spaces, cur)
    return line_terminator(cur) or comment_line(cur) or end_of_input(cur)


# ---------------------------------------------------------------------
# числа и ключевые слова
# ---------------------------------------------------------------------
def float_literal(cur: Cursor) -> Result[float]:
    res = cur.match(_FLOAT)
    if res is None:
        return None
    nxt, m = res
    return nxt, float(m.group(0))


def unsigned_integer(cur: Cursor) -> Result[int]:
    res = cur.match(_UNSIGNED)
    if res is None:
        return None
    nxt, m = res
    return nxt, int(m.group(0))


def keyword(tag: str, cur: Cursor) -> Result[str]:
    """
    Ключевое слово записи (``v``, ``vt``, ``usemtl`` …) с возможными
    пробелами перед ним.  За тегом идёт пробел, конец строки или EOF
    (их не съедаем), но не буква – чтобы ``v`` не совпал с началом ``vt``.
    Голый ``v\\n`` распознаётся как запись – и падает уже в своей секции.
    """
    cur, _ = optional(spaces, cur)
    if not cur.startswith(tag):
        return None
    nxt = cur.advance(len(tag))
    if not (nxt.startswith(" ") or nxt.at_end or line_terminator(nxt) is not None):
        return None
    return nxt, tag
