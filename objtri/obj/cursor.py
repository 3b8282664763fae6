# objtri/obj/cursor.py
# -*- coding: utf-8 -*-
"""
Курсор по входному тексту и пара комбинаторов.

Каждый парсер – это функция ``cursor -> (cursor, value) | None``.
``None`` значит «здесь этой конструкции нет»; вызывающий код просто
продолжает со своим (старым) курсором – откат бесплатный, т.к. курсор
неизменяемый.
"""
from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Cursor:
    """Неизменяемая позиция в тексте."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, n: int) -> "Cursor":
        return Cursor(self.text, self.pos + n)

    def match(self, pattern: re.Pattern) -> Optional[Tuple["Cursor", re.Match]]:
        """Применить скомпилированный regex в текущей позиции."""
        m = pattern.match(self.text, self.pos)
        if m is None:
            return None
        return Cursor(self.text, m.end()), m

    def __eq__(self, other) -> bool:
        return (isinstance(other, Cursor)
                and self.pos == other.pos and self.text is other.text)

    def __hash__(self) -> int:
        return hash((id(self.text), self.pos))

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, next={self.text[self.pos:self.pos + 16]!r})"


Result = Optional[Tuple[Cursor, T]]
Parser = Callable[[Cursor], Result]


# ---------------------------------------------------------------------
# комбинаторы
# ---------------------------------------------------------------------
def optional(parser: Parser, cur: Cursor) -> Tuple[Cursor, Optional[T]]:
    """Попробовать parser; при неудаче вернуть исходный курсор и None."""
    res = parser(cur)
    if res is None:
        return cur, None
    return res


def many0(parser: Parser, cur: Cursor) -> Tuple[Cursor, List[T]]:
    """Ноль или более повторов; останавливается, если парсер не двигает курсор."""
    values = []
    while True:
        res = parser(cur)
        if res is None:
            return cur, values
        nxt, value = res
        if nxt.pos == cur.pos:
            return cur, values
        values.append(value)
        cur = nxt
