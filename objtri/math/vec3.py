# objtri/math/vec3.py
# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).

Парсеру нужны только литералы и нулевой вектор, поэтому объект
неизменяемый: без сеттеров и без арифметики.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np


class Vec3:
    """Неизменяемый вектор‑3 (позиция или текстурная координата)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)
        self._v.flags.writeable = False

    @classmethod
    def zero(cls) -> "Vec3":
        return cls()

    # -------------------------------------------------
    # компоненты (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # сравнение: с другим Vec3 или с 3‑последовательностью.
    # Последовательность сравнивается с компонентами, уже расширенными
    # до float64, поэтому равенство с кортежем согласовано с __hash__.
    # -------------------------------------------------
    def __eq__(self, other) -> bool:
        if isinstance(other, Vec3):
            return bool(np.array_equal(self._v, other._v))
        if isinstance(other, (tuple, list)) and len(other) == 3:
            return self.to_tuple() == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    # -------------------------------------------------
    # приведение типов
    # -------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(float(c) for c in self._v)

    @staticmethod
    def stack(vectors: Iterable["Vec3"]) -> np.ndarray:
        """Собрать (N, 3) float32‑массив из последовательности векторов."""
        rows = [v._v for v in vectors]
        if not rows:
            return np.zeros((0, 3), dtype=np.float32)
        return np.vstack(rows)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
