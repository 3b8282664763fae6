# -*- coding: utf-8 -*-
import numpy as np
import pytest
from objtri.math.vec3 import Vec3


def test_vec3_components():
    v = Vec3(1, 2, -3)
    assert (v.x, v.y, v.z) == (1.0, 2.0, -3.0)
    assert v.as_np().dtype == np.float32
    assert v.as_np().tolist() == [1, 2, -3]


def test_vec3_zero_is_default():
    assert Vec3() == Vec3.zero() == (0, 0, 0)


def test_vec3_equality_with_sequences():
    assert Vec3(1, 1, -1) == (1, 1, -1)
    assert Vec3(0.625, 0.5, 0.0) == [0.625, 0.5, 0.0]
    assert Vec3(1, 1, -1) != (1, 1, 1)
    assert hash(Vec3(1, 2, 3)) == hash(Vec3(1.0, 2.0, 3.0))


def test_vec3_tuple_equality_agrees_with_hash():
    # 0.1 не представимо в float32: вектор равен только расширенному кортежу
    v = Vec3(0.1, 0.2, 0.3)
    assert v != (0.1, 0.2, 0.3)
    assert v == v.to_tuple()
    assert hash(v) == hash(v.to_tuple())
    assert (1, 2, 3) in {Vec3(1, 2, 3)}
    assert Vec3(0.1, 0.2, 0.3) in {v}


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    copy = v.as_np()
    copy[0] = 42
    assert v.x == 1.0


def test_vec3_stack():
    arr = Vec3.stack([Vec3(1, 2, 3), Vec3(4, 5, 6)])
    assert arr.shape == (2, 3)
    assert np.allclose(arr, [[1, 2, 3], [4, 5, 6]])
    assert Vec3.stack([]).shape == (0, 3)
