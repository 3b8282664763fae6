# -*- coding: utf-8 -*-
"""
conftest.py – OBJ‑фикстуры (куб Blender в нескольких вариантах).
"""

import pytest

from objtri.utils import Config

CUBE_POSITIONS = [
    "v 1.000000 1.000000 -1.000000",
    "v 1.000000 -1.000000 -1.000000",
    "v 1.000000 1.000000 1.000000",
    "v 1.000000 -1.000000 1.000000",
    "v -1.000000 1.000000 -1.000000",
    "v -1.000000 -1.000000 -1.000000",
    "v -1.000000 1.000000 1.000000",
    "v -1.000000 -1.000000 1.000000",
]

CUBE_TEXCOORDS = [
    "vt 0.625000 0.500000",
    "vt 0.875000 0.500000",
    "vt 0.875000 0.750000",
    "vt 0.625000 0.750000",
    "vt 0.375000 0.750000",
    "vt 0.625000 1.000000",
    "vt 0.375000 1.000000",
    "vt 0.375000 0.000000",
    "vt 0.625000 0.000000",
    "vt 0.625000 0.250000",
    "vt 0.375000 0.250000",
    "vt 0.125000 0.500000",
    "vt 0.375000 0.500000",
    "vt 0.125000 0.750000",
]

CUBE_NORMALS = [
    "vn 0.0000 1.0000 0.0000",
    "vn 0.0000 0.0000 1.0000",
    "vn -1.0000 0.0000 0.0000",
    "vn 0.0000 -1.0000 0.0000",
    "vn 1.0000 0.0000 0.0000",
    "vn 0.0000 0.0000 -1.0000",
]

CUBE_FACES = [
    "f 5/1/1 3/2/1 1/3/1",
    "f 3/2/2 8/4/2 4/5/2",
    "f 7/6/3 6/7/3 8/8/3",
    "f 2/9/4 8/10/4 6/11/4",
    "f 1/3/5 4/5/5 2/9/5",
    "f 5/12/6 2/9/6 6/7/6",
    "f 5/1/1 7/13/1 3/2/1",
    "f 3/2/2 7/14/2 8/4/2",
    "f 7/6/3 5/12/3 6/7/3",
    "f 2/9/4 4/5/4 8/10/4",
    "f 1/3/5 3/2/5 4/5/5",
    "f 5/12/6 1/3/6 2/9/6",
]


def build_cube(comments=True, name=True, group=False, interspersed=False, newline="\n"):
    """Собрать текст куба; флаги включают разные «шумовые» варианты."""
    lines = []
    if comments:
        lines += ["# Blender v2.79 (sub 0) OBJ File: ''", "# www.blender.org"]
    lines.append("mtllib cube_uv.mtl")
    if name:
        lines.append("o Cube")
    for block, note in ((CUBE_POSITIONS, "# positions"),
                        (CUBE_TEXCOORDS, "# texture coordinates"),
                        (CUBE_NORMALS, "# normals")):
        if interspersed:
            lines += ["", note]
        for i, line in enumerate(block):
            lines.append(line)
            if interspersed and i % 3 == 2:
                lines.append(f"# {i + 1} done")
    lines += ["usemtl Material", "s off"]
    if group:
        lines.append("g Cube_Cube.001")
    for i, line in enumerate(CUBE_FACES):
        if interspersed and i % 2 == 0:
            lines.append(f"# triangle {i + 1}")
        lines.append(line)
    return newline.join(lines) + newline


@pytest.fixture
def make_cube():
    return build_cube


@pytest.fixture
def cube_source():
    return build_cube()


@pytest.fixture
def cube_file(tmp_path):
    path = tmp_path / "cube_uv.obj"
    path.write_text(build_cube(), encoding="utf-8")
    return path


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Config‑синглтон с файлом во временной папке."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path / "objtri.json"
    Config.reset()
