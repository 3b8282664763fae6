# -*- coding: utf-8 -*-
"""
Загрузка Wavefront OBJ с диска.

Файл читается целиком в память, затем передаётся чистому парсеру
(objtri.obj).  Файл материалов (mtllib) не открывается – только
вычисляется его путь рядом с OBJ.
"""
from __future__ import annotations

from pathlib import Path

import numpy as np

from objtri.mesh.model import DEFAULT_OBJECT_NAME, Model
from objtri.obj import ObjDocument, ObjParseError, build_model, parse_obj_document
from objtri.utils.logger import logger
from objtri.utils.profiler import Profiler


def _read_text(path, encoding: str) -> tuple[Path, str]:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"OBJ file not found: {p}")
    return p, p.read_text(encoding=encoding)


def load_obj_document(path, encoding: str = "utf-8") -> ObjDocument:
    """Прочитать и разобрать OBJ без сборки меша."""
    p, text = _read_text(path, encoding)
    try:
        with Profiler(f"parse {p.name}"):
            document = parse_obj_document(text)
    except ObjParseError as exc:
        logger.error(f"[Loader] {p}: {exc}")
        raise
    logger.debug(f"[Loader] Loaded {p} ({len(document.faces)} faces)")
    return document


def load_obj(path, default_name: str = DEFAULT_OBJECT_NAME,
             encoding: str = "utf-8") -> Model:
    """Путь к OBJ → Model."""
    document = load_obj_document(path, encoding)
    try:
        return build_model(document, default_name)
    except ObjParseError as exc:
        logger.error(f"[Loader] {path}: {exc}")
        raise


def load_obj_arrays(path, encoding: str = "utf-8") -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    То же, что load_obj, но сразу в numpy:
    positions (N, 3), texcoords (N, 2), indices (N,).
    """
    return load_obj(path, encoding=encoding).to_arrays()


def material_library_path(obj_path, document: ObjDocument) -> Path | None:
    """Путь к .mtl из записи ``mtllib`` относительно OBJ‑файла (файл не читается)."""
    if document.material_library is None:
        return None
    return Path(obj_path).expanduser().resolve().parent / document.material_library
