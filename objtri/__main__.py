# objtri/__main__.py
# -*- coding: utf-8 -*-
"""
Командная строка:

    objtri model.obj                  – имя, число вершин и треугольников
    objtri model.obj --json out.json  – выгрузить буферы в JSON
    objtri model.obj --save-config    – заодно создать objtri.json с настройками
"""
import argparse
import json
import sys

from objtri.obj import ObjParseError
from objtri.utils import Config, logger, set_level
from objtri.utils.loader import load_obj


def model_to_dict(model) -> dict:
    positions, texcoords, indices = model.to_arrays()
    return {
        "name": model.name,
        "vertices": positions.ravel().tolist(),
        "texcoords": texcoords.ravel().tolist(),
        "indices": indices.tolist(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objtri",
        description="Convert a triangulated Wavefront OBJ file into a flat triangle mesh",
    )
    parser.add_argument("obj", help="OBJ file to read")
    parser.add_argument("--json", metavar="OUT", help="write vertex/index buffers as JSON")
    parser.add_argument("--name", help="object name used when the file has no 'o' record")
    parser.add_argument("--config", default="objtri.json", help="JSON config file")
    parser.add_argument("--save-config", action="store_true",
                        help="write a default config file if it is missing or unreadable")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config, create_missing=args.save_config)
    set_level(cfg["log_level"])

    name = args.name or cfg["default_object_name"]
    try:
        model = load_obj(args.obj, default_name=name, encoding=cfg["encoding"])
    except (ObjParseError, OSError, UnicodeDecodeError) as exc:
        logger.error(f"[CLI] {exc}")
        return 1

    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump(model_to_dict(model), f)
        logger.info(f"[CLI] Wrote {args.json}")
    print(f"{model.name}: {len(model.vertices)} vertices, {model.triangle_count} triangles")
    return 0


if __name__ == "__main__":
    sys.exit(main())
