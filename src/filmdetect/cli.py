"""
Command-line interface

    filmdetect --simulation-dir recipes/ DSCF0001.JPG [DSCF0002.JPG ...]
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .api import default_extractor, detect_with_recipes
from .config import settings
from .errors import FilmDetectError
from .library.loader import load_recipes, save_recipe
from .models.recipe import SCORED_FIELDS
from .report import render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filmdetect",
        description="Identify the film simulation recipe used for a Fujifilm photograph.",
    )
    parser.add_argument(
        "--simulation-dir",
        type=Path,
        default=settings.simulation_dir,
        help="Where are the simulation files? (default: $FILMDETECT_SIMULATION_DIR)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--show-recipe", action="store_true", help="print the settings read from each photograph")
    parser.add_argument("--export", type=Path, metavar="PATH", help="write the extracted recipe as a library document")
    parser.add_argument("images", nargs="+", type=Path, help="photographs to identify")
    return parser


def format_recipe(recipe) -> str:
    lines = []
    for attr, label in SCORED_FIELDS:
        lines.append(f"  {label + ':':<27}{getattr(recipe, attr)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.export and len(args.images) != 1:
        parser.error("--export takes exactly one image")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.simulation_dir:
        print("Simulation dir can't be empty.")
        return 1

    try:
        recipes = load_recipes(args.simulation_dir)
    except FilmDetectError as e:
        print(e)
        return 1

    extractor = default_extractor()
    status = 0

    for image_path in args.images:
        if len(args.images) > 1:
            print(image_path)

        result = detect_with_recipes(image_path, recipes, extractor=extractor)
        if result.failed:
            print(result.error)
            status = 1
            continue

        if args.show_recipe:
            print(format_recipe(result.recipe))

        print(render_report(result.match))

        if args.export:
            try:
                save_recipe(replace(result.recipe, name=image_path.stem), args.export)
            except FilmDetectError as e:
                print(e)
                status = 1

        sys.stdout.flush()

    return status


if __name__ == "__main__":
    sys.exit(main())
