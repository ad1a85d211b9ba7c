"""windtree command line — annotate an SVG file (or a folder of them)."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from windtree.config import Settings
from windtree.engine.errors import MalformedDrawingError
from windtree.engine.pipeline import run_pipeline

logger = logging.getLogger("windtree.cli")

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windtree",
        description="Split SVG paths into monotonic segments and annotate a winding-number quadtree",
    )
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder (default: <output dir>/<input name>)")
    parser.add_argument("--png", help="Also write a PNG preview to this path (single file only)")
    parser.add_argument("--max-depth", type=int, default=None, help="Tree depth limit")
    parser.add_argument("--log-level", default=None, help="Logging level (default from WINDTREE_LOG_LEVEL)")
    return parser


def process_file(src: Path, dst: Path, settings: Settings, max_depth: int | None = None) -> str:
    """Annotate one file and write the result. Returns the annotated SVG text."""
    svg_text = src.read_text(encoding="utf-8")
    result = run_pipeline(svg_text, settings.tree_config(max_depth))
    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.write_text(result.svg, encoding="utf-8")
    print(
        f"  {result.drawing.num_paths} paths, {len(result.flat_segments)} segments, "
        f"{result.leaf_count} leaves → {dst}"
    )
    return result.svg


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    settings = Settings()

    level = (args.log_level or settings.windtree_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    src = Path(args.input)
    if not src.exists():
        logger.error("File not found: %s", src)
        return EXIT_BAD_INPUT

    if src.is_dir():
        svg_files = sorted(p for p in src.iterdir() if p.suffix.lower() == ".svg")
        if not svg_files:
            logger.error("No .svg files found in %s", src)
            return EXIT_BAD_INPUT

        out_dir = Path(args.output) if args.output else Path(settings.windtree_output_dir) / src.name
        print(f"Processing {len(svg_files)} files...")
        failed = 0
        for path in svg_files:
            print(f"[{path.name}]")
            try:
                process_file(path, out_dir / path.name, settings, args.max_depth)
            except (MalformedDrawingError, UnicodeDecodeError) as e:
                logger.error("%s: %s", path.name, e)
                failed += 1
        print(f"Done: {len(svg_files) - failed}/{len(svg_files)} processed → {out_dir}")
        return EXIT_BAD_INPUT if failed else EXIT_OK

    dst = Path(args.output) if args.output else Path(settings.windtree_output_dir) / src.name
    print(f"[{src.name}]")
    try:
        svg = process_file(src, dst, settings, args.max_depth)
    except (MalformedDrawingError, UnicodeDecodeError) as e:
        logger.error("%s: %s", src.name, e)
        return EXIT_BAD_INPUT

    if args.png:
        from windtree.utils.rasterizer import render_png

        Path(args.png).write_bytes(render_png(svg))
        print(f"  preview → {args.png}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
