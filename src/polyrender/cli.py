"""polyrender command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .io import load_json, save_arrangements_json, save_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="polyrender CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build_polygon = sub.add_parser("build-polygon", help="Build a regular or star polygon")
    build_polygon.add_argument("--sides", type=int, required=True)
    build_polygon.add_argument("--density", type=int, default=1)
    build_polygon.add_argument("--radius", type=float, default=1.0)
    build_polygon.add_argument("--prism", type=float, dest="prism_height",
                               help="Extrude to a prism of this height")
    build_polygon.add_argument("--out", dest="output_path", required=True)

    build_cube = sub.add_parser("build-hypercube", help="Build an n-dimensional hypercube")
    build_cube.add_argument("--dimensions", type=int, required=True)
    build_cube.add_argument("--edge", type=float, default=1.0)
    build_cube.add_argument("--out", dest="output_path", required=True)

    validate = sub.add_parser("validate", help="Validate a polytope")
    validate.add_argument("--in", dest="input_path", required=True)

    arrange = sub.add_parser("arrange", help="Split every face into simple loops")
    arrange.add_argument("--in", dest="input_path", required=True)
    arrange.add_argument("--out", dest="output_path", required=True)
    _add_config_arguments(arrange)

    render = sub.add_parser("render", help="Render a polytope to PNG")
    render.add_argument("--in", dest="input_path", required=True)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--dpi", type=int, default=150)
    _add_config_arguments(render)

    diagnose = sub.add_parser("diagnose", help="Report arrangement statistics")
    diagnose.add_argument("--in", dest="input_path", required=True)
    diagnose.add_argument("--json", dest="json_path")
    _add_config_arguments(diagnose)

    return parser


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--epsilon", type=float)
    parser.add_argument("--no-recenter", action="store_true")
    parser.add_argument("--no-check-sorted", action="store_true")


def _config_from_args(args):
    from .config import EPSILON, ArrangementConfig

    return ArrangementConfig(
        epsilon=args.epsilon if args.epsilon is not None else EPSILON,
        check_sorted=not args.no_check_sorted,
        recenter=not args.no_recenter,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "build-polygon":
        _cmd_build_polygon(args)

    elif args.command == "build-hypercube":
        from .builders import build_hypercube

        polytope = build_hypercube(args.dimensions, args.edge)
        save_json(polytope, args.output_path)
        print(f"Saved {args.output_path}")

    elif args.command == "validate":
        polytope = load_json(args.input_path)
        errors = polytope.validate()
        if errors:
            for error in errors:
                print(error)
            raise SystemExit(1)
        print("OK")

    elif args.command == "arrange":
        _cmd_arrange(args)

    elif args.command == "render":
        _cmd_render(args)

    elif args.command == "diagnose":
        _cmd_diagnose(args)


def _cmd_build_polygon(args) -> None:
    from .builders import build_polygon, extrude_to_prism

    try:
        polytope = build_polygon(args.sides, args.density, args.radius)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)
    if args.prism_height is not None:
        polytope = extrude_to_prism(polytope, args.prism_height)
    save_json(polytope, args.output_path)
    print(f"Saved {args.output_path}")


def _cmd_arrange(args) -> None:
    from .render import render_to
    from .scene import Scene

    polytope = load_json(args.input_path)
    scene = Scene()
    report = render_to(polytope, scene, _config_from_args(args))
    save_arrangements_json(scene.faces, args.output_path)
    print(f"Saved {args.output_path} ({report.rendered} faces, {len(report.failed)} failed)")
    if report.failed:
        raise SystemExit(1)


def _cmd_render(args) -> None:
    from .render import render_png, render_to
    from .scene import Scene

    polytope = load_json(args.input_path)
    scene = Scene()
    report = render_to(polytope, scene, _config_from_args(args))
    if not scene.faces:
        logger.error("Nothing to render: no face produced any loop")
        raise SystemExit(1)
    render_png(scene, args.output_path, dpi=args.dpi)
    print(f"Saved {args.output_path}")
    if report.failed:
        raise SystemExit(1)


def _cmd_diagnose(args) -> None:
    from .diagnostics import arrangement_report

    polytope = load_json(args.input_path)
    report = arrangement_report(polytope, _config_from_args(args))
    for key, value in report.items():
        print(f"{key}: {value}")
    if args.json_path:
        Path(args.json_path).write_text(json.dumps(report, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
