import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyrender.builders import build_hypercube, build_polygon, extrude_to_prism
from polyrender.render import render_png, render_to
from polyrender.scene import Scene


def main() -> None:
    output_dir = ROOT / "validation_outputs"
    output_dir.mkdir(parents=True, exist_ok=True)

    for name, polytope in [
        ("pentagram_prism", extrude_to_prism(build_polygon(5, 2))),
        ("heptagram_prism", extrude_to_prism(build_polygon(7, 3))),
        ("tesseract", build_hypercube(4)),
    ]:
        scene = Scene()
        report = render_to(polytope, scene)
        render_png(scene, output_dir / f"{name}.png")
        print(f"{name}: {report.rendered} faces, {report.intersections} crossings")

    print("Saved validation PNGs to", output_dir)


if __name__ == "__main__":
    main()
