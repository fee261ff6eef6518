import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyrender.builders import build_polygon
from polyrender.diagnostics import arrangement_report


def main() -> None:
    star = build_polygon(5, 2)
    errors = star.validate()
    if errors:
        raise SystemExit("\n".join(errors))

    print("Vertices:", len(star.vertices))
    print("Edges:", len(star.edges))
    print("Faces:", len(star.faces))
    print("Boundary:", star.face_to_vertices(0))
    for key, value in arrangement_report(star).items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
