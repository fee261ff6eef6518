import json

from polyrender.arrangement import arrange_face
from polyrender.builders import build_polygon
from polyrender.io import load_json, save_arrangements_json, save_json


def test_save_and_load(tmp_path):
    star = build_polygon(5, 2)
    path = tmp_path / "star.json"
    save_json(star, path)
    loaded = load_json(path)
    assert loaded.vertices == star.vertices
    assert loaded.edges == star.edges
    assert loaded.faces == star.faces
    assert loaded.metadata == {"name": "{5/2}"}


def test_save_arrangements(tmp_path):
    star = build_polygon(5, 2)
    path = tmp_path / "loops.json"
    save_arrangements_json([arrange_face(star.face_points(0))], path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["faces"]) == 1
    face = data["faces"][0]
    assert face["intersections"] == 5
    assert sorted(len(loop) for loop in face["loops"]) == [5, 10]
    assert all(len(point) == 2 for loop in face["loops"] for point in loop)
