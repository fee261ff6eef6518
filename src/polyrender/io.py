from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Union

from .arrangement import FaceArrangement
from .polytope import Polytope


PathLike = Union[str, Path]


def load_json(path: PathLike) -> Polytope:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Polytope.from_dict(data)


def save_json(polytope: Polytope, path: PathLike) -> None:
    Path(path).write_text(polytope.to_json(), encoding="utf-8")


def save_arrangements_json(arrangements: Iterable[FaceArrangement], path: PathLike) -> None:
    payload = {"faces": [arrangement.to_dict() for arrangement in arrangements]}
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")
