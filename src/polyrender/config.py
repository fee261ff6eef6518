"""Tolerances and switches shared by one render pass."""

from __future__ import annotations

from dataclasses import dataclass

# Shared tolerance of every approximate comparison.
EPSILON = 1e-12


@dataclass(frozen=True)
class ArrangementConfig:
    """Parameters of the face arrangement engine.

    Attributes
    ----------
    epsilon : float
        Tolerance used by every predicate call of a run (segment parameter
        bounds, slope equality, collinearity, sweep heights).
    check_sorted : bool
        Verify after every event that the sweep-line status is still sorted.
        A violation aborts the face with
        :class:`~polyrender.errors.ArrangementInconsistency`.
    recenter : bool
        Move a polytope's gravicenter to the origin before rendering it.
    """

    epsilon: float = EPSILON
    check_sorted: bool = True
    recenter: bool = True

    def __post_init__(self) -> None:
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon!r}")


DEFAULT_CONFIG = ArrangementConfig()
