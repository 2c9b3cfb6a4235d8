from __future__ import annotations
from typing import TYPE_CHECKING
import math

if TYPE_CHECKING:
    from .models.vertex import Vertex


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x1 - x2, y1 - y2)


def vertex_distance(a: "Vertex", b: "Vertex") -> float:
    ax, ay = a.coords
    bx, by = b.coords
    return euclidean_distance(ax, ay, bx, by)
