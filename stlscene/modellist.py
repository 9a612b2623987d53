"""A scene list that draws near models and unloads distant ones."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .model import Model, Renderer

MAX_MODELS = 1_000_000
CULL_DIST = 250.0
FREE_DIST = 350.0
ALLOC_DIST = 300.0


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two 3D points."""
    return math.dist(tuple(a), tuple(b))


@dataclass
class ModelList:
    """The models of a scene, in the order they were added."""

    models: list[Model] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.models)

    def __iter__(self) -> Iterator[Model]:
        return iter(self.models)

    def add(self, model: Model) -> None:
        if len(self.models) >= MAX_MODELS:
            raise OverflowError(f"a scene holds at most {MAX_MODELS} models")
        self.models.append(model)

    def render_all(self, eye: Sequence[float], renderer: Renderer) -> None:
        """Draw models within reach, unload far ones and reload returning ones."""
        for model in self.models:
            dist = distance(eye, model.position)
            if model.is_valid:
                if dist <= CULL_DIST:
                    model.render(renderer)
                elif dist > FREE_DIST:
                    model.unload()
            elif dist < ALLOC_DIST:
                model.reload()