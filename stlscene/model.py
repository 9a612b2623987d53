"""Placed models and a renderer that records their draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .stl import STLModel, Vec3, Vertex, load_stl


@dataclass(frozen=True)
class DrawCommand:
    """A mesh drawn at a position with an XYZ rotation."""

    position: Vec3
    rotation: Vec3
    vertices: tuple[Vertex, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)


@dataclass
class Renderer:
    """Collects the draw commands issued for a frame."""

    commands: list[DrawCommand] = field(default_factory=list)

    def draw(self, model: STLModel | None, position: Vec3, rotation: Vec3) -> None:
        """Queue a mesh for drawing; empty or missing meshes are skipped."""
        if model is None or not model.vertices or model.triangle_count == 0:
            return
        self.commands.append(
            DrawCommand(Vec3(*position), Vec3(*rotation), tuple(model.vertices))
        )

    def clear(self) -> None:
        self.commands.clear()


@dataclass
class Model:
    """A mesh file placed in the scene, whose geometry may be unloaded."""

    filename: str | Path
    position: Vec3
    rotation: Vec3
    stl: STLModel | None = None
    is_valid: bool = True

    def render(self, renderer: Renderer) -> None:
        renderer.draw(self.stl, self.position, self.rotation)

    def unload(self) -> None:
        """Drop the geometry, keeping the placement."""
        self.stl = None
        self.is_valid = False

    def reload(self) -> None:
        """Load the geometry again from the model's file."""
        self.stl = load_stl(self.filename)
        self.is_valid = True


def load_model(filename: str | Path, position: Vec3, rotation: Vec3) -> Model:
    """Load a mesh file and place it in the scene."""
    return Model(filename, Vec3(*position), Vec3(*rotation), load_stl(filename), True)