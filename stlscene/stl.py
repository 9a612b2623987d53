"""Binary STL parsing and conversion to coloured vertex arrays."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, NamedTuple

HEADER_SIZE = 80
_COUNT = struct.Struct("<I")
_RECORD = struct.Struct("<12f")
_STRIDE = _RECORD.size + 2  # twelve floats plus the attribute byte count
_FIRST_RECORD = HEADER_SIZE + _COUNT.size


class STLError(Exception):
    """Raised when an STL file cannot be read or is malformed."""


class Vec3(NamedTuple):
    """A three-component vector."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Triangle:
    """One facet of an STL mesh: a normal and three corners."""

    normal: Vec3
    v1: Vec3
    v2: Vec3
    v3: Vec3

    @property
    def corners(self) -> tuple[Vec3, Vec3, Vec3]:
        return (self.v1, self.v2, self.v3)


@dataclass(frozen=True)
class Vertex:
    """A drawable vertex: texture coordinates, colour, normal and position."""

    u: float
    v: float
    color: int
    nx: float
    ny: float
    nz: float
    x: float
    y: float
    z: float


@dataclass
class STLModel:
    """A loaded mesh with its triangles and the vertex array built from them."""

    triangles: list[Triangle] = field(default_factory=list)
    vertices: list[Vertex] = field(default_factory=list)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)


def normal_to_color(nx: float, ny: float, nz: float) -> int:
    """Map a normal to a packed ABGR colour with full alpha."""
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length > 0.0:
        nx, ny, nz = nx / length, ny / length, nz / length

    def channel(component: float) -> int:
        return min(255, max(0, int((component + 1.0) * 0.5 * 255.0)))

    r, g, b, a = channel(nx), channel(ny), channel(nz), 255
    return (a << 24) | (b << 16) | (g << 8) | r


def triangles_to_vertices(triangles: Iterable[Triangle]) -> list[Vertex]:
    """Expand triangles into three vertices each, coloured by facet normal."""
    vertices: list[Vertex] = []
    for tri in triangles:
        nx, ny, nz = tri.normal
        color = normal_to_color(nx, ny, nz)
        vertices.extend(
            Vertex(0.0, 0.0, color, nx, ny, nz, corner.x, corner.y, corner.z)
            for corner in tri.corners
        )
    return vertices


def parse_stl(data: bytes) -> STLModel:
    """Parse the bytes of a binary STL file."""
    if len(data) < _FIRST_RECORD:
        raise STLError("data too short for an STL header")
    (count,) = _COUNT.unpack_from(data, HEADER_SIZE)
    triangles: list[Triangle] = []
    for offset in range(_FIRST_RECORD, _FIRST_RECORD + count * _STRIDE, _STRIDE):
        if offset + _RECORD.size > len(data):
            raise STLError(
                f"file declares {count} triangles but holds only {len(triangles)}"
            )
        values = _RECORD.unpack_from(data, offset)
        normal, v1, v2, v3 = (Vec3(*values[i:i + 3]) for i in range(0, 12, 3))
        triangles.append(Triangle(normal, v1, v2, v3))
    return STLModel(triangles, triangles_to_vertices(triangles))


def load_stl(path: str | Path) -> STLModel:
    """Read and parse a binary STL file from disk."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise STLError(f"cannot open {path}: {exc}") from exc
    return parse_stl(data)