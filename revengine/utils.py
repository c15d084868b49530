"""Math constants and small value types shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass

PI = 3.14159265359
DEG_TO_RAD = PI / 180
PI_F = PI
DEG_TO_RAD_F = DEG_TO_RAD

# Bytes taken by one packed vertex: three position floats and two uv floats.
VERTEX_SIZE = 20


@dataclass(frozen=True)
class Vertex:
    """A vertex with a 3D position and a texture coordinate."""

    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        pos = tuple(float(v) for v in self.pos)
        uv = tuple(float(v) for v in self.uv)
        if len(pos) != 3:
            raise ValueError(f"vertex position needs 3 components, got {len(pos)}")
        if len(uv) != 2:
            raise ValueError(f"vertex uv needs 2 components, got {len(uv)}")
        object.__setattr__(self, "pos", pos)
        object.__setattr__(self, "uv", uv)


@dataclass
class Vector4:
    """Four-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class MouseRelativeMotion:
    """Mouse movement since the last frame, in pixels."""

    x: int = 0
    y: int = 0