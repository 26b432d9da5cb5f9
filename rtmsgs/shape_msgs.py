"""Shape messages: mesh triangles and solid primitives."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.geometry_msgs import _read_avr_float64, _write_avr_float64
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class MeshTriangle(Message):
    """Three vertex indices of a mesh triangle."""

    TYPE = "shape_msgs/MeshTriangle"
    MD5 = "23688b2e6d2de3d32fe8af104a903253"

    vertex_indices: list[int] = field(default_factory=lambda: [0, 0, 0])

    def encode(self, writer: Writer) -> None:
        indices = list(self.vertex_indices)
        if len(indices) != 3:
            raise ValueError(
                f"a triangle needs exactly 3 vertex indices, got {len(indices)}"
            )
        writer.pack("3I", *indices)

    @classmethod
    def decode(cls, reader: Reader) -> MeshTriangle:
        return cls(list(reader.unpack("3I")))


@dataclass
class SolidPrimitive(Message):
    """A box, sphere, cylinder or cone given by its dimensions."""

    TYPE = "shape_msgs/SolidPrimitive"
    MD5 = "d8f8cbc74c5ff283fca29569ccefb45d"

    BOX = 1
    SPHERE = 2
    CYLINDER = 3
    CONE = 4
    BOX_X = 0
    BOX_Y = 1
    BOX_Z = 2
    SPHERE_RADIUS = 0
    CYLINDER_HEIGHT = 0
    CYLINDER_RADIUS = 1
    CONE_HEIGHT = 0
    CONE_RADIUS = 1

    type: int = 0
    dimensions: list[float] = field(default_factory=list)

    def encode(self, writer: Writer) -> None:
        writer.pack("B", self.type)
        dimensions = list(self.dimensions)
        writer.pack("I", len(dimensions))
        for value in dimensions:
            _write_avr_float64(writer, value)

    @classmethod
    def decode(cls, reader: Reader) -> SolidPrimitive:
        shape_type = reader.unpack("B")
        count = reader.unpack("I")
        return cls(shape_type, [_read_avr_float64(reader) for _ in range(count)])