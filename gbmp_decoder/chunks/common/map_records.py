"""
Record chunk decoders (ZONE, ANIM, LGHT, MOBJ)
"""

import logging

from construct import Struct, Int8ul, Int8sl, Int16ul, Bytes, Array, Padding, this

from .base_decoder import RecordChunkDecoder
from ...world.entities import Zone, TileAnimation, Light, Color, MapObject

logger = logging.getLogger(__name__)

ZoneRecord = Struct(
    "zone_type" / Int8sl,
    "x" / Int8sl,
    "y" / Int8sl,
    "width" / Int8sl,
    "height" / Int8sl,
    "name_length" / Int8ul,
    "name" / Bytes(this.name_length),
)

AnimationRecord = Struct(
    "base_tile" / Int16ul,
    "frame_rate" / Int8ul,
    "repeat" / Int8ul,
    "frame_count" / Int8ul,
    Padding(1),  # unused
    "frames" / Array(this.frame_count, Int16ul),
)

LightRecord = Struct(
    "argb" / Bytes(4),
    "x" / Int16ul,
    "y" / Int16ul,
    "z" / Int16ul,
    "radius" / Int16ul,
    "intensity" / Int8ul,
    "shape" / Int8ul,
    "on_time" / Int8ul,
    "off_time" / Int8ul,
)

ObjectRecord = Struct(
    "x" / Int16ul,
    "y" / Int16ul,
    "rotation" / Int8ul,
    "object_type" / Int8ul,
)


class ZONEDecoder(RecordChunkDecoder):
    """
    ZONE chunk decoder - named map rectangles
    Each record is 6 bytes plus the name
    """
    record_struct = ZoneRecord

    def __init__(self):
        super().__init__(b'ZONE')

    def record_size(self, parsed) -> int:
        return 6 + parsed.name_length

    def build_record(self, parsed) -> Zone:
        return Zone(
            zone_type=parsed.zone_type,
            x=parsed.x,
            y=parsed.y,
            width=parsed.width,
            height=parsed.height,
            name=self.read_fixed_string(parsed.name, parsed.name_length)
        )


class ANIMDecoder(RecordChunkDecoder):
    """
    ANIM chunk decoder - animated tiles
    Each record is 6 bytes plus 2 bytes per frame
    """
    record_struct = AnimationRecord

    def __init__(self):
        super().__init__(b'ANIM')

    def record_size(self, parsed) -> int:
        return 6 + 2 * parsed.frame_count

    def build_record(self, parsed) -> TileAnimation:
        return TileAnimation(
            base_tile=parsed.base_tile,
            frame_rate=parsed.frame_rate,
            repeat=parsed.repeat,
            frames=tuple(parsed.frames)
        )


class LGHTDecoder(RecordChunkDecoder):
    """
    LGHT chunk decoder - light sources, 16 bytes each
    Colors are stored as ARGB and come out as (red, green, blue, alpha)
    """
    record_struct = LightRecord

    def __init__(self):
        super().__init__(b'LGHT')

    def build_record(self, parsed) -> Light:
        return Light(
            color=Color.from_argb(parsed.argb),
            x=parsed.x,
            y=parsed.y,
            z=parsed.z,
            radius=parsed.radius,
            intensity=parsed.intensity,
            shape=parsed.shape,
            on_time=parsed.on_time,
            off_time=parsed.off_time
        )


class MOBJDecoder(RecordChunkDecoder):
    """
    MOBJ chunk decoder - placed objects, 6 bytes each
    Type codes are kept raw; interpreting them needs an object catalog.
    """
    record_struct = ObjectRecord

    def __init__(self):
        super().__init__(b'MOBJ')

    def decode(self, data: bytes):
        objects = super().decode(data)
        logger.debug(f"Read {len(objects)} map objects")
        return objects

    def build_record(self, parsed) -> MapObject:
        return MapObject(
            x=parsed.x,
            y=parsed.y,
            rotation=parsed.rotation,
            object_type=parsed.object_type
        )
