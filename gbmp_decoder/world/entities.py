"""
Zone, animation, light and placed-object records
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, NamedTuple, Optional, Tuple


class ZoneType(IntEnum):
    """Known zone category codes"""
    GENERAL_PURPOSE = 0
    NAVIGATION = 1
    TRAFFIC_LIGHT = 2
    ARROW_BLOCKER = 5
    RAILWAY_STATION = 6
    BUS_STOP = 7
    GENERAL_TRIGGER = 8
    INFORMATION = 10
    RAILWAY_STATION_ENTRY_POINT = 11
    RAILWAY_STATION_EXIT_POINT = 12
    RAILWAY_STOP_POINT = 13
    GANG = 14
    LOCAL_NAVIGATION = 15
    RESTART = 16
    ARREST_RESTART = 20


class Color(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int

    @classmethod
    def from_argb(cls, data: bytes) -> 'Color':
        """Build a color from bytes stored on disk as (alpha, red, green, blue)"""
        alpha, red, green, blue = data[0], data[1], data[2], data[3]
        return cls(red, green, blue, alpha)


@dataclass(frozen=True)
class Zone:
    zone_type: int
    x: int
    y: int
    width: int
    height: int
    name: str

    @property
    def kind(self) -> Optional[ZoneType]:
        """ZoneType for the code, or None if the code is not a known category"""
        try:
            return ZoneType(self.zone_type)
        except ValueError:
            return None

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        kind = self.kind
        return {
            'type': self.zone_type,
            'kind': kind.name if kind is not None else None,
            'rect': {
                'x': self.x,
                'y': self.y,
                'width': self.width,
                'height': self.height
            },
            'name': self.name
        }


@dataclass(frozen=True)
class TileAnimation:
    base_tile: int
    frame_rate: int
    repeat: int
    frames: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'base_tile': self.base_tile,
            'frame_rate': self.frame_rate,
            'repeat': self.repeat,
            'frames': list(self.frames)
        }


@dataclass(frozen=True)
class Light:
    color: Color
    x: int
    y: int
    z: int
    radius: int
    intensity: int
    shape: int
    on_time: int
    off_time: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'color': self.color._asdict(),
            'position': {'x': self.x, 'y': self.y, 'z': self.z},
            'radius': self.radius,
            'intensity': self.intensity,
            'shape': self.shape,
            'on_time': self.on_time,
            'off_time': self.off_time
        }


@dataclass(frozen=True)
class MapObject:
    """Placed object. object_type is an index into an external object catalog."""
    x: int
    y: int
    rotation: int
    object_type: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'x': self.x,
            'y': self.y,
            'rotation': self.rotation,
            'object_type': self.object_type
        }
