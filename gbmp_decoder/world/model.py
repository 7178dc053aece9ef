"""
Decoded map as handed to consumers
"""

from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from .blocks import Block, EmptyBlock
from .entities import Zone, TileAnimation, Light, MapObject
from .grid import WorldGrid, Position
from .interfaces import GeometryBuilder, TileAtlas


class WorldModel:
    """
    Block grid plus the zone, animation, light and object collections of one map.

    Collections are tuples in file order. The model is only built once a
    file has decoded completely.
    """

    def __init__(self,
                 grid: WorldGrid,
                 zones: Iterable[Zone] = (),
                 animations: Iterable[TileAnimation] = (),
                 lights: Iterable[Light] = (),
                 objects: Iterable[MapObject] = (),
                 version: Optional[int] = None,
                 filename: str = ''):
        self._grid = grid
        self._zones = tuple(zones)
        self._animations = tuple(animations)
        self._lights = tuple(lights)
        self._objects = tuple(objects)
        self.version = version
        self.filename = filename

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def length(self) -> int:
        return self._grid.length

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return self._zones

    @property
    def animations(self) -> Tuple[TileAnimation, ...]:
        return self._animations

    @property
    def lights(self) -> Tuple[Light, ...]:
        return self._lights

    @property
    def objects(self) -> Tuple[MapObject, ...]:
        return self._objects

    def is_valid_position(self, x: int, y: int, z: int) -> bool:
        return self._grid.is_valid_position(x, y, z)

    def block_at(self, x: int, y: int, z: int) -> Union[Block, EmptyBlock]:
        """Block at (x, y, z). Raises OutOfRangeError outside the grid."""
        return self._grid.block_at(x, y, z)

    def iter_blocks(self, occupied_only: bool = False) -> Iterator[Tuple[Position, Union[Block, EmptyBlock]]]:
        return self._grid.iter_blocks(occupied_only)

    def occupied_count(self) -> int:
        return self._grid.occupied_count()

    def build_geometry(self, builder: GeometryBuilder, atlas: TileAtlas) -> Any:
        """Run a geometry builder over this map with an explicitly supplied atlas"""
        return builder.build(self, atlas)

    def __repr__(self) -> str:
        return (
            f"WorldModel({self.filename!r}, version={self.version}, "
            f"{self.width}x{self.length}x{self.height}, zones={len(self._zones)}, "
            f"animations={len(self._animations)}, lights={len(self._lights)}, "
            f"objects={len(self._objects)})"
        )
