"""
Block prototypes and block instances
"""

import dataclasses
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple


@dataclass(frozen=True)
class BlockPrototype:
    """
    One entry of the DMAP block table.

    Face and lid values are tile references carried as opaque integers;
    resolving them to images is the renderer's job.
    """
    left: int
    right: int
    top: int
    bottom: int
    lid: int
    arrows: int
    slope_type: int

    @property
    def ground_type(self) -> int:
        """Low two bits of the slope byte"""
        return self.slope_type & 0x03

    @property
    def slope(self) -> int:
        """Slope code stored in the upper six bits of the slope byte"""
        return self.slope_type >> 2

    def instantiate(self, x: int, y: int, z: int) -> 'Block':
        """Return a new block instance stamped with a world position"""
        return Block(
            left=self.left,
            right=self.right,
            top=self.top,
            bottom=self.bottom,
            lid=self.lid,
            arrows=self.arrows,
            slope_type=self.slope_type,
            x=x,
            y=y,
            z=z
        )


@dataclass(slots=True)
class Block:
    """A block occupying one grid cell. Each cell owns its own instance."""
    left: int
    right: int
    top: int
    bottom: int
    lid: int
    arrows: int
    slope_type: int
    x: int
    y: int
    z: int

    is_empty: ClassVar[bool] = False

    @property
    def position(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    @property
    def prototype(self) -> BlockPrototype:
        return BlockPrototype(
            self.left, self.right, self.top, self.bottom,
            self.lid, self.arrows, self.slope_type
        )

    def copy(self) -> 'Block':
        return dataclasses.replace(self)

    def to_dict(self) -> Dict[str, int]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class EmptyBlock:
    """Cell content for slots no column fills. Immutable, so one instance serves every cell."""
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0
    lid: int = 0
    arrows: int = 0
    slope_type: int = 0

    is_empty: ClassVar[bool] = True


EMPTY_BLOCK = EmptyBlock()
