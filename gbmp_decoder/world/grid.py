"""
Dense block grid
"""

from typing import Iterator, Tuple, Union

import numpy as np

from .blocks import Block, EmptyBlock, EMPTY_BLOCK

GRID_WIDTH = 256   # x
GRID_LENGTH = 256  # y
GRID_HEIGHT = 8    # z

Position = Tuple[int, int, int]


class OutOfRangeError(IndexError):
    """Raised when a grid position lies outside the map"""

    def __init__(self, position: Position, shape: Tuple[int, int, int]):
        super().__init__(position, shape)
        self.position = position
        self.shape = shape

    def __str__(self) -> str:
        return f"Position {self.position} is outside the {self.shape[0]}x{self.shape[1]}x{self.shape[2]} grid"


class WorldGrid:
    """
    Fixed-size 3D grid of blocks indexed by (x, y, z).

    Every cell starts as EMPTY_BLOCK and is never left unset.
    """

    def __init__(self, width: int = GRID_WIDTH, length: int = GRID_LENGTH, height: int = GRID_HEIGHT):
        self._cells = np.full((width, length, height), EMPTY_BLOCK, dtype=object)

    @property
    def width(self) -> int:
        return self._cells.shape[0]

    @property
    def length(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[2]

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._cells.shape

    def is_valid_position(self, x: int, y: int, z: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.length and 0 <= z < self.height

    def block_at(self, x: int, y: int, z: int) -> Union[Block, EmptyBlock]:
        if not self.is_valid_position(x, y, z):
            raise OutOfRangeError((x, y, z), self.shape)
        return self._cells[x, y, z]

    def set_block(self, block: Block) -> None:
        """Place a block at its own position. Used while decoding."""
        if not self.is_valid_position(block.x, block.y, block.z):
            raise OutOfRangeError(block.position, self.shape)
        self._cells[block.x, block.y, block.z] = block

    def iter_blocks(self, occupied_only: bool = False) -> Iterator[Tuple[Position, Union[Block, EmptyBlock]]]:
        """
        Iterate cells in x, y, z order

        Yields:
            Tuples of ((x, y, z), block)
        """
        for (x, y, z), block in np.ndenumerate(self._cells):
            if occupied_only and block.is_empty:
                continue
            yield (x, y, z), block

    def occupied_count(self) -> int:
        return sum(1 for _ in self.iter_blocks(occupied_only=True))
