"""
Column decompression for the DMAP chunk.

The block grid is stored as one column description per (x, y) map cell:

    base offset table  ->  column table entry  ->  block table entries

The base offset table gives, for a map cell, the index of its column entry in
the column table. That entry packs the column height in its low byte and the
number of empty slots at the bottom of the column in the next byte. The
entries right after it are block table indices, one per filled slot, bottom
to top.
"""

import logging
from typing import Sequence, Tuple

import numpy as np

from ...base.chunk_parser import DecodeError
from ...world.blocks import BlockPrototype
from ...world.grid import WorldGrid

logger = logging.getLogger(__name__)

HEIGHT_MASK = 0xFF
OFFSET_MASK = 0xFF00
OFFSET_SHIFT = 8


def pack_column_entry(height: int, offset: int) -> int:
    return (height & HEIGHT_MASK) | ((offset << OFFSET_SHIFT) & OFFSET_MASK)


def unpack_column_entry(entry: int) -> Tuple[int, int]:
    """Returns (height, offset) of a column table entry"""
    return entry & HEIGHT_MASK, (entry & OFFSET_MASK) >> OFFSET_SHIFT


def base_offset_for(base_offsets: np.ndarray, x: int, y: int) -> int:
    """
    Column table index for map cell (x, y).

    The table is stored with its axes swapped relative to grid addressing:
    the value at storage position [y][x] belongs to grid column (x, y).
    This is the only place that swap is applied.
    """
    return int(base_offsets[y, x])


def reconstruct_grid(base_offsets: np.ndarray,
                     column_table: np.ndarray,
                     prototypes: Sequence[BlockPrototype],
                     grid: WorldGrid) -> int:
    """
    Expand the column encoding into grid cells.

    Every map column of the grid is visited, whether or not the file has
    meaningful data for it. Slot k of a column with (height, offset) is
    filled when offset <= k < height, with a fresh instance of the
    prototype named by column_table[column_index + (k - offset) + 1].
    All other slots keep their empty block.

    Args:
        base_offsets: (length, width) uint32 array in storage order
        column_table: Flat uint32 column table
        prototypes: Block prototypes, addressed by index
        grid: Grid to fill

    Returns:
        Number of cells filled

    Raises:
        DecodeError: If a column's tables are inconsistent, with the column's (x, y)
    """
    columns = column_table.tolist()
    table_size = len(columns)
    prototype_count = len(prototypes)
    depth = grid.height
    filled = 0

    for x in range(grid.width):
        for y in range(grid.length):
            column_index = base_offset_for(base_offsets, x, y)
            if column_index >= table_size:
                raise DecodeError(
                    f"Column ({x}, {y}) starts at column table index {column_index}, "
                    f"but the table has {table_size} entries",
                    column=(x, y)
                )

            height, offset = unpack_column_entry(columns[column_index])
            if offset > height:
                raise DecodeError(
                    f"Column ({x}, {y}) has offset {offset} above its height {height}",
                    column=(x, y)
                )
            if height > depth:
                raise DecodeError(
                    f"Column ({x}, {y}) has height {height}, grid depth is {depth}",
                    column=(x, y)
                )
            if column_index + (height - offset) >= table_size:
                raise DecodeError(
                    f"Column ({x}, {y}) block references run past the end of the "
                    f"{table_size}-entry column table",
                    column=(x, y)
                )

            for k in range(offset, height):
                block_index = columns[column_index + (k - offset) + 1]
                if block_index >= prototype_count:
                    raise DecodeError(
                        f"Column ({x}, {y}) slot {k} references block {block_index}, "
                        f"but the block table has {prototype_count} entries",
                        column=(x, y)
                    )
                grid.set_block(prototypes[block_index].instantiate(x, y, k))
                filled += 1

    logger.debug(f"Filled {filled} grid cells from {table_size} column table entries")
    return filled
