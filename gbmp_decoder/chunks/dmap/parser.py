import struct
import logging

import numpy as np

from ..common.base_decoder import ChunkDecoder
from ...base.chunk_parser import ReadFn
from ...world.grid import WorldGrid, GRID_WIDTH, GRID_LENGTH
from .blocks import read_block_prototypes, BLOCK_STRUCTURE_SIZE
from .columns import reconstruct_grid

logger = logging.getLogger(__name__)

BASE_OFFSET_TABLE_SIZE = GRID_WIDTH * GRID_LENGTH * 4


class DMAPDecoder(ChunkDecoder):
    """
    DMAP chunk decoder - compressed block grid

    Layout:
        256x256 uint32 base offsets
        uint32 column count, then that many uint32 column entries
        uint32 block count, then that many 12-byte block records

    The sub-tables carry their own lengths, so the chunk is read directly
    from the file rather than from a size-bounded payload.
    """
    self_describing = True

    def __init__(self):
        super().__init__(b'DMAP')

    @staticmethod
    def _read_count(read: ReadFn, what: str) -> int:
        return struct.unpack('<I', read(4, f"{what} length"))[0]

    def decode_stream(self, read: ReadFn) -> WorldGrid:
        base_offsets = np.frombuffer(
            read(BASE_OFFSET_TABLE_SIZE, "base offset table"), dtype='<u4'
        ).reshape(GRID_LENGTH, GRID_WIDTH)

        column_count = self._read_count(read, "column table")
        column_table = np.frombuffer(read(column_count * 4, "column table"), dtype='<u4')

        block_count = self._read_count(read, "block table")
        prototypes = read_block_prototypes(
            read(block_count * BLOCK_STRUCTURE_SIZE, "block table"), block_count
        )
        logger.debug(f"DMAP: {column_count} column entries, {block_count} block prototypes")

        grid = WorldGrid()
        filled = reconstruct_grid(base_offsets, column_table, prototypes, grid)
        logger.info(f"Decoded block grid: {filled} occupied cells")
        return grid
