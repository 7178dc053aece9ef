"""
Tests for column decompression
"""

import numpy as np
import pytest

from gbmp_decoder.base.chunk_parser import DecodeError
from gbmp_decoder.chunks.dmap.columns import (
    pack_column_entry, unpack_column_entry, base_offset_for, reconstruct_grid
)
from gbmp_decoder.world.blocks import BlockPrototype, EMPTY_BLOCK
from gbmp_decoder.world.grid import WorldGrid

from builders import build_tables

PROTOTYPES = [
    BlockPrototype(left=1, right=2, top=3, bottom=4, lid=5, arrows=0, slope_type=0),
    BlockPrototype(left=11, right=12, top=13, bottom=14, lid=15, arrows=1, slope_type=8),
]


def reconstruct(columns, prototypes=PROTOTYPES):
    base_offsets, column_table = build_tables(columns)
    grid = WorldGrid()
    filled = reconstruct_grid(base_offsets, np.array(column_table, dtype='<u4'), prototypes, grid)
    return grid, filled


@pytest.mark.parametrize("height,offset", [(0, 0), (1, 0), (8, 3), (255, 255), (255, 0), (17, 16)])
def test_column_entry_round_trip(height, offset):
    packed = pack_column_entry(height, offset)
    assert packed == height | (offset << 8)
    assert unpack_column_entry(packed) == (height, offset)


def test_unpack_ignores_upper_bits():
    assert unpack_column_entry(0xABCD0302) == (2, 3)


def test_base_offset_lookup_is_transposed():
    base_offsets = np.zeros((256, 256), dtype='<u4')
    base_offsets[7, 2] = 42
    assert base_offset_for(base_offsets, 2, 7) == 42
    assert base_offset_for(base_offsets, 7, 2) == 0


def test_storage_row_feeds_grid_x():
    # Storage index [j=1][i=4] must end up at grid column (4, 1)
    base_offsets = np.zeros((256, 256), dtype='<u4')
    base_offsets[1, 4] = 1
    column_table = np.array([0, pack_column_entry(1, 0), 1], dtype='<u4')
    grid = WorldGrid()
    reconstruct_grid(base_offsets, column_table, PROTOTYPES, grid)

    assert grid.block_at(4, 1, 0).lid == 15
    assert grid.block_at(1, 4, 0) is EMPTY_BLOCK


def test_single_column():
    grid, filled = reconstruct({(10, 20): (2, 0, [1, 0])})

    assert filled == 2
    bottom = grid.block_at(10, 20, 0)
    top = grid.block_at(10, 20, 1)
    assert bottom.lid == 15 and bottom.position == (10, 20, 0)
    assert top.lid == 5 and top.position == (10, 20, 1)
    for z in range(2, 8):
        assert grid.block_at(10, 20, z) is EMPTY_BLOCK


def test_offset_skips_lower_slots():
    grid, filled = reconstruct({(0, 0): (5, 3, [0, 1])})

    assert filled == 2
    for z in range(3):
        assert grid.block_at(0, 0, z).is_empty
    assert grid.block_at(0, 0, 3).lid == 5
    assert grid.block_at(0, 0, 4).lid == 15
    for z in range(5, 8):
        assert grid.block_at(0, 0, z).is_empty


def test_offset_equal_to_height_fills_nothing():
    grid, filled = reconstruct({(1, 1): (4, 4, [])})
    assert filled == 0
    assert all(grid.block_at(1, 1, z).is_empty for z in range(8))


def test_full_column():
    grid, filled = reconstruct({(255, 255): (8, 0, [0] * 8)})
    assert filled == 8
    assert all(grid.block_at(255, 255, z).position == (255, 255, z) for z in range(8))


def test_shared_prototype_gives_independent_instances():
    grid, _ = reconstruct({
        (1, 2): (1, 0, [0]),
        (3, 4): (1, 0, [0]),
    })
    first = grid.block_at(1, 2, 0)
    second = grid.block_at(3, 4, 0)
    assert first is not second

    first.lid = 999
    assert second.lid == 5
    assert PROTOTYPES[0].lid == 5


def test_same_column_entry_shared_by_two_cells():
    base_offsets, column_table = build_tables({(0, 0): (1, 0, [1])})
    base_offsets[9, 8] = base_offsets[0, 0]
    grid = WorldGrid()
    reconstruct_grid(base_offsets, np.array(column_table, dtype='<u4'), PROTOTYPES, grid)

    a = grid.block_at(0, 0, 0)
    b = grid.block_at(8, 9, 0)
    assert a.position == (0, 0, 0)
    assert b.position == (8, 9, 0)
    a.arrows = 0xFF
    assert b.arrows == 1


def test_offset_above_height_raises():
    with pytest.raises(DecodeError) as excinfo:
        reconstruct({(6, 7): (2, 3, [0, 0])})
    assert excinfo.value.column == (6, 7)
    assert "(6, 7)" in str(excinfo.value)


def test_height_above_grid_depth_raises():
    with pytest.raises(DecodeError) as excinfo:
        reconstruct({(2, 2): (9, 0, [0] * 9)})
    assert excinfo.value.column == (2, 2)


def test_block_reference_out_of_range_raises():
    with pytest.raises(DecodeError) as excinfo:
        reconstruct({(12, 34): (2, 0, [0, 2])})
    assert excinfo.value.column == (12, 34)


def test_column_index_out_of_range_raises():
    base_offsets = np.zeros((256, 256), dtype='<u4')
    base_offsets[5, 4] = 100
    with pytest.raises(DecodeError) as excinfo:
        reconstruct_grid(base_offsets, np.array([0], dtype='<u4'), PROTOTYPES, WorldGrid())
    assert excinfo.value.column == (4, 5)


def test_references_past_table_end_raise():
    base_offsets = np.zeros((256, 256), dtype='<u4')
    base_offsets[0, 1] = 1
    # Height 3 needs three references after index 1, the table has one
    column_table = np.array([0, pack_column_entry(3, 0), 0], dtype='<u4')
    with pytest.raises(DecodeError) as excinfo:
        reconstruct_grid(base_offsets, column_table, PROTOTYPES, WorldGrid())
    assert excinfo.value.column == (1, 0)
