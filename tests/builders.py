"""
Helpers for building synthetic GBMP files in memory
"""

import struct
from typing import Dict, List, Sequence, Tuple

import numpy as np

# (x, y) -> (height, offset, block indices)
ColumnSpec = Dict[Tuple[int, int], Tuple[int, int, List[int]]]


def create_test_chunk(name: bytes, data: bytes) -> bytes:
    """Create a test chunk with the given name and data"""
    return name + struct.pack('<I', len(data)) + data


def create_map_file(*chunks: bytes, version: int = 500) -> bytes:
    """File header followed by the given chunks"""
    return b'GBMP' + struct.pack('<H', version) + b''.join(chunks)


def pack_block(left=0, right=0, top=0, bottom=0, lid=0, arrows=0, slope_type=0) -> bytes:
    return struct.pack('<5HBB', left, right, top, bottom, lid, arrows, slope_type)


def build_tables(columns: ColumnSpec) -> Tuple[np.ndarray, List[int]]:
    """
    Build base offsets and a column table for the given columns

    Entry 0 of the column table is an empty column every other map cell points at.
    """
    base_offsets = np.zeros((256, 256), dtype='<u4')
    column_table = [0]
    for (x, y), (height, offset, refs) in columns.items():
        base_offsets[y, x] = len(column_table)
        column_table.append(height | (offset << 8))
        column_table.extend(refs)
    return base_offsets, column_table


def create_dmap_payload(columns: ColumnSpec, blocks: Sequence[bytes]) -> bytes:
    base_offsets, column_table = build_tables(columns)
    return (
        base_offsets.tobytes()
        + struct.pack('<I', len(column_table))
        + struct.pack(f'<{len(column_table)}I', *column_table)
        + struct.pack('<I', len(blocks))
        + b''.join(blocks)
    )


def create_dmap_chunk(columns: ColumnSpec, blocks: Sequence[bytes]) -> bytes:
    return create_test_chunk(b'DMAP', create_dmap_payload(columns, blocks))


def pack_zone(zone_type: int, x: int, y: int, width: int, height: int, name: str) -> bytes:
    encoded = name.encode('ascii')
    return struct.pack('<5bB', zone_type, x, y, width, height, len(encoded)) + encoded


def pack_animation(base_tile: int, frame_rate: int, repeat: int, frames: Sequence[int]) -> bytes:
    return (
        struct.pack('<HBBBB', base_tile, frame_rate, repeat, len(frames), 0)
        + struct.pack(f'<{len(frames)}H', *frames)
    )


def pack_light(argb: bytes, x: int, y: int, z: int, radius: int,
               intensity: int, shape: int, on_time: int, off_time: int) -> bytes:
    return argb + struct.pack('<4H4B', x, y, z, radius, intensity, shape, on_time, off_time)


def pack_object(x: int, y: int, rotation: int, object_type: int) -> bytes:
    return struct.pack('<HHBB', x, y, rotation, object_type)
