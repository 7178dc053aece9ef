from .parser import DMAPDecoder
from .blocks import BlockStructure, read_block_prototypes
from .columns import (
    pack_column_entry, unpack_column_entry, base_offset_for, reconstruct_grid
)

__all__ = [
    'DMAPDecoder',
    'BlockStructure',
    'read_block_prototypes',
    'pack_column_entry',
    'unpack_column_entry',
    'base_offset_for',
    'reconstruct_grid'
]
