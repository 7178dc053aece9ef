"""
Chunk decoders and registry for GBMP map files
"""

from .registry import ChunkRegistry, chunk_registry
from .common.base_decoder import ChunkDecoder, RecordChunkDecoder
from .common.map_records import ZONEDecoder, ANIMDecoder, LGHTDecoder, MOBJDecoder
from .dmap.parser import DMAPDecoder

__all__ = [
    # Registry
    'ChunkRegistry',
    'chunk_registry',

    # Base
    'ChunkDecoder',
    'RecordChunkDecoder',

    # Map chunks
    'DMAPDecoder',
    'ZONEDecoder',
    'ANIMDecoder',
    'LGHTDecoder',
    'MOBJDecoder'
]
