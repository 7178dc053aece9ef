from .base_decoder import ChunkDecoder, RecordChunkDecoder
from .map_records import ZONEDecoder, ANIMDecoder, LGHTDecoder, MOBJDecoder

__all__ = [
    'ChunkDecoder',
    'RecordChunkDecoder',
    'ZONEDecoder',
    'ANIMDecoder',
    'LGHTDecoder',
    'MOBJDecoder'
]
