from .chunk_parser import (
    ChunkReader, ChunkInfo,
    MapFileError, FormatError, DecodeError
)

__all__ = [
    'ChunkReader',
    'ChunkInfo',
    'MapFileError',
    'FormatError',
    'DecodeError'
]
