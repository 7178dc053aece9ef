"""
GBMP City Map Decoder
Reads chunked city map files into a block grid plus zones, animations, lights and objects
"""

from .base.chunk_parser import (
    ChunkReader, ChunkInfo,
    MapFileError, FormatError, DecodeError
)
from .chunks import ChunkRegistry, chunk_registry, ChunkDecoder
from .map_parser import MapParser, load_map, list_chunks
from .world import (
    BlockPrototype, Block, EmptyBlock, EMPTY_BLOCK,
    ZoneType, Zone, Color, TileAnimation, Light, MapObject,
    WorldGrid, WorldModel, OutOfRangeError
)

__version__ = '0.1.0'

__all__ = [
    # Reading
    'ChunkReader',
    'ChunkInfo',
    'ChunkRegistry',
    'chunk_registry',
    'ChunkDecoder',
    'MapParser',
    'load_map',
    'list_chunks',

    # Errors
    'MapFileError',
    'FormatError',
    'DecodeError',
    'OutOfRangeError',

    # World model
    'BlockPrototype',
    'Block',
    'EmptyBlock',
    'EMPTY_BLOCK',
    'ZoneType',
    'Zone',
    'Color',
    'TileAnimation',
    'Light',
    'MapObject',
    'WorldGrid',
    'WorldModel',

    # Version
    '__version__'
]
