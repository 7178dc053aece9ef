"""
In-memory world model for decoded maps
"""

from .blocks import BlockPrototype, Block, EmptyBlock, EMPTY_BLOCK
from .entities import ZoneType, Zone, Color, TileAnimation, Light, MapObject
from .grid import WorldGrid, OutOfRangeError, GRID_WIDTH, GRID_LENGTH, GRID_HEIGHT
from .interfaces import TileAtlas, GeometryBuilder
from .model import WorldModel

__all__ = [
    # Blocks
    'BlockPrototype',
    'Block',
    'EmptyBlock',
    'EMPTY_BLOCK',

    # Records
    'ZoneType',
    'Zone',
    'Color',
    'TileAnimation',
    'Light',
    'MapObject',

    # Grid
    'WorldGrid',
    'OutOfRangeError',
    'GRID_WIDTH',
    'GRID_LENGTH',
    'GRID_HEIGHT',

    # Collaborators
    'TileAtlas',
    'GeometryBuilder',

    'WorldModel'
]
