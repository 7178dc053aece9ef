"""
Interfaces for the rendering side, which lives outside this package
"""

from typing import Any, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import WorldModel


class TileAtlas(Protocol):
    """Maps tile references to something drawable"""

    def tile(self, index: int) -> Any:
        ...


class GeometryBuilder(Protocol):
    """Turns a decoded world into drawable geometry using the given atlas"""

    def build(self, world: 'WorldModel', atlas: TileAtlas) -> Any:
        ...
