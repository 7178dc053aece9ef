"""
Loads a GBMP file into a WorldModel
"""

import os
import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

from .base.chunk_parser import ChunkReader, ChunkInfo
from .chunks.registry import ChunkRegistry, chunk_registry
from .world.grid import WorldGrid
from .world.model import WorldModel

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, BinaryIO]


class MapParser:
    """
    Drives a ChunkReader over one file and collects what the decoders return.

    Results are gathered privately and only turned into a WorldModel after
    the last chunk decoded, so a failed load never yields a partial model.
    """

    # Record chunks and the collection their records go to
    COLLECTIONS = {
        b'ZONE': 'zones',
        b'ANIM': 'animations',
        b'LGHT': 'lights',
        b'MOBJ': 'objects'
    }

    def __init__(self, registry: Optional[ChunkRegistry] = None):
        self.registry = registry if registry is not None else chunk_registry

    def parse(self, source: Source) -> WorldModel:
        """
        Decode a map file

        Args:
            source: Path to the file, or a readable binary stream positioned at its start

        Returns:
            The completed WorldModel

        Raises:
            FormatError, DecodeError: If the file cannot be decoded
        """
        if isinstance(source, (str, os.PathLike)):
            filename = str(source)
            logger.info(f"Loading map from file \"{filename}\"")
            with open(source, 'rb') as f:
                return self._parse_stream(f, filename)
        return self._parse_stream(source, getattr(source, 'name', ''))

    def _parse_stream(self, stream: BinaryIO, filename: Any) -> WorldModel:
        reader = ChunkReader(stream, self.registry)
        grid: Optional[WorldGrid] = None
        collections: Dict[str, List[Any]] = {name: [] for name in self.COLLECTIONS.values()}

        for info, result in reader.iter_chunks():
            if result is None:
                continue
            if info.name == b'DMAP':
                if grid is not None:
                    logger.warning(f"Second DMAP chunk at offset {info.offset} replaces the first")
                grid = result
            elif info.name in self.COLLECTIONS:
                collections[self.COLLECTIONS[info.name]].extend(result)
            else:
                self._unhandled(info, result)

        if grid is None:
            logger.warning("No DMAP chunk found, block grid is empty")
            grid = WorldGrid()

        world = WorldModel(
            grid,
            version=reader.version,
            filename=filename if isinstance(filename, str) else '',
            **collections
        )
        logger.info(
            f"Loaded map version {world.version}: {len(world.zones)} zones, "
            f"{len(world.animations)} animations, {len(world.lights)} lights, "
            f"{len(world.objects)} objects"
        )
        return world

    def _unhandled(self, info: ChunkInfo, result: Any) -> None:
        """Hook for decoders registered for tags the model has no place for"""
        logger.debug(f"Ignoring decoded chunk {info.name!r} at offset {info.offset}")


def load_map(source: Source, registry: Optional[ChunkRegistry] = None) -> WorldModel:
    """Decode a map file with the default (or given) chunk registry"""
    return MapParser(registry).parse(source)


def list_chunks(path: Union[str, Path]) -> List[ChunkInfo]:
    """List the chunks of a file without decoding any of them"""
    with open(path, 'rb') as f:
        reader = ChunkReader(f, ChunkRegistry(register_defaults=False))
        return [info for info, _ in reader.iter_chunks()]
