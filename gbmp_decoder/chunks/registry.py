"""
Chunk decoder registry
"""

from typing import Dict, Type, Optional

from .common.base_decoder import ChunkDecoder
from .common.map_records import ZONEDecoder, ANIMDecoder, LGHTDecoder, MOBJDecoder
from .dmap.parser import DMAPDecoder


class ChunkRegistry:
    """
    Registry for chunk decoders
    Maps chunk tags to decoder classes; tags without an entry are skipped by the reader
    """

    def __init__(self, register_defaults: bool = True):
        self._decoders: Dict[bytes, Type[ChunkDecoder]] = {}

        if register_defaults:
            self.register_map_chunks()

    def register_decoder(self, decoder_class: Type[ChunkDecoder]):
        """
        Register a chunk decoder, replacing any decoder for the same tag

        Args:
            decoder_class: The decoder class to register
        """
        decoder = decoder_class()
        self._decoders[decoder.name] = decoder_class

    def register_map_chunks(self):
        """Register all GBMP chunk decoders"""
        map_decoders = [
            DMAPDecoder,  # Block grid
            ZONEDecoder,  # Zones
            MOBJDecoder,  # Placed objects
            ANIMDecoder,  # Tile animations
            LGHTDecoder   # Lights
        ]

        for decoder_class in map_decoders:
            self.register_decoder(decoder_class)

    def get_decoder(self, chunk_name: bytes) -> Optional[ChunkDecoder]:
        """
        Get a decoder for the specified chunk name

        Returns:
            ChunkDecoder instance or None if no decoder found
        """
        decoder_class = self._decoders.get(chunk_name)
        if decoder_class is None:
            return None
        return decoder_class()

    def supports_chunk(self, chunk_name: bytes) -> bool:
        return chunk_name in self._decoders

    def list_supported_chunks(self) -> Dict[bytes, str]:
        """
        List all supported chunks

        Returns:
            Dictionary mapping chunk names to decoder class names
        """
        return {name: decoder_class.__name__ for name, decoder_class in self._decoders.items()}


# Global registry instance
chunk_registry = ChunkRegistry()
