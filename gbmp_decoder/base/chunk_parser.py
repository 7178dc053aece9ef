import struct
import logging
from typing import Any, BinaryIO, Callable, Generator, Optional, Tuple
from dataclasses import dataclass

ReadFn = Callable[[int, str], bytes]


class MapFileError(Exception):
    """Base exception for map decoding errors.

    Carries the tag of the chunk being decoded and the byte offset where
    decoding went wrong, when they are known.
    """

    def __init__(self, message: str, tag: Optional[bytes] = None, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.tag = tag
        self.offset = offset

    def locate(self, tag: bytes, offset: int) -> 'MapFileError':
        """Fill in chunk tag and offset unless the raiser already did"""
        if self.tag is None:
            self.tag = tag
        if self.offset is None:
            self.offset = offset
        return self

    def __str__(self) -> str:
        where = []
        if self.tag is not None:
            where.append(f"chunk {self.tag.decode('ascii', 'replace')!r}")
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class FormatError(MapFileError):
    """Raised when the container layout is broken (bad magic, truncation, size mismatch)"""
    pass


class DecodeError(MapFileError):
    """Raised when the DMAP tables are inconsistent with each other"""

    def __init__(self, message: str, column: Optional[Tuple[int, int]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.column = column


@dataclass
class ChunkInfo:
    """Information about a chunk found in the file"""
    name: bytes
    offset: int
    size: int
    data_offset: int


class ChunkReader:
    """Forward-only reader for GBMP chunk containers.

    Reads the file header, then walks tag/size chunk headers and hands each
    payload to the decoder the registry has for that tag. Chunks without a
    decoder are skipped by their declared size.
    """

    MAGIC = b'GBMP'
    FILE_HEADER_SIZE = 6
    CHUNK_HEADER_SIZE = 8

    def __init__(self, stream: BinaryIO, registry):
        """
        Args:
            stream: Readable binary stream positioned at the start of the file
            registry: ChunkRegistry used to look up decoders by tag
        """
        self._stream = stream
        self.registry = registry
        self.position = 0
        self.version: Optional[int] = None

        self.logger = logging.getLogger(self.__class__.__name__)

    def _read(self, size: int, what: str) -> bytes:
        """Read exactly size bytes or raise FormatError"""
        data = self._stream.read(size)
        if len(data) != size:
            raise FormatError(
                f"Unexpected end of file while reading {what}: "
                f"expected {size} bytes, got {len(data)}",
                offset=self.position + len(data)
            )
        self.position += size
        return data

    def read_header(self) -> int:
        """Read magic and version, returns the format version"""
        header = self._read(self.FILE_HEADER_SIZE, "file header")
        magic = header[:4]
        if magic != self.MAGIC:
            raise FormatError(f"Bad magic {magic!r}, expected {self.MAGIC!r}", offset=0)
        self.version = struct.unpack('<H', header[4:6])[0]
        self.logger.debug(f"Map version: {self.version}")
        return self.version

    def _read_chunk_header(self) -> Optional[ChunkInfo]:
        """
        Read the next chunk header

        Returns:
            ChunkInfo, or None at a clean end of file
        """
        offset = self.position
        header = self._stream.read(self.CHUNK_HEADER_SIZE)
        if not header:
            return None
        if len(header) < self.CHUNK_HEADER_SIZE:
            raise FormatError(
                f"Truncated chunk header: {len(header)} of {self.CHUNK_HEADER_SIZE} bytes",
                offset=offset
            )
        self.position += self.CHUNK_HEADER_SIZE

        name = header[:4]
        size = struct.unpack('<I', header[4:8])[0]
        return ChunkInfo(
            name=name,
            offset=offset,
            size=size,
            data_offset=offset + self.CHUNK_HEADER_SIZE
        )

    def _decode_chunk(self, info: ChunkInfo) -> Any:
        decoder = self.registry.get_decoder(info.name)
        if decoder is None:
            self.logger.debug(f"Skipping chunk {info.name!r}...")
            self._read(info.size, f"payload of unknown chunk {info.name!r}")
            return None

        if decoder.self_describing:
            result = decoder.decode_stream(self._read)
            consumed = self.position - info.data_offset
            if consumed != info.size:
                self.logger.warning(
                    f"Chunk {info.name!r} declared {info.size} bytes but its tables "
                    f"describe {consumed}"
                )
            return result

        payload = self._read(info.size, f"payload of chunk {info.name!r}")
        return decoder.decode(payload)

    def iter_chunks(self) -> Generator[Tuple[ChunkInfo, Any], None, None]:
        """
        Walk the file chunk by chunk

        Yields:
            Tuples of (ChunkInfo, decoded result). The result is None for
            skipped chunks.

        Raises:
            FormatError, DecodeError: stamped with the failing chunk's tag and offset
        """
        if self.version is None:
            self.read_header()

        while True:
            info = self._read_chunk_header()
            if info is None:
                return
            self.logger.debug(
                f"Found chunk {info.name.decode('ascii', 'replace')!r} "
                f"with size {info.size} at offset {info.offset}"
            )
            try:
                result = self._decode_chunk(info)
            except MapFileError as e:
                raise e.locate(info.name, info.offset)
            yield info, result
