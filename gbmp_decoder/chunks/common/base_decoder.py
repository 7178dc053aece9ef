"""
Base classes for chunk decoders
"""

from typing import Any, List, Tuple

from construct import Construct, Container, StreamError

from ...base.chunk_parser import FormatError, ReadFn


class ChunkDecoder:
    """Base class for all chunk decoders"""

    # Self-describing chunks are read straight from the file; their declared
    # size is informational. All others get exactly `size` payload bytes.
    self_describing = False

    def __init__(self, name: bytes):
        self.name = name

    def decode(self, data: bytes) -> Any:
        """
        Decode chunk data

        Args:
            data: Raw chunk payload (without chunk header)

        Returns:
            Decoded chunk contents
        """
        raise NotImplementedError("Chunk decoders must implement decode method")

    def decode_stream(self, read: ReadFn) -> Any:
        """
        Decode a self-describing chunk

        Args:
            read: Callable returning exactly n bytes from the file, or raising FormatError
        """
        raise NotImplementedError("Self-describing chunk decoders must implement decode_stream method")

    @staticmethod
    def read_fixed_string(data: bytes, size: int, offset: int = 0) -> str:
        """Read an ASCII string of a known length, trimming null termination"""
        return data[offset:offset+size].split(b'\0', 1)[0].decode('ascii', 'replace')


class RecordChunkDecoder(ChunkDecoder):
    """
    Decoder for chunks made of back-to-back records.

    Records are parsed one at a time until the payload is used up exactly.
    A record that would run past the end of the payload is a FormatError.
    """

    record_struct: Construct = None

    def decode(self, data: bytes) -> List[Any]:
        records = []
        pos = 0
        while pos < len(data):
            record, size = self.read_record(data, pos)
            records.append(record)
            pos += size
        return records

    def read_record(self, data: bytes, pos: int) -> Tuple[Any, int]:
        """
        Parse the record starting at pos

        Returns:
            Tuple of (record, bytes consumed)
        """
        try:
            parsed = self.record_struct.parse(data[pos:])
        except StreamError as e:
            raise FormatError(
                f"{self.name.decode('ascii')} record at payload byte {pos} overruns "
                f"the declared chunk size of {len(data)} bytes"
            ) from e
        return self.build_record(parsed), self.record_size(parsed)

    def record_size(self, parsed: Container) -> int:
        """Size in bytes of a parsed record. Fixed-size records use the struct size."""
        return self.record_struct.sizeof()

    def build_record(self, parsed: Container) -> Any:
        raise NotImplementedError("Record decoders must implement build_record method")
