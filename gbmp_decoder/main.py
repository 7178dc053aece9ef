#!/usr/bin/env python3
"""
GBMP map decoder
Decodes a city map file and reports what it contains
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from .base.chunk_parser import MapFileError
from .map_parser import load_map, list_chunks
from .output.json_handler import JSONOutputHandler
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def process_file(file_path: Path, output_path: Optional[Path] = None) -> bool:
    """
    Decode a single map file

    Args:
        file_path: Path to the map file
        output_path: Where to write the JSON summary, if anywhere

    Returns:
        bool: Whether decoding was successful
    """
    logger.info(f"Processing {file_path}")
    try:
        world = load_map(file_path)
    except MapFileError as e:
        logger.error(f"Failed to decode {file_path}: {e}")
        return False

    logger.info(f"Grid: {world.width}x{world.length}x{world.height}")
    logger.info(f"Zones: {len(world.zones)}")
    logger.info(f"Animations: {len(world.animations)}")
    logger.info(f"Lights: {len(world.lights)}")
    logger.info(f"Objects: {len(world.objects)}")

    if output_path is not None:
        JSONOutputHandler().write(world, output_path)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Decode a GBMP city map file'
    )
    parser.add_argument('file',
                        help='Map file to decode')
    parser.add_argument('--output', '-o',
                        help='Write a JSON summary to this path')
    parser.add_argument('--list-chunks',
                        action='store_true',
                        help='Only list the chunks in the file')
    parser.add_argument('--log-dir',
                        help='Also write a log file to this directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    file_path = Path(args.file)
    if not file_path.is_file():
        logger.error(f"File not found: {file_path}")
        return 1

    if args.list_chunks:
        try:
            chunks = list_chunks(file_path)
        except MapFileError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            return 1
        for info in chunks:
            logger.info(f"{info.name.decode('ascii', 'replace')} offset={info.offset} size={info.size}")
        return 0

    output_path = Path(args.output) if args.output else None
    return 0 if process_file(file_path, output_path) else 1


if __name__ == '__main__':
    sys.exit(main())
