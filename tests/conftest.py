import logging

import pytest

from builders import create_dmap_chunk, create_map_file, create_test_chunk, pack_block


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put them back after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def minimal_map_bytes():
    """One two-block column at (3, 5), empty ZONE/ANIM/LGHT chunks"""
    blocks = [
        pack_block(left=1, right=2, top=3, bottom=4, lid=5, arrows=0x01, slope_type=0x04),
        pack_block(left=6, right=7, top=8, bottom=9, lid=10, arrows=0x02, slope_type=0x00),
    ]
    return create_map_file(
        create_dmap_chunk({(3, 5): (2, 0, [0, 1])}, blocks),
        create_test_chunk(b'ZONE', b''),
        create_test_chunk(b'ANIM', b''),
        create_test_chunk(b'LGHT', b''),
    )


@pytest.fixture
def map_file(tmp_path, minimal_map_bytes):
    path = tmp_path / "test.gmp"
    path.write_bytes(minimal_map_bytes)
    return path
