"""
Tests for the command line entry point
"""

import json

from gbmp_decoder.main import main

from builders import create_map_file, create_test_chunk, create_dmap_chunk, pack_block, pack_zone


def test_decode_writes_json_summary(tmp_path, map_file):
    output = tmp_path / "out" / "summary.json"
    assert main([str(map_file), '--output', str(output)]) == 0

    summary = json.loads(output.read_text(encoding='utf-8'))
    assert summary['version'] == 500
    assert summary['dimensions'] == {'width': 256, 'length': 256, 'height': 8}
    assert summary['occupied_cells'] == 2
    assert summary['zones'] == []


def test_zone_summary(tmp_path):
    path = tmp_path / "zones.gmp"
    path.write_bytes(create_map_file(create_test_chunk(b'ZONE', pack_zone(1, 2, 3, 4, 5, "Hospital"))))
    output = tmp_path / "zones.json"

    assert main([str(path), '-o', str(output)]) == 0
    zone = json.loads(output.read_text(encoding='utf-8'))['zones'][0]
    assert zone == {
        'type': 1,
        'kind': 'NAVIGATION',
        'rect': {'x': 2, 'y': 3, 'width': 4, 'height': 5},
        'name': 'Hospital'
    }


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.gmp")]) == 1


def test_corrupt_file_fails(tmp_path):
    path = tmp_path / "bad.gmp"
    path.write_bytes(create_map_file(create_dmap_chunk({(0, 1): (2, 5, [])}, [pack_block()])))
    assert main([str(path)]) == 1


def test_list_chunks(map_file):
    assert main([str(map_file), '--list-chunks']) == 0


def test_log_dir(tmp_path, map_file):
    log_dir = tmp_path / "logs"
    assert main([str(map_file), '--log-dir', str(log_dir), '-v']) == 0
    assert len(list(log_dir.glob('gbmp_decoder_*.log'))) == 1
