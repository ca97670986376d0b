# Path: craft_notes/tests/unit/test_scanner.py
"""
Unit Tests for CraftScanner

Tests design record table building including:
- Empty and missing directories
- Key derivation
- Duplicate handling (first seen wins)
- Autosave exclusion
- Skipping unreadable / incomplete files
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from craft_notes.constants import SkipReason
from craft_notes.loaders.craft_data import CraftDataLoader
from craft_notes.process.scanner import CraftScanner, scan
from craft_notes.tests.fixtures.sample_crafts import (
    MALFORMED_CRAFT_TEXT,
    NO_PART_CRAFT_TEXT,
)


class TestScanEmpty:
    """Test scans that find nothing."""

    def test_empty_directory(self, temp_dir):
        """A directory with no craft files should give an empty table."""
        assert CraftScanner().scan([temp_dir]) == {}

    def test_missing_directory(self, temp_dir):
        assert CraftScanner().scan([temp_dir / 'missing']) == {}

    def test_no_directories(self):
        assert CraftScanner().scan([]) == {}

    def test_only_other_files(self, temp_dir):
        (temp_dir / 'readme.txt').write_text('not a craft')

        assert CraftScanner().scan([temp_dir]) == {}


class TestScanKeys:
    """Test keys in the resulting table."""

    @pytest.mark.parametrize('part_id, expected', [
        ('7_42', '42'),
        ('1_2_99', '99'),
        ('12345', '12345'),
    ])
    def test_key_is_suffix(self, temp_dir, make_craft, part_id, expected):
        make_craft(temp_dir, 'ship.craft', part_id=part_id, description='d')

        assert CraftScanner().scan([temp_dir]) == {expected: 'd'}

    def test_multiple_crafts(self, temp_dir, make_craft):
        make_craft(temp_dir, 'a.craft', part_id='pod_1', description='one')
        make_craft(temp_dir, 'b.craft', part_id='pod_2', description='')

        assert CraftScanner().scan([temp_dir]) == {'1': 'one', '2': ''}

    def test_scans_every_directory(self, ksp_tree, make_craft):
        make_craft(ksp_tree['vab'], 'rocket.craft', part_id='pod_1', description='r')
        make_craft(ksp_tree['sph'], 'plane.craft', part_id='cockpit_2', description='p')

        table = CraftScanner().scan([ksp_tree['vab'], ksp_tree['sph']])

        assert table == {'1': 'r', '2': 'p'}


class TestScanDuplicates:
    """Test first-seen-wins duplicate handling."""

    def test_first_file_wins(self, temp_dir, make_craft):
        """A later file with the same key should not overwrite."""
        make_craft(temp_dir, 'a.craft', part_id='pod_7', description='foo')
        make_craft(temp_dir, 'b.craft', part_id='other_7', description='bar')

        scanner = CraftScanner()
        table = scanner.scan([temp_dir])

        assert table == {'7': 'foo'}
        assert [s.reason for s in scanner.skipped] == [SkipReason.DUPLICATE_KEY]
        assert scanner.skipped[0].path.name == 'b.craft'

    def test_first_directory_wins(self, ksp_tree, make_craft):
        make_craft(ksp_tree['vab'], 'z.craft', part_id='pod_7', description='vab')
        make_craft(ksp_tree['sph'], 'a.craft', part_id='pod_7', description='sph')

        table = CraftScanner().scan([ksp_tree['vab'], ksp_tree['sph']])

        assert table == {'7': 'vab'}


class TestScanSkips:
    """Test files that are skipped without aborting the scan."""

    def test_autosave_excluded(self, temp_dir, make_craft):
        """The autosave file should be ignored even when well-formed."""
        make_craft(temp_dir, 'Auto-Saved Ship.craft', part_id='pod_5', description='auto')

        scanner = CraftScanner()

        assert scanner.scan([temp_dir]) == {}
        assert scanner.skipped[0].reason == SkipReason.AUTOSAVE

    def test_autosave_name_from_config(self, temp_dir, make_craft):
        make_craft(temp_dir, 'Scratch.craft', part_id='pod_5')
        make_craft(temp_dir, 'Auto-Saved Ship.craft', part_id='pod_6', description='kept')
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: {
            'autosave_file': 'Scratch.craft',
        }.get(key, default)

        assert CraftScanner(config).scan([temp_dir]) == {'6': 'kept'}

    def test_malformed_file_skipped(self, temp_dir, make_craft):
        make_craft(temp_dir, 'a_broken.craft', text=MALFORMED_CRAFT_TEXT)
        make_craft(temp_dir, 'b_good.craft', part_id='pod_1', description='ok')

        scanner = CraftScanner()

        assert scanner.scan([temp_dir]) == {'1': 'ok'}
        assert scanner.skipped[0].reason == SkipReason.MALFORMED

    def test_no_part_skipped(self, temp_dir, make_craft):
        make_craft(temp_dir, 'empty.craft', text=NO_PART_CRAFT_TEXT)

        scanner = CraftScanner()

        assert scanner.scan([temp_dir]) == {}
        assert scanner.skipped[0].reason == SkipReason.NO_ROOT_PART

    def test_no_identifier_skipped(self, temp_dir, make_craft):
        make_craft(temp_dir, 'noid.craft', part_id=None)

        scanner = CraftScanner()

        assert scanner.scan([temp_dir]) == {}
        assert scanner.skipped[0].reason == SkipReason.NO_CRAFT_ID

    def test_binary_garbage_does_not_abort(self, temp_dir, make_craft):
        (temp_dir / 'a.craft').write_bytes(b'\x00\xff}\x10\x80garbage')
        make_craft(temp_dir, 'b.craft', part_id='pod_3', description='fine')

        assert CraftScanner().scan([temp_dir]) == {'3': 'fine'}

    def test_reader_errors_never_escape(self, temp_dir, make_craft):
        """Every kind of bad file at once still gives a table."""
        make_craft(temp_dir, 'Auto-Saved Ship.craft')
        make_craft(temp_dir, 'broken.craft', text=MALFORMED_CRAFT_TEXT)
        make_craft(temp_dir, 'empty.craft', text=NO_PART_CRAFT_TEXT)
        make_craft(temp_dir, 'noid.craft', part_id='')

        scanner = CraftScanner()

        assert scanner.scan([temp_dir]) == {}
        assert len(scanner.skipped) == 4


class TestScanDiagnostics:
    """Test per-scan diagnostics."""

    def test_records_kept(self, temp_dir, make_craft):
        path = make_craft(temp_dir, 'ship.craft', part_id='pod_9', description='d')

        scanner = CraftScanner()
        scanner.scan([temp_dir])

        assert len(scanner.records) == 1
        assert scanner.records[0].source_path == path

    def test_diagnostics_reset_each_scan(self, temp_dir, make_craft):
        make_craft(temp_dir, 'Auto-Saved Ship.craft')
        scanner = CraftScanner()
        scanner.scan([temp_dir])

        scanner.scan([])

        assert scanner.skipped == []
        assert scanner.records == []

    def test_each_scan_starts_fresh(self, temp_dir, make_craft):
        """A craft deleted between scans should disappear from the table."""
        path = make_craft(temp_dir, 'ship.craft', part_id='pod_9')
        scanner = CraftScanner()
        assert '9' in scanner.scan([temp_dir])

        path.unlink()

        assert scanner.scan([temp_dir]) == {}


def test_module_level_scan(temp_dir, make_craft):
    make_craft(temp_dir, 'ship.craft', part_id='pod_11', description='x')

    assert scan([temp_dir]) == {'11': 'x'}


class TestScanDiscovery:
    """Test how the scanner asks the loader for files."""

    def test_uses_discover_all_in_directory_order(self, ksp_tree, make_craft):
        make_craft(ksp_tree['vab'], 'a.craft', part_id='pod_1')
        loader = CraftDataLoader()
        loader.discover_all = MagicMock(wraps=loader.discover_all)
        loader.discover_craft_files = MagicMock(wraps=loader.discover_craft_files)

        table = CraftScanner(loader=loader).scan([ksp_tree['vab'], str(ksp_tree['sph'])])

        assert table == {'1': 'Test craft'}
        loader.discover_all.assert_called_once()
        directories = [c.args[0] for c in loader.discover_craft_files.call_args_list]
        assert directories == [ksp_tree['vab'], ksp_tree['sph']]

    def test_listing_error_does_not_abort(self, temp_dir, make_craft):
        """A directory that cannot be searched gives an empty table."""
        make_craft(temp_dir, 'ship.craft', part_id='pod_1')

        with patch.object(Path, 'is_file', side_effect=PermissionError('denied')):
            table = CraftScanner().scan([temp_dir])

        assert table == {}
