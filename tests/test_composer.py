"""Tests for interleaved composition across files."""

import pytest

from hexen.core.composer import compose, compose_window, line_for_offset, shared_line_count
from hexen.core.models import Absent, FileBuffer


class TestCompose:
    def test_two_file_scenario(self, file_a, file_b):
        lines = list(compose([file_a, file_b], 16))
        assert len(lines) == 1
        line = lines[0]
        assert line.offset == 0
        ref, other = line.entries
        assert ref.row.cells == (0x41, 0x42, 0x43) + (Absent,) * 13
        assert ref.mask is None
        assert other.row.cells == (0x41, 0x00, 0x43, 0x44) + (Absent,) * 12
        assert other.mask == (False, True, False, True) + (False,) * 12

    def test_empty_collection(self):
        assert list(compose([], 16)) == []

    def test_all_files_empty(self, empty_file, make_buffer):
        assert list(compose([empty_file, make_buffer("e2", b"")], 16)) == []

    def test_empty_file_padded_against_reference(self, full_line_file, empty_file):
        (line,) = compose([full_line_file, empty_file], 16)
        other = line.entries[1]
        assert other.row.cells == (Absent,) * 16
        assert other.mask == (True,) * 16

    def test_empty_reference(self, empty_file, full_line_file):
        (line,) = compose([empty_file, full_line_file], 16)
        assert line.entries[0].row.cells == (Absent,) * 16
        assert line.entries[1].mask == (True,) * 16

    def test_single_file_has_no_mask(self, file_a):
        (line,) = compose([file_a], 16)
        assert len(line) == 1
        assert line.entries[0].mask is None

    def test_line_count_follows_longest_file(self, file_a, make_buffer):
        long = make_buffer("long", bytes(40))
        lines = list(compose([file_a, long], 16))
        assert len(lines) == 3
        assert [l.offset for l in lines] == [0, 16, 32]
        assert [l.index for l in lines] == [0, 1, 2]
        # file_a is exhausted after line 0
        assert lines[2].entries[0].row.cells == (Absent,) * 16
        assert lines[2].entries[1].mask == (True,) * 8 + (False,) * 8

    def test_entries_in_file_order(self, file_a, file_b, full_line_file):
        files = [file_b, full_line_file, file_a]
        for line in compose(files, 4):
            assert [e.file for e in line.entries] == files
            assert [e.file_index for e in line.entries] == [0, 1, 2]
            assert line.entries[0].is_reference

    @pytest.mark.parametrize("width", [1, 5, 16])
    def test_shape_invariants(self, width, file_a, file_b, empty_file, full_line_file):
        files = [file_a, file_b, empty_file, full_line_file]
        lines = list(compose(files, width))
        assert len(lines) == -(-16 // width)
        for line in lines:
            assert len(line.entries) == len(files)
            for entry in line.entries:
                assert len(entry.row) == width
                if entry.file_index == 0:
                    assert entry.mask is None
                else:
                    assert len(entry.mask) == width

    def test_invalid_width_raises_immediately(self, file_a):
        with pytest.raises(ValueError):
            compose([file_a], 0)

    def test_recomputation_is_stateless(self, file_a, file_b):
        assert list(compose([file_a, file_b], 16)) == list(compose([file_a, file_b], 16))

    def test_equal_length_files_differ_on_second_line(self, make_buffer):
        a = make_buffer("a", bytes(32))
        b = make_buffer("b", bytes(31) + b"\x01")
        lines = list(compose([a, b], 16))
        assert lines[0].entries[1].mask == (False,) * 16
        assert lines[1].entries[1].mask == (False,) * 15 + (True,)


class TestComposeWindow:
    def test_window_matches_full_composition(self, make_buffer):
        files = [make_buffer("a", bytes(100)), make_buffer("b", bytes(range(60)))]
        full = list(compose(files, 8))
        assert list(compose_window(files, 8, 3, 4)) == full[3:7]

    def test_window_to_end(self, make_buffer):
        files = [make_buffer("a", bytes(40))]
        assert [l.index for l in compose_window(files, 16, 1)] == [1, 2]

    def test_window_past_end_is_empty(self, file_a):
        assert list(compose_window([file_a], 16, 10, 5)) == []

    def test_zero_lines(self, file_a):
        assert list(compose_window([file_a], 16, 0, 0)) == []

    def test_negative_start_raises(self, file_a):
        with pytest.raises(ValueError):
            compose_window([file_a], 16, -1)


class TestHelpers:
    def test_shared_line_count(self, file_a, full_line_file):
        assert shared_line_count([], 16) == 0
        assert shared_line_count([file_a, full_line_file], 2) == 8

    def test_line_for_offset(self):
        assert line_for_offset(0, 16) == 0
        assert line_for_offset(15, 16) == 0
        assert line_for_offset(16, 16) == 1

    def test_line_for_negative_offset(self):
        with pytest.raises(ValueError):
            line_for_offset(-1, 16)


class TestBufferImmutability:
    def test_mutating_source_bytearray_does_not_change_output(self):
        source = bytearray(b"\x01\x02")
        buf = FileBuffer("id", "mutable.bin", source)
        before = list(compose([buf], 2))
        source[0] = 9
        after = list(compose([buf], 2))
        assert before[0].entries[0].row.cells == (1, 2)
        assert after == before

    def test_data_is_stored_as_bytes(self):
        buf = FileBuffer("id", "view.bin", memoryview(b"\x07"))
        assert type(buf.data) is bytes
        assert buf.data == b"\x07"
