"""Tests for the Document Model - whole-file decode / encode, snapshots, storage."""

import pytest

from garage.modules.m1_record_codec import BlockSnapshot
from garage.modules.m2_document import (
    Document,
    decode_document,
    dumps,
    encode_document,
    find_blueprint,
    loads,
    normalize_blueprint_name,
    read_blueprint,
    write_blueprint,
)
from garage.shared.errors import InvalidDocument, InvalidHeader, MalformedRecord


class TestDecode:

    def test_decode_two_blocks(self, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(2290), block_line(7, (1, 1, 1))))
        assert len(doc.blocks) == 2
        assert doc.blocks[0].type_id == 2290
        assert doc.blocks[1].position == (1.0, 1.0, 1.0)

    def test_decode_from_text(self, blueprint_lines, block_line):
        text = "\r\n".join(blueprint_lines(block_line(1))) + "\r\n"
        doc = loads(text)
        assert len(doc.blocks) == 1

    def test_only_cr_and_lf_break_lines(self, blueprint_lines, block_line):
        lines = blueprint_lines(block_line(1), header=[
            "My\x85Garage,Bou\u2028werman,abc",
            "0,0,0,0,0,0,0,0",
            "invalid track,0,0,0,0,-1",
        ])
        doc = loads("\n".join(lines[:2]) + "\r" + "\r\n".join(lines[2:]) + "\n")
        assert doc.header.scene_name == "My\x85Garage"
        assert doc.header.player_name == "Bou\u2028werman"
        assert len(doc.blocks) == 1

    def test_too_few_lines(self, header_lines):
        with pytest.raises(InvalidDocument, match="at least 3 lines"):
            decode_document(header_lines[:2])

    def test_empty_text(self):
        with pytest.raises(InvalidDocument):
            decode_document("")

    def test_header_only_has_no_blocks(self, header_lines):
        with pytest.raises(InvalidDocument, match="no blocks"):
            decode_document(header_lines)

    def test_invalid_header_fails_document(self, blueprint_lines, block_line):
        lines = blueprint_lines(block_line(1))
        lines[1] = "0,0"
        with pytest.raises(InvalidHeader):
            decode_document(lines)

    def test_malformed_block_fails_whole_document(self, blueprint_lines, block_line):
        lines = blueprint_lines(block_line(1), "1,2,3", block_line(2))
        with pytest.raises(InvalidDocument, match="Line 5") as info:
            decode_document(lines)
        assert isinstance(info.value.__cause__, MalformedRecord)

    def test_blank_line_is_malformed(self, blueprint_lines, block_line):
        with pytest.raises(InvalidDocument):
            decode_document(blueprint_lines(block_line(1), ""))

    def test_numeric_fallback_keeps_document_valid(self, blueprint_lines, block_line):
        bad = block_line(1).replace("1,0,0,0", "1,zz,0,0", 1)
        doc = decode_document(blueprint_lines(bad))
        assert doc.blocks[0].position == (0.0, 0.0, 0.0)

    def test_strict_document(self, blueprint_lines, block_line):
        bad = block_line(1).replace("1,0,0,0", "1,zz,0,0", 1)
        with pytest.raises(InvalidDocument):
            decode_document(blueprint_lines(bad), strict=True)


class TestEncode:

    def test_round_trip_text(self, blueprint_lines, block_line):
        lines = blueprint_lines(
            block_line(2290, (0.25, 4, -1.5), (0, 45, 0), (0.5, 0.5, 0.5)),
            block_line(17, (10, 0, 3), (90, 180, 0), (1, 2, 3), [1, 60, 0, 5.5]),
        )
        assert encode_document(decode_document(lines)) == lines

    def test_round_trip_values(self, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(3, (0.1, 0.2, 0.3), payload=[9.75])))
        again = decode_document(encode_document(doc))
        assert again.header == doc.header
        assert again.blocks == doc.blocks

    def test_dumps_ends_with_newline(self, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(1)))
        text = dumps(doc)
        assert text.endswith("\n")
        assert text.count("\n") == 4

    def test_empty_document_is_usable(self):
        doc = Document()
        assert doc.blocks == []
        assert doc.header.scene_name == "LevelEditor2"
        assert doc.header.author_time_label == "invalid track"
        assert len(encode_document(doc)) == 3


class TestMutation:

    def test_replace_blocks_from_snapshots(self):
        doc = Document()
        old_uuid = doc.header.uuid
        snapshots = [
            BlockSnapshot(2290, [0.0] * 6 + [1.0] * 3 + [0.0] * 28),
            BlockSnapshot(5, [1.0, 2.0]),
            BlockSnapshot(8, [float(i) for i in range(37)]),
        ]
        skipped = doc.replace_blocks(snapshots)
        assert skipped == 1
        assert [b.type_id for b in doc.blocks] == [2290, 8]
        assert doc.header.uuid != old_uuid
        assert doc.header.uuid.endswith("-2")

    def test_replace_blocks_skips_unusable_objects(self):
        doc = Document()
        doc.replace_blocks([object()])
        assert doc.blocks == []
        assert doc.header.uuid.endswith("-0")

    def test_snapshot_round_trip(self):
        props = [0.5] * 37
        doc = Document()
        doc.replace_blocks([BlockSnapshot(4, props)])
        again = decode_document(encode_document(doc))
        assert again.blocks[0].properties == props

    def test_set_player_name(self, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(1), block_line(2), block_line(3)))
        doc.set_player_name("Alice")
        assert doc.header.player_name == "Alice"
        assert "-Alice-" in doc.header.uuid
        assert doc.header.uuid.endswith("-3")

    def test_set_path(self):
        doc = Document()
        doc.set_path("some/dir/my_garage.zeeplevel")
        assert doc.file_name == "my_garage"
        assert doc.file_path.endswith("my_garage.zeeplevel")


class TestStorage:

    def test_normalize_name(self):
        assert normalize_blueprint_name("garage") == "garage.zeeplevel"
        assert normalize_blueprint_name("garage.zeeplevel") == "garage.zeeplevel"

    def test_write_find_read(self, tmp_path, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(2290), block_line(1)))
        written = write_blueprint(doc, tmp_path / "nested" / "deep" / "garage.zeeplevel")
        assert doc.file_name == "garage"

        found = find_blueprint(tmp_path, "garage")
        assert found == written
        loaded = read_blueprint(found)
        assert loaded.file_name == "garage"
        assert loaded.blocks == doc.blocks

    def test_name_is_not_a_pattern(self, tmp_path, blueprint_lines, block_line):
        doc = decode_document(blueprint_lines(block_line(2290)))
        written = write_blueprint(doc, tmp_path / "sub" / "garage[v2].zeeplevel")
        write_blueprint(doc, tmp_path / "garageX.zeeplevel")
        assert find_blueprint(tmp_path, "garage[v2]") == written
        with pytest.raises(FileNotFoundError):
            find_blueprint(tmp_path, "garage?")
        with pytest.raises(FileNotFoundError):
            find_blueprint(tmp_path, "*")

    def test_missing_blueprint(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_blueprint(tmp_path, "nope")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_blueprint(tmp_path / "absent", "garage")

    def test_unreadable_path(self, tmp_path):
        with pytest.raises(OSError):
            read_blueprint(tmp_path / "absent.zeeplevel")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "broken.zeeplevel"
        path.write_text("only,one,line\n", encoding="utf-8")
        with pytest.raises(InvalidDocument):
            read_blueprint(path)
