"""Tests for room status shaping."""

from datetime import datetime

from entrycard.cards.room_card import (
    build_room_lines,
    detail_lines,
    flatten_detail,
    format_updated_at,
    room_info_display,
    safe_parse_json,
)


class TestRoomInfo:
    """Test suite for room info display."""

    def test_available_code(self):
        assert room_info_display(999) == "여유"
        assert room_info_display("999") == "여유"

    def test_missing(self):
        assert room_info_display(None) == "N/A"

    def test_passthrough(self):
        assert room_info_display(3) == "3"
        assert room_info_display("만실") == "만실"


class TestSafeParseJson:
    """Test suite for lenient detail parsing."""

    def test_strict_json(self):
        assert safe_parse_json('{"a": {"b": true}}').obj == {"a": {"b": True}}

    def test_repaired_json(self):
        """Test bare keys, single quotes and newlines are repaired."""
        parsed = safe_parse_json("{name: 'A',\nrooms: [1, 2]}")

        assert parsed.obj == {"name": "A", "rooms": [1, 2]}

    def test_decoded_object_passthrough(self):
        value = {"a": 1}

        assert safe_parse_json(value).obj is value

    def test_bytes(self):
        assert safe_parse_json(b'{"a": 1}').obj == {"a": 1}

    def test_unparseable_keeps_text(self):
        parsed = safe_parse_json("not json at all")

        assert parsed.obj is None
        assert parsed.text == "not json at all"

    def test_none(self):
        parsed = safe_parse_json(None)

        assert parsed.obj is None
        assert parsed.text is None


class TestFlattenDetail:
    """Test suite for flattening detail objects."""

    def test_nested(self):
        value = {"a": {"b": True, "c": None}, "rooms": [{"name": "A"}, 2]}

        assert flatten_detail(value) == ["a.b: true", "a.c: ", "rooms.0.name: A", "rooms.1: 2"]

    def test_integral_floats_drop_fraction(self):
        """Test that JSON numbers like 1.0 print as 1, other floats unchanged."""
        assert flatten_detail({"vip": 1.0, "rate": 1.5}) == ["vip: 1", "rate: 1.5"]
        assert detail_lines('{"rooms": [2.0]}') == ["rooms.0: 2"]

    def test_detail_lines_from_raw_text(self):
        """Test that unparseable text is stripped of braces and quotes and split."""
        assert detail_lines('foo: {bar}\n"baz"') == ["foo: bar", "baz"]

    def test_detail_lines_empty(self):
        assert detail_lines(None) == []


class TestBuildRoomLines:
    """Test suite for build_room_lines."""

    def test_lines(self):
        lines = build_room_lines(
            "강남점",
            room_info=999,
            wait_info="2팀",
            room_detail='{"vip": 1}',
            updated_at=datetime(2024, 5, 1, 21, 30),
        )

        assert [line.text for line in lines] == [
            "강남점 룸현황",
            "룸 정보: 여유",
            "웨이팅 정보: 2팀",
            "상세 정보",
            "vip: 1",
            "업데이트: 2024-05-01 21:30",
        ]

    def test_missing_values(self):
        lines = build_room_lines("강남점")

        assert [line.text for line in lines] == [
            "강남점 룸현황",
            "룸 정보: N/A",
            "웨이팅 정보: N/A",
            "상세 정보",
            "상세 정보 없음",
            "업데이트: N/A",
        ]

    def test_format_updated_at_string(self):
        assert format_updated_at("방금") == "방금"
