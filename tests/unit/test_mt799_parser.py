"""Tests for the MT799 three-tag parser."""

from __future__ import annotations

import pytest

from swiftmt799.core.exceptions import MessageFormatError
from swiftmt799.parsing.mt799 import decode_upload, extract_fields, parse_message

WELL_FORMED = ":20:REF123\n:21:RELREF456\n:79:Hello World\n"


class TestParseMessage:
    def test_extracts_three_fields(self):
        message = parse_message(WELL_FORMED)
        assert message.as_fields() == {
            "Reference": "REF123",
            "RelatedReference": "RELREF456",
            "Narrative": "Hello World",
        }

    def test_values_are_trimmed(self):
        message = parse_message(":20:  REF123 \n:21:\tRELREF456\t\n:79:   Hello World   \n")
        assert message.reference == "REF123"
        assert message.related_reference == "RELREF456"
        assert message.narrative == "Hello World"

    def test_crlf_line_endings(self):
        message = parse_message(":20:REF123\r\n:21:RELREF456\r\n:79:Hello World\r\n")
        assert message.reference == "REF123"
        assert message.narrative == "Hello World"

    def test_tag_order_does_not_matter(self):
        message = parse_message(":79:Narrative first\n:21:R2\n:20:R1")
        assert message.reference == "R1"
        assert message.related_reference == "R2"
        assert message.narrative == "Narrative first"

    def test_last_occurrence_wins(self):
        message = parse_message(":20:FIRST\n:21:RELREF\n:20:SECOND\n:79:text\n:79:final text\n")
        assert message.reference == "SECOND"
        assert message.narrative == "final text"

    def test_other_tags_and_lines_are_ignored(self):
        content = (
            "{1:F01BANKBEBBAXXX0000000000}\n"
            ":20:REF123\n"
            ":21:RELREF456\n"
            ":32A:240101EUR100,00\n"
            ":79:Hello World\n"
            "continuation line\n"
            "-}\n"
        )
        message = parse_message(content)
        assert message.narrative == "Hello World"

    def test_tag_must_start_the_line(self):
        with pytest.raises(MessageFormatError) as exc_info:
            parse_message(" :20:REF123\n:21:RELREF456\n:79:Hello World\n")
        assert exc_info.value.missing == ["Reference"]

    def test_empty_value_counts_as_present(self):
        message = parse_message(":20:\n:21:RELREF456\n:79:Hello World\n")
        assert message.reference == ""

    def test_missing_related_reference_fails(self):
        with pytest.raises(MessageFormatError) as exc_info:
            parse_message(":20:REF123\n:79:Hello World\n")
        assert exc_info.value.missing == ["RelatedReference"]

    def test_empty_content_reports_all_fields_missing(self):
        with pytest.raises(MessageFormatError) as exc_info:
            parse_message("")
        assert exc_info.value.missing == ["Reference", "RelatedReference", "Narrative"]

    def test_bare_cr_is_not_a_line_break(self):
        # The whole input is one line starting with :20:
        with pytest.raises(MessageFormatError) as exc_info:
            parse_message(":20:REF123\r:21:RELREF456\r:79:Hello World\r")
        assert exc_info.value.missing == ["RelatedReference", "Narrative"]

    def test_error_is_a_client_error(self):
        with pytest.raises(MessageFormatError) as exc_info:
            parse_message("nothing here")
        assert exc_info.value.status_code == 400


class TestExtractFields:
    def test_returns_partial_mapping(self):
        assert extract_fields(":20:REF123\n") == {"Reference": "REF123"}

    def test_bare_cr_stays_in_value(self):
        fields = extract_fields(":20:REF123\r:21:RELREF456")
        assert fields == {"Reference": "REF123\r:21:RELREF456"}


class TestDecodeUpload:
    def test_decodes_utf8(self):
        assert decode_upload("Grüße".encode("utf-8")) == "Grüße"

    def test_strips_byte_order_mark(self):
        data = b"\xef\xbb\xbf" + WELL_FORMED.encode()
        assert parse_message(decode_upload(data)).reference == "REF123"

    def test_replaces_invalid_bytes(self):
        assert decode_upload(b"ab\xffcd") == "ab\ufffdcd"

    @pytest.mark.parametrize(
        "bom, encoding",
        [
            (b"\xff\xfe", "utf-16-le"),
            (b"\xfe\xff", "utf-16-be"),
            (b"\xff\xfe\x00\x00", "utf-32-le"),
            (b"\x00\x00\xfe\xff", "utf-32-be"),
        ],
    )
    def test_detects_wide_encodings_from_bom(self, bom, encoding):
        data = bom + WELL_FORMED.encode(encoding)
        assert decode_upload(data) == WELL_FORMED

    def test_no_bom_reads_utf8(self):
        assert decode_upload(WELL_FORMED.encode()) == WELL_FORMED
