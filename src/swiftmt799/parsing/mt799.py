"""MT799 free-format message parser.

Recognises exactly three tags, each a four-character line prefix:

    :20:  Transaction reference  -> Reference
    :21:  Related reference      -> RelatedReference
    :79:  Narrative              -> Narrative

Every other line is ignored. There is no block structure, no multi-line
field continuation and no content validation. Lines are separated by LF or
CRLF; a bare CR does not end a line.
"""

from __future__ import annotations

import codecs
import logging
import re

from swiftmt799.core.exceptions import MessageFormatError
from swiftmt799.core.types import FieldMap, FieldName, Tag
from swiftmt799.models.message import ParsedMessage

logger = logging.getLogger(__name__)

TAG_FIELDS: dict[Tag, FieldName] = {
    ":20:": "Reference",
    ":21:": "RelatedReference",
    ":79:": "Narrative",
}
REQUIRED_FIELDS: tuple[FieldName, ...] = tuple(TAG_FIELDS.values())
TAG_LENGTH = 4

_LINE_BREAK = re.compile(r"\r?\n")
_BOM_ENCODINGS = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
    (codecs.BOM_UTF8, "utf-8"),
)


def decode_upload(data: bytes) -> str:
    """Decode uploaded bytes, honouring a leading byte-order mark.

    UTF-32 and UTF-16 BOMs are checked before UTF-8 since the UTF-32 LE mark
    starts with the UTF-16 LE one. Without a BOM the data is read as UTF-8.
    Undecodable bytes become U+FFFD rather than failing the upload.
    """
    for bom, encoding in _BOM_ENCODINGS:
        if data.startswith(bom):
            return data[len(bom):].decode(encoding, errors="replace")
    return data.decode("utf-8", errors="replace")


def extract_fields(content: str) -> FieldMap:
    """Scan ``content`` line by line and collect the recognised tag values.

    The result may be partial. A repeated tag overwrites the earlier value.
    """
    fields: FieldMap = {}
    for line in _LINE_BREAK.split(content):
        field = TAG_FIELDS.get(line[:TAG_LENGTH])
        if field is not None:
            fields[field] = line[TAG_LENGTH:].strip()
    return fields


def parse_message(content: str) -> ParsedMessage:
    """Parse an MT799 message into its three fields.

    Raises:
        MessageFormatError: if any of ``:20:``, ``:21:`` or ``:79:`` is absent.
    """
    logger.info("Parsing Swift MT799 message.")
    fields = extract_fields(content)

    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        logger.warning("Missing required fields in the Swift message: %s", ", ".join(missing))
        raise MessageFormatError(missing)

    for name, value in fields.items():
        logger.debug("Field %s: %s", name, value)

    logger.info("Parsing completed.")
    return ParsedMessage.model_validate(fields)
