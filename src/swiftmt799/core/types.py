"""Type aliases used across the SwiftMT799 service."""

from __future__ import annotations

FieldName = str
FieldMap = dict[FieldName, str]
Tag = str
