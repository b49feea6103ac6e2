"""Strict pydantic adapters used to decode raw JSON values."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictBool, StrictInt, StrictStr, TypeAdapter

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]
UInt64 = Annotated[StrictInt, Field(ge=0, le=UINT64_MAX)]

STRING: TypeAdapter[str] = TypeAdapter(StrictStr)
INT: TypeAdapter[int] = TypeAdapter(Int64)
UINT: TypeAdapter[int] = TypeAdapter(UInt64)
BOOL: TypeAdapter[bool] = TypeAdapter(StrictBool)
STRING_LIST: TypeAdapter[list[str]] = TypeAdapter(list[StrictStr])

__all__ = [
    "BOOL",
    "INT",
    "INT64_MAX",
    "INT64_MIN",
    "STRING",
    "STRING_LIST",
    "UINT",
    "UINT64_MAX",
    "Int64",
    "UInt64",
]
