# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage, (C)
# [2014] - [2025] MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Request/response of SelectObjectContent API."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from binascii import crc32
from dataclasses import dataclass
from io import BytesIO
from typing import BinaryIO, Iterator, Optional, Type, TypeVar, Union, cast
from xml.etree import ElementTree as ET

from urllib3.response import BaseHTTPResponse

from .enums import CompressionType, FileHeaderInfo, JsonType, QuoteFields
from .error import EventStreamError, S3MessageException
from .helpers import check_non_empty_string
from .xml import Element, SubElement, findint, unmarshal

_LOG = logging.getLogger(__name__)

EnumT = TypeVar(
    "EnumT", CompressionType, FileHeaderInfo, JsonType, QuoteFields,
)


def _toenum(
        value: Union[str, EnumT, None],
        enum_class: Type[EnumT],
) -> Optional[EnumT]:
    """Convert value to member of given enum."""
    return None if value is None else enum_class.fromstring(str(value))


def _tobool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class InputSerialization(ABC):
    """Input serialization."""

    compression_type: Optional[CompressionType] = None

    def __post_init__(self):
        object.__setattr__(
            self,
            "compression_type",
            _toenum(self.compression_type, CompressionType),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.compression_type is not None:
            SubElement(element, "CompressionType", str(self.compression_type))
        return element


@dataclass(frozen=True)
class CSVInputSerialization(InputSerialization):
    """CSV input serialization."""

    allow_quoted_record_delimiter: Optional[bool] = None
    comments: Optional[str] = None
    field_delimiter: Optional[str] = None
    file_header_info: Optional[FileHeaderInfo] = None
    quote_character: Optional[str] = None
    quote_escape_character: Optional[str] = None
    record_delimiter: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(
            self,
            "file_header_info",
            _toenum(self.file_header_info, FileHeaderInfo),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = SubElement(super().toxml(element), "CSV")
        if self.allow_quoted_record_delimiter is not None:
            SubElement(
                element,
                "AllowQuotedRecordDelimiter",
                _tobool(self.allow_quoted_record_delimiter),
            )
        if self.comments is not None:
            SubElement(element, "Comments", self.comments)
        if self.field_delimiter is not None:
            SubElement(element, "FieldDelimiter", self.field_delimiter)
        if self.file_header_info is not None:
            SubElement(element, "FileHeaderInfo", str(self.file_header_info))
        if self.quote_character is not None:
            SubElement(element, "QuoteCharacter", self.quote_character)
        if self.quote_escape_character is not None:
            SubElement(
                element,
                "QuoteEscapeCharacter",
                self.quote_escape_character,
            )
        if self.record_delimiter is not None:
            SubElement(element, "RecordDelimiter", self.record_delimiter)
        return element


@dataclass(frozen=True)
class JSONInputSerialization(InputSerialization):
    """JSON input serialization."""

    json_type: Optional[JsonType] = None

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(
            self, "json_type", _toenum(self.json_type, JsonType),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = SubElement(super().toxml(element), "JSON")
        if self.json_type is not None:
            SubElement(element, "Type", str(self.json_type))
        return element


@dataclass(frozen=True)
class ParquetInputSerialization(InputSerialization):
    """Parquet input serialization."""

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        return SubElement(super().toxml(element), "Parquet")


@dataclass(frozen=True)
class OutputSerialization(ABC):
    """Output serialization."""

    @abstractmethod
    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""


@dataclass(frozen=True)
class CSVOutputSerialization(OutputSerialization):
    """CSV output serialization."""

    field_delimiter: Optional[str] = None
    quote_character: Optional[str] = None
    quote_escape_character: Optional[str] = None
    quote_fields: Optional[QuoteFields] = None
    record_delimiter: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "quote_fields", _toenum(self.quote_fields, QuoteFields),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "CSV")
        if self.field_delimiter is not None:
            SubElement(element, "FieldDelimiter", self.field_delimiter)
        if self.quote_character is not None:
            SubElement(element, "QuoteCharacter", self.quote_character)
        if self.quote_escape_character is not None:
            SubElement(
                element,
                "QuoteEscapeCharacter",
                self.quote_escape_character,
            )
        if self.quote_fields is not None:
            SubElement(element, "QuoteFields", str(self.quote_fields))
        if self.record_delimiter is not None:
            SubElement(element, "RecordDelimiter", self.record_delimiter)
        return element


@dataclass(frozen=True)
class JSONOutputSerialization(OutputSerialization):
    """JSON output serialization."""

    record_delimiter: Optional[str] = None

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "JSON")
        if self.record_delimiter is not None:
            SubElement(element, "RecordDelimiter", self.record_delimiter)
        return element


@dataclass(frozen=True)
class SelectObjectContentRequest:
    """Select object content request."""

    expression: str
    input_serialization: InputSerialization
    output_serialization: OutputSerialization
    request_progress: bool = False
    scan_start_range: Optional[int] = None
    scan_end_range: Optional[int] = None

    def __post_init__(self):
        check_non_empty_string(self.expression, "expression")
        if self.scan_start_range is not None and self.scan_start_range < 0:
            raise ValueError("scan start range must not be negative")
        if self.scan_end_range is not None and self.scan_end_range < 0:
            raise ValueError("scan end range must not be negative")
        if (
                self.scan_start_range is not None and
                self.scan_end_range is not None and
                self.scan_end_range < self.scan_start_range
        ):
            raise ValueError(
                "scan end range must not be less than scan start range",
            )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("SelectObjectContentRequest")
        SubElement(element, "Expression", self.expression)
        SubElement(element, "ExpressionType", "SQL")
        self.input_serialization.toxml(
            SubElement(element, "InputSerialization"),
        )
        self.output_serialization.toxml(
            SubElement(element, "OutputSerialization"),
        )
        if self.request_progress:
            SubElement(
                SubElement(element, "RequestProgress"), "Enabled", "true",
            )
        if (
                self.scan_start_range is not None or
                self.scan_end_range is not None
        ):
            tag = SubElement(element, "ScanRange")
            if self.scan_start_range is not None:
                SubElement(tag, "Start", str(self.scan_start_range))
            if self.scan_end_range is not None:
                SubElement(tag, "End", str(self.scan_end_range))
        return element


@dataclass(frozen=True)
class Stats:
    """Progress/Stats information."""

    bytes_scanned: Optional[int] = None
    bytes_processed: Optional[int] = None
    bytes_returned: Optional[int] = None

    @classmethod
    def fromxml(cls: Type[Stats], element: ET.Element) -> Stats:
        """Create new object with values from XML element."""
        return cls(
            bytes_scanned=findint(element, "BytesScanned"),
            bytes_processed=findint(element, "BytesProcessed"),
            bytes_returned=findint(element, "BytesReturned"),
        )


Progress = Stats


def _read(reader: Union[BaseHTTPResponse, BinaryIO], size: int) -> bytes:
    """Wrapper to read() to error out on short reads."""
    data = reader.read(size)
    if len(data) != size:
        raise IOError("insufficient data")
    return data


def _int(data: bytes) -> int:
    """Convert byte data to big-endian int."""
    return int.from_bytes(data, byteorder="big")


def _crc32(data: bytes) -> int:
    """Wrapper to binascii.crc32()."""
    return crc32(data) & 0xffffffff


def _decode_header(data: bytes) -> dict[str, str]:
    """Decode header data."""
    reader = BytesIO(data)
    headers = {}
    while True:
        length = reader.read(1)
        if not length:
            break
        name = _read(reader, _int(length))
        if _int(_read(reader, 1)) != 7:
            raise IOError("header value type is not 7")
        value = _read(reader, _int(_read(reader, 2)))
        headers[name.decode()] = value.decode()
    return headers


class SelectObjectReader:
    """
    BufferedIOBase compatible reader of an AWS event stream carried by
    SelectObjectContent API response.
    """

    def __init__(self, response: BaseHTTPResponse):
        self._response = response
        self._stats: Optional[Stats] = None
        self._progress: Optional[Progress] = None
        self._payload: Optional[bytes] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        return self.close()

    def readable(self):  # pylint: disable=no-self-use
        """Return this is readable."""
        return True

    def writeable(self):  # pylint: disable=no-self-use
        """Return this is not writeable."""
        return False

    def close(self):
        """Close response and release network resources."""
        self._response.close()
        self._response.release_conn()

    def stats(self) -> Optional[Stats]:
        """Get stats information."""
        return self._stats

    def progress(self) -> Optional[Progress]:
        """Get progress information."""
        return self._progress

    def _read(self) -> int:
        """Read and decode one message of the event stream."""
        while True:
            if self._response.closed:
                return 0

            prelude = _read(self._response, 8)
            prelude_crc = _read(self._response, 4)
            if _crc32(prelude) != _int(prelude_crc):
                raise IOError(
                    f"prelude CRC mismatch; expected: {_crc32(prelude)}, "
                    f"got: {_int(prelude_crc)}"
                )

            total_length = _int(prelude[:4])
            data = _read(self._response, total_length - 8 - 4 - 4)
            message_crc = _int(_read(self._response, 4))
            if _crc32(prelude + prelude_crc + data) != message_crc:
                raise IOError(
                    f"message CRC mismatch; "
                    f"expected: {_crc32(prelude + prelude_crc + data)}, "
                    f"got: {message_crc}"
                )

            header_length = _int(prelude[4:])
            headers = _decode_header(data[:header_length])
            event_type = headers.get(":event-type")
            _LOG.debug(
                "event stream message: type=%s, event=%s, length=%d",
                headers.get(":message-type"), event_type, total_length,
            )

            if headers.get(":message-type") == "error":
                raise EventStreamError(
                    headers.get(":error-code"),
                    headers.get(":error-message"),
                )

            if event_type == "End":
                return 0

            payload_length = total_length - header_length - 16
            if event_type == "Cont" or payload_length < 1:
                continue

            payload = data[header_length:header_length+payload_length]

            if event_type == "Progress":
                self._progress = unmarshal(Progress, payload)
                continue

            if event_type == "Stats":
                self._stats = unmarshal(Stats, payload)
                continue

            if event_type == "Records":
                self._payload = payload
                return len(payload)

            raise S3MessageException(f"unknown event-type {event_type}")

    def stream(self, num_bytes: int = 32*1024) -> Iterator[bytes]:
        """
        Stream extracted payload from response data. Upon completion, caller
        should call self.close() to release network resources.
        """
        while self._read() > 0:
            while self._payload:
                result = self._payload
                if num_bytes < len(self._payload):
                    result = self._payload[:num_bytes]
                self._payload = self._payload[len(result):]
                yield cast(bytes, result)
