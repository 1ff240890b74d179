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

"""Object information derived from GetObjectAttributes and HeadObject."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Type, Union, cast
from xml.etree import ElementTree as ET

from urllib3._collections import HTTPHeaderDict

from .commonconfig import Checksum
from .enums import ChecksumAlgorithm, ChecksumType, RetentionMode
from .helpers import strip_etag
from .time import from_http_header, from_iso8601utc
from .xml import find, findall, findbool, findint, findtext, unmarshal

_CHECKSUM_HEADERS = {
    "x-amz-checksum-crc32": ChecksumAlgorithm.CRC32,
    "x-amz-checksum-crc32c": ChecksumAlgorithm.CRC32C,
    "x-amz-checksum-crc64nvme": ChecksumAlgorithm.CRC64NVME,
    "x-amz-checksum-sha1": ChecksumAlgorithm.SHA1,
    "x-amz-checksum-sha256": ChecksumAlgorithm.SHA256,
}
_USER_METADATA_PREFIX = "x-amz-meta-"


@dataclass(frozen=True)
class ObjectPart:
    """Part information of GetObjectAttributes API."""
    part_number: int
    size: Optional[int] = None
    checksum: Optional[Checksum] = None

    @classmethod
    def fromxml(cls: Type[ObjectPart], element: ET.Element) -> ObjectPart:
        """Create new object with values from XML element."""
        return cls(
            part_number=cast(int, findint(element, "PartNumber", True)),
            size=findint(element, "Size"),
            checksum=Checksum.fromxml(element),
        )


@dataclass(frozen=True)
class ObjectParts:
    """Object parts of GetObjectAttributes API."""
    is_truncated: bool = False
    max_parts: Optional[int] = None
    next_part_number_marker: Optional[int] = None
    part_number_marker: Optional[int] = None
    parts: list[ObjectPart] = field(default_factory=list)
    parts_count: Optional[int] = None

    @classmethod
    def fromxml(cls: Type[ObjectParts], element: ET.Element) -> ObjectParts:
        """Create new object with values from XML element."""
        return cls(
            is_truncated=findbool(element, "IsTruncated"),
            max_parts=findint(element, "MaxParts"),
            next_part_number_marker=findint(element, "NextPartNumberMarker"),
            part_number_marker=findint(element, "PartNumberMarker"),
            parts=[
                ObjectPart.fromxml(tag) for tag in findall(element, "Part")
            ],
            parts_count=findint(element, "PartsCount"),
        )


@dataclass(frozen=True)
class GetObjectAttributesOutput:
    """
    GetObjectAttributes API result. Delete marker, last modified and version
    ID are not part of the XML body and come from response headers.
    """
    etag: Optional[str] = None
    checksum: Optional[Checksum] = None
    object_parts: Optional[ObjectParts] = None
    storage_class: Optional[str] = None
    object_size: Optional[int] = None
    delete_marker: bool = False
    last_modified: Optional[datetime] = None
    version_id: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[GetObjectAttributesOutput],
            element: ET.Element,
    ) -> GetObjectAttributesOutput:
        """Create new object with values from XML element."""
        elem = find(element, "Checksum")
        parts = find(element, "ObjectParts")
        return cls(
            etag=strip_etag(findtext(element, "ETag")),
            checksum=None if elem is None else Checksum.fromxml(elem),
            object_parts=None if parts is None else ObjectParts.fromxml(parts),
            storage_class=findtext(element, "StorageClass"),
            object_size=findint(element, "ObjectSize"),
        )

    @classmethod
    def fromresponse(
            cls: Type[GetObjectAttributesOutput],
            data: Union[str, bytes],
            headers: HTTPHeaderDict,
    ) -> GetObjectAttributesOutput:
        """Create new object with values from response body and headers."""
        value = headers.get("last-modified")
        return replace(
            unmarshal(cls, data),
            delete_marker=(
                headers.get("x-amz-delete-marker", "").lower() == "true"
            ),
            last_modified=from_http_header(value) if value else None,
            version_id=headers.get("x-amz-version-id"),
        )


@dataclass(frozen=True)
class ObjectStat:
    """Object information from HeadObject API response headers."""
    bucket_name: str
    object_name: str
    etag: str = ""
    size: int = 0
    last_modified: Optional[datetime] = None
    content_type: Optional[str] = None
    version_id: Optional[str] = None
    delete_marker: bool = False
    user_metadata: HTTPHeaderDict = field(default_factory=HTTPHeaderDict)
    lock_mode: Optional[RetentionMode] = None
    lock_retain_until_date: Optional[datetime] = None
    lock_legal_hold: bool = False
    checksums: dict[ChecksumAlgorithm, str] = field(default_factory=dict)
    checksum_type: Optional[ChecksumType] = None

    @classmethod
    def fromheaders(
            cls: Type[ObjectStat],
            bucket_name: str,
            object_name: str,
            headers: HTTPHeaderDict,
    ) -> ObjectStat:
        """Create new object with values from HTTP response headers."""
        user_metadata = HTTPHeaderDict()
        for name, value in headers.items():
            lower_name = name.lower()
            if lower_name.startswith(_USER_METADATA_PREFIX):
                user_metadata[lower_name[len(_USER_METADATA_PREFIX):]] = value
        last_modified = headers.get("last-modified")
        lock_mode = headers.get("x-amz-object-lock-mode")
        retain_until_date = headers.get("x-amz-object-lock-retain-until-date")
        checksum_type = headers.get("x-amz-checksum-type")
        return cls(
            bucket_name=bucket_name,
            object_name=object_name,
            etag=headers.get("etag", "").replace('"', ""),
            size=int(headers.get("content-length", "0")),
            last_modified=(
                from_http_header(last_modified) if last_modified else None
            ),
            content_type=headers.get("content-type"),
            version_id=headers.get("x-amz-version-id"),
            delete_marker=(
                headers.get("x-amz-delete-marker", "").lower() == "true"
            ),
            user_metadata=user_metadata,
            lock_mode=(
                RetentionMode.fromstring(lock_mode) if lock_mode else None
            ),
            lock_retain_until_date=from_iso8601utc(retain_until_date),
            lock_legal_hold=(
                headers.get("x-amz-object-lock-legal-hold", "") == "ON"
            ),
            checksums={
                algorithm: headers[name]
                for name, algorithm in _CHECKSUM_HEADERS.items()
                if headers.get(name)
            },
            checksum_type=(
                ChecksumType.fromstring(checksum_type)
                if checksum_type else None
            ),
        )
