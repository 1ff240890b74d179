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

"""Multipart upload requests, results and part aggregation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Iterator, Optional, Type, Union, cast
from xml.etree import ElementTree as ET

from .commonconfig import Checksum, Initiator, Owner
from .error import S3MessageException
from .helpers import MAX_MULTIPART_COUNT, strip_etag, url_decode
from .time import from_iso8601utc
from .xml import (Element, SubElement, findall, findbool, findint, findtext,
                  unmarshal)

_LOG = logging.getLogger(__name__)

XmlT = Union[str, bytes]


@dataclass(frozen=True)
class Part:
    """Part information of a multipart upload."""
    part_number: int
    etag: str
    last_modified: Optional[datetime] = None
    size: Optional[int] = None
    checksum: Optional[Checksum] = None

    def __post_init__(self):
        if not 1 <= self.part_number <= MAX_MULTIPART_COUNT:
            raise ValueError(
                f"part number must be between 1 and {MAX_MULTIPART_COUNT}",
            )
        if not self.etag:
            raise ValueError("ETag must be provided")
        object.__setattr__(self, "etag", strip_etag(self.etag))

    @classmethod
    def fromxml(cls: Type[Part], element: ET.Element) -> Part:
        """Create new object with values from XML element."""
        return cls(
            part_number=cast(int, findint(element, "PartNumber", True)),
            etag=cast(str, findtext(element, "ETag", True)),
            last_modified=from_iso8601utc(findtext(element, "LastModified")),
            size=findint(element, "Size"),
            checksum=Checksum.fromxml(element),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "PartNumber", str(self.part_number))
        SubElement(element, "ETag", f'"{self.etag}"')
        if self.checksum:
            self.checksum.toxml(element)
        return element


@dataclass(frozen=True)
class CompleteMultipartUpload:
    """CompleteMultipartUpload API request."""
    parts: list[Part]

    def __post_init__(self):
        if not self.parts:
            raise ValueError("parts must be provided")
        for previous, part in zip(self.parts, self.parts[1:]):
            if part.part_number <= previous.part_number:
                raise ValueError(
                    f"part number {part.part_number} must be greater than "
                    f"previous part number {previous.part_number}",
                )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("CompleteMultipartUpload")
        for part in self.parts:
            part.toxml(SubElement(element, "Part"))
        return element


@dataclass(frozen=True)
class InitiateMultipartUploadResult:
    """CreateMultipartUpload API result."""
    bucket_name: str
    object_name: str
    upload_id: str

    @classmethod
    def fromxml(
            cls: Type[InitiateMultipartUploadResult],
            element: ET.Element,
    ) -> InitiateMultipartUploadResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=cast(str, findtext(element, "Bucket", True)),
            object_name=cast(str, findtext(element, "Key", True)),
            upload_id=cast(str, findtext(element, "UploadId", True)),
        )


@dataclass(frozen=True)
class CompleteMultipartUploadResult:
    """CompleteMultipartUpload API result."""
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    location: Optional[str] = None
    etag: Optional[str] = None
    checksum: Optional[Checksum] = None

    @classmethod
    def fromxml(
            cls: Type[CompleteMultipartUploadResult],
            element: ET.Element,
    ) -> CompleteMultipartUploadResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=findtext(element, "Bucket"),
            object_name=findtext(element, "Key"),
            location=findtext(element, "Location"),
            etag=strip_etag(findtext(element, "ETag")),
            checksum=Checksum.fromxml(element),
        )


@dataclass(frozen=True)
class CopyObjectResult:
    """CopyObject and UploadPartCopy API result."""
    etag: str
    last_modified: Optional[datetime] = None
    checksum: Optional[Checksum] = None

    @classmethod
    def fromxml(
            cls: Type[CopyObjectResult],
            element: ET.Element,
    ) -> CopyObjectResult:
        """Create new object with values from XML element."""
        return cls(
            etag=cast(str, strip_etag(findtext(element, "ETag", True))),
            last_modified=from_iso8601utc(findtext(element, "LastModified")),
            checksum=Checksum.fromxml(element),
        )

    def topart(self, part_number: int) -> Part:
        """Create part of given number from copied part."""
        return Part(
            part_number=part_number,
            etag=self.etag,
            last_modified=self.last_modified,
            checksum=self.checksum,
        )


CopyPartResult = CopyObjectResult


@dataclass(frozen=True)
class ListPartsResult:
    """ListParts API result."""
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    upload_id: Optional[str] = None
    initiator: Optional[Initiator] = None
    owner: Optional[Owner] = None
    storage_class: Optional[str] = None
    part_number_marker: Optional[int] = None
    next_part_number_marker: Optional[int] = None
    max_parts: Optional[int] = None
    is_truncated: bool = False
    parts: list[Part] = field(default_factory=list)
    checksum_algorithm: Optional[str] = None
    checksum_type: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[ListPartsResult],
            element: ET.Element,
    ) -> ListPartsResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=findtext(element, "Bucket"),
            object_name=findtext(element, "Key"),
            upload_id=findtext(element, "UploadId"),
            initiator=Initiator.fromchild(element, "Initiator"),
            owner=Owner.fromchild(element),
            storage_class=findtext(element, "StorageClass"),
            part_number_marker=findint(element, "PartNumberMarker"),
            next_part_number_marker=findint(element, "NextPartNumberMarker"),
            max_parts=findint(element, "MaxParts"),
            is_truncated=findbool(element, "IsTruncated"),
            parts=[Part.fromxml(tag) for tag in findall(element, "Part")],
            checksum_algorithm=findtext(element, "ChecksumAlgorithm"),
            checksum_type=findtext(element, "ChecksumType"),
        )


@dataclass(frozen=True)
class Upload:
    """Upload information of a multipart upload."""
    object_name: str
    upload_id: str
    initiator: Optional[Initiator] = None
    owner: Optional[Owner] = None
    storage_class: Optional[str] = None
    initiated_time: Optional[datetime] = None
    checksum_algorithm: Optional[str] = None
    checksum_type: Optional[str] = None
    aggregated_part_size: Optional[int] = None

    @classmethod
    def fromxml(
            cls: Type[Upload],
            element: ET.Element,
            encoding_type: Optional[str] = None,
    ) -> Upload:
        """Create new object with values from XML element."""
        return cls(
            object_name=cast(
                str,
                url_decode(findtext(element, "Key", True), encoding_type),
            ),
            upload_id=cast(str, findtext(element, "UploadId", True)),
            initiator=Initiator.fromchild(element, "Initiator"),
            owner=Owner.fromchild(element),
            storage_class=findtext(element, "StorageClass"),
            initiated_time=from_iso8601utc(findtext(element, "Initiated")),
            checksum_algorithm=findtext(element, "ChecksumAlgorithm"),
            checksum_type=findtext(element, "ChecksumType"),
        )

    def with_part_size(self, parts: list[Part]) -> Upload:
        """Copy of this upload with total size of given parts."""
        return replace(
            self, aggregated_part_size=sum(part.size or 0 for part in parts),
        )


@dataclass(frozen=True)
class ListMultipartUploadsResult:
    """ListMultipartUploads API result."""
    bucket_name: Optional[str] = None
    encoding_type: Optional[str] = None
    key_marker: Optional[str] = None
    upload_id_marker: Optional[str] = None
    next_key_marker: Optional[str] = None
    next_upload_id_marker: Optional[str] = None
    delimiter: Optional[str] = None
    prefix: Optional[str] = None
    max_uploads: Optional[int] = None
    is_truncated: bool = False
    uploads: list[Upload] = field(default_factory=list)
    common_prefixes: list[str] = field(default_factory=list)

    @classmethod
    def fromxml(
            cls: Type[ListMultipartUploadsResult],
            element: ET.Element,
    ) -> ListMultipartUploadsResult:
        """Create new object with values from XML element."""
        encoding_type = findtext(element, "EncodingType")
        return cls(
            bucket_name=findtext(element, "Bucket"),
            encoding_type=encoding_type,
            key_marker=url_decode(
                findtext(element, "KeyMarker"), encoding_type,
            ),
            upload_id_marker=findtext(element, "UploadIdMarker"),
            next_key_marker=url_decode(
                findtext(element, "NextKeyMarker"), encoding_type,
            ),
            next_upload_id_marker=findtext(element, "NextUploadIdMarker"),
            delimiter=url_decode(
                findtext(element, "Delimiter"), encoding_type,
            ),
            prefix=url_decode(findtext(element, "Prefix"), encoding_type),
            max_uploads=findint(element, "MaxUploads"),
            is_truncated=findbool(element, "IsTruncated"),
            uploads=[
                Upload.fromxml(tag, encoding_type)
                for tag in findall(element, "Upload")
            ],
            common_prefixes=[
                cast(str, url_decode(prefix, encoding_type))
                for prefix in [
                    findtext(tag, "Prefix", True)
                    for tag in findall(element, "CommonPrefixes")
                ]
            ],
        )


def list_parts(
        fetch: Callable[[Optional[int]], XmlT],
        part_number_marker: Optional[int] = None,
) -> list[Part]:
    """
    Aggregate parts of a multipart upload over all ListParts pages.
    `fetch(part_number_marker)` must return XML of one ListParts page.
    """
    parts: list[Part] = []
    while True:
        result = unmarshal(ListPartsResult, fetch(part_number_marker))
        parts += result.parts
        _LOG.debug(
            "upload %s: fetched %d parts after marker %s",
            result.upload_id, len(result.parts), part_number_marker,
        )
        if not result.is_truncated:
            return parts
        if (
                result.next_part_number_marker is None or
                result.next_part_number_marker == part_number_marker
        ):
            raise S3MessageException(
                f"upload {result.upload_id}: truncated part listing does "
                f"not advance part number marker",
            )
        part_number_marker = result.next_part_number_marker


def list_uploads(
        fetch: Callable[[Optional[str], Optional[str]], XmlT],
        key_marker: Optional[str] = None,
        upload_id_marker: Optional[str] = None,
        fetch_parts: Optional[
            Callable[[Upload, Optional[int]], XmlT]] = None,
) -> Iterator[Upload]:
    """
    Yield incomplete multipart uploads over all ListMultipartUploads pages.
    `fetch(key_marker, upload_id_marker)` must return XML of one page. If
    `fetch_parts(upload, part_number_marker)` is given, each upload carries
    aggregated size of its uploaded parts.
    """
    while True:
        result = unmarshal(
            ListMultipartUploadsResult, fetch(key_marker, upload_id_marker),
        )
        _LOG.debug(
            "bucket %s: fetched %d uploads, truncated=%s",
            result.bucket_name, len(result.uploads), result.is_truncated,
        )
        for upload in result.uploads:
            if fetch_parts is not None:
                upload = upload.with_part_size(
                    list_parts(
                        # pylint: disable=cell-var-from-loop
                        lambda marker: fetch_parts(upload, marker),
                    ),
                )
            yield upload
        if not result.is_truncated:
            return
        if (result.next_key_marker, result.next_upload_id_marker) == (
                key_marker, upload_id_marker,
        ):
            raise S3MessageException(
                f"bucket {result.bucket_name}: truncated upload listing "
                f"does not advance markers",
            )
        key_marker = result.next_key_marker
        upload_id_marker = result.next_upload_id_marker
