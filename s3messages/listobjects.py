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

"""Bucket and object listing results and their pagination."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import (Any, Callable, Iterator, Optional, Type, TypeVar, Union,
                    cast)
from xml.etree import ElementTree as ET

from .commonconfig import Owner, Tags
from .error import S3MessageException
from .helpers import strip_etag, url_decode
from .time import from_iso8601utc
from .xml import (find, findall, findbool, findint, findtext, findtexts,
                  localname, unmarshal)

_LOG = logging.getLogger(__name__)

XmlT = Union[str, bytes]


@dataclass(frozen=True)
class Bucket:
    """Bucket information."""
    name: str
    creation_date: Optional[datetime] = None
    bucket_region: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[Bucket], element: ET.Element) -> Bucket:
        """Create new object with values from XML element."""
        return cls(
            name=cast(str, findtext(element, "Name", True)),
            creation_date=from_iso8601utc(findtext(element, "CreationDate")),
            bucket_region=findtext(element, "BucketRegion"),
        )


@dataclass(frozen=True)
class ListAllMyBucketsResult:
    """ListBuckets API result."""
    buckets: list[Bucket] = field(default_factory=list)
    owner: Optional[Owner] = None
    prefix: Optional[str] = None
    continuation_token: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[ListAllMyBucketsResult],
            element: ET.Element,
    ) -> ListAllMyBucketsResult:
        """Create new object with values from XML element."""
        return cls(
            buckets=[
                Bucket.fromxml(tag)
                for tag in findall(element, "Buckets/Bucket")
            ],
            owner=Owner.fromchild(element),
            prefix=findtext(element, "Prefix"),
            continuation_token=findtext(element, "ContinuationToken"),
        )


@dataclass(frozen=True)
class Item:
    """Object, version, delete marker or common prefix of a listing."""
    object_name: str
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    size: Optional[int] = None
    storage_class: Optional[str] = None
    owner: Optional[Owner] = None
    user_metadata: Optional[dict[str, str]] = None
    user_tags: Optional[Tags] = None
    checksum_algorithms: Optional[list[str]] = None
    checksum_type: Optional[str] = None
    is_restore_in_progress: bool = False
    restore_expiry_date: Optional[datetime] = None
    version_id: Optional[str] = None
    is_latest: bool = False
    is_delete_marker: bool = False
    is_prefix: bool = False
    is_dir: bool = field(default=False, init=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "is_dir",
            self.is_prefix or self.object_name.endswith("/"),
        )

    @classmethod
    def fromxml(
            cls: Type[Item],
            element: ET.Element,
            encoding_type: Optional[str] = None,
    ) -> Item:
        """Create new object with values from XML element."""
        metadata = find(element, "UserMetadata")
        user_tags = findtext(element, "UserTags")
        return cls(
            object_name=cast(
                str,
                url_decode(findtext(element, "Key", True), encoding_type),
            ),
            last_modified=from_iso8601utc(findtext(element, "LastModified")),
            etag=strip_etag(findtext(element, "ETag")),
            size=findint(element, "Size"),
            storage_class=findtext(element, "StorageClass"),
            owner=Owner.fromchild(element),
            user_metadata=(
                None if metadata is None
                else {localname(elem): elem.text or "" for elem in metadata}
            ),
            user_tags=Tags.fromquery(user_tags) if user_tags else None,
            checksum_algorithms=(
                findtexts(element, "ChecksumAlgorithm") or None
            ),
            checksum_type=findtext(element, "ChecksumType"),
            is_restore_in_progress=findbool(
                element, "RestoreStatus/IsRestoreInProgress",
            ),
            restore_expiry_date=from_iso8601utc(
                findtext(element, "RestoreStatus/RestoreExpiryDate"),
            ),
            version_id=findtext(element, "VersionId"),
            is_latest=findbool(element, "IsLatest"),
            is_delete_marker=localname(element) == "DeleteMarker",
        )

    @classmethod
    def fromprefix(
            cls: Type[Item],
            element: ET.Element,
            encoding_type: Optional[str] = None,
    ) -> Item:
        """Create new object from CommonPrefixes XML element."""
        return cls(
            object_name=cast(
                str,
                url_decode(findtext(element, "Prefix", True), encoding_type),
            ),
            is_prefix=True,
        )


ListObjectsResultT = TypeVar("ListObjectsResultT", bound="ListObjectsResult")


@dataclass(frozen=True)
class ListObjectsResult:
    """Base of ListObjects, ListObjectsV2 and ListObjectVersions results."""
    name: str
    prefix: Optional[str] = None
    delimiter: Optional[str] = None
    max_keys: Optional[int] = None
    encoding_type: Optional[str] = None
    is_truncated: bool = False
    contents: list[Item] = field(default_factory=list)
    common_prefixes: list[Item] = field(default_factory=list)

    @staticmethod
    def parsexml(element: ET.Element) -> dict[str, Any]:
        """Parse fields common to all listing results."""
        encoding_type = findtext(element, "EncodingType")
        return {
            "name": cast(str, findtext(element, "Name", True)),
            "prefix": url_decode(findtext(element, "Prefix"), encoding_type),
            "delimiter": url_decode(
                findtext(element, "Delimiter"), encoding_type,
            ),
            "max_keys": findint(element, "MaxKeys"),
            "encoding_type": encoding_type,
            "is_truncated": findbool(element, "IsTruncated"),
            "common_prefixes": [
                Item.fromprefix(tag, encoding_type)
                for tag in findall(element, "CommonPrefixes")
            ],
        }

    @property
    def items(self) -> list[Item]:
        """Get contents followed by common prefixes."""
        return self.contents + self.common_prefixes

    def _last_key(self) -> Optional[str]:
        """Get last object name when listing is truncated."""
        if not self.is_truncated or not self.contents:
            return None
        return self.contents[-1].object_name

    def next_markers(self) -> tuple[Optional[str], Optional[str]]:
        """Get marker and version ID marker to fetch next page."""
        return self._last_key(), None


@dataclass(frozen=True)
class ListBucketResultV1(ListObjectsResult):
    """ListObjects API result."""
    marker: Optional[str] = None
    next_marker: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[ListBucketResultV1],
            element: ET.Element,
    ) -> ListBucketResultV1:
        """Create new object with values from XML element."""
        common = cls.parsexml(element)
        encoding_type = common["encoding_type"]
        return cls(
            contents=[
                Item.fromxml(tag, encoding_type)
                for tag in findall(element, "Contents")
            ],
            marker=url_decode(findtext(element, "Marker"), encoding_type),
            next_marker=url_decode(
                findtext(element, "NextMarker"), encoding_type,
            ),
            **common,
        )

    def next_markers(self) -> tuple[Optional[str], Optional[str]]:
        return self.next_marker or self._last_key(), None


@dataclass(frozen=True)
class ListBucketResultV2(ListObjectsResult):
    """ListObjectsV2 API result."""
    key_count: Optional[int] = None
    start_after: Optional[str] = None
    continuation_token: Optional[str] = None
    next_continuation_token: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[ListBucketResultV2],
            element: ET.Element,
    ) -> ListBucketResultV2:
        """Create new object with values from XML element."""
        common = cls.parsexml(element)
        encoding_type = common["encoding_type"]
        return cls(
            contents=[
                Item.fromxml(tag, encoding_type)
                for tag in findall(element, "Contents")
            ],
            key_count=findint(element, "KeyCount"),
            start_after=url_decode(
                findtext(element, "StartAfter"), encoding_type,
            ),
            continuation_token=findtext(element, "ContinuationToken"),
            next_continuation_token=findtext(
                element, "NextContinuationToken",
            ),
            **common,
        )

    def next_markers(self) -> tuple[Optional[str], Optional[str]]:
        return self.next_continuation_token or self._last_key(), None


@dataclass(frozen=True)
class ListVersionsResult(ListObjectsResult):
    """ListObjectVersions API result."""
    key_marker: Optional[str] = None
    next_key_marker: Optional[str] = None
    version_id_marker: Optional[str] = None
    next_version_id_marker: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[ListVersionsResult],
            element: ET.Element,
    ) -> ListVersionsResult:
        """Create new object with values from XML element."""
        common = cls.parsexml(element)
        encoding_type = common["encoding_type"]
        return cls(
            contents=[
                Item.fromxml(tag, encoding_type) for tag in element
                if localname(tag) in ["Version", "DeleteMarker"]
            ],
            key_marker=url_decode(
                findtext(element, "KeyMarker"), encoding_type,
            ),
            next_key_marker=url_decode(
                findtext(element, "NextKeyMarker"), encoding_type,
            ),
            version_id_marker=findtext(element, "VersionIdMarker"),
            next_version_id_marker=findtext(element, "NextVersionIdMarker"),
            **common,
        )

    @property
    def versions(self) -> list[Item]:
        """Get object versions excluding delete markers."""
        return [item for item in self.contents if not item.is_delete_marker]

    @property
    def delete_markers(self) -> list[Item]:
        """Get delete markers."""
        return [item for item in self.contents if item.is_delete_marker]

    def next_markers(self) -> tuple[Optional[str], Optional[str]]:
        if self.next_key_marker:
            return self.next_key_marker, self.next_version_id_marker
        return self._last_key(), None


def list_objects(
        fetch: Callable[[Optional[str], Optional[str]], XmlT],
        result_class: Type[ListObjectsResultT],
        marker: Optional[str] = None,
        version_id_marker: Optional[str] = None,
) -> Iterator[Item]:
    """
    Yield listing items page by page.

    `fetch(marker, version_id_marker)` must return XML of one listing page
    of `result_class`; the first call receives given markers. Iteration
    stops at the first page that is not truncated.
    """
    page = 0
    while True:
        result = unmarshal(result_class, fetch(marker, version_id_marker))
        page += 1
        _LOG.debug(
            "bucket %s: page %d has %d items, truncated=%s",
            result.name, page, len(result.items), result.is_truncated,
        )
        yield from result.items
        if not result.is_truncated:
            return
        next_marker, next_version_id_marker = result.next_markers()
        if not next_marker:
            raise S3MessageException(
                f"bucket {result.name}: truncated listing does not carry "
                f"a continuation marker",
            )
        if (next_marker, next_version_id_marker) == (
                marker, version_id_marker,
        ):
            raise S3MessageException(
                f"bucket {result.name}: continuation marker {marker} "
                f"does not advance",
            )
        marker, version_id_marker = next_marker, next_version_id_marker


def list_buckets(
        fetch: Callable[[Optional[str]], XmlT],
        continuation_token: Optional[str] = None,
) -> Iterator[Bucket]:
    """
    Yield buckets page by page. `fetch(continuation_token)` must return XML
    of one ListBuckets page.
    """
    while True:
        result = unmarshal(ListAllMyBucketsResult, fetch(continuation_token))
        _LOG.debug("buckets page has %d buckets", len(result.buckets))
        yield from result.buckets
        if (
                not result.continuation_token or
                result.continuation_token == continuation_token
        ):
            return
        continuation_token = result.continuation_token
