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

"""Common data structures shared by configuration and result messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from urllib3._collections import HTTPHeaderDict

from .xml import SubElement, find, findall, findint, findtext


@dataclass(frozen=True)
class Checksum:
    """Object checksum information."""
    checksum_crc32: Optional[str] = None
    checksum_crc32c: Optional[str] = None
    checksum_crc64nvme: Optional[str] = None
    checksum_sha1: Optional[str] = None
    checksum_sha256: Optional[str] = None
    checksum_type: Optional[str] = None

    def _values(self) -> tuple[tuple[str, Optional[str]], ...]:
        return (
            ("CRC32", self.checksum_crc32),
            ("CRC32C", self.checksum_crc32c),
            ("CRC64NVME", self.checksum_crc64nvme),
            ("SHA1", self.checksum_sha1),
            ("SHA256", self.checksum_sha256),
        )

    def headers(self) -> HTTPHeaderDict:
        """Generate request headers for checksum values."""
        headers = HTTPHeaderDict()
        for algorithm, value in self._values():
            if value:
                headers[f"x-amz-checksum-{algorithm.lower()}"] = value
                headers["x-amz-sdk-checksum-algorithm"] = algorithm
        if self.checksum_type:
            headers["x-amz-checksum-type"] = self.checksum_type
        return headers

    @classmethod
    def fromxml(cls: Type[Checksum], element: ET.Element) -> Checksum:
        """Create new object with values from XML element."""
        return cls(
            checksum_crc32=findtext(element, "ChecksumCRC32"),
            checksum_crc32c=findtext(element, "ChecksumCRC32C"),
            checksum_crc64nvme=findtext(element, "ChecksumCRC64NVME"),
            checksum_sha1=findtext(element, "ChecksumSHA1"),
            checksum_sha256=findtext(element, "ChecksumSHA256"),
            checksum_type=findtext(element, "ChecksumType"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        for algorithm, value in self._values():
            if value:
                SubElement(element, f"Checksum{algorithm}", value)
        return element


@dataclass(frozen=True)
class Owner:
    """Owner or initiator of a bucket, object or upload."""
    id: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[Owner], element: ET.Element) -> Owner:
        """Create new object with values from XML element."""
        return cls(
            id=findtext(element, "ID"),
            display_name=findtext(element, "DisplayName"),
        )

    @classmethod
    def fromchild(
            cls: Type[Owner],
            element: ET.Element,
            name: str = "Owner",
    ) -> Optional[Owner]:
        """Create new object from named child of element if present."""
        elem = find(element, name)
        return None if elem is None else cls.fromxml(elem)

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.id is not None:
            SubElement(element, "ID", self.id)
        if self.display_name is not None:
            SubElement(element, "DisplayName", self.display_name)
        return element


Initiator = Owner

StatusT = TypeVar("StatusT", bound="Status")


@dataclass(frozen=True)
class Status:
    """Enabled/Disabled status."""
    DISABLED = "Disabled"
    ENABLED = "Enabled"
    status: str

    def __post_init__(self):
        Status.check(self.status)

    @staticmethod
    def check(status: str):
        """Validate status."""
        if status not in [Status.ENABLED, Status.DISABLED]:
            raise ValueError(
                f"status must be {Status.ENABLED} or {Status.DISABLED}",
            )

    @classmethod
    def fromxml(cls: Type[StatusT], element: ET.Element) -> StatusT:
        """Create new object with values from XML element."""
        return cls(cast(str, findtext(element, "Status", True)))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Status", self.status)
        return element


@dataclass(frozen=True)
class Tag:
    """Tag."""

    key: str
    value: str

    def __post_init__(self):
        if not self.key:
            raise ValueError("key must be provided")
        if self.value is None:
            raise ValueError("value must be provided")

    @classmethod
    def fromxml(cls: Type[Tag], element: ET.Element) -> Tag:
        """Create new object with values from XML element."""
        return cls(
            key=cast(str, findtext(element, "Key", True)),
            value=cast(str, findtext(element, "Value", True)),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Key", self.key)
        SubElement(element, "Value", self.value)
        return element


class Tags(dict):
    """dict of bucket or object tags enforcing S3 tag limits."""
    _MAX_KEY_LENGTH = 128
    _MAX_VALUE_LENGTH = 256
    _MAX_OBJECT_TAG_COUNT = 10
    _MAX_TAG_COUNT = 50

    def __init__(self, for_object: bool = False):
        self._for_object = for_object
        super().__init__()

    def __setitem__(self, key: str, value: str):
        limit = (
            self._MAX_OBJECT_TAG_COUNT
            if self._for_object else self._MAX_TAG_COUNT
        )
        if key not in self and len(self) == limit:
            tag_type = "object" if self._for_object else "bucket"
            raise ValueError(f"only {limit} {tag_type} tags are allowed")
        if not key or len(key) > self._MAX_KEY_LENGTH or "&" in key:
            raise ValueError(f"invalid tag key '{key}'")
        if (
                value is None or
                len(value) > self._MAX_VALUE_LENGTH or
                "&" in value
        ):
            raise ValueError(f"invalid tag value '{value}'")
        super().__setitem__(key, value)

    def update(self, *args, **kwargs):
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    @property
    def for_object(self) -> bool:
        """Whether these tags are object tags."""
        return self._for_object

    @classmethod
    def new_bucket_tags(cls: Type[Tags]) -> Tags:
        """Create new bucket tags."""
        return cls()

    @classmethod
    def new_object_tags(cls: Type[Tags]) -> Tags:
        """Create new object tags."""
        return cls(True)

    @classmethod
    def fromquery(cls: Type[Tags], value: str) -> Tags:
        """Create new object tags from 'k1=v1&k2=v2' string."""
        obj = cls(True)
        for token in value.split("&"):
            if token:
                key, _, text = token.partition("=")
                obj[key] = text
        return obj

    def toquery(self) -> str:
        """Convert to 'k1=v1&k2=v2' string."""
        return "&".join(f"{key}={value}" for key, value in self.items())

    @classmethod
    def fromxml(
            cls: Type[Tags],
            element: ET.Element,
            for_object: bool = False,
    ) -> Tags:
        """Create new object with values from XML element."""
        obj = cls(for_object)
        for tag in findall(element, "Tag"):
            obj[cast(str, findtext(tag, "Key", True))] = cast(
                str, findtext(tag, "Value", True),
            )
        return obj

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        for key, value in self.items():
            Tag(key, value).toxml(SubElement(element, "Tag"))
        return element


@dataclass(frozen=True)
class Filter:
    """Rule filter of lifecycle and replication configuration."""
    and_operator: Optional[Filter.And] = None
    prefix: Optional[str] = None
    tag: Optional[Tag] = None

    def __post_init__(self):
        given = [
            value for value in (self.and_operator, self.prefix, self.tag)
            if value is not None
        ]
        if len(given) != 1:
            raise ValueError(
                "only one of and operator, prefix or tag must be provided",
            )

    @classmethod
    def fromxml(cls: Type[Filter], element: ET.Element) -> Filter:
        """Create new object with values from XML element."""
        elem = find(element, "And")
        and_operator = None if elem is None else Filter.And.fromxml(elem)
        elem = find(element, "Tag")
        return cls(
            and_operator=and_operator,
            prefix=findtext(element, "Prefix"),
            tag=None if elem is None else Tag.fromxml(elem),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.and_operator:
            self.and_operator.toxml(SubElement(element, "And"))
        if self.prefix is not None:
            SubElement(element, "Prefix", self.prefix)
        if self.tag is not None:
            self.tag.toxml(SubElement(element, "Tag"))
        return element

    @dataclass(frozen=True)
    class And:
        """AND operator of filter."""
        prefix: Optional[str] = None
        tags: Optional[Tags] = None
        object_size_less_than: Optional[int] = None
        object_size_greater_than: Optional[int] = None

        def __post_init__(self):
            if self.prefix is None and not self.tags:
                raise ValueError("at least prefix or tags must be provided")
            if (
                    self.object_size_less_than is not None and
                    self.object_size_greater_than is not None and
                    self.object_size_greater_than >= self.object_size_less_than
            ):
                raise ValueError(
                    "object size greater than must be less than "
                    "object size less than",
                )

        @classmethod
        def fromxml(cls: Type[Filter.And], element: ET.Element) -> Filter.And:
            """Create new object with values from XML element."""
            return cls(
                prefix=findtext(element, "Prefix"),
                tags=(
                    None if find(element, "Tag") is None
                    else Tags.fromxml(element)
                ),
                object_size_less_than=findint(element, "ObjectSizeLessThan"),
                object_size_greater_than=findint(
                    element, "ObjectSizeGreaterThan",
                ),
            )

        def toxml(self, element: Optional[ET.Element]) -> ET.Element:
            """Convert to XML."""
            if element is None:
                raise ValueError("element must be provided")
            if self.prefix is not None:
                SubElement(element, "Prefix", self.prefix)
            if self.tags is not None:
                self.tags.toxml(element)
            if self.object_size_less_than is not None:
                SubElement(
                    element,
                    "ObjectSizeLessThan",
                    str(self.object_size_less_than),
                )
            if self.object_size_greater_than is not None:
                SubElement(
                    element,
                    "ObjectSizeGreaterThan",
                    str(self.object_size_greater_than),
                )
            return element
