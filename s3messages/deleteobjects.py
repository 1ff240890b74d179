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

"""Request/response of DeleteObjects API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from .error import ErrorResponse
from .helpers import MAX_DELETE_OBJECTS, check_non_empty_string
from .time import to_http_header
from .xml import Element, SubElement, findall, findbool, findtext


@dataclass(frozen=True)
class DeleteObject:
    """Delete object request information."""

    name: str
    version_id: Optional[str] = None
    etag: Optional[str] = None
    last_modified_time: Optional[datetime] = None
    size: Optional[int] = None

    def __post_init__(self):
        check_non_empty_string(self.name, "object name")

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "Object")
        SubElement(element, "Key", self.name)
        if self.version_id is not None:
            SubElement(element, "VersionId", self.version_id)
        if self.etag is not None:
            SubElement(element, "ETag", self.etag)
        if self.last_modified_time is not None:
            SubElement(
                element,
                "LastModifiedTime",
                to_http_header(self.last_modified_time),
            )
        if self.size is not None:
            SubElement(element, "Size", str(self.size))
        return element


@dataclass(frozen=True)
class DeleteRequest:
    """Delete object request."""

    object_list: list[DeleteObject]
    quiet: bool = False

    def __post_init__(self):
        if not self.object_list:
            raise ValueError("at least one object must be provided")
        if len(self.object_list) > MAX_DELETE_OBJECTS:
            raise ValueError(
                f"at most {MAX_DELETE_OBJECTS} objects are allowed "
                f"in a delete request",
            )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("Delete")
        if self.quiet:
            SubElement(element, "Quiet", "true")
        for obj in self.object_list:
            obj.toxml(element)
        return element


A = TypeVar("A", bound="DeletedObject")


@dataclass(frozen=True)
class DeletedObject:
    """Deleted object information."""

    name: str
    version_id: Optional[str] = None
    delete_marker: bool = False
    delete_marker_version_id: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[A], element: ET.Element) -> A:
        """Create new object with values from XML element."""
        return cls(
            name=cast(str, findtext(element, "Key", True)),
            version_id=findtext(element, "VersionId"),
            delete_marker=findbool(element, "DeleteMarker"),
            delete_marker_version_id=findtext(
                element, "DeleteMarkerVersionId",
            ),
        )


B = TypeVar("B", bound="DeleteError")


@dataclass(frozen=True)
class DeleteError(ErrorResponse):
    """Delete error information."""

    version_id: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element) -> B:
        """Create new object with values from XML element."""
        return cls(
            code=cast(str, findtext(element, "Code", True)),
            message=findtext(element, "Message"),
            bucket_name=findtext(element, "BucketName"),
            object_name=findtext(element, "Key"),
            resource=findtext(element, "Resource"),
            request_id=findtext(element, "RequestId"),
            host_id=findtext(element, "HostId"),
            version_id=findtext(element, "VersionId"),
        )


C = TypeVar("C", bound="DeleteResult")


@dataclass(frozen=True)
class DeleteResult:
    """Delete object result."""

    object_list: list[DeletedObject] = field(default_factory=list)
    error_list: list[DeleteError] = field(default_factory=list)

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        return cls(
            object_list=[
                DeletedObject.fromxml(tag)
                for tag in findall(element, "Deleted")
            ],
            error_list=[
                DeleteError.fromxml(tag) for tag in findall(element, "Error")
            ],
        )
