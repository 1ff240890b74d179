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

"""CreateBucket configuration and bucket location."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type
from xml.etree import ElementTree as ET

from .commonconfig import Tags
from .xml import Element, SubElement

US_EAST_1 = "us-east-1"


@dataclass(frozen=True)
class Location:
    """Bucket location information of CreateBucketConfiguration."""
    name: Optional[str] = None
    type: Optional[str] = None

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.name:
            SubElement(element, "Name", self.name)
        if self.type:
            SubElement(element, "Type", self.type)
        return element


@dataclass(frozen=True)
class Bucket:
    """Bucket properties of CreateBucketConfiguration."""
    data_redundancy: Optional[str] = None
    type: Optional[str] = None

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.data_redundancy:
            SubElement(element, "DataRedundancy", self.data_redundancy)
        if self.type:
            SubElement(element, "Type", self.type)
        return element


@dataclass(frozen=True)
class CreateBucketConfiguration:
    """CreateBucket configuration."""
    location_constraint: Optional[str] = None
    location: Optional[Location] = None
    bucket: Optional[Bucket] = None
    tags: Optional[Tags] = None

    @property
    def is_empty(self) -> bool:
        """Check whether request body is not needed."""
        return (
            self.location_constraint in [None, "", US_EAST_1] and
            not self.location and
            not self.bucket and
            not self.tags
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("CreateBucketConfiguration")
        if self.location_constraint:
            SubElement(
                element, "LocationConstraint", self.location_constraint,
            )
        if self.location and (self.location.name or self.location.type):
            self.location.toxml(SubElement(element, "Location"))
        if self.bucket and (self.bucket.data_redundancy or self.bucket.type):
            self.bucket.toxml(SubElement(element, "Bucket"))
        if self.tags:
            self.tags.toxml(SubElement(element, "Tags"))
        return element


@dataclass(frozen=True)
class LocationConstraint:
    """GetBucketLocation result."""
    region: str = US_EAST_1

    @classmethod
    def fromxml(
            cls: Type[LocationConstraint],
            element: ET.Element,
    ) -> LocationConstraint:
        """Create new object with values from XML element."""
        region = element.text
        if not region:
            return cls()
        if region == "EU":
            return cls("eu-west-1")
        return cls(region)
