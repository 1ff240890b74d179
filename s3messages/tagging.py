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

"""Bucket and object tagging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type
from xml.etree import ElementTree as ET

from .commonconfig import Tags
from .xml import Element, SubElement, find


@dataclass(frozen=True)
class Tagging:
    """Tagging for buckets and objects."""
    tags: Optional[Tags] = None

    @classmethod
    def fromxml(cls: Type[Tagging], element: ET.Element) -> Tagging:
        """Create new object with values from XML element."""
        elem = find(element, "TagSet")
        if elem is None or find(elem, "Tag") is None:
            return cls()
        return cls(Tags.fromxml(elem))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("Tagging")
        tag_set = SubElement(element, "TagSet")
        if self.tags:
            self.tags.toxml(tag_set)
        return element
