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

"""Bucket CORS configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Type
from xml.etree import ElementTree as ET

from .xml import Element, SubElement, findall, findint, findtext, findtexts

_MAX_RULES = 100


@dataclass(frozen=True)
class CORSRule:
    """CORS rule."""
    allowed_methods: list[str]
    allowed_origins: list[str]
    allowed_headers: list[str] = field(default_factory=list)
    expose_headers: list[str] = field(default_factory=list)
    id: Optional[str] = None
    max_age_seconds: Optional[int] = None

    def __post_init__(self):
        if not self.allowed_methods:
            raise ValueError("allowed methods must be provided")
        if not self.allowed_origins:
            raise ValueError("allowed origins must be provided")

    @classmethod
    def fromxml(cls: Type[CORSRule], element: ET.Element) -> CORSRule:
        """Create new object with values from XML element."""
        return cls(
            allowed_methods=findtexts(element, "AllowedMethod"),
            allowed_origins=findtexts(element, "AllowedOrigin"),
            allowed_headers=findtexts(element, "AllowedHeader"),
            expose_headers=findtexts(element, "ExposeHeader"),
            id=findtext(element, "ID"),
            max_age_seconds=findint(element, "MaxAgeSeconds"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        for value in self.allowed_headers:
            SubElement(element, "AllowedHeader", value)
        for value in self.allowed_methods:
            SubElement(element, "AllowedMethod", value)
        for value in self.allowed_origins:
            SubElement(element, "AllowedOrigin", value)
        for value in self.expose_headers:
            SubElement(element, "ExposeHeader", value)
        if self.id:
            SubElement(element, "ID", self.id)
        if self.max_age_seconds is not None:
            SubElement(element, "MaxAgeSeconds", str(self.max_age_seconds))
        return element


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""
    rules: list[CORSRule] = field(default_factory=list)

    def __post_init__(self):
        if len(self.rules) > _MAX_RULES:
            raise ValueError(
                f"more than {_MAX_RULES} CORS rules are not supported",
            )

    @classmethod
    def fromxml(cls: Type[CORSConfig], element: ET.Element) -> CORSConfig:
        """Create new object with values from XML element."""
        return cls(
            [CORSRule.fromxml(elem) for elem in findall(element, "CORSRule")],
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("CORSConfiguration")
        for rule in self.rules:
            rule.toxml(SubElement(element, "CORSRule"))
        return element
