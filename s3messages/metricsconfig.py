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

"""Bucket metrics configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, cast
from xml.etree import ElementTree as ET

from .commonconfig import Tag, Tags
from .xml import Element, SubElement, find, findtext


@dataclass(frozen=True)
class MetricsFilter:
    """Metrics filter; at most one of its fields is set."""
    prefix: Optional[str] = None
    access_point_arn: Optional[str] = None
    tag: Optional[Tag] = None
    and_operator: Optional[MetricsFilter.And] = None

    def __post_init__(self):
        given = [
            value for value in (
                self.prefix, self.access_point_arn, self.tag,
                self.and_operator,
            ) if value is not None
        ]
        if len(given) > 1:
            raise ValueError(
                "only one of prefix, access point ARN, tag or and operator "
                "must be provided",
            )

    @classmethod
    def fromxml(
            cls: Type[MetricsFilter],
            element: ET.Element,
    ) -> MetricsFilter:
        """Create new object with values from XML element."""
        tag = find(element, "Tag")
        and_operator = find(element, "And")
        return cls(
            prefix=findtext(element, "Prefix"),
            access_point_arn=findtext(element, "AccessPointArn"),
            tag=None if tag is None else Tag.fromxml(tag),
            and_operator=(
                None if and_operator is None
                else MetricsFilter.And.fromxml(and_operator)
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.prefix is not None:
            SubElement(element, "Prefix", self.prefix)
        if self.access_point_arn is not None:
            SubElement(element, "AccessPointArn", self.access_point_arn)
        if self.tag is not None:
            self.tag.toxml(SubElement(element, "Tag"))
        if self.and_operator is not None:
            self.and_operator.toxml(SubElement(element, "And"))
        return element

    @dataclass(frozen=True)
    class And:
        """AND operator of metrics filter."""
        prefix: Optional[str] = None
        access_point_arn: Optional[str] = None
        tags: Optional[Tags] = None

        def __post_init__(self):
            if (
                    self.prefix is None and
                    self.access_point_arn is None and
                    not self.tags
            ):
                raise ValueError(
                    "at least prefix, access point ARN or tags must be "
                    "provided",
                )

        @classmethod
        def fromxml(
                cls: Type[MetricsFilter.And],
                element: ET.Element,
        ) -> MetricsFilter.And:
            """Create new object with values from XML element."""
            return cls(
                prefix=findtext(element, "Prefix"),
                access_point_arn=findtext(element, "AccessPointArn"),
                tags=(
                    None if find(element, "Tag") is None
                    else Tags.fromxml(element)
                ),
            )

        def toxml(self, element: Optional[ET.Element]) -> ET.Element:
            """Convert to XML."""
            if element is None:
                raise ValueError("element must be provided")
            if self.prefix is not None:
                SubElement(element, "Prefix", self.prefix)
            if self.access_point_arn is not None:
                SubElement(element, "AccessPointArn", self.access_point_arn)
            if self.tags:
                self.tags.toxml(element)
            return element


@dataclass(frozen=True)
class MetricsConfig:
    """Metrics configuration."""
    id: str
    metrics_filter: Optional[MetricsFilter] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("ID must be provided")

    @classmethod
    def fromxml(
            cls: Type[MetricsConfig],
            element: ET.Element,
    ) -> MetricsConfig:
        """Create new object with values from XML element."""
        elem = find(element, "Filter")
        return cls(
            cast(str, findtext(element, "Id", True)),
            None if elem is None else MetricsFilter.fromxml(elem),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("MetricsConfiguration")
        SubElement(element, "Id", self.id)
        if self.metrics_filter:
            self.metrics_filter.toxml(SubElement(element, "Filter"))
        return element
