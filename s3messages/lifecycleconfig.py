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

"""Bucket lifecycle configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Type, cast
from xml.etree import ElementTree as ET

from .commonconfig import Filter, Status
from .time import from_iso8601utc, to_iso8601utc
from .xml import Element, SubElement, find, findall, findint, findtext

_MAX_RULE_ID_LENGTH = 255


def check_rule_id(rule_id: Optional[str]) -> Optional[str]:
    """Strip and validate rule ID."""
    if rule_id is None:
        return None
    rule_id = rule_id.strip()
    if not rule_id:
        raise ValueError("rule ID must be non-empty string")
    if len(rule_id) > _MAX_RULE_ID_LENGTH:
        raise ValueError(
            f"rule ID must not exceed {_MAX_RULE_ID_LENGTH} characters",
        )
    return rule_id


@dataclass(frozen=True)
class DateDays:
    """Date or days of transition and expiration."""
    date: Optional[datetime] = None
    days: Optional[int] = None

    def _check(self, allow_none: bool = False):
        if self.date is not None and self.days is not None:
            raise ValueError("only one of date or days must be provided")
        if not allow_none and self.date is None and self.days is None:
            raise ValueError("date or days must be provided")
        if self.days is not None and self.days < 0:
            raise ValueError("days must not be negative")

    @staticmethod
    def parsexml(
            element: ET.Element,
    ) -> tuple[Optional[datetime], Optional[int]]:
        """Parse XML to date and days."""
        return (
            from_iso8601utc(findtext(element, "Date")),
            findint(element, "Days"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.date is not None:
            SubElement(element, "Date", to_iso8601utc(self.date))
        if self.days is not None:
            SubElement(element, "Days", str(self.days))
        return element


@dataclass(frozen=True)
class Transition(DateDays):
    """Transition action."""
    storage_class: Optional[str] = None

    def __post_init__(self):
        self._check()
        if not self.storage_class:
            raise ValueError("storage class must be provided")

    @classmethod
    def fromxml(cls: Type[Transition], element: ET.Element) -> Transition:
        """Create new object with values from XML element."""
        date, days = cls.parsexml(element)
        return cls(date, days, findtext(element, "StorageClass"))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = super().toxml(element)
        SubElement(element, "StorageClass", self.storage_class)
        return element


@dataclass(frozen=True)
class Expiration(DateDays):
    """Expiration action."""
    expired_object_delete_marker: Optional[bool] = None

    def __post_init__(self):
        self._check(allow_none=self.expired_object_delete_marker is not None)

    @classmethod
    def fromxml(cls: Type[Expiration], element: ET.Element) -> Expiration:
        """Create new object with values from XML element."""
        date, days = cls.parsexml(element)
        marker = findtext(element, "ExpiredObjectDeleteMarker")
        if marker is None:
            return cls(date, days, None)
        if marker.lower() not in ["false", "true"]:
            raise ValueError(
                "value of ExpiredObjectDeleteMarker must be "
                "'true' or 'false'",
            )
        return cls(date, days, marker.lower() == "true")

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = super().toxml(element)
        if self.expired_object_delete_marker is not None:
            SubElement(
                element,
                "ExpiredObjectDeleteMarker",
                str(self.expired_object_delete_marker).lower(),
            )
        return element


@dataclass(frozen=True)
class NoncurrentVersionTransition:
    """Noncurrent version transition action."""
    noncurrent_days: Optional[int] = None
    storage_class: Optional[str] = None
    newer_noncurrent_versions: Optional[int] = None

    @classmethod
    def fromxml(
            cls: Type[NoncurrentVersionTransition],
            element: ET.Element,
    ) -> NoncurrentVersionTransition:
        """Create new object with values from XML element."""
        return cls(
            noncurrent_days=findint(element, "NoncurrentDays"),
            storage_class=findtext(element, "StorageClass"),
            newer_noncurrent_versions=findint(
                element, "NewerNoncurrentVersions",
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.noncurrent_days is not None:
            SubElement(element, "NoncurrentDays", str(self.noncurrent_days))
        if self.storage_class:
            SubElement(element, "StorageClass", self.storage_class)
        if self.newer_noncurrent_versions is not None:
            SubElement(element, "NewerNoncurrentVersions",
                       str(self.newer_noncurrent_versions))
        return element


@dataclass(frozen=True)
class NoncurrentVersionExpiration:
    """Noncurrent version expiration action."""
    noncurrent_days: Optional[int] = None
    newer_noncurrent_versions: Optional[int] = None

    @classmethod
    def fromxml(
            cls: Type[NoncurrentVersionExpiration],
            element: ET.Element,
    ) -> NoncurrentVersionExpiration:
        """Create new object with values from XML element."""
        return cls(
            noncurrent_days=findint(element, "NoncurrentDays"),
            newer_noncurrent_versions=findint(
                element, "NewerNoncurrentVersions",
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.noncurrent_days is not None:
            SubElement(element, "NoncurrentDays", str(self.noncurrent_days))
        if self.newer_noncurrent_versions is not None:
            SubElement(element, "NewerNoncurrentVersions",
                       str(self.newer_noncurrent_versions))
        return element


@dataclass(frozen=True)
class AbortIncompleteMultipartUpload:
    """Abort incomplete multipart upload action."""
    days_after_initiation: int

    def __post_init__(self):
        if self.days_after_initiation is None:
            raise ValueError("days after initiation must be provided")

    @classmethod
    def fromxml(
            cls: Type[AbortIncompleteMultipartUpload],
            element: ET.Element,
    ) -> AbortIncompleteMultipartUpload:
        """Create new object with values from XML element."""
        return cls(cast(int, findint(element, "DaysAfterInitiation", True)))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(
            element, "DaysAfterInitiation", str(self.days_after_initiation),
        )
        return element


def _fromchild(element: ET.Element, name: str, cls):
    """Create object of cls from named child element if it exists."""
    elem = find(element, name)
    return None if elem is None else cls.fromxml(elem)


@dataclass(frozen=True)
class Rule:
    """Lifecycle rule."""
    status: str
    rule_filter: Optional[Filter] = None
    rule_id: Optional[str] = None
    abort_incomplete_multipart_upload: Optional[
        AbortIncompleteMultipartUpload] = None
    expiration: Optional[Expiration] = None
    noncurrent_version_expiration: Optional[
        NoncurrentVersionExpiration] = None
    noncurrent_version_transition: Optional[
        NoncurrentVersionTransition] = None
    transition: Optional[Transition] = None

    def __post_init__(self):
        Status.check(self.status)
        object.__setattr__(self, "rule_id", check_rule_id(self.rule_id))
        if (not self.abort_incomplete_multipart_upload
            and not self.expiration
            and not self.noncurrent_version_expiration
            and not self.noncurrent_version_transition
                and not self.transition):
            raise ValueError(
                "at least one of action (AbortIncompleteMultipartUpload, "
                "Expiration, NoncurrentVersionExpiration, "
                "NoncurrentVersionTransition or Transition) must be "
                "specified in a rule")

    @classmethod
    def fromxml(cls: Type[Rule], element: ET.Element) -> Rule:
        """Create new object with values from XML element."""
        return cls(
            status=cast(str, findtext(element, "Status", True)),
            rule_filter=_fromchild(element, "Filter", Filter),
            rule_id=findtext(element, "ID"),
            abort_incomplete_multipart_upload=_fromchild(
                element,
                "AbortIncompleteMultipartUpload",
                AbortIncompleteMultipartUpload,
            ),
            expiration=_fromchild(element, "Expiration", Expiration),
            noncurrent_version_expiration=_fromchild(
                element,
                "NoncurrentVersionExpiration",
                NoncurrentVersionExpiration,
            ),
            noncurrent_version_transition=_fromchild(
                element,
                "NoncurrentVersionTransition",
                NoncurrentVersionTransition,
            ),
            transition=_fromchild(element, "Transition", Transition),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Status", self.status)
        if self.rule_filter:
            self.rule_filter.toxml(SubElement(element, "Filter"))
        if self.rule_id is not None:
            SubElement(element, "ID", self.rule_id)
        if self.abort_incomplete_multipart_upload:
            self.abort_incomplete_multipart_upload.toxml(
                SubElement(element, "AbortIncompleteMultipartUpload"),
            )
        if self.expiration:
            self.expiration.toxml(SubElement(element, "Expiration"))
        if self.noncurrent_version_expiration:
            self.noncurrent_version_expiration.toxml(
                SubElement(element, "NoncurrentVersionExpiration"),
            )
        if self.noncurrent_version_transition:
            self.noncurrent_version_transition.toxml(
                SubElement(element, "NoncurrentVersionTransition"),
            )
        if self.transition:
            self.transition.toxml(SubElement(element, "Transition"))
        return element


@dataclass(frozen=True)
class LifecycleConfig:
    """Lifecycle configuration."""
    rules: list[Rule]

    def __post_init__(self):
        if not self.rules:
            raise ValueError("rules must be provided")

    @classmethod
    def fromxml(
            cls: Type[LifecycleConfig],
            element: ET.Element,
    ) -> LifecycleConfig:
        """Create new object with values from XML element."""
        return cls([Rule.fromxml(tag) for tag in findall(element, "Rule")])

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("LifecycleConfiguration")
        for rule in self.rules:
            rule.toxml(SubElement(element, "Rule"))
        return element
