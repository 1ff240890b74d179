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

"""Object lock configuration, object retention and legal hold."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Type, Union, cast
from xml.etree import ElementTree as ET

from .enums import RetentionDurationUnit, RetentionMode
from .time import from_iso8601utc, to_iso8601utc
from .xml import Element, SubElement, find, findtext


def _to_mode(value: Union[RetentionMode, str]) -> RetentionMode:
    """Convert to RetentionMode."""
    if isinstance(value, RetentionMode):
        return value
    try:
        return RetentionMode.fromstring(value)
    except ValueError as exc:
        raise ValueError(
            f"mode must be {RetentionMode.GOVERNANCE} or "
            f"{RetentionMode.COMPLIANCE}",
        ) from exc


@dataclass(frozen=True)
class ObjectLockConfig:
    """Object lock configuration of a bucket."""
    mode: Optional[RetentionMode] = None
    duration: Optional[int] = None
    duration_unit: Optional[RetentionDurationUnit] = None

    def __post_init__(self):
        if (self.mode is not None) ^ (self.duration is not None):
            if self.mode is None:
                raise ValueError("mode must be provided")
            raise ValueError("duration must be provided")
        if self.mode is None:
            if self.duration_unit is not None:
                raise ValueError(
                    "duration unit must not be provided without duration",
                )
            return
        object.__setattr__(self, "mode", _to_mode(self.mode))
        if cast(int, self.duration) <= 0:
            raise ValueError("duration must be positive")
        try:
            unit = RetentionDurationUnit.fromstring(
                str(self.duration_unit).title(),
            )
        except ValueError as exc:
            raise ValueError(
                f"duration unit must be {RetentionDurationUnit.DAYS} or "
                f"{RetentionDurationUnit.YEARS}",
            ) from exc
        object.__setattr__(self, "duration_unit", unit)

    @classmethod
    def fromxml(
            cls: Type[ObjectLockConfig],
            element: ET.Element,
    ) -> ObjectLockConfig:
        """Create new object with values from XML element."""
        elem = find(element, "Rule")
        if elem is None:
            return cls()
        elem = cast(ET.Element, find(elem, "DefaultRetention", True))
        mode = cast(str, findtext(elem, "Mode", True))
        for unit in RetentionDurationUnit:
            duration = findtext(elem, unit.value)
            if duration:
                return cls(mode, int(duration), unit)
        raise ValueError(
            f"XML element <{RetentionDurationUnit.DAYS}> or "
            f"<{RetentionDurationUnit.YEARS}> not found",
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("ObjectLockConfiguration")
        SubElement(element, "ObjectLockEnabled", "Enabled")
        if self.mode:
            rule = SubElement(element, "Rule")
            retention = SubElement(rule, "DefaultRetention")
            SubElement(retention, "Mode", str(self.mode))
            SubElement(
                retention, str(self.duration_unit), str(self.duration),
            )
        return element


@dataclass(frozen=True)
class Retention:
    """Object retention configuration."""
    mode: RetentionMode
    retain_until_date: datetime

    def __post_init__(self):
        object.__setattr__(self, "mode", _to_mode(self.mode))
        if not self.retain_until_date:
            raise ValueError("retain until date must be provided")

    @classmethod
    def fromxml(cls: Type[Retention], element: ET.Element) -> Retention:
        """Create new object with values from XML element."""
        return cls(
            cast(str, findtext(element, "Mode", True)),
            cast(
                datetime,
                from_iso8601utc(findtext(element, "RetainUntilDate", True)),
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("Retention")
        SubElement(element, "Mode", str(self.mode))
        SubElement(
            element,
            "RetainUntilDate",
            to_iso8601utc(self.retain_until_date),
        )
        return element


@dataclass(frozen=True)
class LegalHold:
    """Object legal hold."""
    status: bool = False

    @classmethod
    def fromxml(cls: Type[LegalHold], element: ET.Element) -> LegalHold:
        """Create new object with values from XML element."""
        return cls(findtext(element, "Status") == "ON")

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("LegalHold")
        SubElement(element, "Status", "ON" if self.status else "OFF")
        return element
