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

"""Bucket versioning configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type
from xml.etree import ElementTree as ET

from .xml import Element, SubElement, findbool, findtext, findtexts

DISABLED = "Disabled"
ENABLED = "Enabled"
OFF = "Off"
SUSPENDED = "Suspended"


@dataclass(frozen=True)
class VersioningConfig:
    """Versioning configuration."""
    status: Optional[str] = None
    mfa_delete: Optional[str] = None
    excluded_prefixes: Optional[list[str]] = None
    exclude_folders: bool = False

    def __post_init__(self):
        if self.status is not None and self.status not in [
                ENABLED, SUSPENDED,
        ]:
            raise ValueError(f"status must be {ENABLED} or {SUSPENDED}")
        if self.mfa_delete is not None and self.mfa_delete not in [
                ENABLED, DISABLED,
        ]:
            raise ValueError(f"MFA delete must be {ENABLED} or {DISABLED}")

    @property
    def status_string(self) -> str:
        """Get status; 'Off' if versioning was never configured."""
        return self.status or OFF

    @classmethod
    def fromxml(
            cls: Type[VersioningConfig],
            element: ET.Element,
    ) -> VersioningConfig:
        """Create new object with values from XML element."""
        return cls(
            status=findtext(element, "Status"),
            mfa_delete=findtext(element, "MFADelete"),
            excluded_prefixes=(
                findtexts(element, "ExcludedPrefixes/Prefix") or None
            ),
            exclude_folders=findbool(element, "ExcludeFolders"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("VersioningConfiguration")
        if self.status:
            SubElement(element, "Status", self.status)
        if self.mfa_delete:
            SubElement(element, "MFADelete", self.mfa_delete)
        for prefix in self.excluded_prefixes or []:
            SubElement(
                SubElement(element, "ExcludedPrefixes"), "Prefix", prefix,
            )
        if self.exclude_folders:
            SubElement(element, "ExcludeFolders", "true")
        return element
