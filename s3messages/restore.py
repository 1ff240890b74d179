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

"""Request of RestoreObject API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
from xml.etree import ElementTree as ET

from .acl import AccessControlList
from .commonconfig import Tags
from .enums import CannedAcl, SseAlgorithm, Tier
from .helpers import check_non_empty_string
from .select import InputSerialization, OutputSerialization
from .xml import Element, SubElement


@dataclass(frozen=True)
class GlacierJobParameters:
    """Glacier job parameters of restore request."""
    tier: Tier

    def __post_init__(self):
        object.__setattr__(self, "tier", Tier.fromstring(str(self.tier)))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "GlacierJobParameters")
        SubElement(element, "Tier", str(self.tier))
        return element


@dataclass(frozen=True)
class SelectParameters:
    """Select parameters of restore request."""
    expression: str
    input_serialization: InputSerialization
    output_serialization: OutputSerialization

    def __post_init__(self):
        check_non_empty_string(self.expression, "expression")

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "SelectParameters")
        SubElement(element, "Expression", self.expression)
        SubElement(element, "ExpressionType", "SQL")
        self.input_serialization.toxml(
            SubElement(element, "InputSerialization"),
        )
        self.output_serialization.toxml(
            SubElement(element, "OutputSerialization"),
        )
        return element


@dataclass(frozen=True)
class Encryption:
    """Encryption of restored object output."""
    encryption_type: SseAlgorithm
    kms_context: Optional[str] = None
    kms_key_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self,
            "encryption_type",
            SseAlgorithm.fromstring(str(self.encryption_type)),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "Encryption")
        SubElement(element, "EncryptionType", str(self.encryption_type))
        if self.kms_context is not None:
            SubElement(element, "KMSContext", self.kms_context)
        if self.kms_key_id is not None:
            SubElement(element, "KMSKeyId", self.kms_key_id)
        return element


@dataclass(frozen=True)
class S3:
    """S3 output location of restore request."""
    bucket_name: str
    prefix: str
    access_control_list: Optional[AccessControlList] = None
    canned_acl: Optional[Union[CannedAcl, str]] = None
    encryption: Optional[Encryption] = None
    storage_class: Optional[str] = None
    tagging: Optional[Tags] = None
    user_metadata: Optional[dict[str, str]] = None

    def __post_init__(self):
        check_non_empty_string(self.bucket_name, "bucket name")
        if self.prefix is None:
            raise ValueError("prefix must be provided")
        if self.canned_acl is not None:
            object.__setattr__(
                self, "canned_acl", CannedAcl.fromstring(str(self.canned_acl)),
            )
        if self.user_metadata is not None and not self.user_metadata:
            raise ValueError("user metadata must not be empty")

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "S3")
        if self.access_control_list is not None:
            self.access_control_list.toxml(
                SubElement(element, "AccessControlList"),
            )
        SubElement(element, "BucketName", self.bucket_name)
        if self.canned_acl is not None:
            SubElement(element, "CannedACL", str(self.canned_acl))
        if self.encryption is not None:
            self.encryption.toxml(element)
        SubElement(element, "Prefix", self.prefix)
        if self.storage_class is not None:
            SubElement(element, "StorageClass", self.storage_class)
        if self.tagging is not None:
            self.tagging.toxml(
                SubElement(SubElement(element, "Tagging"), "TagSet"),
            )
        if self.user_metadata is not None:
            tag = SubElement(element, "UserMetadata")
            for name, value in self.user_metadata.items():
                entry = SubElement(tag, "MetadataEntry")
                SubElement(entry, "Name", name)
                SubElement(entry, "Value", value)
        return element


@dataclass(frozen=True)
class OutputLocation:
    """Output location of restore request."""
    s3: S3

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "OutputLocation")
        self.s3.toxml(element)
        return element


@dataclass(frozen=True)
class RestoreRequest:
    """Restore object request."""
    days: Optional[int] = None
    glacier_job_parameters: Optional[GlacierJobParameters] = None
    tier: Optional[Tier] = None
    description: Optional[str] = None
    select_parameters: Optional[SelectParameters] = None
    output_location: Optional[OutputLocation] = None

    def __post_init__(self):
        if self.days is not None and self.days <= 0:
            raise ValueError("days must be positive")
        if self.tier is not None:
            object.__setattr__(self, "tier", Tier.fromstring(str(self.tier)))

    @property
    def request_type(self) -> Optional[str]:
        """Get restore request type."""
        return "SELECT" if self.select_parameters is not None else None

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("RestoreRequest")
        if self.days is not None:
            SubElement(element, "Days", str(self.days))
        if self.glacier_job_parameters is not None:
            self.glacier_job_parameters.toxml(element)
        if self.request_type is not None:
            SubElement(element, "Type", self.request_type)
        if self.tier is not None:
            SubElement(element, "Tier", str(self.tier))
        if self.description is not None:
            SubElement(element, "Description", self.description)
        if self.select_parameters is not None:
            self.select_parameters.toxml(element)
        if self.output_location is not None:
            self.output_location.toxml(element)
        return element
