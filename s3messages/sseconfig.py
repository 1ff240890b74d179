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

"""Bucket server-side encryption configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, Union, cast
from xml.etree import ElementTree as ET

from .enums import SseAlgorithm
from .xml import Element, SubElement, find, findtext


@dataclass(frozen=True)
class Rule:
    """Server-side encryption rule."""
    sse_algorithm: SseAlgorithm
    kms_master_key_id: Optional[str] = None

    def __post_init__(self):
        algorithm: Union[SseAlgorithm, str] = self.sse_algorithm
        if not isinstance(algorithm, SseAlgorithm):
            algorithm = SseAlgorithm.fromstring(algorithm)
        object.__setattr__(self, "sse_algorithm", algorithm)
        if (
                self.kms_master_key_id is not None and
                algorithm != SseAlgorithm.AWS_KMS
        ):
            raise ValueError(
                f"KMS master key ID is allowed only for "
                f"{SseAlgorithm.AWS_KMS} algorithm",
            )

    @classmethod
    def new_sse_s3_rule(cls: Type[Rule]) -> Rule:
        """Create SSE-S3 rule."""
        return cls(SseAlgorithm.AES256)

    @classmethod
    def new_sse_kms_rule(
            cls: Type[Rule],
            kms_master_key_id: Optional[str] = None,
    ) -> Rule:
        """Create SSE-KMS rule."""
        return cls(SseAlgorithm.AWS_KMS, kms_master_key_id)

    @classmethod
    def fromxml(cls: Type[Rule], element: ET.Element) -> Rule:
        """Create new object with values from XML element."""
        element = cast(
            ET.Element,
            find(element, "ApplyServerSideEncryptionByDefault", True),
        )
        return cls(
            cast(str, findtext(element, "SSEAlgorithm", True)),
            findtext(element, "KMSMasterKeyID"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        tag = SubElement(element, "ApplyServerSideEncryptionByDefault")
        SubElement(tag, "SSEAlgorithm", str(self.sse_algorithm))
        if self.kms_master_key_id is not None:
            SubElement(tag, "KMSMasterKeyID", self.kms_master_key_id)
        return element


@dataclass(frozen=True)
class SSEConfig:
    """Server-side encryption configuration."""
    rule: Rule

    def __post_init__(self):
        if not self.rule:
            raise ValueError("rule must be provided")

    @classmethod
    def fromxml(cls: Type[SSEConfig], element: ET.Element) -> SSEConfig:
        """Create new object with values from XML element."""
        return cls(
            Rule.fromxml(cast(ET.Element, find(element, "Rule", True))),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("ServerSideEncryptionConfiguration")
        self.rule.toxml(SubElement(element, "Rule"))
        return element
