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

"""Bucket replication configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from .commonconfig import Filter, Status
from .lifecycleconfig import check_rule_id
from .xml import Element, SubElement, find, findall, findint, findtext

_MAX_RULES = 1000


def _fromchild(element: ET.Element, name: str, cls):
    """Create object of cls from named child element if it exists."""
    elem = find(element, name)
    return None if elem is None else cls.fromxml(elem)


@dataclass(frozen=True)
class SseKmsEncryptedObjects(Status):
    """SSE KMS encrypted objects."""


@dataclass(frozen=True)
class ExistingObjectReplication(Status):
    """Existing object replication."""


@dataclass(frozen=True)
class DeleteMarkerReplication(Status):
    """Delete marker replication; disabled unless given."""
    status: str = Status.DISABLED


@dataclass(frozen=True)
class SourceSelectionCriteria:
    """Source selection criteria."""
    sse_kms_encrypted_objects: Optional[SseKmsEncryptedObjects] = None

    @classmethod
    def fromxml(
            cls: Type[SourceSelectionCriteria],
            element: ET.Element,
    ) -> SourceSelectionCriteria:
        """Create new object with values from XML element."""
        return cls(
            _fromchild(
                element, "SseKmsEncryptedObjects", SseKmsEncryptedObjects,
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.sse_kms_encrypted_objects:
            self.sse_kms_encrypted_objects.toxml(
                SubElement(element, "SseKmsEncryptedObjects"),
            )
        return element


MinutesT = TypeVar("MinutesT", bound="Minutes")


@dataclass(frozen=True)
class Minutes:
    """Time value in minutes."""
    minutes: Optional[int] = 15

    @classmethod
    def fromxml(cls: Type[MinutesT], element: ET.Element) -> MinutesT:
        """Create new object with values from XML element."""
        return cls(findint(element, "Minutes"))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.minutes is not None:
            SubElement(element, "Minutes", str(self.minutes))
        return element


@dataclass(frozen=True)
class Time(Minutes):
    """Replication time threshold."""


@dataclass(frozen=True)
class EventThreshold(Minutes):
    """Metrics event threshold."""


@dataclass(frozen=True)
class ReplicationTime:
    """Replication time control."""
    time: Time
    status: str

    def __post_init__(self):
        if not self.time:
            raise ValueError("time must be provided")
        Status.check(self.status)

    @classmethod
    def fromxml(
            cls: Type[ReplicationTime],
            element: ET.Element,
    ) -> ReplicationTime:
        """Create new object with values from XML element."""
        return cls(
            Time.fromxml(cast(ET.Element, find(element, "Time", True))),
            cast(str, findtext(element, "Status", True)),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        self.time.toxml(SubElement(element, "Time"))
        SubElement(element, "Status", self.status)
        return element


@dataclass(frozen=True)
class Metrics:
    """Replication metrics."""
    event_threshold: EventThreshold
    status: str

    def __post_init__(self):
        if not self.event_threshold:
            raise ValueError("event threshold must be provided")
        Status.check(self.status)

    @classmethod
    def fromxml(cls: Type[Metrics], element: ET.Element) -> Metrics:
        """Create new object with values from XML element."""
        return cls(
            EventThreshold.fromxml(
                cast(ET.Element, find(element, "EventThreshold", True)),
            ),
            cast(str, findtext(element, "Status", True)),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        self.event_threshold.toxml(SubElement(element, "EventThreshold"))
        SubElement(element, "Status", self.status)
        return element


@dataclass(frozen=True)
class EncryptionConfig:
    """Encryption configuration of destination."""
    replica_kms_key_id: Optional[str] = None

    @classmethod
    def fromxml(
            cls: Type[EncryptionConfig],
            element: ET.Element,
    ) -> EncryptionConfig:
        """Create new object with values from XML element."""
        return cls(findtext(element, "ReplicaKmsKeyID"))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.replica_kms_key_id is not None:
            SubElement(element, "ReplicaKmsKeyID", self.replica_kms_key_id)
        return element


@dataclass(frozen=True)
class AccessControlTranslation:
    """Access control translation."""
    owner: str = "Destination"

    def __post_init__(self):
        if not self.owner:
            raise ValueError("owner must be provided")

    @classmethod
    def fromxml(
            cls: Type[AccessControlTranslation],
            element: ET.Element,
    ) -> AccessControlTranslation:
        """Create new object with values from XML element."""
        return cls(cast(str, findtext(element, "Owner", True)))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Owner", self.owner)
        return element


@dataclass(frozen=True)
class Destination:
    """Replication destination."""
    bucket_arn: str
    access_control_translation: Optional[AccessControlTranslation] = None
    account: Optional[str] = None
    encryption_config: Optional[EncryptionConfig] = None
    metrics: Optional[Metrics] = None
    replication_time: Optional[ReplicationTime] = None
    storage_class: Optional[str] = None

    def __post_init__(self):
        if not self.bucket_arn:
            raise ValueError("bucket ARN must be provided")

    @classmethod
    def fromxml(cls: Type[Destination], element: ET.Element) -> Destination:
        """Create new object with values from XML element."""
        return cls(
            bucket_arn=cast(str, findtext(element, "Bucket", True)),
            access_control_translation=_fromchild(
                element, "AccessControlTranslation", AccessControlTranslation,
            ),
            account=findtext(element, "Account"),
            encryption_config=_fromchild(
                element, "EncryptionConfiguration", EncryptionConfig,
            ),
            metrics=_fromchild(element, "Metrics", Metrics),
            replication_time=_fromchild(
                element, "ReplicationTime", ReplicationTime,
            ),
            storage_class=findtext(element, "StorageClass"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.access_control_translation:
            self.access_control_translation.toxml(
                SubElement(element, "AccessControlTranslation"),
            )
        if self.account is not None:
            SubElement(element, "Account", self.account)
        SubElement(element, "Bucket", self.bucket_arn)
        if self.encryption_config:
            self.encryption_config.toxml(
                SubElement(element, "EncryptionConfiguration"),
            )
        if self.metrics:
            self.metrics.toxml(SubElement(element, "Metrics"))
        if self.replication_time:
            self.replication_time.toxml(SubElement(element, "ReplicationTime"))
        if self.storage_class:
            SubElement(element, "StorageClass", self.storage_class)
        return element


@dataclass(frozen=True)
class Rule:
    """Replication rule."""
    status: str
    destination: Destination
    rule_id: Optional[str] = None
    rule_filter: Optional[Filter] = None
    delete_marker_replication: Optional[DeleteMarkerReplication] = None
    existing_object_replication: Optional[ExistingObjectReplication] = None
    prefix: Optional[str] = None
    priority: Optional[int] = None
    source_selection_criteria: Optional[SourceSelectionCriteria] = None

    def __post_init__(self):
        Status.check(self.status)
        object.__setattr__(self, "rule_id", check_rule_id(self.rule_id))
        if not self.destination:
            raise ValueError("destination must be provided")
        if self.rule_filter is not None and self.prefix is not None:
            raise ValueError("only one of filter or prefix must be provided")
        if (
                self.rule_filter is not None and
                self.delete_marker_replication is None
        ):
            object.__setattr__(
                self, "delete_marker_replication", DeleteMarkerReplication(),
            )

    @classmethod
    def fromxml(cls: Type[Rule], element: ET.Element) -> Rule:
        """Create new object with values from XML element."""
        return cls(
            status=cast(str, findtext(element, "Status", True)),
            destination=Destination.fromxml(
                cast(ET.Element, find(element, "Destination", True)),
            ),
            rule_id=findtext(element, "ID"),
            rule_filter=_fromchild(element, "Filter", Filter),
            delete_marker_replication=_fromchild(
                element, "DeleteMarkerReplication", DeleteMarkerReplication,
            ),
            existing_object_replication=_fromchild(
                element,
                "ExistingObjectReplication",
                ExistingObjectReplication,
            ),
            prefix=findtext(element, "Prefix"),
            priority=findint(element, "Priority"),
            source_selection_criteria=_fromchild(
                element, "SourceSelectionCriteria", SourceSelectionCriteria,
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Status", self.status)
        if self.rule_id is not None:
            SubElement(element, "ID", self.rule_id)
        if self.rule_filter:
            self.rule_filter.toxml(SubElement(element, "Filter"))
        if self.delete_marker_replication:
            self.delete_marker_replication.toxml(
                SubElement(element, "DeleteMarkerReplication"),
            )
        self.destination.toxml(SubElement(element, "Destination"))
        if self.existing_object_replication:
            self.existing_object_replication.toxml(
                SubElement(element, "ExistingObjectReplication"),
            )
        if self.prefix is not None:
            SubElement(element, "Prefix", self.prefix)
        if self.priority is not None:
            SubElement(element, "Priority", str(self.priority))
        if self.source_selection_criteria:
            self.source_selection_criteria.toxml(
                SubElement(element, "SourceSelectionCriteria"),
            )
        return element


@dataclass(frozen=True)
class ReplicationConfig:
    """Replication configuration."""
    role: str
    rules: list[Rule]

    def __post_init__(self):
        if not self.rules:
            raise ValueError("rules must be provided")
        if len(self.rules) > _MAX_RULES:
            raise ValueError(
                f"more than {_MAX_RULES} rules are not supported",
            )

    @classmethod
    def fromxml(
            cls: Type[ReplicationConfig],
            element: ET.Element,
    ) -> ReplicationConfig:
        """Create new object with values from XML element."""
        return cls(
            cast(str, findtext(element, "Role", True)),
            [Rule.fromxml(tag) for tag in findall(element, "Rule")],
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("ReplicationConfiguration")
        SubElement(element, "Role", self.role)
        for rule in self.rules:
            rule.toxml(SubElement(element, "Rule"))
        return element
