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

"""Bucket notification event records received from bucket listening."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Type, Union

from .enums import EventType
from .time import from_event_time


def _event_name(value: Optional[str]) -> Optional[Union[EventType, str]]:
    """Convert to EventType if known."""
    if not value:
        return value
    try:
        return EventType.fromstring(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class Bucket:
    """Bucket information of event."""
    name: Optional[str] = None
    owner: Optional[str] = None
    arn: Optional[str] = None

    @classmethod
    def fromjson(cls: Type[Bucket], data: dict[str, Any]) -> Bucket:
        """Create new object with values from JSON data."""
        return cls(
            name=data.get("name"),
            owner=(data.get("ownerIdentity") or {}).get("principalId"),
            arn=data.get("arn"),
        )


@dataclass(frozen=True)
class Object:
    """Object information of event."""
    key: Optional[str] = None
    size: int = -1
    etag: Optional[str] = None
    version_id: Optional[str] = None
    sequencer: Optional[str] = None
    user_metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def fromjson(cls: Type[Object], data: dict[str, Any]) -> Object:
        """Create new object with values from JSON data."""
        size = data.get("size")
        return cls(
            key=data.get("key"),
            size=-1 if size is None else int(size),
            etag=data.get("eTag"),
            version_id=data.get("versionId"),
            sequencer=data.get("sequencer"),
            user_metadata=data.get("userMetadata") or {},
        )


@dataclass(frozen=True)
class Source:
    """Source information of event."""
    host: Optional[str] = None
    port: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def fromjson(cls: Type[Source], data: dict[str, Any]) -> Source:
        """Create new object with values from JSON data."""
        return cls(
            host=data.get("host"),
            port=data.get("port"),
            user_agent=data.get("userAgent"),
        )


@dataclass(frozen=True)
class Event:
    """Single event record."""
    event_version: Optional[str] = None
    event_source: Optional[str] = None
    region: Optional[str] = None
    event_time: Optional[datetime] = None
    event_type: Optional[Union[EventType, str]] = None
    user_id: Optional[str] = None
    request_parameters: dict[str, str] = field(default_factory=dict)
    response_elements: dict[str, str] = field(default_factory=dict)
    schema_version: Optional[str] = None
    configuration_id: Optional[str] = None
    bucket: Optional[Bucket] = None
    object: Optional[Object] = None
    source: Optional[Source] = None

    @property
    def bucket_name(self) -> Optional[str]:
        """Get bucket name."""
        return self.bucket.name if self.bucket else None

    @property
    def object_name(self) -> Optional[str]:
        """Get object name."""
        return self.object.key if self.object else None

    @property
    def object_size(self) -> int:
        """Get object size; -1 if unknown."""
        return self.object.size if self.object else -1

    @classmethod
    def fromjson(cls: Type[Event], data: dict[str, Any]) -> Event:
        """Create new object with values from JSON data."""
        s3 = data.get("s3") or {}
        return cls(
            event_version=data.get("eventVersion"),
            event_source=data.get("eventSource"),
            region=data.get("awsRegion"),
            event_time=from_event_time(data.get("eventTime")),
            event_type=_event_name(data.get("eventName")),
            user_id=(data.get("userIdentity") or {}).get("principalId"),
            request_parameters=data.get("requestParameters") or {},
            response_elements=data.get("responseElements") or {},
            schema_version=s3.get("s3SchemaVersion"),
            configuration_id=s3.get("configurationId"),
            bucket=(
                Bucket.fromjson(s3["bucket"]) if s3.get("bucket") else None
            ),
            object=(
                Object.fromjson(s3["object"]) if s3.get("object") else None
            ),
            source=(
                Source.fromjson(data["source"]) if data.get("source") else None
            ),
        )


@dataclass(frozen=True)
class NotificationRecords:
    """Event records of a bucket notification."""
    events: list[Event] = field(default_factory=list)

    @classmethod
    def fromjson(
            cls: Type[NotificationRecords],
            data: dict[str, Any],
    ) -> NotificationRecords:
        """Create new object with values from JSON data."""
        return cls(
            events=[
                Event.fromjson(item) for item in data.get("Records") or []
            ],
        )

    @classmethod
    def loads(
            cls: Type[NotificationRecords],
            text: str,
    ) -> NotificationRecords:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))
