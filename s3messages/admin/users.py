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

"""User and group messages of MinIO admin API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Type, Union

from ..enums import UserStatus
from ..helpers import check_non_empty_string


def _status(value: Union[str, UserStatus, None]) -> Optional[UserStatus]:
    """Convert status text; empty text means no status."""
    return UserStatus.fromstring(str(value)) if value else None


@dataclass(frozen=True)
class UserInfo:
    """User information."""
    secret_key: Optional[str] = None
    policy_name: Optional[str] = None
    member_of: list[str] = field(default_factory=list)
    status: Optional[UserStatus] = None

    def __post_init__(self):
        object.__setattr__(self, "status", _status(self.status))

    @property
    def policies(self) -> list[str]:
        """Get policy names attached to this user."""
        return [
            name.strip()
            for name in (self.policy_name or "").split(",") if name.strip()
        ]

    @classmethod
    def fromjson(cls: Type[UserInfo], data: dict[str, Any]) -> UserInfo:
        """Create new object with values from JSON data."""
        return cls(
            secret_key=data.get("secretKey"),
            policy_name=data.get("policyName"),
            member_of=data.get("memberOf") or [],
            status=data.get("status"),
        )

    @classmethod
    def loads(cls: Type[UserInfo], text: str) -> UserInfo:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))


def parse_users(text: str) -> dict[str, UserInfo]:
    """Parse ListUsers API response into access key to user mapping."""
    return {
        access_key: UserInfo.fromjson(data)
        for access_key, data in json.loads(text).items()
    }


@dataclass(frozen=True)
class GroupInfo:
    """Group information."""
    name: Optional[str] = None
    status: Optional[UserStatus] = None
    members: list[str] = field(default_factory=list)
    policy: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "status", _status(self.status))

    @classmethod
    def fromjson(cls: Type[GroupInfo], data: dict[str, Any]) -> GroupInfo:
        """Create new object with values from JSON data."""
        return cls(
            name=data.get("name"),
            status=data.get("status"),
            members=data.get("members") or [],
            policy=data.get("policy"),
        )

    @classmethod
    def loads(cls: Type[GroupInfo], text: str) -> GroupInfo:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))


@dataclass(frozen=True)
class GroupAddUpdateRemoveInfo:
    """Request to add, update or remove members of a group."""
    group: str
    group_status: Optional[UserStatus] = None
    members: list[str] = field(default_factory=list)
    is_remove: bool = False

    def __post_init__(self):
        check_non_empty_string(self.group, "group")
        object.__setattr__(self, "group_status", _status(self.group_status))

    def tojson(self) -> dict[str, Any]:
        """Convert to JSON data."""
        data: dict[str, Any] = {"group": self.group}
        if self.group_status is not None:
            data["groupStatus"] = str(self.group_status)
        data["members"] = list(self.members)
        data["isRemove"] = self.is_remove
        return data
