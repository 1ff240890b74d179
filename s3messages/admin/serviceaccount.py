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

"""Service account messages of MinIO admin API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Type, Union

from ..enums import ServiceAccountStatus
from ..helpers import check_non_empty_string
from ..time import from_rfc3339, to_iso8601utc

PolicyT = Union[str, dict[str, Any]]


def _status(
        value: Union[str, ServiceAccountStatus, None],
) -> Optional[ServiceAccountStatus]:
    """Convert status text; empty text means no status."""
    return ServiceAccountStatus.fromstring(str(value)) if value else None


def _policy_text(policy: PolicyT) -> str:
    """Get policy as JSON text."""
    return policy if isinstance(policy, str) else json.dumps(policy)


@dataclass(frozen=True)
class AddServiceAccountReq:
    """Request to add a service account."""
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    policy: Optional[PolicyT] = None
    target_user: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    expiration: Optional[datetime] = None

    def __post_init__(self):
        if (self.access_key is None) ^ (self.secret_key is None):
            raise ValueError("both access key and secret key must be provided")
        if self.access_key == "" or self.secret_key == "":
            raise ValueError("access key or secret key must not be empty")

    def tojson(self) -> dict[str, Any]:
        """Convert to JSON data."""
        data: dict[str, Any] = {}
        if self.access_key is not None:
            data["accessKey"] = self.access_key
            data["secretKey"] = self.secret_key
        if self.policy is not None:
            data["policy"] = _policy_text(self.policy)
        if self.target_user is not None:
            data["targetUser"] = self.target_user
        if self.name is not None:
            data["name"] = self.name
        if self.description is not None:
            data["description"] = self.description
        if self.expiration is not None:
            data["expiration"] = to_iso8601utc(self.expiration)
        return data


@dataclass(frozen=True)
class UpdateServiceAccountReq:
    """Request to update a service account."""
    new_secret_key: Optional[str] = None
    new_policy: Optional[PolicyT] = None
    new_status: Optional[ServiceAccountStatus] = None
    new_name: Optional[str] = None
    new_description: Optional[str] = None
    new_expiration: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "new_status", _status(self.new_status))
        if not any([
                self.new_secret_key, self.new_policy, self.new_status,
                self.new_name, self.new_description, self.new_expiration,
        ]):
            raise ValueError(
                "at least one of new secret key, policy, status, name, "
                "description or expiration must be specified",
            )

    def tojson(self) -> dict[str, Any]:
        """Convert to JSON data."""
        data: dict[str, Any] = {}
        if self.new_secret_key:
            data["newSecretKey"] = self.new_secret_key
        if self.new_policy:
            data["newPolicy"] = _policy_text(self.new_policy)
        if self.new_status is not None:
            data["newStatus"] = str(self.new_status)
        if self.new_name:
            data["newName"] = self.new_name
        if self.new_description:
            data["newDescription"] = self.new_description
        if self.new_expiration is not None:
            data["newExpiration"] = to_iso8601utc(self.new_expiration)
        return data


@dataclass(frozen=True)
class GetServiceAccountInfoResp:
    """Service account information."""
    parent_user: Optional[str] = None
    account_status: Optional[ServiceAccountStatus] = None
    implied_policy: bool = False
    policy: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    expiration: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(
            self, "account_status", _status(self.account_status),
        )

    @classmethod
    def fromjson(
            cls: Type[GetServiceAccountInfoResp],
            data: dict[str, Any],
    ) -> GetServiceAccountInfoResp:
        """Create new object with values from JSON data."""
        return cls(
            parent_user=data.get("parentUser"),
            account_status=data.get("accountStatus"),
            implied_policy=bool(data.get("impliedPolicy")),
            policy=data.get("policy"),
            name=data.get("name"),
            description=data.get("description"),
            expiration=from_rfc3339(data.get("expiration")),
        )

    @classmethod
    def loads(
            cls: Type[GetServiceAccountInfoResp],
            text: str,
    ) -> GetServiceAccountInfoResp:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))


@dataclass(frozen=True)
class ServiceAccountInfo:
    """Service account entry of ListServiceAccounts API."""
    access_key: str
    parent_user: Optional[str] = None
    account_status: Optional[ServiceAccountStatus] = None
    implied_policy: bool = False
    expiration: Optional[datetime] = None

    def __post_init__(self):
        check_non_empty_string(self.access_key, "access key")
        object.__setattr__(
            self, "account_status", _status(self.account_status),
        )

    @classmethod
    def fromjson(
            cls: Type[ServiceAccountInfo],
            data: dict[str, Any],
    ) -> ServiceAccountInfo:
        """Create new object with values from JSON data."""
        return cls(
            access_key=data.get("accessKey"),
            parent_user=data.get("parentUser"),
            account_status=data.get("accountStatus"),
            implied_policy=bool(data.get("impliedPolicy")),
            expiration=from_rfc3339(data.get("expiration")),
        )


@dataclass(frozen=True)
class ListServiceAccountResponse:
    """ListServiceAccounts API response."""
    accounts: list[ServiceAccountInfo] = field(default_factory=list)

    @classmethod
    def fromjson(
            cls: Type[ListServiceAccountResponse],
            data: dict[str, Any],
    ) -> ListServiceAccountResponse:
        """Create new object with values from JSON data."""
        return cls(
            accounts=[
                ServiceAccountInfo.fromjson(account)
                for account in data.get("accounts") or []
            ],
        )

    @classmethod
    def loads(
            cls: Type[ListServiceAccountResponse],
            text: str,
    ) -> ListServiceAccountResponse:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))
