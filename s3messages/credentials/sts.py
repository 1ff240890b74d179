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

"""Responses of STS AssumeRole* APIs and web identity tokens."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional, Type, cast
from xml.etree import ElementTree as ET

from ..time import from_iso8601utc
from ..xml import find, findtext
from .credentials import Credentials

ASSUME_ROLE_RESULT = "AssumeRoleResult"
ASSUME_ROLE_WITH_WEB_IDENTITY_RESULT = "AssumeRoleWithWebIdentityResult"
ASSUME_ROLE_WITH_CLIENT_GRANTS_RESULT = "AssumeRoleWithClientGrantsResult"
ASSUME_ROLE_WITH_LDAP_IDENTITY_RESULT = "AssumeRoleWithLDAPIdentityResult"
ASSUME_ROLE_WITH_CERTIFICATE_RESULT = "AssumeRoleWithCertificateResult"

RESULT_NAMES = (
    ASSUME_ROLE_RESULT,
    ASSUME_ROLE_WITH_WEB_IDENTITY_RESULT,
    ASSUME_ROLE_WITH_CLIENT_GRANTS_RESULT,
    ASSUME_ROLE_WITH_LDAP_IDENTITY_RESULT,
    ASSUME_ROLE_WITH_CERTIFICATE_RESULT,
)

MIN_DURATION_SECONDS = int(timedelta(minutes=15).total_seconds())
MAX_DURATION_SECONDS = int(timedelta(days=7).total_seconds())
DEFAULT_DURATION_SECONDS = int(timedelta(hours=1).total_seconds())


def parse_sts_response(data: str | bytes, result_name: str) -> Credentials:
    """Parse credentials from AssumeRole* API response body."""
    if result_name not in RESULT_NAMES:
        raise ValueError(f"unknown STS result {result_name}")
    element = ET.fromstring(data)
    element = cast(ET.Element, find(element, result_name, True))
    element = cast(ET.Element, find(element, "Credentials", True))
    return Credentials(
        cast(str, findtext(element, "AccessKeyId", True)),
        cast(str, findtext(element, "SecretAccessKey", True)),
        findtext(element, "SessionToken"),
        from_iso8601utc(findtext(element, "Expiration")),
    )


def get_duration_seconds(expiry: int, requested: int = 0) -> int:
    """
    Get DurationSeconds value for an STS request clamped to allowed range.
    Requested duration takes precedence over token expiry; non-positive
    value means server default.
    """
    if requested:
        expiry = requested

    if expiry > MAX_DURATION_SECONDS:
        return MAX_DURATION_SECONDS

    if expiry <= 0:
        return expiry

    return max(expiry, MIN_DURATION_SECONDS)


@dataclass(frozen=True)
class WebIdentityToken:
    """JWT token returned by an identity provider."""
    token: str
    expiry: int = 0
    policy: Optional[str] = None

    def __post_init__(self):
        if not self.token:
            raise ValueError("token must not be empty")

    @classmethod
    def fromjson(
            cls: Type[WebIdentityToken],
            data: dict[str, Any],
    ) -> WebIdentityToken:
        """Create new object with values from JSON data."""
        return cls(
            token=data.get("access_token") or data.get("id_token") or "",
            expiry=int(data.get("expires_in") or 0),
            policy=data.get("policy"),
        )

    @classmethod
    def loads(cls: Type[WebIdentityToken], text: str) -> WebIdentityToken:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))

    @classmethod
    def fromfile(
            cls: Type[WebIdentityToken],
            token_file: str,
    ) -> WebIdentityToken:
        """Create new object from raw token stored in a file."""
        try:
            with open(token_file, encoding="utf-8") as file:
                return cls(file.read().strip())
        except (IOError, OSError) as exc:
            raise ValueError(f"error in reading file {token_file}") from exc

    def duration_seconds(self, requested: int = 0) -> int:
        """Get DurationSeconds value for this token."""
        return get_duration_seconds(self.expiry, requested)
