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

"""Access key, secret key and session token of S3 requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional, Type

from ..helpers import check_non_empty_string
from ..time import as_utc, from_rfc3339, utcnow

# Credentials expiring within this window are refreshed early.
EXPIRY_BUFFER = timedelta(seconds=10)


@dataclass(frozen=True)
class Credentials:
    """
    Credentials of a user or of a temporary STS session.

    Expiration is normalized to timezone aware UTC; a naive value is taken
    as UTC.
    """

    access_key: str
    secret_key: str
    session_token: Optional[str] = None
    expiration: Optional[datetime] = None

    def __post_init__(self):
        check_non_empty_string(self.access_key, "access key")
        check_non_empty_string(self.secret_key, "secret key")
        if self.expiration:
            object.__setattr__(self, "expiration", as_utc(self.expiration))

    @classmethod
    def fromjson(
            cls: Type[Credentials],
            data: dict[str, Any],
    ) -> Credentials:
        """
        Create new object from JSON data having accessKey, secretKey and
        optional sessionToken and RFC-3339 expiration.
        """
        return cls(
            data.get("accessKey"),  # type: ignore[arg-type]
            data.get("secretKey"),  # type: ignore[arg-type]
            data.get("sessionToken") or None,
            from_rfc3339(data.get("expiration") or None),
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether credentials expire within EXPIRY_BUFFER of now."""
        if not self.expiration:
            return False
        return self.expiration < as_utc(now or utcnow()) + EXPIRY_BUFFER
