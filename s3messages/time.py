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

"""Time formatters of S3 message fields and headers."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import cast

_WEEK_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct",
    "Nov", "Dec",
]
_MAX_FRACTION_DIGITS = 9
_OFFSET_REGEX = re.compile(r"^[+-]\d{2}:\d{2}$")


def _to_utc(value: datetime) -> datetime:
    """Convert to naive UTC time if value is timezone aware."""
    return (
        value.astimezone(timezone.utc).replace(tzinfo=None)
        if value.tzinfo else value
    )


def as_utc(value: datetime) -> datetime:
    """Convert to timezone aware UTC time; naive value is taken as UTC."""
    return (
        value.astimezone(timezone.utc) if value.tzinfo
        else value.replace(tzinfo=timezone.utc)
    )


def from_iso8601utc(value: str | None) -> datetime | None:
    """
    Parse UTC ISO-8601 formatted string like '2006-01-02T15:04:05.999Z' to
    datetime. Zero to nine fraction digits are accepted; digits beyond
    microsecond precision are dropped.
    """
    if value is None:
        return None

    if not value.endswith("Z"):
        raise ValueError(f"time data {value} does not match ISO-8601 format")

    base, dot, fraction = value[:-1].partition(".")
    time = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
    if dot:
        if (
                not fraction or not fraction.isdigit() or
                len(fraction) > _MAX_FRACTION_DIGITS
        ):
            raise ValueError(
                f"time data {value} does not match ISO-8601 format",
            )
        time = time.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return time.replace(tzinfo=timezone.utc)


def to_iso8601utc(value: datetime | None) -> str | None:
    """Format datetime into UTC ISO-8601 string with millisecond precision."""
    if value is None:
        return None

    value = _to_utc(value)
    return (
        value.strftime("%Y-%m-%dT%H:%M:%S.") + value.strftime("%f")[:3] + "Z"
    )


def from_minio_time(value: str) -> datetime:
    """Parse fractionless time like '2006-01-02T15:04:05Z' used by MinIO."""
    return datetime.strptime(
        value, "%Y-%m-%dT%H:%M:%SZ",
    ).replace(tzinfo=timezone.utc)


def from_event_time(value: str | None) -> datetime | None:
    """Parse event time which is either ISO-8601 or MinIO format."""
    if value is None:
        return None
    try:
        return from_iso8601utc(value)
    except ValueError:
        return from_minio_time(value)


def from_rfc3339(value: str | None) -> datetime | None:
    """
    Parse RFC-3339 time like '2006-01-02T15:04:05.999+07:00' used by MinIO
    admin API. Result is converted to UTC.
    """
    if value is None or value.endswith("Z"):
        return from_iso8601utc(value)
    offset = value[-6:]
    if not _OFFSET_REGEX.match(offset):
        raise ValueError(f"time data {value} does not match RFC-3339 format")
    delta = datetime.strptime(offset, "%z").utcoffset()
    return cast(datetime, from_iso8601utc(value[:-6] + "Z")) - cast(
        timedelta, delta,
    )


def from_http_header(value: str) -> datetime:
    """Parse HTTP header date formatted string to datetime."""
    if len(value) != 29:
        raise ValueError(
            f"time data {value} does not match HTTP header format")

    if value[0:3] not in _WEEK_DAYS or value[3] != ",":
        raise ValueError(
            f"time data {value} does not match HTTP header format")
    weekday = _WEEK_DAYS.index(value[0:3])

    day = datetime.strptime(value[4:8], " %d ").day

    if value[8:11] not in _MONTHS:
        raise ValueError(
            f"time data {value} does not match HTTP header format")
    month = _MONTHS.index(value[8:11])

    time = datetime.strptime(value[11:], " %Y %H:%M:%S GMT")
    time = time.replace(day=day, month=month+1, tzinfo=timezone.utc)

    if weekday != time.weekday():
        raise ValueError(
            f"time data {value} does not match HTTP header format")

    return time


def to_http_header(value: datetime) -> str:
    """Format datatime into HTTP header date formatted string."""
    value = _to_utc(value)
    weekday = _WEEK_DAYS[value.weekday()]
    day = value.strftime(" %d ")
    month = _MONTHS[value.month - 1]
    suffix = value.strftime(" %Y %H:%M:%S GMT")
    return f"{weekday},{day}{month}{suffix}"


def to_amz_date(value: datetime) -> str:
    """Format datetime into AMZ date formatted string."""
    return _to_utc(value).strftime("%Y%m%dT%H%M%SZ")


def to_signer_date(value: datetime) -> str:
    """Format datetime into SignatureV4 date formatted string."""
    return _to_utc(value).strftime("%Y%m%d")


def utcnow() -> datetime:
    """Timezone aware current UTC time."""
    return datetime.now(timezone.utc)
