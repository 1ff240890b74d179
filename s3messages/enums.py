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

"""Enumerations used in S3 and MinIO admin messages."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

EnumT = TypeVar("EnumT", bound="StringEnum")


class StringEnum(str, Enum):
    """Enum whose string form is its wire value."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def fromstring(cls: Type[EnumT], value: str) -> EnumT:
        """Get member for wire value."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"unknown {cls.__name__} '{value}'")


class EventType(StringEnum):
    """Bucket notification event type."""
    OBJECT_CREATED_ANY = "s3:ObjectCreated:*"
    OBJECT_CREATED_PUT = "s3:ObjectCreated:Put"
    OBJECT_CREATED_POST = "s3:ObjectCreated:Post"
    OBJECT_CREATED_COPY = "s3:ObjectCreated:Copy"
    OBJECT_CREATED_COMPLETE_MULTIPART_UPLOAD = (
        "s3:ObjectCreated:CompleteMultipartUpload"
    )
    OBJECT_ACCESSED_GET = "s3:ObjectAccessed:Get"
    OBJECT_ACCESSED_HEAD = "s3:ObjectAccessed:Head"
    OBJECT_ACCESSED_ANY = "s3:ObjectAccessed:*"
    OBJECT_REMOVED_ANY = "s3:ObjectRemoved:*"
    OBJECT_REMOVED_DELETE = "s3:ObjectRemoved:Delete"
    OBJECT_REMOVED_DELETE_MARKER_CREATED = (
        "s3:ObjectRemoved:DeleteMarkerCreated"
    )
    REDUCED_REDUNDANCY_LOST_OBJECT = "s3:ReducedRedundancyLostObject"
    BUCKET_CREATED = "s3:BucketCreated"
    BUCKET_REMOVED = "s3:BucketRemoved"

    @classmethod
    def fromstring(cls, value: str) -> EventType:
        """Get event type; 's3:' prefix of value is optional."""
        if not value.startswith("s3:"):
            value = "s3:" + value
        return super().fromstring(value)


class SseAlgorithm(StringEnum):
    """Server-side encryption algorithm."""
    AES256 = "AES256"
    AWS_KMS = "aws:kms"


class CannedAcl(StringEnum):
    """Canned access control list."""
    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AUTHENTICATED_READ = "authenticated-read"
    AWS_EXEC_READ = "aws-exec-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"


class Tier(StringEnum):
    """Retrieval tier of restore request."""
    STANDARD = "Standard"
    BULK = "Bulk"
    EXPEDITED = "Expedited"


class RetentionMode(StringEnum):
    """Object lock retention mode."""
    GOVERNANCE = "GOVERNANCE"
    COMPLIANCE = "COMPLIANCE"


class RetentionDurationUnit(StringEnum):
    """Unit of default retention duration."""
    DAYS = "Days"
    YEARS = "Years"


class GranteeType(StringEnum):
    """Grantee type."""
    CANONICAL_USER = "CanonicalUser"
    AMAZON_CUSTOMER_BY_EMAIL = "AmazonCustomerByEmail"
    GROUP = "Group"


class Permission(StringEnum):
    """Grant permission."""
    FULL_CONTROL = "FULL_CONTROL"
    WRITE = "WRITE"
    WRITE_ACP = "WRITE_ACP"
    READ = "READ"
    READ_ACP = "READ_ACP"


class CompressionType(StringEnum):
    """Compression format of CSV and JSON input serialization."""
    NONE = "NONE"
    GZIP = "GZIP"
    BZIP2 = "BZIP2"


class FileHeaderInfo(StringEnum):
    """First line description of CSV object."""
    USE = "USE"
    IGNORE = "IGNORE"
    NONE = "NONE"


class JsonType(StringEnum):
    """JSON object type."""
    DOCUMENT = "DOCUMENT"
    LINES = "LINES"


class QuoteFields(StringEnum):
    """Quotation field type."""
    ALWAYS = "ALWAYS"
    ASNEEDED = "ASNEEDED"


class ChecksumAlgorithm(StringEnum):
    """Checksum algorithm."""
    CRC32 = "CRC32"
    CRC32C = "CRC32C"
    CRC64NVME = "CRC64NVME"
    SHA1 = "SHA1"
    SHA256 = "SHA256"


class ChecksumType(StringEnum):
    """Checksum type."""
    COMPOSITE = "COMPOSITE"
    FULL_OBJECT = "FULL_OBJECT"


class ServiceAccountStatus(StringEnum):
    """Service account status."""
    ON = "on"
    OFF = "off"


class UserStatus(StringEnum):
    """User account status."""
    ENABLED = "enabled"
    DISABLED = "disabled"
