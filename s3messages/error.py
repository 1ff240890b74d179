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

"""
s3messages.error
~~~~~~~~~~~~~~~~

Exception classes raised while decoding S3 and MinIO admin messages, and
the S3 <Error> response body.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from urllib3.response import BaseHTTPResponse

from .xml import findtext


class S3MessageException(Exception):
    """Base exception of this library."""


class CredentialsError(S3MessageException, ValueError):
    """Raised when a provider cannot produce usable credentials."""


class InvalidResponseError(S3MessageException):
    """Raised to indicate that non-XML response is received from server."""

    def __init__(
            self, code: int, content_type: Optional[str], body: Optional[str],
    ):
        self._code = code
        self._content_type = content_type
        self._body = body
        super().__init__(
            f"non-XML response from server; Response code: {code}, "
            f"Content-Type: {content_type}, Body: {body}"
        )

    def __reduce__(self):
        return type(self), (self._code, self._content_type, self._body)


class EventStreamError(S3MessageException):
    """Raised when an event stream carries an error message."""

    def __init__(self, code: Optional[str], message: Optional[str]):
        self._code = code
        self._message = message
        super().__init__(f"{code}: {message}")

    @property
    def code(self) -> Optional[str]:
        """Get error code."""
        return self._code

    @property
    def message(self) -> Optional[str]:
        """Get error message."""
        return self._message

    def __reduce__(self):
        return type(self), (self._code, self._message)


class AdminException(S3MessageException):
    """Raised to indicate admin API execution error."""

    def __init__(self, code: str, body: str):
        self._code = code
        self._body = body
        super().__init__(
            f"admin request failed; Status: {code}, Body: {body}",
        )

    def __reduce__(self):
        return type(self), (self._code, self._body)


E = TypeVar("E", bound="ErrorResponse")


@dataclass(frozen=True)
class ErrorResponse:
    """S3 <Error> response body."""
    code: Optional[str] = None
    message: Optional[str] = None
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    resource: Optional[str] = None
    request_id: Optional[str] = None
    host_id: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[E], element: ET.Element) -> E:
        """Create new object with values from XML element."""
        return cls(
            code=findtext(element, "Code"),
            message=findtext(element, "Message"),
            bucket_name=findtext(element, "BucketName"),
            object_name=findtext(element, "Key"),
            resource=findtext(element, "Resource"),
            request_id=findtext(element, "RequestId"),
            host_id=findtext(element, "HostId"),
        )


A = TypeVar("A", bound="S3Error")


class S3Error(S3MessageException):
    """
    Raised to indicate that error response is received for an S3 operation.
    Instances are immutable; use copy() to derive a new error.
    """
    response: Optional[BaseHTTPResponse]
    error: ErrorResponse

    _EXC_MUTABLES = {"__traceback__", "__context__", "__cause__"}

    def __init__(
            self,
            response: Optional[BaseHTTPResponse],
            error: ErrorResponse,
    ):
        object.__setattr__(self, "response", response)
        object.__setattr__(self, "error", error)

        bucket_message = (
            f", bucket_name: {error.bucket_name}" if error.bucket_name else ""
        )
        object_message = (
            f", object_name: {error.object_name}" if error.object_name else ""
        )
        super().__init__(
            f"S3 operation failed; code: {error.code}, "
            f"message: {error.message}, resource: {error.resource}, "
            f"request_id: {error.request_id}, "
            f"host_id: {error.host_id}{bucket_message}{object_message}"
        )

        object.__setattr__(self, "_is_frozen", True)

    def __setattr__(self, name, value):
        if name in self._EXC_MUTABLES:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_is_frozen", False):
            raise AttributeError(
                f"{self.__class__.__name__} is frozen and "
                "does not allow attribute assignment"
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        if name in self._EXC_MUTABLES:
            object.__delattr__(self, name)
            return
        if getattr(self, "_is_frozen", False):
            raise AttributeError(
                f"{self.__class__.__name__} is frozen and "
                "does not allow attribute deletion"
            )
        object.__delattr__(self, name)

    @property
    def code(self) -> Optional[str]:
        """Get error code."""
        return self.error.code

    @property
    def message(self) -> Optional[str]:
        """Get error message."""
        return self.error.message

    @property
    def bucket_name(self) -> Optional[str]:
        """Get bucket name."""
        return self.error.bucket_name

    @property
    def object_name(self) -> Optional[str]:
        """Get object name."""
        return self.error.object_name

    @property
    def resource(self) -> Optional[str]:
        """Get resource."""
        return self.error.resource

    @property
    def request_id(self) -> Optional[str]:
        """Get request ID."""
        return self.error.request_id

    @property
    def host_id(self) -> Optional[str]:
        """Get host ID."""
        return self.error.host_id

    @classmethod
    def fromxml(cls: Type[A], response: BaseHTTPResponse) -> A:
        """Create new error from XML body of HTTP response."""
        content_type = response.headers.get("content-type")
        try:
            element = ET.fromstring(response.data)
        except ET.ParseError as exc:
            raise InvalidResponseError(
                response.status,
                content_type,
                (
                    response.data.decode(errors="replace")
                    if response.data else None
                ),
            ) from exc
        return cls(response, ErrorResponse.fromxml(element))

    def copy(self, code: str, message: str) -> S3Error:
        """Make a copy with replaced code and message."""
        return S3Error(
            self.response,
            ErrorResponse(
                code=code,
                message=message,
                bucket_name=self.bucket_name,
                object_name=self.object_name,
                resource=self.resource,
                request_id=self.request_id,
                host_id=self.host_id,
            ),
        )

    def __reduce__(self):
        return type(self), (None, self.error)

    def __repr__(self):
        return (
            f"S3Error(code={self.code!r}, message={self.message!r}, "
            f"resource={self.resource!r}, request_id={self.request_id!r}, "
            f"host_id={self.host_id!r}, bucket_name={self.bucket_name!r}, "
            f"object_name={self.object_name!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, S3Error):
            return NotImplemented
        return self.error == other.error

    def __hash__(self):
        return hash(self.error)
