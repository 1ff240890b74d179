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
Credential providers reading static values, environment variables and
AWS/MinIO client configuration files.
"""

from __future__ import annotations

import configparser
import json
import logging
import os
import sys
from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import Optional

from ..error import CredentialsError
from .credentials import Credentials

_LOG = logging.getLogger(__name__)


def _getenv(names: tuple[str, ...]) -> Optional[str]:
    """Get value of first non-empty environment variable in names."""
    return next(
        (os.environ[name] for name in names if os.environ.get(name)), None,
    )


def _home_path(*parts: str) -> str:
    home = (
        os.environ.get("HOME") or
        os.environ.get("UserProfile") or
        str(Path.home())
    )
    return os.path.join(home, *parts)


class Provider(metaclass=ABCMeta):  # pylint: disable=too-few-public-methods
    """Credential retriever."""

    @abstractmethod
    def retrieve(self) -> Credentials:
        """Retrieve credentials; CredentialsError is raised on failure."""


class StaticProvider(Provider):
    """Fixed credential provider."""

    def __init__(
            self,
            access_key: str,
            secret_key: str,
            session_token: Optional[str] = None,
    ):
        self._credentials = Credentials(access_key, secret_key, session_token)

    def retrieve(self) -> Credentials:
        return self._credentials


class EnvProvider(Provider):
    """
    Credential provider from environment variables. Subclasses list the
    variable names to look up in precedence order.
    """

    access_key_vars: tuple[str, ...] = ()
    secret_key_vars: tuple[str, ...] = ()
    session_token_vars: tuple[str, ...] = ()

    def retrieve(self) -> Credentials:
        access_key = _getenv(self.access_key_vars)
        secret_key = _getenv(self.secret_key_vars)
        if not access_key or not secret_key:
            raise CredentialsError(
                f"environment variables "
                f"{'/'.join(self.access_key_vars)} and "
                f"{'/'.join(self.secret_key_vars)} must be set",
            )
        return Credentials(
            access_key, secret_key, _getenv(self.session_token_vars),
        )


class EnvAWSProvider(EnvProvider):
    """Credential provider from AWS environment variables."""

    access_key_vars = ("AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY")
    secret_key_vars = ("AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY")
    session_token_vars = ("AWS_SESSION_TOKEN",)


class EnvMinioProvider(EnvProvider):
    """Credential provider from MinIO environment variables."""

    access_key_vars = ("MINIO_ACCESS_KEY",)
    secret_key_vars = ("MINIO_SECRET_KEY",)


class FileProvider(Provider):
    """Credential provider from an entry of a configuration file."""

    def __init__(self, filename: str, entry: str):
        self.filename = filename
        self.entry = entry

    @abstractmethod
    def parse(self, text: str) -> Credentials:
        """Parse credentials of configured entry from file content."""

    def retrieve(self) -> Credentials:
        try:
            text = Path(self.filename).read_text(encoding="utf-8")
        except OSError as exc:
            raise CredentialsError(
                f"unable to read {self.filename}: {exc}",
            ) from exc
        try:
            return self.parse(text)
        except CredentialsError:
            raise
        except ValueError as exc:
            raise CredentialsError(
                f"invalid entry {self.entry} in {self.filename}: {exc}",
            ) from exc


class AWSConfigProvider(FileProvider):
    """
    Credential provider from a profile of AWS shared credentials file.
    File and profile default to AWS_SHARED_CREDENTIALS_FILE and AWS_PROFILE.
    """

    def __init__(
            self,
            filename: Optional[str] = None,
            profile: Optional[str] = None,
    ):
        super().__init__(
            filename or
            os.environ.get("AWS_SHARED_CREDENTIALS_FILE") or
            _home_path(".aws", "credentials"),
            profile or os.environ.get("AWS_PROFILE") or "default",
        )

    def parse(self, text: str) -> Credentials:
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read_string(text, source=self.filename)
        except configparser.Error as exc:
            raise CredentialsError(
                f"unable to parse {self.filename}: {exc}",
            ) from exc
        if not parser.has_section(self.entry):
            raise CredentialsError(
                f"profile {self.entry} not found in {self.filename}",
            )
        profile = parser[self.entry]
        return Credentials(
            profile.get("aws_access_key_id"),  # type: ignore[arg-type]
            profile.get("aws_secret_access_key"),  # type: ignore[arg-type]
            profile.get("aws_session_token"),
        )


class MinioClientConfigProvider(FileProvider):
    """
    Credential provider from an alias of MinIO client config.json. Alias
    defaults to MINIO_ALIAS, then 's3'.
    """

    def __init__(
            self,
            filename: Optional[str] = None,
            alias: Optional[str] = None,
    ):
        super().__init__(
            filename or _home_path(
                "mc" if sys.platform == "win32" else ".mc", "config.json",
            ),
            alias or os.environ.get("MINIO_ALIAS") or "s3",
        )

    def parse(self, text: str) -> Credentials:
        config = json.loads(text)
        # Older clients write "hosts" instead of "aliases".
        aliases = config.get("aliases") or config.get("hosts") or {}
        if self.entry not in aliases:
            raise CredentialsError(
                f"alias {self.entry} not found in {self.filename}",
            )
        return Credentials.fromjson(aliases[self.entry])


class ChainedProvider(Provider):
    """
    Credential provider trying providers in order. Unexpired credentials
    are reused, and the provider that last succeeded is tried first.
    """

    def __init__(self, providers: list[Provider]):
        self._providers = providers
        self._provider: Optional[Provider] = None
        self._credentials: Optional[Credentials] = None

    def retrieve(self) -> Credentials:
        if self._credentials and not self._credentials.is_expired():
            return self._credentials

        candidates = [self._provider] if self._provider else []
        candidates += [
            provider for provider in self._providers
            if provider is not self._provider
        ]
        for provider in candidates:
            try:
                self._credentials = provider.retrieve()
            except ValueError as exc:
                _LOG.debug(
                    "provider %s failed: %s", type(provider).__name__, exc,
                )
                continue
            self._provider = provider
            _LOG.debug(
                "credentials retrieved from %s", type(provider).__name__,
            )
            return self._credentials

        raise CredentialsError("all providers failed to fetch credentials")
