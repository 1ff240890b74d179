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
s3messages - request and response messages of Amazon S3 compatible and
MinIO admin APIs

    >>> from s3messages.listobjects import ListBucketResultV2
    >>> from s3messages.xml import unmarshal
    >>> result = unmarshal(ListBucketResultV2, body)
    >>> for item in result.contents:
    ...     print(item.object_name, item.size)

:copyright: (C) 2015-2025 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "s3messages"
__author__ = "MinIO, Inc."
__version__ = "1.0.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2015-2025 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias
from .error import AdminException as AdminException
from .error import CredentialsError as CredentialsError
from .error import EventStreamError as EventStreamError
from .error import InvalidResponseError as InvalidResponseError
from .error import S3Error as S3Error
from .error import S3MessageException as S3MessageException
from .xml import marshal as marshal
from .xml import unmarshal as unmarshal
