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

"""MinIO admin API payload cipher and JSON messages."""

from .crypto import DecryptReader  # pylint: disable=unused-import
from .crypto import decrypt  # pylint: disable=unused-import
from .crypto import encrypt  # pylint: disable=unused-import
from .datausage import BucketTargetUsageInfo  # pylint: disable=unused-import
from .datausage import BucketUsageInfo  # pylint: disable=unused-import
from .datausage import DataUsageInfo  # pylint: disable=unused-import
from .serviceaccount import \
    AddServiceAccountReq  # pylint: disable=unused-import
from .serviceaccount import \
    GetServiceAccountInfoResp  # pylint: disable=unused-import
from .serviceaccount import \
    ListServiceAccountResponse  # pylint: disable=unused-import
from .serviceaccount import \
    UpdateServiceAccountReq  # pylint: disable=unused-import
from .serverinfo import ServerInfo  # pylint: disable=unused-import
from .users import GroupAddUpdateRemoveInfo  # pylint: disable=unused-import
from .users import GroupInfo  # pylint: disable=unused-import
from .users import UserInfo  # pylint: disable=unused-import
