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


import json
from datetime import datetime, timezone
from unittest import TestCase

from s3messages.admin.serviceaccount import (AddServiceAccountReq,
                                             GetServiceAccountInfoResp,
                                             ListServiceAccountResponse,
                                             UpdateServiceAccountReq)
from s3messages.enums import ServiceAccountStatus

_POLICY = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Action": ["s3:GetObject"],
            "Resource": ["arn:aws:s3:::bucket/*"],
        },
    ],
}


class AddServiceAccountReqTest(TestCase):
    def test_tojson(self):
        request = AddServiceAccountReq(
            access_key="svcaccess",
            secret_key="svcsecret",
            policy=_POLICY,
            target_user="user1",
            name="backup",
            expiration=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
        data = request.tojson()
        self.assertEqual(data["accessKey"], "svcaccess")
        self.assertEqual(data["secretKey"], "svcsecret")
        self.assertEqual(json.loads(data["policy"]), _POLICY)
        self.assertEqual(data["targetUser"], "user1")
        self.assertEqual(data["name"], "backup")
        self.assertEqual(data["expiration"], "2030-01-01T00:00:00.000Z")
        self.assertNotIn("description", data)

        self.assertEqual(AddServiceAccountReq().tojson(), {})
        self.assertEqual(
            AddServiceAccountReq(policy='{"Version": "2012-10-17"}').tojson(),
            {"policy": '{"Version": "2012-10-17"}'},
        )

    def test_validation(self):
        self.assertRaises(
            ValueError, AddServiceAccountReq, access_key="svcaccess",
        )
        self.assertRaises(
            ValueError, AddServiceAccountReq, secret_key="svcsecret",
        )
        self.assertRaises(
            ValueError, AddServiceAccountReq, access_key="", secret_key="x",
        )


class UpdateServiceAccountReqTest(TestCase):
    def test_tojson(self):
        request = UpdateServiceAccountReq(
            new_status="off", new_description="disabled for audit",
        )
        self.assertEqual(request.new_status, ServiceAccountStatus.OFF)
        self.assertEqual(
            request.tojson(),
            {"newStatus": "off", "newDescription": "disabled for audit"},
        )
        request = UpdateServiceAccountReq(new_policy=_POLICY)
        self.assertEqual(
            json.loads(request.tojson()["newPolicy"]), _POLICY,
        )

    def test_validation(self):
        self.assertRaises(ValueError, UpdateServiceAccountReq)
        self.assertRaises(ValueError, UpdateServiceAccountReq, new_name="")
        self.assertRaises(
            ValueError, UpdateServiceAccountReq, new_status="paused",
        )


class ServiceAccountResponseTest(TestCase):
    def test_info(self):
        info = GetServiceAccountInfoResp.loads(
            json.dumps(
                {
                    "parentUser": "user1",
                    "accountStatus": "on",
                    "impliedPolicy": True,
                    "name": "backup",
                    "expiration": "2030-01-01T07:00:00+07:00",
                },
            ),
        )
        self.assertEqual(info.parent_user, "user1")
        self.assertEqual(info.account_status, ServiceAccountStatus.ON)
        self.assertTrue(info.implied_policy)
        self.assertIsNone(info.policy)
        self.assertEqual(
            info.expiration, datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

    def test_list(self):
        response = ListServiceAccountResponse.loads(
            json.dumps(
                {
                    "accounts": [
                        {
                            "accessKey": "svc1",
                            "parentUser": "user1",
                            "accountStatus": "on",
                            "expiration": "2030-01-01T00:00:00Z",
                        },
                        {"accessKey": "svc2", "accountStatus": ""},
                    ],
                },
            ),
        )
        self.assertEqual(
            [account.access_key for account in response.accounts],
            ["svc1", "svc2"],
        )
        self.assertEqual(
            response.accounts[0].expiration,
            datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
        self.assertIsNone(response.accounts[1].account_status)
        self.assertEqual(
            ListServiceAccountResponse.loads('{"accounts": null}').accounts,
            [],
        )
        self.assertRaises(
            ValueError,
            ListServiceAccountResponse.loads,
            '{"accounts": [{"parentUser": "user1"}]}',
        )
