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


import os
import tempfile
from datetime import datetime, timezone
from unittest import TestCase

from s3messages.credentials.sts import (ASSUME_ROLE_RESULT,
                                        ASSUME_ROLE_WITH_WEB_IDENTITY_RESULT,
                                        DEFAULT_DURATION_SECONDS,
                                        MAX_DURATION_SECONDS,
                                        MIN_DURATION_SECONDS,
                                        WebIdentityToken,
                                        get_duration_seconds,
                                        parse_sts_response)

_ASSUME_ROLE = """<AssumeRoleResponse xmlns="https://sts.amazonaws.com/doc/2011-06-15/">
  <AssumeRoleResult>
    <AssumedRoleUser>
      <Arn></Arn>
      <AssumeRoleId></AssumeRoleId>
    </AssumedRoleUser>
    <Credentials>
      <AccessKeyId>Y4RJU1RNFGK48LGO9I2S</AccessKeyId>
      <SecretAccessKey>sYLRKS1Z7hSjluf6gEbb9066hnx315wHTiACPAjg</SecretAccessKey>
      <Expiration>2019-08-08T20:26:12Z</Expiration>
      <SessionToken>eyJhbGciOiJIUzUxMiIsInR5cCI6IkpXVCJ9</SessionToken>
    </Credentials>
  </AssumeRoleResult>
  <ResponseMetadata>
    <RequestId>c6104cbe-af31-11e0-8154-cbc7ccf896c7</RequestId>
  </ResponseMetadata>
</AssumeRoleResponse>"""


class ParseStsResponseTest(TestCase):
    def test_assume_role(self):
        creds = parse_sts_response(_ASSUME_ROLE, ASSUME_ROLE_RESULT)
        self.assertEqual(creds.access_key, "Y4RJU1RNFGK48LGO9I2S")
        self.assertEqual(
            creds.secret_key, "sYLRKS1Z7hSjluf6gEbb9066hnx315wHTiACPAjg",
        )
        self.assertEqual(
            creds.session_token, "eyJhbGciOiJIUzUxMiIsInR5cCI6IkpXVCJ9",
        )
        self.assertEqual(
            creds.expiration,
            datetime(2019, 8, 8, 20, 26, 12, tzinfo=timezone.utc),
        )
        self.assertTrue(creds.is_expired())

    def test_wrong_result(self):
        self.assertRaises(
            ValueError,
            parse_sts_response,
            _ASSUME_ROLE,
            ASSUME_ROLE_WITH_WEB_IDENTITY_RESULT,
        )
        self.assertRaises(
            ValueError, parse_sts_response, _ASSUME_ROLE, "AssumeRole",
        )

    def test_missing_fields(self):
        creds = parse_sts_response(
            "<AssumeRoleWithWebIdentityResponse>"
            "<AssumeRoleWithWebIdentityResult><Credentials>"
            "<AccessKeyId>access</AccessKeyId>"
            "<SecretAccessKey>secret</SecretAccessKey>"
            "</Credentials></AssumeRoleWithWebIdentityResult>"
            "</AssumeRoleWithWebIdentityResponse>",
            ASSUME_ROLE_WITH_WEB_IDENTITY_RESULT,
        )
        self.assertIsNone(creds.session_token)
        self.assertIsNone(creds.expiration)
        self.assertRaises(
            ValueError,
            parse_sts_response,
            "<AssumeRoleResponse><AssumeRoleResult><Credentials>"
            "<AccessKeyId>access</AccessKeyId>"
            "</Credentials></AssumeRoleResult></AssumeRoleResponse>",
            ASSUME_ROLE_RESULT,
        )


class DurationSecondsTest(TestCase):
    def test_duration(self):
        self.assertEqual(DEFAULT_DURATION_SECONDS, 3600)
        self.assertEqual(get_duration_seconds(0), 0)
        self.assertEqual(get_duration_seconds(60), MIN_DURATION_SECONDS)
        self.assertEqual(get_duration_seconds(3600), 3600)
        self.assertEqual(get_duration_seconds(10 ** 7), MAX_DURATION_SECONDS)
        self.assertEqual(get_duration_seconds(3600, 7200), 7200)


class WebIdentityTokenTest(TestCase):
    def test_json(self):
        token = WebIdentityToken.loads(
            '{"access_token": "jwt", "expires_in": 900, "policy": "readonly"}',
        )
        self.assertEqual(token, WebIdentityToken("jwt", 900, "readonly"))
        self.assertEqual(token.duration_seconds(), 900)

        token = WebIdentityToken.loads('{"id_token": "jwt"}')
        self.assertEqual(token.token, "jwt")
        self.assertEqual(token.expiry, 0)
        self.assertIsNone(token.policy)
        self.assertRaises(ValueError, WebIdentityToken.loads, "{}")

    def test_file(self):
        with tempfile.TemporaryDirectory() as dirname:
            filename = os.path.join(dirname, "token")
            with open(filename, "w", encoding="utf-8") as file:
                file.write("jwt\n")
            self.assertEqual(WebIdentityToken.fromfile(filename).token, "jwt")
            self.assertRaises(
                ValueError,
                WebIdentityToken.fromfile,
                os.path.join(dirname, "missing"),
            )
