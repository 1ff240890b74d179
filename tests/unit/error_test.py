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


import pickle
from unittest import TestCase

from urllib3.response import HTTPResponse

from s3messages.error import (AdminException, ErrorResponse,
                              EventStreamError, InvalidResponseError,
                              S3Error, S3MessageException)

ERROR_XML = (
    b'<?xml version="1.0" encoding="UTF-8"?>'
    b'<Error><Code>NoSuchKey</Code>'
    b'<Message>The specified key does not exist.</Message>'
    b'<BucketName>my-bucket</BucketName><Key>my-object</Key>'
    b'<Resource>/my-bucket/my-object</Resource>'
    b'<RequestId>4442587FB7D0A2F9</RequestId><HostId>host</HostId></Error>'
)


class ErrorTest(TestCase):
    def test_s3_error_fromxml(self):
        response = HTTPResponse(
            body=ERROR_XML,
            status=404,
            headers={"content-type": "application/xml"},
        )
        error = S3Error.fromxml(response)
        self.assertEqual(error.code, "NoSuchKey")
        self.assertEqual(error.message, "The specified key does not exist.")
        self.assertEqual(error.bucket_name, "my-bucket")
        self.assertEqual(error.object_name, "my-object")
        self.assertEqual(error.resource, "/my-bucket/my-object")
        self.assertEqual(error.request_id, "4442587FB7D0A2F9")
        self.assertEqual(error.host_id, "host")
        self.assertIs(error.response, response)
        self.assertIsInstance(error, S3MessageException)
        self.assertIn("code: NoSuchKey", str(error))

    def test_s3_error_invalid_response(self):
        response = HTTPResponse(
            body=b"<html>bad gateway",
            status=502,
            headers={"content-type": "text/html"},
        )
        with self.assertRaises(InvalidResponseError) as context:
            S3Error.fromxml(response)
        self.assertIn("Response code: 502", str(context.exception))

    def test_s3_error_non_utf8_response(self):
        response = HTTPResponse(
            body=b"\xff\xfe<html>",
            status=502,
            headers={"content-type": "text/html"},
        )
        with self.assertRaises(InvalidResponseError) as context:
            S3Error.fromxml(response)
        self.assertIn("Response code: 502", str(context.exception))
        self.assertIn("<html>", str(context.exception))

    def test_s3_error_frozen(self):
        error = S3Error(None, ErrorResponse(code="AccessDenied"))
        with self.assertRaises(AttributeError):
            error.error = ErrorResponse()
        with self.assertRaises(AttributeError):
            del error.response

    def test_s3_error_copy(self):
        error = S3Error(
            None,
            ErrorResponse(code="NoSuchKey", message="m", bucket_name="b"),
        )
        copied = error.copy("NoSuchBucket", "bucket does not exist")
        self.assertEqual(copied.code, "NoSuchBucket")
        self.assertEqual(copied.message, "bucket does not exist")
        self.assertEqual(copied.bucket_name, "b")
        self.assertEqual(error.code, "NoSuchKey")
        self.assertNotEqual(error, copied)
        self.assertEqual(
            error, S3Error(None, ErrorResponse(
                code="NoSuchKey", message="m", bucket_name="b",
            )),
        )
        self.assertEqual(len({error, copied}), 2)

    def test_pickle(self):
        error = S3Error(None, ErrorResponse(code="NoSuchKey"))
        self.assertEqual(pickle.loads(pickle.dumps(error)), error)
        exc = pickle.loads(pickle.dumps(InvalidResponseError(500, None, "x")))
        self.assertEqual(str(exc), str(InvalidResponseError(500, None, "x")))
        exc = pickle.loads(pickle.dumps(EventStreamError("Code", "message")))
        self.assertEqual(exc.code, "Code")
        self.assertEqual(exc.message, "message")
        exc = pickle.loads(pickle.dumps(AdminException("403", "denied")))
        self.assertIn("Status: 403", str(exc))
