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


from unittest import TestCase

from s3messages import xml
from s3messages.commonconfig import Tags
from s3messages.enums import CannedAcl, SseAlgorithm, Tier
from s3messages.restore import (S3, Encryption, GlacierJobParameters,
                                OutputLocation, RestoreRequest,
                                SelectParameters)
from s3messages.select import CSVInputSerialization, CSVOutputSerialization


class RestoreRequestTest(TestCase):
    def test_days(self):
        request = RestoreRequest(
            days=2, glacier_job_parameters=GlacierJobParameters("Bulk"),
        )
        self.assertEqual(request.glacier_job_parameters.tier, Tier.BULK)
        self.assertIsNone(request.request_type)
        self.assertEqual(
            xml.marshal(request),
            b'<RestoreRequest xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Days>2</Days>'
            b'<GlacierJobParameters><Tier>Bulk</Tier></GlacierJobParameters>'
            b'</RestoreRequest>',
        )

    def test_select(self):
        tags = Tags()
        tags["project"] = "x"
        request = RestoreRequest(
            tier=Tier.EXPEDITED,
            description="restore select",
            select_parameters=SelectParameters(
                "select * from S3Object",
                CSVInputSerialization(),
                CSVOutputSerialization(),
            ),
            output_location=OutputLocation(
                S3(
                    "results",
                    "out/",
                    canned_acl="private",
                    encryption=Encryption("aws:kms", kms_key_id="key"),
                    storage_class="STANDARD",
                    tagging=tags,
                    user_metadata={"owner": "me"},
                ),
            ),
        )
        self.assertEqual(request.request_type, "SELECT")
        self.assertEqual(
            request.output_location.s3.canned_acl, CannedAcl.PRIVATE,
        )
        self.assertEqual(
            request.output_location.s3.encryption.encryption_type,
            SseAlgorithm.AWS_KMS,
        )
        self.assertEqual(
            xml.marshal(request),
            b'<RestoreRequest xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Type>SELECT</Type><Tier>Expedited</Tier>'
            b'<Description>restore select</Description>'
            b'<SelectParameters>'
            b'<Expression>select * from S3Object</Expression>'
            b'<ExpressionType>SQL</ExpressionType>'
            b'<InputSerialization><CSV /></InputSerialization>'
            b'<OutputSerialization><CSV /></OutputSerialization>'
            b'</SelectParameters>'
            b'<OutputLocation><S3><BucketName>results</BucketName>'
            b'<CannedACL>private</CannedACL>'
            b'<Encryption><EncryptionType>aws:kms</EncryptionType>'
            b'<KMSKeyId>key</KMSKeyId></Encryption>'
            b'<Prefix>out/</Prefix><StorageClass>STANDARD</StorageClass>'
            b'<Tagging><TagSet><Tag><Key>project</Key><Value>x</Value></Tag>'
            b'</TagSet></Tagging>'
            b'<UserMetadata><MetadataEntry><Name>owner</Name>'
            b'<Value>me</Value></MetadataEntry></UserMetadata>'
            b'</S3></OutputLocation></RestoreRequest>',
        )

    def test_validation(self):
        self.assertRaises(ValueError, RestoreRequest, days=0)
        self.assertRaises(ValueError, RestoreRequest, tier="Fast")
        self.assertRaises(ValueError, GlacierJobParameters, "Fast")
        self.assertRaises(ValueError, Encryption, "DES")
        self.assertRaises(ValueError, S3, "", "out/")
        self.assertRaises(ValueError, S3, "results", None)
        self.assertRaises(ValueError, S3, "results", "", user_metadata={})
        self.assertRaises(ValueError, S3, "results", "", canned_acl="open")
        self.assertRaises(
            ValueError,
            SelectParameters,
            "",
            CSVInputSerialization(),
            CSVOutputSerialization(),
        )
        self.assertEqual(
            xml.marshal(RestoreRequest()),
            b'<RestoreRequest '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/" />',
        )
