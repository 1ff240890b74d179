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


from datetime import datetime, timezone
from unittest import TestCase

from s3messages import xml
from s3messages.commonconfig import Filter, Status
from s3messages.lifecycleconfig import (AbortIncompleteMultipartUpload,
                                        Expiration, LifecycleConfig, Rule,
                                        Transition)


class LifecycleConfigTest(TestCase):
    def test_config(self):
        config = LifecycleConfig(
            [
                Rule(
                    Status.ENABLED,
                    rule_filter=Filter(prefix="documents/"),
                    rule_id="rule1",
                    transition=Transition(days=30, storage_class="GLACIER"),
                ),
                Rule(
                    Status.ENABLED,
                    rule_filter=Filter(prefix="logs/"),
                    rule_id="rule2",
                    expiration=Expiration(days=365),
                ),
            ],
        )
        self.assertEqual(
            xml.marshal(config),
            b'<LifecycleConfiguration '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Rule><Status>Enabled</Status>'
            b'<Filter><Prefix>documents/</Prefix></Filter><ID>rule1</ID>'
            b'<Transition><Days>30</Days>'
            b'<StorageClass>GLACIER</StorageClass></Transition></Rule>'
            b'<Rule><Status>Enabled</Status>'
            b'<Filter><Prefix>logs/</Prefix></Filter><ID>rule2</ID>'
            b'<Expiration><Days>365</Days></Expiration></Rule>'
            b'</LifecycleConfiguration>',
        )

    def test_parse(self):
        config = xml.unmarshal(
            LifecycleConfig,
            """<LifecycleConfiguration xmlns="http://s3.amazonaws.com/doc/2006-03-01/">
  <Rule>
    <ID>DeleteAfterBecomingNonCurrent</ID>
    <Filter>
       <Prefix>logs/</Prefix>
    </Filter>
    <Status>Enabled</Status>
    <NoncurrentVersionExpiration>
      <NoncurrentDays>100</NoncurrentDays>
    </NoncurrentVersionExpiration>
  </Rule>
  <Rule>
    <ID>TransitionAndExpire</ID>
    <Filter>
       <Prefix></Prefix>
    </Filter>
    <Status>Disabled</Status>
    <Transition>
      <Date>2030-01-01T00:00:00.000Z</Date>
      <StorageClass>GLACIER</StorageClass>
    </Transition>
    <Expiration>
      <ExpiredObjectDeleteMarker>true</ExpiredObjectDeleteMarker>
    </Expiration>
    <AbortIncompleteMultipartUpload>
      <DaysAfterInitiation>7</DaysAfterInitiation>
    </AbortIncompleteMultipartUpload>
  </Rule>
</LifecycleConfiguration>""",
        )
        self.assertEqual(len(config.rules), 2)
        rule = config.rules[0]
        self.assertEqual(rule.rule_id, "DeleteAfterBecomingNonCurrent")
        self.assertEqual(rule.rule_filter.prefix, "logs/")
        self.assertEqual(rule.noncurrent_version_expiration.noncurrent_days,
                         100)
        rule = config.rules[1]
        self.assertEqual(rule.status, Status.DISABLED)
        self.assertEqual(rule.rule_filter.prefix, "")
        self.assertEqual(
            rule.transition.date,
            datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
        self.assertTrue(rule.expiration.expired_object_delete_marker)
        self.assertEqual(
            rule.abort_incomplete_multipart_upload,
            AbortIncompleteMultipartUpload(7),
        )
        xml.marshal(config)

    def test_validation(self):
        self.assertRaises(ValueError, LifecycleConfig, [])
        self.assertRaises(ValueError, Rule, Status.ENABLED)
        self.assertRaises(
            ValueError, Rule, "enabled", expiration=Expiration(days=1),
        )
        self.assertRaises(
            ValueError,
            Rule,
            Status.ENABLED,
            rule_id=" ",
            expiration=Expiration(days=1),
        )
        self.assertRaises(
            ValueError,
            Rule,
            Status.ENABLED,
            rule_id="x" * 256,
            expiration=Expiration(days=1),
        )
        self.assertRaises(ValueError, Expiration)
        self.assertRaises(
            ValueError,
            Expiration,
            date=datetime(2030, 1, 1, tzinfo=timezone.utc),
            days=1,
        )
        self.assertRaises(ValueError, Expiration, days=-1)
        self.assertRaises(ValueError, Transition, days=1)
        self.assertRaises(ValueError, Transition, storage_class="GLACIER")
        Expiration(expired_object_delete_marker=True)

    def test_rule_id_stripped(self):
        rule = Rule(
            Status.ENABLED, rule_id="  rule1 ", expiration=Expiration(days=1),
        )
        self.assertEqual(rule.rule_id, "rule1")

    def test_invalid_delete_marker(self):
        self.assertRaises(
            ValueError,
            xml.unmarshal,
            LifecycleConfig,
            "<LifecycleConfiguration><Rule><Status>Enabled</Status>"
            "<Expiration><ExpiredObjectDeleteMarker>yes"
            "</ExpiredObjectDeleteMarker></Expiration></Rule>"
            "</LifecycleConfiguration>",
        )
