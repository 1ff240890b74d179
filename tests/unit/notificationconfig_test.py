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
from s3messages.enums import EventType
from s3messages.notificationconfig import (FilterRule, NotificationConfig,
                                           PrefixFilterRule, QueueConfig,
                                           SuffixFilterRule, TopicConfig)


class NotificationConfigTest(TestCase):
    def test_config(self):
        config = NotificationConfig(
            queue_config_list=[
                QueueConfig(
                    ["s3:ObjectCreated:Put", "s3:ObjectCreated:Copy"],
                    config_id="1",
                    prefix_filter_rule=PrefixFilterRule("abc"),
                    queue="QUEUE-ARN-OF-THIS-BUCKET",
                ),
            ],
        )
        self.assertEqual(
            xml.marshal(config),
            b'<NotificationConfiguration '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<QueueConfiguration><Queue>QUEUE-ARN-OF-THIS-BUCKET</Queue>'
            b'<Event>s3:ObjectCreated:Put</Event>'
            b'<Event>s3:ObjectCreated:Copy</Event><Id>1</Id>'
            b'<Filter><S3Key><FilterRule><Name>prefix</Name>'
            b'<Value>abc</Value></FilterRule></S3Key></Filter>'
            b'</QueueConfiguration></NotificationConfiguration>',
        )

    def test_parse(self):
        config = xml.unmarshal(
            NotificationConfig,
            """<NotificationConfiguration xmlns="http://s3.amazonaws.com/doc/2006-03-01/">
  <TopicConfiguration>
    <Id>ObjectCreatedEvents</Id>
    <Topic>arn:aws:sns:us-east-1:111122223333:events</Topic>
    <Event>s3:ObjectCreated:*</Event>
    <Event>s3:Replication:Custom</Event>
    <Filter>
      <S3Key>
        <FilterRule>
          <Name>Prefix</Name>
          <Value>images/</Value>
        </FilterRule>
        <FilterRule>
          <Name>Suffix</Name>
          <Value>.jpg</Value>
        </FilterRule>
      </S3Key>
    </Filter>
  </TopicConfiguration>
</NotificationConfiguration>""",
        )
        self.assertFalse(config.is_empty)
        self.assertEqual(config.cloud_func_config_list, [])
        self.assertEqual(config.queue_config_list, [])
        topic = config.topic_config_list[0]
        self.assertEqual(topic.config_id, "ObjectCreatedEvents")
        self.assertEqual(
            topic.topic, "arn:aws:sns:us-east-1:111122223333:events",
        )
        self.assertEqual(
            topic.events,
            [EventType.OBJECT_CREATED_ANY, "s3:Replication:Custom"],
        )
        self.assertEqual(topic.prefix_filter_rule, PrefixFilterRule("images/"))
        self.assertEqual(topic.suffix_filter_rule, SuffixFilterRule(".jpg"))
        self.assertEqual(len(topic.filter_rules), 2)

    def test_empty(self):
        config = xml.unmarshal(
            NotificationConfig, "<NotificationConfiguration/>",
        )
        self.assertTrue(config.is_empty)
        self.assertEqual(
            xml.marshal(config),
            b'<NotificationConfiguration '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/" />',
        )

    def test_with_filter_rule(self):
        config = TopicConfig(
            [EventType.OBJECT_REMOVED_ANY],
            prefix_filter_rule=PrefixFilterRule("a/"),
            topic="arn",
        )
        config = config.with_filter_rule(PrefixFilterRule("b/"))
        self.assertEqual(config.prefix_filter_rule.value, "b/")
        self.assertIsNone(config.suffix_filter_rule)

    def test_validation(self):
        self.assertRaises(ValueError, FilterRule, "middle", "x")
        self.assertRaises(ValueError, PrefixFilterRule, "x" * 1025)
        self.assertRaises(ValueError, QueueConfig, [], queue="arn")
        self.assertRaises(ValueError, QueueConfig, ["s3:ObjectCreated:*"])
        self.assertRaises(ValueError, TopicConfig, [""], topic="arn")
        self.assertRaises(
            ValueError,
            TopicConfig,
            ["s3:ObjectCreated:*"],
            prefix_filter_rule=SuffixFilterRule(".jpg"),
            topic="arn",
        )
