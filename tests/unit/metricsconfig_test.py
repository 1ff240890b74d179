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
from s3messages.commonconfig import Tag, Tags
from s3messages.metricsconfig import MetricsConfig, MetricsFilter


class MetricsConfigTest(TestCase):
    def test_config(self):
        config = MetricsConfig("EntireBucket")
        self.assertEqual(
            xml.marshal(config),
            b'<MetricsConfiguration '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Id>EntireBucket</Id></MetricsConfiguration>',
        )

        tags = Tags()
        tags["class"] = "blue"
        config = MetricsConfig(
            "ImportantBlueDocuments",
            MetricsFilter(and_operator=MetricsFilter.And("documents/", None,
                                                         tags)),
        )
        self.assertEqual(
            xml.marshal(config),
            b'<MetricsConfiguration '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Id>ImportantBlueDocuments</Id>'
            b'<Filter><And><Prefix>documents/</Prefix>'
            b'<Tag><Key>class</Key><Value>blue</Value></Tag></And></Filter>'
            b'</MetricsConfiguration>',
        )

    def test_parse(self):
        config = xml.unmarshal(
            MetricsConfig,
            """<MetricsConfiguration xmlns="http://s3.amazonaws.com/doc/2006-03-01/">
  <Id>Documents</Id>
  <Filter>
    <Tag>
      <Key>priority</Key>
      <Value>high</Value>
    </Tag>
  </Filter>
</MetricsConfiguration>""",
        )
        self.assertEqual(config.id, "Documents")
        self.assertEqual(config.metrics_filter.tag, Tag("priority", "high"))
        self.assertIsNone(config.metrics_filter.prefix)

        config = xml.unmarshal(
            MetricsConfig,
            "<MetricsConfiguration><Id>ap</Id><Filter><And>"
            "<AccessPointArn>arn:aws:s3:us-west-2:1234:accesspoint/ap"
            "</AccessPointArn><Prefix>logs/</Prefix></And></Filter>"
            "</MetricsConfiguration>",
        )
        self.assertEqual(
            config.metrics_filter.and_operator.access_point_arn,
            "arn:aws:s3:us-west-2:1234:accesspoint/ap",
        )
        self.assertEqual(config.metrics_filter.and_operator.prefix, "logs/")
        self.assertIsNone(config.metrics_filter.and_operator.tags)

    def test_validation(self):
        self.assertRaises(ValueError, MetricsConfig, "")
        self.assertRaises(
            ValueError, MetricsFilter, prefix="a", access_point_arn="arn",
        )
        self.assertRaises(ValueError, MetricsFilter.And)
        MetricsFilter()
