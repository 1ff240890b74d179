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
from s3messages.error import S3MessageException
from s3messages.listobjects import (ListAllMyBucketsResult,
                                    ListBucketResultV1, ListBucketResultV2,
                                    ListVersionsResult, list_buckets,
                                    list_objects)

_NS = 'xmlns="http://s3.amazonaws.com/doc/2006-03-01/"'


def _v2_page(keys, truncated=False, token=None):
    contents = "".join(
        f"<Contents><Key>{key}</Key>"
        f"<LastModified>2024-01-02T03:04:05.000Z</LastModified>"
        f"<ETag>&quot;abc&quot;</ETag><Size>10</Size></Contents>"
        for key in keys
    )
    next_token = (
        f"<NextContinuationToken>{token}</NextContinuationToken>"
        if token else ""
    )
    return (
        f"<ListBucketResult {_NS}><Name>bucket</Name>"
        f"<IsTruncated>{str(truncated).lower()}</IsTruncated>"
        f"{contents}{next_token}</ListBucketResult>"
    )


class ListBucketsTest(TestCase):
    def test_parse(self):
        result = xml.unmarshal(
            ListAllMyBucketsResult,
            f"""<ListAllMyBucketsResult {_NS}>
  <Owner><ID>minio</ID><DisplayName>minio</DisplayName></Owner>
  <Buckets>
    <Bucket>
      <Name>bucket</Name>
      <CreationDate>2015-05-05T20:36:17.498Z</CreationDate>
      <BucketRegion>us-west-2</BucketRegion>
    </Bucket>
    <Bucket>
      <Name>hello</Name>
      <CreationDate>2015-05-05T20:36:17.498Z</CreationDate>
    </Bucket>
  </Buckets>
</ListAllMyBucketsResult>""",
        )
        self.assertEqual(result.owner.id, "minio")
        self.assertEqual([b.name for b in result.buckets], ["bucket", "hello"])
        self.assertEqual(result.buckets[0].bucket_region, "us-west-2")
        self.assertEqual(
            result.buckets[1].creation_date,
            datetime(2015, 5, 5, 20, 36, 17, 498000, tzinfo=timezone.utc),
        )
        self.assertIsNone(result.continuation_token)

    def test_paginate(self):
        pages = {
            None: (
                f"<ListAllMyBucketsResult {_NS}><Buckets>"
                "<Bucket><Name>a</Name></Bucket></Buckets>"
                "<ContinuationToken>t1</ContinuationToken>"
                "</ListAllMyBucketsResult>"
            ),
            "t1": (
                f"<ListAllMyBucketsResult {_NS}><Buckets>"
                "<Bucket><Name>b</Name></Bucket></Buckets>"
                "</ListAllMyBucketsResult>"
            ),
        }
        tokens = []

        def fetch(token):
            tokens.append(token)
            return pages[token]

        names = [bucket.name for bucket in list_buckets(fetch)]
        self.assertEqual(names, ["a", "b"])
        self.assertEqual(tokens, [None, "t1"])


class ListObjectsTest(TestCase):
    def test_v1(self):
        result = xml.unmarshal(
            ListBucketResultV1,
            f"""<ListBucketResult {_NS}>
  <Name>bucket</Name>
  <Prefix>dir%2F</Prefix>
  <Marker></Marker>
  <NextMarker>dir%2Fb+c</NextMarker>
  <MaxKeys>1000</MaxKeys>
  <Delimiter>%2F</Delimiter>
  <EncodingType>url</EncodingType>
  <IsTruncated>true</IsTruncated>
  <Contents>
    <Key>dir%2Fb+c</Key>
    <LastModified>2015-05-05T02:21:15.716Z</LastModified>
    <ETag>"5eb63bbbe01eeed093cb22bb8f5acdc3"</ETag>
    <Size>11</Size>
    <StorageClass>STANDARD</StorageClass>
    <Owner><ID>minio</ID></Owner>
  </Contents>
  <CommonPrefixes><Prefix>dir%2Fsub%2F</Prefix></CommonPrefixes>
</ListBucketResult>""",
        )
        self.assertEqual(result.prefix, "dir/")
        self.assertEqual(result.delimiter, "/")
        self.assertEqual(result.max_keys, 1000)
        self.assertTrue(result.is_truncated)
        item = result.contents[0]
        self.assertEqual(item.object_name, "dir/b c")
        self.assertEqual(item.etag, "5eb63bbbe01eeed093cb22bb8f5acdc3")
        self.assertEqual(item.size, 11)
        self.assertEqual(item.owner.id, "minio")
        self.assertFalse(item.is_dir)
        prefix = result.common_prefixes[0]
        self.assertEqual(prefix.object_name, "dir/sub/")
        self.assertTrue(prefix.is_prefix)
        self.assertTrue(prefix.is_dir)
        self.assertEqual(len(result.items), 2)
        self.assertEqual(result.next_markers(), ("dir/b c", None))

    def test_v1_next_markers(self):
        body = (
            f"<ListBucketResult {_NS}><Name>bucket</Name>"
            "<IsTruncated>true</IsTruncated>{next_marker}"
            "<Contents><Key>a</Key></Contents>"
            "<Contents><Key>b</Key></Contents></ListBucketResult>"
        )
        result = xml.unmarshal(
            ListBucketResultV1,
            body.format(next_marker="<NextMarker>x</NextMarker>"),
        )
        self.assertEqual(result.next_marker, "x")
        self.assertEqual(result.next_markers(), ("x", None))
        result = xml.unmarshal(
            ListBucketResultV1, body.format(next_marker=""),
        )
        self.assertIsNone(result.next_marker)
        self.assertEqual(result.next_markers(), ("b", None))

    def test_v2_metadata(self):
        result = xml.unmarshal(
            ListBucketResultV2,
            f"""<ListBucketResult {_NS}>
  <Name>bucket</Name>
  <KeyCount>1</KeyCount>
  <IsTruncated>false</IsTruncated>
  <Contents>
    <Key>photo.jpg</Key>
    <Size>0</Size>
    <UserMetadata>
      <X-Amz-Meta-Color>blue</X-Amz-Meta-Color>
      <content-type>image/jpeg</content-type>
    </UserMetadata>
    <UserTags>project=x&amp;owner=y</UserTags>
    <ChecksumAlgorithm>CRC32C</ChecksumAlgorithm>
    <RestoreStatus>
      <IsRestoreInProgress>true</IsRestoreInProgress>
    </RestoreStatus>
  </Contents>
</ListBucketResult>""",
        )
        self.assertEqual(result.key_count, 1)
        item = result.contents[0]
        self.assertEqual(item.size, 0)
        self.assertEqual(
            item.user_metadata,
            {"X-Amz-Meta-Color": "blue", "content-type": "image/jpeg"},
        )
        self.assertEqual(item.user_tags, {"project": "x", "owner": "y"})
        self.assertEqual(item.checksum_algorithms, ["CRC32C"])
        self.assertTrue(item.is_restore_in_progress)
        self.assertIsNone(item.restore_expiry_date)
        self.assertEqual(result.next_markers(), (None, None))

    def test_versions(self):
        result = xml.unmarshal(
            ListVersionsResult,
            f"""<ListVersionsResult {_NS}>
  <Name>bucket</Name>
  <KeyMarker></KeyMarker>
  <NextKeyMarker>b</NextKeyMarker>
  <NextVersionIdMarker>v3</NextVersionIdMarker>
  <IsTruncated>true</IsTruncated>
  <Version>
    <Key>a</Key>
    <VersionId>v1</VersionId>
    <IsLatest>true</IsLatest>
    <Size>5</Size>
  </Version>
  <DeleteMarker>
    <Key>b</Key>
    <VersionId>v2</VersionId>
    <IsLatest>false</IsLatest>
  </DeleteMarker>
</ListVersionsResult>""",
        )
        self.assertEqual(len(result.contents), 2)
        self.assertEqual(result.versions[0].version_id, "v1")
        self.assertTrue(result.versions[0].is_latest)
        self.assertEqual(result.delete_markers[0].object_name, "b")
        self.assertTrue(result.delete_markers[0].is_delete_marker)
        self.assertFalse(result.delete_markers[0].is_latest)
        self.assertEqual(result.next_markers(), ("b", "v3"))

    def test_paginate(self):
        pages = {
            None: _v2_page(["a", "b"], True, "t1"),
            "t1": _v2_page(["c"]),
        }
        markers = []

        def fetch(marker, version_id_marker):
            markers.append((marker, version_id_marker))
            return pages[marker]

        names = [
            item.object_name
            for item in list_objects(fetch, ListBucketResultV2)
        ]
        self.assertEqual(names, ["a", "b", "c"])
        self.assertEqual(markers, [(None, None), ("t1", None)])

    def test_paginate_last_key(self):
        pages = {
            None: _v2_page(["a", "b"], True),
            "b": _v2_page(["c"]),
        }
        names = [
            item.object_name
            for item in list_objects(
                lambda marker, _: pages[marker], ListBucketResultV2,
            )
        ]
        self.assertEqual(names, ["a", "b", "c"])

    def test_paginate_stuck(self):
        page = _v2_page(["a"], True, "t1")
        iterator = list_objects(
            lambda marker, _: page, ListBucketResultV2, marker="t1",
        )
        with self.assertRaises(S3MessageException):
            list(iterator)

    def test_paginate_no_marker(self):
        page = _v2_page([], True)
        with self.assertRaises(S3MessageException):
            list(list_objects(lambda *_: page, ListBucketResultV2))
