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

"""Data usage messages of MinIO admin API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Type

from ..time import from_rfc3339


@dataclass(frozen=True)
class BucketTargetUsageInfo:
    """Replication usage of a bucket target."""
    objects_pending_replication_total_size: int = 0
    objects_failed_replication_total_size: int = 0
    objects_replicated_total_size: int = 0
    object_replica_total_size: int = 0
    objects_pending_replication_count: int = 0
    objects_failed_replication_count: int = 0

    @classmethod
    def fromjson(
            cls: Type[BucketTargetUsageInfo],
            data: dict[str, Any],
    ) -> BucketTargetUsageInfo:
        """Create new object with values from JSON data."""
        return cls(
            objects_pending_replication_total_size=int(
                data.get("objectsPendingReplicationTotalSize", 0),
            ),
            objects_failed_replication_total_size=int(
                data.get("objectsFailedReplicationTotalSize", 0),
            ),
            objects_replicated_total_size=int(
                data.get("objectsReplicatedTotalSize", 0),
            ),
            object_replica_total_size=int(
                data.get("objectReplicaTotalSize", 0),
            ),
            objects_pending_replication_count=int(
                data.get("objectsPendingReplicationCount", 0),
            ),
            objects_failed_replication_count=int(
                data.get("objectsFailedReplicationCount", 0),
            ),
        )


def _replication_info(
        data: dict[str, Any],
) -> dict[str, BucketTargetUsageInfo]:
    return {
        arn: BucketTargetUsageInfo.fromjson(info)
        for arn, info in (data.get("objectsReplicationInfo") or {}).items()
    }


@dataclass(frozen=True)
class BucketUsageInfo:
    """Usage of a bucket."""
    size: int = 0
    objects_pending_replication_total_size: int = 0
    objects_failed_replication_total_size: int = 0
    objects_replicated_total_size: int = 0
    objects_pending_replication_count: int = 0
    objects_failed_replication_count: int = 0
    objects_count: int = 0
    objects_sizes_histogram: dict[str, int] = field(default_factory=dict)
    versions_count: int = 0
    object_replica_total_size: int = 0
    objects_replication_info: dict[str, BucketTargetUsageInfo] = field(
        default_factory=dict,
    )

    @classmethod
    def fromjson(
            cls: Type[BucketUsageInfo],
            data: dict[str, Any],
    ) -> BucketUsageInfo:
        """Create new object with values from JSON data."""
        return cls(
            size=int(data.get("size", 0)),
            objects_pending_replication_total_size=int(
                data.get("objectsPendingReplicationTotalSize", 0),
            ),
            objects_failed_replication_total_size=int(
                data.get("objectsFailedReplicationTotalSize", 0),
            ),
            objects_replicated_total_size=int(
                data.get("objectsReplicatedTotalSize", 0),
            ),
            objects_pending_replication_count=int(
                data.get("objectsPendingReplicationCount", 0),
            ),
            objects_failed_replication_count=int(
                data.get("objectsFailedReplicationCount", 0),
            ),
            objects_count=int(data.get("objectsCount", 0)),
            objects_sizes_histogram={
                name: int(count)
                for name, count in (
                    data.get("objectsSizesHistogram") or {}
                ).items()
            },
            versions_count=int(data.get("versionsCount", 0)),
            object_replica_total_size=int(
                data.get("objectReplicaTotalSize", 0),
            ),
            objects_replication_info=_replication_info(data),
        )


@dataclass(frozen=True)
class TierStats:
    """Usage of a storage tier."""
    total_size: int = 0
    num_versions: int = 0
    num_objects: int = 0

    @classmethod
    def fromjson(cls: Type[TierStats], data: dict[str, Any]) -> TierStats:
        """Create new object with values from JSON data."""
        return cls(
            total_size=int(data.get("totalSize", 0)),
            num_versions=int(data.get("numVersions", 0)),
            num_objects=int(data.get("numObjects", 0)),
        )


@dataclass(frozen=True)
class DataUsageInfo:
    """Data usage of the whole deployment."""
    last_update: Optional[datetime] = None
    objects_count: int = 0
    versions_count: int = 0
    objects_total_size: int = 0
    objects_replication_info: dict[str, BucketTargetUsageInfo] = field(
        default_factory=dict,
    )
    buckets_count: int = 0
    buckets_usage_info: dict[str, BucketUsageInfo] = field(
        default_factory=dict,
    )
    buckets_sizes: dict[str, int] = field(default_factory=dict)
    tier_stats: dict[str, TierStats] = field(default_factory=dict)

    @classmethod
    def fromjson(
            cls: Type[DataUsageInfo],
            data: dict[str, Any],
    ) -> DataUsageInfo:
        """Create new object with values from JSON data."""
        tiers = (data.get("tierStats") or {}).get("Tiers") or {}
        return cls(
            last_update=from_rfc3339(data.get("lastUpdate")),
            objects_count=int(data.get("objectsCount", 0)),
            versions_count=int(data.get("versionsCount", 0)),
            objects_total_size=int(data.get("objectsTotalSize", 0)),
            objects_replication_info=_replication_info(data),
            buckets_count=int(data.get("bucketsCount", 0)),
            buckets_usage_info={
                name: BucketUsageInfo.fromjson(info)
                for name, info in (
                    data.get("bucketsUsageInfo") or {}
                ).items()
            },
            buckets_sizes={
                name: int(size)
                for name, size in (data.get("bucketsSizes") or {}).items()
            },
            tier_stats={
                name: TierStats.fromjson(stats)
                for name, stats in tiers.items()
            },
        )

    @classmethod
    def loads(cls: Type[DataUsageInfo], text: str) -> DataUsageInfo:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))
