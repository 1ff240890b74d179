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

"""Server information messages of MinIO admin API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Type, cast

from ..time import from_rfc3339


def _int(data: dict[str, Any], key: str) -> int:
    return int(data.get(key) or 0)


def _float(data: dict[str, Any], key: str) -> float:
    return float(data.get(key) or 0)


@dataclass(frozen=True)
class CountInfo:
    """Count of buckets, objects or versions with optional error."""
    count: int = 0
    error: Optional[str] = None

    @classmethod
    def fromjson(cls: Type[CountInfo], data: dict[str, Any]) -> CountInfo:
        """Create new object with values from JSON data."""
        return cls(count=_int(data, "count"), error=data.get("error"))


@dataclass(frozen=True)
class UsageInfo:
    """Total usage with optional error."""
    size: int = 0
    error: Optional[str] = None

    @classmethod
    def fromjson(cls: Type[UsageInfo], data: dict[str, Any]) -> UsageInfo:
        """Create new object with values from JSON data."""
        return cls(size=_int(data, "size"), error=data.get("error"))


@dataclass(frozen=True)
class Backend:
    """Storage backend information."""
    backend_type: Optional[str] = None
    online_disks: int = 0
    offline_disks: int = 0
    standard_sc_parity: int = 0
    rr_sc_parity: int = 0
    total_sets: list[int] = field(default_factory=list)
    total_drives_per_set: list[int] = field(default_factory=list)

    @classmethod
    def fromjson(cls: Type[Backend], data: dict[str, Any]) -> Backend:
        """Create new object with values from JSON data."""
        return cls(
            backend_type=data.get("backendType"),
            online_disks=_int(data, "onlineDisks"),
            offline_disks=_int(data, "offlineDisks"),
            standard_sc_parity=_int(data, "standardSCParity"),
            rr_sc_parity=_int(data, "rrSCParity"),
            total_sets=[int(value) for value in data.get("totalSets") or []],
            total_drives_per_set=[
                int(value) for value in data.get("totalDrivesPerSet") or []
            ],
        )


@dataclass(frozen=True)
class TimedAction:
    """Count, accumulated time and bytes of a drive operation."""
    count: int = 0
    acc_time_ns: int = 0
    bytes: int = 0

    @classmethod
    def fromjson(
            cls: Type[TimedAction],
            data: dict[str, Any],
    ) -> TimedAction:
        """Create new object with values from JSON data."""
        return cls(
            count=_int(data, "count"),
            acc_time_ns=_int(data, "acc_time_ns"),
            bytes=_int(data, "bytes"),
        )


@dataclass(frozen=True)
class DiskMetrics:
    """Drive metrics."""
    last_minute: dict[str, TimedAction] = field(default_factory=dict)
    api_calls: dict[str, str] = field(default_factory=dict)
    total_errors_availability: int = 0
    total_errors_timeout: int = 0
    total_tokens: int = 0
    total_waiting: int = 0
    total_writes: int = 0
    total_deletes: int = 0

    @classmethod
    def fromjson(
            cls: Type[DiskMetrics],
            data: dict[str, Any],
    ) -> DiskMetrics:
        """Create new object with values from JSON data."""
        return cls(
            last_minute={
                name: TimedAction.fromjson(action)
                for name, action in (data.get("lastMinute") or {}).items()
            },
            api_calls={
                name: str(value)
                for name, value in (data.get("apiCalls") or {}).items()
            },
            total_errors_availability=_int(data, "totalErrorsAvailability"),
            total_errors_timeout=_int(data, "totalErrorsTimeout"),
            total_tokens=_int(data, "totalTokens"),
            total_waiting=_int(data, "totalWaiting"),
            total_writes=_int(data, "totalWrites"),
            total_deletes=_int(data, "totalDeletes"),
        )


@dataclass(frozen=True)
class HealingDisk:
    """Healing progress of a drive."""
    id: Optional[str] = None
    heal_id: Optional[str] = None
    pool_index: int = 0
    set_index: int = 0
    disk_index: int = 0
    endpoint: Optional[str] = None
    path: Optional[str] = None
    started: Optional[datetime] = None
    last_update: Optional[datetime] = None
    objects_total_count: int = 0
    objects_total_size: int = 0
    items_healed: int = 0
    items_failed: int = 0
    bytes_done: int = 0
    bytes_failed: int = 0
    objects_healed: int = 0
    objects_failed: int = 0
    current_bucket: Optional[str] = None
    current_object: Optional[str] = None
    queued_buckets: list[str] = field(default_factory=list)
    healed_buckets: list[str] = field(default_factory=list)

    @classmethod
    def fromjson(
            cls: Type[HealingDisk],
            data: dict[str, Any],
    ) -> HealingDisk:
        """Create new object with values from JSON data."""
        return cls(
            id=data.get("id"),
            heal_id=data.get("heal_id"),
            pool_index=_int(data, "pool_index"),
            set_index=_int(data, "set_index"),
            disk_index=_int(data, "disk_index"),
            endpoint=data.get("endpoint"),
            path=data.get("path"),
            started=from_rfc3339(data.get("started")),
            last_update=from_rfc3339(data.get("last_update")),
            objects_total_count=_int(data, "objects_total_count"),
            objects_total_size=_int(data, "objects_total_size"),
            items_healed=_int(data, "items_healed"),
            items_failed=_int(data, "items_failed"),
            bytes_done=_int(data, "bytes_done"),
            bytes_failed=_int(data, "bytes_failed"),
            objects_healed=_int(data, "objects_healed"),
            objects_failed=_int(data, "objects_failed"),
            current_bucket=data.get("current_bucket"),
            current_object=data.get("current_object"),
            queued_buckets=list(data.get("queued_buckets") or []),
            healed_buckets=list(data.get("healed_buckets") or []),
        )


@dataclass(frozen=True)
class Disk:
    """Drive information of a server."""
    endpoint: Optional[str] = None
    root_disk: bool = False
    path: Optional[str] = None
    healing: bool = False
    scanning: bool = False
    state: Optional[str] = None
    uuid: Optional[str] = None
    major: int = 0
    minor: int = 0
    model: Optional[str] = None
    total_space: int = 0
    used_space: int = 0
    avail_space: int = 0
    read_throughput: float = 0
    write_throughput: float = 0
    read_latency: float = 0
    write_latency: float = 0
    utilization: float = 0
    metrics: Optional[DiskMetrics] = None
    heal_info: Optional[HealingDisk] = None
    used_inodes: int = 0
    free_inodes: int = 0
    pool_index: int = 0
    set_index: int = 0
    disk_index: int = 0

    @classmethod
    def fromjson(cls: Type[Disk], data: dict[str, Any]) -> Disk:
        """Create new object with values from JSON data."""
        metrics = data.get("metrics")
        heal_info = data.get("heal_info")
        return cls(
            endpoint=data.get("endpoint"),
            root_disk=bool(data.get("rootDisk")),
            path=data.get("path"),
            healing=bool(data.get("healing")),
            scanning=bool(data.get("scanning")),
            state=data.get("state"),
            uuid=data.get("uuid"),
            major=_int(data, "major"),
            minor=_int(data, "minor"),
            model=data.get("model"),
            total_space=_int(data, "totalspace"),
            used_space=_int(data, "usedspace"),
            avail_space=_int(data, "availspace"),
            read_throughput=_float(data, "readthroughput"),
            write_throughput=_float(data, "writethroughput"),
            read_latency=_float(data, "readlatency"),
            write_latency=_float(data, "writelatency"),
            utilization=_float(data, "utilization"),
            metrics=DiskMetrics.fromjson(metrics) if metrics else None,
            heal_info=HealingDisk.fromjson(heal_info) if heal_info else None,
            used_inodes=_int(data, "used_inodes"),
            free_inodes=_int(data, "free_inodes"),
            pool_index=_int(data, "pool_index"),
            set_index=_int(data, "set_index"),
            disk_index=_int(data, "disk_index"),
        )


@dataclass(frozen=True)
class MemStats:
    """Go runtime memory statistics of a server."""
    alloc: int = 0
    total_alloc: int = 0
    mallocs: int = 0
    frees: int = 0
    heap_alloc: int = 0

    @classmethod
    def fromjson(cls: Type[MemStats], data: dict[str, Any]) -> MemStats:
        """Create new object with values from JSON data."""
        return cls(
            alloc=_int(data, "Alloc"),
            total_alloc=_int(data, "TotalAlloc"),
            mallocs=_int(data, "Mallocs"),
            frees=_int(data, "Frees"),
            heap_alloc=_int(data, "HeapAlloc"),
        )


@dataclass(frozen=True)
class GCStats:
    """Go runtime garbage collection statistics of a server."""
    last_gc: Optional[datetime] = None
    num_gc: int = 0
    pause_total: int = 0
    pause: list[int] = field(default_factory=list)
    pause_end: list[datetime] = field(default_factory=list)

    @classmethod
    def fromjson(cls: Type[GCStats], data: dict[str, Any]) -> GCStats:
        """Create new object with values from JSON data."""
        return cls(
            last_gc=from_rfc3339(data.get("last_gc")),
            num_gc=_int(data, "num_gc"),
            pause_total=_int(data, "pause_total"),
            pause=[int(value) for value in data.get("pause") or []],
            pause_end=[
                cast(datetime, from_rfc3339(value))
                for value in data.get("pause_end") or []
            ],
        )


@dataclass(frozen=True)
class ServerProperties:
    """Properties of a server in the deployment."""
    state: Optional[str] = None
    endpoint: Optional[str] = None
    scheme: Optional[str] = None
    uptime: int = 0
    version: Optional[str] = None
    commit_id: Optional[str] = None
    network: dict[str, str] = field(default_factory=dict)
    disks: list[Disk] = field(default_factory=list)
    pool_number: int = 0
    mem_stats: Optional[MemStats] = None
    go_max_procs: int = 0
    num_cpu: int = 0
    runtime_version: Optional[str] = None
    gc_stats: Optional[GCStats] = None
    minio_env_vars: dict[str, str] = field(default_factory=dict)

    @classmethod
    def fromjson(
            cls: Type[ServerProperties],
            data: dict[str, Any],
    ) -> ServerProperties:
        """Create new object with values from JSON data."""
        mem_stats = data.get("mem_stats")
        gc_stats = data.get("gc_stats")
        return cls(
            state=data.get("state"),
            endpoint=data.get("endpoint"),
            scheme=data.get("scheme"),
            uptime=_int(data, "uptime"),
            version=data.get("version"),
            commit_id=data.get("commitID"),
            network=dict(data.get("network") or {}),
            disks=[Disk.fromjson(disk) for disk in data.get("drives") or []],
            pool_number=_int(data, "poolNumber"),
            mem_stats=MemStats.fromjson(mem_stats) if mem_stats else None,
            go_max_procs=_int(data, "go_max_procs"),
            num_cpu=_int(data, "num_cpu"),
            runtime_version=data.get("runtime_version"),
            gc_stats=GCStats.fromjson(gc_stats) if gc_stats else None,
            minio_env_vars=dict(data.get("minio_env_vars") or {}),
        )


@dataclass(frozen=True)
class ErasureSetInfo:
    """Usage of an erasure set."""
    id: int = 0
    raw_usage: int = 0
    raw_capacity: int = 0
    usage: int = 0
    objects_count: int = 0
    versions_count: int = 0
    heal_disks: int = 0

    @classmethod
    def fromjson(
            cls: Type[ErasureSetInfo],
            data: dict[str, Any],
    ) -> ErasureSetInfo:
        """Create new object with values from JSON data."""
        return cls(
            id=_int(data, "id"),
            raw_usage=_int(data, "rawUsage"),
            raw_capacity=_int(data, "rawCapacity"),
            usage=_int(data, "usage"),
            objects_count=_int(data, "objectsCount"),
            versions_count=_int(data, "versionsCount"),
            heal_disks=_int(data, "healDisks"),
        )


@dataclass(frozen=True)
class ServerInfo:
    """Server information of the deployment."""
    mode: Optional[str] = None
    deployment_id: Optional[str] = None
    buckets: Optional[CountInfo] = None
    objects: Optional[CountInfo] = None
    versions: Optional[CountInfo] = None
    usage: Optional[UsageInfo] = None
    backend: Optional[Backend] = None
    servers: list[ServerProperties] = field(default_factory=list)
    pools: dict[int, dict[int, ErasureSetInfo]] = field(
        default_factory=dict,
    )

    @classmethod
    def fromjson(cls: Type[ServerInfo], data: dict[str, Any]) -> ServerInfo:
        """Create new object with values from JSON data."""
        buckets = data.get("buckets")
        objects = data.get("objects")
        versions = data.get("versions")
        usage = data.get("usage")
        backend = data.get("backend")
        return cls(
            mode=data.get("mode"),
            deployment_id=data.get("deploymentID"),
            buckets=CountInfo.fromjson(buckets) if buckets else None,
            objects=CountInfo.fromjson(objects) if objects else None,
            versions=CountInfo.fromjson(versions) if versions else None,
            usage=UsageInfo.fromjson(usage) if usage else None,
            backend=Backend.fromjson(backend) if backend else None,
            servers=[
                ServerProperties.fromjson(server)
                for server in data.get("servers") or []
            ],
            # JSON object keys of pool and set indices are strings.
            pools={
                int(pool): {
                    int(index): ErasureSetInfo.fromjson(info)
                    for index, info in sets.items()
                }
                for pool, sets in (data.get("pools") or {}).items()
            },
        )

    @classmethod
    def loads(cls: Type[ServerInfo], text: str) -> ServerInfo:
        """Create new object from JSON text."""
        return cls.fromjson(json.loads(text))
