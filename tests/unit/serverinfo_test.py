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

from s3messages.admin.serverinfo import (CountInfo, ErasureSetInfo,
                                         ServerInfo)


def _server(endpoint):
    return {
        "state": "online",
        "endpoint": endpoint,
        "scheme": "http",
        "uptime": 3600,
        "version": "2024-03-05T10:20:30Z",
        "commitID": "8a5c1d9f",
        "network": {endpoint: "online"},
        "drives": [
            {
                "endpoint": f"http://{endpoint}/data1",
                "rootDisk": True,
                "path": "/data1",
                "state": "ok",
                "uuid": "2e6d7bc4-8c1d-4f2f-8d3c-0a4d2e6c1f7a",
                "totalspace": 1073741824,
                "usedspace": 536870912,
                "availspace": 536870912,
                "readthroughput": 12.5,
                "utilization": 50.0,
                "metrics": {
                    "lastMinute": {
                        "read": {"count": 4, "acc_time_ns": 1200,
                                 "bytes": 4096},
                    },
                    "apiCalls": {"ReadAll": "7"},
                    "totalWrites": 9,
                },
                "heal_info": {
                    "id": "heal-1",
                    "started": "2024-03-05T10:20:30.25+05:30",
                    "items_healed": 3,
                    "queued_buckets": ["photos"],
                },
                "pool_index": 0,
                "set_index": 1,
                "disk_index": 2,
            },
        ],
        "poolNumber": 1,
        "mem_stats": {"Alloc": 1024, "HeapAlloc": 512},
        "go_max_procs": 8,
        "num_cpu": 8,
        "runtime_version": "go1.21.8",
        "gc_stats": {
            "last_gc": "2024-03-05T10:20:30Z",
            "num_gc": 2,
            "pause": [100, 200],
            "pause_end": ["2024-03-05T10:20:30Z"],
        },
        "minio_env_vars": {"MINIO_ROOT_USER": "*** redacted ***"},
    }


_SERVER_INFO = {
    "mode": "online",
    "deploymentID": "6faeded5-5cf3-4133-8a37-07c5d500207c",
    "buckets": {"count": 3},
    "objects": {"count": 120},
    "versions": {"count": 0, "error": "not supported"},
    "usage": {"size": 4096},
    "backend": {
        "backendType": "Erasure",
        "onlineDisks": 4,
        "standardSCParity": 2,
        "totalSets": [1],
        "totalDrivesPerSet": [4],
    },
    "servers": [
        _server("node1:9000"), _server("node2:9000"), _server("node3:9000"),
    ],
    "pools": {
        "0": {"0": {"id": 0, "rawUsage": 2048, "rawCapacity": 8192,
                    "objectsCount": 120, "healDisks": 1}},
    },
    "unknownProperty": True,
}


class ServerInfoTest(TestCase):
    def test_parse(self):
        info = ServerInfo.loads(json.dumps(_SERVER_INFO))
        self.assertEqual(info.mode, "online")
        self.assertEqual(
            info.deployment_id, "6faeded5-5cf3-4133-8a37-07c5d500207c",
        )
        self.assertEqual(info.buckets, CountInfo(3))
        self.assertEqual(info.objects.count, 120)
        self.assertEqual(info.versions.error, "not supported")
        self.assertEqual(info.usage.size, 4096)
        self.assertEqual(info.backend.backend_type, "Erasure")
        self.assertEqual(info.backend.online_disks, 4)
        self.assertEqual(info.backend.offline_disks, 0)
        self.assertEqual(info.backend.total_drives_per_set, [4])
        self.assertEqual(len(info.servers), 3)
        self.assertEqual(
            info.pools,
            {0: {0: ErasureSetInfo(0, 2048, 8192, 0, 120, 0, 1)}},
        )

    def test_server_properties(self):
        server = ServerInfo.loads(json.dumps(_SERVER_INFO)).servers[1]
        self.assertEqual(server.endpoint, "node2:9000")
        self.assertEqual(server.uptime, 3600)
        self.assertEqual(server.commit_id, "8a5c1d9f")
        self.assertEqual(server.network, {"node2:9000": "online"})
        self.assertEqual(server.mem_stats.alloc, 1024)
        self.assertEqual(server.mem_stats.total_alloc, 0)
        self.assertEqual(server.gc_stats.num_gc, 2)
        self.assertEqual(server.gc_stats.pause, [100, 200])
        self.assertEqual(
            server.gc_stats.last_gc,
            datetime(2024, 3, 5, 10, 20, 30, tzinfo=timezone.utc),
        )
        self.assertEqual(
            server.minio_env_vars, {"MINIO_ROOT_USER": "*** redacted ***"},
        )

        disk = server.disks[0]
        self.assertTrue(disk.root_disk)
        self.assertFalse(disk.healing)
        self.assertEqual(disk.total_space, 1073741824)
        self.assertEqual(disk.read_throughput, 12.5)
        self.assertEqual(disk.write_latency, 0)
        self.assertEqual(disk.disk_index, 2)
        self.assertEqual(disk.metrics.last_minute["read"].bytes, 4096)
        self.assertEqual(disk.metrics.api_calls, {"ReadAll": "7"})
        self.assertEqual(disk.metrics.total_writes, 9)
        self.assertEqual(disk.heal_info.items_healed, 3)
        self.assertEqual(disk.heal_info.queued_buckets, ["photos"])
        self.assertEqual(
            disk.heal_info.started,
            datetime(2024, 3, 5, 4, 50, 30, 250000, tzinfo=timezone.utc),
        )
        self.assertIsNone(disk.heal_info.last_update)

    def test_empty(self):
        info = ServerInfo.loads("{}")
        self.assertIsNone(info.mode)
        self.assertIsNone(info.buckets)
        self.assertIsNone(info.backend)
        self.assertEqual(info.servers, [])
        self.assertEqual(info.pools, {})
