"""In-memory store of OSS buckets."""

from __future__ import annotations

import copy
import threading
import time
from dataclasses import dataclass, field


@dataclass
class Permission:
    auth_id: str
    access: str


@dataclass
class BucketInfo:
    bucket_key: str
    bucket_owner: str
    created_date: int
    policy_key: str
    permissions: list[Permission] = field(default_factory=list)


class BucketState:
    """Buckets keyed by bucket key."""

    def __init__(self) -> None:
        self._buckets: dict[str, BucketInfo] = {}
        self._lock = threading.Lock()

    def create_bucket(self, bucket_key: str, policy_key: str) -> BucketInfo:
        """Create a bucket, replacing any bucket with the same key."""
        bucket = BucketInfo(
            bucket_key=bucket_key,
            bucket_owner="mock-owner",
            created_date=int(time.time() * 1000),
            policy_key=policy_key,
        )
        with self._lock:
            self._buckets[bucket_key] = bucket
        return copy.deepcopy(bucket)

    def get_bucket(self, bucket_key: str) -> BucketInfo | None:
        """Return a copy of the bucket, or None."""
        with self._lock:
            bucket = self._buckets.get(bucket_key)
            return None if bucket is None else copy.deepcopy(bucket)

    def list_buckets(self) -> list[BucketInfo]:
        """Return copies of all buckets."""
        with self._lock:
            return [copy.deepcopy(bucket) for bucket in self._buckets.values()]

    def delete_bucket(self, bucket_key: str) -> bool:
        """Remove a bucket; tell whether it existed."""
        with self._lock:
            return self._buckets.pop(bucket_key, None) is not None