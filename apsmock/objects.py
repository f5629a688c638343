"""In-memory store of OSS objects, grouped by bucket."""

from __future__ import annotations

import copy
import threading
import uuid
from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"
API_BASE = "https://developer.api.autodesk.com"


@dataclass
class ObjectInfo:
    bucket_key: str
    object_key: str
    object_id: str
    sha1: str
    size: int
    content_type: str
    location: str


class ObjectState:
    """Objects keyed by bucket key and then object key."""

    def __init__(self) -> None:
        self._objects: dict[str, dict[str, ObjectInfo]] = {}
        self._lock = threading.Lock()

    def upload_object(
        self,
        bucket_key: str,
        object_key: str,
        size: int,
        content_type: str | None = None,
    ) -> ObjectInfo:
        """Store an object, replacing one with the same key in the bucket."""
        obj = ObjectInfo(
            bucket_key=bucket_key,
            object_key=object_key,
            object_id=f"urn:adsk.objects:os.object:{bucket_key}/{object_key}",
            sha1=f"sha1_{uuid.uuid4()}",
            size=size,
            content_type=content_type if content_type is not None else DEFAULT_CONTENT_TYPE,
            location=f"{API_BASE}/oss/v2/buckets/{bucket_key}/objects/{object_key}",
        )
        with self._lock:
            self._objects.setdefault(bucket_key, {})[object_key] = obj
        return copy.copy(obj)

    def get_object(self, bucket_key: str, object_key: str) -> ObjectInfo | None:
        """Return a copy of the object, or None."""
        with self._lock:
            obj = self._objects.get(bucket_key, {}).get(object_key)
            return None if obj is None else copy.copy(obj)

    def list_objects(self, bucket_key: str) -> list[ObjectInfo]:
        """Return copies of the objects in a bucket; empty for an unknown bucket."""
        with self._lock:
            return [copy.copy(obj) for obj in self._objects.get(bucket_key, {}).values()]

    def delete_object(self, bucket_key: str, object_key: str) -> bool:
        """Remove an object; tell whether it existed."""
        with self._lock:
            bucket = self._objects.get(bucket_key)
            return bucket is not None and bucket.pop(object_key, None) is not None