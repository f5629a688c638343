from apsmock.objects import ObjectState


def test_upload_and_get_object():
    state = ObjectState()
    obj = state.upload_object("bkt", "model.rvt", 1024, "application/x-revit")
    assert obj.bucket_key == "bkt"
    assert obj.object_key == "model.rvt"
    assert obj.size == 1024
    assert obj.content_type == "application/x-revit"
    assert obj.object_id == "urn:adsk.objects:os.object:" + "bkt/model.rvt"
    assert obj.location.endswith("/oss/v2/buckets/bkt/objects/model.rvt")
    assert state.get_object("bkt", "model.rvt") == obj


def test_default_content_type():
    obj = ObjectState().upload_object("bkt", "file.bin", 3, None)
    assert obj.content_type == "application/octet-stream"


def test_sha1_is_unique_per_upload():
    state = ObjectState()
    first = state.upload_object("bkt", "a", 1, None)
    second = state.upload_object("bkt", "b", 1, None)
    assert first.sha1.startswith("sha1_")
    assert second.sha1.startswith("sha1_")
    assert first.sha1 != second.sha1


def test_get_missing_object():
    state = ObjectState()
    state.upload_object("bkt", "a", 1, None)
    assert state.get_object("bkt", "b") is None
    assert state.get_object("other", "a") is None


def test_list_objects_per_bucket():
    state = ObjectState()
    state.upload_object("one", "a", 1, None)
    state.upload_object("one", "b", 2, None)
    state.upload_object("two", "c", 3, None)
    assert sorted(o.object_key for o in state.list_objects("one")) == ["a", "b"]
    assert [o.object_key for o in state.list_objects("two")] == ["c"]
    assert state.list_objects("none") == []


def test_upload_same_key_replaces():
    state = ObjectState()
    state.upload_object("bkt", "a", 1, None)
    state.upload_object("bkt", "a", 9, None)
    objects = state.list_objects("bkt")
    assert len(objects) == 1
    assert objects[0].size == 9


def test_delete_object():
    state = ObjectState()
    state.upload_object("bkt", "a", 1, None)
    assert state.delete_object("bkt", "a") is True
    assert state.get_object("bkt", "a") is None
    assert state.delete_object("bkt", "a") is False
    assert state.delete_object("missing", "a") is False


def test_returned_objects_are_copies():
    state = ObjectState()
    obj = state.upload_object("bkt", "a", 1, None)
    obj.size = 500
    assert state.get_object("bkt", "a").size == 1