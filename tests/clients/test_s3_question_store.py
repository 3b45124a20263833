import io
import json
import pytest
from unittest.mock import MagicMock
from botocore.exceptions import ClientError

from clients.s3_question_store import S3QuestionStore


def _client_error(op: str) -> ClientError:
    return ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, op)


def _mock_s3(objects: dict):
    s3 = MagicMock()
    paginator = MagicMock()

    def paginate(Bucket, Prefix):
        keys = [k for k in objects if k.startswith(Prefix)]
        return [{"Contents": [{"Key": k} for k in keys]}] if keys else [{}]

    paginator.paginate.side_effect = paginate
    s3.get_paginator.return_value = paginator
    s3.get_object.side_effect = lambda Bucket, Key: {
        "Body": io.BytesIO(json.dumps(objects[Key]).encode("utf-8"))
    }
    return s3


def test_add_uploads_json_under_user_prefix(make_geo_question):
    s3 = MagicMock()
    store = S3QuestionStore(bucket="test-bucket", prefix="questions", s3=s3)
    q = make_geo_question("q1", 1, 2, username="Curious_Kid")
    assert store.add(q) == "q1"
    kwargs = s3.upload_fileobj.call_args.kwargs
    assert kwargs["Bucket"] == "test-bucket"
    assert kwargs["Key"] == "questions/curious-kid/q1.json"
    assert kwargs["ExtraArgs"] == {"ContentType": "application/json"}
    assert json.loads(kwargs["Fileobj"].getvalue())["id"] == "q1"


def test_add_reraises_client_error(make_geo_question):
    s3 = MagicMock()
    s3.upload_fileobj.side_effect = _client_error("PutObject")
    store = S3QuestionStore(bucket="test-bucket", s3=s3)
    with pytest.raises(ClientError):
        store.add(make_geo_question("q1", 0, 0))


def test_list_recent_loads_all_json_newest_first(make_geo_question):
    old = make_geo_question("old", 0, 0, username="alice", minutes_ago=20)
    new = make_geo_question("new", 0, 0, username="bob", minutes_ago=2)
    objects = {
        "questions/alice/old.json": old.model_dump(mode="json"),
        "questions/bob/new.json": new.model_dump(mode="json"),
        "questions/bob/readme.txt": {},
    }
    s3 = _mock_s3(objects)
    store = S3QuestionStore(bucket="test-bucket", prefix="questions", s3=s3)
    assert [q.id for q in store.list_recent()] == ["new", "old"]
    assert s3.get_object.call_count == 2


def test_list_by_user_uses_user_prefix_and_exact_name(make_geo_question):
    mine = make_geo_question("mine", 0, 0, username="alice")
    other_case = make_geo_question("other", 0, 0, username="Alice")
    objects = {
        "questions/alice/mine.json": mine.model_dump(mode="json"),
        "questions/alice/other.json": other_case.model_dump(mode="json"),
    }
    s3 = _mock_s3(objects)
    store = S3QuestionStore(bucket="test-bucket", prefix="questions", s3=s3)
    assert [q.id for q in store.list_by_user("alice")] == ["mine"]
    s3.get_paginator.return_value.paginate.assert_called_with(
        Bucket="test-bucket", Prefix="questions/alice/"
    )


def test_empty_bucket_lists_nothing():
    store = S3QuestionStore(bucket="test-bucket", s3=_mock_s3({}))
    assert store.list_recent() == []


def test_listing_reraises_client_error():
    s3 = MagicMock()
    s3.get_paginator.return_value.paginate.side_effect = _client_error("ListObjectsV2")
    store = S3QuestionStore(bucket="test-bucket", s3=s3)
    with pytest.raises(ClientError):
        store.list_recent()
