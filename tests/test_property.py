import pytest

from smartcommunity.database import Database
from smartcommunity.property import (
    DOCUMENT_COLUMNS,
    list_properties,
    parse_status,
    status_label,
    update_documents,
)


@pytest.fixture
def db(tmp_path):
    with Database(tmp_path / "community.db") as database:
        database.create_schema()
        yield database


def _add_property(db, owner_id, name):
    db.query(
        "INSERT INTO owner_property (owner_id, name) VALUES (?, ?)", (owner_id, name)
    )
    return db.query("SELECT last_insert_rowid()")[0][0]


def test_status_label():
    assert status_label("1") == "已上传电子版"
    assert status_label(1) == "已上传电子版"
    assert status_label(0) == "未上传电子版"


def test_parse_status():
    assert parse_status("已上传电子版") == 1
    assert parse_status("未上传电子版") == 0
    assert parse_status("请选择状态") == 0


@pytest.mark.parametrize("value", [0, 1])
def test_label_round_trip(value):
    assert parse_status(status_label(value)) == value


def test_list_properties_for_owner(db):
    first = _add_property(db, 1, "Flat A")
    _add_property(db, 2, "Flat B")
    records = list_properties(db, 1)
    assert [r.id for r in records] == [first]
    assert records[0].name == "Flat A"
    assert not any(records[0].documents.values())
    assert set(records[0].documents) == set(DOCUMENT_COLUMNS)


def test_update_documents_with_labels(db):
    prop = _add_property(db, 1, "Flat A")
    labels = ["已上传电子版", "未上传电子版"] * 5
    assert update_documents(db, prop, 1, labels) is True
    record = list_properties(db, 1)[0]
    assert record.labels == labels


def test_update_documents_with_flags(db):
    prop = _add_property(db, 1, "Flat A")
    flags = [True] * 10
    assert update_documents(db, prop, 1, flags) is True
    records = list_properties(db, 1)
    assert len(records) == 1
    assert all(records[0].documents.values())
    assert records[0].labels == ["已上传电子版"] * 10


def test_update_requires_matching_owner(db):
    prop = _add_property(db, 1, "Flat A")
    assert update_documents(db, prop, 2, [True] * 10) is False
    assert not any(list_properties(db, 1)[0].documents.values())


def test_update_wrong_count_raises(db):
    prop = _add_property(db, 1, "Flat A")
    with pytest.raises(ValueError):
        update_documents(db, prop, 1, [True] * 9)