"""Tests for the query-to-record mapper."""

import logging

import pytest

from markblog.db.mapper import RecordMapper, StoreQueryError, map_row, projection_fields


def test_projection_fields_are_trimmed_in_order() -> None:
    assert projection_fields("SELECT a, b ,c FROM t WHERE x = ?") == ["a", "b", "c"]


def test_projection_fields_case_insensitive() -> None:
    assert projection_fields("select id,title from posts") == ["id", "title"]


def test_projection_fields_keep_aliases_verbatim() -> None:
    """Computed and aliased projections are used as keys as written."""
    assert projection_fields("SELECT count(id) AS n, user FROM posts") == [
        "count(id) AS n",
        "user",
    ]


def test_projection_fields_without_from() -> None:
    assert projection_fields("SELECT 1, 2") == []
    assert projection_fields("") == []


def test_projection_fields_stop_at_first_from() -> None:
    sql = "SELECT id FROM posts WHERE id IN (SELECT id FROM posts)"
    assert projection_fields(sql) == ["id"]


def test_map_row_stops_at_shorter_sequence() -> None:
    assert map_row(["a", "b", "c"], (1, 2)) == {"a": 1, "b": 2}
    assert map_row(["a"], (1, 2, 3)) == {"a": 1}
    assert map_row([], (1, 2)) == {}


def test_query_keys_follow_projection(db_session, make_post) -> None:
    """Every record carries exactly the projected keys, in projection order."""
    make_post("Mark", title="first", body="one")
    make_post("Markerpen", title="second", body="two")

    mapper = RecordMapper(db_session)
    records = mapper.query("SELECT user, title, id FROM posts")

    assert len(records) == 2
    for record in records:
        assert list(record) == ["user", "title", "id"]
    assert [r["title"] for r in records] == ["first", "second"]


def test_query_binds_positional_params(db_session, make_post) -> None:
    make_post("Mark", title="mine")
    make_post("Markerpen", title="theirs")

    mapper = RecordMapper(db_session)
    records = mapper.query("SELECT title FROM posts WHERE user = ?", ["Markerpen"])

    assert records == [{"title": "theirs"}]


def test_query_preserves_duplicates_and_order(db_session, make_post) -> None:
    for user in ("Mark", "Mark", "Markerpen"):
        make_post(user)

    records = RecordMapper(db_session).query("SELECT user FROM posts")

    assert [r["user"] for r in records] == ["Mark", "Mark", "Markerpen"]


def test_query_aliased_projection_key(db_session, make_post) -> None:
    make_post("Mark")
    make_post("Mark")

    records = RecordMapper(db_session).query("SELECT count(id) AS n FROM posts")

    assert records == [{"count(id) AS n": 2}]


def test_query_without_from_drops_values(db_session) -> None:
    """Rows are still counted, but their values have no keys to land on."""
    records = RecordMapper(db_session).query("SELECT 'a' UNION ALL SELECT 'b'")

    assert records == [{}, {}]


def test_query_with_fewer_names_than_values(db_session, make_post) -> None:
    make_post("Mark", title="t")
    post_id = RecordMapper(db_session).query("SELECT id FROM posts")[0]["id"]

    records = RecordMapper(db_session).query("SELECT * FROM posts")

    assert records == [{"*": post_id}]


def test_query_with_more_names_than_values(db_session, make_post) -> None:
    make_post("Mark")

    records = RecordMapper(db_session).query("SELECT 'x, y' FROM posts")

    assert records == [{"'x": "x, y"}]


def test_query_explicit_columns_override_parsing(db_session, make_post) -> None:
    make_post("Mark", title="hello")

    records = RecordMapper(db_session).query(
        "SELECT title, user FROM posts",
        columns=["heading", "author"],
    )

    assert records == [{"heading": "hello", "author": "Mark"}]


def test_query_empty_result(db_session, engine) -> None:
    assert RecordMapper(db_session).query("SELECT id FROM posts WHERE user = ?", ["nobody"]) == []


def test_query_unknown_table_raises(db_session) -> None:
    with pytest.raises(StoreQueryError) as exc_info:
        RecordMapper(db_session).query("SELECT id FROM no_such_table")
    assert exc_info.value.sql == "SELECT id FROM no_such_table"
    assert exc_info.value.__cause__ is not None


def test_query_bind_count_mismatch_raises(db_session, engine) -> None:
    with pytest.raises(StoreQueryError):
        RecordMapper(db_session).query("SELECT id FROM posts WHERE user = ?", [])


def test_query_logs_table_row_count(db_session, make_post, caplog) -> None:
    make_post("Mark")
    make_post("Mark")
    caplog.set_level(logging.DEBUG, logger="markblog.db.mapper")

    RecordMapper(db_session, count_table="posts").query("SELECT id FROM posts")

    assert "Table posts holds 2 rows" in caplog.text


def test_query_skips_row_count_without_table(db_session, make_post, caplog) -> None:
    make_post("Mark")
    caplog.set_level(logging.DEBUG, logger="markblog.db.mapper")

    RecordMapper(db_session).query("SELECT id FROM posts")

    assert "holds" not in caplog.text


def test_query_survives_failed_row_count(db_session, make_post, caplog) -> None:
    """A broken diagnostic count is logged and the query still returns its rows."""
    post = make_post("Mark")
    caplog.set_level(logging.DEBUG, logger="markblog.db.mapper")

    records = RecordMapper(db_session, count_table="no_such_table").query("SELECT id FROM posts")

    assert records == [{"id": post.id}]
    assert "Could not count rows of no_such_table" in caplog.text
