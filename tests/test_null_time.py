"""Tests for the NullTime value type (JSON and storage boundaries)."""
import json
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, create_engine, insert, select, text

from app.playground.types import NullTime, NullTimeParseError, NullTimeType, format_rfc3339

UTC = timezone.utc


class TestJson:
    def test_not_valid_encodes_to_null(self):
        assert NullTime().to_json() is None
        assert json.dumps(NullTime().to_json()) == "null"

    @pytest.mark.parametrize("raw", [None, "", "null", "  "])
    def test_null_like_values_decode_to_not_valid(self, raw):
        nt = NullTime.from_json(raw)
        assert nt.valid is False
        assert nt.time is None

    def test_valid_encodes_to_quoted_rfc3339(self):
        nt = NullTime.of(datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC))
        assert nt.to_json() == "2021-01-02T03:04:05Z"
        assert json.dumps(nt.to_json()) == '"2021-01-02T03:04:05Z"'

    def test_decode_rfc3339(self):
        nt = NullTime.from_json("2021-01-02T03:04:05Z")
        assert nt.valid is True
        assert nt.time == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert nt.to_json() == "2021-01-02T03:04:05Z"

    def test_offset_is_kept(self):
        nt = NullTime.from_json("2021-01-02T10:04:05+07:00")
        assert nt.time == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert nt.to_json() == "2021-01-02T10:04:05+07:00"

    def test_fractional_seconds_survive_json(self):
        nt = NullTime.now()
        assert NullTime.from_json(nt.to_json()) == nt

    @pytest.mark.parametrize(
        "raw",
        [
            "yesterday",
            "2021-01-02",
            "2021-01-02T03:04:05",
            "2021-13-02T03:04:05Z",
            "2021-01-02 03:04:05Z",
        ],
    )
    def test_malformed_strings_fail(self, raw):
        with pytest.raises(NullTimeParseError):
            NullTime.from_json(raw)

    def test_non_string_fails(self):
        with pytest.raises(NullTimeParseError):
            NullTime.from_json(1609556645)


class TestDriver:
    def test_scan_none(self):
        assert NullTime.scan(None) == NullTime()

    def test_scan_naive_datetime_is_utc(self):
        nt = NullTime.scan(datetime(2021, 1, 2, 3, 4, 5))
        assert nt.valid is True
        assert nt.time == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_scan_wrong_type(self):
        with pytest.raises(TypeError, match="cannot scan str"):
            NullTime.scan("2021-01-02")

    def test_value(self):
        assert NullTime().value() is None
        plus7 = timezone(timedelta(hours=7))
        nt = NullTime.of(datetime(2021, 1, 2, 10, 4, 5, tzinfo=plus7))
        assert nt.value() == datetime(2021, 1, 2, 3, 4, 5)

    def test_storage_round_trip(self):
        engine = create_engine("sqlite://", future=True)
        md = MetaData()
        t = Table("stamps", md, Column("id", Integer, primary_key=True), Column("at", NullTimeType(), nullable=True))
        md.create_all(engine)

        stamp = NullTime.now()
        with engine.begin() as conn:
            conn.execute(insert(t).values(id=1, at=stamp))
            conn.execute(insert(t).values(id=2, at=NullTime()))
            raw = conn.execute(text("SELECT at FROM stamps WHERE id = 2")).scalar_one()
            rows = dict(conn.execute(select(t.c.id, t.c.at)).all())

        assert raw is None
        assert rows[1] == stamp
        assert rows[2] == NullTime()
        engine.dispose()


def test_valid_without_time_is_rejected():
    with pytest.raises(ValueError):
        NullTime(valid=True)


def test_format_naive_as_utc():
    assert format_rfc3339(datetime(2021, 1, 2, 3, 4, 5)) == "2021-01-02T03:04:05Z"
