"""core/instant.py のテスト"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pandas as pd
import pytest

from koyomi.core.instant import (
    default_zone,
    from_millis,
    is_absent,
    to_instant,
    to_local,
    to_millis,
)


class TestDefaultZone:
    def test_default_is_tokyo(self):
        assert default_zone() == ZoneInfo('Asia/Tokyo')

    def test_configured(self, write_config):
        write_config({'timezone': 'UTC'})
        assert default_zone() == ZoneInfo('UTC')

    def test_unknown_falls_back_to_local(self, write_config, caplog):
        write_config({'timezone': 'Mars/Olympus_Mons'})
        with caplog.at_level(logging.WARNING, logger='koyomi.core.instant'):
            zone = default_zone()
        assert zone is None
        assert '不明なタイムゾーン' in caplog.text

    def test_empty_means_local(self, write_config):
        write_config({'timezone': ''})
        assert default_zone() is None


class TestIsAbsent:
    def test_absent(self):
        assert is_absent(None) is True
        assert is_absent(pd.NaT) is True

    def test_present(self):
        assert is_absent(datetime(2024, 1, 1)) is False
        assert is_absent(0) is False


class TestToLocal:
    def test_naive_unchanged(self):
        value = datetime(2024, 1, 1, 12)
        assert to_local(value) is value

    def test_aware_converted(self):
        value = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert to_local(value) == datetime(2024, 1, 1, 9, 0)

    def test_date_is_midnight(self):
        assert to_local(date(2024, 2, 29)) == datetime(2024, 2, 29)

    def test_timestamp_keeps_nanos(self):
        ts = pd.Timestamp('2024-01-01 00:00:00.000000001', tz='UTC')
        local = to_local(ts)
        assert local.tzinfo is None
        assert local.hour == 9
        assert local.nanosecond == 1

    def test_absent(self):
        assert to_local(None) is None
        assert to_local(pd.NaT) is None

    def test_not_a_date(self):
        with pytest.raises(TypeError):
            to_local('2024/01/01')


class TestMillis:
    def test_epoch(self):
        assert to_millis(datetime(1970, 1, 1, 9)) == 0
        assert from_millis(0) == datetime(1970, 1, 1, 9)

    def test_known_value(self):
        # 2024/01/01 00:00 JST = 2023/12/31 15:00 UTC
        assert to_millis(datetime(2024, 1, 1)) == 1704034800000

    def test_aware(self):
        assert to_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_negative(self):
        assert from_millis(-1) == datetime(1970, 1, 1, 8, 59, 59, 999000)

    @pytest.mark.parametrize('value', [
        datetime(2024, 2, 29, 23, 59, 59, 999000),
        datetime(1989, 1, 8),
        datetime(2000, 1, 1, 12, 0, 0, 1000),
    ])
    def test_round_trip(self, value):
        assert from_millis(to_millis(value)) == value

    def test_configured_zone(self, write_config):
        write_config({'timezone': 'UTC'})
        assert to_millis(datetime(1970, 1, 1)) == 0
        assert from_millis(86_400_000) == datetime(1970, 1, 2)


class TestToInstant:
    def test_millis(self):
        assert to_instant(0) == datetime(1970, 1, 1, 9)

    def test_numpy_integer(self):
        # pandas の整数列から取り出した値は numpy.int64
        value = pd.Series([0], dtype='int64').iloc[0]
        assert to_instant(value) == datetime(1970, 1, 1, 9)

    def test_date_values(self):
        assert to_instant(date(2024, 2, 29)) == datetime(2024, 2, 29)
        assert to_instant(None) is None


# ── システムのローカルタイムゾーン（夏時間あり） ─────────────────────────────

# 2024/01/01 12:00 UTC（EST = UTC-5）と 2024/07/01 12:00 UTC（EDT = UTC-4）
_WINTER_NOON_UTC = 1704110400000
_SUMMER_NOON_UTC = 1719835200000


@pytest.fixture
def new_york_local(monkeypatch, write_config):
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset が使えない環境')
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    write_config({'timezone': ''})
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.usefixtures('new_york_local')
class TestSystemLocalZone:
    """夏時間の有無は現在時刻ではなく変換対象の日時で判定する。"""

    def test_from_millis(self):
        assert from_millis(_WINTER_NOON_UTC) == datetime(2024, 1, 1, 7, 0)
        assert from_millis(_SUMMER_NOON_UTC) == datetime(2024, 7, 1, 8, 0)

    def test_to_millis(self):
        assert to_millis(datetime(2024, 1, 1, 7, 0)) == _WINTER_NOON_UTC
        assert to_millis(datetime(2024, 7, 1, 8, 0)) == _SUMMER_NOON_UTC

    def test_aware_datetime(self):
        assert to_local(datetime(2024, 1, 1, 12, tzinfo=timezone.utc)) == datetime(2024, 1, 1, 7)
        assert to_local(datetime(2024, 7, 1, 12, tzinfo=timezone.utc)) == datetime(2024, 7, 1, 8)

    def test_aware_timestamp(self):
        ts = pd.Timestamp('2024-01-01 12:00:00.000000001', tz='UTC')
        local = to_local(ts)
        assert local == pd.Timestamp('2024-01-01 07:00:00.000000001')
        assert local.tzinfo is None

    def test_naive_timestamp_to_millis(self):
        assert to_millis(pd.Timestamp('2024-07-01 08:00:00')) == _SUMMER_NOON_UTC
