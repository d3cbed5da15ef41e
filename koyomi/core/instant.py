"""日時値（Instant）の正規化とエポックミリ秒変換

ライブラリ内部では日時を「既定タイムゾーンのローカル時刻を表す naive datetime」
として扱う。tz 付き datetime は既定タイムゾーンへ変換してから tz を外す。

既定タイムゾーンは設定 'timezone'（初期値 'Asia/Tokyo'）。空文字列の場合は
システムのローカルタイムゾーンを使い、夏時間は日時ごとに判定する。
"""

from __future__ import annotations

import logging
import numbers
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd

from koyomi.core.config import get_config

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)


def default_zone() -> tzinfo | None:
    """設定 'timezone' に対応する tzinfo を返す。

    空文字列または未知の名前の場合は None（システムのローカルタイムゾーン）。
    None は datetime.astimezone() の引数としてそのまま使える。
    """
    name = get_config().get('timezone', '')
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning('不明なタイムゾーン %r（ローカルタイムゾーンを使用）', name)
    return None


def is_absent(value: object) -> bool:
    """None / pandas.NaT を「日付なし」として判定する。"""
    return value is None or value is pd.NaT


def _zone_at(value: datetime) -> tzinfo:
    """tz 付き日時 value を変換する先のタイムゾーン。

    システムのローカルタイムゾーンの場合は、その時点の UTC オフセットを返す。
    """
    zone = default_zone()
    if zone is not None:
        return zone
    return datetime.fromtimestamp(value.timestamp(), tz=timezone.utc).astimezone().tzinfo


def to_local(value: date | datetime | None) -> datetime | None:
    """日付値を既定タイムゾーンの naive datetime に正規化する。

    - None / NaT → None
    - tz 付き datetime → 既定タイムゾーンへ変換して tz を除去
    - naive datetime → そのまま（ローカル時刻とみなす）
    - date → その日の 0 時
    """
    if is_absent(value):
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
            return value.astimezone(_zone_at(value)).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f'日付値ではありません: {value!r}')


def to_instant(value: date | datetime | int | None) -> datetime | None:
    """日付値または経過ミリ秒（numpy.int64 などの整数型を含む）を正規化する。"""
    if isinstance(value, numbers.Integral):
        return from_millis(int(value))
    return to_local(value)


def _attach_zone(local: datetime) -> datetime:
    """naive なローカル時刻に既定タイムゾーンを付ける。"""
    zone = default_zone()
    if zone is not None:
        return local.replace(tzinfo=zone)
    # システムのローカル時刻として解釈する（pandas.Timestamp は datetime に詰め替える）
    plain = datetime(
        local.year, local.month, local.day,
        local.hour, local.minute, local.second, local.microsecond,
    )
    return plain.astimezone()


def to_millis(value: date | datetime) -> int:
    """1970/1/1 00:00:00 UTC からの経過ミリ秒を返す。"""
    return (_attach_zone(to_local(value)) - _EPOCH) // _ONE_MILLI


def from_millis(millis: int) -> datetime:
    """経過ミリ秒（1970/1/1 UTC 基準）から naive なローカル datetime を返す。"""
    aware = _EPOCH + timedelta(milliseconds=millis)
    return aware.astimezone(default_zone()).replace(tzinfo=None)
