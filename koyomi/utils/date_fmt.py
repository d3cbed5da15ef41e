"""外部データ由来の日付値の変換ユーティリティ

Excel シリアル値・ナノ秒精度のタイムスタンプ文字列・表記ゆれのある日付文字列を
koyomi の日時値（naive datetime / pandas.Timestamp）に揃える。
"""

from __future__ import annotations

import re
from datetime import date, datetime

import pandas as pd
from openpyxl.utils.datetime import from_excel, to_excel

from koyomi.core.date_pattern import MalformedInputError
from koyomi.core.date_util import format_date, get_date
from koyomi.core.instant import is_absent, to_local

_YMD_RE = re.compile(r'(\d{4})[-/](\d{1,2})[-/](\d{1,2})')

# 日付として扱う Excel シリアル値の範囲（1900/01/01 〜 2173/10/14 付近）
_SERIAL_MIN = 1
_SERIAL_MAX = 100000


def from_excel_serial(serial: float | int | None) -> datetime | None:
    """Excel シリアル値（1900 年基準）を datetime に変換する。

    1 未満（時刻のみの値）や None は None を返す。
    1900/02/29 が存在する Excel の仕様（シリアル 60）は openpyxl の扱いに従う。

    Examples:
        >>> from_excel_serial(43266)
        datetime.datetime(2018, 6, 15, 0, 0)
    """
    if serial is None or serial < _SERIAL_MIN:
        return None
    return from_excel(serial)


def to_excel_serial(value: date | datetime | None) -> float | None:
    """日付を Excel シリアル値（1900 年基準）に変換する。日付なしは None。"""
    local = to_local(value)
    if local is None:
        return None
    return to_excel(local)


def to_timestamp(value: object) -> pd.Timestamp | None:
    """文字列・datetime・numpy.datetime64 をナノ秒精度の pandas.Timestamp に変換する。

    tz 付きの値は既定タイムゾーンのローカル時刻に変換する。空文字列・None・NaT は None。

    Raises:
        MalformedInputError: 日時として解釈できない文字列
    """
    if is_absent(value) or (isinstance(value, str) and not value.strip()):
        return None
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError) as exc:
        raise MalformedInputError('日時として解釈できません', 'ISO 8601', str(value)) from exc
    if ts is pd.NaT:
        return None
    return to_local(ts)


def normalize_date_string(s: str, pattern: str = 'yy/MM/dd') -> str:
    """日付文字列を pattern 形式に変換する。変換不能ならそのまま返す。

    対応形式:
        - "2018-06-15" / "2018/06/15" / "2018-06-15 00:00:00"
        - Excel シリアル値 ("43266.0")
    """
    m = re.match(_YMD_RE, s)
    if m:
        y, mo, d = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if 1 <= mo <= 12:
            return format_date(get_date(y, mo, d), pattern)
        return s
    # Excel serial number (float string like "43266.0")
    try:
        serial = float(s)
    except ValueError:
        return s
    if _SERIAL_MIN < serial < _SERIAL_MAX:
        return format_date(from_excel_serial(int(serial)), pattern)
    return s
