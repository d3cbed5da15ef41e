"""日付操作ユーティリティ

整形・解析・加算・フィールド取得・月末／うるう年判定・期間重複判定など、
日付操作で利用頻度の高い処理を関数として提供する。

規約:
  - 日付なし（None / pandas.NaT）を渡しても例外にしない。
    文字列は ''、数値は 0、判定は False を返す。
  - tz 付き datetime は既定タイムゾーン（設定 'timezone'）のローカル時刻に変換して扱う。
  - 引数の日付は変更せず、常に新しい値を返す。
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta

import pandas as pd

from koyomi.core.config import get_config
from koyomi.core.date_pattern import MalformedInputError, format_pattern, parse_pattern
from koyomi.core.day_of_week import DayOfWeek
# from_millis / to_millis は date_util からも使えるよう再エクスポートする
from koyomi.core.instant import from_millis, is_absent, to_local, to_millis
from koyomi.core.japanese_era import JapaneseEra
from koyomi.utils.text import is_empty

logger = logging.getLogger(__name__)


class InternalInvariantError(RuntimeError):
    """検証済みのはずの年月日から日時を生成できなかった（プログラム誤り）。"""


# ── 整形 / 解析 ──────────────────────────────────────────────────────────────

def format_date(value: date | datetime | None, pattern: str) -> str:
    """日付を書式パターンで文字列化する。日付なしは '' を返す。

    tz 付き datetime は既定タイムゾーン（設定 'timezone'、初期値 'Asia/Tokyo'）の
    時刻に変換してから整形する。システムのローカルタイムゾーンを使う場合は
    'timezone' を空文字列にする。

    Examples:
        >>> format_date(datetime(2024, 2, 29, 13, 5), 'yyyy/MM/dd HH:mm')
        '2024/02/29 13:05'
        >>> format_date(None, 'yyyy/MM/dd')
        ''
    """
    local = to_local(value)
    if local is None:
        return ''
    return format_pattern(local, pattern)


def parse_date(text: str | None, pattern: str) -> datetime | None:
    """日付文字列を書式パターンで解析する。空文字列は None を返す。

    結果は既定タイムゾーン（初期値 'Asia/Tokyo'）のローカル時刻を表す naive datetime。

    範囲外の値は繰り上げて解釈する（'2000/02/31' → 2000/03/02）。
    厳密な妥当性は is_valid_date_string() で判定すること。

    Raises:
        MalformedInputError: パターンに沿って解釈できない
    """
    if is_empty(text):
        return None
    return parse_pattern(text, pattern)


# ── 加算 ─────────────────────────────────────────────────────────────────────

def _shift_months(value: datetime, months: int) -> datetime:
    """月を加算する。日は移動先の月末日で切り詰める（1/31 + 1 ヶ月 → 2/28 or 2/29）。"""
    total = value.year * 12 + (value.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    day = min(value.day, get_last_day(year, month))
    return value.replace(year=year, month=month, day=day)


def add_year(value: date | datetime | None, years: int) -> datetime | None:
    """年を加算した日付を返す（2/29 + 1 年 → 2/28）。"""
    local = to_local(value)
    if local is None:
        return None
    return _shift_months(local, years * 12)


def add_month(value: date | datetime | None, months: int) -> datetime | None:
    """月を加算した日付を返す。"""
    local = to_local(value)
    if local is None:
        return None
    return _shift_months(local, months)


def _shift(value: date | datetime | None, delta: timedelta) -> datetime | None:
    local = to_local(value)
    if local is None:
        return None
    return local + delta


def add_day(value: date | datetime | None, days: int) -> datetime | None:
    return _shift(value, timedelta(days=days))


def add_hour(value: date | datetime | None, hours: int) -> datetime | None:
    return _shift(value, timedelta(hours=hours))


def add_minute(value: date | datetime | None, minutes: int) -> datetime | None:
    return _shift(value, timedelta(minutes=minutes))


def add_second(value: date | datetime | None, seconds: int) -> datetime | None:
    return _shift(value, timedelta(seconds=seconds))


def add_millisecond(value: date | datetime | None, millis: int) -> datetime | None:
    return _shift(value, timedelta(milliseconds=millis))


def yesterday(value: date | datetime | None) -> datetime | None:
    """一日前。"""
    return add_day(value, -1)


def tomorrow(value: date | datetime | None) -> datetime | None:
    """一日先。"""
    return add_day(value, +1)


# ── フィールド取得 ───────────────────────────────────────────────────────────

def get_year(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.year


def get_month(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.month


def get_day(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.day


def get_hour(value: date | datetime | None) -> int:
    """時（24 時間表記）。"""
    local = to_local(value)
    return 0 if local is None else local.hour


def get_hour12(value: date | datetime | None) -> int:
    """時（12 時間表記、1〜12）。"""
    local = to_local(value)
    return 0 if local is None else local.hour % 12 or 12


def get_minute(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.minute


def get_second(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.second


def get_millis(value: date | datetime | None) -> int:
    local = to_local(value)
    return 0 if local is None else local.microsecond // 1000


def get_nanos(value: date | datetime | None) -> int:
    """秒未満のナノ秒（0〜999,999,999）。

    pandas.Timestamp の場合にのみ有効な値を返す。それ以外は 0。
    """
    if is_absent(value) or not isinstance(value, pd.Timestamp):
        return 0
    return value.microsecond * 1000 + value.nanosecond


def get_yyyy(value: date | datetime | None) -> str:
    return format_date(value, 'yyyy')


def get_mm(value: date | datetime | None) -> str:
    return format_date(value, 'MM')


def get_dd(value: date | datetime | None) -> str:
    return format_date(value, 'dd')


# ── 月末日 / 日付生成 ────────────────────────────────────────────────────────

def get_last_day(year: int, month: int) -> int:
    """年月の月末日（日数）を返す。13 月以降・0 月以前は年をまたいで解釈する。"""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def get_date(year: int, month: int, day: int) -> datetime:
    """年月日の日時（0 時）を返す。範囲外の月日は繰り上げて解釈する。

    負の月日も繰り下げて解釈する（2024 年 -1 月 1 日 → 2023/11/01）。

    Raises:
        InternalInvariantError: 日時として表現できない（年が 1〜9999 の範囲外など）
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return datetime(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise InternalInvariantError(f'日付を生成できません: {year}/{month}/{day}') from exc


def get_last_date(year: int, month: int) -> datetime:
    """年月の月末日の日時（0 時）を返す。"""
    return get_date(year, month, get_last_day(year, month))


# ── 曜日 / 週番号 ────────────────────────────────────────────────────────────

def get_day_of_week(value: date | datetime | None) -> DayOfWeek | None:
    local = to_local(value)
    if local is None:
        return None
    return DayOfWeek.from_date(local)


def _jan1_ordinal(year: int) -> int:
    """year 年 1 月 1 日の通日（0001/01/01 = 1）。year <= 0 にも対応する。"""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + 1


def _week1_start(year: int, first_day: int, minimal_days: int) -> int:
    """year 年の第 1 週の開始日（通日）。"""
    jan1 = _jan1_ordinal(year)
    offset = (jan1 % 7 + 1 - first_day) % 7   # 週の開始曜日から 1/1 までの日数
    start = jan1 - offset
    if 7 - offset < minimal_days:
        start += 7
    return start


def get_week_of_year(value: date | datetime | None) -> int:
    """年の中での週番号を返す。日付なしは 0。

    週の数え方は設定 'week' に従う。既定（日曜始まり・第 1 週は 1 日以上）では
    1/1 を含む週が第 1 週で、年末の数日は翌年の第 1 週になり得る。
    月曜始まり・最少 4 日にすると ISO 8601 の週番号になる。
    """
    local = to_local(value)
    if local is None:
        return 0
    week = get_config().get('week', {})
    first_day = int(week.get('first_day_of_week', DayOfWeek.SUNDAY))
    minimal_days = int(week.get('minimal_days_in_first_week', 1))

    ordinal = local.toordinal()
    year = local.year
    if ordinal >= _week1_start(year + 1, first_day, minimal_days):
        return 1
    start = _week1_start(year, first_day, minimal_days)
    if ordinal < start:
        start = _week1_start(year - 1, first_day, minimal_days)
    return (ordinal - start) // 7 + 1


# ── 日内の最小 / 最大 ────────────────────────────────────────────────────────

def get_min_of_date(value: date | datetime | None) -> datetime:
    """同じ日の 00:00:00.000 を返す。日付なしは datetime.min。"""
    local = to_local(value)
    if local is None:
        return datetime.min
    return datetime(local.year, local.month, local.day)


def get_max_of_date(value: date | datetime | None) -> datetime:
    """同じ日の 23:59:59.999 を返す。日付なしは datetime.max。"""
    local = to_local(value)
    if local is None:
        return datetime.max
    return datetime(local.year, local.month, local.day, 23, 59, 59, 999000)


# ── 判定 ─────────────────────────────────────────────────────────────────────

def is_start_of_month(value: date | datetime | None) -> bool:
    local = to_local(value)
    if local is None:
        return False
    return local.day == 1


def is_end_of_month(value: date | datetime | None) -> bool:
    local = to_local(value)
    if local is None:
        return False
    return local.day == get_last_day(local.year, local.month)


def is_leap_year(value: int | date | datetime | None) -> bool:
    """うるう年か判定する。年（int）または日付を受け付ける。"""
    if isinstance(value, int):
        return get_last_day(value, 2) == 29
    local = to_local(value)
    if local is None:
        return False
    return get_last_day(local.year, 2) == 29


def is_overlap_period(
    start1: date | datetime | None,
    end1: date | datetime | None,
    start2: date | datetime | None,
    end2: date | datetime | None,
) -> bool:
    """2 つの期間が重なるか判定する（境界を含む）。

    None の開始は無限の過去、None の終了は無限の未来とみなす。
    """
    s1 = to_local(start1) or datetime.min
    e1 = to_local(end1) or datetime.max
    s2 = to_local(start2) or datetime.min
    e2 = to_local(end2) or datetime.max
    return s1 <= e2 and s2 <= e1


def is_valid_date_string(text: str | None, pattern: str) -> bool:
    """日付文字列が書式パターンに対して正しい日付か判定する。

    parse_date() と同じく空文字列は妥当とみなす。
    '2000/02/31' のように繰り上げ解釈される文字列は、書式に戻した結果が
    元の文字列と一致しないため不正と判定する。
    """
    if is_empty(text):
        return True
    try:
        return format_pattern(parse_pattern(text, pattern), pattern) == text
    except MalformedInputError as exc:
        logger.debug('日付文字列として解釈できません: %s', exc)
        return False


# ── 和暦 ─────────────────────────────────────────────────────────────────────

def get_japanese_era(value: date | datetime | int | None) -> JapaneseEra | None:
    """日付が属する元号を返す。"""
    return JapaneseEra.match(value)


def get_japanese_year(value: date | datetime | int | None) -> int:
    """日付（または経過ミリ秒）の和暦年を返す（元号の始期の年 = 1）。日付なし・元号の範囲外は 0。"""
    era = JapaneseEra.match(value)
    if era is None:
        return 0
    return era.year_of(value)
