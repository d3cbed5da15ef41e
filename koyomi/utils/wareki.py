"""西暦 ⇔ 和暦変換ユーティリティ"""

from __future__ import annotations

import re
from datetime import date, datetime

from koyomi.core.config import get_config
from koyomi.core.date_pattern import MalformedInputError
from koyomi.core.date_util import get_date, get_day, get_month, get_year
from koyomi.core.instant import to_local
from koyomi.core.japanese_era import JapaneseEra

# 「令和7年4月1日」「令和元年」「平成31年4月」
_WAREKI_RE = re.compile(r'^\s*(\D+?)\s*(元|\d+)\s*年(?:\s*(\d+)\s*月(?:\s*(\d+)\s*日)?)?\s*$')

_WAREKI_PATTERN = '{元号}{年}年[{月}月[{日}日]]'


def _year_label(era_year: int) -> str:
    if era_year == 1 and get_config().get('wareki', {}).get('gannen', False):
        return '元'
    return str(era_year)


def to_wareki(year: int, month: int = 1, day: int = 1) -> str:
    """
    西暦年（と任意の月日）を和暦文字列に変換する。

    最初の元号（大化）より前の日付は「西暦○年」を返す。

    Examples:
        >>> to_wareki(2025)
        '令和7年'
        >>> to_wareki(2019, 5, 1)
        '令和1年'
        >>> to_wareki(2019, 4, 30)
        '平成31年'
        >>> to_wareki(1989, 1, 8)
        '平成1年'
    """
    era = JapaneseEra.match(get_date(year, month, day))
    if era is None:
        prefix = get_config().get('wareki', {}).get('unknown_era_prefix', '西暦')
        return f'{prefix}{year}年'
    return f'{era.label}{_year_label(year - era.start_year + 1)}年'


def to_wareki_full(year: int, month: int = 1, day: int = 1) -> str:
    """
    和暦を「令和7年4月1日」形式で返す。

    Examples:
        >>> to_wareki_full(2025, 4, 1)
        '令和7年4月1日'
    """
    base = to_wareki(year, month, day)
    return f'{base}{month}月{day}日'


def fiscal_year_to_wareki(fiscal_year: int) -> str:
    """
    年度（4月1日起算）の和暦を返す。

    Examples:
        >>> fiscal_year_to_wareki(2025)
        '令和7年度'
    """
    return to_wareki(fiscal_year, 4, 1) + '度'


def date_to_wareki(value: date | datetime | None) -> str:
    """日付を「令和7年4月1日」形式で返す。日付なしは ''。"""
    local = to_local(value)
    if local is None:
        return ''
    return to_wareki_full(get_year(local), get_month(local), get_day(local))


def parse_wareki(text: str | None) -> datetime | None:
    """和暦文字列を日時（0 時）に変換する。空文字列は None。

    月・日は省略可能（省略時は 1）。「元年」も受け付ける。

    Examples:
        >>> parse_wareki('令和元年5月1日')
        datetime.datetime(2019, 5, 1, 0, 0)

    Raises:
        MalformedInputError: 和暦として解釈できない、または元号名が不明
    """
    if not text:
        return None
    m = _WAREKI_RE.match(text)
    if not m:
        raise MalformedInputError('和暦として解釈できません', _WAREKI_PATTERN, text)
    era = JapaneseEra.from_label(m.group(1))
    if era is None:
        raise MalformedInputError(f'不明な元号 {m.group(1)!r}', _WAREKI_PATTERN, text)
    era_year = 1 if m.group(2) == '元' else int(m.group(2))
    month = int(m.group(3) or 1)
    day = int(m.group(4) or 1)
    return get_date(era.start_year + era_year - 1, month, day)
