"""日付書式パターン（yyyy/MM/dd HH:mm:ss.SSS 形式）の整形・解析エンジン

一般的な日付書式文字（yyyy, MM, dd …）のサブセットを扱う。

対応する書式文字:
  y 年 / M 月 / d 日 / H 時(0-23) / h 時(1-12) / m 分 / s 秒 / S ミリ秒
  E 曜日（英語名） / a 午前午後（AM/PM）
  '...' は引用リテラル、'' は単一引用符。それ以外の英字は不正な書式文字。

解析は寛容（lenient）:
  - 数値フィールドの直後に数値フィールドが続く場合は桁数どおりに読む（yyyyMMdd）
  - それ以外の数値は連続する数字をすべて読む
  - 範囲外の値は繰り上がる（2/31 → 3/2 or 3/3, 13 月 → 翌年 1 月）
  - パターン消費後の余りの文字列は無視する
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from koyomi.core.config import get_config

# ── 定数 ─────────────────────────────────────────────────────────────────────

_NUMERIC_FIELDS = frozenset('ydHhmsS')
_PATTERN_FIELDS = frozenset('yMdHhmsSEa')

MONTH_NAMES: tuple[str, ...] = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)
MONTH_ABBRS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

# 日曜始まり（DayOfWeek の値 - 1 がインデックス）
WEEKDAY_NAMES: tuple[str, ...] = (
    'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday',
)
WEEKDAY_ABBRS: tuple[str, ...] = tuple(name[:3] for name in WEEKDAY_NAMES)

_AM_PM: tuple[str, ...] = ('AM', 'PM')


class MalformedInputError(ValueError):
    """日付文字列または書式パターンを解釈できない。"""

    def __init__(self, message: str, pattern: str, text: str | None = None) -> None:
        detail = f'{message} (pattern={pattern!r}'
        if text is not None:
            detail += f', text={text!r}'
        super().__init__(detail + ')')
        self.pattern = pattern
        self.text = text


# ── パターン字句解析 ─────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class _Field:
    """書式文字の連続（例: 'yyyy' → letter='y', count=4）。"""
    letter: str
    count: int

    @property
    def numeric(self) -> bool:
        if self.letter == 'M':
            return self.count <= 2
        return self.letter in _NUMERIC_FIELDS


@functools.lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> tuple[_Field | str, ...]:
    """書式パターンをフィールドとリテラル文字列の並びに分解する。

    Raises:
        MalformedInputError: 不正な書式文字、閉じていない引用符
    """
    tokens: list[_Field | str] = []
    literal: list[str] = []
    n = len(pattern)
    i = 0

    def _flush() -> None:
        if literal:
            tokens.append(''.join(literal))
            literal.clear()

    while i < n:
        c = pattern[i]
        if c == "'":
            # '' は単一引用符
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            j = i + 1
            while True:
                if j >= n:
                    raise MalformedInputError('引用符が閉じていません', pattern)
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            i = j + 1
            continue
        if c.isascii() and c.isalpha():
            if c not in _PATTERN_FIELDS:
                raise MalformedInputError(f'不正な書式文字 {c!r}', pattern)
            count = 1
            while i + count < n and pattern[i + count] == c:
                count += 1
            _flush()
            tokens.append(_Field(c, count))
            i += count
            continue
        literal.append(c)
        i += 1
    _flush()
    return tuple(tokens)


# ── 整形 ─────────────────────────────────────────────────────────────────────

def _weekday_index(value: date) -> int:
    """日曜=0 … 土曜=6"""
    return value.isoweekday() % 7


def _format_field(field: _Field, value: datetime) -> str:
    letter, count = field.letter, field.count
    if letter == 'y':
        if count == 2:
            return f'{value.year % 100:02d}'
        return str(value.year).zfill(count)
    if letter == 'M':
        if count >= 4:
            return MONTH_NAMES[value.month - 1]
        if count == 3:
            return MONTH_ABBRS[value.month - 1]
        return str(value.month).zfill(count)
    if letter == 'E':
        idx = _weekday_index(value)
        return WEEKDAY_NAMES[idx] if count >= 4 else WEEKDAY_ABBRS[idx]
    if letter == 'a':
        return _AM_PM[value.hour // 12]
    if letter == 'h':
        number = value.hour % 12 or 12
    else:
        number = {
            'd': value.day,
            'H': value.hour,
            'm': value.minute,
            's': value.second,
            'S': value.microsecond // 1000,
        }[letter]
    return str(number).zfill(count)


def format_pattern(value: datetime, pattern: str) -> str:
    """naive datetime を書式パターンで文字列化する。"""
    parts: list[str] = []
    for token in compile_pattern(pattern):
        if isinstance(token, str):
            parts.append(token)
        else:
            parts.append(_format_field(token, value))
    return ''.join(parts)


# ── 解析 ─────────────────────────────────────────────────────────────────────

def _resolve_two_digit_year(yy: int) -> int:
    """2 桁年を「今年 - window」から始まる 100 年間の西暦年に解決する。"""
    window = int(get_config().get('two_digit_year_window', 80))
    start = date.today().year - window
    year = start - start % 100 + yy
    if year < start:
        year += 100
    return year


def _match_name(text: str, pos: int, names: tuple[str, ...]) -> tuple[int, int] | None:
    """text[pos:] の先頭に一致する名前（大小文字無視、最長一致）を探す。

    Returns:
        (names 内のインデックス, 一致した文字数) / 一致なし → None
    """
    best: tuple[int, int] | None = None
    head = text[pos:].lower()
    for idx, name in enumerate(names):
        if head.startswith(name.lower()) and (best is None or len(name) > best[1]):
            best = (idx, len(name))
    return best


def _read_number(text: str, pos: int, width: int | None) -> tuple[int, int]:
    """pos から数字列を読む。width 指定時はちょうど width 桁。

    Returns:
        (読み取った数字列の終端位置, 値)
    """
    end = pos
    limit = len(text) if width is None else min(len(text), pos + width)
    while end < limit and text[end].isdigit():
        end += 1
    if end == pos or (width is not None and end - pos != width):
        raise ValueError(f'位置 {pos} に数値がありません')
    return end, int(text[pos:end])


def parse_pattern(text: str, pattern: str) -> datetime:
    """文字列を書式パターンに沿って naive datetime に変換する。

    Raises:
        MalformedInputError: パターンに一致しない、または表現できない日時
    """
    tokens = compile_pattern(pattern)
    fields = {'y': 1970, 'M': 1, 'd': 1, 'H': 0, 'm': 0, 's': 0, 'S': 0}
    hour12: int | None = None
    pm: bool | None = None
    pos = 0

    try:
        for idx, token in enumerate(tokens):
            if isinstance(token, str):
                if not text.startswith(token, pos):
                    raise ValueError(f'位置 {pos} にリテラル {token!r} がありません')
                pos += len(token)
                continue

            letter = token.letter
            if token.numeric:
                nxt = tokens[idx + 1] if idx + 1 < len(tokens) else None
                abutting = isinstance(nxt, _Field) and nxt.numeric
                start = pos
                pos, number = _read_number(text, pos, token.count if abutting else None)
                if letter == 'y' and token.count <= 2 and pos - start == 2:
                    number = _resolve_two_digit_year(number)
                if letter == 'h':
                    hour12 = number
                else:
                    fields[letter] = number
                continue

            if letter == 'M':
                found = _match_name(text, pos, MONTH_NAMES + MONTH_ABBRS)
                if found is None:
                    raise ValueError(f'位置 {pos} に月名がありません')
                fields['M'] = found[0] % 12 + 1
            elif letter == 'E':
                found = _match_name(text, pos, WEEKDAY_NAMES + WEEKDAY_ABBRS)
                if found is None:
                    raise ValueError(f'位置 {pos} に曜日名がありません')
            else:  # 'a'
                found = _match_name(text, pos, _AM_PM)
                if found is None:
                    raise ValueError(f'位置 {pos} に AM/PM がありません')
                pm = found[0] == 1
            pos += found[1]
    except ValueError as exc:
        raise MalformedInputError(str(exc), pattern, text) from exc

    # H と a の併用時は H を優先し、a は無視する
    if hour12 is not None:
        fields['H'] = hour12 % 12 + (12 if pm else 0)

    return _compose(fields, pattern, text)


def _compose(fields: dict[str, int], pattern: str, text: str) -> datetime:
    """各フィールド値から datetime を組み立てる（範囲外は繰り上げ）。"""
    year, month = fields['y'], fields['M']
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        base = datetime(year, month, 1)
        return base + timedelta(
            days=fields['d'] - 1,
            hours=fields['H'],
            minutes=fields['m'],
            seconds=fields['s'],
            milliseconds=fields['S'],
        )
    except (ValueError, OverflowError) as exc:
        raise MalformedInputError('表現できない日時です', pattern, text) from exc
