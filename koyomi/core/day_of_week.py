"""曜日列挙型

値は日曜=1 … 土曜=7。
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum

_LABELS = ('日', '月', '火', '水', '木', '金', '土')


class DayOfWeek(IntEnum):
    """曜日。"""
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def label(self) -> str:
        """曜日の漢字 1 文字（'日'〜'土'）。"""
        return _LABELS[self.value - 1]

    def rebase(self, start: int) -> int:
        """利用者が期待する開始値を基準とした曜日番号（日曜=start … 土曜=start+6）。

        Examples:
            >>> DayOfWeek.MONDAY.rebase(0)
            1
        """
        return self.value - 1 + start

    @classmethod
    def match(cls, value: int) -> DayOfWeek | None:
        """曜日値（日曜=1 … 土曜=7）に対応するメンバーを返す。範囲外は None。"""
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def from_date(cls, value: date) -> DayOfWeek:
        """date / datetime の暦上の曜日を返す。"""
        return cls(value.isoweekday() % 7 + 1)
