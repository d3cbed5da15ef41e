"""文字列判定ユーティリティ"""

from __future__ import annotations


def is_empty(s: str | None) -> bool:
    """None または空文字列の場合に True を返す。

    空白のみの文字列は空とみなさない（'  ' は False）。
    """
    return s is None or len(s) == 0
