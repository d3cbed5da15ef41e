"""設定ファイル（koyomi.json）管理

タイムゾーン・週番号の数え方・和暦表記など、日付ユーティリティ全体の
既定値を 1 つの JSON ファイルで上書きできるようにする。
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

_CONFIG_ENV = 'KOYOMI_CONFIG'
_CONFIG_FILE = 'koyomi.json'

_cached: dict[str, Any] | None = None


def _get_config_path() -> str:
    """koyomi.json の絶対パスを返す。

    環境変数 KOYOMI_CONFIG が設定されていればそれを優先し、
    なければカレントディレクトリの koyomi.json を使う。
    """
    path = os.environ.get(_CONFIG_ENV, '')
    if path:
        return os.path.abspath(path)
    return os.path.join(os.getcwd(), _CONFIG_FILE)


def _default_config() -> dict[str, Any]:
    """デフォルト設定を返す。"""
    return {
        'timezone': 'Asia/Tokyo',         # '' ならシステムのローカルタイムゾーン
        'week': {
            'first_day_of_week': 1,       # DayOfWeek 値（日曜=1）
            'minimal_days_in_first_week': 1,
        },
        'two_digit_year_window': 80,      # 2 桁年は「今年 - 80」からの 100 年に解決
        'wareki': {
            'gannen': False,              # True なら 1 年を「元年」と表記
            'unknown_era_prefix': '西暦',
        },
    }


def _deep_merge(base: dict, override: dict) -> dict:
    """ネストした辞書を再帰的にマージする。override が優先。"""
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def load_config() -> dict[str, Any]:
    """koyomi.json を読み込む。存在しない / 不正な場合はデフォルト値を返す。"""
    defaults = _default_config()
    path = _get_config_path()
    if not os.path.exists(path):
        return defaults
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning('設定ファイルを読み込めません（デフォルト値を使用）: %s: %s', path, exc)
        return defaults
    if not isinstance(data, dict):
        logger.warning('設定ファイルの形式が不正です（デフォルト値を使用）: %s', path)
        return defaults
    return _deep_merge(defaults, data)


def save_config(config: dict[str, Any]) -> None:
    """config を koyomi.json に保存し、キャッシュを破棄する。"""
    path = _get_config_path()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config, f, ensure_ascii=False, indent=2)
    reset_config()


def get_config() -> dict[str, Any]:
    """読み込み済みの設定を返す。初回呼び出し時に load_config() する。"""
    global _cached
    if _cached is None:
        _cached = load_config()
    return _cached


def reset_config() -> None:
    """設定キャッシュを破棄する。次の get_config() で再読み込みされる。"""
    global _cached
    _cached = None
