"""テスト共通設定

各テストは利用者の koyomi.json に影響されないよう、存在しない設定パスで始める。
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from koyomi.core import config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path):
    with patch('koyomi.core.config._get_config_path', return_value=str(tmp_path / 'koyomi.json')):
        config.reset_config()
        yield
    config.reset_config()


@pytest.fixture
def write_config(tmp_path):
    """tmp_path の koyomi.json に設定を書き込み、キャッシュを破棄する関数を返す。"""

    def _write(data: dict) -> None:
        (tmp_path / 'koyomi.json').write_text(
            json.dumps(data, ensure_ascii=False), encoding='utf-8',
        )
        config.reset_config()

    return _write
