#!/usr/bin/env python3
"""
スキル学習スケジューラー - メインエントリーポイント

このファイルは、アプリケーションを起動するためのメインエントリーポイントです。
"""

import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

if __name__ == "__main__":
    from skillplan.app.launcher import main
    main()
