"""
Streamlitアプリの起動処理
"""

import os
import sys

from skillplan.utils.config import get_config

APP_PATH = os.path.join(os.path.dirname(__file__), "streamlit_skill_planner.py")


def build_streamlit_argv(app_path: str = APP_PATH) -> list:
    """streamlit run 用の引数を作成"""
    config = get_config()
    return [
        "streamlit", "run", app_path,
        f"--server.port={config.streamlit_server_port}",
        f"--server.address={config.streamlit_server_address}",
    ]


def main():
    import streamlit.web.cli as stcli

    if not os.path.exists(APP_PATH):
        print(f"❌ エラー: アプリケーションファイルが見つかりません: {APP_PATH}")
        sys.exit(1)

    config = get_config()
    print("🚀 スキル学習スケジューラーを起動中...")
    print(f"📁 アプリケーションパス: {APP_PATH}")
    print(f"🌐 ブラウザで http://localhost:{config.streamlit_server_port} にアクセスしてください")

    sys.argv = build_streamlit_argv()
    sys.exit(stcli.main())
