"""
アプリケーション層

Streamlitによる画面とUIコンポーネントを提供します。
"""
