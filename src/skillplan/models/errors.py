"""
スケジューラー例外定義

割り当てエンジンが送出する例外クラスを定義します。
すべて入力に対して決定的であり、部分的な結果は返しません。
"""


class SchedulerError(ValueError):
    """スケジューラー例外の基底クラス"""


class InvalidSettings(SchedulerError):
    """設定値が不正"""


class InvalidWindow(InvalidSettings):
    """作業時間帯（開始・終了時刻）が不正"""


class InvalidRhythm(InvalidSettings):
    """作業ブロック長・休憩時間が不正"""


class InvalidLunch(InvalidSettings):
    """昼休憩の設定が作業時間帯に収まらない"""


class InvalidSkill(SchedulerError):
    """スキル定義が不正"""


class NoSkills(SchedulerError):
    """スキルが1件も指定されていない"""


class UnreachableTarget(SchedulerError):
    """Dailyモードで全スキルを消化できない"""
