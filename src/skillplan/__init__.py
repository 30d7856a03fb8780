"""
SkillPlan - スキル学習スケジューラー

スキルの優先度と推定時間から、日別の学習時間割を生成します。
"""

__version__ = "0.1.0"
