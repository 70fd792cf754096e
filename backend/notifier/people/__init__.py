# backend/notifier/people/__init__.py

"""
通知対象（人物）のモジュール群。
"""
