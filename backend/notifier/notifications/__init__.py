# backend/notifier/notifications/__init__.py

"""
通知レイヤ用モジュール群。

構成イメージ:
- schemas: 通知メッセージの共通スキーマ
- rules: 誕生日（2/29 の繰り下げを含む）の判定ルール
- generators: 通知ジェネレータのインターフェースと誕生日ジェネレータ
- service: 複数ジェネレータの結果を集約する NotificationService
- presenter: 1行テキストへの整形と出力
- factory: アプリ全体で共有する NotificationService の生成
- router: /notifications エンドポイント
"""
