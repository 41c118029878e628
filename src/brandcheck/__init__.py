"""テナント単位のブランド設定を検証し、テーマを生成するライブラリ。"""
