import logging
import sys

from go_rules import config


class GoRulesLogger:
    """エンジン全体のロギングを統括するクラス"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(GoRulesLogger, cls).__new__(cls)
            cls._instance._setup_logger()
        return cls._instance

    def _setup_logger(self):
        self.logger = logging.getLogger("GoRules")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # フォーマット定義: [時刻] [レイヤー] [レベル] メッセージ
        formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

        # コンソール出力設定
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))
        self.logger.addHandler(console_handler)

        # ファイル出力設定 (指定された場合のみ)
        if config.LOG_FILE:
            file_handler = logging.FileHandler(config.LOG_FILE, encoding='utf-8')
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.INFO)
            self.logger.addHandler(file_handler)

    def log(self, level, message, layer="SYSTEM"):
        """共通ログ出力メソッド"""
        self.logger.log(level, message, extra={'layer': layer.upper()})

    def debug(self, message, layer="SYSTEM"):
        self.log(logging.DEBUG, message, layer)

    def info(self, message, layer="SYSTEM"):
        self.log(logging.INFO, message, layer)

    def warning(self, message, layer="SYSTEM"):
        self.log(logging.WARNING, message, layer)

    def error(self, message, layer="SYSTEM"):
        self.log(logging.ERROR, message, layer)

# Global Singleton Instance
logger = GoRulesLogger()
