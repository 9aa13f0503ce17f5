import os

# Board Settings
DEFAULT_BOARD_SIZE = 19
STANDARD_BOARD_SIZES = (9, 13, 19)
# GTP/SGF の座標ラベルが表現できる最大サイズ
MAX_LABEL_BOARD_SIZE = 25

# Logging Settings
LOG_LEVEL = os.environ.get("GO_RULES_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("GO_RULES_LOG_FILE") or None
LOG_FORMAT = '[%(asctime)s] [%(layer)s] [%(levelname)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
