# AIArchives Bridge MCP Configuration

import os

from dotenv import find_dotenv, load_dotenv

# カレントディレクトリの.envを読み込む（既存の環境変数が優先）
load_dotenv(find_dotenv(usecwd=True))

# サーバー設定
SERVER_CONFIG = {
    "name": "Claude → AIArchives Bridge",
    "version": "1.1.0",
    "protocol_version": "2025-06-18",
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "8000"))
}

# AIArchives API設定
ARCHIVE_CONFIG = {
    "base_url": os.getenv("BASE_URL"),
    "timeout": float(os.getenv("ARCHIVE_TIMEOUT", "30.0"))
}

# ログ設定
LOG_CONFIG = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s"
}
