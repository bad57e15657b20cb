# AIArchives Bridge MCP Errors

from typing import Any

from models import ErrorCode

# プロトコル形式の問題は400、実行時の失敗は500
CLIENT_ERROR_CODES = {
    ErrorCode.INVALID_REQUEST,
    ErrorCode.METHOD_NOT_FOUND,
    ErrorCode.INVALID_PARAMS,
}


def http_status_for(code: ErrorCode) -> int:
    return 400 if code in CLIENT_ERROR_CODES else 500


class MCPError(Exception):
    """JSON-RPCエラーとして返却される失敗"""

    def __init__(self, code: ErrorCode, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)

    @property
    def http_status(self) -> int:
        return http_status_for(self.code)

    def __repr__(self) -> str:
        return f"MCPError(code={int(self.code)}, message={self.message!r})"
