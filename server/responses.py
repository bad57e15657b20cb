# AIArchives Bridge MCP - Response Builder

from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from errors import MCPError, http_status_for
from models import ErrorCode, JsonRpcError, MCPResponse, RequestId


def build_result(request_id: RequestId, result: Any) -> JSONResponse:
    response = MCPResponse(id=request_id, result=result)
    return JSONResponse(response.to_payload(), status_code=200)


def build_error(request_id: RequestId, code: ErrorCode, message: str, data: Any = None) -> JSONResponse:
    """JSON-RPCエラー応答を生成（HTTPステータスはコードから決定）"""
    response = MCPResponse(
        id=request_id,
        error=JsonRpcError(code=int(code), message=message, data=data)
    )
    return JSONResponse(response.to_payload(), status_code=http_status_for(code))


def error_response(request_id: RequestId, error: MCPError) -> JSONResponse:
    return build_error(request_id, error.code, error.message, error.data)


def notification_ack() -> Response:
    """通知への応答（ボディなし）"""
    return Response(status_code=204)
