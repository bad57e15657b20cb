#!/usr/bin/env python3
"""
AIArchives Bridge MCP Server - Claudeの会話をAIArchivesに保存
Port: 8000
"""

import json
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import SERVER_CONFIG, LOG_CONFIG
from errors import MCPError
from models import ErrorCode
from server.dispatcher import MethodDispatcher
from server.envelope import EnvelopeKind, classify_envelope, extract_id
from server.responses import build_error, build_result, error_response, notification_ack
from tools_manager import ToolsManager

# ログ設定
logging.basicConfig(level=LOG_CONFIG["level"], format=LOG_CONFIG["format"])
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVER_CONFIG["name"],
    version=SERVER_CONFIG["version"]
)

# ツール管理インスタンス
tools_manager = ToolsManager()
dispatcher = MethodDispatcher(tools_manager)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.get("/")
async def root():
    return {
        "service": SERVER_CONFIG["name"],
        "version": SERVER_CONFIG["version"],
        "status": "running",
        "timestamp": _timestamp()
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "server": SERVER_CONFIG["name"],
        "timestamp": _timestamp()
    }


@app.post("/mcp")
async def mcp_endpoint(request: Request):
    """MCPプロトコルエンドポイント"""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Received MCP request with undecodable body")
        return build_error(None, ErrorCode.INVALID_REQUEST, "Invalid Request")

    logger.debug("Received MCP request: %s", payload)
    request_id = extract_id(payload)

    try:
        kind, mcp_request = classify_envelope(payload)

        if kind is EnvelopeKind.NOTIFICATION:
            logger.info("Notification: %s", payload["method"])
            return notification_ack()

        if kind is EnvelopeKind.MALFORMED:
            return build_error(request_id, ErrorCode.INVALID_REQUEST, "Invalid Request")

        result = await dispatcher.dispatch(mcp_request)
        return build_result(mcp_request.id, result)

    except MCPError as e:
        logger.warning("MCP error %d: %s", e.code, e.message)
        return error_response(request_id, e)

    except Exception as e:
        logger.exception("Unhandled MCP error")
        return build_error(request_id, ErrorCode.INTERNAL_ERROR, str(e) or type(e).__name__)


@app.get("/tools/descriptions")
async def get_tool_descriptions():
    """ツール詳細情報（クライアント表示用）"""
    return {
        "tools": tools_manager.get_tools_descriptions()
    }


if __name__ == "__main__":
    import uvicorn
    logger.info("MCP Bridge Server running at http://localhost:%s/mcp", SERVER_CONFIG["port"])
    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])
