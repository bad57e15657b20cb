# AIArchives Bridge MCP - Method Dispatcher

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict

from config import SERVER_CONFIG
from errors import MCPError
from models import ErrorCode, MCPRequest
from tools_manager import ToolsManager

logger = logging.getLogger(__name__)


class Method(str, Enum):
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


Handler = Callable[["MethodDispatcher", Dict[str, Any]], Awaitable[Dict[str, Any]]]


class MethodDispatcher:
    """メソッド名でハンドラーを振り分ける"""

    def __init__(self, tools_manager: ToolsManager):
        self.tools_manager = tools_manager

    async def dispatch(self, request: MCPRequest) -> Dict[str, Any]:
        try:
            method = Method(request.method)
        except ValueError:
            raise MCPError(ErrorCode.METHOD_NOT_FOUND, f"Unknown method: {request.method}") from None
        return await HANDLERS[method](self, request.params)

    async def initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "protocolVersion": SERVER_CONFIG["protocol_version"],
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": SERVER_CONFIG["name"],
                "version": SERVER_CONFIG["version"]
            }
        }

    async def tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": self.tools_manager.get_tools_list()}

    async def tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        # ツール名の照合は引数検証より先（call_tool内）
        tool_name = params.get("name")
        arguments = params.get("arguments")

        logger.info("Tool name: %s", tool_name)
        logger.debug("Arguments: %s", arguments)
        return await self.tools_manager.call_tool(tool_name, arguments)


HANDLERS: Dict[Method, Handler] = {
    Method.INITIALIZE: MethodDispatcher.initialize,
    Method.TOOLS_LIST: MethodDispatcher.tools_list,
    Method.TOOLS_CALL: MethodDispatcher.tools_call,
}

_missing = set(Method) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"No handler registered for: {sorted(m.value for m in _missing)}")
