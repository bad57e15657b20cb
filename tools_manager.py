import json
import importlib
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, NamedTuple, Optional, Type

from pydantic import BaseModel, ValidationError

from errors import MCPError
from models import ErrorCode, ToolDescription

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "tools" / "tools_config.json"


class RegisteredTool(NamedTuple):
    description: ToolDescription
    function: Callable[[BaseModel], Awaitable[Dict[str, Any]]]
    arguments_model: Type[BaseModel]


class ToolsManager:
    """ツール定義の一元管理クラス"""

    def __init__(self, config_path: Optional[Path] = None):
        config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = json.load(f)

        # 起動時に一度だけ構築し、以降は読み取り専用
        tools: Dict[str, RegisteredTool] = {}
        for tool in self.config["tools"]:
            tools[tool["name"]] = self._load_tool(tool)
        self.tools: Mapping[str, RegisteredTool] = MappingProxyType(tools)

    @staticmethod
    def _load_tool(tool: Dict[str, Any]) -> RegisteredTool:
        """設定からツール関数と引数モデルを解決"""
        try:
            module = importlib.import_module(tool["module_path"])
            function = getattr(module, tool["function_name"])
            arguments_model = getattr(module, tool["arguments_model"])
        except (ImportError, AttributeError) as e:
            logger.error("[ToolsManager] Failed to import %s: %s", tool["name"], e)
            raise

        description = ToolDescription(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
            usage_context=tool.get("usage_context")
        )
        return RegisteredTool(description, function, arguments_model)

    def get_tools_list(self) -> List[Dict[str, Any]]:
        """tools/list用のツール一覧"""
        return [
            tool.description.model_dump(exclude={"usage_context"})
            for tool in self.tools.values()
        ]

    def get_tools_descriptions(self) -> List[Dict[str, Any]]:
        """/tools/descriptions用の詳細情報"""
        return [tool.description.model_dump() for tool in self.tools.values()]

    def is_valid_tool(self, tool_name: Any) -> bool:
        """ツール名の有効性チェック"""
        return isinstance(tool_name, str) and tool_name in self.tools

    async def call_tool(self, tool_name: Any, arguments: Any) -> Dict[str, Any]:
        """ツール実行

        The name is checked before the arguments, so an unknown tool is
        reported as -32601 whatever the arguments look like. Rejected
        arguments give -32602; a failure inside the tool gives -32000.
        """
        if not self.is_valid_tool(tool_name):
            raise MCPError(ErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {tool_name}")
        tool = self.tools[tool_name]

        if arguments is None:
            arguments = {}
        try:
            parsed = tool.arguments_model.model_validate(arguments)
        except ValidationError as e:
            raise MCPError(
                ErrorCode.INVALID_PARAMS,
                f"Invalid arguments for {tool_name}",
                data=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
            ) from e

        logger.info("[ToolsManager] Calling %s", tool_name)
        try:
            return await tool.function(parsed)
        except MCPError:
            raise
        except Exception as e:
            logger.error("[ToolsManager] %s failed: %s", tool_name, e)
            raise MCPError(
                ErrorCode.APPLICATION_ERROR,
                str(e) or type(e).__name__,
                data={"error_type": type(e).__name__}
            ) from e
