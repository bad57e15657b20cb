# AIArchives Bridge MCP Data Models

from enum import IntEnum
from typing import Dict, List, Any, Optional, Union, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class ErrorCode(IntEnum):
    """JSON-RPCエラーコード"""
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    APPLICATION_ERROR = -32000


RequestId = Optional[Union[bool, int, float, str]]


def is_valid_id(value: Any) -> bool:
    """idとしてそのまま返却できる値か（スカラーのみ）"""
    return value is None or isinstance(value, (bool, int, float, str))


class MCPRequest(BaseModel):
    jsonrpc: Literal["2.0"]
    id: RequestId
    method: str = Field(min_length=1)
    params: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> Any:
        if not is_valid_id(value):
            raise ValueError("id must be a scalar (string, number, boolean or null)")
        return value

    @field_validator("params", mode="before")
    @classmethod
    def _default_params(cls, value: Any) -> Any:
        return {} if value is None else value


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class MCPResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: RequestId = None
    result: Any = None
    error: Optional[JsonRpcError] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "MCPResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("response must carry exactly one of result or error")
        return self

    def to_payload(self) -> Dict[str, Any]:
        """送信用のJSON-RPC辞書に変換"""
        payload: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


class ToolDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]
    usage_context: Optional[str] = None


class ConversationMessage(BaseModel):
    role: str
    content: str


class SaveConversationArguments(BaseModel):
    messages: List[ConversationMessage]
