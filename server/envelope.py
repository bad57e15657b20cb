# AIArchives Bridge MCP - Envelope Validator

import logging
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from models import MCPRequest, is_valid_id

logger = logging.getLogger(__name__)


class EnvelopeKind(Enum):
    REQUEST = "request"
    NOTIFICATION = "notification"
    MALFORMED = "malformed"


def classify_envelope(payload: Any) -> Tuple[EnvelopeKind, Optional[MCPRequest]]:
    """受信メッセージをリクエスト・通知・不正に分類"""
    if not isinstance(payload, dict):
        return EnvelopeKind.MALFORMED, None

    # idなし・methodありは通知（methodの型・値は問わない）
    if "id" not in payload and payload.get("method") not in (None, ""):
        return EnvelopeKind.NOTIFICATION, None

    try:
        request = MCPRequest.model_validate(payload)
    except ValidationError as e:
        logger.debug("Malformed envelope: %s", e.errors())
        return EnvelopeKind.MALFORMED, None

    return EnvelopeKind.REQUEST, request


def extract_id(payload: Any) -> Any:
    """不正メッセージでも返却可能なidを取り出す（構造化されたidはNone）"""
    if isinstance(payload, dict):
        value = payload.get("id")
        if is_valid_id(value):
            return value
    return None
