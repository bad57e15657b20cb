# AIArchives Bridge MCP - Save Conversation Tool

import html
import logging
from typing import Dict, Any, List

from models import ConversationMessage, SaveConversationArguments
from utils.archive_client import archive_client

logger = logging.getLogger(__name__)


def render_conversation_html(messages: List[ConversationMessage]) -> str:
    """会話をHTML断片に変換（入力順を維持）"""
    # 要素テキストにのみ挿入するため引用符はそのまま
    return "\n".join(
        f"<p><strong>{html.escape(m.role, quote=False)}:</strong> "
        f"{html.escape(m.content, quote=False)}</p>"
        for m in messages
    )


async def save_conversation(arguments: SaveConversationArguments) -> Dict[str, Any]:
    """会話をAIArchivesに保存してURLを返す"""
    html_doc = render_conversation_html(arguments.messages)
    logger.info("Rendered %d messages (%d chars)", len(arguments.messages), len(html_doc))

    remote_response = await archive_client.save_conversation(html_doc)

    return {
        "content": [
            {
                "type": "text",
                "text": f"✅ Conversation saved to AIArchives!\n🔗 {remote_response['url']}"
            }
        ],
        "remoteResponse": remote_response
    }
