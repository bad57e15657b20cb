# AIArchives API Client

import logging
from typing import Dict, Any, Optional

import httpx

from config import ARCHIVE_CONFIG

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """AIArchives連携の失敗"""


class ArchiveConfigError(ArchiveError):
    """BASE_URL未設定"""


class ArchiveAPIError(ArchiveError):
    """AIArchives APIが異常応答を返した"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ArchiveTimeoutError(ArchiveError):
    """AIArchives APIがタイムアウトした"""


class AIArchivesClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url if base_url is not None else ARCHIVE_CONFIG["base_url"]
        self.timeout = timeout if timeout is not None else ARCHIVE_CONFIG["timeout"]
        self._transport = transport

    @property
    def conversation_url(self) -> str:
        if not self.base_url:
            raise ArchiveConfigError("BASE_URL is not configured")
        return f"{self.base_url.rstrip('/')}/api/conversation"

    async def save_conversation(self, html_doc: str) -> Dict[str, Any]:
        """HTML化した会話をAIArchivesへアップロード"""
        api_url = self.conversation_url
        files = {"htmlDoc": ("conversation.html", html_doc.encode("utf-8"), "text/html")}
        data = {"isMCP": "true"}

        logger.info("Forwarding conversation to %s", api_url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(api_url, files=files, data=data)
        except httpx.TimeoutException as e:
            logger.error("AIArchives API timed out after %ss: %s", self.timeout, e)
            raise ArchiveTimeoutError(f"Remote API timeout after {self.timeout}s") from e

        if not response.is_success:
            text = response.text
            logger.error("AIArchives API error: %s %s", response.status_code, text)
            raise ArchiveAPIError(
                f"Remote API error: {response.status_code} {response.reason_phrase} - {text}",
                status_code=response.status_code,
                body=text
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ArchiveAPIError(
                f"Remote API returned invalid JSON: {response.text[:200]}",
                status_code=response.status_code,
                body=response.text
            ) from e

        if not isinstance(result, dict) or "url" not in result:
            raise ArchiveAPIError(
                "Remote API response missing 'url'",
                status_code=response.status_code,
                body=response.text
            )

        logger.info("AIArchives response: %s", result)
        return result


# グローバルインスタンス
archive_client = AIArchivesClient()
