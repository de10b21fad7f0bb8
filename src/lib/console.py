"""Console utilities for safe character output.

This module provides utilities for handling console output with proper encoding.
"""
import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)


def safe_echo(message: Any, **kwargs) -> None:
    """
    安全輸出訊息，處理編碼問題.

    Args:
        message: 要輸出的訊息
        **kwargs: 額外參數傳給 print
    """
    try:
        print(message, **kwargs)
    except UnicodeEncodeError:
        if isinstance(message, str):
            safe_message = message.encode("ascii", "replace").decode("ascii")
            print(f"[ENCODING_ISSUE] {safe_message}", **kwargs)
        else:
            print(f"[OUTPUT] {message!r}", **kwargs)


def setup_console_encoding() -> None:
    """設定控制台編碼."""
    if sys.platform != "win32":
        return

    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            try:
                stream.reconfigure(encoding="utf-8")
            except (OSError, ValueError) as e:
                logger.debug(f"無法設定控制台編碼: {e}")


MESSAGES = {
    "zh": {
        "show_start": "顯示文章",
        "duplicates_start": "比對重複文章",
        "duplicates_none": "沒有重複文章",
        "config_show": "顯示配置",
    },
    "en": {
        "show_start": "Show articles",
        "duplicates_start": "Find duplicate articles",
        "duplicates_none": "No duplicate articles",
        "config_show": "Show config",
    },
}


def get_message(key: str, lang: str = "zh", fallback_lang: str = "en") -> str:
    """
    取得訊息文字.

    Args:
        key: 訊息鍵
        lang: 語言 (zh/en)
        fallback_lang: 備用語言

    Returns:
        str: 訊息文字
    """
    try:
        return MESSAGES[lang][key]
    except KeyError:
        try:
            return MESSAGES[fallback_lang][key]
        except KeyError:
            return key.upper().replace("_", " ")


def echo_with_prefix(prefix: str, message: str, lang: str = "zh") -> None:
    """輸出帶前綴的訊息."""
    if message in MESSAGES.get(lang, {}):
        text = get_message(message, lang)
    else:
        text = message

    safe_echo(f"[{prefix}] {text}")


setup_console_encoding()
