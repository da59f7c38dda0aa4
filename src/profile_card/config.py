"""运行配置 — 所有环境变量的唯一来源。"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
# 收到消息后多久出现 "正在输入"（秒）
DEFAULT_TYPING_DELAY = 2.0
# "正在输入" 持续多久后回复（秒）
DEFAULT_REPLY_DELAY = 2.0
DEFAULT_RAIN_COUNT = 50
DEFAULT_LOG_LEVEL = "INFO"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("环境变量 %s 不是数字，使用默认值 %s: %r", name, default, raw)
        return default
    if value < 0:
        logger.warning("环境变量 %s 不能为负数，使用默认值 %s", name, default)
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("环境变量 %s 不是整数，使用默认值 %s: %r", name, default, raw)
        return default
    if value < 0:
        logger.warning("环境变量 %s 不能为负数，使用默认值 %s", name, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    typing_delay: float = DEFAULT_TYPING_DELAY
    reply_delay: float = DEFAULT_REPLY_DELAY
    rain_count: int = DEFAULT_RAIN_COUNT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """从环境变量读取配置，非法值回退默认值。"""
    return Settings(
        host=os.environ.get("PROFILE_CARD_HOST", "").strip() or DEFAULT_HOST,
        port=_env_int("PROFILE_CARD_PORT", DEFAULT_PORT),
        typing_delay=_env_float("PROFILE_CARD_TYPING_DELAY", DEFAULT_TYPING_DELAY),
        reply_delay=_env_float("PROFILE_CARD_REPLY_DELAY", DEFAULT_REPLY_DELAY),
        rain_count=_env_int("PROFILE_CARD_RAIN_COUNT", DEFAULT_RAIN_COUNT),
        log_level=(os.environ.get("PROFILE_CARD_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
    )
