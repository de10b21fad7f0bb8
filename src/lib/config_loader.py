"""Configuration loader implementation.

This module implements configuration loading from environment variables and config files.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.config import DEFAULT_CONFIG, coerce_config_value, validate_config_value

logger = logging.getLogger(__name__)


class ConfigLoader:
    """配置載入器，支援環境變數和配置檔案載入."""

    def __init__(self, env_prefix: str = "MAGMAN_CONTENT_"):
        self.env_prefix = env_prefix
        self._cached_config: Optional[Dict[str, Any]] = None
        self._config_sources: List[str] = []

    def load_config(
        self,
        config_file: Optional[Path] = None,
        use_environment: bool = True,
        use_defaults: bool = True,
    ) -> Dict[str, Any]:
        """
        載入配置，按優先順序合併不同來源.

        優先順序: 環境變數 > 配置檔案 > 預設值

        Args:
            config_file: 配置檔案路徑
            use_environment: 是否使用環境變數
            use_defaults: 是否使用預設值

        Returns:
            Dict[str, Any]: 合併並轉型後的配置
        """
        raw_config: Dict[str, str] = {}
        self._config_sources = []

        # 1. 載入預設值
        if use_defaults:
            for key, value in DEFAULT_CONFIG.items():
                raw_config[key] = str(value)
            self._config_sources.append("defaults")
            logger.debug("載入預設配置")

        # 2. 載入配置檔案
        if config_file:
            raw_config.update(self.load_from_file(config_file))
            self._config_sources.append(f"file:{config_file}")
            logger.debug(f"載入檔案配置: {config_file}")

        # 3. 載入環境變數 (最高優先順序)
        if use_environment:
            raw_config.update(self.load_from_environment())
            self._config_sources.append("environment")
            logger.debug("載入環境變數配置")

        config = self.validate_config(raw_config)
        self._cached_config = config

        logger.info(f"配置載入完成，來源: {', '.join(self._config_sources)}")
        return config

    def load_from_file(self, config_file: Path) -> Dict[str, str]:
        """從配置檔案載入配置."""
        config: Dict[str, str] = {}

        if not config_file.exists():
            logger.warning(f"配置檔案不存在: {config_file}")
            return config

        try:
            if config_file.suffix.lower() == ".json":
                with open(config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"JSON 配置檔案必須為物件: {config_file}")
                for key, value in data.items():
                    config[key] = str(value)
            else:
                # .env 或純文字格式
                with open(config_file, "r", encoding="utf-8") as f:
                    for line_num, line in enumerate(f, 1):
                        line = line.strip()

                        if not line or line.startswith("#"):
                            continue

                        if "=" not in line:
                            logger.warning(f"無效的配置格式 ({config_file}:{line_num}): {line}")
                            continue

                        key, value = line.split("=", 1)
                        value = value.strip()
                        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                            value = value[1:-1]

                        config[self._env_to_config_key(key.strip())] = value

            logger.debug(f"從檔案載入 {len(config)} 項配置: {config_file}")
            return config

        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"載入配置檔案失敗 ({config_file}): {e}")
            raise ValueError(f"載入配置檔案失敗 ({config_file}): {e}") from e

    def load_from_environment(self) -> Dict[str, str]:
        """從環境變數載入配置."""
        config = {}

        for env_key, env_value in os.environ.items():
            if env_key.startswith(self.env_prefix):
                config[self._env_to_config_key(env_key)] = env_value

        logger.debug(f"從環境變數載入 {len(config)} 項配置")
        return config

    def _env_to_config_key(self, env_key: str) -> str:
        """轉換環境變數名稱為配置鍵."""
        if env_key.startswith(self.env_prefix):
            key = env_key[len(self.env_prefix):].lower()
        else:
            key = env_key.lower()

        # Section names are a single word; the rest of the name is the field.
        # DISPLAY_MAX_CONTENT_LENGTH -> display.max_content_length
        if "." not in key and "_" in key:
            section, name = key.split("_", 1)
            key = f"{section}.{name}"

        return key

    def config_to_env_key(self, config_key: str) -> str:
        """轉換配置鍵為環境變數名稱."""
        env_key = config_key.upper().replace(".", "_")
        return f"{self.env_prefix}{env_key}"

    def validate_config(self, config: Dict[str, str]) -> Dict[str, Any]:
        """驗證配置值並轉換型別."""
        validated_config: Dict[str, Any] = {}
        errors = []

        for key, value in config.items():
            try:
                typed_value = coerce_config_value(key, value)
                validate_config_value(key, typed_value)
                validated_config[key] = typed_value
            except ValueError as e:
                errors.append(str(e))

        if errors:
            error_message = "配置驗證失敗:\n" + "\n".join(errors)
            logger.error(error_message)
            raise ValueError(error_message)

        logger.debug(f"配置驗證通過: {len(validated_config)} 項")
        return validated_config

    def get_config_value(self, key: str, default: Optional[Any] = None) -> Any:
        """取得單一配置值."""
        if self._cached_config is None:
            return default
        return self._cached_config.get(key, default)

    def get_config_sources(self) -> List[str]:
        """取得配置來源列表."""
        return self._config_sources.copy()

    def get_cached_config(self) -> Optional[Dict[str, Any]]:
        """取得快取的配置."""
        return self._cached_config.copy() if self._cached_config else None
