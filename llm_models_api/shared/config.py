#!/usr/bin/env python3
"""
Configuration module for the LLM Models API.
Loads settings from a YAML file and initializes logging with Pydantic validation.
"""

import os
import sys
import logging
from typing import Dict, Any, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

CONFIG_FILE = os.environ.get("LLM_MODELS_API_CONFIG", "config.yml")


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5555
    log_level: str = "INFO"
    http_log_level: str = "INFO"


class OpenRouterConfig(BaseModel):
    base_url: str = "https://openrouter.ai/api/v1"
    models_path: str = "/models"
    request_timeout: float = 30.0
    cache_ttl: int = 600


class RequestProxyConfig(BaseModel):
    enabled: bool = False
    url: Optional[str] = None


class CorsConfig(BaseModel):
    allow_origins: List[str] = ["*"]


def load_config(path: str = CONFIG_FILE) -> Dict[str, Any]:
    """Load and validate configuration with Pydantic models."""
    try:
        with open(path, encoding="utf-8") as file:
            config_data = yaml.safe_load(file) or {}
    except FileNotFoundError:
        print(f"Configuration file {path} not found, using defaults. "
              "Create it based on config.yml.example to override them.")
        config_data = {}
    except yaml.YAMLError as e:
        print(f"Error in configuration: {e}")
        sys.exit(1)

    if "OPENROUTER_BASE_URL" in os.environ:
        config_data.setdefault("openrouter", {})["base_url"] = os.environ["OPENROUTER_BASE_URL"]

    try:
        config_data["server"] = ServerConfig(**(config_data.get("server") or {})).model_dump()
        config_data["openrouter"] = OpenRouterConfig(**(config_data.get("openrouter") or {})).model_dump()
        config_data["requestProxy"] = RequestProxyConfig(**(config_data.get("requestProxy") or {})).model_dump()
        config_data["cors"] = CorsConfig(**(config_data.get("cors") or {})).model_dump()
    except ValidationError as e:
        print(f"Error in configuration: {e}")
        sys.exit(1)

    return config_data


def setup_logging(config_: Dict[str, Any]) -> logging.Logger:
    """Configure logging based on validated configuration."""
    log_level = config_["server"]["log_level"]
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level_int,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger_ = logging.getLogger("llm-models-api")
    logger_.info("Logging level set to %s", log_level)
    return logger_


def models_url(config_: Dict[str, Any]) -> str:
    """Full URL of the upstream model listing."""
    openrouter = config_["openrouter"]
    return openrouter["base_url"].rstrip("/") + openrouter["models_path"]


# Load and validate configuration once at startup
config = load_config()
logger = setup_logging(config)
