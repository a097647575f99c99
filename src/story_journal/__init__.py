"""Application-wide settings, logging and the LLM client."""

from .config import Config, OllamaConfig, SummarizerConfig, load_config
from .logger import setup_logger
from .ollama_client import OllamaClient

__all__ = [
    "Config",
    "OllamaConfig",
    "SummarizerConfig",
    "load_config",
    "setup_logger",
    "OllamaClient",
]
