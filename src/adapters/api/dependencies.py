from __future__ import annotations

from src.adapters.settings import trimmer_config_from_env
from src.domain.models import TrimmerConfig


def get_default_trimmer_config() -> TrimmerConfig:
    return trimmer_config_from_env()
