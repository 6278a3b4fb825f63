"""RIQ scoring for intuitionistic fuzzy values."""

from .config import Config, ScoringParams, setup_logging, get_default_config

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ScoringParams",
    "setup_logging",
    "get_default_config",
]
