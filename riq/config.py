"""Configuration module for the RIQ scoring tool."""

from dataclasses import dataclass, field
from pathlib import Path
import logging


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("riq")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


@dataclass
class ScoringParams:
    """Parameters for the RIQ computation."""
    decimal_places: int = 4


@dataclass
class Config:
    """Configuration class for a scoring run."""

    # File paths
    input_file: str

    # Scoring parameters
    scoring_params: ScoringParams = field(default_factory=ScoringParams)

    # Presentation
    sort_results: bool = False
    output_format: str = "table"  # 'table' or 'json'

    # Logging
    log_level: int = logging.INFO

    # Base directories (computed)
    _base_dir: Path = field(init=False)
    _data_dir: Path = field(init=False)

    def __post_init__(self):
        self._base_dir = Path(__file__).parent.parent
        self._data_dir = self._base_dir / "data"

        if self.output_format not in ("table", "json"):
            raise ValueError(f"Unknown output format: {self.output_format}")

        # Resolve relative paths
        if not Path(self.input_file).is_absolute():
            self.input_file = str(self._data_dir / self.input_file)

    @property
    def data_dir(self) -> Path:
        return self._data_dir


# Default configuration
def get_default_config() -> Config:
    """Return default configuration."""
    return Config(input_file="sample_ifvs.json")
