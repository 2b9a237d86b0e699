"""Configuration management for polyscan."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union
import yaml

from polyscan.constants import (
    DEFAULT_NUCLEOTIDE,
    DEFAULT_PERCENTAGE,
    DEFAULT_WINDOW_SIZE,
    MAX_PERCENTAGE,
    MIN_PERCENTAGE,
    VALID_NUCLEOTIDES,
)
from polyscan.exceptions import ConfigurationError


@dataclass
class ScanConfig:
    """Sliding-window scan settings."""

    window_size: int = DEFAULT_WINDOW_SIZE
    percentage: float = DEFAULT_PERCENTAGE
    nucleotide: str = DEFAULT_NUCLEOTIDE


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    # Show a tqdm bar over records on stderr
    enable_progress: bool = False


@dataclass
class Config:
    """Main configuration class."""

    input_file: Optional[Path] = None
    # None or "-" writes BED to stdout
    output_file: Optional[Path] = None
    summary_file: Optional[Path] = None

    scan: ScanConfig = field(default_factory=ScanConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    # Convenience properties
    @property
    def window_size(self) -> int:
        return self.scan.window_size

    @window_size.setter
    def window_size(self, value: int):
        self.scan.window_size = value

    @property
    def percentage(self) -> float:
        return self.scan.percentage

    @percentage.setter
    def percentage(self, value: float):
        self.scan.percentage = value

    @property
    def nucleotide(self) -> str:
        return self.scan.nucleotide

    @nucleotide.setter
    def nucleotide(self, value: str):
        self.scan.nucleotide = value

    def validate(self) -> None:
        """Validate configuration."""
        if not self.input_file:
            raise ConfigurationError("Input FASTA file is required")
        if not Path(self.input_file).exists():
            raise ConfigurationError(f"Input file not found: {self.input_file}")

        validate_scan(self.scan)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""

        def path_to_str(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, dict):
                return {k: path_to_str(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [path_to_str(item) for item in obj]
            return obj

        return path_to_str(asdict(self))


def validate_scan(scan: ScanConfig) -> None:
    """Check scan settings; raises ConfigurationError on the first problem."""
    if isinstance(scan.window_size, bool) or not isinstance(scan.window_size, int):
        raise ConfigurationError(f"window_size must be an integer, got {scan.window_size!r}")
    if scan.window_size < 1:
        raise ConfigurationError("window_size must be >= 1")

    try:
        percentage = float(scan.percentage)
    except (TypeError, ValueError):
        raise ConfigurationError(f"percentage must be a number, got {scan.percentage!r}") from None
    # NaN fails every comparison, so check it explicitly
    if not math.isfinite(percentage) or not MIN_PERCENTAGE <= percentage <= MAX_PERCENTAGE:
        raise ConfigurationError(
            f"percentage must be between {MIN_PERCENTAGE} and {MAX_PERCENTAGE}"
        )

    nucleotide = scan.nucleotide
    if not isinstance(nucleotide, str) or len(nucleotide) != 1:
        raise ConfigurationError("nucleotide must be a single character (A, C, G, T, or N)")
    if nucleotide.upper() not in VALID_NUCLEOTIDES:
        raise ConfigurationError("nucleotide must be one of A, C, G, T, or N")


def _optional_path(value: Any) -> Optional[Path]:
    if value is None or value == "":
        return None
    return Path(value)


def load_config(path: Union[str, Path]) -> Config:
    """Load configuration from YAML file; unknown keys are ignored."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    cfg = Config()

    # Direct attributes
    for key in ("input_file", "output_file", "summary_file"):
        if key in data:
            setattr(cfg, key, _optional_path(data[key]))

    # Scan config
    scan = data.get("scan") or {}
    if not isinstance(scan, dict):
        raise ConfigurationError("'scan' section must be a mapping")
    for key, value in scan.items():
        if hasattr(cfg.scan, key) and value is not None:
            if key == "nucleotide":
                value = str(value)
            setattr(cfg.scan, key, value)

    # Runtime config
    runtime = data.get("runtime") or {}
    if not isinstance(runtime, dict):
        raise ConfigurationError("'runtime' section must be a mapping")
    for key, value in runtime.items():
        if hasattr(cfg.runtime, key):
            if key == "log_file":
                value = _optional_path(value)
            setattr(cfg.runtime, key, value)

    return cfg


def save_config(cfg: Config, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    data = cfg.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
