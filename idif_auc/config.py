"""
Configuration management for the IDIF AUC calculator.

This module provides dataclasses for the analysis cutoffs, input parsing mode
and output formatting, with support for loading from YAML files.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any
import yaml


LINE_FORMATS = ("separate", "interleaved")


@dataclass
class WindowSettings:
    """Cutoffs (minutes) for the fixed analysis windows.

    The report always covers: total, 0-cutoff_a, 0-cutoff_b, cutoff_b-end.
    """
    cutoff_a: float = 5.0
    cutoff_b: float = 10.0


@dataclass
class ParserSettings:
    """Settings for reading curve text.

    line_format:
        "separate"    - each curve is pasted as its own block of
                        (time, activity) lines
        "interleaved" - one block, 4 numbers per line: Real time/activity
                        followed by Combined time/activity
    """
    line_format: str = "separate"


@dataclass
class OutputSettings:
    """Number formatting for reports and exports."""
    decimal_places: int = 4       # AUC columns in the text report
    bias_precision: int = 9       # %Bias column in the text report
    export_precision: int = 9     # TSV export
    end_time_precision: int = 6   # Matched end time line


@dataclass
class AnalysisConfig:
    """Master configuration container."""
    windows: WindowSettings = field(default_factory=WindowSettings)
    parser: ParserSettings = field(default_factory=ParserSettings)
    output: OutputSettings = field(default_factory=OutputSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisConfig':
        """Create config from dictionary."""
        return cls(
            windows=WindowSettings(**data.get('windows', {})),
            parser=ParserSettings(**data.get('parser', {})),
            output=OutputSettings(**data.get('output', {})),
        )


def load_config(config_path: Optional[Path] = None) -> AnalysisConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, looks for config.yaml
                    in the idif_auc package directory.

    Returns:
        AnalysisConfig with values from file merged with defaults.

    Raises:
        ValueError: If parser.line_format is not a known format.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        return AnalysisConfig()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    # Create config with defaults, then override with file values
    config = AnalysisConfig()

    for section in ('windows', 'parser', 'output'):
        target = getattr(config, section)
        for key, value in (data.get(section) or {}).items():
            if hasattr(target, key):
                setattr(target, key, value)

    if config.parser.line_format not in LINE_FORMATS:
        raise ValueError(
            f"Unknown line_format '{config.parser.line_format}' in {config_path}. "
            f"Expected one of: {', '.join(LINE_FORMATS)}"
        )

    return config


def save_config(config: AnalysisConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
