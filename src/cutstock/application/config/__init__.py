"""Job file schema and loading for optimization runs.

Public API:
    - OptimizationConfiguration: Root job model
    - SheetConfig, PieceConfig, OptionsConfig: Nested job models
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - merge_config_with_cli: Apply command line overrides
    - config_to_packing_config, config_to_pieces: Convert to domain objects
    - ConfigError: Exception for job file errors

Example:
    >>> from pathlib import Path
    >>> from cutstock.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ...     print(f"Sheet: {config.sheet.length}x{config.sheet.width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutstock.application.config.adapter import (
    config_to_packing_config,
    config_to_pieces,
)
from cutstock.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutstock.application.config.merger import merge_config_with_cli
from cutstock.application.config.schema import (
    SUPPORTED_VERSIONS,
    OptimizationConfiguration,
    OptionsConfig,
    PieceConfig,
    SheetConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "OptimizationConfiguration",
    "OptionsConfig",
    "PieceConfig",
    "SheetConfig",
    "config_to_packing_config",
    "config_to_pieces",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
