"""Application layer - use cases and job configuration."""

from .commands import OptimizeCommand
from .dtos import OptimizationOutput

__all__ = [
    "OptimizationOutput",
    "OptimizeCommand",
]
