"""FastAPI dependency injection for optimization services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cutstock.application.commands import OptimizeCommand
from cutstock.infrastructure.cut_diagram_renderer import CutDiagramRenderer


@lru_cache(maxsize=1)
def get_optimize_command() -> OptimizeCommand:
    """Get cached OptimizeCommand instance (stateless, safe to share)."""
    return OptimizeCommand()


def get_renderer() -> CutDiagramRenderer:
    """Dependency for CutDiagramRenderer."""
    return CutDiagramRenderer()


# Type aliases for cleaner endpoint signatures
OptimizeCommandDep = Annotated[OptimizeCommand, Depends(get_optimize_command)]
RendererDep = Annotated[CutDiagramRenderer, Depends(get_renderer)]
