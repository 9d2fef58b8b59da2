"""Pytest configuration and shared fixtures for cutstock tests."""

from __future__ import annotations

import pytest

from cutstock.application.commands import OptimizeCommand


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def optimize_command() -> OptimizeCommand:
    """Create an OptimizeCommand using the default packer."""
    return OptimizeCommand()
