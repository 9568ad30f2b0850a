"""FastAPI dependency injection for nesting services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from panel_nesting.application.strategies import StrategyRegistry


@lru_cache(maxsize=1)
def get_strategy_registry() -> StrategyRegistry:
    """Get cached registry holding the built-in strategies."""
    return StrategyRegistry.with_builtins()


StrategyRegistryDep = Annotated[StrategyRegistry, Depends(get_strategy_registry)]
