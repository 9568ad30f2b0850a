"""Application layer - strategies, nesting service and configuration."""

from .service import ALL_MATERIALS, NestingConfig, NestingService, optimize_nesting
from .strategies import (
    DEFAULT_STRATEGY,
    EfficiencyAdjustment,
    StrategyProfile,
    StrategyRegistry,
    StrategyResolution,
)

__all__ = [
    "ALL_MATERIALS",
    "DEFAULT_STRATEGY",
    "EfficiencyAdjustment",
    "NestingConfig",
    "NestingService",
    "StrategyProfile",
    "StrategyRegistry",
    "StrategyResolution",
    "optimize_nesting",
]
