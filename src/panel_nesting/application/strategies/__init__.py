"""Nesting strategies: named policy presets over the shared placement core.

Available Strategies:
    - rectpack2d: Best Short Side Fit, largest area first (default)
    - binpacking: Longest side first with grain-violation fallback
    - d3js: Jittered grid preview layout (randomized)
    - fabricjs: Aspect ratio ordering with randomized rotation (randomized)
    - cutlist: Grain-priority strip packing
    - cssgrid: Rows snapped to a 100 mm grid
    - svgrenderer, canvasrenderer, webglrenderer, reactkonva: aliases of rectpack2d

Example:
    ```python
    from panel_nesting.application.strategies import StrategyRegistry

    registry = StrategyRegistry.with_builtins()
    profile = registry.resolve("cutlist").profile
    allocation = profile.build_engine(sheet_size).allocate(profile.order(instances))
    ```
"""

from .base import NO_ADJUSTMENT, EfficiencyAdjustment, StrategyProfile
from .profiles import BUILTIN_PROFILES, DEFAULT_STRATEGY, RENDERER_ALIASES
from .registry import StrategyRegistry, StrategyResolution

__all__ = [
    "BUILTIN_PROFILES",
    "DEFAULT_STRATEGY",
    "EfficiencyAdjustment",
    "NO_ADJUSTMENT",
    "RENDERER_ALIASES",
    "StrategyProfile",
    "StrategyRegistry",
    "StrategyResolution",
]
