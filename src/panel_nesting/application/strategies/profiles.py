"""Built-in strategy profiles.

The keys are the layout engines a caller can request. Renderer-oriented
names are aliases of the default rectangle packer.
"""

from __future__ import annotations

from panel_nesting.infrastructure.nesting import GrainFallback, LayoutMode, RotationPolicy

from .base import EfficiencyAdjustment, StrategyProfile
from .ordering import (
    by_area_desc,
    by_aspect_ratio_desc,
    by_grain_then_area,
    by_longest_side_desc,
    insertion_order,
)

DEFAULT_STRATEGY = "rectpack2d"

RECTPACK2D = StrategyProfile(
    key="rectpack2d",
    label="RectPack2D",
    description="Best Short Side Fit rectangle packing, largest parts first",
    ordering=by_area_desc,
)

BINPACKING = StrategyProfile(
    key="binpacking",
    label="BinPacking",
    description="Longest side first, places against the grain when nothing else fits",
    ordering=by_longest_side_desc,
    grain_fallback=GrainFallback.ALWAYS,
    adjustment=EfficiencyAdjustment(factor=1.05, cap=99.5),
)

D3JS = StrategyProfile(
    key="d3js",
    label="D3.js",
    description="Jittered grid preview layout without packing search",
    ordering=insertion_order,
    layout=LayoutMode.JITTERED_GRID,
    adjustment=EfficiencyAdjustment(factor=0.95, floor=60.0),
    deterministic=False,
)

FABRICJS = StrategyProfile(
    key="fabricjs",
    label="Fabric.js",
    description="Aspect ratio ordering with randomized rotation and grain trade-offs",
    ordering=by_aspect_ratio_desc,
    rotation=RotationPolicy.SHUFFLED,
    grain_fallback=GrainFallback.PROBABILISTIC,
    adjustment=EfficiencyAdjustment(factor=1.02, cap=99.0),
    deterministic=False,
)

CUTLIST = StrategyProfile(
    key="cutlist",
    label="CutList Optimizer",
    description="Grain-first strip packing that never rotates for fit",
    ordering=by_grain_then_area,
    layout=LayoutMode.STRIP,
    adjustment=EfficiencyAdjustment(factor=1.08, cap=99.9),
)

CSSGRID = StrategyProfile(
    key="cssgrid",
    label="CSS Grid",
    description="Rows snapped to a 100 mm cell grid, cutting-list order",
    ordering=insertion_order,
    layout=LayoutMode.CELL_GRID,
)

BUILTIN_PROFILES: tuple[StrategyProfile, ...] = (
    RECTPACK2D,
    BINPACKING,
    D3JS,
    FABRICJS,
    CUTLIST,
    CSSGRID,
)

RENDERER_ALIASES: tuple[str, ...] = (
    "svgrenderer",
    "canvasrenderer",
    "webglrenderer",
    "reactkonva",
)
