"""Nesting service: filters and groups a cutting list, runs a strategy per group.

Each (material type, thickness) group is nested independently onto its own
sheets. Groups share no mutable state, so callers may run them on separate
workers; the service itself is synchronous.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from panel_nesting.application.strategies import (
    DEFAULT_STRATEGY,
    StrategyProfile,
    StrategyRegistry,
)
from panel_nesting.domain.exceptions import PartTooLargeForSheetError
from panel_nesting.domain.value_objects import (
    NestingResult,
    PartSpecification,
    SheetSize,
    UnplacedPart,
)

logger = logging.getLogger(__name__)

ALL_MATERIALS = "all"


@dataclass(frozen=True)
class NestingConfig:
    """Defaults for a nesting run.

    Attributes:
        sheet_size: Stock sheet dimensions (default 2440x1220 mm).
        strategy: Strategy name (default ``rectpack2d``).
        material_filter: Only nest this material; None or ``"all"`` nests everything.
        seed: Seed for randomized strategies; None for an unseeded source.
        fail_on_unplaced: Raise ``PartTooLargeForSheetError`` instead of
            returning results that are missing parts.
    """

    sheet_size: SheetSize = field(default_factory=SheetSize)
    strategy: str = DEFAULT_STRATEGY
    material_filter: str | None = None
    seed: int | None = None
    fail_on_unplaced: bool = False


def _group_rng(base_seed: int, key: tuple[str, float]) -> random.Random:
    """Independent random source for one material group.

    Seeded from one draw of the caller's source plus the group key, so a
    group's layout does not depend on which groups are nested before it.
    """
    material_type, thickness = key
    return random.Random(f"{base_seed}:{material_type}:{thickness!r}")


class NestingService:
    """Coordinates nesting across material groups.

    Attributes:
        config: Defaults applied when a call omits an option.
        registry: Strategy lookup.
    """

    def __init__(
        self,
        config: NestingConfig | None = None,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self.config = config or NestingConfig()
        self.registry = registry or StrategyRegistry.with_builtins()

    def optimize(
        self,
        cutting_list: Sequence[PartSpecification],
        sheet_size: SheetSize | None = None,
        material_filter: str | None = None,
        strategy: str | None = None,
        rng: random.Random | None = None,
    ) -> list[NestingResult]:
        """Nest a cutting list, one result per (material type, thickness) group.

        Args:
            cutting_list: Part specifications to place.
            sheet_size: Stock sheet dimensions; the configured size if omitted.
            material_filter: Material to keep; the configured filter if omitted.
                ``"all"`` disables filtering.
            strategy: Strategy name; the configured strategy if omitted.
                Unknown names fall back to the default with a warning.
            rng: Random source for randomized strategies; when omitted one is
                created from the configured seed. Each group draws its own
                source from it.

        Returns:
            Results in the order each group first appears in the cutting list.
            Empty when nothing remains after filtering.

        Raises:
            PartTooLargeForSheetError: Only when ``fail_on_unplaced`` is set
                and some instances cannot fit an empty sheet.
        """
        size = sheet_size or self.config.sheet_size
        material = material_filter if material_filter is not None else self.config.material_filter
        resolution = self.registry.resolve(strategy or self.config.strategy)
        if rng is None:
            rng = random.Random(self.config.seed)
        base_seed = rng.getrandbits(64)

        filtered = self._filter_by_material(cutting_list, material)
        groups = self._group_by_material(filtered)

        logger.info(
            "Nesting %d cutting-list items in %d material group(s) with '%s' on %s sheets",
            len(filtered),
            len(groups),
            resolution.profile.key,
            size.label,
        )

        warnings = (resolution.warning,) if resolution.warning else ()
        results = [
            self._optimize_group(
                (material_type, thickness),
                items,
                size,
                resolution.profile,
                _group_rng(base_seed, (material_type, thickness)),
                warnings,
            )
            for (material_type, thickness), items in groups.items()
        ]

        if self.config.fail_on_unplaced:
            unplaced: list[UnplacedPart] = [u for r in results for u in r.unplaced]
            if unplaced:
                raise PartTooLargeForSheetError(unplaced)

        return results

    def _filter_by_material(
        self,
        cutting_list: Sequence[PartSpecification],
        material_filter: str | None,
    ) -> list[PartSpecification]:
        if not material_filter or material_filter == ALL_MATERIALS:
            return list(cutting_list)
        return [item for item in cutting_list if item.material_type == material_filter]

    def _group_by_material(
        self,
        cutting_list: Sequence[PartSpecification],
    ) -> dict[tuple[str, float], list[PartSpecification]]:
        """Group items by (material type, thickness), preserving first-seen order."""
        groups: dict[tuple[str, float], list[PartSpecification]] = {}
        for item in cutting_list:
            groups.setdefault(item.material_key, []).append(item)
        return groups

    def _optimize_group(
        self,
        key: tuple[str, float],
        items: list[PartSpecification],
        sheet_size: SheetSize,
        profile: StrategyProfile,
        rng: random.Random,
        warnings: tuple[str, ...],
    ) -> NestingResult:
        material_type, thickness = key
        instances = [instance for item in items for instance in item.expand()]

        engine = profile.build_engine(sheet_size, rng=rng)
        allocation = engine.allocate(profile.order(instances))

        raw_efficiency = allocation.efficiency
        result = NestingResult(
            sheet_size=sheet_size,
            material_type=material_type,
            thickness=thickness,
            parts=tuple(allocation.placed),
            sheet_count=allocation.sheet_count,
            used_area=allocation.used_area,
            total_area=allocation.total_area,
            waste_area=allocation.waste_area,
            raw_efficiency=raw_efficiency,
            efficiency=self._reported_efficiency(profile, allocation.total_area, raw_efficiency),
            strategy=profile.key,
            unplaced=tuple(allocation.unplaced),
            warnings=warnings,
        )

        logger.info(
            "%s %g: %d instance(s) -> %d sheet(s), %.1f%% efficiency, %d unplaced",
            material_type,
            thickness,
            len(instances),
            result.sheet_count,
            result.efficiency,
            len(result.unplaced),
        )
        return result

    def _reported_efficiency(
        self, profile: StrategyProfile, total_area: float, raw_efficiency: float
    ) -> float:
        # An empty layout reports zero efficiency whatever the adjustment
        if total_area <= 0:
            return raw_efficiency
        return profile.adjustment.apply(raw_efficiency)


def optimize_nesting(
    cutting_list: Sequence[PartSpecification],
    sheet_size: SheetSize | None = None,
    material_type_filter: str | None = None,
    strategy_name: str = DEFAULT_STRATEGY,
    rng: random.Random | None = None,
) -> list[NestingResult]:
    """Nest a cutting list with default service settings.

    Args:
        cutting_list: Part specifications to place.
        sheet_size: Stock sheet dimensions, 2440x1220 mm if omitted.
        material_type_filter: Material to keep; None or ``"all"`` keeps everything.
        strategy_name: Strategy to run; unknown names fall back to ``rectpack2d``.
        rng: Random source for randomized strategies.

    Returns:
        One ``NestingResult`` per (material type, thickness) group.
    """
    return NestingService().optimize(
        cutting_list,
        sheet_size=sheet_size,
        material_filter=material_type_filter,
        strategy=strategy_name,
        rng=rng,
    )
