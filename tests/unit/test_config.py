"""Tests for cutting-list loading, validation and conversion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from panel_nesting.application.config import (
    ConfigError,
    CuttingListFileSchema,
    config_to_nesting_config,
    config_to_parts,
    config_to_sheet_size,
    item_to_part,
    load_cutting_list,
    load_cutting_list_from_dict,
)
from panel_nesting.application.config.loader import _format_json_path
from panel_nesting.domain.value_objects import GrainDirection, SheetSize


@pytest.fixture
def camel_case_data() -> dict:
    """Cutting list in the camelCase shape produced by the cutting-list exporter."""
    return {
        "sheetSize": {"length": 3050, "width": 1525},
        "strategy": "binpacking",
        "materialFilter": "Plywood",
        "seed": 3,
        "cuttingList": [
            {
                "id": "side",
                "partName": "Side Panel",
                "cabinetId": "base-1",
                "cabinetName": "Sink Base",
                "materialType": "Plywood",
                "thickness": 18,
                "length": 720,
                "width": 560,
                "quantity": 2,
                "edgeBanding": {"front": True, "back": False, "left": False, "right": False},
                "grain": "length",
                "priority": 1,
            }
        ],
    }


# =============================================================================
# Loader Tests
# =============================================================================


class TestLoadCuttingList:
    """Tests for loading cutting lists from files and dicts."""

    def test_camel_case_keys(self, camel_case_data: dict) -> None:
        """camelCase keys validate into snake_case fields."""
        config = load_cutting_list_from_dict(camel_case_data)

        assert config.strategy == "binpacking"
        assert config.material_filter == "Plywood"
        assert config.seed == 3
        assert config.sheet_size is not None
        assert config.sheet_size.length == 3050
        item = config.cutting_list[0]
        assert item.part_name == "Side Panel"
        assert item.material_type == "Plywood"
        assert item.edge_banding.front is True
        assert item.grain == GrainDirection.LENGTH

    def test_snake_case_keys(self) -> None:
        """snake_case keys are accepted too."""
        config = load_cutting_list_from_dict(
            {"cutting_list": [{"id": "a", "length": 100, "width": 50, "material_type": "MDF"}]}
        )
        assert config.cutting_list[0].material_type == "MDF"

    def test_bare_list(self) -> None:
        """A bare array is treated as the cutting list."""
        config = load_cutting_list_from_dict([{"id": "a", "length": 100, "width": 50}])

        assert len(config.cutting_list) == 1
        assert config.cutting_list[0].quantity == 1
        assert config.cutting_list[0].grain == GrainDirection.NONE
        assert config.sheet_size is None

    def test_numeric_id_coerced(self) -> None:
        """Numeric ids from spreadsheet exports become strings."""
        config = load_cutting_list_from_dict([{"id": 7, "length": 100, "width": 50}])
        assert config.cutting_list[0].id == "7"

    def test_validation_error_details(self) -> None:
        """Invalid values are reported with JSON paths."""
        with pytest.raises(ConfigError) as exc_info:
            load_cutting_list_from_dict([{"id": "a", "length": -1, "width": 50}])

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"].endswith("[0].length")
        assert "Cutting list validation failed" in error.message

    def test_unknown_grain_rejected(self) -> None:
        """Grain must be one of none, length, width."""
        with pytest.raises(ConfigError) as exc_info:
            load_cutting_list_from_dict([{"id": "a", "length": 1, "width": 1, "grain": "diagonal"}])
        assert exc_info.value.error_type == "validation"

    def test_extra_keys_rejected(self) -> None:
        """Unknown keys are validation errors."""
        with pytest.raises(ConfigError) as exc_info:
            load_cutting_list_from_dict({"cuttingList": [], "colour": "red"})

        assert exc_info.value.details[0]["path"] == "colour"
        assert exc_info.value.details[0]["error_type"] == "extra_forbidden"

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Missing files raise a file_not_found error."""
        with pytest.raises(ConfigError) as exc_info:
            load_cutting_list(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON reports line and column."""
        path = tmp_path / "broken.json"
        path.write_text('{"cuttingList": [\n  {"id": "a",,}\n]}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_cutting_list(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert error.path == path

    def test_load_file(self, tmp_path: Path, camel_case_data: dict) -> None:
        """A valid file loads into the root schema."""
        path = tmp_path / "kitchen.json"
        path.write_text(json.dumps(camel_case_data), encoding="utf-8")

        config = load_cutting_list(path)

        assert isinstance(config, CuttingListFileSchema)
        assert config.cutting_list[0].id == "side"

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("cutting_list", 0, "length"), "cutting_list[0].length"),
            (("sheet_size", "width"), "sheet_size.width"),
            ((0, "id"), "[0].id"),
        ],
    )
    def test_format_json_path(self, loc: tuple, expected: str) -> None:
        """Location tuples format as JSON paths."""
        assert _format_json_path(loc) == expected


# =============================================================================
# Adapter Tests
# =============================================================================


class TestConfigAdapter:
    """Tests for conversion into domain objects."""

    def test_item_to_part(self, camel_case_data: dict) -> None:
        """Every item field carries over to the specification."""
        config = load_cutting_list_from_dict(camel_case_data)

        part = item_to_part(config.cutting_list[0])

        assert part.id == "side"
        assert part.part_name == "Side Panel"
        assert part.cabinet_id == "base-1"
        assert part.cabinet_name == "Sink Base"
        assert part.material_key == ("Plywood", 18)
        assert (part.length, part.width, part.quantity) == (720, 560, 2)
        assert part.grain == GrainDirection.LENGTH
        assert part.edge_banding.front is True
        assert part.priority == 1

    def test_config_to_parts_keeps_order(self) -> None:
        """Items convert in file order."""
        config = load_cutting_list_from_dict(
            [
                {"id": "b", "length": 100, "width": 50},
                {"id": "a", "length": 100, "width": 50},
            ]
        )
        assert [p.id for p in config_to_parts(config.cutting_list)] == ["b", "a"]

    def test_default_sheet_size(self) -> None:
        """A missing sheet size means the standard sheet."""
        assert config_to_sheet_size(None) == SheetSize(2440, 1220)

    def test_config_to_nesting_config(self, camel_case_data: dict) -> None:
        """File options become service defaults."""
        config = load_cutting_list_from_dict(camel_case_data)

        nesting_config = config_to_nesting_config(config, fail_on_unplaced=True)

        assert nesting_config.sheet_size == SheetSize(3050, 1525)
        assert nesting_config.strategy == "binpacking"
        assert nesting_config.material_filter == "Plywood"
        assert nesting_config.seed == 3
        assert nesting_config.fail_on_unplaced is True

    def test_default_options(self) -> None:
        """Omitted options take the service defaults."""
        config = load_cutting_list_from_dict([])
        nesting_config = config_to_nesting_config(config)

        assert nesting_config.strategy == "rectpack2d"
        assert nesting_config.material_filter is None
        assert nesting_config.seed is None
        assert nesting_config.fail_on_unplaced is False
