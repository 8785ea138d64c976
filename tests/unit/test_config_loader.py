"""Unit tests for configuration schemas, loading and adaptation."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from modcab.application.config import (
    ConfigError,
    SolutionConfig,
    UnitConfig,
    config_to_layout_request,
    config_to_unit_specs,
    load_config,
    load_config_from_dict,
)
from modcab.domain.value_objects import LayoutMode, UnitKind, UnitSpec


def minimal_data(**overrides: object) -> dict:
    data: dict = {
        "total_width": 2000,
        "height": 2400,
        "depth": 450,
        "units": [
            {"id": "a", "type": "cabinet_door", "width": 450, "is_elastic": True},
            {"id": "b", "type": "tv_space", "width": 1200},
        ],
    }
    data.update(overrides)
    return data


class TestUnitConfig:
    """Tests for the UnitConfig model."""

    def test_defaults(self) -> None:
        unit = UnitConfig(id="a", width=450)
        assert unit.type == UnitKind.CABINET_DOOR
        assert unit.is_elastic is False
        assert unit.texture_id == "walnut_dark"
        assert unit.shelf_count == 0
        assert unit.door_style == "flat"

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UnitConfig(id="a", width=-1)

    def test_negative_shelf_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UnitConfig(id="a", width=450, shelf_count=-1)

    def test_unknown_door_style_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UnitConfig(id="a", width=450, door_style="louvred")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UnitConfig(id="a", width=450, colour="red")

    def test_effective_top_cabinet_height(self) -> None:
        assert UnitConfig(id="a", width=1).effective_top_cabinet_height == 0
        assert (
            UnitConfig(id="a", width=1, has_top_cabinet=True).effective_top_cabinet_height
            == 500
        )
        assert (
            UnitConfig(
                id="a", width=1, has_top_cabinet=True, top_cabinet_height=450
            ).effective_top_cabinet_height
            == 450
        )

    def test_is_frozen(self) -> None:
        unit = UnitConfig(id="a", width=450)
        with pytest.raises(ValidationError):
            unit.width = 600  # type: ignore


class TestSolutionConfig:
    """Tests for the SolutionConfig model."""

    def test_units_stored_as_tuple(self) -> None:
        config = SolutionConfig.model_validate(minimal_data())
        assert isinstance(config.units, tuple)
        assert config.layout_mode == LayoutMode.LINEAR

    def test_total_width_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SolutionConfig.model_validate(minimal_data(total_width=0))

    def test_duplicate_unit_ids_rejected(self) -> None:
        data = minimal_data(
            units=[
                {"id": "a", "width": 300},
                {"id": "a", "width": 400},
            ]
        )
        with pytest.raises(ValidationError, match="Duplicate unit ids: a"):
            SolutionConfig.model_validate(data)

    def test_find_unit(self) -> None:
        config = SolutionConfig.model_validate(minimal_data())
        assert config.find_unit("b").type == UnitKind.TV_SPACE
        assert config.find_unit("missing") is None
        assert config.index_of("b") == 1
        assert config.index_of("missing") is None

    def test_is_hashable(self) -> None:
        """Frozen configurations can key a memoization cache."""
        first = SolutionConfig.model_validate(minimal_data())
        second = SolutionConfig.model_validate(minimal_data())
        assert first == second
        assert hash(first) == hash(second)


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "layout.json"
        path.write_text(json.dumps(minimal_data(layout_mode="l_shape")))
        config = load_config(path)
        assert config.total_width == 2000
        assert config.layout_mode == LayoutMode.L_SHAPE
        assert [u.id for u in config.units] == ["a", "b"]

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"total_width": 2000,')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_validation_error_paths(self, tmp_path: Path) -> None:
        data = minimal_data()
        data["units"][1]["width"] = -5
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "units[1].width"
        assert "units[1].width" in str(error)


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self) -> None:
        config = load_config_from_dict(minimal_data())
        assert len(config.units) == 2

    def test_unknown_unit_type(self) -> None:
        data = minimal_data(units=[{"id": "a", "type": "wardrobe", "width": 1}])
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "units[0].type"

    def test_missing_total_width(self) -> None:
        data = minimal_data()
        del data["total_width"]
        with pytest.raises(ConfigError, match="total_width"):
            load_config_from_dict(data)


class TestAdapter:
    """Tests for configuration to domain conversion."""

    def test_config_to_unit_specs(self) -> None:
        config = load_config_from_dict(minimal_data())
        assert config_to_unit_specs(config) == (
            UnitSpec("a", UnitKind.CABINET_DOOR, width=450, is_elastic=True),
            UnitSpec("b", UnitKind.TV_SPACE, width=1200, is_elastic=False),
        )

    def test_config_to_layout_request(self) -> None:
        config = load_config_from_dict(minimal_data())
        request = config_to_layout_request(config)
        assert request.total_width == 2000
        assert request.allocate() == {"a": 800, "b": 1200}
