"""Tests for the debuff icon generator."""

from __future__ import annotations

import numpy as np
import pytest

from spritegen.generators import DebuffIconGenerator
from spritegen.generators.debuff_icons import DEBUFF_COLORS
from spritegen.types import DebuffConfig, DebuffType, SpriteDescriptor


ALL_DEBUFFS = [t.value for t in DebuffType]
DETERMINISTIC_DEBUFFS = ["poison", "weakness", "confusion", "fear"]


def _rgb(hex_color: str) -> tuple[int, int, int]:
    value = int(hex_color.lstrip("#"), 16)
    return (value >> 16, (value >> 8) & 0xFF, value & 0xFF)


class TestDebuffDescriptor:
    """Tests for the returned descriptor."""

    @pytest.mark.parametrize("debuff_type", ALL_DEBUFFS)
    def test_fixed_dimensions(self, debuff_generator, decode, debuff_type):
        """Test every debuff is a 24x24 PNG."""
        descriptor = debuff_generator.generate_debuff_icon(DebuffConfig(debuff_type=debuff_type))

        assert descriptor.sprite.width == 24
        assert descriptor.sprite.height == 24
        assert descriptor.sprite.format == "png"

        image = decode(descriptor)
        assert image.format == "PNG"
        assert image.size == (24, 24)

    def test_slow_example(self, debuff_generator):
        """Test the slow icon from a camelCase dict."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "slow"})

        assert descriptor.name == "Slow Debuff Icon"
        assert descriptor.type == "debuff_icon"
        assert descriptor.sprite.width == 24
        assert descriptor.sprite.height == 24
        assert descriptor.metadata["severity"] == "moderate"

    def test_metadata_defaults(self, debuff_generator):
        """Test omitted cosmetic fields get defaults."""
        metadata = debuff_generator.generate_debuff_icon(DebuffConfig(debuff_type="fear")).metadata

        assert metadata["debuffType"] == "fear"
        assert metadata["severity"] == "moderate"
        assert metadata["duration"] == "temporary"
        assert metadata["curable"] is True
        assert metadata["version"] == "1.0"
        assert metadata["generated"].endswith("Z")

    def test_metadata_echoes_values(self, debuff_generator):
        """Test supplied values pass through unchanged, known or not."""
        config = DebuffConfig(
            debuff_type="poison",
            severity="apocalyptic",
            duration="permanent",
            curable=False,
        )
        descriptor = debuff_generator.generate_debuff_icon(config)

        assert descriptor.metadata["severity"] == "apocalyptic"
        assert descriptor.metadata["duration"] == "permanent"
        assert descriptor.metadata["curable"] is False
        assert descriptor.config == config
        assert descriptor.config is not config

    def test_config_changes_after_generation_do_not_leak(self, debuff_generator):
        """Test the descriptor keeps the config as it was when generated."""
        config = DebuffConfig(debuff_type="slow", severity="mild")
        descriptor = debuff_generator.generate_debuff_icon(config)

        config.debuff_type = "fear"
        config.severity = "severe"

        assert descriptor.config.debuff_type == "slow"
        assert descriptor.to_dict()["config"] == {"debuffType": "slow", "severity": "mild"}

    def test_metadata_is_read_only(self, debuff_generator):
        """Test descriptor metadata cannot be modified in place."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "poison"})

        with pytest.raises(TypeError):
            descriptor.metadata["severity"] = "severe"
        assert descriptor.metadata["severity"] == "moderate"

    def test_returns_descriptor(self, debuff_generator):
        """Test the generator hands back a SpriteDescriptor."""
        assert isinstance(debuff_generator.generate_debuff_icon(), SpriteDescriptor)

    def test_unique_ids(self, debuff_generator):
        """Test each call gets a fresh id."""
        first = debuff_generator.generate_debuff_icon({"debuffType": "poison"})
        second = debuff_generator.generate_debuff_icon({"debuffType": "poison"})
        assert first.id != second.id

    def test_to_dict(self, debuff_generator):
        """Test the dictionary form mirrors the descriptor."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "slow", "severity": "mild"})
        data = descriptor.to_dict()

        assert data["id"] == descriptor.id
        assert data["name"] == "Slow Debuff Icon"
        assert data["sprite"] == {
            "width": 24,
            "height": 24,
            "data": descriptor.sprite.data,
            "format": "png",
        }
        assert data["config"] == {"debuffType": "slow", "severity": "mild"}
        assert data["metadata"]["severity"] == "mild"


class TestDebuffDispatch:
    """Tests for variant selection."""

    def test_unknown_type_draws_poison(self, pixels):
        """Test unknown tags fall back to the poison icon."""
        generator = DebuffIconGenerator(seed=7)
        unknown = generator.generate_debuff_icon({"debuffType": "banana"})
        poison = generator.generate_debuff_icon({"debuffType": "poison"})

        assert np.array_equal(pixels(unknown), pixels(poison))

    def test_unknown_type_keeps_its_name(self, debuff_generator):
        """Test the fallback does not rewrite the tag."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "banana"})
        assert descriptor.name == "Banana Debuff Icon"
        assert descriptor.metadata["debuffType"] == "banana"

    def test_missing_type_uses_default_name(self, debuff_generator):
        """Test a missing tag is named after the default variant."""
        descriptor = debuff_generator.generate_debuff_icon({})
        assert descriptor.name == "Poison Debuff Icon"

    def test_empty_type_keeps_empty_name(self, debuff_generator):
        """Test an empty tag is kept rather than treated as missing."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": ""})
        assert descriptor.name == " Debuff Icon"
        assert descriptor.metadata["debuffType"] == ""

    def test_enum_tags_accepted(self, debuff_generator):
        """Test DebuffType members work as tags."""
        assert debuff_generator.resolve_type(DebuffType.FEAR) == "fear"

    def test_available_types(self, debuff_generator):
        """Test all variants are listed with the default first."""
        assert debuff_generator.available_types == ALL_DEBUFFS
        assert debuff_generator.default_type == "poison"


class TestDebuffDrawing:
    """Tests for the drawn pixels."""

    @pytest.mark.parametrize("debuff_type", DETERMINISTIC_DEBUFFS)
    def test_deterministic_variants_repeat(self, pixels, debuff_type):
        """Test variants without jitter are pixel identical across calls."""
        first = DebuffIconGenerator().generate_debuff_icon({"debuffType": debuff_type})
        second = DebuffIconGenerator().generate_debuff_icon({"debuffType": debuff_type})
        assert np.array_equal(pixels(first), pixels(second))

    def test_slow_repeats_with_seed(self, pixels):
        """Test the sand jitter is reproducible with a seed."""
        first = DebuffIconGenerator(seed=42).generate_debuff_icon({"debuffType": "slow"})
        second = DebuffIconGenerator(seed=42).generate_debuff_icon({"debuffType": "slow"})
        assert np.array_equal(pixels(first), pixels(second))

    def test_slow_varies_between_seeds(self, pixels):
        """Test the sand grains move with the random source."""
        first = DebuffIconGenerator(seed=1).generate_debuff_icon({"debuffType": "slow"})
        second = DebuffIconGenerator(seed=2).generate_debuff_icon({"debuffType": "slow"})
        assert not np.array_equal(pixels(first), pixels(second))

    @pytest.mark.parametrize("debuff_type", ALL_DEBUFFS)
    def test_background_color(self, debuff_generator, debuff_type):
        """Test the badge disc uses the variant's base color."""
        buffer = debuff_generator.render(DebuffConfig(debuff_type=debuff_type))
        background, _ = DEBUFF_COLORS[debuff_type]

        assert tuple(buffer[12, 2]) == (*_rgb(background), 255)

    @pytest.mark.parametrize("debuff_type", ALL_DEBUFFS)
    def test_corners_transparent(self, debuff_generator, debuff_type):
        """Test pixels outside the badge stay fully transparent."""
        buffer = debuff_generator.render(DebuffConfig(debuff_type=debuff_type))
        for y, x in [(0, 0), (0, 23), (23, 0), (23, 23)]:
            assert tuple(buffer[y, x]) == (0, 0, 0, 0)

    def test_poison_liquid(self, debuff_generator):
        """Test the vial is filled with purple poison."""
        buffer = debuff_generator.render(DebuffConfig(debuff_type="poison"))
        assert tuple(buffer[12, 12]) == (138, 43, 226, 255)

    def test_render_returns_fresh_buffers(self, debuff_generator):
        """Test renders do not share a buffer."""
        first = debuff_generator.render(DebuffConfig(debuff_type="fear"))
        second = debuff_generator.render(DebuffConfig(debuff_type="fear"))

        first[:] = 0
        assert second.any()
