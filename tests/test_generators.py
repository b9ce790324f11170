"""Tests for shared generator behaviour: batches, stats and file output."""

from __future__ import annotations

import base64
import json

import pytest

from spritegen.generators import DebuffIconGenerator, GenerationStats, RuinGenerator
from spritegen.types import BatchResult, DebuffConfig


class TestSaveToFile:
    """Tests for writing sprites to disk."""

    def test_writes_decoded_png(self, debuff_generator, tmp_path):
        """Test the file is byte identical to the decoded payload."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "fear"})
        output = tmp_path / "fear.png"

        path = debuff_generator.save_to_file(descriptor, output)

        assert path == output
        assert output.read_bytes() == base64.b64decode(descriptor.sprite.data)

    def test_accepts_string_path(self, ruin_generator, tmp_path):
        """Test plain string paths work."""
        descriptor = ruin_generator.generate_ruin({"ruinType": "pillar"})
        path = ruin_generator.save_to_file(descriptor, str(tmp_path / "pillar.png"))
        assert path.exists()

    def test_overwrites_existing_file(self, debuff_generator, tmp_path):
        """Test an existing file is replaced."""
        output = tmp_path / "icon.png"
        output.write_bytes(b"old contents")

        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "slow"})
        debuff_generator.save_to_file(descriptor, output)

        assert output.read_bytes().startswith(b"\x89PNG")

    def test_missing_directory_raises(self, debuff_generator, tmp_path):
        """Test directories are not created."""
        descriptor = debuff_generator.generate_debuff_icon({"debuffType": "slow"})
        with pytest.raises(OSError):
            debuff_generator.save_to_file(descriptor, tmp_path / "missing" / "slow.png")


class TestGenerateBatch:
    """Tests for batch generation."""

    def test_all_succeed(self, debuff_generator):
        """Test a batch returns one result per config in order."""
        configs = [{"debuffType": t} for t in ("poison", "slow", "fear")]
        results = debuff_generator.generate_batch(configs)

        assert [r.index for r in results] == [0, 1, 2]
        assert all(r.success for r in results)
        assert [r.descriptor.name for r in results] == [
            "Poison Debuff Icon",
            "Slow Debuff Icon",
            "Fear Debuff Icon",
        ]

    def test_failure_is_recorded(self, debuff_generator, monkeypatch):
        """Test a failing item does not stop the batch."""

        def explode(canvas, config, rng):
            raise RuntimeError("boom")

        monkeypatch.setitem(debuff_generator._recipes, "fear", explode)
        results = debuff_generator.generate_batch([
            DebuffConfig(debuff_type="poison"),
            DebuffConfig(debuff_type="fear"),
            DebuffConfig(debuff_type="slow"),
        ])

        assert [r.success for r in results] == [True, False, True]
        assert results[1] == BatchResult(index=1, success=False, error="boom")
        assert debuff_generator.stats.total_generated == 2
        assert debuff_generator.stats.total_failed == 1

    def test_oversized_batch_raises(self, ruin_generator):
        """Test batches beyond the maximum size are rejected."""
        with pytest.raises(ValueError):
            ruin_generator.generate_batch([{"ruinType": "wall"}] * 3, max_batch_size=2)


class TestGenerationStats:
    """Tests for generation statistics."""

    def test_initial_stats(self):
        """Test a fresh generator has empty stats."""
        stats = DebuffIconGenerator().stats
        assert stats.total_generated == 0
        assert stats.average_time_ms == 0.0
        assert stats.success_rate == 100.0
        assert stats.last_generated is None

    def test_stats_track_generations(self, ruin_generator):
        """Test each generation is counted."""
        ruin_generator.generate_ruin({"ruinType": "wall"})
        ruin_generator.generate_ruin({"ruinType": "statue"})
        stats = ruin_generator.stats

        assert stats.total_generated == 2
        assert stats.total_time_ms >= 0
        assert stats.average_time_ms == pytest.approx(stats.total_time_ms / 2)
        assert stats.last_generated is not None

    def test_success_rate(self):
        """Test the success rate counts failures."""
        stats = GenerationStats()
        stats.record(10.0, success=True)
        stats.record(10.0, success=True)
        stats.record(10.0, success=True)
        stats.record(10.0, success=False)

        assert stats.success_rate == 75.0
        assert stats.average_time_ms == 10.0


class TestReuse:
    """Tests for reusing one generator instance."""

    def test_alternating_calls(self, pixels):
        """Test calls on one instance do not leak into each other."""
        generator = RuinGenerator(seed=8)
        first = generator.generate_ruin({"ruinType": "statue"})
        generator.generate_ruin({"ruinType": "wall"})

        fresh = RuinGenerator(seed=8).generate_ruin({"ruinType": "statue"})
        assert (pixels(first) == pixels(fresh)).all()

    def test_descriptor_is_json_serializable(self, ruin_generator):
        """Test the dictionary form can be dumped as JSON."""
        data = ruin_generator.generate_ruin({"ruinType": "statue", "overgrown": True}).to_dict()
        decoded = json.loads(json.dumps(data))

        assert decoded["config"] == {"ruinType": "statue", "overgrown": True}
        assert decoded["metadata"]["overgrown"] is True
