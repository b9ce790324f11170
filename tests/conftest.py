"""Pytest configuration and fixtures."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image

from spritegen.generators import DebuffIconGenerator, RuinGenerator
from spritegen.types import SpriteDescriptor


@pytest.fixture
def debuff_generator() -> DebuffIconGenerator:
    """Seeded debuff icon generator."""
    return DebuffIconGenerator(seed=1234)


@pytest.fixture
def ruin_generator() -> RuinGenerator:
    """Seeded ruin generator."""
    return RuinGenerator(seed=1234)


def decode_sprite(descriptor: SpriteDescriptor) -> Image.Image:
    """Open a descriptor's PNG payload with Pillow."""
    image = Image.open(io.BytesIO(base64.b64decode(descriptor.sprite.data)))
    image.load()
    return image


def sprite_pixels(descriptor: SpriteDescriptor) -> np.ndarray:
    """Decode a descriptor's PNG payload into an RGBA array."""
    return np.array(decode_sprite(descriptor).convert("RGBA"))


@pytest.fixture
def decode():
    """Helper turning a descriptor into a Pillow image."""
    return decode_sprite


@pytest.fixture
def pixels():
    """Helper turning a descriptor into an RGBA array."""
    return sprite_pixels
