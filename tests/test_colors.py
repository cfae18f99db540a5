"""
Tests for the random color source.
"""

import re

from tnfgen.core.services.colors import RandomColor

HEX = re.compile(r"#[0-9a-f]{6}")


def test_hex_shape():
    colors = RandomColor()
    for _ in range(20):
        assert HEX.fullmatch(colors.hex_string())


def test_seeded_is_deterministic():
    a = [RandomColor(seed=3).hex_string() for _ in range(3)]
    b = [RandomColor(seed=3).hex_string() for _ in range(3)]
    assert a == b


def test_successive_colors_differ():
    colors = RandomColor(seed=11)
    assert len({colors.hex_string() for _ in range(5)}) == 5
