from __future__ import annotations

import pytest

from app.domain.services.pool_tag_rules import is_valid_text, text_rejection_reason, truncate_text


@pytest.mark.parametrize("text", ["", "   ", "<script>x</script>", None])
def test_is_valid_text_rejects_empty_and_markup(text):
    assert is_valid_text(text) is False


@pytest.mark.parametrize("text", ["USDC", "Wrapped Ether", "a > b", "1 < 2"])
def test_is_valid_text_accepts_plain_text(text):
    assert is_valid_text(text) is True


def test_text_rejection_reason_distinguishes_empty_from_markup():
    assert text_rejection_reason("  \t") == "empty"
    assert text_rejection_reason("Token <b>bold</b>") == "markup"
    assert text_rejection_reason("WETH") is None


def test_truncate_text_bounds_long_text_with_ellipsis():
    text = "A" * 50

    truncated = truncate_text(text)

    assert len(truncated) == 45
    assert truncated == "A" * 42 + "..."


def test_truncate_text_keeps_short_and_boundary_text():
    assert truncate_text("0123456789") == "0123456789"
    assert truncate_text("B" * 45) == "B" * 45
