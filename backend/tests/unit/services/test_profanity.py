"""Unit tests for the banned-word filter."""

from __future__ import annotations

import pytest

from chirpy.services.chirps import clean_profanity


def test_literal_case() -> None:
    body = "I really need a kerfuffle with sharbert to go to bed sooner, Fornax !"

    assert clean_profanity(body) == "I really need a **** with **** to go to bed sooner, **** !"


@pytest.mark.parametrize("word", ["KERFUFFLE", "Sharbert", "fOrNaX"])
def test_matching_ignores_case(word) -> None:
    assert clean_profanity(f"oh {word} no") == "oh **** no"


def test_mask_width_is_fixed() -> None:
    assert clean_profanity("kerfuffle") == "****"
    assert len(clean_profanity("kerfuffle")) != len("kerfuffle")


def test_clean_text_is_untouched() -> None:
    body = "Nothing to see here, Kerf."
    assert clean_profanity(body) == body
