"""Tests for the yes/no prompt."""

from typing import List

import pytest

from pico8_launcher.utils.prompt import choose_yes_or_no


def answer(reply: str, asked: List[str]):
    def fake_input(prompt: str) -> str:
        asked.append(prompt)
        return reply

    return fake_input


class TestChooseYesOrNo:
    """Test choose_yes_or_no."""

    @pytest.mark.parametrize("reply", ["y", "Y", "ye", "YES", "yes", " y "])
    def test_yes_prefixes(self, reply: str) -> None:
        """Test prefixes of "yes" in any case are accepted."""
        assert choose_yes_or_no("Go?", answer(reply, [])) is True

    @pytest.mark.parametrize("reply", ["", "n", "no", "yess", "yep", "es"])
    def test_everything_else_is_no(self, reply: str) -> None:
        """Test any other reply counts as no."""
        assert choose_yes_or_no("Go?", answer(reply, [])) is False

    def test_prompt_text(self) -> None:
        """Test the question is followed by the [Y/N] marker."""
        asked: List[str] = []
        choose_yes_or_no("Do you wish to proceed?", answer("n", asked))
        assert asked == ["Do you wish to proceed? [Y/N] > "]

    def test_end_of_input_is_no(self) -> None:
        """Test closed input counts as no."""
        def closed(prompt: str) -> str:
            raise EOFError

        assert choose_yes_or_no("Go?", closed) is False
