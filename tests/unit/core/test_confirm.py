"""Unit tests for confirmation prompts."""

from unittest.mock import patch

import pytest
from winstrap.core.confirm import always, is_affirmative, prompt_confirmer


class TestIsAffirmative:
    """Tests for is_affirmative."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", " Yes "])
    def test_yes(self, answer: str) -> None:
        """y and yes in any case mean yes."""
        assert is_affirmative(answer)

    @pytest.mark.parametrize("answer", ["", "n", "no", "yep", "1", "sure"])
    def test_anything_else_is_no(self, answer: str) -> None:
        """Everything else means no."""
        assert not is_affirmative(answer)


class TestPromptConfirmer:
    """Tests for the interactive confirmer."""

    def test_prompts_with_default_no(self) -> None:
        """The question is shown with a [y/N] hint."""
        with patch("winstrap.core.confirm.typer.prompt", return_value="yes") as mock_prompt:
            assert prompt_confirmer("Install Git (Git.Git)?")

        mock_prompt.assert_called_once_with(
            "Install Git (Git.Git)? [y/N]", default="", show_default=False
        )

    def test_empty_answer_is_no(self) -> None:
        """Pressing enter declines."""
        with patch("winstrap.core.confirm.typer.prompt", return_value=""):
            assert not prompt_confirmer("Continue?")


class TestAlways:
    """Tests for always()."""

    def test_fixed_answers(self) -> None:
        """always() returns the same answer for every question."""
        assert always(True)("anything")
        assert not always(False)("anything")
