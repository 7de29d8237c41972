"""Tests for title validation and path matching."""

import pytest
from flatwiki.core.errors import InvalidTitleError
from flatwiki.core.titles import TitleMatcher


class TestIsValid:
    """Tests for TitleMatcher.is_valid()."""

    @pytest.mark.parametrize("title", ["a", "FrontPage", "page2", "2024", "ABCxyz09"])
    def test__alphanumeric__is_valid(self, title: str) -> None:
        assert TitleMatcher().is_valid(title)

    @pytest.mark.parametrize(
        "title",
        ["", "two words", "a/b", "a.md", "..", "café", "under_score", "dash-ed", "x\n"],
    )
    def test__other_characters__are_invalid(self, title: str) -> None:
        assert not TitleMatcher().is_valid(title)


class TestValidate:
    """Tests for TitleMatcher.validate()."""

    def test__valid_title__returned_unchanged(self) -> None:
        assert TitleMatcher().validate("Notes") == "Notes"

    def test__invalid_title__raises(self) -> None:
        with pytest.raises(InvalidTitleError) as exc_info:
            TitleMatcher().validate("../etc")

        assert exc_info.value.value == "../etc"
        assert isinstance(exc_info.value, ValueError)


class TestMatchPath:
    """Tests for TitleMatcher.match_path()."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/view/FrontPage", ("view", "FrontPage")),
            ("/edit/Notes", ("edit", "Notes")),
            ("/save/Notes", ("save", "Notes")),
            ("/view/Notes/", ("view", "Notes")),
        ],
    )
    def test__routed_path__returns_action_and_title(
        self, path: str, expected: tuple[str, str]
    ) -> None:
        assert TitleMatcher().match_path(path) == expected

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/view/",
            "/view",
            "/view/../etc",
            "/view/a/b",
            "/view/a.md",
            "/view/Notes//",
            "/delete/Notes",
            "view/Notes",
            "/VIEW/Notes",
        ],
    )
    def test__malformed_path__raises(self, path: str) -> None:
        with pytest.raises(InvalidTitleError):
            TitleMatcher().match_path(path)

    def test__custom_actions__restrict_paths(self) -> None:
        matcher = TitleMatcher(actions=("view",))

        assert matcher.match_path("/view/Notes") == ("view", "Notes")
        with pytest.raises(InvalidTitleError):
            matcher.match_path("/edit/Notes")
