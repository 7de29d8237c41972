"""Tests for assets module."""

import pytest
from flatwiki.assets import get_templates_dir


class TestGetTemplatesDir:
    """Tests for get_templates_dir()."""

    def test__bundled_templates_exist__returns_path(self) -> None:
        """Bundled templates directory should be accessible."""
        templates_dir = get_templates_dir()

        assert (templates_dir / "layout.html").exists()
        assert (templates_dir / "view.tpl").exists()
        assert (templates_dir / "edit.tpl").exists()

    def test__templates_not_directory__raises_file_not_found_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should raise FileNotFoundError when templates directory doesn't exist."""

        class FakeTraversable:
            def is_dir(self) -> bool:
                return False

            def joinpath(self, name: str) -> "FakeTraversable":
                return self

        monkeypatch.setattr("flatwiki.assets.files", lambda _: FakeTraversable())

        with pytest.raises(FileNotFoundError, match="Bundled templates not found"):
            get_templates_dir()
