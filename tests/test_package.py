"""
Tests for top-level package metadata.
"""

import collage_toolkit


class TestPackageMetadata:
    """Tests for the collage_toolkit package attributes."""

    def test_version_when_imported_then_non_empty_string(self):
        assert isinstance(collage_toolkit.__version__, str)
        assert collage_toolkit.__version__

    def test_copyright_when_imported_then_names_project(self):
        assert collage_toolkit.__copyright__.startswith("Copyright")
        assert "collage_toolkit" in collage_toolkit.__copyright__
