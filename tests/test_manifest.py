"""Unit tests for the plugin manifest model and its PHP serialization."""

from pathlib import Path

import pytest

from pico_installer.models import (
    InvalidManifestError,
    Manifest,
    ManifestEntry,
    load_manifest,
    parse_manifest,
    render_manifest,
    save_manifest,
)

EXPECTED_MANIFEST = """<?php

// pico-plugin.php @generated by picocms/composer-installer

return array(
    'vendor/my-plugin' => array(
        'installerName' => 'MyPlugin',
        'classNames' => array(
            'MyPlugin',
            'MyPluginHelper',
        ),
    ),
    'acme/pico-markdown-plugin' => array(
        'installerName' => 'PicoMarkdown',
    ),
);
"""


@pytest.fixture
def manifest() -> Manifest:
    """Return a manifest with two plugins, one without class names."""
    return Manifest(
        entries={
            "vendor/my-plugin": ManifestEntry(
                installer_name="MyPlugin",
                class_names=["MyPlugin", "MyPluginHelper"],
            ),
            "acme/pico-markdown-plugin": ManifestEntry(installer_name="PicoMarkdown"),
        }
    )


class TestRenderManifest:
    """Tests for render_manifest."""

    def test_renders_fixed_format(self, manifest: Manifest) -> None:
        """Test the exact file format, in entry order."""
        assert render_manifest(manifest) == EXPECTED_MANIFEST

    def test_header_records_filename(self, manifest: Manifest) -> None:
        """Test that the header names the target file."""
        content = render_manifest(manifest, "plugins.php")

        assert "// plugins.php @generated by picocms/composer-installer\n" in content

    def test_empty_manifest(self) -> None:
        """Test rendering a manifest without plugins."""
        content = render_manifest(Manifest())

        assert content.endswith("return array(\n\n);\n")

    def test_accepts_non_ascii_class_names(self) -> None:
        """Test that non-ASCII characters are valid in class names."""
        manifest = Manifest(entries={"vendor/umlaut": ManifestEntry(installer_name="Umlaut", class_names=["Ümlaut"])})

        assert "'Ümlaut'," in render_manifest(manifest)

    @pytest.mark.parametrize(
        "package_name",
        ["Vendor/my-plugin", "my-plugin", "vendor/my plugin", "vendor/my-plugin/extra", "vendor/"],
    )
    def test_rejects_invalid_package_names(self, package_name: str) -> None:
        """Test that package names must be lowercase vendor/name pairs."""
        manifest = Manifest(entries={package_name: ManifestEntry(installer_name="MyPlugin")})

        with pytest.raises(InvalidManifestError, match="package name") as exc_info:
            render_manifest(manifest)

        assert exc_info.value.value == package_name

    @pytest.mark.parametrize("installer_name", ["", "My Plugin", "My/Plugin", "My'Plugin"])
    def test_rejects_invalid_installer_names(self, installer_name: str) -> None:
        """Test that installer names must be alphanumeric."""
        manifest = Manifest(entries={"vendor/my-plugin": ManifestEntry(installer_name=installer_name)})

        with pytest.raises(InvalidManifestError, match="installer name"):
            render_manifest(manifest)

    @pytest.mark.parametrize("class_name", ["1Plugin", "My-Plugin", "My\\Plugin", "", "MyPlugin\n"])
    def test_rejects_invalid_class_names(self, class_name: str) -> None:
        """Test that class names must be valid PHP class names."""
        manifest = Manifest(
            entries={"vendor/my-plugin": ManifestEntry(installer_name="MyPlugin", class_names=[class_name])}
        )

        with pytest.raises(InvalidManifestError, match="no valid PHP class name"):
            render_manifest(manifest)

    @pytest.mark.parametrize("class_name", [None, True, 42])
    def test_rejects_non_string_class_names(self, class_name: object) -> None:
        """Test that class names are never stringified into valid ones."""
        manifest = Manifest(
            entries={"vendor/my-plugin": ManifestEntry(installer_name="MyPlugin", class_names=[class_name])}
        )

        with pytest.raises(InvalidManifestError, match="must be a string"):
            render_manifest(manifest)

    def test_underscore_class_names(self) -> None:
        """Test that class names may start with an underscore."""
        manifest = Manifest(
            entries={"vendor/my-plugin": ManifestEntry(installer_name="my_plugin.v2", class_names=["_My2"])}
        )

        assert "'_My2'," in render_manifest(manifest)


class TestParseManifest:
    """Tests for parse_manifest."""

    def test_round_trip(self, manifest: Manifest) -> None:
        """Test that a rendered manifest parses back field for field."""
        parsed = parse_manifest(render_manifest(manifest))

        assert parsed == manifest
        assert list(parsed.entries) == ["vendor/my-plugin", "acme/pico-markdown-plugin"]
        assert parsed.entries["acme/pico-markdown-plugin"].class_names == []

    def test_round_trip_empty(self) -> None:
        """Test that an empty manifest parses back."""
        assert parse_manifest(render_manifest(Manifest())) == Manifest()

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "return array();",
            "<?php\n\necho 'hello';\n",
            "<?php return array('vendor/a' => 'A');",
            "<?php return array('A', 'B');",
            "<?php return array('vendor/a' => array('classNames' => array()));",
            "<?php return array(",
        ],
    )
    def test_rejects_malformed_content(self, content: str) -> None:
        """Test that files other than manifests are rejected."""
        with pytest.raises(InvalidManifestError):
            parse_manifest(content)

    def test_rejects_keyed_class_names(self) -> None:
        """Test that a keyed classNames array is reported as a malformed manifest."""
        content = "<?php return array('vendor/a' => array('installerName' => 'A', 'classNames' => array('x' => 'A')));"

        with pytest.raises(InvalidManifestError, match="vendor/a") as exc_info:
            parse_manifest(content)

        assert exc_info.value.value == "vendor/a"


class TestLoadSaveManifest:
    """Tests for load_manifest and save_manifest."""

    def test_load_returns_none_for_nonexistent(self, tmp_path: Path) -> None:
        """Test loading a nonexistent file returns None."""
        assert load_manifest(tmp_path / "pico-plugin.php") is None

    def test_save_load_round_trip(self, tmp_path: Path, manifest: Manifest) -> None:
        """Test that save_manifest and load_manifest are inverse operations."""
        path = tmp_path / "pico-plugin.php"

        save_manifest(manifest, path)

        assert path.read_text(encoding="utf-8") == EXPECTED_MANIFEST
        assert load_manifest(path) == manifest

    def test_save_replaces_file(self, tmp_path: Path, manifest: Manifest) -> None:
        """Test that saving replaces previous contents completely."""
        path = tmp_path / "pico-plugin.php"
        path.write_text("<?php\n\n// stale\n" * 100)

        save_manifest(manifest, path)

        assert path.read_text(encoding="utf-8") == EXPECTED_MANIFEST

    def test_invalid_manifest_leaves_file_untouched(self, tmp_path: Path, manifest: Manifest) -> None:
        """Test that a failed save doesn't modify the existing file."""
        path = tmp_path / "pico-plugin.php"
        save_manifest(manifest, path)

        invalid = Manifest(
            entries={
                **manifest.entries,
                "vendor/broken": ManifestEntry(installer_name="Broken", class_names=["1Broken"]),
            }
        )

        with pytest.raises(InvalidManifestError):
            save_manifest(invalid, path)

        assert path.read_text(encoding="utf-8") == EXPECTED_MANIFEST

    def test_save_uses_file_name_in_header(self, tmp_path: Path, manifest: Manifest) -> None:
        """Test that the header records the actual file name."""
        path = tmp_path / "plugins.php"

        save_manifest(manifest, path)

        assert "// plugins.php @generated by" in path.read_text(encoding="utf-8")
