"""
Functional tests for the docfix build plugin: apply it to a temporary
project and run the registered task.
"""

import logging

import pytest

from docfix import __version__
from docfix.errors import InvalidEncodingError
from docfix.plugin import (
    IMPLEMENTATION_CLASS,
    PLUGIN_ID,
    PUBLICATION,
    DocFixPlugin,
    DocFixTask,
    Project,
)

EXAMPLE = "src/main/java/com/example/Example.java"


@pytest.fixture
def plugin_logs(caplog):
    caplog.set_level(logging.INFO, logger="docfix")
    return caplog


class TestPluginApplies:
    """The plugin registers and runs the docfix task."""

    def test_registers_task(self, java_project):
        """Test that applying the plugin registers the task."""
        project = Project(java_project)
        task = DocFixPlugin().apply(project)

        assert project.get_task("docfix") is task
        assert task.group == "documentation"
        assert task.description == "Fixes Javadoc comments to conform to Oracle Javadoc guidelines"
        assert task.encoding == "UTF-8"
        assert task.dryrun is False
        assert task.source_directory == java_project / "src" / "main" / "java"

    def test_fixes_sources(self, java_project, plugin_logs):
        """Test that the task fixes project sources."""
        project = Project(java_project)
        DocFixPlugin().apply(project)

        report = project.get_task("docfix").run()

        fixed = (java_project / EXAMPLE).read_text(encoding="utf-8")
        assert "Example class." in fixed
        assert "@param value the value" in fixed
        assert report.files_changed == 1
        assert "DocFix completed successfully" in plugin_logs.text

    def test_dry_run(self, java_project, plugin_logs):
        """Test that a dry run leaves sources unchanged."""
        original = (java_project / EXAMPLE).read_text(encoding="utf-8")
        project = Project(java_project)
        task = DocFixPlugin().apply(project)
        task.dryrun = True

        report = task.run()

        assert (java_project / EXAMPLE).read_text(encoding="utf-8") == original
        assert "dry-run mode" in plugin_logs.text
        assert "DocFix completed successfully" not in plugin_logs.text
        assert report.changes[0].relative_path.endswith("Example.java")

    def test_registering_twice_fails(self, java_project):
        """Test that applying the plugin twice fails."""
        project = Project(java_project)
        DocFixPlugin().apply(project)
        with pytest.raises(ValueError):
            DocFixPlugin().apply(project)


class TestSourceDirectory:
    """How the task finds its source directory."""

    def test_first_existing_configured_directory(self, java_project):
        """Test that the first existing source directory is used."""
        (java_project / "alt").mkdir()
        project = Project(java_project, java_source_dirs=["missing", "alt", "src/main/java"])

        task = DocFixPlugin().apply(project)

        assert task.source_directory == java_project / "alt"

    def test_falls_back_to_convention(self, tmp_path):
        """Test falling back to src/main/java."""
        task = DocFixPlugin().apply(Project(tmp_path, java_source_dirs=["missing"]))
        assert task.source_directory == tmp_path / "src" / "main" / "java"

    def test_missing_directory_warns(self, tmp_path, plugin_logs):
        """Test that a missing source directory logs a warning."""
        task = DocFixPlugin().apply(Project(tmp_path))

        assert task.run() is None
        assert "Source directory does not exist" in plugin_logs.text

    def test_file_instead_of_directory_warns(self, tmp_path, plugin_logs):
        """Test that a file given as the source directory logs a warning."""
        source = tmp_path / "Example.java"
        source.write_text("class Example {}\n", encoding="utf-8")
        task = DocFixTask(Project(tmp_path), source_directory=source)

        assert task.run() is None
        assert "Source directory is not a directory" in plugin_logs.text


class TestEncoding:
    """Tests for the task's encoding property."""

    def test_invalid_encoding(self, java_project):
        """Test that an unknown encoding raises InvalidEncodingError."""
        task = DocFixPlugin().apply(Project(java_project))
        task.encoding = "no-such-charset"

        with pytest.raises(InvalidEncodingError, match="Invalid encoding: no-such-charset"):
            task.run()

    def test_latin1_sources(self, tmp_path):
        """Test fixing ISO-8859-1 sources."""
        src = tmp_path / "src" / "main" / "java"
        src.mkdir(parents=True)
        (src / "A.java").write_bytes(b"/** caf\xe9 */\nclass A {}\n")
        task = DocFixPlugin().apply(Project(tmp_path))
        task.encoding = "ISO-8859-1"

        task.run()

        assert (src / "A.java").read_bytes() == b"/** Caf\xe9. */\nclass A {}\n"


class TestPublication:
    """The registration record and publishing descriptor."""

    def test_registration(self):
        """Test the plugin id and implementation class."""
        assert PLUGIN_ID == "com.elharo.docfix"
        assert IMPLEMENTATION_CLASS == "docfix.plugin:DocFixPlugin"

    def test_descriptor(self):
        """Test the publishing descriptor."""
        data = PUBLICATION.as_dict()
        assert data["groupId"] == "com.elharo.docfix"
        assert data["artifactId"] == "docfix-gradle-plugin"
        assert data["pluginId"] == "com.elharo.docfix"
        assert data["licenses"] == [
            {"name": "GPL v3", "url": "https://www.gnu.org/licenses/gpl-3.0.en.html"}
        ]
        assert data["url"] == "https://github.com/elharo/docfix"
        assert data["scm"]["url"] == "https://github.com/elharo/docfix/tree/master"
        assert data["developers"][0]["id"] == "elharo"

    def test_core_dependency_in_lockstep(self):
        """Test that the core dependency version matches the plugin."""
        assert PUBLICATION.version == __version__
        assert PUBLICATION.dependency_coordinate() == f"com.elharo.docfix:docfix:{__version__}"

    def test_entry_point_resolves(self):
        """Test that the implementation class can be imported."""
        module_name, _, attr = IMPLEMENTATION_CLASS.partition(":")
        module = __import__(module_name, fromlist=[attr])
        assert getattr(module, attr) is DocFixPlugin
