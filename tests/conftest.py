"""
Shared fixtures for the docfix test suite.
"""

import shutil
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_docfix_env(monkeypatch):
    """Keep DOCFIX_* variables from the developer's shell out of the tests."""
    for name in (
        "DOCFIX_ENCODING",
        "DOCFIX_DRYRUN",
        "DOCFIX_MAX_DEPTH",
        "DOCFIX_EXCLUDED_PATTERNS",
        "DOCFIX_SOURCE_DIRECTORY",
        "DOCFIX_NO_RICH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def complex_number_source():
    """Source of the ComplexNumber sample, read with its line endings intact."""
    path = FIXTURES_DIR / "com" / "example" / "ComplexNumber.java"
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def java_project(tmp_path):
    """
    A minimal Java project:

        src/main/java/com/example/Example.java   needs fixing
        src/main/java/com/example/Clean.java     already fine
    """
    src = tmp_path / "src" / "main" / "java" / "com" / "example"
    src.mkdir(parents=True)
    (src / "Example.java").write_text(
        "package com.example;\n"
        "\n"
        "/**\n"
        " * example class\n"
        " */\n"
        "public class Example {\n"
        "    /**\n"
        "     * @param value The value\n"
        "     */\n"
        "    public void setValue(int value) {}\n"
        "}\n",
        encoding="utf-8",
    )
    (src / "Clean.java").write_text(
        "package com.example;\n"
        "\n"
        "/** A class that needs nothing. */\n"
        "public class Clean {\n"
        "}\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def sample_tree(tmp_path, fixtures_dir):
    """A copy of the ComplexNumber sample inside a temporary source tree."""
    target = tmp_path / "src" / "com" / "example"
    target.mkdir(parents=True)
    shutil.copy(fixtures_dir / "com" / "example" / "ComplexNumber.java", target)
    return tmp_path


@pytest.fixture
def complex_number_fixed():
    """What ComplexNumber.java looks like after fixing."""
    path = FIXTURES_DIR / "com" / "example" / "ComplexNumber.java.fixed"
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()
