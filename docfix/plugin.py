"""
Build plugin for docfix.

A host build tool instantiates ``DocFixPlugin`` by reference
(``IMPLEMENTATION_CLASS``) and calls ``apply(project)``, which registers a
``docfix`` task. The module also carries the publishing descriptor of the
plugin artifact, which is released in lockstep with the core package.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from . import __version__
from .api import FixReport, fix_directory
from .errors import InvalidEncodingError
from .javadoc import resolve_encoding

logger = logging.getLogger(__name__)

PLUGIN_ID = "com.elharo.docfix"
IMPLEMENTATION_CLASS = "docfix.plugin:DocFixPlugin"
DISPLAY_NAME = "DocFix Gradle Plugin"
DESCRIPTION = "Gradle plugin that fixes Javadoc comments to conform to Oracle Javadoc guidelines"

TASK_NAME = "docfix"
TASK_GROUP = "documentation"
TASK_DESCRIPTION = "Fixes Javadoc comments to conform to Oracle Javadoc guidelines"
DEFAULT_SOURCE_DIRECTORY = "src/main/java"
DEFAULT_ENCODING = "UTF-8"


@dataclass(frozen=True)
class Developer:
    id: str = "elharo"
    name: str = "Elliotte Rusty Harold"
    email: str = "elharo@ibiblio.org"
    url: str = "https://www.elharo.com"
    timezone: str = "America/New_York"


@dataclass(frozen=True)
class PublicationMetadata:
    """Publishing descriptor of the plugin artifact."""

    group_id: str = "com.elharo.docfix"
    artifact_id: str = "docfix-gradle-plugin"
    version: str = __version__
    plugin_id: str = PLUGIN_ID
    name: str = DISPLAY_NAME
    description: str = "Gradle plugin that fixes Javadoc comments to fit Oracle guidelines"
    url: str = "https://github.com/elharo/docfix"
    license_name: str = "GPL v3"
    license_url: str = "https://www.gnu.org/licenses/gpl-3.0.en.html"
    developers: tuple = (Developer(),)
    scm_connection: str = "scm:git:git://github.com/elharo/docfix.git"
    scm_developer_connection: str = "scm:git:ssh://github.com:elharo/docfix.git"
    scm_url: str = "https://github.com/elharo/docfix/tree/master"
    core_group_id: str = "com.elharo.docfix"
    core_artifact_id: str = "docfix"

    def dependency_coordinate(self) -> str:
        """The core artifact, pinned to this plugin's own version."""
        return f"{self.core_group_id}:{self.core_artifact_id}:{self.version}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "pluginId": self.plugin_id,
            "implementationClass": IMPLEMENTATION_CLASS,
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "licenses": [{"name": self.license_name, "url": self.license_url}],
            "developers": [asdict(developer) for developer in self.developers],
            "scm": {
                "connection": self.scm_connection,
                "developerConnection": self.scm_developer_connection,
                "url": self.scm_url,
            },
            "dependencies": [self.dependency_coordinate()],
        }


PUBLICATION = PublicationMetadata()


@dataclass
class Project:
    """
    The slice of a host build project the plugin needs: its directory, the
    Java source directories it declares, and the tasks registered on it.
    """

    project_dir: Path
    java_source_dirs: List[Path] = field(default_factory=list)
    tasks: Dict[str, "DocFixTask"] = field(default_factory=dict)

    def __post_init__(self):
        self.project_dir = Path(self.project_dir)
        self.java_source_dirs = [self._resolve(d) for d in self.java_source_dirs]

    def _resolve(self, directory: Union[str, Path]) -> Path:
        directory = Path(directory)
        return directory if directory.is_absolute() else self.project_dir / directory

    def register_task(self, task: "DocFixTask") -> "DocFixTask":
        if task.name in self.tasks:
            raise ValueError(f"Task with name '{task.name}' already exists in {self.project_dir}")
        self.tasks[task.name] = task
        return task

    def get_task(self, name: str) -> "DocFixTask":
        try:
            return self.tasks[name]
        except KeyError:
            raise KeyError(f"Task with name '{name}' not found in {self.project_dir}") from None


class DocFixTask:
    """Fixes Javadoc comments in a project's Java sources."""

    group = TASK_GROUP
    description = TASK_DESCRIPTION

    def __init__(
        self,
        project: Project,
        source_directory: Optional[Union[str, Path]] = None,
        encoding: str = DEFAULT_ENCODING,
        dryrun: bool = False,
        name: str = TASK_NAME,
    ):
        self.project = project
        self.name = name
        self.source_directory = Path(source_directory) if source_directory else None
        self.encoding = encoding
        self.dryrun = dryrun

    def run(self) -> Optional[FixReport]:
        """
        Run the task.

        Returns:
            The FixReport, or None when there is no source directory to fix

        Raises:
            InvalidEncodingError: if ``encoding`` is not a known charset
        """
        source_dir = self.source_directory
        if source_dir is None or not source_dir.exists():
            logger.warning(f"Source directory does not exist: {source_dir}")
            return None
        if not source_dir.is_dir():
            logger.warning(f"Source directory is not a directory: {source_dir}")
            return None

        try:
            charset = resolve_encoding(self.encoding)
        except InvalidEncodingError as e:
            raise InvalidEncodingError(f"Invalid encoding: {self.encoding}") from e

        if self.dryrun:
            logger.info("Running in dry-run mode. No files will be modified.")

        report = fix_directory(
            source_dir,
            dryrun=self.dryrun,
            encoding=charset,
            base_dir=self.project.project_dir,
        )

        if self.dryrun:
            for change in report.changes:
                logger.info(f"Would fix: {change.relative_path}")
        else:
            logger.info("DocFix completed successfully")
        return report

    def __repr__(self) -> str:
        return f"DocFixTask(name={self.name!r}, source_directory={self.source_directory})"


class DocFixPlugin:
    """Registers the docfix task on a project."""

    def apply(self, project: Project) -> DocFixTask:
        task = DocFixTask(project, source_directory=self.find_source_directory(project))
        logger.debug(f"Registered task '{task.name}' for {project.project_dir}")
        return project.register_task(task)

    @staticmethod
    def find_source_directory(project: Project) -> Path:
        """First existing Java source directory, else the conventional location."""
        for source_dir in project.java_source_dirs:
            if source_dir.exists():
                return source_dir
        return project.project_dir / DEFAULT_SOURCE_DIRECTORY
