# SPDX-License-Identifier: MIT
"""
Locate an installed Android SDK and the versioned tool directories inside it.

* Root picked from ``ANDROID_HOME`` / ``ANDROID_SDK_ROOT`` through an explicit
  :class:`Environment` (no hidden ``os.environ`` reads in the lookups)
* Latest ``build-tools/<version>`` directory and the tools inside it
* Command-line tools ``bin`` directory across the legacy ``tools`` layout and
  the ``cmdline-tools`` layouts

Every lookup reads the filesystem fresh; nothing is cached.
"""
from __future__ import annotations

###############################################################################
# Standard library
###############################################################################
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Mapping, Optional

from android_sdk_utils._android_sdk_utils import latest_version_dir

###############################################################################
# Logging
###############################################################################
logger = logging.getLogger(__name__)
if not logger.handlers:
    _h = logging.StreamHandler(sys.stdout)
    _h.setFormatter(
        logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s – %(message)s")
    )
    logger.addHandler(_h)
logger.setLevel(logging.INFO)

###############################################################################
# Configuration
###############################################################################
ANDROID_HOME: Final = "ANDROID_HOME"
ANDROID_SDK_ROOT: Final = "ANDROID_SDK_ROOT"

BUILD_TOOLS_DIR: Final = "build-tools"
CMDLINE_TOOLS_DIR: Final = "cmdline-tools"


###############################################################################
# Exceptions
###############################################################################
class AndroidSdkError(RuntimeError):
    """Base class for every SDK lookup failure."""


class SdkLocationNotConfigured(AndroidSdkError):
    """Raised when neither ANDROID_HOME nor ANDROID_SDK_ROOT is set."""


class SdkRootNotFound(AndroidSdkError):
    """Raised when an explicitly given SDK root is not a directory."""


class BuildToolsNotFound(AndroidSdkError):
    """Raised when build-tools is missing or holds no version directory."""


class ToolNotFound(AndroidSdkError):
    """Raised when a named tool is absent from its resolved directory."""

    def __init__(self, tool: str, path: str) -> None:
        super().__init__(f"tool ({tool}) not found at: {path}")
        self.tool = tool
        self.path = path


class CmdlineToolsNotFound(AndroidSdkError):
    """Raised when no command-line tools layout exists under the SDK root."""


###############################################################################
# Environment
###############################################################################
@dataclass(frozen=True, slots=True)
class Environment:
    """Candidate SDK roots; an empty string means the variable is unset."""

    android_home: str = ""
    android_sdk_root: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        env = os.environ if environ is None else environ
        return cls(
            android_home=env.get(ANDROID_HOME, ""),
            android_sdk_root=env.get(ANDROID_SDK_ROOT, ""),
        )


def resolve_sdk_root(env: Environment) -> str:
    """
    Pick the SDK root: ``ANDROID_HOME`` first, then ``ANDROID_SDK_ROOT``.

    The chosen path is not checked for existence.

    Raises:
        SdkLocationNotConfigured if both values are empty.
    """
    if env.android_home:
        logger.debug("Using %s=%s", ANDROID_HOME, env.android_home)
        return env.android_home
    if env.android_sdk_root:
        logger.debug("Using %s=%s", ANDROID_SDK_ROOT, env.android_sdk_root)
        return env.android_sdk_root
    raise SdkLocationNotConfigured(
        f"no SDK location configured: neither {ANDROID_HOME} nor "
        f"{ANDROID_SDK_ROOT} environment variable is set"
    )


###############################################################################
# AndroidSdk model
###############################################################################
@dataclass(frozen=True, slots=True)
class AndroidSdk:
    """One Android SDK installation, identified by its root directory."""

    android_home: str

    # ---------------------------------------------------------------- constructors
    @classmethod
    def from_environment(cls, env: Environment | None = None) -> "AndroidSdk":
        if env is None:
            env = Environment.from_env()
        return cls(android_home=resolve_sdk_root(env))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "AndroidSdk":
        """Build a model for an explicit root, which must be an existing directory."""
        root = Path(path).expanduser().resolve()
        if not root.is_dir():
            raise SdkRootNotFound(f"android home not exists at: {root}")
        return cls(android_home=str(root))

    # ---------------------------------------------------------------- helpers
    def _root(self) -> Path:
        # every lookup starts here so "~" expands the same way for all of them
        return Path(self.android_home).expanduser()

    @staticmethod
    def _tool_path(directory: str, tool: str) -> Path:
        """Join *tool* as a plain child of *directory*; the file must exist."""
        seps = {os.sep, os.altsep} - {None}
        if (
            not tool
            or tool in {".", ".."}
            or any(s in tool for s in seps)
            or Path(tool).is_absolute()
        ):
            raise ValueError(f"Invalid tool name: {tool!r}")
        pth = Path(directory) / tool
        if not pth.is_file():
            raise ToolNotFound(tool, str(pth))
        return pth

    # ---------------------------------------------------------------- build-tools
    def latest_build_tools_dir(self) -> str:
        build_tools = self._root() / BUILD_TOOLS_DIR
        try:
            latest = latest_version_dir(build_tools)
        except OSError as exc:
            raise BuildToolsNotFound(
                f"no build-tools directory found in: {build_tools} ({exc})"
            ) from exc
        if latest is None:
            raise BuildToolsNotFound(f"no build-tools directory found in: {build_tools}")
        logger.debug("Latest build-tools: %s", latest)
        return str(latest)

    def latest_build_tool_path(self, tool: str) -> str:
        """
        Path of *tool* (e.g. ``zipalign``) inside the latest build-tools directory.

        Raises:
            ValueError if *tool* is not a plain file name.
            BuildToolsNotFound if there is no build-tools directory.
            ToolNotFound if the file is missing.
        """
        return str(self._tool_path(self.latest_build_tools_dir(), tool))

    # ---------------------------------------------------------------- cmdline-tools
    def cmdline_tools_path(self) -> str:
        """
        Return the command-line tools ``bin`` directory.

        Search order (first hit wins):
          1. <root>/tools/bin                    legacy SDK Tools
          2. <root>/cmdline-tools/latest/bin
          3. <root>/cmdline-tools/<highest version>/bin
        """
        root = self._root()
        for cand in (
            root / "tools" / "bin",
            root / CMDLINE_TOOLS_DIR / "latest" / "bin",
        ):
            logger.debug("Probing %s", cand)
            if cand.is_dir():
                return str(cand)

        try:
            versioned = latest_version_dir(root / CMDLINE_TOOLS_DIR)
        except OSError as exc:
            raise CmdlineToolsNotFound(
                f"command-line tools not found in: {root} ({exc})"
            ) from exc
        if versioned is not None:
            cand = versioned / "bin"
            logger.debug("Probing %s", cand)
            if cand.is_dir():
                return str(cand)

        raise CmdlineToolsNotFound(f"command-line tools not found in: {root}")

    def cmdline_tool_path(self, tool: str) -> str:
        """Path of *tool* (e.g. ``sdkmanager``) inside :meth:`cmdline_tools_path`."""
        return str(self._tool_path(self.cmdline_tools_path(), tool))
