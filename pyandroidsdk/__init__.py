# SPDX-License-Identifier: MIT
"""
pyandroidsdk
============

A thin, import-ready façade that exposes the Android SDK locator
(`AndroidSdk`, `Environment`), its error types, and the version helpers at
package level.

Usage
-----
>>> from pyandroidsdk import AndroidSdk
>>> AndroidSdk.from_environment().latest_build_tool_path("zipalign")  # doctest: +SKIP
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Re-export public API
# ---------------------------------------------------------------------------
from .sdk import (
    ANDROID_HOME,
    ANDROID_SDK_ROOT,
    AndroidSdk,
    AndroidSdkError,
    BuildToolsNotFound,
    CmdlineToolsNotFound,
    Environment,
    SdkLocationNotConfigured,
    SdkRootNotFound,
    ToolNotFound,
    resolve_sdk_root,
)
from android_sdk_utils._android_sdk_utils import compare_versions, parse_version

__all__: list[str] = [
    # configuration
    "ANDROID_HOME",
    "ANDROID_SDK_ROOT",
    "Environment",
    "resolve_sdk_root",
    # model
    "AndroidSdk",
    # version helpers
    "parse_version",
    "compare_versions",
    # exceptions
    "AndroidSdkError",
    "SdkLocationNotConfigured",
    "SdkRootNotFound",
    "BuildToolsNotFound",
    "ToolNotFound",
    "CmdlineToolsNotFound",
]

# ---------------------------------------------------------------------------
# Optional: version & logging niceties
# ---------------------------------------------------------------------------
try:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__: str = version(__name__)
    except PackageNotFoundError:  # running from a checkout
        __version__ = "0.0.0.dev0"
except Exception:  # pragma: no cover
    __version__ = "0.0.0.dev0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
