#!/usr/bin/env python
# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import os
import subprocess

from pathlib import Path

from setuptools import find_packages, setup

ROOT_DIR = Path(__file__).parent.resolve()
VERSION_FILE = ROOT_DIR / "fallibleiter" / "version.py"


def _git_sha(cwd=ROOT_DIR):
    try:
        return subprocess.check_output(["git", "rev-parse", "HEAD"], cwd=str(cwd)).decode("ascii").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _resolve_version(base_version, sha):
    """BUILD_VERSION wins, otherwise the base version gets a local ``+<sha>`` suffix
    when built from a git checkout."""
    override = os.getenv("BUILD_VERSION")
    if override:
        return override
    if sha is None:
        return base_version
    return f"{base_version}+{sha[:7]}"


def _write_version_file(version, sha, path=VERSION_FILE):
    # Generated at build time, not tracked
    Path(path).write_text(f"__version__ = {version!r}\ngit_version = {sha or 'Unknown'!r}\n")


test_requirements = [
    "pytest",
    "parameterized",
]


if __name__ == "__main__":
    SHA = _git_sha()
    VERSION = _resolve_version((ROOT_DIR / "version.txt").read_text().strip(), SHA)
    _write_version_file(VERSION, SHA)

    print("-- Building version " + VERSION)

    setup(
        # Metadata
        name="fallibleiter",
        version=VERSION,
        description="Iterators whose producer may fail, with the error inspectable after iteration",
        license="BSD",
        install_requires=[],
        extras_require={"test": test_requirements},
        python_requires=">=3.8",
        classifiers=[
            "Intended Audience :: Developers",
            "License :: OSI Approved :: BSD License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: Implementation :: CPython",
        ],
        # Package Info
        packages=find_packages(exclude=["test*"]),
        zip_safe=False,
    )
