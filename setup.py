from __future__ import annotations

import os
from pathlib import Path

from setuptools import setup


BASE_DIR = Path(__file__).resolve().parent


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "0.1.0"


setup(
    name="mex-tracker",
    version=read_version(),
    description="Minimum excludant (mex) tracking under insertions and removals.",
    long_description=(BASE_DIR / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=["mex_tracker"],
    python_requires=">=3.8",
    install_requires=[
        "sortedcontainers",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
