"""
Setup script for study-planner.

Study Planner is a terminal tool that splits a daily study budget across
subjects by difficulty, importance and recent performance:

1. Proportional scheduling - weight-based hours with a per-subject floor
2. Adaptive rebalancing - boost weak subjects, trim mastered ones
3. Plain CSV plans - easy to inspect, edit and version

The 'planner' command is the primary entry point.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="study-planner",
    version="1.0.0",
    description="Adaptive daily study-time allocator for the terminal",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "planner=src.cli.planner:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="study planner schedule cli education",
)
