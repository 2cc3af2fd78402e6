"""Setup configuration for github_stats"""

from setuptools import setup, find_packages

setup(
    name="github-personal-stats",
    version="0.1.0",
    description=(
        "CLI tool for personal GitHub contribution stats: merged PRs, lines "
        "changed and PRs reviewed within an organization."
    ),
    author="GitHub Personal Stats Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
            "types-requests",
            "types-python-dateutil",
        ],
    },
    entry_points={
        "console_scripts": [
            "github-personal-stats=github_stats.main:main",
        ],
    },
)
