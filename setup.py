from setuptools import find_packages, setup

setup(
    name="wlc",
    version="0.3.0",
    description="Wiki Link Cleaner - broken link, orphan and empty note maintenance for Obsidian vaults",
    author="William Wieselquist",
    packages=find_packages(include=["wlc", "wlc.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for vault reports
        "PyYAML",  # YAML output
        "pygments",  # Highlighted structured output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "wlc=wlc.cli:main",
        ],
    },
)
