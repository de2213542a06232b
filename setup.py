from setuptools import find_packages, setup

setup(
    name="dotinstall",
    version="0.1.0",
    description="Link dotfiles into place and append shell-init snippets",
    packages=find_packages(include=["dotinstall", "dotinstall.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.16",  # CLI framework
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "dotinstall=dotinstall.cli:main",
        ],
    },
)
