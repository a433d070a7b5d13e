from setuptools import find_packages, setup

setup(
    name="skicka-deploy",
    version="0.1.0",
    description="Build the skicka file-transfer tool and run it as a systemd service",
    packages=find_packages(include=["skicka_deploy", "skicka_deploy.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2",  # Configuration schema
        "typer<0.26",  # CLI (0.26+ vendors its own click; code uses click directly)
        "click>=8.2",  # CLI exceptions and context (typer backend)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "jinja2",  # Unit file and start script templates
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "pre-commit",  # Git hook management
        ],
    },
    entry_points={
        "console_scripts": [
            "skicka-deploy=skicka_deploy.cli:main",
        ],
    },
)
