"""Configuration file management for the notes RPC CLI."""

import os
from pathlib import Path
from typing import Any

import click
import tomllib


def get_config_dir() -> Path:
    """Get the configuration directory."""
    if config_home := os.getenv("XDG_CONFIG_HOME"):
        return Path(config_home) / "notes-rpc"
    return Path.home() / ".config" / "notes-rpc"


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / "config.toml"


def load_config() -> dict[str, Any]:
    """Load configuration from file, or an empty dict if there is none."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def create_default_config():
    """Create a default configuration file."""
    config_file = get_config_file()
    config_dir = config_file.parent

    config_dir.mkdir(parents=True, exist_ok=True)

    default_config = """# Notes RPC Configuration
# Environment variables (NOTES_RPC_URL, NOTES_RPC_TIMEOUT) and command-line
# flags take precedence over the values below.

[rpc]
# Base URL of the JSON-RPC server
url = "http://127.0.0.1:3030"

# Seconds to wait for a response; leave unset to wait indefinitely
# timeout = 30
"""

    if not config_file.exists():
        with open(config_file, "w") as f:
            f.write(default_config)
        click.echo(f"Created default configuration at: {config_file}")
    else:
        click.echo(f"Configuration file already exists at: {config_file}")
