"""
Utility functions for CLI commands
"""

import sys
from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style

from dropwatch.core.config import Config, load_config, load_default_config

DEFAULT_CONFIG_NAME = "dropwatch.config.toml"


def find_default_config(search_dir: Path) -> Optional[Path]:
    """Return the config file DropWatch would pick up automatically in a directory."""
    for name in (DEFAULT_CONFIG_NAME, "dropwatch.config.json"):
        candidate = search_dir / name
        if candidate.exists():
            return candidate
    return None


def load_config_with_fallback(config_file: Optional[str], search_dir: Path, verbose: bool = False) -> Config:
    """Load configuration with automatic fallback to default config file and default config."""
    config_obj = None
    
    if not config_file:
        default_config = find_default_config(search_dir)
        if default_config:
            config_file = str(default_config)
            if verbose:
                click.echo(f"{Fore.CYAN}Using default config: {config_file}{Style.RESET_ALL}")
    
    if config_file:
        config_obj = load_config(config_file)
        if not config_obj:
            click.echo(f"{Fore.RED}Error: Could not load config file: {config_file}{Style.RESET_ALL}")
            sys.exit(1)
    
    if not config_obj:
        config_obj = load_default_config()
    
    return config_obj


def handle_cli_exception(e: Exception, verbose: bool = False) -> None:
    """Handle exceptions in CLI commands consistently."""
    click.echo(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
    if verbose:
        import traceback
        traceback.print_exc()
    sys.exit(1)


def resolve_drop_config(directory: Optional[str], config_file: Optional[str],
                        verbose: bool = False, **overrides) -> Config:
    """Load configuration and apply CLI overrides on top of it.
    
    The DIRECTORY argument, when given, replaces the configured
    directory_path and is also where a default config file is looked up.
    """
    search_dir = Path(directory or '.').resolve()
    config_obj = load_config_with_fallback(config_file, search_dir, verbose)
    return config_obj.with_overrides(directory_path=directory, **overrides)
