"""
Status command for DropWatch CLI
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style

from dropwatch.core.errors import DropWatchError
from dropwatch.core.watcher import WatchTarget
from dropwatch.cli.utils import find_default_config, resolve_drop_config, handle_cli_exception


@click.command()
@click.argument('directory', type=click.Path(), required=False)
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML or JSON)')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed information')
def status_command(directory: Optional[str], config: Optional[str], verbose: bool):
    """Show the configuration in effect and whether a drop file is waiting.
    
    DIRECTORY: Directory to check (defaults to the configured one)
    """
    search_dir = Path(directory or '.').resolve()
    config_found = Path(config) if config else find_default_config(search_dir)
    
    try:
        config_obj = resolve_drop_config(directory, config, verbose)
    except DropWatchError as e:
        handle_cli_exception(e, verbose)
        return
    
    info = config_obj.file_info
    target = WatchTarget(info.directory_path, info.file_name)
    
    click.echo(f"{Fore.GREEN}DropWatch Status for: {Path(info.directory_path).resolve()}{Style.RESET_ALL}\n")
    
    if config_found:
        click.echo(f"{Fore.GREEN}✓{Style.RESET_ALL} Configuration: {config_found.name}")
    else:
        click.echo(f"{Fore.YELLOW}○{Style.RESET_ALL} Configuration: Using defaults (no config file found)")
    
    if verbose:
        click.echo(f"    Encoding: {config_obj.encoding}")
        click.echo(f"    Polling interval: {config_obj.polling_interval}s")
        click.echo(f"    Read on start: {info.read_on_start}")
    
    if not Path(info.directory_path).is_dir():
        click.echo(f"{Fore.RED}✗{Style.RESET_ALL} Directory not found: {info.directory_path}")
        return
    
    drop_file = Path(target.full_path)
    if drop_file.is_file():
        stat = drop_file.stat()
        modified = datetime.fromtimestamp(stat.st_mtime)
        click.echo(f"{Fore.GREEN}✓{Style.RESET_ALL} Drop file waiting: {drop_file.name} "
                   f"({stat.st_size} bytes, modified {modified.strftime('%Y-%m-%d %H:%M:%S')})")
    else:
        click.echo(f"{Fore.YELLOW}○{Style.RESET_ALL} No drop file present ({target.file_name or 'not configured'})")
