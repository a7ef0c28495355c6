"""
Read command for DropWatch CLI
"""

from typing import Optional

import click
from colorama import Fore, Style

from dropwatch.core.errors import DropWatchError, DeleteError
from dropwatch.core.watcher import FileWatcher, WatchTarget
from dropwatch.cli.utils import resolve_drop_config, handle_cli_exception
from dropwatch.utils.logging_utils import setup_logger


@click.command()
@click.argument('directory', type=click.Path(file_okay=False), required=False)
@click.option('--file', '-f', 'file_name',
              help='Name of the drop file to ingest')
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML or JSON)')
@click.option('--encoding', help='Text encoding of the drop file (e.g. utf-8, cp1250)')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
def read_command(directory: Optional[str], file_name: Optional[str], config: Optional[str],
                 encoding: Optional[str], verbose: bool):
    """Ingest the drop file once: print its contents and delete it.
    
    DIRECTORY: Directory containing the drop file (defaults to the configured one)
    """
    try:
        config_obj = resolve_drop_config(directory, config, verbose,
                                         file_name=file_name, encoding=encoding)
    except DropWatchError as e:
        handle_cli_exception(e, verbose)
        return
    
    info = config_obj.file_info
    if not info.file_name:
        click.echo(f"{Fore.RED}Error: No drop file name given. Use --file or set file_name in the config.{Style.RESET_ALL}")
        raise SystemExit(1)
    
    setup_logger('dropwatch', 'debug' if verbose else 'warning')
    
    target = WatchTarget(info.directory_path, info.file_name)
    watcher = FileWatcher(config_obj)
    watcher.stream.subscribe(click.echo)
    
    try:
        payload = watcher.ingest(target.full_path)
    except DeleteError as e:
        click.echo(f"{Fore.YELLOW}Warning: contents were read but the file was not deleted: {e}{Style.RESET_ALL}")
        raise SystemExit(1)
    except DropWatchError as e:
        handle_cli_exception(e, verbose)
        return
    
    if payload is None:
        click.echo(f"{Fore.YELLOW}No drop file found at {target.full_path}{Style.RESET_ALL}")
