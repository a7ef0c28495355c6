"""
Watch command for DropWatch CLI
"""

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import click
from colorama import Fore, Style

from dropwatch.core.errors import DropWatchError
from dropwatch.core.watcher import FileWatcher
from dropwatch.cli.utils import resolve_drop_config, handle_cli_exception
from dropwatch.utils.logging_utils import setup_logger


def make_payload_writer(output_file: str, source: str) -> Callable[[str], None]:
    """Return a subscriber that appends each payload as a JSON line to output_file."""
    def write_payload(payload: str):
        record = {
            'timestamp': datetime.now().isoformat(),
            'file': source,
            'length': len(payload),
            'content': payload
        }
        with open(output_file, 'a', encoding='utf-8') as f:
            f.write(json.dumps(record) + '\n')
    
    return write_payload


def make_payload_echo(verbose: bool) -> Callable[[str], None]:
    """Return a subscriber that prints each payload to the console."""
    def echo_payload(payload: str):
        timestamp = datetime.now().isoformat()
        if verbose:
            click.echo(f"{Fore.GREEN}[{timestamp}] INGESTED ({len(payload)} chars):{Style.RESET_ALL}")
        else:
            click.echo(f"{Fore.GREEN}INGESTED:{Style.RESET_ALL}")
        click.echo(payload)
    
    return echo_payload


@click.command()
@click.argument('directory', type=click.Path(file_okay=False), required=False)
@click.option('--file', '-f', 'file_name',
              help='Name of the drop file to ingest')
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML or JSON)')
@click.option('--encoding', help='Text encoding of the drop file (e.g. utf-8, cp1250)')
@click.option('--read-on-start/--no-read-on-start', default=None,
              help='Ingest an already present drop file before watching')
@click.option('--interval', type=float,
              help='Seconds between directory polls')
@click.option('--output', '-o', type=click.Path(),
              help='Append every ingested payload as a JSON line to this file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
def watch_command(directory: Optional[str], file_name: Optional[str], config: Optional[str],
                  encoding: Optional[str], read_on_start: Optional[bool], interval: Optional[float],
                  output: Optional[str], verbose: bool):
    """Watch a directory and ingest the drop file whenever it appears or changes.
    
    DIRECTORY: Directory containing the drop file (defaults to the configured one)
    """
    try:
        config_obj = resolve_drop_config(
            directory, config, verbose,
            file_name=file_name,
            encoding=encoding,
            read_on_start=read_on_start,
            polling_interval=interval
        )
    except DropWatchError as e:
        handle_cli_exception(e, verbose)
        return
    
    info = config_obj.file_info
    if not info.file_name:
        click.echo(f"{Fore.RED}Error: No drop file name given. Use --file or set file_name in the config.{Style.RESET_ALL}")
        raise SystemExit(1)
    
    setup_logger('dropwatch', 'debug' if verbose else config_obj.log_level)
    
    click.echo(f"{Fore.GREEN}Starting DropWatch...{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Directory: {Path(info.directory_path).resolve()}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Drop file: {info.file_name}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Encoding: {config_obj.encoding}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Read on start: {info.read_on_start}{Style.RESET_ALL}")
    if output:
        click.echo(f"{Fore.CYAN}Output file: {Path(output).resolve()}{Style.RESET_ALL}")
    
    watcher = FileWatcher(config_obj)
    watcher.stream.subscribe(make_payload_echo(verbose))
    if output:
        watcher.stream.subscribe(make_payload_writer(output, info.file_name))
    
    try:
        session = watcher.start_from_config()
    except DropWatchError as e:
        handle_cli_exception(e, verbose)
        return
    
    try:
        click.echo(f"{Fore.YELLOW}Press Ctrl+C to stop watching...{Style.RESET_ALL}")
        
        # Keep the program running
        while True:
            time.sleep(1)
            
    except KeyboardInterrupt:
        click.echo(f"\n{Fore.YELLOW}Stopping DropWatch...{Style.RESET_ALL}")
        session.close()
        click.echo(f"{Fore.GREEN}DropWatch stopped.{Style.RESET_ALL}")


# Alias command
@click.command()
@click.argument('directory', type=click.Path(file_okay=False), required=False)
@click.option('--file', '-f', 'file_name',
              help='Name of the drop file to ingest')
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML or JSON)')
@click.option('--encoding', help='Text encoding of the drop file (e.g. utf-8, cp1250)')
@click.option('--read-on-start/--no-read-on-start', default=None,
              help='Ingest an already present drop file before watching')
@click.option('--interval', type=float,
              help='Seconds between directory polls')
@click.option('--output', '-o', type=click.Path(),
              help='Append every ingested payload as a JSON line to this file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.pass_context
def watch_alias(ctx, **kwargs):
    """Alias for 'watch' command."""
    ctx.invoke(watch_command, **kwargs)
