"""
Init-config command for DropWatch CLI
"""

import sys
from pathlib import Path

import click
from colorama import Fore, Style


DEFAULT_TOML_CONTENT = '''# DropWatch Configuration File

[dropwatch]
encoding = "utf-8"
log_level = "info"
polling_interval = 1.0

[dropwatch.file_info]
directory_path = "."
file_name = "drop.txt"
read_on_start = true
'''


@click.command()
@click.argument('config_path', type=click.Path(), default='dropwatch.config.toml')
def init_config_command(config_path: str):
    """Create a TOML configuration file. Defaults to 'dropwatch.config.toml' if no path specified."""
    
    try:
        if not config_path.endswith('.toml'):
            click.echo(f"{Fore.YELLOW}Warning: Config file should have .toml extension. Adding .toml{Style.RESET_ALL}")
            config_path = config_path + '.toml'
        
        # Get the path to the default config file in the package
        default_config_path = Path(__file__).parent.parent.parent / 'default.config.toml'
        
        if default_config_path.exists():
            toml_content = default_config_path.read_text(encoding='utf-8')
        else:
            toml_content = DEFAULT_TOML_CONTENT
        
        Path(config_path).write_text(toml_content, encoding='utf-8')
        
        click.echo(f"{Fore.GREEN}TOML configuration file created: {config_path}{Style.RESET_ALL}")
        click.echo(f"{Fore.CYAN}Edit this file to set the drop file and its directory.{Style.RESET_ALL}")
        
    except OSError as e:
        click.echo(f"{Fore.RED}Error creating config file: {e}{Style.RESET_ALL}")
        sys.exit(1)
