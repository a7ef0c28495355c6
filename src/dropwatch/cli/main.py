#!/usr/bin/env python3
"""
DropWatch CLI - Main entry point
"""

import click
from colorama import init

from dropwatch.cli.commands.watch import watch_command, watch_alias
from dropwatch.cli.commands.read import read_command
from dropwatch.cli.commands.init_config import init_config_command
from dropwatch.cli.commands.status import status_command

# Initialize colorama for cross-platform colored output
init()


@click.group()
@click.version_option(package_name='dropwatch')
def main():
    """DropWatch - Ingest a single drop file as soon as it appears.
    
    Common workflows:
    
      # Create a config file, then watch the configured drop file
      dropwatch init-config
      dropwatch watch
      
      # Watch an inbox directory for orders.txt
      dropwatch watch ./inbox --file orders.txt
      
      # Ingest the drop file once and exit
      dropwatch read ./inbox --file orders.txt
      
      # Check whether a drop file is waiting
      dropwatch status
    
    Use 'dropwatch COMMAND --help' for detailed help on any command.
    """
    pass


main.add_command(watch_command, name='watch')
main.add_command(read_command, name='read')
main.add_command(init_config_command, name='init-config')
main.add_command(status_command, name='status')

main.add_command(watch_alias, name='w')


if __name__ == '__main__':
    main()
