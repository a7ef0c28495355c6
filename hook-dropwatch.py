# PyInstaller hook for dropwatch
# This ensures all necessary modules are included

hiddenimports = [
    # Click dependencies
    'click',
    'click.core',
    'click.decorators',
    'click.exceptions',
    'click.types',
    'click.utils',
    'click.termui',
    
    # Colorama
    'colorama',
    'colorama.ansi',
    'colorama.ansitowin32',
    'colorama.initialise',
    'colorama.win32',
    'colorama.winterm',
    
    # Watchdog (polling observer only)
    'watchdog',
    'watchdog.observers',
    'watchdog.observers.api',
    'watchdog.observers.polling',
    'watchdog.events',
    'watchdog.utils',
    'watchdog.utils.dirsnapshot',
    
    # TOML
    'tomli',
]

# Ensure the default TOML config is included
datas = [
    ('src/dropwatch/default.config.toml', 'dropwatch/'),
]
