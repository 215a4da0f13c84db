#!/usr/bin/env python3

import sys
import argparse
import logging
import json
from pathlib import Path

from xp_apt.config import ReaderOptions
from xp_apt.exceptions import AptDatError
from xp_apt.sources import AptDatLoader, AptDatSource
from xp_apt.storage import DatabaseStorage

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

class Command:
    """Command-line interface for xp_apt."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.options = self._load_options()

    def _load_options(self) -> ReaderOptions:
        if self.args.options:
            options = ReaderOptions.from_file(self.args.options)
        else:
            options = ReaderOptions()

        if self.args.cache_dir:
            options.cache_dir = self.args.cache_dir
        if self.args.include:
            options.include_airports = self.args.include
        if self.args.exclude:
            options.exclude_airports = self.args.exclude
        if self.args.addon:
            options.is_addon = True
        return options

    def run_load(self):
        """Read apt.dat files or URLs into the database."""
        if not self.args.files:
            logger.error('No apt.dat files given')
            return

        source = AptDatSource(cache_dir=self.options.cache_dir, timeout=self.options.http_timeout)
        if self.args.force_refresh:
            source.set_force_refresh()
        if self.args.never_refresh:
            source.set_never_refresh()

        with DatabaseStorage(self.args.database) as storage:
            loader = AptDatLoader(storage, options=self.options, source=source)
            for path in self.args.files:
                logger.info(f'Loading {path}')
                try:
                    loader.load_file(path)
                except AptDatError as e:
                    logger.error(f'Skipping {path}: {e}')
                except Exception as e:
                    logger.error(f'Error loading {path}: {e}')
                storage.commit()

            counts = storage.get_table_counts()
            logger.info(f'Loaded {counts["airport"]} airports, {counts["runway"]} runways, '
                        f'{counts["parking"]} parkings with {loader.num_errors} errors')

    def run_summary(self):
        """Print the airports of the database."""
        if not Path(self.args.database).exists():
            logger.error(f'Database {self.args.database} does not exist')
            return

        with DatabaseStorage(self.args.database) as storage:
            df = storage.airport_summary()

        if self.args.format == 'json':
            print(json.dumps(df.to_dict(orient='records'), indent=2))
        elif self.args.format == 'csv':
            df.to_csv(sys.stdout, index=False)
        else:
            print(df.to_string(index=False))

    def run(self):
        """Run the specified command."""
        getattr(self, f'run_{self.args.command}')()

def main():
    parser = argparse.ArgumentParser(description='X-Plane apt.dat airport reader')
    parser.add_argument('command', help='Command to execute', choices=['load', 'summary'])
    parser.add_argument('files', help='List of apt.dat files or URLs', nargs='*')
    parser.add_argument('-d', '--database', help='SQLite database file', default='airports.db')
    parser.add_argument('-c', '--cache-dir', help='Directory to cache downloaded files (default: cache)')
    parser.add_argument('-o', '--options', help='JSON file with reader options')
    parser.add_argument('-i', '--include', help='Airport ident patterns to include, e.g. ED*', nargs='+')
    parser.add_argument('-x', '--exclude', help='Airport ident patterns to exclude', nargs='+')
    parser.add_argument('-a', '--addon', help='Mark airports as add-on scenery', action='store_true')
    parser.add_argument('--format', help='Output format for summary', choices=['json', 'csv', 'human'], default='human')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    parser.add_argument('-f', '--force-refresh', help='Force refresh of cached downloads', action='store_true')
    parser.add_argument('-n', '--never-refresh', help='Never refresh cached downloads if they exist', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    cmd.run()

if __name__ == '__main__':
    main()
