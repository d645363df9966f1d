"""
Command line interface for the IPMA client.
"""

import argparse
import asyncio
import json
import sys
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from tabulate import tabulate

from ipmaclient.config.logging import setup_logging
from ipmaclient.config.settings import load_settings
from ipmaclient.exceptions import ConfigError, IPMAError
from ipmaclient.models.results import LocationFetchOptions
from ipmaclient.services.ipma_service import IPMAService
from ipmaclient.utils.logging_utils import get_logger


CommandHandler = Callable[[IPMAService, argparse.Namespace], Awaitable[Any]]


async def _initialize(service: IPMAService, args: argparse.Namespace) -> Any:
    return [await service.initialize()]

async def _locations(service: IPMAService, args: argparse.Namespace) -> Any:
    return await service.get_locations()

async def _forecast(service: IPMAService, args: argparse.Namespace) -> Any:
    options = LocationFetchOptions(district_id=args.district, island_id=args.island)
    return await service.get_forecast(options)

async def _current(service: IPMAService, args: argparse.Namespace) -> Any:
    return await service.get_current_weather()

async def _weather_types(service: IPMAService, args: argparse.Namespace) -> Any:
    return await service.get_weather_types()

async def _wind_speeds(service: IPMAService, args: argparse.Namespace) -> Any:
    return await service.get_wind_speed_classes()

COMMANDS: dict[str, tuple[str, CommandHandler]] = {
    'init': ('Load reference data and show record counts', _initialize),
    'locations': ('List districts and islands', _locations),
    'forecast': ('Show daily forecast for a district or island', _forecast),
    'current': ('Show current observations for mainland stations', _current),
    'weather-types': ('List weather type descriptions', _weather_types),
    'wind-speeds': ('List wind speed class descriptions', _wind_speeds),
}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='ipmaclient',
        description='Query the IPMA open-data weather API'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', help='Path to YAML configuration file')
    parser.add_argument('--log-file', help='Write logs to this file')
    parser.add_argument(
        '--format',
        choices=['table', 'json'],
        default='table',
        help='Output format (default: table)'
    )

    subparsers = parser.add_subparsers(dest='command')
    for name, (help_text, _) in COMMANDS.items():
        subparser = subparsers.add_parser(name, help=help_text)
        if name == 'forecast':
            target = subparser.add_mutually_exclusive_group(required=True)
            target.add_argument('--district', type=int, help='Public district identifier')
            target.add_argument('--island', type=int, help='Public island identifier')

    return parser

def format_results(results: Sequence[Any], output_format: str) -> str:
    """Render result objects as a table or JSON."""
    rows = [result.to_dict() for result in results]
    if output_format == 'json':
        return json.dumps(rows, indent=2, ensure_ascii=False)
    if not rows:
        return "No results"
    return tabulate(rows, headers="keys", tablefmt="psql")

async def run_command(args: argparse.Namespace, service: IPMAService) -> Sequence[Any]:
    """Run the selected command and close the service afterwards."""
    _, handler = COMMANDS[args.command]
    async with service:
        return await handler(service, args)

def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = get_logger(__name__)
    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        setup_logging(verbose=args.verbose, log_file=args.log_file)
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(settings, verbose=args.verbose, log_file=args.log_file)

    try:
        results = asyncio.run(run_command(args, IPMAService(settings=settings)))
    except IPMAError as e:
        logger.error(str(e))
        return 1

    print(format_results(results, args.format))
    return 0

if __name__ == '__main__':
    sys.exit(main())
