# main.py
import sys
import math
import asyncio
import argparse
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from .constants import *
from .errors import ScraperError
from .report import assemble, ensure_writable, write_report
from .scraper import GraphicsErrorScraper

logger = logging.getLogger(__name__)

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # exit status 2 is reserved for an existing output file
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")

def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='graphics-error-scraper',
        description='Collect graphics errors reported against geographic tree nodes',
        add_help=False,
    )
    parser.add_argument('-u', '--url', help='Target URL (required)')
    parser.add_argument('-U', '--username', help='Username (required)')
    parser.add_argument('-p', '--password', help='Password (required)')
    parser.add_argument('-o', '--output', nargs='?', const=DEFAULT_OUTPUT, default=DEFAULT_OUTPUT, help=f'Output file (default: {DEFAULT_OUTPUT}, use {STDOUT_SENTINEL} for stdout)')
    parser.add_argument('-f', '--force', action='store_true', help='Overwrite output file if it exists')
    parser.add_argument('-i', '--ignoressl', action='store_true', help='Ignore SSL certificate errors')
    parser.add_argument('-t', '--timeout', nargs='?', help=f'Timeout for page actions in milliseconds (default: {DEFAULT_TIMEOUT_MS})')
    parser.add_argument('-h', '--headless', nargs='?', help='Headless mode (true/false, default: true)')
    parser.add_argument('-v', '--verbose', nargs='?', const='true', help='Verbose logging (flag or "true")')
    parser.add_argument('--version', action='store_true', help='Print version and exit')
    parser.add_argument('--help', action='help', help='Show this help message and exit')
    return parser

def parse_timeout(value: Optional[str]) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT_MS
    if math.isnan(timeout):
        return DEFAULT_TIMEOUT_MS
    return int(timeout) if timeout.is_integer() else timeout

def parse_headless(value: Optional[str]) -> bool:
    return True if value is None else value.lower() == 'true'

def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        'target_url': args.url,
        'username': args.username,
        'password': args.password,
        'output': args.output,
        'force': args.force,
        'headless': parse_headless(args.headless),
        'ignore_ssl': args.ignoressl,
        'timeout_ms': parse_timeout(args.timeout),
        'verbose': args.verbose is not None,
    }

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)-5s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

async def scrape(config: Dict[str, Any]) -> None:
    ensure_writable(config['output'], config['force'])
    async with GraphicsErrorScraper(config) as scraper:
        reports = await scraper.run()
        write_report(assemble(reports), config['output'], config['force'])
        await scraper.logout()

async def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if args.version or argv == ['-v']:
        print(VERSION)
        return EXIT_OK
    if not (args.url and args.username and args.password):
        parser.print_help(sys.stderr)
        return EXIT_FAILURE

    config = build_config(args)
    configure_logging(config['verbose'])
    if unknown:
        logger.debug(f"Ignoring unknown arguments: {unknown}")

    started = datetime.now()
    logger.info(f"Started: {started:%Y-%m-%d %H:%M:%S}")
    try:
        await scrape(config)
    except ScraperError as e:
        logger.error(str(e))
        return e.exit_code
    except Exception as e:
        logger.error(f"Scrape failed: {e}")
        return EXIT_FAILURE

    ended = datetime.now()
    logger.info(f"Ended: {ended:%Y-%m-%d %H:%M:%S}")
    logger.info(f"Completed in {(ended - started).total_seconds() / 60:.2f} minutes.")
    return EXIT_OK

def cli():
    sys.exit(asyncio.run(main()))

if __name__ == '__main__':
    cli()
