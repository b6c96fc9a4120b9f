#!/usr/bin/env python3
"""
Command line interface for the local URL shortener.

CLI usage:
    $ localshortener shorten https://example.com/a https://example.com/b --validity 60
    $ localshortener shorten https://example.com/a --shortcode my-link
    $ localshortener open my-link --source newsletter --location Berlin
    $ localshortener open my-link --browser
    $ localshortener stats
    $ localshortener logs --clear

Behavior:
    - Configuration comes from config/<APP_ENV>.yaml plus environment overrides
      (see localshortener.utils.config).
    - Every command prints a JSON response on stdout; JSON log lines go to stderr.
    - Exit status is 0 on success and 1 on error.
"""

import argparse
import json
import sys
import webbrowser

from localshortener.constants import Defaults
from localshortener.types import CommandResponse
from localshortener.commands.context import CommandContext
from localshortener.commands.responses import SUCCESS, response_error
from localshortener.commands.shorten_url import app as shorten_url
from localshortener.commands.redirect_url import app as redirect_url
from localshortener.commands.statistics import app as statistics
from localshortener.commands.logs import app as logs
from localshortener.exceptions import LocalShortenerError
from localshortener.utils.config import load_config
from localshortener.utils.logging import initialize_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='localshortener',
        description='Shorten URLs, resolve short codes and inspect click statistics in a local record store',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    shorten = subparsers.add_parser('shorten', help=f'Shorten up to {Defaults.MAX_BATCH_SIZE} URLs')
    shorten.add_argument('urls', nargs='+', metavar='URL', help='Absolute URL to shorten')
    shorten.add_argument(
        '--validity',
        default=None,
        help=f'Minutes until the short URLs expire (default: {Defaults.VALIDITY_MINUTES})',
    )
    shorten.add_argument(
        '--shortcode',
        action='append',
        default=[],
        help='Custom shortcode, repeat once per URL in the same order (default: generated)',
    )

    open_ = subparsers.add_parser('open', help='Resolve a shortcode and record a click')
    open_.add_argument('shortcode', help='Shortcode to resolve')
    open_.add_argument('--source', default=Defaults.CLICK_SOURCE, help=f'Click source (default: {Defaults.CLICK_SOURCE})')
    open_.add_argument('--location', default=Defaults.CLICK_LOCATION, help=f'Click location (default: {Defaults.CLICK_LOCATION})')
    open_.add_argument('--browser', action='store_true', help='Open the original URL in the default web browser')

    subparsers.add_parser('stats', help='Show every short URL with its click statistics')

    logs_ = subparsers.add_parser('logs', help='Show log entries kept in the record store')
    logs_.add_argument('--clear', action='store_true', help='Delete the stored log entries')

    return parser


def dispatch(args: argparse.Namespace, context: CommandContext) -> CommandResponse:
    if args.command == 'shorten':
        if len(args.shortcode) > len(args.urls):
            return response_error('more --shortcode values than URLs', 'TOO_MANY_SHORTCODES')
        shortcodes = args.shortcode + [None] * (len(args.urls) - len(args.shortcode))
        request = {
            'urls': [
                {'original_url': url, 'validity': args.validity, 'shortcode': shortcode}
                for url, shortcode in zip(args.urls, shortcodes, strict=True)
            ]
        }
        return shorten_url.handler(request, context)

    if args.command == 'open':
        response = redirect_url.handler({'shortcode': args.shortcode, 'source': args.source, 'location': args.location}, context)
        if args.browser and response['status'] == SUCCESS:
            webbrowser.open(response['location'])
        return response

    if args.command == 'stats':
        return statistics.handler({}, context)

    return logs.handler({'clear': args.clear}, context)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Steps:
        - Parse CLI arguments
        - Load configuration and build the record store
        - Initialize logging (mirrored into the record store)
        - Run the command and print its JSON response
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        context = CommandContext.from_config(config)
    except LocalShortenerError as e:
        response = response_error(str(e), e.error_code)
    else:
        initialize_logging(config['logging']['level'], log_dao=context.logs)
        response = dispatch(args, context)

    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write('\n')
    return 0 if response['status'] == SUCCESS else 1


if __name__ == '__main__':
    raise SystemExit(main())
