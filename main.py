#!/usr/bin/env python3
"""SimpleNet command line entry point"""

import argparse
import asyncio
import json
import logging
import sys

from simplenet import HttpClient, HTTPMethod
from simplenet.utils import setup_logging


def parse_params(pairs):
    """Turn key=value arguments into a parameter map."""
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def method(text: str) -> HTTPMethod:
    """argparse type for the HTTP method argument."""
    try:
        return HTTPMethod.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{e} (choose from GET, POST)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Request a JSON document over HTTP")
    parser.add_argument("method", type=method, help="GET or POST")
    parser.add_argument("url", help="Target URL")
    parser.add_argument("-p", "--param", action="append", dest="params", metavar="KEY=VALUE",
                        help="Request parameter (repeatable)")
    parser.add_argument("-t", "--timeout", type=float, default=None, help="Total timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests")
    return parser


async def main(argv=None) -> int:
    """Run a single request and print the result"""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        params = parse_params(args.params)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    if args.verbose:
        setup_logging(logging.DEBUG)

    async with HttpClient(timeout=args.timeout) as client:
        result, error = await client.fetch_json(args.method, args.url, params or None)

    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def run():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
