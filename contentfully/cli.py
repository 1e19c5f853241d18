"""CLI for contentfully."""

import argparse
import asyncio
import sys

from contentfully.client import ClientConfig, ClientConfigError, ContentfulClient, ContentfulRequestError
from contentfully.logger import configure_logging
from contentfully.output.json_dumper import JSONDumper
from contentfully.service import Contentfully


def build_query(args: argparse.Namespace) -> dict:
    """Translate `models` arguments into Delivery API query parameters."""
    query: dict = {}
    if args.content_type:
        query['content_type'] = args.content_type
    if args.select:
        query['select'] = args.select
    if args.locale:
        query['locale'] = args.locale
    if args.limit is not None:
        query['limit'] = args.limit
    if args.skip is not None:
        query['skip'] = args.skip
    for expr in args.where or []:
        key, sep, value = expr.partition('=')
        if not sep or not key:
            raise ValueError(f"Invalid --where expression: {expr!r} (expected key=value)")
        query[key] = value
    return query


async def run(args: argparse.Namespace, service: Contentfully):
    if args.command == 'model':
        return await service.get_model(args.id)
    return await service.get_models(build_query(args))


def main(argv: list[str] | None = None, client: ContentfulClient | None = None) -> int:
    parser = argparse.ArgumentParser(prog='contentfully', description='Resolve Contentful entries into linked models')
    parser.add_argument('--log-level', help='Log level (default: $CONTENTFULLY_LOG_LEVEL or WARNING)')
    parser.add_argument('--output', '-o', help='Write JSON to this file instead of stdout')
    parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    subparsers = parser.add_subparsers(dest='command')

    # model command
    model_parser = subparsers.add_parser('model', help='Resolve a single entry by id')
    model_parser.add_argument('id', help='Entry id')

    # models command
    models_parser = subparsers.add_parser('models', help='Resolve a set of entries')
    models_parser.add_argument('--content-type', help='Restrict to one content type id')
    models_parser.add_argument('--select', help='Comma-separated fields to select')
    models_parser.add_argument('--locale', help="Locale code, or '*' for every locale")
    models_parser.add_argument('--limit', type=int, help='Page size')
    models_parser.add_argument('--skip', type=int, help='Page offset')
    models_parser.add_argument('--where', action='append', help='Extra query parameter as key=value (repeatable)')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    owns_client = client is None
    try:
        if owns_client:
            client = ContentfulClient(ClientConfig.from_env())
        result = asyncio.run(run(args, Contentfully(client)))
    except (ClientConfigError, ContentfulRequestError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if owns_client and client is not None:
            client.close()

    if args.command == 'model' and result is None:
        print(f"Error: entry {args.id} not found", file=sys.stderr)
        return 1

    dumper = JSONDumper(pretty=not args.no_pretty)
    if args.output:
        dumper.write_file(result, args.output)
        print(f"Output: {args.output}")
    else:
        dumper.write(result, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
