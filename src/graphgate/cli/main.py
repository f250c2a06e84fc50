#!/usr/bin/env python3
"""
Graphgate CLI - Main entry point.

Usage:
    graphgate init                     # Write default graphgate.yaml
    graphgate check                    # Import schema and show its root types
    graphgate serve                    # Run the GraphQL server
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from graphql import GraphQLSchema

from ..core.errors import GraphgateError
from ..core.options import GraphQLOptions, OptionsSource
from .config import DEFAULT_CONFIG_PATH, GraphgateConfig, import_string, load_config

logger = logging.getLogger(__name__)


def build_options(config: GraphgateConfig) -> OptionsSource:
    """
    Build GraphQL options from config.

    A callable context becomes a per-request options factory receiving the
    FastAPI Request; anything else is used as a static context value.
    """
    schema = import_string(config.schema)
    if not isinstance(schema, GraphQLSchema):
        raise GraphgateError(f"'{config.schema}' is not a GraphQLSchema")

    context = import_string(config.context) if config.context else None

    if callable(context):
        def options_factory(request) -> GraphQLOptions:
            return GraphQLOptions(
                schema=schema,
                context=context(request),
                debug=config.debug,
                tracing=config.tracing,
            )
        return options_factory

    return GraphQLOptions(
        schema=schema,
        context=context,
        debug=config.debug,
        tracing=config.tracing,
    )


def _load(args: argparse.Namespace) -> GraphgateConfig | None:
    config = load_config(args.config)
    if not config or not config.schema:
        print("Error: no schema configured. Run 'graphgate init' or set GRAPHGATE_SCHEMA.")
        return None
    return config


def cmd_init(args: argparse.Namespace) -> int:
    """Write a default graphgate.yaml."""
    config_path = Path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    GraphgateConfig(schema=args.schema).save(config_path)
    print(f"Created {config_path}")
    print("Next steps:")
    print("  graphgate check   # Verify the schema imports")
    print("  graphgate serve   # Run the server")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Import the configured schema and print its operation types."""
    config = _load(args)
    if not config:
        return 1

    try:
        build_options(config)
    except GraphgateError as e:
        print(f"Error: {e}")
        return 1

    schema = import_string(config.schema)
    print(f"Schema: {config.schema}")
    for kind, root in (
        ("query", schema.query_type),
        ("mutation", schema.mutation_type),
        ("subscription", schema.subscription_type),
    ):
        print(f"  {kind}: {root.name if root else '-'}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the GraphQL server with uvicorn."""
    import uvicorn

    from ..gateway import Gateway

    config = _load(args)
    if not config:
        return 1

    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        options = build_options(config)
    except GraphgateError as e:
        logger.error(f"Could not load schema: {e}")
        return 1

    gateway = Gateway(
        options,
        path=config.server.path,
        cors_origins=config.server.cors_origins or None,
    )
    logger.info(f"Serving on http://{config.server.host}:{config.server.port}{config.server.path}")
    uvicorn.run(gateway.app, host=config.server.host, port=config.server.port)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphgate",
        description="Graphgate - GraphQL over HTTP with batching"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config file path")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write default config")
    init_parser.add_argument("--schema", default="app.schema:schema", help="Schema import path")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # check
    subparsers.add_parser("check", help="Import schema and show root types")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the GraphQL server")
    serve_parser.add_argument("--host", help="Bind host")
    serve_parser.add_argument("--port", "-p", type=int, help="Bind port")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "check": cmd_check,
        "serve": cmd_serve,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
