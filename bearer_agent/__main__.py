"""Command line entry point for checking an agent setup."""

import argparse
import json
import sys
from typing import List, Optional

import httpx
import yaml

from .config.loader import ConfigLoader
from .config.models import AgentConfig
from .config.settings import Settings
from .errors import BearerError
from .transport import BearerTransport
from .utils.logger import setup_logger


def load_config(config_path: Optional[str]) -> AgentConfig:
    """Load settings from a YAML file when given, else from the environment."""
    if config_path:
        return ConfigLoader.load_from_file(config_path)
    return Settings.load()


def run_config(transport: BearerTransport) -> int:
    """Print the remote configuration as JSON."""
    try:
        remote_config = transport.config()
    except BearerError as e:
        transport.logger.error(f"Failed to fetch remote config: {e}")
        return 1

    print(json.dumps(remote_config.model_dump(), indent=2, sort_keys=True))
    return 0


def run_check(transport: BearerTransport, url: str) -> int:
    """Send one GET through the reporting transport and print its status."""
    with httpx.Client(transport=transport) as client:
        try:
            response = client.get(url)
        except httpx.HTTPError as e:
            transport.logger.error(f"Request to {url} failed: {e}")
            return 1

    print(response.status_code)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        int: Process exit code
    """
    parser = argparse.ArgumentParser(
        prog='python -m bearer_agent',
        description='Bearer agent diagnostics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the remote configuration for BEARER_SECRET_KEY
  python -m bearer_agent config

  # Send one reported request
  python -m bearer_agent check https://api.example.com/sample

  # Use a settings file
  python -m bearer_agent --config bearer.yaml config
        """
    )

    parser.add_argument(
        '--config',
        default=None,
        help='Path to YAML settings file (default: environment variables)'
    )

    parser.add_argument(
        '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: log_level setting)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('config', help='Fetch and print the remote configuration')
    check_parser = subparsers.add_parser('check', help='GET a URL through the agent')
    check_parser.add_argument('url', help='URL to request')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 1

    logger = setup_logger("bearer_agent", args.log_level or config.log_level)
    if not config.reporting_enabled:
        logger.warning("No secret key configured, reporting is disabled")

    transport = BearerTransport.from_config(config, logger=logger)

    if args.command == 'config':
        try:
            return run_config(transport)
        finally:
            transport.close()

    return run_check(transport, args.url)


if __name__ == '__main__':
    sys.exit(main())
