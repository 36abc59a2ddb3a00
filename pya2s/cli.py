"""
Command line query tool

Usage:
    pya2s-query 127.0.0.1:27015
    python -m pya2s 127.0.0.1:27015 --timeout 2 --rules 10
"""

import argparse
import logging
import sys
from typing import List, Optional

from .client import A2SClient
from .config import ClientConfig, ConfigValidationError
from .exceptions import A2SError
from .models import ServerInfo
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pya2s-query",
        description="Query a Source/GoldSource game server over A2S")
    parser.add_argument("address", help="Server address as host:port")
    parser.add_argument("-t", "--timeout", type=float, default=5.0,
                        help="Per-request timeout in seconds (default: 5)")
    parser.add_argument("-r", "--rules", type=int, default=5, metavar="N",
                        help="Number of rules to print (default: 5)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--dump-packets", action="store_true",
                        help="Log raw datagrams (implies --verbose)")
    return parser


def print_info(info: ServerInfo):
    print(f"Server: {info.name}")
    print(f"Map: {info.map}")
    print(f"Game: {info.game} ({info.folder})")
    print(f"Players: {info.players}/{info.max_players} ({info.bots} bots)")
    print(f"Type: {info.server_type_name} on {info.environment_name}")
    print(f"VAC: {'yes' if info.vac_enabled else 'no'}, "
          f"Password: {'yes' if info.password_protected else 'no'}")
    if info.version:
        print(f"Version: {info.version}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    verbose = args.verbose or args.dump_packets
    config = ClientConfig(timeout=args.timeout, log_packets=args.dump_packets,
                          log_level="DEBUG" if verbose else "WARNING")
    configure_logging(config.log_level)

    try:
        client = A2SClient(config=config)
        client.connect(args.address)
    except (ConfigValidationError, A2SError) as e:
        logger.error(f"Connection error: {e}")
        return 1

    with client:
        try:
            info = client.get_info()
        except A2SError as e:
            logger.error(f"Error getting info: {e}")
            return 1
        print_info(info)

        features = client.check_features()

        if features.players:
            try:
                players = client.get_players()
            except A2SError as e:
                logger.error(f"Error getting players: {e}")
            else:
                print(f"\nPlayers online: {len(players)}")
                for player in players:
                    print(f"  {player.name} (Score: {player.score})")

        if features.rules:
            try:
                rules = client.get_rules()
            except A2SError as e:
                logger.error(f"Error getting rules: {e}")
            else:
                print(f"\nServer rules: {len(rules)}")
                for rule in rules[:args.rules]:
                    print(f"  {rule.name} = {rule.value}")
                if len(rules) > args.rules:
                    print(f"  ... and {len(rules) - args.rules} more")

    return 0


if __name__ == "__main__":
    sys.exit(main())
