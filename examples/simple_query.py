#!/usr/bin/env python3
"""
Simple Query Demo

Connects to a server and prints its details, players and the first rules.
"""

import logging
import sys

from pya2s import A2SClient, A2SError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    address = sys.argv[1] if len(sys.argv) > 1 else "127.0.0.1:27015"

    with A2SClient(timeout=5.0) as client:
        try:
            client.connect(address)
            info = client.get_info()
        except (A2SError, ValueError) as e:
            print(f"Error getting info: {e}")
            return 1

        print(f"Server: {info.name}")
        print(f"Map: {info.map}")
        print(f"Players: {info.players}/{info.max_players}")
        print(f"Version: {info.version}")

        features = client.check_features()

        if features.players:
            try:
                players = client.get_players()
            except A2SError as e:
                print(f"Error getting players: {e}")
            else:
                print(f"\nPlayers online: {len(players)}")
                for player in players:
                    print(f"  {player.name} (Score: {player.score})")

        if features.rules:
            try:
                rules = client.get_rules()
            except A2SError as e:
                print(f"Error getting rules: {e}")
            else:
                print(f"\nServer rules: {len(rules)}")
                for rule in rules[:5]:
                    print(f"  {rule.name} = {rule.value}")
                if len(rules) > 5:
                    print(f"  ... and {len(rules) - 5} more")

    return 0


if __name__ == "__main__":
    sys.exit(main())
