"""
CLI to load social-network command files and print the resulting graph.

Reads socialgraph.yml (or --config), ingests every FILE concurrently,
then prints each user with their friends, or friend suggestions for --suggest.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence
import argparse
import logging

from config import Config, default_config, load_config
from social_network import SocialNetwork

DEFAULT_CONFIG = Path(__file__).parent / "socialgraph.yml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ingest social-network command files.")
    parser.add_argument("files", nargs="*", help="files with adduser/addfriends commands")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--workers", type=int, default=None, help="override ingestion.max_workers")
    parser.add_argument("--log-level", default=None, help="override logging.level")
    parser.add_argument("--suggest", metavar="NAME", default=None, help="print friend suggestions for NAME")
    return parser


def resolve_config(path: Optional[Path]) -> Config:
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG.exists():
        return load_config(DEFAULT_CONFIG)
    return default_config()


def render(network: SocialNetwork, suggest: Optional[str] = None) -> List[str]:
    if suggest is not None:
        return sorted(network.people_you_may_know(suggest))
    return [
        f"{user}: {', '.join(sorted(network.friends(user)))}"
        for user in sorted(network.all_users())
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_config(args.config)

    logging.basicConfig(level=(args.log_level or cfg.logging.level).upper())

    max_workers = args.workers if args.workers is not None else cfg.ingestion.max_workers
    network = SocialNetwork()
    network.read_social_network_data(args.files, max_workers=max_workers, encoding=cfg.ingestion.encoding)

    for line in render(network, args.suggest):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
