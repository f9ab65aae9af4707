"""
CLI for Arknights game data.

Usage:
    python -m ak_data [options]
"""
import argparse
import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .common.language_codes import Region, parse_region
from .config import Options
from .errors import GameDataError
from .game_data import GameData
from .models.item import Item
from .models.operator import Operator

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(verbose: bool, log_file: Path | None) -> None:
    """콘솔(stderr) + 선택적 파일 로깅 (RotatingFileHandler)"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    root = logging.getLogger()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=2,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(logging.INFO)
        root.addHandler(handler)
        root.setLevel(min(level, logging.INFO))


def _region_arg(value: str) -> Region:
    try:
        return parse_region(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def print_operator(operator: Operator) -> None:
    print(f"{operator.name} ({operator.id})")
    print(f"  Rarity:     {'*' * operator.rarity}")
    print(f"  Profession: {operator.profession.name.title()} / {operator.sub_profession}")
    print(f"  Position:   {operator.position.name.title()}")
    if operator.nation_id:
        print(f"  Nation:     {operator.nation_id}")
    if operator.skills:
        print("  Skills:")
        for slot in operator.skill_slots:
            skill = operator.skills[slot.skill_id]
            print(f"    - {skill.name} [{skill.id}] (unlock {slot.condition})")
    if operator.base_skills:
        print("  Base skills:")
        for unlock in operator.base_skills:
            print(f"    - {unlock.name} [{unlock.room_type}] (unlock {unlock.condition})")
    max_promotion = operator.max_promotion
    promotion = operator.get_promotion(max_promotion)
    if promotion is not None:
        attributes = operator.get_attributes(max_promotion.with_level(promotion.max_level))
        if attributes is not None:
            print(
                f"  Max stats:  E{int(max_promotion)} Lv.{promotion.max_level} "
                f"HP {attributes.max_hp} / ATK {attributes.atk} / DEF {attributes.defense}"
            )
    if operator.alternate_ids:
        print(f"  Alternates: {', '.join(operator.alternate_ids)}")
    if operator.handbook is not None and operator.handbook.illustrator:
        print(f"  Illustrator: {operator.handbook.illustrator}")


def print_item(item: Item) -> None:
    print(f"{item.name} ({item.id})")
    print(f"  Rarity: {item.rarity + 1}")
    print(f"  Class:  {item.item_class.name.title()} / {item.item_type}")
    if item.description:
        print(f"  Description: {item.description}")
    if item.usage:
        print(f"  Usage: {item.usage}")


async def _load(args) -> GameData:
    if args.local is not None:
        return await GameData.from_local(args.local)
    options = Options.load(args.config) if args.config else Options()
    if args.region is not None:
        options = options.model_copy(update={"region": args.region})
    return await GameData.from_remote(options)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ak_data",
        description="Load Arknights game data tables and look up operators or items",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ak_data --local ./ArknightsGameData/en_US/gamedata --operator Kroos
  python -m ak_data --region ko_KR --item "Orirock"
  python -m ak_data --config options.json
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--local",
        type=Path,
        default=None,
        help="Local gamedata directory containing excel/*.json",
    )
    source.add_argument(
        "--region", "-r",
        type=_region_arg,
        default=None,
        help="Remote region (en_US, ja_JP, ko_KR, zh_CN, zh_TW; default: en_US)",
    )

    parser.add_argument("--operator", "-o", type=str, default=None, help="Operator name to look up")
    parser.add_argument("--item", "-i", type=str, default=None, help="Item name to look up")
    parser.add_argument("--config", "-c", type=Path, default=None, help="Options JSON file for remote loading")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to a rotating file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose, args.log_file)

    if args.local is not None and not args.local.exists():
        print(f"Error: Local directory not found: {args.local}")
        return 1

    try:
        game_data = asyncio.run(_load(args))
    except GameDataError as e:
        print(f"Error: {e}")
        return 1
    except (ValidationError, ValueError) as e:
        print(f"Error: Invalid options: {e}")
        return 1

    exit_code = 0
    if args.operator is None and args.item is None:
        print("=" * 60)
        print("Arknights Game Data")
        print("=" * 60)
        print(f"  Operators:   {len(game_data.operators)}")
        print(f"  Items:       {len(game_data.items)}")
        print(f"  Skills:      {len(game_data.skills)}")
        print(f"  Base skills: {len(game_data.base_skills)}")
        print(f"  Buildings:   {len(game_data.buildings)}")
        if game_data.last_updated is not None:
            print(f"  Updated:     {game_data.last_updated.isoformat()}")
        print("=" * 60)

    if args.operator is not None:
        operator = game_data.find_operator(args.operator)
        if operator is None:
            print(f"Operator not found: {args.operator}")
            exit_code = 1
        else:
            print_operator(operator)

    if args.item is not None:
        item = game_data.find_item(args.item)
        if item is None:
            print(f"Item not found: {args.item}")
            exit_code = 1
        else:
            print_item(item)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
