import argparse
import json
import logging
import os
import sys

from core.config_loader import AppConfig, load_config
from core.exceptions import NicheScoutError
from core.llm.openai_service import OpenAINicheService
from core.niches.normalizer import normalize_niches
from core.scorer.presets import FilterController, WeightSelector
from core.scorer.service import rank_niches
from export.exporters import to_csv, to_flat_csv, to_json, write_export

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_raw_niches(input_path: str) -> list:
    """Read raw candidate records from a JSON file (array or {"niches": [...]})."""
    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('niches', [])
    return data


def rank_batch(config: AppConfig, raws, goal: str, filter_preset: str) -> list:
    weights = WeightSelector(goal or config.scoring.default_goal).weights
    filters = FilterController(filter_preset or config.scoring.default_filter_preset).filters
    niches = normalize_niches(raws)
    logger.info(f"Ranking {len(niches)} candidates")
    return rank_niches(niches, filters, weights, trend_scale=config.scoring.trend_scale)


def print_ranking(ranked: list, top: int) -> None:
    if not ranked:
        print("No niches match the current filters.")
        return
    shown = ranked[:top] if top else ranked
    print(f"{'#':>3}  {'Score':>5}  {'Price':>8}  {'D':>2}  {'C':>2}  {'Trend':>6}  Niche")
    for i, scored in enumerate(shown, start=1):
        n = scored.niche
        print(f"{i:>3}  {scored.score:>5}  {n.average_price:>8.0f}  {n.demand:>2}  "
              f"{n.competition:>2}  {n.trend:>6.2f}  {n.name}")


def export_ranking(ranked: list, args) -> None:
    exports = [
        (args.export_csv, to_csv),
        (args.export_flat_csv, to_flat_csv),
        (args.export_json, to_json),
    ]
    for path, render in exports:
        if path:
            write_export(render(ranked), path)


def run_scan(config: AppConfig, args) -> list:
    raws = OpenAINicheService(config.llm).fetch_raw_niches(args.count)
    return rank_batch(config, raws, args.goal, args.filter_preset)


def run_rank(config: AppConfig, args) -> list:
    raws = load_raw_niches(args.input)
    return rank_batch(config, raws, args.goal, args.filter_preset)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NicheScout - score and rank freelance service niches")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest='command', required=True)

    ranking_options = argparse.ArgumentParser(add_help=False)
    ranking_options.add_argument('--goal', type=str, default=None,
                                 help='Weight preset: balanced, quick-start, high-ticket, trend-hunter, ai-hybrid')
    ranking_options.add_argument('--filter-preset', type=str, default=None,
                                 help='Filter preset: all, high-growth, low-entry, premium')
    ranking_options.add_argument('--top', type=int, default=0, help='Only print the top N niches')
    ranking_options.add_argument('--export-csv', type=str, default=None, help='Write the summary CSV here')
    ranking_options.add_argument('--export-flat-csv', type=str, default=None, help='Write the full CSV here')
    ranking_options.add_argument('--export-json', type=str, default=None, help='Write the JSON export here')

    scan = subparsers.add_parser('scan', parents=[ranking_options], help='Run an AI market scan and rank it')
    scan.add_argument('--count', type=int, default=None, help='Number of niches to request')

    rank = subparsers.add_parser('rank', parents=[ranking_options], help='Rank raw niches from a JSON file')
    rank.add_argument('--input', type=str, required=True, help='JSON file of raw niche records')

    subparsers.add_parser('serve', help='Run the web dashboard API')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == 'serve':
        os.environ.setdefault('NICHESCOUT_CONFIG', args.config)
        from web.backend.app import main as serve
        serve()
        return 0

    config = load_config(args.config)
    try:
        ranked = run_scan(config, args) if args.command == 'scan' else run_rank(config, args)
    except (NicheScoutError, OSError, json.JSONDecodeError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print_ranking(ranked, args.top)
    export_ranking(ranked, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
