#!/usr/bin/env python3
"""
Fetch site content from Directus and dump it as JSON
"""
import sys
import json
import asyncio
import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wheelpower.content import get_content_client
from wheelpower.utils.config_loader import load_content_config

logger = logging.getLogger(__name__)

COLLECTIONS = ["services", "tires", "mags", "gallery", "settings"]


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


async def fetch(client, names) -> Dict[str, Any]:
    readers = {
        "services": client.get_services,
        "tires": client.get_tires,
        "mags": client.get_mags,
        "gallery": client.get_gallery,
        "settings": client.get_site_settings,
    }
    results = await asyncio.gather(*(readers[name]() for name in names))
    return dict(zip(names, results))


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Fetch Wheel Power site content from Directus',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch every collection and print it
  python scripts/fetch_content.py

  # Fetch only tires, in display order
  python scripts/fetch_content.py tires

  # Snapshot all content into local mock files
  python scripts/fetch_content.py --output-dir data/content

  # Read from local mock files instead of Directus
  python scripts/fetch_content.py --mock
        """
    )

    parser.add_argument(
        'collections',
        nargs='*',
        metavar='COLLECTION',
        help=f'Collections to fetch: {", ".join(COLLECTIONS)} (default: all)'
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to content service config YAML file (default: config/content_service.yml)'
    )

    parser.add_argument(
        '--base-url',
        type=str,
        default=None,
        help='Directus base URL (overrides config)'
    )

    parser.add_argument(
        '--mock',
        action='store_true',
        help='Read from local JSON files instead of Directus'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        default=None,
        help='Write one <collection>.json file per collection into this directory'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Path to log file'
    )

    args = parser.parse_args()

    unknown = [name for name in args.collections if name not in COLLECTIONS]
    if unknown:
        parser.error(f"unknown collection(s): {', '.join(unknown)}")

    setup_logging(args.verbose, args.log_file)

    try:
        config = load_content_config(args.config)
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        return 1

    overrides: Dict[str, Any] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url.rstrip("/")
    if args.mock:
        overrides["integrations_mode"] = "mock"
    if overrides:
        config = config.model_copy(update=overrides)

    names = args.collections or COLLECTIONS
    logger.info(f"Fetching {', '.join(names)} from {config.base_url} (mode={config.integrations_mode})")

    results = asyncio.run(fetch(get_content_client(config), names))

    failed = [name for name, data in results.items() if data is None]
    for name in failed:
        logger.warning(f"No data returned for {name}")

    if args.output_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        for name, data in results.items():
            if data is None:
                continue
            # Same file names the local mock client reads
            file_name = config.settings_collection if name == "settings" else name
            target = args.output_dir / f"{file_name}.json"
            target.write_text(json.dumps({"data": data}, indent=2, ensure_ascii=False), encoding="utf-8")
            logger.info(f"Wrote {target}")
    else:
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
