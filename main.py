import argparse
import sys

from config import SEED_PATH, OUTPUT_PATH, REQUEST_TIMEOUT, POLITE_DELAY_SECONDS, MAX_FIRM_WORKERS
from repositories import SeedFileError
from utils.debug_logger import get_logger
from utils.workflow_observer import ConsoleObserver, SilentObserver
from workflows.contact_mapping import run_contact_mapping, summarize_run


def main(argv=None):
    """Main entry point: map law-firm seeds to contacts."""

    # Parse CLI arguments
    parser = argparse.ArgumentParser(description='Discover attorney contacts on law-firm websites')
    parser.add_argument('--seeds', default=SEED_PATH, help=f'Seed JSON array (default: {SEED_PATH})')
    parser.add_argument('--output', default=OUTPUT_PATH, help=f'Output JSON file (default: {OUTPUT_PATH})')
    parser.add_argument('--timeout', type=float, default=REQUEST_TIMEOUT, help='Per-request timeout in seconds')
    parser.add_argument('--delay', type=float, default=POLITE_DELAY_SECONDS, help='Pause between requests to one host')
    parser.add_argument('--workers', type=int, default=MAX_FIRM_WORKERS, help='Firms mapped in parallel')
    parser.add_argument('--quiet', action='store_true', help='Suppress per-page progress output')
    args = parser.parse_args(argv)

    logger = get_logger()

    print("=" * 60)
    print("Legal Contact Mapper")
    print("=" * 60)
    print(f"Seeds: {args.seeds}")
    print(f"Output: {args.output}")
    if logger.enabled:
        print(f"Debug logs will be saved to: {logger.run_dir}")
    print("=" * 60)

    try:
        results = run_contact_mapping(
            seed_path=args.seeds,
            output_path=args.output,
            timeout=args.timeout,
            delay=args.delay,
            workers=args.workers,
            observer=SilentObserver() if args.quiet else ConsoleObserver(),
        )
    except SeedFileError as e:
        print(f"Seed error: {e}")
        return 2

    # Summary
    summary = summarize_run(results)
    print("\n" + "=" * 60)
    print("Run Complete - Summary")
    print("=" * 60)
    print(f"Firms mapped: {summary['firms']}")
    print(f"Firms with contacts: {summary['firms_with_contacts']}")
    print(f"Total contacts: {summary['contacts']}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
