from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from config import (
    SEED_PATH, OUTPUT_PATH, REQUEST_TIMEOUT, POLITE_DELAY_SECONDS,
    MAX_FIRM_WORKERS, MAX_PROFILE_CANDIDATES,
)
from models.records import FirmSeed, FirmContacts
from repositories import SeedFileRepository, ContactsFileRepository
from tasks.dedupe import dedupe_contacts
from tasks.discovery import discover_profile_urls
from tasks.extraction import process_profile_url
from tasks.fetcher import Fetch, HttpFetcher
from tasks.summary import build_summary
from utils.debug_logger import get_logger
from utils.domain import base_url_for
from utils.workflow_observer import ConsoleObserver


def map_firm_contacts(seed: FirmSeed, fetch: Fetch, observer=None,
                      max_candidates: int = MAX_PROFILE_CANDIDATES) -> FirmContacts:
    """
    Map one firm seed to its contacts: discover -> fetch -> classify -> dedupe.

    All fetches for a firm are issued one at a time, in order.
    """
    observer = observer or ConsoleObserver()
    observer.on_firm_start(seed)

    discovery = discover_profile_urls(base_url_for(seed.domain), fetch, max_candidates)
    get_logger().log_discovery(seed.firm, seed.domain, discovery)
    observer.on_discovery_complete(discovery)

    candidates = discovery.profile_urls[:max_candidates]
    observer.on_url_processing_start(len(candidates))

    results = []
    for idx, url in enumerate(candidates, 1):
        result = process_profile_url(url, fetch, seed.firm)
        observer.on_url_processed(idx, len(candidates), url, result)
        results.append(result)

    contacts = dedupe_contacts([r['contact'] for r in results if r['contact']])
    firm_contacts = FirmContacts.for_seed(seed, contacts)
    observer.on_complete(build_summary(firm_contacts, discovery, results))
    return firm_contacts


def _try_map(seed: FirmSeed, fetch_factory: Callable[[], Fetch], observer) -> FirmContacts:
    """Safely map one firm; an unexpected failure yields an empty contacts record"""
    fetch = fetch_factory()
    try:
        return map_firm_contacts(seed, fetch, observer)
    except Exception as e:
        print(f"Failed to map firm {seed.firm}: {str(e)}")
        return FirmContacts.for_seed(seed)
    finally:
        close = getattr(fetch, 'close', None)
        if close:
            close()


def run_bulk_mapping(seeds: List[FirmSeed], fetch_factory: Callable[[], Fetch],
                     workers: int = 1, observer=None) -> List[FirmContacts]:
    """
    Map every seed. Firms share no state, so with workers > 1 they run in a
    thread pool (each with its own fetcher). Output order matches seed order.
    """
    if workers <= 1 or len(seeds) <= 1:
        return [_try_map(seed, fetch_factory, observer) for seed in seeds]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda seed: _try_map(seed, fetch_factory, observer), seeds))


def run_contact_mapping(seed_path: str = SEED_PATH, output_path: str = OUTPUT_PATH,
                        timeout: float = REQUEST_TIMEOUT, delay: float = POLITE_DELAY_SECONDS,
                        workers: int = MAX_FIRM_WORKERS, observer=None,
                        fetch_factory: Optional[Callable[[], Fetch]] = None) -> List[FirmContacts]:
    """
    Full run: load seeds, map every firm, then write the whole array atomically.

    Raises:
        SeedFileError: seed file missing or malformed (before any fetch)
        OSError: output could not be written
    """
    seeds = SeedFileRepository(seed_path).load()
    fetch_factory = fetch_factory or (lambda: HttpFetcher(timeout=timeout, delay=delay))

    with ContactsFileRepository.transaction(output_path) as repo:
        repo.add_all(run_bulk_mapping(seeds, fetch_factory, workers, observer))

    return repo.pending


summarize_run = lambda results: {
    'firms': len(results),
    'firms_with_contacts': sum(1 for r in results if r.contacts),
    'contacts': sum(len(r.contacts) for r in results),
}
