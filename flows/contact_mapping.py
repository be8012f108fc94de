# flows/contact_mapping.py
from prefect import flow, task
from prefect.cache_policies import NONE
from prefect.task_runners import ThreadPoolTaskRunner

from config import SEED_PATH, OUTPUT_PATH, REQUEST_TIMEOUT, POLITE_DELAY_SECONDS, MAX_FIRM_WORKERS
from models.records import FirmSeed, FirmContacts
from repositories import SeedFileRepository, ContactsFileRepository
from tasks.fetcher import HttpFetcher
from workflows.contact_mapping import map_firm_contacts, summarize_run


@task(name="map-firm", cache_policy=NONE)
def map_firm_task(seed: FirmSeed, timeout: float, delay: float) -> FirmContacts:
    """Map one firm with its own fetcher; per-firm fetching stays serial"""
    with HttpFetcher(timeout=timeout, delay=delay) as fetch:
        try:
            return map_firm_contacts(seed, fetch)
        except Exception as e:
            print(f"Failed to map firm {seed.firm}: {str(e)}")
            return FirmContacts.for_seed(seed)


@flow(name="legal-contact-mapping", log_prints=True, task_runner=ThreadPoolTaskRunner(max_workers=1))
def contact_mapping_flow(seed_path: str = SEED_PATH, output_path: str = OUTPUT_PATH,
                         timeout: float = REQUEST_TIMEOUT, delay: float = POLITE_DELAY_SECONDS):
    """Load seeds, map firms on the task runner, write the full result atomically"""
    seeds = SeedFileRepository(seed_path).load()
    futures = [map_firm_task.submit(seed, timeout, delay) for seed in seeds]
    results = [future.result() for future in futures]

    with ContactsFileRepository.transaction(output_path) as repo:
        repo.add_all(results)

    summary = summarize_run(results)
    print(f"\n{'='*60}\nMapped {summary['firms']} firms, {summary['contacts']} contacts\n{'='*60}")
    return summary


def run_contact_mapping_flow(seed_path: str = SEED_PATH, output_path: str = OUTPUT_PATH,
                             timeout: float = REQUEST_TIMEOUT, delay: float = POLITE_DELAY_SECONDS,
                             workers: int = MAX_FIRM_WORKERS):
    """Run the flow with a task runner sized to `workers` firms at a time"""
    runner = ThreadPoolTaskRunner(max_workers=max(1, workers))
    return contact_mapping_flow.with_options(task_runner=runner)(
        seed_path=seed_path, output_path=output_path, timeout=timeout, delay=delay)


if __name__ == "__main__":
    run_contact_mapping_flow()
