from typing import Dict
from models.records import FirmSeed
from models.schemas import DiscoveryResult


class WorkflowObserver:
    """Base observer for workflow events"""

    def on_firm_start(self, seed: FirmSeed):
        pass

    def on_discovery_complete(self, discovery: DiscoveryResult):
        pass

    def on_url_processing_start(self, total: int):
        pass

    def on_url_processed(self, idx: int, total: int, url: str, result: Dict):
        pass

    def on_complete(self, summary: Dict):
        pass


class ConsoleObserver(WorkflowObserver):
    """Console output observer for contact mapping"""

    def on_firm_start(self, seed: FirmSeed):
        print(f"\n{'='*60}")
        print(f"Firm: {seed.firm} -> https://{seed.domain}")
        print(f"{'='*60}")

    def on_discovery_complete(self, discovery: DiscoveryResult):
        print(f"[DISCOVERY COMPLETE] {len(discovery.profile_urls)} candidates ({discovery.source.value})")
        for i, url in enumerate(discovery.profile_urls, 1):
            print(f"  {i}. {url}")

    def on_url_processing_start(self, total: int):
        print(f"\nProcessing {total} profile pages...")

    def on_url_processed(self, idx: int, total: int, url: str, result: Dict):
        print(f"\n[{idx}/{total}] {url}")
        contact = result.get('contact')
        if contact:
            print(f"  + {contact.name} ({contact.role}, confidence {contact.confidence:.2f})")
        elif result.get('classification'):
            print(f"  - Rejected: {result['classification'].reason}")
        else:
            print(f"  X Fetch failed: {result['fetch_result']['error_message']}")

    def on_complete(self, summary: Dict):
        print(f"\n{'='*60}")
        print(f"Mapping complete for {summary['firm']}")
        print(f"{'='*60}")
        print(f"  Discovery source: {summary['discovery_source']}")
        print(f"  Candidates: {summary['candidates']}")
        print(f"  Fetch failures: {summary['fetch_failures']}")
        print(f"  Accepted pages: {summary['accepted']}")
        print(f"  Rejected pages: {summary['rejected']}")
        print(f"  Contacts after dedupe: {summary['contacts']}")


class SilentObserver(WorkflowObserver):
    """No-op observer for silent execution"""
    pass
