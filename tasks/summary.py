from typing import List, Dict
from models.enums import PageOutcome
from models.records import FirmContacts
from models.schemas import DiscoveryResult


def build_summary(firm_contacts: FirmContacts, discovery: DiscoveryResult, results: List[Dict]) -> Dict:
    """
    Build per-firm mapping summary from page results.

    Returns:
        Summary dict with counts
    """
    count = lambda outcome: sum(1 for r in results if r['outcome'] == outcome.value)

    return {
        'firm': firm_contacts.firm,
        'domain': firm_contacts.domain,
        'discovery_source': discovery.source.value,
        'candidates': len(discovery.profile_urls),
        'fetch_failures': count(PageOutcome.FETCH_FAILED),
        'accepted': count(PageOutcome.ACCEPTED),
        'rejected': count(PageOutcome.REJECTED),
        'contacts': len(firm_contacts.contacts),
    }
