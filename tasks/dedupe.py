from typing import Dict, List
from models.records import MappedContact

_contact_key = lambda contact: (contact.name.lower(), contact.source_url.lower())


def dedupe_contacts(contacts: List[MappedContact]) -> List[MappedContact]:
    """
    Collapse repeats of the same (name, source URL), case-insensitively.

    The higher-confidence record wins a collision; ties keep the first seen.
    Output is sorted by descending confidence, stable for equal scores.
    """
    best: Dict[tuple, MappedContact] = {}
    for contact in contacts:
        key = _contact_key(contact)
        if key not in best or best[key].confidence < contact.confidence:
            best[key] = contact
    return sorted(best.values(), key=lambda c: -c.confidence)
