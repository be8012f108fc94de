from typing import Dict

from config import EVIDENCE_TEXT_LENGTH
from models.enums import PageOutcome
from models.records import MappedContact
from tasks.classifier import classify, select_name
from tasks.fetcher import is_success
from utils.debug_logger import get_logger
from utils.html_parser import extract_page


def extract_contact(url: str, html: str, firm: str = '') -> Dict:
    """
    Run one fetched profile page through normalize -> name pick -> human-schema pass.

    Returns:
        {
            'outcome': str,  # "accepted" | "rejected"
            'contact': MappedContact | None,
            'classification': Classification
        }
    """
    page = extract_page(url, html)
    name = select_name(page)
    classification = classify(name, page.raw_text)
    get_logger().log_page(firm, url, html, page, name, classification)

    if not classification.accepted:
        return {'outcome': PageOutcome.REJECTED.value, 'contact': None, 'classification': classification}

    contact = MappedContact(
        name=name,
        role=classification.role,
        source_url=url,
        evidence_text=page.raw_text[:EVIDENCE_TEXT_LENGTH],
        confidence=classification.confidence,
    )
    return {'outcome': PageOutcome.ACCEPTED.value, 'contact': contact, 'classification': classification}


def process_profile_url(url: str, fetch, firm: str = '') -> Dict:
    """Fetch one candidate and classify it; a failed fetch simply contributes nothing"""
    fetch_result = fetch(url)
    if not is_success(fetch_result):
        return {'outcome': PageOutcome.FETCH_FAILED.value, 'contact': None,
                'classification': None, 'fetch_result': fetch_result}
    return {**extract_contact(url, fetch_result['html'], firm), 'fetch_result': fetch_result}
