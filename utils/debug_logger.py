from pathlib import Path
from datetime import datetime
import json
from functools import lru_cache

from config import DEBUG_LOGS_ENABLED, DEBUG_LOG_DIR

# Helper functions
_slugify = lambda name: ''.join(c if c.isalnum() or c in '-_' else '_' for c in name)[:60] or 'page'
_log_file_path = lambda run_dir, slug, suffix: run_dir / f"{slug}_{suffix}.json"

def _write_json(file_path, data):
    """Write JSON data to file"""
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return file_path

@lru_cache(maxsize=1)
def get_logger():
    """Get or create debug logger (cached singleton)"""
    return DebugLogger(DEBUG_LOG_DIR, enabled=DEBUG_LOGS_ENABLED)

class DebugLogger:
    """Per-run debug artifacts for discovery and classification. No-op when disabled."""

    def __init__(self, base_dir: str = "debug_logs", enabled: bool = True):
        self.enabled = enabled
        self.base_dir = Path(base_dir)
        self.run_dir = None
        if not enabled:
            return

        # Create timestamped run directory
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.run_dir = self.base_dir / timestamp
        self.run_dir.mkdir(parents=True, exist_ok=True)

    def log_discovery(self, firm: str, domain: str, discovery):
        """Log where candidate profile URLs came from."""
        if not self.enabled:
            return None
        log_file = _write_json(
            _log_file_path(self.run_dir, _slugify(firm), 'discovery'),
            {
                'firm': firm, 'domain': domain,
                'timestamp': datetime.now().isoformat(),
                'source': discovery.source.value,
                'sitemaps': discovery.sitemap_urls,
                'index_pages': discovery.index_pages,
                'profile_urls': discovery.profile_urls,
            }
        )
        print(f"[DEBUG] Discovery logged to: {log_file}")
        return log_file

    def log_page(self, firm: str, url: str, raw_html: str, page, name: str, classification):
        """Save raw HTML, normalized text and the human-schema verdict for one page."""
        if not self.enabled:
            return None

        firm_dir = self.run_dir / _slugify(firm)
        firm_dir.mkdir(exist_ok=True)
        base_name = f"{_slugify(url.rstrip('/').split('/')[-1])}_{datetime.now().strftime('%H%M%S%f')}"

        with open(firm_dir / f"{base_name}_raw.html", 'w', encoding='utf-8', errors='ignore') as f:
            f.write(raw_html)
        with open(firm_dir / f"{base_name}_parsed.txt", 'w', encoding='utf-8') as f:
            f.write(page.raw_text)

        log_file = _write_json(firm_dir / f"{base_name}_classification.json", {
            'url': url,
            'timestamp': datetime.now().isoformat(),
            'heading': page.heading,
            'title': page.title,
            'name': name,
            'accepted': classification.accepted,
            'role': classification.role,
            'confidence': classification.confidence,
            'bio_signals': classification.bio_signals,
            'reason': classification.reason,
        })
        print(f"[DEBUG] Saved to: {firm_dir}/{base_name}_*")
        return log_file
