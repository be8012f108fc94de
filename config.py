import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Input / Output
SEED_PATH = os.getenv('SEED_PATH', 'data/legal_signal_leads.json')
OUTPUT_PATH = os.getenv('OUTPUT_PATH', 'data/legal_contacts.json')

# HTTP Settings
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '10'))  # seconds
POLITE_DELAY_SECONDS = float(os.getenv('POLITE_DELAY_SECONDS', '0.75'))
USER_AGENT = 'img-lead-intelligence/1.0 (contact-mapper)'
ACCEPT_HEADER = 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'

# Parallelism across independent firms (per-firm fetching is always serial)
MAX_FIRM_WORKERS = int(os.getenv('MAX_FIRM_WORKERS', '1'))

# HTML Parsing
MAX_TEXT_LENGTH = 9000
EVIDENCE_TEXT_LENGTH = 380
MAX_HEADING_LENGTH = 120

# Discovery
MAX_PROFILE_CANDIDATES = 25  # Hard cap on profile pages fetched per firm
MAX_CHILD_SITEMAPS = 5

# Output defaults
DEFAULT_EXPOSURE_SCORE = 100
DEFAULT_SOURCE = 'unknown'

# Debug artifacts
DEBUG_LOGS_ENABLED = os.getenv('DEBUG_LOGS_ENABLED', 'false').lower() == 'true'
DEBUG_LOG_DIR = os.getenv('DEBUG_LOG_DIR', 'debug_logs')
