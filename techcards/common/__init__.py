# Common utilities
from .config_loader import (
    load_config,
    load_excluded_features,
    load_settings,
)
from .http_client import HttpFetcher
from .log_config import setup_logging
from .text_utils import clean_text, escape_text, normalize_url, reference_from_url, sanitize_filename
