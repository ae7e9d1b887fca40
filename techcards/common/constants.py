"""
Shared constants for the project.

Defaults used by library classes when no configuration is passed in.
Scripts override most of them from config/settings.yaml.
"""

BASE_URL = "https://www.bricoman.pl"
SITEMAP_INDEX_URL = "https://www.bricoman.pl/pub/media/sitemap/products.xml"

# Sitemap shards are refreshed once a day
CACHE_TTL_SECONDS = 86400

REQUEST_TIMEOUT = 15
# Minimum gap between two consecutive requests to the origin server
REQUEST_INTERVAL = 0.3

MAX_GENERATED_FILES = 20

DEFAULT_TITLE = "Unknown Product"
DEFAULT_FEATURE_LABEL = "Feature"

BARCODE_ENDPOINT = "https://barcode.tec-it.com/barcode.ashx"
