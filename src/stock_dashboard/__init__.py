"""Stock Dashboard - Terminal inventory dashboard for product catalogues."""

import logging

__version__ = "0.1.0"

# Directory and file constants
CONFIG_DIR = ".stock-dashboard"
CONFIG_FILE = "config.json"
DEFAULT_SOURCE = "products.json"

# Dashboard defaults
PAGE_SIZE = 8
DEBOUNCE_MS = 500
LOW_STOCK_THRESHOLD = 5
CURRENCY_SYMBOL = "₹"

logging.getLogger(__name__).addHandler(logging.NullHandler())
