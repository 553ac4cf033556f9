"""Local configuration for hn2vast."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".hn2vast_cache"
DEFAULT_CACHE_TTL_SECONDS = 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "hn2vast/0.1 (+https://github.com/hn2vast/hn2vast)"

# Downloaded item pages, one directory per item id.
HN2VAST_CACHE_PATH = Path(os.getenv("HN2VAST_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
HN2VAST_CACHE_TTL_SECONDS = int(os.getenv("HN2VAST_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
HN2VAST_FETCH_TIMEOUT_S = float(os.getenv("HN2VAST_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
HN2VAST_FETCH_MAX_RETRIES = int(os.getenv("HN2VAST_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
HN2VAST_FETCH_BACKOFF_S = float(os.getenv("HN2VAST_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
HN2VAST_USER_AGENT = os.getenv("HN2VAST_USER_AGENT", DEFAULT_USER_AGENT)

HN_URL_BASE = "https://news.ycombinator.com/item?id="
HN_SCHEME = "hn:"
CACHED_HTML_FILE = "index.html"

# Markup selectors: ``tag.class1.class2``, tag optional.
COMMENT_SELECTOR = ".comtr"
COMMENT_TEXT_SELECTOR = ".commtext"
INDENT_SELECTOR = ".ind"
SPACER_SELECTOR = "img"

VAST_FORMAT = "vast"
VAST_VERSION = "1.0.0"
VAST_COLORS = {
    "paragraph": "#f00",
    "content": "#c00",
    "comment": "#0c0",
    "topic": "#00f",
}
