"""Configuration constants and paths for Techblog."""

import os
from pathlib import Path

# Absolute origin used for canonical URLs, sitemap and Open Graph tags
# Override via TECHBLOG_BASE_URL environment variable
BASE_URL = os.getenv("TECHBLOG_BASE_URL", "https://yourdomain.com").rstrip("/")

SITE_NAME = "Technical Blog"
SITE_DESCRIPTION = (
    "A technical blog platform for engineers covering web development, "
    "DevOps, and software architecture"
)
DEFAULT_AUTHOR = os.getenv("TECHBLOG_AUTHOR", "Technical Blog")
TWITTER_CREATOR = os.getenv("TECHBLOG_TWITTER", "@yourtwitterhandle")
LOCALE = "en_US"

# Source and output locations, relative to the working directory
CONTENT_DIR = Path(os.getenv("TECHBLOG_CONTENT_DIR", "content"))
PUBLIC_DIR_NAME = "public"
OUTPUT_DIR = Path(os.getenv("TECHBLOG_OUTPUT_DIR", "site"))

# Social preview image
OG_IMAGE_PATH = "/og-image.png"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630

# Table of contents
TOC_LEVELS = (2, 3)
# Top edge pulled down by the sticky header height, bottom edge pulled up so a
# heading stops counting well before it leaves the viewport.
TOC_ROOT_MARGIN = "-80px 0px -80% 0px"
TOC_INCLUDE_UNANCHORED = os.getenv("TECHBLOG_TOC_INCLUDE_UNANCHORED", "").lower() in {"1", "true", "yes"}
TOC_INDENT_REM = 0.75
