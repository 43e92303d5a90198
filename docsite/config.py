"""Configuration constants and paths for docsite."""

import os
from pathlib import Path

# Widest content column, in pixels, for pages that don't declare their own cap.
# Override via DOCSITE_COLUMN_CAP environment variable
DEFAULT_COLUMN_CAP = int(os.getenv("DOCSITE_COLUMN_CAP", "600"))

# Viewport assumed when a static build has no live window to track
DEFAULT_VIEWPORT_WIDTH = 1024
DEFAULT_VIEWPORT_HEIGHT = 768

# Content location - markdown pages and JSON example documents
CONTENT_DIR = Path(os.getenv("DOCSITE_CONTENT_DIR", "content"))

# Site configuration file looked up inside the content directory
SITE_CONFIG_NAME = "site.json"
DEFAULT_SITE_TITLE = "docsite"

# Extensions handed to the markdown package
MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

LOG_LEVEL = os.getenv("DOCSITE_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
