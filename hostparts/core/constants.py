"""Application constants and paths for hostparts."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "hostparts"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1

# Base paths
APP_HOME = Path(os.environ.get("HOSTPARTS_HOME", Path.home() / ".hostparts"))
CONFIG_FILE = APP_HOME / "config.json"

# Bundled suffix list shipped inside the package
DEFAULT_SUFFIX_LIST_PATH = Path(__file__).parent.parent / "data" / "public_suffix_list.dat"

# Suffix list syntax
COMMENT_PREFIX = "//"
PRIVATE_SECTION_MARKER = "===BEGIN PRIVATE DOMAINS==="
EXCEPTION_PREFIX = "!"
WILDCARD_PREFIX = "*."
LABEL_SEPARATOR = "."

# Hosts containing this anywhere are run through IDNA decoding
IDNA_ACE_PREFIX = "xn--"

# Logging settings
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3

# Default settings
DEFAULT_SETTINGS = {
    "include_private": False,
    "suffix_list_path": None,
    "log_file": None,
}
