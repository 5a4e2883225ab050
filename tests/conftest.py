"""Shared pytest fixtures for hostparts tests."""

import json
import logging
import shutil
import tempfile
from pathlib import Path

import idna
import pytest

from hostparts.core.models import SuffixList
from hostparts.core.psl_loader import load_rules

# Unicode form of the xn--mgbx4cd0ab TLD
MALAYSIA_TLD = idna.decode("xn--mgbx4cd0ab")

REFERENCE_LIST_TEXT = f"""\
// Test suffix list

// ===BEGIN ICANN DOMAINS===
com
net
run
aero
airline.aero
uk
co.uk
*.ck
!www.ck
jp
*.kawasaki.jp
!city.kawasaki.jp
io
{MALAYSIA_TLD}
// ===END ICANN DOMAINS===

// ===BEGIN PRIVATE DOMAINS===
github.io
blogspot.com
*.compute.amazonaws.com
// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "include_private": True,
            "suffix_list_path": "/tmp/list.dat",
            "log_file": None,
        },
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def reference_text():
    """Return the text of the reference suffix list."""
    return REFERENCE_LIST_TEXT


@pytest.fixture
def reference_list_file(temp_dir):
    """Write the reference suffix list to disk."""
    path = temp_dir / "public_suffix_list.dat"
    path.write_text(REFERENCE_LIST_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def public_store():
    """RuleStore built from the public section of the reference list."""
    return load_rules(REFERENCE_LIST_TEXT, include_private=False)


@pytest.fixture
def reference_list():
    """SuffixList built from the public section of the reference list."""
    return SuffixList(load_rules(REFERENCE_LIST_TEXT, include_private=False))


@pytest.fixture
def private_list():
    """SuffixList built from both sections of the reference list."""
    return SuffixList(load_rules(REFERENCE_LIST_TEXT, include_private=True))


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
