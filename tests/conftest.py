"""
Shared pytest fixtures for cloudcmd tests.

This module provides common fixtures including:
- Sample cloud-config payloads
- Content encoding helpers for write_files tests
- FastAPI test client utilities
"""

import base64
import gzip
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# Content encoding helpers
# =============================================================================

def b64(text: str) -> str:
    """Base64-encode text the way a cloud-config author would."""
    return base64.b64encode(text.encode()).decode()


def gz_b64(text: str) -> str:
    """Gzip then base64-encode text (the gz+base64 encoding)."""
    return base64.b64encode(gzip.compress(text.encode())).decode()


# =============================================================================
# Sample payloads
# =============================================================================

SCENARIO_CONFIG = b"""write_files:
- path: /etc/foo.conf
  content: aGVsbG8=
  encoding: base64
runcmd:
- ["systemctl", "restart", "foo"]
"""

FULL_CONFIG = b"""#cloud-config
package_update: true
runcmd:
- echo first
- [touch, /tmp/first]
packages:
- nginx
- curl
write_files:
- path: /etc/app/app.conf
  content: |
    key=value
  permissions: '0600'
  owner: app:app
- path: /var/log/app.log
  content: appended
  append: true
bootcmd:
- echo ignored
runcmd_after:
  - echo ignored too
"""


@pytest.fixture
def scenario_config() -> bytes:
    return SCENARIO_CONFIG


@pytest.fixture
def full_config() -> bytes:
    return FULL_CONFIG


@pytest.fixture
def api_client(monkeypatch):
    """TestClient around an app configured from a clean environment."""
    from fastapi.testclient import TestClient

    from cloudcmd.main import create_app

    for name in ("CLOUDCMD_CHAIN_ENCODINGS", "CLOUDCMD_STRICT_ENCODINGS", "MAX_PAYLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)

    with TestClient(create_app()) as client:
        yield client
