# =============================================================================
# app/version.py - Version Information
# =============================================================================
# Single source of truth is pyproject.toml; read through package metadata
# with a fallback for running from a plain checkout.
# =============================================================================

from importlib.metadata import PackageNotFoundError, version

_FALLBACK_VERSION = "1.0.0"

try:
    VERSION = version("customer-api")
except PackageNotFoundError:
    VERSION = _FALLBACK_VERSION
