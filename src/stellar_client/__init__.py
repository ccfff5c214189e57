"""
Stellar Client - Horizon and anchor (SEP-06, SEP-12) client SDK.

Builds Horizon API requests through fluent request builders, parses the
JSON responses into typed pydantic models, and talks to anchor transfer
and KYC servers on behalf of a wallet.
"""

__version__ = "1.9.3"
__author__ = "Seba Battig"
