"""Server level responses: ``/`` and ``/health``."""

from typing import Optional

from .base import Response


class RootResponse(Response):
    horizon_version: Optional[str] = None
    core_version: Optional[str] = None
    ingest_latest_ledger: Optional[int] = None
    history_latest_ledger: Optional[int] = None
    history_latest_ledger_closed_at: Optional[str] = None
    history_elder_ledger: Optional[int] = None
    core_latest_ledger: Optional[int] = None
    network_passphrase: Optional[str] = None
    current_protocol_version: Optional[int] = None
    supported_protocol_version: Optional[int] = None
    core_supported_protocol_version: Optional[int] = None


class HealthResponse(Response):
    database_connected: Optional[bool] = None
    core_up: Optional[bool] = None
    core_synced: Optional[bool] = None

    @property
    def is_healthy(self) -> bool:
        return bool(self.database_connected and self.core_up and self.core_synced)
