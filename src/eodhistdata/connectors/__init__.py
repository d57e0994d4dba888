"""Connector registry."""

from __future__ import annotations

from eodhistdata.config import EodHistDataConfig, EodHistTransport
from eodhistdata.connectors.aio import AsyncEodHistConnector
from eodhistdata.connectors.base import BaseEodHistConnector
from eodhistdata.connectors.sync import EodHistConnector

CONNECTOR_CLASSES: dict[
    EodHistTransport, type[EodHistConnector] | type[AsyncEodHistConnector]
] = {
    EodHistTransport.REQUESTS: EodHistConnector,
    EodHistTransport.HTTPX: AsyncEodHistConnector,
}


def create_connector(
    config: EodHistDataConfig,
) -> EodHistConnector | AsyncEodHistConnector:
    """Instantiate the connector matching ``config.transport``."""
    cls = CONNECTOR_CLASSES[config.transport]
    return cls(config.api_token, base_url=config.base_url, timeout=config.timeout)


__all__ = [
    "AsyncEodHistConnector",
    "BaseEodHistConnector",
    "CONNECTOR_CLASSES",
    "EodHistConnector",
    "create_connector",
]
