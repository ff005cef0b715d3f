"""Shared enumerations used by both the persisted and the runtime models."""

from gamepresence.common.enums import AssetSource, ServiceName, ServicePriority

__all__ = ["AssetSource", "ServiceName", "ServicePriority"]
