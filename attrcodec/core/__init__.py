"""Core interfaces and logging for attrcodec."""

from .interfaces import ActiveRecordProtocol, AttributeAccessor, Transformer


__all__ = ["ActiveRecordProtocol", "AttributeAccessor", "Transformer"]
