"""Serialize hook: converts configured attributes at lifecycle points.

Attribute values are kept in their in-memory form on the host object and
converted to their storage form right before an insert or update. After the
host is populated from storage (find, and insert/update, which may hand back
normalized data) the values are converted back.

Example:
    class Article(ActiveRecord):
        def behaviors(self):
            return [SerializeHook(attributes="meta, tags")]
"""

from collections.abc import Callable, Iterable, Set
from typing import Any

import structlog

from attrcodec.config.hook import SerializeHookConfig
from attrcodec.core.interfaces import (
    ActiveRecordProtocol,
    AttributeAccessor,
    Transformer,
)
from attrcodec.core.logging import get_logger
from attrcodec.exceptions import ConfigurationError

from ..base import HookContext
from ..events import LifecycleEvent


logger = get_logger(__name__)


SERIALIZE = "serialize"
DESERIALIZE = "deserialize"

# Lifecycle event -> operation run on the owner's attributes
EVENT_OPERATIONS: dict[LifecycleEvent, str] = {
    LifecycleEvent.AFTER_FIND: DESERIALIZE,
    LifecycleEvent.AFTER_INSERT: DESERIALIZE,
    LifecycleEvent.AFTER_UPDATE: DESERIALIZE,
    LifecycleEvent.BEFORE_INSERT: SERIALIZE,
    LifecycleEvent.BEFORE_UPDATE: SERIALIZE,
}


def process_attributes(
    accessor: AttributeAccessor,
    attributes: Iterable[str],
    transformer: Transformer,
) -> None:
    """Pass every present attribute through a transform, in order.

    Attributes whose value is None are skipped without calling the transform.
    A transform error propagates unchanged and leaves the remaining attributes
    untouched.

    Args:
        accessor: Host object, or an adapter over it
        attributes: Attribute names to process
        transformer: Transform applied to each present value
    """
    for attribute in attributes:
        value = accessor.get_attribute(attribute)
        if value is None:
            continue
        try:
            new_value = transformer.transform(value)
        except Exception as e:
            logger.warning(
                "attribute_transform_failed",
                attribute=attribute,
                transformer=repr(transformer),
                error=str(e),
            )
            raise
        accessor.set_attribute(attribute, new_value)


class SerializeHook:
    """Serializes and deserializes attributes of an active record.

    The hook validates its configuration on construction and raises
    ConfigurationError for an empty or malformed attribute list or for a
    transform that is not callable. By default values are encoded with
    JsonSerializer and decoded with JsonDeserializer.

    A hook attaches to a single owner through ``attach``. It can also be
    registered directly in a HookRegistry, in which case it processes the
    sender of each event it receives.
    """

    name = "serialize"

    def __init__(
        self,
        attributes: str | Iterable[str] | None = None,
        serialize: Transformer | Callable[[Any], Any] | None = None,
        deserialize: Transformer | Callable[[Any], Any] | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        """Initialize and validate the hook.

        Args:
            attributes: Comma-separated string or sequence of attribute names
            serialize: Transform applied before insert and update
            deserialize: Transform applied after find, insert and update
            logger: Optional structlog logger instance

        Raises:
            ConfigurationError: If the configuration is missing or malformed
        """
        if attributes is not None and not isinstance(attributes, str):
            attributes = list(attributes) if _is_iterable(attributes) else attributes
        self.config = SerializeHookConfig.build(
            attributes=attributes,
            serialize=serialize,
            deserialize=deserialize,
        )
        self.owner: ActiveRecordProtocol | None = None
        self.logger = logger or get_logger(__name__)

    @property
    def attributes(self) -> tuple[str, ...]:
        return self.config.attributes

    @property
    def serializer(self) -> Transformer:
        return self.config.serialize  # type: ignore[no-any-return]

    @property
    def deserializer(self) -> Transformer:
        return self.config.deserialize  # type: ignore[no-any-return]

    @property
    def events(self) -> list[LifecycleEvent]:
        """Events this hook listens to"""
        return list(EVENT_OPERATIONS)

    def event_handlers(self) -> dict[LifecycleEvent, Callable[..., None]]:
        """Map each lifecycle event to the bound handler run for it."""
        handlers = {
            SERIALIZE: self.serialize_attributes,
            DESERIALIZE: self.deserialize_attributes,
        }
        return {event: handlers[op] for event, op in EVENT_OPERATIONS.items()}

    def transformer_for(self, event: LifecycleEvent | str) -> Transformer | None:
        """Return the transform run for an event, or None if it is not handled."""
        op = EVENT_OPERATIONS.get(LifecycleEvent(event))
        if op is None:
            return None
        return self.serializer if op == SERIALIZE else self.deserializer

    def attach(self, owner: Any) -> None:
        """Attach the hook to an owner and subscribe to its lifecycle events.

        Raises:
            ConfigurationError: If the owner is not an active record, or the
                hook is already attached to another owner
        """
        if not isinstance(owner, ActiveRecordProtocol):
            raise ConfigurationError(
                f"Owner of hook must implement {ActiveRecordProtocol.__name__}, "
                f"got {type(owner).__name__}."
            )
        if self.owner is not None and self.owner is not owner:
            raise ConfigurationError("Hook is already attached to another owner.")
        if self.owner is owner:
            return

        self.owner = owner
        for event, handler in self.event_handlers().items():
            owner.on(event, handler)

        self.logger.debug(
            "hook_attached",
            hook=self.name,
            owner=type(owner).__name__,
            attributes=list(self.attributes),
        )

    def detach(self) -> None:
        """Unsubscribe from the owner's events. No-op when not attached."""
        if self.owner is None:
            return
        for event, handler in self.event_handlers().items():
            self.owner.off(event, handler)
        self.logger.debug(
            "hook_detached", hook=self.name, owner=type(self.owner).__name__
        )
        self.owner = None

    def serialize_attributes(self, context: HookContext | None = None) -> None:
        """Serializes the configured attributes of the owner."""
        process_attributes(self._require_owner(), self.attributes, self.serializer)

    def deserialize_attributes(self, context: HookContext | None = None) -> None:
        """Deserializes the configured attributes of the owner."""
        process_attributes(self._require_owner(), self.attributes, self.deserializer)

    def __call__(self, context: HookContext) -> None:
        """Process the event's sender when registered directly in a registry."""
        transformer = self.transformer_for(context.event)
        if transformer is None:
            return
        process_attributes(context.sender, self.attributes, transformer)

    def _require_owner(self) -> ActiveRecordProtocol:
        if self.owner is None:
            raise ConfigurationError("Hook is not attached to an owner.")
        return self.owner

    def __repr__(self) -> str:
        return f"SerializeHook(attributes={list(self.attributes)!r})"


def _is_iterable(value: Any) -> bool:
    try:
        iter(value)
    except TypeError:
        return False
    # Unordered collections are left for the config validator to reject
    return not isinstance(value, bytes | bytearray | dict | Set)
