"""Bind a SerializeHook to SQLAlchemy (and SQLModel) mapped classes.

Mapper events stand in for the active record lifecycle:

    load, after_insert, after_update   -> deserialize
    before_insert, before_update       -> serialize
    refresh                            -> deserialize (refreshed attributes only)

``refresh`` fires when expired attributes are reloaded (e.g. after a commit
with ``expire_on_commit=True``), which SQLAlchemy does not report as a load.

Deserialized values are written with ``set_committed_value`` so loading an
instance does not mark it dirty. In-place mutation of a deserialized value is
therefore not detected; assign a new value to have it written.
"""

from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy import event, inspect
from sqlalchemy.orm import Mapper
from sqlalchemy.orm.attributes import set_committed_value

from attrcodec.core.interfaces import Transformer
from attrcodec.core.logging import get_logger
from attrcodec.exceptions import ConfigurationError
from attrcodec.hooks.implementations.serialize import SerializeHook, process_attributes


__all__ = ["ModelAccessor", "attach_to_model", "detach_from_model"]


logger = get_logger(__name__)


class ModelAccessor:
    """Attribute accessor over a mapped instance.

    Reads go through the instance state dict, so unloaded or expired
    attributes read as absent instead of triggering a load in the middle of a
    flush. Names that are not mapped attributes also read as absent.

    Args:
        instance: Mapped instance
        committed: Write with ``set_committed_value`` instead of ``setattr``
    """

    def __init__(self, instance: Any, committed: bool = False):
        self.instance = instance
        self.committed = committed
        self._state = inspect(instance)

    def get_attribute(self, name: str) -> Any:
        if name not in self._state.manager:
            return None
        return self._state.dict.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        if self.committed:
            set_committed_value(self.instance, name, value)
        else:
            setattr(self.instance, name, value)


def _require_mapper(model_cls: Any) -> Mapper[Any]:
    mapper = inspect(model_cls, raiseerr=False)
    if not isinstance(mapper, Mapper):
        raise ConfigurationError(
            f"Owner of hook must be a mapped class, got {model_cls!r}."
        )
    return mapper


def _listeners(hook: SerializeHook) -> dict[str, Callable[..., None]]:
    # Built once per hook so detach_from_model removes the same callables
    cached: dict[str, Callable[..., None]] | None = getattr(
        hook, "_sqlalchemy_listeners", None
    )
    if cached is not None:
        return cached

    def _process(target: Any, transformer: Transformer, committed: bool) -> None:
        accessor = ModelAccessor(target, committed)
        process_attributes(accessor, hook.attributes, transformer)

    def on_load(target: Any, context: Any) -> None:
        _process(target, hook.deserializer, committed=True)

    def on_refresh(target: Any, context: Any, attrs: Iterable[str] | None) -> None:
        names: Iterable[str] = hook.attributes
        if attrs is not None:
            refreshed = set(attrs)
            names = [name for name in hook.attributes if name in refreshed]
        process_attributes(ModelAccessor(target, True), names, hook.deserializer)

    def before_write(mapper: Any, connection: Any, target: Any) -> None:
        _process(target, hook.serializer, committed=False)

    def after_write(mapper: Any, connection: Any, target: Any) -> None:
        _process(target, hook.deserializer, committed=True)

    listeners = {
        "load": on_load,
        "refresh": on_refresh,
        "before_insert": before_write,
        "before_update": before_write,
        "after_insert": after_write,
        "after_update": after_write,
    }
    hook._sqlalchemy_listeners = listeners  # type: ignore[attr-defined]
    return listeners


def attach_to_model(hook: SerializeHook, model_cls: type[Any]) -> None:
    """Listen to the mapper events of ``model_cls`` with ``hook``.

    Subclasses of ``model_cls`` are covered as well.

    Raises:
        ConfigurationError: If ``model_cls`` is not a mapped class
    """
    _require_mapper(model_cls)
    for identifier, fn in _listeners(hook).items():
        if not event.contains(model_cls, identifier, fn):
            event.listen(model_cls, identifier, fn, propagate=True)

    logger.debug(
        "hook_attached",
        hook=hook.name,
        owner=model_cls.__name__,
        attributes=list(hook.attributes),
    )


def detach_from_model(hook: SerializeHook, model_cls: type[Any]) -> None:
    """Remove the listeners installed by ``attach_to_model``."""
    _require_mapper(model_cls)
    for identifier, fn in _listeners(hook).items():
        if event.contains(model_cls, identifier, fn):
            event.remove(model_cls, identifier, fn)

    logger.debug("hook_detached", hook=hook.name, owner=model_cls.__name__)
