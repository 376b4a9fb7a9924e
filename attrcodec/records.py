"""In-memory active record host.

ActiveRecord holds a row's attributes and an ordered list of lifecycle
observers. It has no storage of its own: a persistence layer (or a test) calls
the lifecycle helpers around its reads and writes, and the attached hooks act
on the record at those points.
"""

from collections.abc import Callable, Mapping
from typing import Any

from .hooks import Hook, HookContext, HookManager, HookRegistry, LifecycleEvent


class ActiveRecord:
    """A single persistent row with lifecycle events and attribute accessors."""

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes: dict[str, Any] = dict(attributes or {})
        self._registry = HookRegistry()
        self._manager = HookManager(self._registry)
        self._hooks: list[Hook] = []
        for hook in self.behaviors():
            self.attach_hook(hook)

    def behaviors(self) -> list[Hook]:
        """Hooks attached on construction. Override in subclasses."""
        return []

    # === Attribute access ===

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    # === Event subscription ===

    def on(
        self, event: LifecycleEvent | str, handler: Callable[[HookContext], Any]
    ) -> None:
        self._registry.subscribe(event, handler)

    def off(
        self, event: LifecycleEvent | str, handler: Callable[[HookContext], Any]
    ) -> bool:
        return self._registry.unsubscribe(event, handler)

    def trigger(self, event: LifecycleEvent | str, **data: Any) -> HookContext:
        """Run every handler subscribed to ``event`` against this record."""
        return self._manager.emit(event, self, data)

    # === Hooks ===

    @property
    def hooks(self) -> list[Hook]:
        return list(self._hooks)

    def attach_hook(self, hook: Hook) -> None:
        """Attach a hook.

        Hooks with an ``attach`` method bind themselves to the record (and may
        reject it); other hooks are registered for their events.
        """
        attach = getattr(hook, "attach", None)
        if callable(attach):
            attach(self)
        else:
            self._registry.register(hook)
        self._hooks.append(hook)

    def detach_hook(self, hook: Hook) -> None:
        if hook not in self._hooks:
            return
        detach = getattr(hook, "detach", None)
        if callable(detach):
            detach()
        else:
            self._registry.unregister(hook)
        self._hooks.remove(hook)

    # === Lifecycle ===

    @classmethod
    def instantiate(cls, row: Mapping[str, Any]) -> "ActiveRecord":
        """Build a record from a stored row and fire ``after.find``."""
        record = cls(row)
        record.trigger(LifecycleEvent.AFTER_FIND)
        return record

    def refresh(self, row: Mapping[str, Any]) -> None:
        """Replace attributes with a freshly read row and fire ``after.find``."""
        self._attributes = dict(row)
        self.trigger(LifecycleEvent.AFTER_FIND)
        self.trigger(LifecycleEvent.AFTER_REFRESH)

    def before_save(self, insert: bool) -> None:
        event = (
            LifecycleEvent.BEFORE_INSERT if insert else LifecycleEvent.BEFORE_UPDATE
        )
        self.trigger(event)

    def after_save(
        self, insert: bool, changed_attributes: Mapping[str, Any] | None = None
    ) -> None:
        event = LifecycleEvent.AFTER_INSERT if insert else LifecycleEvent.AFTER_UPDATE
        self.trigger(event, changed_attributes=dict(changed_attributes or {}))

    def before_delete(self) -> None:
        self.trigger(LifecycleEvent.BEFORE_DELETE)

    def after_delete(self) -> None:
        self.trigger(LifecycleEvent.AFTER_DELETE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"
