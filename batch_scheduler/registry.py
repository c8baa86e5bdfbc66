"""Registry base class and scheduler registry.

Provides a generic Registry pattern: register() decorator, get(name)
lookup, and list_all() enumeration. SchedulerRegistry maps policy names
(e.g. "worst_element") to scheduler classes so a training driver can pick
a policy from configuration.
"""


class Registry:
    """Generic registry base class.

    Subclasses MUST define their own ``_items = {}`` to avoid sharing
    state across registries, and should set ``_registry_label`` for
    descriptive error messages.

    The ``register()`` decorator supports three calling conventions:

    1. ``@MyRegistry.register("name")`` -- name passed as argument.
    2. ``@MyRegistry.register`` -- name read from the class's ``name``
       attribute.
    3. ``@MyRegistry.register()`` -- same as 2, with empty parens.
    """

    _items: dict[str, type] = {}
    _registry_label: str = "item"

    @classmethod
    def register(cls, item_or_name=None):
        """Decorator to register a class.

        Usage:
            @MyRegistry.register("my_name")
            class Foo: ...

            @MyRegistry.register
            class Bar:
                name = "bar"
        """
        # Case 1: @Registry.register("name")
        if isinstance(item_or_name, str):
            name = item_or_name
            def decorator(registered_cls):
                cls._items[name] = registered_cls
                return registered_cls
            return decorator

        # Case 2: @Registry.register applied directly to a class
        if item_or_name is not None and isinstance(item_or_name, type):
            return cls._register_by_attribute(item_or_name)

        # Case 3: @Registry.register()
        if item_or_name is None:
            return cls._register_by_attribute

        raise TypeError(
            f"{cls.__name__}.register() expects a string name, "
            f"a class, or no arguments. Got: {type(item_or_name)}"
        )

    @classmethod
    def _register_by_attribute(cls, registered_cls):
        name = getattr(registered_cls, 'name', None)
        if not isinstance(name, str) or not name:
            raise TypeError(
                f"{registered_cls.__name__} has no string 'name' attribute to register under"
            )
        cls._items[name] = registered_cls
        return registered_cls

    @classmethod
    def get(cls, name: str):
        """Get a registered class by name."""
        if name not in cls._items:
            available = ', '.join(sorted(cls._items.keys()))
            raise ValueError(
                f"Unknown {cls._registry_label}: '{name}'. "
                f"Available: {available}"
            )
        return cls._items[name]

    @classmethod
    def list_all(cls) -> list[str]:
        """List all registered names (sorted)."""
        return sorted(cls._items.keys())


class SchedulerRegistry(Registry):
    """Registry for selection policies.

    Scheduler modules register themselves by their ``name`` attribute and
    are looked up by that name from configuration.
    """

    _items = {}
    _registry_label = "scheduler"

    @classmethod
    def get_all(cls) -> dict[str, type]:
        """Get all registered scheduler classes."""
        return dict(cls._items)
