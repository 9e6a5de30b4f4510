"""Adapter Registry — Maps adapter names to adapter classes.

Tables refer to adapters by name (``"elasticsearch"``) so that the
adapter type can come from configuration. The registry creates and
configures a fresh adapter for each table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tablesift.adapters.base.adapter import AbstractAdapter
from tablesift.exceptions import AdapterNotFoundError

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Registry of data table adapter classes.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register("elasticsearch", ElasticsearchAdapter)
        >>> adapter = registry.create("elasticsearch", {"client": {...}, "index": "docs"})
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[AbstractAdapter]] = {}

    def register(self, name: str, adapter_class: type[AbstractAdapter]) -> None:
        """Register an adapter class.

        Args:
            name: Unique name for this adapter type.
            adapter_class: The adapter class to register.
        """
        if name in self._classes:
            logger.warning("Overwriting existing adapter registration: %s", name)
        self._classes[name] = adapter_class
        logger.debug("Registered adapter: %s", name)

    def get(self, name: str) -> type[AbstractAdapter]:
        """Get a registered adapter class by name.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        if name not in self._classes:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._classes.keys())}"
            )
        return self._classes[name]

    def create(self, name: str, options: Mapping[str, Any]) -> AbstractAdapter:
        """Create and configure an adapter instance.

        Args:
            name: The registered adapter name.
            options: Options passed to the adapter's ``configure()``.

        Returns:
            The configured adapter.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
            ConfigurationError: If the adapter rejects the options.
        """
        adapter = self.get(name)()
        adapter.configure(options)
        logger.debug("Created adapter: %s", name)
        return adapter

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._classes.keys())


def default_registry() -> AdapterRegistry:
    """Return a registry with the built-in adapters registered."""
    from tablesift.adapters.elasticsearch.adapter import ElasticsearchAdapter

    registry = AdapterRegistry()
    registry.register("elasticsearch", ElasticsearchAdapter)
    return registry
