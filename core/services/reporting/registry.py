"""
Report Document Registry

Central registry for resolving document types to the context builders that
prepare their templates.
"""

from typing import Callable

from core.printing.interfaces import IContextBuilder


class ReportRegistry:
    """Registry for report context builders"""

    def __init__(self):
        self._builders: dict[str, Callable[[], IContextBuilder]] = {}

    def register(self, report_key: str, builder_factory: Callable[[], IContextBuilder]) -> None:
        """
        Register a report context builder.

        Args:
            report_key: Unique identifier for the document type (e.g., 'ventas')
            builder_factory: Factory function that returns a builder instance
        """
        if report_key in self._builders:
            raise ValueError(f"Report '{report_key}' is already registered")
        self._builders[report_key] = builder_factory

    def get_builder(self, report_key: str) -> IContextBuilder:
        """
        Get a context builder by its document type.

        Args:
            report_key: The document type to look up

        Returns:
            A new builder instance

        Raises:
            KeyError: If the document type is not registered
        """
        if report_key not in self._builders:
            raise KeyError(f"Report '{report_key}' not found")
        return self._builders[report_key]()

    def is_registered(self, report_key: str) -> bool:
        """Check if a document type is registered"""
        return report_key in self._builders

    def list_reports(self) -> list[str]:
        """List all registered document types"""
        return list(self._builders.keys())


# Registry shared by the report orchestrators; populated by reports/__init__.py
_registry = ReportRegistry()


def register_report(report_key: str, builder_factory: Callable[[], IContextBuilder]) -> None:
    """Register a context builder in the global registry"""
    _registry.register(report_key, builder_factory)


def get_builder(report_key: str) -> IContextBuilder:
    """Get a context builder from the global registry"""
    return _registry.get_builder(report_key)


def is_registered(report_key: str) -> bool:
    """Check if a document type is registered"""
    return _registry.is_registered(report_key)


def list_reports() -> list[str]:
    """List all registered document types"""
    return _registry.list_reports()
