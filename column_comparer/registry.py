"""
Column Comparer - Provider Registry

WHAT THIS FILE DOES:
    Central registry that stores the available tabular data providers and
    creates instances of them on demand, either by implementation name or by
    the extension of the file to open.

HOW IT WORKS:
    1. Providers are registered with a name and the extensions they read:
       registry.register_provider('openpyxl', OpenpyxlWorkbookProvider, ['.xlsx', '.xlsm'])
    2. The CLI asks for the provider matching the input file:
       provider = registry.provider_for_path(Path('book.xlsx'), {})

GLOBAL INSTANCE:
    This file exports a singleton 'registry' instance. Call
    register_all_components() once before using it.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Type

from .interfaces import WorkbookProviderInterface


class ProviderRegistry:
    """Central registry for tabular data provider implementations"""

    def __init__(self):
        self._providers: Dict[str, Type[WorkbookProviderInterface]] = {}
        self._extensions: Dict[str, str] = {}

    def register_provider(
        self,
        name: str,
        provider_class: Type[WorkbookProviderInterface],
        extensions: Iterable[str] = (),
    ):
        """Register a provider implementation and the file extensions it handles"""
        self._providers[name] = provider_class
        for extension in extensions:
            self._extensions[extension.lower()] = name

    def available(self) -> List[str]:
        """Names of all registered providers"""
        return list(self._providers.keys())

    def create_provider(self, implementation: str, config: dict) -> WorkbookProviderInterface:
        """Create provider instance"""
        if implementation not in self._providers:
            raise ValueError(
                f"Unknown provider implementation '{implementation}'. "
                f"Available: {self.available()}"
            )
        return self._providers[implementation](config)

    def provider_for_path(
        self,
        path: Path,
        config: dict,
        default: Optional[str] = None,
    ) -> WorkbookProviderInterface:
        """
        Create the provider registered for a file's extension.

        Args:
            path: File to be opened
            config: Provider configuration
            default: Implementation to use for unregistered extensions

        Returns:
            Provider instance

        Raises:
            ValueError: If the extension is unknown and there is no default
        """
        implementation = self._extensions.get(Path(path).suffix.lower(), default)
        if implementation is None:
            raise ValueError(
                f"No provider for '{Path(path).suffix}' files. "
                f"Known extensions: {sorted(self._extensions.keys())}"
            )
        return self.create_provider(implementation, config)


# Global registry instance
registry = ProviderRegistry()


def register_all_components(target: Optional[ProviderRegistry] = None) -> ProviderRegistry:
    """Register the built-in providers (safe to call more than once)"""
    from .components.provider import CsvWorkbookProvider, OpenpyxlWorkbookProvider

    target = registry if target is None else target
    target.register_provider(
        'openpyxl',
        OpenpyxlWorkbookProvider,
        OpenpyxlWorkbookProvider.SUPPORTED_EXTENSIONS,
    )
    target.register_provider('csv', CsvWorkbookProvider, ['.csv'])
    return target
