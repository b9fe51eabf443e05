"""Strategy registry with auto-discovery of PhaseStrategy subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from periodization_engine.exceptions import UnknownStrategyError
from periodization_engine.models.enums import PeriodizationStrategy
from periodization_engine.strategies.base import PhaseStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Discovers and manages PhaseStrategy implementations.

    Auto-discovers strategies by scanning the strategies/ package for
    concrete subclasses of PhaseStrategy. A new periodization model is added
    by placing a module there; the generator, resolver and calculator need
    no changes.
    """

    def __init__(self) -> None:
        self._strategies: dict[PeriodizationStrategy, PhaseStrategy] = {}

    def discover_strategies(self) -> None:
        """Scan the strategies package and register every PhaseStrategy subclass."""
        import periodization_engine.strategies as strategies_pkg

        strategies_path = Path(strategies_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(strategies_pkg.__name__, str(strategies_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, PhaseStrategy)
                    and attr is not PhaseStrategy
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, strategy: PhaseStrategy) -> None:
        """Register a strategy instance, replacing any for the same model."""
        logger.debug("Registering %s for %s", type(strategy).__name__, strategy.strategy.name)
        self._strategies[strategy.strategy] = strategy

    def get(self, strategy: PeriodizationStrategy) -> PhaseStrategy:
        """Return the strategy for a periodization model.

        Raises:
            UnknownStrategyError: If nothing is registered for *strategy*.
        """
        try:
            return self._strategies[strategy]
        except KeyError:
            raise UnknownStrategyError(
                f"No strategy registered for {strategy!r}"
            ) from None

    @property
    def strategies(self) -> list[PeriodizationStrategy]:
        """List all registered periodization models."""
        return sorted(self._strategies)
