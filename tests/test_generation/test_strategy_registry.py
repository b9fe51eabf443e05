"""Tests for strategy registration and discovery."""

import pytest

from periodization_engine.exceptions import PeriodizationError, UnknownStrategyError
from periodization_engine.models.enums import PeriodizationStrategy
from periodization_engine.registry import StrategyRegistry
from periodization_engine.strategies.base import PhaseStrategy
from periodization_engine.strategies.linear import LinearStrategy


class TestStrategyRegistry:
    def test_discovers_all_models(self) -> None:
        registry = StrategyRegistry()
        registry.discover_strategies()
        assert registry.strategies == sorted(PeriodizationStrategy)

    def test_discovered_strategies_are_concrete(self) -> None:
        registry = StrategyRegistry()
        registry.discover_strategies()
        for model in registry.strategies:
            strategy = registry.get(model)
            assert isinstance(strategy, PhaseStrategy)
            assert strategy.strategy == model

    def test_empty_registry_raises_unknown_strategy(self) -> None:
        registry = StrategyRegistry()
        with pytest.raises(UnknownStrategyError):
            registry.get(PeriodizationStrategy.LINEAR)

    def test_unknown_strategy_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            StrategyRegistry().get(PeriodizationStrategy.BLOCK)
        with pytest.raises(PeriodizationError):
            StrategyRegistry().get(PeriodizationStrategy.BLOCK)

    def test_register_replaces_existing(self) -> None:
        registry = StrategyRegistry()
        first, second = LinearStrategy(), LinearStrategy()
        registry.register(first)
        registry.register(second)
        assert registry.get(PeriodizationStrategy.LINEAR) is second
        assert registry.strategies == [PeriodizationStrategy.LINEAR]
