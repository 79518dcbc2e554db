"""Unit tests for provider selection."""

import pytest

from cinema.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from cinema.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )


class TestBuildTestContainer:
    def test_unknown_component_rejected(self):
        with pytest.raises(DependencyInjectionError) as exc_info:
            build_test_container(unmock={"search"})

        assert exc_info.value.component == "search"
