"""Provider base shared by production and test wiring."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable in-memory implementation for tests.
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider carrying the metadata used to pick implementations.

    A mockable component declares ``__mock_component__`` on an abstract base
    and gets one production and one mock subclass; the mock sets
    ``__is_mock__``. Providers without subclasses are used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def mockable_component(cls) -> Component | None:
        """Component name when this base has swappable implementations."""
        if cls.__mock_component__ and cls.__subclasses__():
            return cls.__mock_component__
        return None
