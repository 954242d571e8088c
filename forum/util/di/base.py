"""Provider base class and mock selection."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Infrastructure that tests may swap for an in-memory double
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a mockable component: the base
    declares `__mock_component__` and its subclasses are the production and
    mock implementations, told apart by `__is_mock__`. A provider without
    subclasses is used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this provider has swappable implementations."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Pick the provider class to instantiate.

        Args:
            use_mock: Select the mock implementation of a mockable component

        Returns:
            Provider class (not instantiated)

        Raises:
            ValueError: If the requested implementation does not exist
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
