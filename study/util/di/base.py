"""Base class for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence", "storage"]

COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick mocks.

    A class listed in PROVIDERS is either concrete (it has no subclasses) or
    a component base whose subclasses are its production and mock variants.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the production or mock variant of this provider.

        Mock variants live in the test suite and only register themselves as
        subclasses once imported.

        Raises:
            ValueError: If no variant of the requested kind is loaded
        """
        variants = cls.__subclasses__()
        if not variants:
            return cls

        for variant in variants:
            if variant.__is_mock__ == mock:
                return variant

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
