from typing import Type

from cipher_machine.core.exceptions import EngineNotFoundError
from cipher_machine.models.schemas import CipherFamily, CipherType
from cipher_machine.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engines and provides lookup by type or family.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine:
        """
        Get an engine instance for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        if not self.is_registered(cipher_type):
            raise EngineNotFoundError(str(cipher_type))

        # Engines are stateless, so one shared instance per type is enough
        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def get_engines_by_family(self, family: CipherFamily) -> list[CipherEngine]:
        """Get all engines belonging to a cipher family."""
        return [
            self.get_engine(cipher_type)
            for cipher_type, engine_class in self._engines.items()
            if engine_class.cipher_family == family
        ]

    def get_all_engines(self) -> list[CipherEngine]:
        """Get all registered engines in enum order."""
        return [
            self.get_engine(cipher_type)
            for cipher_type in CipherType
            if cipher_type in self._engines
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """List all registered cipher types."""
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """Check if a cipher type is registered."""
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipher_machine.services.engines import monoalphabetic  # noqa: F401
    from cipher_machine.services.engines import polyalphabetic  # noqa: F401
    from cipher_machine.services.engines import polygraphic  # noqa: F401


# Load engines when module is imported
_load_engines()
