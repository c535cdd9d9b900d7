import logging
from typing import Any, Type

from cipherbench.core.exceptions import CipherError, CipherErrorKind, EngineNotFoundError
from cipherbench.models.schemas import CipherFamily, CipherInfo, CipherType, KeyKind
from cipherbench.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engine classes and builds keyed instances.
    Engines carry their key from construction, so instances are never
    cached here.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class ModAlphaEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        if cipher_type not in self._engines:
            raise EngineNotFoundError(getattr(cipher_type, "value", str(cipher_type)))
        return self._engines[cipher_type]

    def create(self, cipher_type: CipherType, key: Any) -> CipherEngine:
        """
        Build an engine for the specified cipher type and key.

        Args:
            cipher_type: The type of cipher
            key: Key accepted by the engine's constructor

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: If no engine is registered for the type
            CipherError: If the engine rejects the key
        """
        engine_class = self.get_engine_class(cipher_type)
        engine = engine_class(self._parse_key(engine_class.key_kind, key))
        logger.debug("Built %r", engine, extra={"cipher_type": engine_class.cipher_type.value})
        return engine

    def get_engines_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """
        Get all engine classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine classes
        """
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def describe_all(self) -> list[CipherInfo]:
        """Describe every registered engine."""
        return [
            CipherInfo(
                cipher_type=engine_class.cipher_type,
                cipher_family=engine_class.cipher_family,
                name=engine_class.name,
                description=engine_class.description,
                key_kind=engine_class.key_kind,
            )
            for engine_class in self._engines.values()
        ]

    def _parse_key(self, key_kind: KeyKind, key: Any) -> Any:
        """Coerce a loosely typed key (e.g. from JSON) to what the engine takes."""
        if key_kind == KeyKind.WORD:
            return key if isinstance(key, str) else str(key)

        if isinstance(key, str):
            try:
                return int(key.strip())
            except ValueError:
                raise CipherError(
                    CipherErrorKind.INVALID_COLUMN_COUNT,
                    details={"columns": key},
                ) from None
        return key

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipherbench.services.engines.substitution import mod_alpha  # noqa: F401
    from cipherbench.services.engines.transposition import table_route  # noqa: F401


# Load engines when module is imported
_load_engines()
