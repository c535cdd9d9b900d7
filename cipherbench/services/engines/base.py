import logging
from abc import ABC, abstractmethod
from typing import Any

from cipherbench.core.exceptions import CipherError, CipherErrorKind
from cipherbench.models.schemas import CipherFamily, CipherType, KeyKind


def reject(
    logger: logging.Logger,
    kind: CipherErrorKind,
    details: dict[str, Any] | None = None,
) -> CipherError:
    """Log a rejected key or text at INFO and build the matching error."""
    logger.info(
        "Rejected input: %s",
        kind.value,
        extra={"error_kind": kind.value},
    )
    return CipherError(kind, details=details)


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is configured with its key at construction and is immutable
    afterwards. Each implementation must provide:
    - encrypt(): Encrypt plaintext with the engine's key
    - decrypt(): Decrypt ciphertext with the engine's key
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_kind: KeyKind

    @property
    @abstractmethod
    def key(self) -> str | int:
        """The validated key, in display form."""
        pass

    @abstractmethod
    def sanitize(self, plaintext: str) -> str:
        """
        Reduce raw plaintext to the letters encrypt() actually transforms.

        Raises:
            CipherError: If nothing usable is left
        """
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext

        Raises:
            CipherError: If the plaintext is rejected
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Plaintext

        Raises:
            CipherError: If the ciphertext is rejected
        """
        pass

    @abstractmethod
    def explain(self, plaintext: str, ciphertext: str) -> str:
        """
        Generate human-readable explanation of the transformation.

        Args:
            plaintext: The (sanitized) plaintext
            ciphertext: The matching ciphertext

        Returns:
            Explanation string
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
