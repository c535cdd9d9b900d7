import logging
from typing import ClassVar

from cipherbench.core.exceptions import CipherErrorKind
from cipherbench.models.schemas import CipherFamily, CipherType, KeyKind
from cipherbench.services.engines.alphabet import Alphabet, russian_alphabet
from cipherbench.services.engines.base import CipherEngine, reject
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.preprocessing.sanitizer import TextSanitizer

logger = logging.getLogger(__name__)


@EngineRegistry.register
class ModAlphaEngine(CipherEngine):
    """
    Modular alphabet cipher engine.

    A Vigenère-style cipher over the 33-letter Russian alphabet. The key
    word is turned into a sequence of letter positions, and each plaintext
    letter is shifted forward by the key position that lines up with it:

        c[i] = (p[i] + k[i mod len(k)]) mod 33

    Encryption is forgiving: anything that is not a Russian letter is
    dropped and lowercase letters are uppercased. Decryption is strict:
    the ciphertext must consist of uppercase alphabet letters only.
    """

    name = "Modular Alphabet Cipher"
    cipher_type = CipherType.MOD_ALPHA
    cipher_family = CipherFamily.POLYALPHABETIC
    key_kind = KeyKind.WORD
    description = (
        "A polyalphabetic cipher over the 33-letter Russian alphabet where each "
        "letter is shifted by the position of the matching letter of a repeating "
        "key word."
    )

    ALPHABET: ClassVar[Alphabet] = russian_alphabet()

    def __init__(self, key: str):
        valid_key = self._get_valid_key(key)

        # A key repeating one letter (or a single letter) is a plain Caesar shift
        if all(c == valid_key[0] for c in valid_key):
            raise reject(logger, CipherErrorKind.WEAK_KEY, {"length": len(valid_key)})

        self._key_text = valid_key
        self._key = tuple(self.ALPHABET.to_indices(valid_key))
        logger.debug("Key accepted, length %d", len(self._key))

    @property
    def key(self) -> str:
        return self._key_text

    @property
    def shifts(self) -> tuple[int, ...]:
        """Key as alphabet positions."""
        return self._key

    def sanitize(self, plaintext: str) -> str:
        return self._get_valid_open_text(plaintext)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using the key word."""
        work = self.ALPHABET.to_indices(self._get_valid_open_text(plaintext))
        size = len(self.ALPHABET)
        key_len = len(self._key)
        for i in range(len(work)):
            work[i] = (work[i] + self._key[i % key_len]) % size
        logger.debug("Encrypted %d letters", len(work))
        return self.ALPHABET.to_text(work)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using the key word."""
        work = self.ALPHABET.to_indices(self._get_valid_cipher_text(ciphertext))
        size = len(self.ALPHABET)
        key_len = len(self._key)
        for i in range(len(work)):
            work[i] = (work[i] + size - self._key[i % key_len]) % size
        logger.debug("Decrypted %d letters", len(work))
        return self.ALPHABET.to_text(work)

    def explain(self, plaintext: str, ciphertext: str) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(
            f"{letter}={shift}" for letter, shift in zip(self._key_text, self._key)
        )
        return (
            f"Modular alphabet cipher with key '{self._key_text}' "
            f"(length {len(self._key)}). Letter shifts: {shift_desc}. "
            f"Each of the {len(plaintext)} letters is shifted forward by the key "
            f"letter at the same position modulo {len(self.ALPHABET)}; decryption "
            f"shifts back."
        )

    def _get_valid_key(self, key: str) -> str:
        if not key:
            raise reject(logger, CipherErrorKind.EMPTY_KEY)

        for pos, c in enumerate(key):
            if c not in self.ALPHABET:
                raise reject(
                    logger,
                    CipherErrorKind.INVALID_KEY_CHARACTER,
                    {"position": pos, "character": c},
                )
        return "".join(self.ALPHABET.to_upper(c) for c in key)

    def _get_valid_open_text(self, text: str) -> str:
        sanitized = TextSanitizer().filter_to(text, self.ALPHABET, self.ALPHABET.to_upper)
        if sanitized.removed_count:
            logger.debug("Dropped %d non-alphabet characters", sanitized.removed_count)
        if not sanitized.text:
            raise reject(logger, CipherErrorKind.EMPTY_PLAINTEXT)
        return sanitized.text

    def _get_valid_cipher_text(self, text: str) -> str:
        if not text:
            raise reject(logger, CipherErrorKind.EMPTY_CIPHERTEXT)

        for pos, c in enumerate(text):
            if not self.ALPHABET.is_upper(c):
                raise reject(
                    logger,
                    CipherErrorKind.INVALID_CIPHERTEXT,
                    {"position": pos, "character": c},
                )
        return text
