import logging

from fastapi import APIRouter, HTTPException, status

from cipherbench.core.exceptions import CipherError
from cipherbench.dependencies import SettingsDep
from cipherbench.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from cipherbench.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or plaintext"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the given cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type and key.

    The plaintext is sanitized by the engine: characters outside the
    cipher's domain are dropped before encryption.
    """
    # Validate plaintext length
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    try:
        engine = EngineRegistry().create(request.cipher_type, request.key)
        ciphertext = engine.encrypt(request.text)

        return EncryptResponse(
            ciphertext=ciphertext,
            cipher_type=request.cipher_type,
            key_used=engine.key,
            explanation=engine.explain(engine.sanitize(request.text), ciphertext),
        )

    except CipherError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error=e.kind.value,
                message=e.message,
                details=e.details,
            ).model_dump(),
        )
    except Exception as e:
        logger.exception("Encryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
