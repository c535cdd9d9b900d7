import logging

from fastapi import APIRouter, HTTPException, status

from cipherbench.core.exceptions import CipherError
from cipherbench.dependencies import SettingsDep
from cipherbench.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from cipherbench.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or ciphertext"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with the given cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a specified cipher type and key.

    Substitution ciphertext is not sanitized: any character outside the
    uppercase alphabet is reported as an error.
    """
    # Validate ciphertext length
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    try:
        engine = EngineRegistry().create(request.cipher_type, request.key)
        plaintext = engine.decrypt(request.text)

        return DecryptResponse(
            plaintext=plaintext,
            cipher_type=request.cipher_type,
            key_used=engine.key,
            explanation=engine.explain(plaintext, request.text),
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
        logger.exception("Decryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
