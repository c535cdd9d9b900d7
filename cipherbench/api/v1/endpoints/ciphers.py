from fastapi import APIRouter

from cipherbench.models.schemas import CipherInfo
from cipherbench.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered cipher engines and the kind of key each takes.",
)
async def list_ciphers() -> list[CipherInfo]:
    """List registered cipher engines."""
    return EngineRegistry().describe_all()
