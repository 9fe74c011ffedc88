from fastapi import APIRouter

from filemorph.models.schemas import CipherInfo, CiphersResponse
from filemorph.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CiphersResponse,
    summary="List supported ciphers",
    description="List every registered cipher with its family and key requirements.",
)
async def list_ciphers() -> CiphersResponse:
    """Get all supported cipher types."""
    registry = EngineRegistry()

    ciphers = [
        CipherInfo(
            cipher_type=engine.cipher_type,
            cipher_family=engine.cipher_family,
            name=engine.name,
            description=engine.description,
            requires_key=engine.requires_key,
        )
        for engine in registry.get_all_engines()
    ]

    return CiphersResponse(ciphers=ciphers, total=len(ciphers))
