from fastapi import APIRouter

from filemorph import __version__
from filemorph.dependencies import SettingsDep
from filemorph.models.schemas import HealthResponse
from filemorph.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
)
async def health(settings: SettingsDep) -> HealthResponse:
    """Report that the service is up and which ciphers it serves."""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=__version__,
        supported_ciphers=EngineRegistry.list_registered(),
    )
