import logging

from fastapi import APIRouter, HTTPException, status

from filemorph.core.exceptions import EngineNotFoundError, ValidationError
from filemorph.dependencies import SettingsDep
from filemorph.models.schemas import CipherRequest, CipherResponse, ErrorResponse, Operation
from filemorph.services.dispatch import CipherDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt text",
    description="Decode text with one of the supported classical ciphers.",
)
async def decrypt_text(
    request: CipherRequest,
    settings: SettingsDep,
) -> CipherResponse:
    """
    Decrypt text with a specified cipher type.

    The key must match the one used for encryption; zigzag transposition
    falls back to the configured number of rails.
    """
    dispatcher = CipherDispatcher(settings)

    try:
        result = dispatcher.run(
            request.cipher_type,
            Operation.DECODE,
            request.text,
            request.key,
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Decryption failed for %s", request.cipher_type)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )

    return CipherResponse(
        cipher_type=result.cipher_type,
        operation=result.operation,
        text=result.text,
        result=result.result,
        key_used=result.key_used,
        explanation=result.explanation,
    )
