from fastapi import APIRouter, HTTPException, Query, status

from cipher_machine.core.exceptions import ValidationError
from cipher_machine.models.schemas import (
    CipherInfo,
    CipherListResponse,
    CipherType,
    ErrorResponse,
    KeySquareResponse,
)
from cipher_machine.services.engines.polygraphic.key_square import KeySquare
from cipher_machine.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List available ciphers",
    description="List the supported ciphers and the parameter each one needs.",
)
async def list_ciphers() -> CipherListResponse:
    """List every registered cipher with its metadata."""
    registry = EngineRegistry()

    return CipherListResponse(
        ciphers=[
            CipherInfo(
                cipher_type=engine.cipher_type,
                name=engine.name,
                family=engine.cipher_family,
                parameter=engine.parameter,
                description=engine.description,
            )
            for engine in registry.get_all_engines()
        ]
    )


@router.get(
    "/playfair/key-square",
    response_model=KeySquareResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid keyword"},
    },
    summary="Show a Playfair key square",
)
async def get_key_square(
    keyword: str = Query("", description="Playfair keyword"),
) -> KeySquareResponse:
    """Build the 5x5 key square a keyword produces."""
    engine = EngineRegistry().get_engine(CipherType.PLAYFAIR)

    try:
        engine.validate_key(keyword)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error=e.reason,
                message=e.message,
                details=e.details,
            ).model_dump(),
        )

    square = KeySquare.from_keyword(keyword)
    return KeySquareResponse(keyword=keyword.upper(), rows=square.as_strings())
