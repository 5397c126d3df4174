from fastapi import APIRouter, HTTPException, status

from cipher_machine.dependencies import SettingsDep
from cipher_machine.models.schemas import (
    EncryptRequest,
    EncryptResponse,
    ErrorResponse,
    ParameterKind,
)
from cipher_machine.services.engines.registry import EngineRegistry
from cipher_machine.services.machine import encrypt

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt a message",
    description="Encrypt a message with one of the classical ciphers.",
)
async def encrypt_message(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt a message with the selected cipher.

    A rejected keyword or shift is reported as a 400 carrying the
    rejection reason and the notification text to show the user.
    """
    # Validate message length
    if len(request.message) > settings.max_message_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error="message_too_long",
                message=f"Message exceeds maximum length of {settings.max_message_length}",
                details={"length": len(request.message)},
            ).model_dump(),
        )

    result = encrypt(
        request.cipher_type,
        request.message,
        keyword=request.keyword,
        shift=request.shift,
    )

    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error=result.rejection.value,
                message=result.notification,
                details={"cipher_type": request.cipher_type.value},
            ).model_dump(),
        )

    engine = EngineRegistry().get_engine(request.cipher_type)
    if engine.parameter is ParameterKind.KEYWORD:
        key_used = request.keyword
    elif engine.parameter is ParameterKind.SHIFT:
        key_used = str(request.shift)
    else:
        key_used = None

    return EncryptResponse(
        ciphertext=result.ciphertext,
        cipher_type=request.cipher_type,
        key_used=key_used,
        notification=result.notification,
        explanation=engine.explain(request.message, result.ciphertext, key_used),
    )
