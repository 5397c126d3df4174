from fastapi import APIRouter

from cipher_machine.api.v1.endpoints import ciphers, encrypt

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)
