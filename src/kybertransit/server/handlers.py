"""Request handlers for the transit API."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from ..crypto import transit
from ..errors import CryptoError
from ..keystore import KeyDirectory
from .routes import (
    ROUTE_CREATE_KEY,
    ROUTE_DECRYPT,
    ROUTE_ENCRYPT,
    ROUTE_HEALTH,
    ROUTE_NAME_CREATE_KEY,
    ROUTE_NAME_DECRYPT,
    ROUTE_NAME_ENCRYPT,
    ROUTE_NAME_HEALTH,
)

logger = logging.getLogger("kybertransit")

router = APIRouter()


class InvalidRequestBody(ValueError):
    """Request body is not a JSON object of the expected shape."""


def get_directory(request: Request) -> KeyDirectory:
    """Return the key directory owned by the running application."""
    return request.app.state.directory


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def read_fields(request: Request, *names: str) -> dict[str, str]:
    """Parse a JSON object body and extract string fields.

    Missing and null fields come back as empty strings.

    Raises:
        InvalidRequestBody: If the body is not a JSON object or a field is
            present with a non-string value.
    """
    body = await request.body()
    try:
        data: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestBody(str(e)) from e
    if not isinstance(data, dict):
        raise InvalidRequestBody("body is not a JSON object")

    fields: dict[str, str] = {}
    for name in names:
        value = data.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise InvalidRequestBody(f"field {name!r} must be a string")
        fields[name] = value
    return fields


@router.post(ROUTE_CREATE_KEY, name=ROUTE_NAME_CREATE_KEY)
async def create_key(name: str, directory: KeyDirectory = Depends(get_directory)) -> JSONResponse:
    """Generate a key pair and bind it under ``name``.

    Returns 201 on success, 409 if the name is taken, 500 on generation failure.
    """
    try:
        keypair, exists = await run_in_threadpool(directory.create_key, name)
    except CryptoError as e:
        logger.error("failed to generate key pair: %s", e)
        return error_response(500, "Internal error")
    if exists:
        return error_response(409, "Key already exists")
    return JSONResponse(
        status_code=201,
        content={"message": "Key created", "public_key": keypair.public_key_b64},
    )


@router.post(ROUTE_ENCRYPT, name=ROUTE_NAME_ENCRYPT)
async def encrypt(
    name: str, request: Request, directory: KeyDirectory = Depends(get_directory)
) -> JSONResponse:
    """Seal the request's plaintext under the public key bound to ``name``."""
    keypair = await run_in_threadpool(directory.get_key, name)
    if keypair is None:
        return error_response(404, "Key not found")
    try:
        fields = await read_fields(request, "plaintext")
    except InvalidRequestBody:
        return error_response(400, "Invalid JSON")
    if not fields["plaintext"]:
        return error_response(400, "Missing plaintext")

    try:
        ciphertext, encdata = await run_in_threadpool(
            transit.encrypt,
            keypair.public_key,
            fields["plaintext"].encode("utf-8"),
            directory.scheme,
        )
    except CryptoError as e:
        logger.error("encrypt failed: %s", e)
        return error_response(400, "Encryption failed: invalid input or internal error")
    return JSONResponse(status_code=200, content={"ciphertext": ciphertext, "encdata": encdata})


@router.post(ROUTE_DECRYPT, name=ROUTE_NAME_DECRYPT)
async def decrypt(
    name: str, request: Request, directory: KeyDirectory = Depends(get_directory)
) -> JSONResponse:
    """Unseal a (ciphertext, encdata) pair with the private key bound to ``name``."""
    keypair = await run_in_threadpool(directory.get_key, name)
    if keypair is None:
        return error_response(404, "Key not found")
    try:
        fields = await read_fields(request, "ciphertext", "encdata")
    except InvalidRequestBody:
        return error_response(400, "Invalid JSON")
    if not fields["ciphertext"] or not fields["encdata"]:
        return error_response(400, "Missing ciphertext or encdata")

    try:
        plaintext = await run_in_threadpool(
            transit.decrypt,
            keypair.private_key,
            fields["ciphertext"],
            fields["encdata"],
            directory.scheme,
        )
        text = plaintext.decode("utf-8")
    except (CryptoError, UnicodeDecodeError) as e:
        logger.error("decrypt failed: %s", e)
        return error_response(
            400, "Decryption failed: invalid ciphertext, encdata, or internal error"
        )
    return JSONResponse(status_code=200, content={"plaintext": text})


@router.get(ROUTE_HEALTH, name=ROUTE_NAME_HEALTH)
async def health() -> PlainTextResponse:
    return PlainTextResponse("ok")
