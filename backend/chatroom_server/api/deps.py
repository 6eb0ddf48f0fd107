# chatroom_server/api/deps.py
import binascii
import logging
from base64 import b64decode

from fastapi import Depends, Header, Request
from fastapi.security.utils import get_authorization_scheme_param
from tortoise.exceptions import BaseORMException

from chatroom_server.core.db import Store
from chatroom_server.core.errors import AuthError
from chatroom_server.repositories import users

logger = logging.getLogger("uvicorn.error")

def get_store(request: Request) -> Store:
    """
    FastAPI dependency returning the store handle opened at startup.

    Raises:
        RuntimeError: If the application was started without opening the store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store is not initialized. Call open_store() on startup.")
    return store

def parse_basic_credentials(authorization: str | None) -> tuple[str, str]:
    """
    Split an `Authorization: Basic <base64(username:password)>` header.

    The decoded pair is read as UTF-8, so accounts with non-ASCII usernames
    or passwords can authenticate.

    Raises:
        AuthError (401): If the header is absent, not Basic, or not decodable (AUTH_REQUIRED)
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic" or not param:
        raise AuthError("Credentials required", code="AUTH_REQUIRED")
    try:
        decoded = b64decode(param, validate=True).decode("utf-8")
    except (ValueError, UnicodeDecodeError, binascii.Error):
        raise AuthError("Malformed Basic credentials", code="AUTH_REQUIRED")
    username, separator, password = decoded.partition(":")
    if not separator or not username:
        raise AuthError("Malformed Basic credentials", code="AUTH_REQUIRED")
    return username, password

async def require_credentials(
    authorization: str | None = Header(default=None),
    store: Store = Depends(get_store),
) -> str:
    """
    FastAPI dependency gating mutating chatroom routes.

    Reads the username/password embedded in the `Authorization: Basic ...`
    header and checks them against the stored account. The check looks at
    nothing but the current request, so there is no session to forge or expire.

    Returns:
        str: The verified username

    Raises:
        AuthError (401): If credentials are missing or malformed (AUTH_REQUIRED)
        AuthError (401): If the user is unknown or the password is wrong
            (AUTH_INVALID_CREDENTIALS); the two cases are indistinguishable

    Usage:
        @router.post("", dependencies=[Depends(require_credentials)])
    """
    username, password = parse_basic_credentials(authorization)

    try:
        ok = await users.verify_credentials(store, username, password)
    except BaseORMException:
        logger.exception("[auth] store error while verifying username=%s", username)
        ok = False

    if not ok:
        logger.warning("[auth] rejected credentials for username=%s", username)
        raise AuthError("Incorrect username or password")
    return username
