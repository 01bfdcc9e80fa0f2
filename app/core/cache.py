from __future__ import annotations
import hashlib
import json
from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from app.core.config import settings

# ---------------------------------------------------------------------------
# ETag helpers
# ---------------------------------------------------------------------------

def make_etag_from_bytes(body: bytes) -> str:
    return hashlib.md5(body).hexdigest()


def dumps_deterministic(obj: Any) -> bytes:
    return json.dumps(
        obj,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
    ).encode("utf-8")


# ---------------------------------------------------------------------------
# Header application (Cache-Control, ETag, Vary)
# ---------------------------------------------------------------------------

def _cache_control_value(max_age: Optional[int], swr: Optional[int]) -> str:
    max_age = settings.CACHE_MAX_AGE if max_age is None else max_age
    swr = settings.CACHE_SWR if swr is None else swr
    return f"private, max-age={int(max_age)}, stale-while-revalidate={int(swr)}"


def apply_cache_headers(
    response: Response,
    etag: str,
    *,
    max_age: Optional[int] = None,
    swr: Optional[int] = None,
    vary_authorization: bool = True,
) -> None:
    """
    Set ETag and Cache-Control on the response. Optionally adds Vary: Authorization.
    """
    response.headers["ETag"] = etag
    response.headers["Cache-Control"] = _cache_control_value(max_age, swr)
    if vary_authorization:
        # content depends on the caller's store scope
        response.headers["Vary"] = "Authorization"


# ---------------------------------------------------------------------------
# JSON response with ETag (+ 304 when If-None-Match matches)
# ---------------------------------------------------------------------------

def etag_json(
    request: Request,
    payload: Any,
    *,
    status_code: int = 200,
    max_age: Optional[int] = None,
    swr: Optional[int] = None,
    vary_authorization: bool = True,
) -> Response:
    content = jsonable_encoder(payload)
    body = dumps_deterministic(content)
    etag = make_etag_from_bytes(body)

    inm = request.headers.get("If-None-Match")
    if inm and inm == etag:
        resp = Response(status_code=304)
        apply_cache_headers(resp, etag, max_age=max_age, swr=swr, vary_authorization=vary_authorization)
        return resp

    resp = JSONResponse(status_code=status_code, content=content)
    apply_cache_headers(resp, etag, max_age=max_age, swr=swr, vary_authorization=vary_authorization)
    return resp
