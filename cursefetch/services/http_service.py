"""
services/http_service.py – Thin httpx wrapper shared by the API services.

Turns httpx failures into NetworkError and unparseable bodies into
DecodeError so the calling service only has to decide what a decode failure
means for its own endpoint.
"""

import json
import logging
from typing import Any, Callable, Optional, TypeVar

import httpx

from cursefetch.config import ClientSettings
from cursefetch.services.exceptions import DecodeError, NetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_client(settings: ClientSettings) -> httpx.Client:
    """Create the httpx.Client an AddonClient owns."""
    return httpx.Client(
        timeout=settings.timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


def send(
    http: httpx.Client,
    method: str,
    url: str,
    *,
    params: Optional[dict] = None,
    json_body: Optional[dict] = None,
) -> httpx.Response:
    """
    Issue one request and return the fully read response.

    Raises
    ------
    NetworkError
        On transport failure or a non-2xx status.
    """
    logger.debug("%s %s params=%s", method, url, params)
    try:
        response = http.request(method, url, params=params, json=json_body)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NetworkError(
            f"Server returned HTTP {exc.response.status_code} for URL: {url}",
            url=url,
            status_code=exc.response.status_code,
        ) from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise NetworkError(f"Network error while requesting {url}: {exc}", url=url) from exc
    return response


def decode(response: httpx.Response, decoder: Callable[[Any], T]) -> T:
    """
    Parse the response body as JSON and hand it to *decoder*.

    Raises
    ------
    DecodeError
        When the body is not JSON or *decoder* rejects its shape.
    """
    url = str(response.request.url)
    try:
        payload = json.loads(response.content)
    except ValueError as exc:
        raise DecodeError(f"Response from {url} is not valid JSON: {exc}", url=url) from exc
    try:
        return decoder(payload)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Unexpected response shape from {url}: {exc}", url=url) from exc


def decode_list(
    response: httpx.Response,
    decoder: Callable[[Any], list],
    *,
    strict: bool,
) -> list:
    """
    Like decode(), but for endpoints that answer with an array.

    Unless *strict* is set, a malformed body yields an empty list and a
    warning instead of DecodeError.
    """
    try:
        return list(decode(response, decoder))
    except DecodeError as exc:
        if strict:
            raise
        logger.warning("Ignoring malformed response, treating as empty: %s", exc)
        return []
