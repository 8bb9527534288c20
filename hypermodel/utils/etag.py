import hashlib

from fastapi import Request, Response


def generate_etag(body: bytes) -> str:
    """
    Generate a strong ETag for a rendered document.

    The hash covers the exact bytes sent, so the same model rendered in two
    media types gets two different ETags.
    """
    etag_hash = hashlib.md5(body).hexdigest()
    return f'"{etag_hash}"'


def check_etag_match(request: Request, current_etag: str) -> bool:
    """True when If-None-Match names the rendered document's ETag or is a wildcard."""
    header = request.headers.get('if-none-match')
    if not header:
        return False

    candidates = {candidate.strip() for candidate in header.split(',')}
    return '*' in candidates or current_etag in candidates


def set_etag_headers(response: Response, etag: str) -> None:
    # Clients revalidate on every request.
    response.headers['ETag'] = etag
    response.headers['Cache-Control'] = 'private, max-age=0, must-revalidate'


def handle_conditional_request(request: Request, body: bytes) -> tuple[str, bool]:
    """Return the ETag of body and whether the client already holds those bytes."""
    current_etag = generate_etag(body)
    return current_etag, check_etag_match(request, current_etag)
