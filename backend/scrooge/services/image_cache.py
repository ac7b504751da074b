"""
Fetch the mascot image once and keep a local copy in the static directory.

Failures are logged and ignored; the app works without the image.
"""
import logging
import os
from typing import Optional
import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0"


def cache_image(url: str, path: str, transport: Optional[httpx.BaseTransport] = None) -> bool:
    """
    Download ``url`` to ``path`` unless the file is already there.

    Args:
        url: Remote image URL (redirects are followed)
        path: Local file to write
        transport: Optional httpx transport, used by tests

    Returns:
        True if the image is available locally afterwards
    """
    if os.path.exists(path):
        logger.info(f"Image already cached at {path}")
        return True

    logger.info(f"Fetching image from {url}")
    try:
        with httpx.Client(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=10.0,
            transport=transport
        ) as client:
            response = client.get(url)
    except httpx.HTTPError as e:
        logger.error(f"Error fetching image: {e}")
        return False

    if response.status_code != 200:
        logger.error(f"Failed to fetch image, status: {response.status_code}")
        return False

    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "wb") as handle:
            handle.write(response.content)
    except OSError as e:
        logger.error(f"Error saving image to {path}: {e}")
        if os.path.exists(path):
            os.unlink(path)
        return False

    logger.info(f"Image cached successfully at {path}")
    return True
