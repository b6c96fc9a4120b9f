import logging

from localshortener.constants import Defaults
from localshortener.types import CommandRequest, CommandResponse
from localshortener.commands.context import CommandContext
from localshortener.commands.responses import response_success, response_error
from localshortener.commands.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    REDIRECT_SUCCESS,
)
from localshortener.utils.helpers import to_iso8601


logger = logging.getLogger(__name__)


def handler(request: CommandRequest, context: CommandContext) -> CommandResponse:
    """Resolve a shortcode to its original URL

    This handler follows this procedure to resolve short URLs:
    - Step 1: Extract shortcode from request
    - Step 2: Get short URL record (via the registry)
    - Step 3: Refuse expired short URLs
    - Step 4: Record the click
    - Step 5: Respond with the redirect location

    Only successful resolutions are recorded as clicks.

    Responses:
        success:
            location: original URL to navigate to
            shortcode: resolved shortcode
            clickId: id of the recorded click (None if it couldn't be saved)
        error:
            errorCode: MISSING_SHORTCODE, SHORT_URL_NOT_FOUND or SHORT_URL_EXPIRED

    Example:
        >>> response = handler({'shortcode': 'Xq3bT9'}, context)
        >>> response['location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request
    shortcode = request.get('shortcode')
    if not shortcode:
        logger.info('Missing shortcode in request.', extra={'event': MISSING_SHORTCODE})
        return response_error('Invalid short URL', MISSING_SHORTCODE)
    logger.info('Handling redirect request', extra={'shortcode': shortcode})

    # 2- Get short URL record
    short_url = context.registry.get_url(shortcode)
    if short_url is None:
        logger.warning('Short URL not found', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_error('Short URL not found', SHORT_URL_NOT_FOUND, shortcode=shortcode)

    # 3- Refuse expired short URLs
    if context.registry.is_expired(short_url):
        logger.warning('Attempt to access expired URL', extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED})
        return response_error(
            'This short URL has expired',
            SHORT_URL_EXPIRED,
            shortcode=shortcode,
            expiresAt=to_iso8601(short_url.expires_at),
        )

    # 4- Record the click
    click_id = context.recorder.record_click(
        shortcode,
        source=request.get('source') or Defaults.CLICK_SOURCE,
        location=request.get('location') or Defaults.CLICK_LOCATION,
    )

    # 5- Respond with the redirect location
    logger.info(
        'Redirecting to original URL',
        extra={'shortcode': shortcode, 'original_url': short_url.original_url, 'event': REDIRECT_SUCCESS},
    )
    return response_success(location=short_url.original_url, shortcode=shortcode, clickId=click_id)
