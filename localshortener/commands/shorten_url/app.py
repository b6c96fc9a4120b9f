import logging

from localshortener.types import CommandRequest, CommandResponse
from localshortener.commands.context import CommandContext
from localshortener.commands.responses import response_success, response_error, short_url_body
from localshortener.commands.shorten_url.constants import MISSING_URLS, MALFORMED_URL_ENTRY, SHORTEN_SUCCESS, SHORTEN_FAILED
from localshortener.services import ShortenRequest


logger = logging.getLogger(__name__)


def handler(request: CommandRequest, context: CommandContext) -> CommandResponse:
    """Shorten up to five URLs at once

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract URL entries from the request
    - Step 2: Validate every entry and create short URLs (via the registry)
    - Step 3: Respond with the created short URLs

    Request:
        urls: list of entries, each with
            original_url: URL to shorten (required)
            validity: minutes until expiry (optional, default 30)
            shortcode: custom shortcode (optional)

    Responses:
        success:
            urls: created records, each with its rendered `shortUrl`
        error:
            errorCode: MISSING_URLS, MALFORMED_URL_ENTRY or the registry's error code
            failedIndex: position of the entry which failed
            urls: records created before the failure

    Example:
        >>> response = handler({'urls': [{'original_url': 'https://example.com'}]}, context)
        >>> response['status']
        'success'
        >>> response['urls'][0]['shortUrl']
        '/Xq3bT9'
    """
    # 1- Extract URL entries from the request
    entries = request.get('urls')
    if not isinstance(entries, list) or not entries:
        logger.info('Missing URLs in request.', extra={'event': MISSING_URLS})
        return response_error("missing 'urls' in request", MISSING_URLS)

    requests = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or 'original_url' not in entry:
            logger.info('Malformed URL entry in request.', extra={'event': MALFORMED_URL_ENTRY, 'index': index})
            return response_error(f"entry {index} is missing 'original_url'", MALFORMED_URL_ENTRY, failedIndex=index)
        requests.append(
            ShortenRequest(
                original_url=entry['original_url'],
                validity_minutes=entry.get('validity'),
                custom_shortcode=entry.get('shortcode'),
            )
        )

    # 2- Validate and create short URLs
    result = context.registry.shorten_many(requests)
    created = [short_url_body(short_url, context.base_url) for short_url in result.records]
    if not result.success:
        logger.info(
            'URL shortening failed.',
            extra={'event': SHORTEN_FAILED, 'failed_index': result.failed_index, 'error_code': result.error.error_code},
        )
        return response_error(str(result.error), result.error.error_code, failedIndex=result.failed_index, urls=created)

    # 3- Respond with the created short URLs
    logger.info('URLs shortened successfully.', extra={'event': SHORTEN_SUCCESS, 'count': len(created)})
    return response_success(urls=created)
