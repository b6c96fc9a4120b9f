import logging

from localshortener.types import CommandRequest, CommandResponse
from localshortener.commands.context import CommandContext
from localshortener.commands.responses import response_success, short_url_body


logger = logging.getLogger(__name__)


def handler(request: CommandRequest, context: CommandContext) -> CommandResponse:
    """Report every short URL with its expiry state and click events.

    Click events recorded under shortcodes without a stored record are
    reported separately under `orphanClicks`.
    """
    urls = context.registry.get_all_urls()
    clicks = context.recorder.get_clicks()

    report = []
    for short_url in urls:
        events = clicks.get(short_url.shortcode, [])
        report.append(
            {
                **short_url_body(short_url, context.base_url),
                'expired': context.registry.is_expired(short_url),
                'totalClicks': len(events),
                'clickEvents': [event.to_dict() for event in events],
            }
        )

    known = {short_url.shortcode for short_url in urls}
    orphans = {shortcode: [event.to_dict() for event in events] for shortcode, events in clicks.items() if shortcode not in known}

    logger.info('Loaded statistics data', extra={'url_count': len(urls), 'click_data_count': len(clicks)})
    return response_success(
        urls=report,
        totalUrls=len(report),
        totalClicks=sum(len(events) for events in clicks.values()),
        orphanClicks=orphans,
    )
