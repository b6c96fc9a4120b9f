import logging

from localshortener.types import CommandRequest, CommandResponse
from localshortener.commands.context import CommandContext
from localshortener.commands.responses import response_success, response_error
from localshortener.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


def handler(request: CommandRequest, context: CommandContext) -> CommandResponse:
    """Show (or clear) the log entries mirrored into the record store."""
    try:
        if request.get('clear'):
            context.logs.clear()
            return response_success(entries=[], cleared=True)
        entries = context.logs.all()
    except DataStoreError as e:
        logger.error('Failed to access stored logs', extra={'error': str(e)})
        return response_error(str(e), e.error_code)

    return response_success(entries=[entry.to_dict() for entry in entries], cleared=False)
