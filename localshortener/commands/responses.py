from typing import Any

from localshortener.types import CommandResponse
from localshortener.models import ShortURLModel
from localshortener.utils.helpers import get_short_url


SUCCESS = 'success'
ERROR = 'error'


def response_success(**payload: Any) -> CommandResponse:
    return {'status': SUCCESS, **payload}


def response_error(message: str, error_code: str, **payload: Any) -> CommandResponse:
    return {'status': ERROR, 'errorCode': error_code, 'message': message, **payload}


def short_url_body(short_url: ShortURLModel, base_url: str | None) -> dict[str, Any]:
    return {**short_url.to_dict(), 'shortUrl': get_short_url(short_url.shortcode, base_url)}
