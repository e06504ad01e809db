from tg_methods.exceptions.base_error import BaseError
from tg_methods.exceptions.telegram_error import ApiError, MalformedResponse, MalformedValue


__all__ = [
	'ApiError',
	'BaseError',
	'MalformedResponse',
	'MalformedValue',
]
