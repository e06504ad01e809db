from typing import Any, Dict, Generic, List, Optional, TypeVar, Union, get_args, get_origin

from pydantic import StrictBool, StrictInt, StrictStr, ValidationError
from ujson import loads

from tg_methods.exceptions import ApiError, MalformedResponse
from tg_methods.models import TelegramModel
from tg_methods.models.telegram import ResponseParameters


T = TypeVar('T')

_strict_scalars: Dict[type, Any] = {
	bool: StrictBool,
	int: StrictInt,
	str: StrictStr,
}


class TelegramResult(TelegramModel, Generic[T]) :
	"""
	the envelope every telegram response is wrapped in.

	NOTE: the failure code is read from `error_code`, the name telegram documents, and no other spelling is accepted.
	"""
	ok: StrictBool
	description: Optional[str] = None
	error_code: Optional[int] = None
	result: Optional[T] = None
	parameters: Optional[ResponseParameters] = None


	def outcome(self) -> Union[T, ApiError] :
		"""
		returns the result of a successful call, or an ApiError describing why telegram refused it.
		:raises MalformedResponse: ok is true but the result is missing
		"""
		if not self.ok :
			# any result sent alongside a failure is ignored
			return ApiError(
				self.error_code or 0,
				self.description or '',
				parameters=self.parameters,
			)

		if self.result is None :
			raise MalformedResponse('telegram responded ok without a result.', envelope=self.model_dump(exclude={ 'result' }))

		return self.result


def decode_response(returns: Any, raw: Union[bytes, str, Dict[str, Any]]) -> Any :
	"""
	decodes a raw response body into the call's outcome: the typed result on success, or an ApiError.
	:param returns: the type the result is validated as
	:param raw: the response body, either undecoded json or an already parsed object
	:raises MalformedResponse: the body isn't a json object shaped like the envelope, or it's ok without a result
	"""
	data: Any = raw

	if isinstance(raw, (bytes, str)) :
		try :
			data = loads(raw)

		except ValueError as e :
			raise MalformedResponse('telegram response is not valid json.', body=_preview(raw)) from e

	if not isinstance(data, dict) :
		raise MalformedResponse('telegram response is not a json object.', body=_preview(raw))

	if data.get('ok') is False and 'result' in data :
		# a failed call is a failure whatever its result looks like
		data = { k: v for k, v in data.items() if k != 'result' }

	try :
		envelope: TelegramResult = TelegramResult[_strict(returns)].model_validate(data)

	except ValidationError as e :
		raise MalformedResponse(f'telegram response could not be decoded: {e}', errors=e.errors(include_url=False, include_context=False)) from e

	return envelope.outcome()


def _preview(raw: Any, length: int = 256) -> str :
	if isinstance(raw, bytes) :
		raw = raw.decode(errors='replace')

	return str(raw)[:length]


def _strict(annotation: Any) -> Any :
	# scalar results are taken as sent, "yes" is not a bool and "42" is not an int
	if isinstance(annotation, type) and annotation in _strict_scalars :
		return _strict_scalars[annotation]

	origin: Any = get_origin(annotation)

	if origin is Union :
		return Union[tuple(map(_strict, get_args(annotation)))]

	if origin is list :
		return List[_strict(get_args(annotation)[0])]

	return annotation
