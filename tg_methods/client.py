from typing import Any, Awaitable, Callable, Dict, Optional

from aiohttp import ClientTimeout
from aiohttp import request as async_request

from tg_methods.config import credentials
from tg_methods.config.constants import telegram_host, timeout
from tg_methods.exceptions import ApiError, MalformedResponse
from tg_methods.logging import Logger, getLogger
from tg_methods.methods import Method


logger: Logger = getLogger()

Transport = Callable[[str, Dict[str, Any]], Awaitable[bytes]]


class AiohttpTransport :
	"""
	posts a json body to a url and returns the raw response body.
	telegram reports failures inside the response envelope, so the http status is not checked.
	connection errors and timeouts are raised as-is, nothing is retried.
	"""

	def __init__(self, timeout: float = timeout) -> None :
		self._timeout: float = timeout


	async def __call__(self, url: str, body: Dict[str, Any]) -> bytes :
		async with async_request(
			'POST',
			url,
			json=body,
			timeout=ClientTimeout(self._timeout),
			headers={
				'accept': 'application/json',
			},
		) as response :
			return await response.read()


class Client :

	def __init__(
		self,
		token: Optional[str] = None,
		origin: str = telegram_host,
		transport: Optional[Transport] = None,
	) -> None :
		"""
		:param token: the bot's access token. defaults to telegram_access_token from the telegram credentials
		:param origin: scheme and host of the bot api
		:param transport: async function called with (url, body) that performs the request and returns the raw response body. defaults to AiohttpTransport
		"""
		if token is None :
			token = getattr(credentials, 'telegram', { }).get('telegram_access_token')

		if not token :
			raise ValueError('a telegram access token is required, either passed directly or through the telegram credentials.')

		self._token: str = token
		self._origin: str = origin
		self._transport: Transport = transport or AiohttpTransport()


	async def __call__(self, method: Method) -> Any :
		"""
		calls the endpoint the method is bound to.
		:return: the method's decoded result, or an ApiError when telegram reports a failure
		:raises MalformedResponse: the response could not be decoded
		:raises: any error raised by the transport
		"""
		raw: bytes = await self._transport(method.endpoint_url(self._token, self._origin), method.body())

		try :
			outcome: Any = method.decode(raw)

		except MalformedResponse as e :
			logger.exception({
				'message': 'failed to decode response from telegram.',
				'method': method.endpoint,
				'refid': e.refid.hex,
			})
			raise

		if isinstance(outcome, ApiError) :
			logger.warning({
				'message': 'telegram refused the request.',
				'method': method.endpoint,
				'error_code': outcome.error_code,
				'description': outcome.description,
				'refid': outcome.refid.hex,
			})

		return outcome
