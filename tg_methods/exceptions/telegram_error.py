from typing import Any, Optional

from tg_methods.exceptions.base_error import BaseError


class MalformedResponse(BaseError) :
	"""the response envelope could not be decoded, or broke the envelope's own rules"""
	pass


class MalformedValue(MalformedResponse, ValueError) :
	"""a wire value matched none of the variants of an untagged union"""
	pass


class ApiError(BaseError) :
	"""
	a failure reported by telegram itself (ok == false).
	these are returned as the outcome of a call rather than raised, callers branch on them.
	"""

	def __init__(self, error_code: int, description: str, parameters: Optional[Any] = None, **kwargs: Any) -> None :
		BaseError.__init__(self, f'[ERROR {error_code}] {description}', error_code=error_code, description=description, **kwargs)
		self.error_code: int = error_code
		self.description: str = description
		self.parameters = parameters


	def __str__(self) -> str :
		return f'[ERROR {self.error_code}] {self.description}'


	def __repr__(self) -> str :
		return f'{self.__class__.__name__}(error_code={self.error_code!r}, description={self.description!r})'


	def __eq__(self, other: Any) -> bool :
		if not isinstance(other, ApiError) :
			return NotImplemented

		return (self.error_code, self.description) == (other.error_code, other.description)


	def __hash__(self) -> int :
		return hash((self.error_code, self.description))
