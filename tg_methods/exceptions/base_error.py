from typing import Any, Dict, Optional, Union
from uuid import UUID, uuid4


class BaseError(Exception) :
	"""
	base for every error this package produces.
	refid ties a log entry to the error that was handed back to the caller,
	logdata is merged into the structured log entry when the error is logged.
	"""

	def __init__(self, message: str, *args: Any, refid: Union[UUID, str, None] = None, logdata: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None :
		Exception.__init__(self, message, *args)
		logdata = dict(logdata or { })
		refid = refid or logdata.pop('refid', None) or uuid4()

		if isinstance(refid, str) :
			if len(refid) != 32 :
				raise ValueError('badly formed refid.')

			refid = UUID(hex=refid)

		self.refid: UUID = refid
		self.logdata: Dict[str, Any] = {
			**logdata,
			**kwargs,
		}
