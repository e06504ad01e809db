import logging
from time import asctime, localtime
from traceback import format_tb
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from google.auth import compute_engine
from google.cloud import logging as google_logging

from tg_methods.utilities import flatten, getFullyQualifiedClassName
from tg_methods.utilities.json import json_safe, json_stream


class TerminalAgent :

	loggable: Tuple[type, ...] = (str, int, float, bool, type(None))

	def log_text(self, log: str, severity: str = 'INFO') -> None :
		print(f'[{asctime(localtime())}]', severity, '>', log)

	def log_struct(self, log: Dict[str, Any], severity: str = 'INFO') -> None :
		for i in flatten(log) :
			if not isinstance(i, TerminalAgent.loggable) :
				print('WARNING:', i, 'may not be able to be logged.')
		print(f'[{asctime(localtime())}]', severity, '>', json_stream(log, indent=4))


class LogHandler(logging.Handler) :

	# flipped off after the first failure to reach cloud logging, or by tests
	logging_available: bool = True

	def __init__(self, name: str, *args: Any, structs: Tuple[type, ...] = (dict, list, tuple), **kwargs: Any) -> None :
		logging.Handler.__init__(self, *args, **kwargs)
		self._structs: Tuple[type, ...] = structs
		self.agent: Any

		if not LogHandler.logging_available :
			self.agent = TerminalAgent()
			return

		try :
			credentials: compute_engine.Credentials = compute_engine.Credentials()
			client: google_logging.Client = google_logging.Client(credentials=credentials)
			self.agent = client.logger(name)

		except Exception :
			LogHandler.logging_available = False
			self.agent = TerminalAgent()


	def emit(self, record: logging.LogRecord) -> None :
		if record.args and isinstance(record.msg, str) :
			record.msg = record.msg % record.args

		if record.exc_info :
			e: BaseException = record.exc_info[1]
			refid = getattr(e, 'refid', None)
			errorinfo: Dict[str, Any] = {
				'error': f'{getFullyQualifiedClassName(e)}: {e}',
				'stacktrace': list(map(str.strip, format_tb(record.exc_info[2]))),
				'refid': refid.hex if refid else None,
				**json_safe(getattr(e, 'logdata', { })),
			}

			if isinstance(record.msg, dict) :
				errorinfo.update(json_safe(record.msg))

			else :
				errorinfo['message'] = record.msg

			self.agent.log_struct(errorinfo, severity=record.levelname)

		elif isinstance(record.msg, self._structs) :
			self.agent.log_struct(json_safe(record.msg), severity=record.levelname)

		else :
			self.agent.log_text(str(record.msg), severity=record.levelname)


Logger: type = logging.Logger


def getLogger(name: Optional[str] = None, level: int = logging.INFO, filter: Callable = lambda x : x, disable: Iterable[str] = ()) -> Logger :
	name = name or 'tg_methods'

	for logger_name in disable :
		logging.getLogger(logger_name).propagate = False

	logging.root.setLevel(logging.NOTSET)
	handler: LogHandler = LogHandler(name, level=level)
	handler.addFilter(filter)
	logging.root.handlers.clear()
	logging.root.addHandler(handler)
	return logging.getLogger(name)
