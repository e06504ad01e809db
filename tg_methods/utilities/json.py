from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict
from uuid import UUID

from pydantic import BaseModel
from ujson import dumps


_conversions: Dict[type, Callable] = {
	datetime: lambda x : x.isoformat(),
	tuple: lambda x : list(map(_convert_item, x)),
	set: lambda x : list(map(_convert_item, x)),
	list: lambda x : list(map(_convert_item, x)),
	dict: lambda x : dict(zip(map(str, x.keys()), map(_convert_item, x.values()))),
	Enum: lambda x : x.value,
	UUID: lambda x : x.hex,
	bytes: lambda x : x.hex(),
	BaseModel: lambda x : x.model_dump(mode='json', by_alias=True, exclude_none=True),
}


def _convert_item(item: Any) -> Any :
	if isinstance(item, str) :
		return item
	for cls in type(item).__mro__ :
		if cls in _conversions :
			return _conversions[cls](item)
	return item


def json_safe(item: Any) -> Any :
	"""converts models, enums, uuids and datetimes into plain json types, recursively"""
	return _convert_item(item)


def json_stream(item: Any, indent: int = 0) -> str :
	return dumps(_convert_item(item), indent=indent)
