from typing import Any, Iterator


def getFullyQualifiedClassName(obj: object) -> str :
	cls: type = obj.__class__
	module = getattr(cls, '__module__', None)
	if module and module != 'builtins' :
		return f'{module}.{cls.__name__}'
	return cls.__name__


def flatten(it: Any) -> Iterator[Any] :
	"""yields every leaf value of nested lists, tuples, sets and dict values"""
	if isinstance(it, (tuple, list, set)) :
		for i in it :
			yield from flatten(i)

	elif isinstance(it, dict) :
		for v in it.values() :
			yield from flatten(v)

	else :
		yield it
