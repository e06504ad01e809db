from typing import Annotated, Any, Callable, NamedTuple, Optional, Tuple, Type, Union

from pydantic import BaseModel, PlainSerializer, PlainValidator

from tg_methods.exceptions import MalformedValue


class Variant(NamedTuple) :
	name: str
	annotation: Any
	"""the python type held when this variant wins"""
	probe: Callable[[Any], bool]
	"""decides, from shape alone, whether a wire value belongs to this variant"""
	parse: Callable[[Any], Any]
	field: Optional[str] = None
	"""for structural variants, the json field only this variant carries"""


def scalar(name: str, annotation: Any, probe: Callable[[Any], bool], parse: Optional[Callable[[Any], Any]] = None) -> Variant :
	return Variant(
		name=name,
		annotation=annotation,
		probe=probe,
		parse=parse or (lambda x : x),
	)


def structural(model: Type[BaseModel], field: str) -> Variant :
	"""
	a variant made of a json object, recognized by the presence of `field`.
	already built instances of the model are accepted as-is.
	"""
	if field not in model.model_fields :
		raise ValueError(f'{model.__name__} has no field {field!r} to discriminate on.')

	return Variant(
		name=model.__name__,
		annotation=model,
		probe=lambda x : isinstance(x, model) or (isinstance(x, dict) and field in x),
		parse=model.model_validate,
		field=field,
	)


class UntaggedUnion :
	"""
	decodes a wire value that carries no type tag into one of several variants.

	variants are probed in the order given and the first probe that accepts the
	value wins, so the order is part of the wire contract and must not change.
	a value no probe accepts raises MalformedValue.

	structural variants must be mutually exclusive: no two may share a
	discriminating field, and no variant may declare another's discriminating
	field. this is checked here so that adding a variant can't silently change
	which one wins.
	"""

	def __init__(self, name: str, *variants: Variant) -> None :
		if not variants :
			raise ValueError(f'{name} needs at least one variant.')

		structurals: Tuple[Variant, ...] = tuple(filter(lambda x : x.field, variants))

		for variant in structurals :
			for other in structurals :
				if other is variant :
					continue

				if variant.field == other.field or variant.field in other.annotation.model_fields :
					raise ValueError(f'{name}: {variant.name}.{variant.field} does not uniquely identify {variant.name}, {other.name} can carry it too.')

		self.name: str = name
		self.variants: Tuple[Variant, ...] = variants


	def resolve(self, value: Any) -> Any :
		for variant in self.variants :
			if variant.probe(value) :
				return variant.parse(value)

		raise MalformedValue(
			f'{value!r} does not match any variant of {self.name}.',
			union=self.name,
			variants=[v.name for v in self.variants],
		)


	def dump(self, value: Any) -> Any :
		# only the held variant's own fields are emitted, unset ones are left out
		if isinstance(value, BaseModel) :
			return value.model_dump(mode='json', by_alias=True, exclude_none=True)

		return value


	def annotate(self) -> Any :
		"""returns a type usable as a pydantic field annotation that validates and serializes through this union"""
		return Annotated[
			Union[tuple(v.annotation for v in self.variants)],
			PlainValidator(self.resolve),
			PlainSerializer(self.dump, return_type=Any),
		]
