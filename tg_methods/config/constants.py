from enum import Enum, unique
from os import environ
from typing import Any, Dict


@unique
class Environment(Enum) :
	local: str = 'local'
	dev: str = 'dev'
	prod: str = 'prod'
	test: str = 'test'

	def is_local(self) -> bool :
		return self == Environment.local

	def is_dev(self) -> bool :
		return self == Environment.dev

	def is_prod(self) -> bool :
		return self == Environment.prod

	def is_test(self) -> bool :
		return self == Environment.test


environment: Environment = Environment[environ.get('ENVIRONMENT', 'LOCAL').lower()]

test: Dict[str, Any] = {
	'telegram_host': 'https://api.telegram.org',
	'timeout': 5,
}

local: Dict[str, Any] = {
	'telegram_host': 'https://api.telegram.org',
	'timeout': 10,
}

dev: Dict[str, Any] = {
	'telegram_host': 'https://api.telegram.org',
	'timeout': 30,
}

prod: Dict[str, Any] = {
	'telegram_host': 'https://api.telegram.org',
	'timeout': 30,
}

assert test.keys() == local.keys() == dev.keys() == prod.keys()

env_vars: Dict[str, Any] = locals()[environment.name]

telegram_host: str = env_vars['telegram_host']
timeout: float = env_vars['timeout']

# delete extraneous data
del test, local, dev, prod, env_vars, environ
