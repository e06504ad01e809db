from os import environ, listdir, path
from typing import Any, Dict

from ujson import load as json_load


environment: str = environ.get('ENVIRONMENT', 'LOCAL').lower()

env_vars: Dict[str, Any] = { }

# dynamically load local credentials, each file is keyed by environment
if path.isdir('credentials') :
	for filename in listdir('credentials') :
		if not filename.endswith('.json') :
			continue

		with open(path.join('credentials', filename)) as file :
			config: Dict[str, Dict[str, Any]] = json_load(file)

		c: Dict[str, Any] = config.get(environment) or config.get('prod') or { }
		env_vars.update(c)
		del filename, file, config, c

# add the variables from the credentials files to the module
locals().update(env_vars)

# delete extraneous data
del env_vars, environment, environ, listdir, path, json_load
