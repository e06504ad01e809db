from os import listdir
from re import Pattern, compile as re_compile

from setuptools import find_packages, setup

from tg_methods import __version__ as tg_version


req_regex: Pattern = re_compile(r'^requirements-(\w+)\.txt$')


def read_requirements(filename: str) :
	with open(filename) as file :
		return list(filter(None, map(str.strip, file.read().split('\n'))))


setup(
	name='tg_methods',
	version=tg_version,
	description='typed request and response models for the telegram bot api',
	long_description=open('readme.md').read(),
	long_description_content_type='text/markdown',
	author='kheina',
	packages=find_packages(exclude=['tests', 'tests.*']),
	install_requires=read_requirements('requirements.txt'),
	python_requires='>=3.9',
	license='Mozilla Public License 2.0',
	extras_require=dict(map(lambda x : (x[1], read_requirements(x[0])), filter(None, map(req_regex.match, listdir())))),
)
