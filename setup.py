#!/usr/bin/env python3
from __future__ import annotations

import os
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__author__ = 'The isaac-prng authors'
__slogan__ = 'Bit-exact pure Python implementations of the ISAAC and ISAAC64 pseudorandom generators.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering :: Mathematics',
    'Topic :: Software Development :: Testing',
]


def get_config():
    here = pathlib.Path(__file__).parent.absolute()
    sys.path.insert(0, str(here))

    import isaac

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = here / 'README.md'
        if not os.path.exists(filename):
            return isaac.__doc__
        with open(filename, 'r', encoding='UTF8') as README:
            return README.read()

    def get_setup_common() -> dict:
        return dict(
            version=isaac.__version__,
            long_description=get_setup_readme(),
            author=__author__,
            description=__slogan__,
            long_description_content_type='text/markdown',
            python_requires=F'>={__minver__}',
            classifiers=__topics__,
        )

    ppcfg: dict[str, dict] = toml.load(str(here / 'pyproject.toml'))
    tool: dict[str, list[str] | dict[str, list[str]]] = ppcfg['tool']['isaac']
    requirements = list(tool['requires'])
    extras = {key: list(deps) for key, deps in tool['extras'].items()}
    extras['all'] = sorted({dep for deps in extras.values() for dep in deps})

    config = get_setup_common()
    config.update(
        name=isaac.__distribution__,
        packages=setuptools.find_packages(include=('isaac', 'isaac.*')),
        install_requires=requirements,
        extras_require=extras,
        include_package_data=True,
    )

    return config


if __name__ == '__main__':
    setuptools.setup(**get_config())
