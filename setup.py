import setuptools

import histexpand.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='histexpand',
    version=histexpand.version.VERSION,
    description='Command history with bang-history reference expansion',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(include=['histexpand']),
    scripts=['bin/histexpand'],
    install_requires=['prompt_toolkit'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux'
    ],
    python_requires='>=3.8'
)
