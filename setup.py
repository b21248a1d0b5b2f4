import setuptools

from version import major, minor, revision


def _get_long_description() -> str:
    """
    Returns long description from `README.md` if possible, else 'EPI gradient waveform design'.

    Returns
    -------
    str
        Long description of epigrad project.
    """
    try:  # Unicode decode error on Windows
        with open('README.md', 'r') as fh:
            long_description = fh.read()
    except (OSError, UnicodeDecodeError):
        long_description = 'EPI gradient waveform design'
    return long_description


setuptools.setup(
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
    ],
    description='EPI gradient waveform design',
    extras_require={
        'test': [
            'coverage>=6.2',
            'pytest>=7.0',
        ],
    },
    install_requires=[
        'matplotlib>=3.5.2',
        'numpy>=1.19.5',
    ],
    license='License :: OSI Approved :: GNU Affero General Public License v3',
    long_description=_get_long_description(),
    long_description_content_type='text/markdown',
    name='epigrad',
    packages=setuptools.find_packages(exclude=('tests', 'tests.*')),
    py_modules=['version'],
    python_requires='>=3.8',
    version='.'.join((str(major), str(minor), str(revision))),
)
