from typing import Union

major: int = 0
minor: int = 1
revision: Union[int, str] = 0

__version__ = '.'.join((str(major), str(minor), str(revision)))
