import re
from typing import Iterable

ANY_FRAGMENT = '.*'


class FileSelection:
    """Filename filter built from name and extension fragments.

    A file name is selected when it fully matches ``(<names>)\\w*\\.(<extensions>)``:
    it starts with one of the name fragments, continues with word characters
    and ends with a dot followed by one of the extensions. Fragments are taken
    literally. An empty fragment list matches anything.

    Example:
        selection = FileSelection(extensions=['py', 'txt'], names=['test_'])
        selection('test_walker.py')   # True
        selection('walker.py')        # False
    """

    def __init__(self, extensions: Iterable[str] = (), names: Iterable[str] = ()):
        self.extensions: list[str] = [e for e in extensions if e]
        self.names: list[str] = [n for n in names if n]
        self._pattern = re.compile(
            f"({_alternation(self.names)})\\w*\\.({_alternation(self.extensions)})",
            re.ASCII
        )

    @classmethod
    def from_input(cls, extensions: str, names: str) -> "FileSelection":
        """Build a selection from space delimited answers."""
        return cls(extensions.split(), names.split())

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def describe_extensions(self) -> str:
        return '|'.join(self.extensions) if self.extensions else ANY_FRAGMENT

    def describe_names(self) -> str:
        return '|'.join(self.names) if self.names else ANY_FRAGMENT

    def __call__(self, file_name: str) -> bool:
        return self._pattern.fullmatch(file_name) is not None

    def __repr__(self) -> str:
        return f"FileSelection(extensions={self.extensions!r}, names={self.names!r})"


def _alternation(fragments: list[str]) -> str:
    if not fragments:
        return ANY_FRAGMENT
    return '|'.join(re.escape(fragment) for fragment in fragments)
