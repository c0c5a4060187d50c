# -*- coding: utf-8 -*-
"""Location: ./testbackend/utils/case_insensitive.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Case-insensitive string mapping.

Keys keep the casing they were stored with (so JSON output shows the original
names) while lookups, membership tests and deletes ignore case.
"""

# Standard
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple


class CaseInsensitiveDict(MutableMapping):
    """Mapping with case-insensitive string keys.

    When two keys differ only in case, the last one stored wins.

    Args:
        data: Optional initial mapping.

    Examples:
        >>> env = CaseInsensitiveDict({"Path": "/bin"})
        >>> env["PATH"]
        '/bin'
        >>> "path" in env
        True
        >>> list(env)
        ['Path']
        >>> env["PATH"] = "/usr/bin"
        >>> dict(env)
        {'PATH': '/usr/bin'}
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._store: Dict[str, Tuple[str, Any]] = {}
        if data:
            self.update(data)

    def __setitem__(self, key: str, value: Any) -> None:
        self._store[key.casefold()] = (key, value)

    def __getitem__(self, key: str) -> Any:
        return self._store[key.casefold()][1]

    def __delitem__(self, key: str) -> None:
        del self._store[key.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dict with the stored key casing.

        Returns:
            Plain dictionary copy.
        """
        return dict(self.items())
