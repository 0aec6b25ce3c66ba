#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Identity resolver: dense integer ids for segment names in first-seen order.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

from typing import Dict, Iterator, List, Optional, Tuple


class IdentityResolver:
    """
    Name -> id mapping populated lazily.

    The first name ever added gets id 0, the next distinct name 1, and so on.
    Segment lines and link endpoints share one resolver per GfaFile, so a link
    can resolve a name before (or without) its S record.
    """

    def __init__(self):
        self.name_to_id: Dict[str, int] = dict()
        self.id_to_name: List[str] = list()

    def add(self, name: str) -> int:
        id = self.name_to_id.get(name)

        if id is None:
            id = len(self.id_to_name)
            self.id_to_name.append(name)
            self.name_to_id[name] = id

        return id

    def get_id(self, name: str) -> Optional[int]:
        return self.name_to_id.get(name)

    def get_name(self, id: int) -> Optional[str]:
        if not type(id) == int:
            raise TypeError("cannot get name for non-int id: " + str(id) + " of type " + str(type(id)))

        if 0 <= id < len(self.id_to_name):
            return self.id_to_name[id]

        return None

    def names(self) -> Iterator[str]:
        return iter(self.id_to_name)

    def __contains__(self, name: str) -> bool:
        return name in self.name_to_id

    def __len__(self) -> int:
        return len(self.id_to_name)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        for id, name in enumerate(self.id_to_name):
            yield id, name

    def __repr__(self) -> str:
        return f"IdentityResolver(names={len(self)})"


# GfaGraph v0.1.0
# Any usage is subject to this software's license.
