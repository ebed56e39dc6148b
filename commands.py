"""
Ingestion commands for socialgraph.

One command per line of input text, whitespace-separated fields:

    adduser <name>
    addfriends <name1> <name2>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from social_network import SocialNetwork


ADD_USER = "adduser"
ADD_FRIENDS = "addfriends"


@dataclass(frozen=True)
class AddUser:
    """Create a user with no friends."""
    name: str

    def apply(self, network: SocialNetwork) -> bool:
        return network.add_user(self.name)


@dataclass(frozen=True)
class AddFriends:
    """Create a symmetric, unit-weight friendship (creating users as needed)."""
    first: str
    second: str

    def apply(self, network: SocialNetwork) -> bool:
        return network.add_friends(self.first, self.second)


Command = Union[AddUser, AddFriends]


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one input line.

    Blank lines, unknown verbs and lines missing a required name return
    None. Fields beyond the ones a verb needs are ignored.
    """
    fields = line.split()
    if not fields:
        return None

    verb = fields[0]
    if verb == ADD_USER and len(fields) >= 2:
        return AddUser(fields[1])
    if verb == ADD_FRIENDS and len(fields) >= 3:
        return AddFriends(fields[1], fields[2])
    return None
