# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Rule actions (verdicts and control transfers).

Each action is an immutable value that renders to exactly one iptables
target fragment.  The set is closed: ``Action`` is the union of the
classes defined here.
"""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Goto:
    target: str

    def to_fragment(self) -> str:
        return f'--goto {self.target}'


@dataclasses.dataclass(frozen=True, slots=True)
class Jump:
    target: str

    def to_fragment(self) -> str:
        return f'--jump {self.target}'


@dataclasses.dataclass(frozen=True, slots=True)
class Return:
    def to_fragment(self) -> str:
        return '--jump RETURN'


@dataclasses.dataclass(frozen=True, slots=True)
class Drop:
    def to_fragment(self) -> str:
        return '--jump DROP'


@dataclasses.dataclass(frozen=True, slots=True)
class Accept:
    def to_fragment(self) -> str:
        return '--jump ACCEPT'


@dataclasses.dataclass(frozen=True, slots=True)
class DNAT:
    """Destination NAT to *dest_addr*:*dest_port*."""

    dest_addr: str
    dest_port: int

    def to_fragment(self) -> str:
        return f'--jump DNAT --to-destination {self.dest_addr}:{self.dest_port:d}'


@dataclasses.dataclass(frozen=True, slots=True)
class Masquerade:
    def to_fragment(self) -> str:
        return '--jump MASQUERADE'


@dataclasses.dataclass(frozen=True, slots=True)
class ClearMark:
    """Clear the bits of *mark* in the packet mark, leaving the others alone."""

    mark: int

    def to_fragment(self) -> str:
        return f'--jump MARK --set-mark 0/{self.mark:x}'


@dataclasses.dataclass(frozen=True, slots=True)
class SetMark:
    """Set the bits of *mark* in the packet mark, leaving the others alone."""

    mark: int

    def to_fragment(self) -> str:
        return f'--jump MARK --set-mark {self.mark:x}/{self.mark:x}'


Action = (
    Goto | Jump | Return | Drop | Accept | DNAT | Masquerade | ClearMark | SetMark
)

ACTION_CLASSES: tuple[type, ...] = (
    Goto,
    Jump,
    Return,
    Drop,
    Accept,
    DNAT,
    Masquerade,
    ClearMark,
    SetMark,
)
