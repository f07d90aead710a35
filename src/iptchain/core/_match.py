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

"""Match criteria boundary.

Rules do not know how match criteria are built; they only call
``render()`` on whatever they were given.  :class:`Match` is the
simplest possible provider: a list of already rendered iptables match
flags, used by the chain file reader.
"""

from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable


@runtime_checkable
class MatchCriteria(Protocol):
    def render(self) -> str:
        """Return the match flags, or '' when the rule matches everything.

        The result must not carry leading or trailing whitespace.
        """
        ...


@dataclasses.dataclass(frozen=True, slots=True)
class Match:
    """Pre-rendered match flags, e.g. ``Match(('-p tcp', '--dport 22'))``."""

    fragments: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Match:
        text = text.strip()
        return cls((text,) if text else ())

    def render(self) -> str:
        return ' '.join(f.strip() for f in self.fragments if f.strip())
