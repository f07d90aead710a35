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

"""Rule: iptables command line generation for a single rule.

A rendered rule is a list of fragments joined by single spaces::

    <verb> <chain> [<rule number>] [<prefix>] [<comment>] [<match>] [<action>]

Empty optional fragments are left out completely, so the output never
contains double spaces.  The fragment order is the order iptables
expects and is also what :meth:`Chain.rule_hashes` hashes, so it must
not change.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._actions import Action
    from ._match import MatchCriteria


@dataclasses.dataclass(frozen=True, slots=True)
class Rule:
    """One iptables rule: match criteria, an action and an optional comment.

    The comment ends up in the rule as ``-m comment --comment "<text>"``.
    It is wrapped in double quotes verbatim; callers must make sure it
    contains nothing that breaks that quoting.
    """

    match: MatchCriteria
    action: Action
    comment: str = ''

    def render_append(self, chain_name: str, prefix_fragment: str = '') -> str:
        return self._render(['-A', chain_name], prefix_fragment)

    def render_insert(self, chain_name: str, prefix_fragment: str = '') -> str:
        return self._render(['-I', chain_name], prefix_fragment)

    def render_replace(
        self, chain_name: str, rule_num: int, prefix_fragment: str = ''
    ) -> str:
        """Render an ``-R`` command; *rule_num* is the 1-based position."""
        return self._render(['-R', chain_name, f'{rule_num:d}'], prefix_fragment)

    def _render(self, fragments: list[str], prefix_fragment: str) -> str:
        if prefix_fragment:
            fragments.append(prefix_fragment)
        if self.comment:
            fragments.append(f'-m comment --comment "{self.comment}"')
        match_fragment = self.match.render()
        if match_fragment:
            fragments.append(match_fragment)
        action_fragment = self.action.to_fragment()
        if action_fragment:
            fragments.append(action_fragment)
        return ' '.join(fragments)
