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

"""Chain: a named, ordered list of rules and its per-rule fingerprints.

The fingerprint of rule *i* is derived from a SHA-224 digest that is
chained through the chain name and every rule before it::

    running = sha224(name)
    running = sha224(running + rule[0].render_append(name, 'HASH'))
    running = sha224(running + rule[1].render_append(name, 'HASH'))
    ...

Each digest is encoded with the URL-safe base64 alphabet (no padding)
and cut down to :data:`HASH_LENGTH` characters.  Editing, moving or
removing a rule therefore changes its own fingerprint and the
fingerprint of every rule below it, while the rules above keep theirs.
Renaming the chain changes all of them.
"""

from __future__ import annotations

import base64
import dataclasses
import hashlib
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._rules import Rule

logger = logging.getLogger(__name__)

# 16 characters of base64 carry 96 bits, enough to make collisions
# unlikely while staying short enough to fit in a rule comment.
HASH_LENGTH = 16

# Prefix rendered in place of the verb-specific prefix while hashing.
# Never used when installing rules.
HASH_PREFIX = 'HASH'

HashObserver = Callable[..., Any]


def _digest(data: bytes) -> bytes:
    return hashlib.sha224(data).digest()


def _encode(digest: bytes) -> str:
    return base64.urlsafe_b64encode(digest).decode('ascii').rstrip('=')[:HASH_LENGTH]


def rule_hashes(
    chain_name: str,
    rules: Sequence[Rule],
    observer: HashObserver | None = None,
) -> list[str]:
    """Return one fingerprint per rule in *rules*, in order.

    *observer*, if given, is called after every rule with the keyword
    arguments ``rule_fragment``, ``action``, ``position``, ``chain`` and
    ``hash``.  Its return value is ignored.
    """
    hashes: list[str] = []
    running = _digest(chain_name.encode('utf-8'))
    for position, rule in enumerate(rules):
        rule_fragment = rule.render_append(chain_name, HASH_PREFIX)
        running = _digest(running + rule_fragment.encode('utf-8'))
        fingerprint = _encode(running)
        hashes.append(fingerprint)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                'Hashed rule: chain=%s position=%d action=%r hash=%s fragment=%s',
                chain_name,
                position,
                rule.action,
                fingerprint,
                rule_fragment,
            )
        if observer is not None:
            observer(
                rule_fragment=rule_fragment,
                action=rule.action,
                position=position,
                chain=chain_name,
                hash=fingerprint,
            )
    return hashes


@dataclasses.dataclass
class Chain:
    """Named rule sequence.

    The rule list is owned by the caller.  Rendering and hashing only
    read it, so concurrent readers are fine as long as nobody modifies
    the list at the same time.
    """

    name: str
    rules: list[Rule] = dataclasses.field(default_factory=list)

    def rule_hashes(self, observer: HashObserver | None = None) -> list[str]:
        return rule_hashes(self.name, self.rules, observer)

    def render_append_all(self, prefix_fragment: str = '') -> list[str]:
        """Render an ``-A`` command for every rule, in chain order."""
        return [rule.render_append(self.name, prefix_fragment) for rule in self.rules]
