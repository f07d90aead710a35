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


"""Rule model: actions, rules, chains and per-rule fingerprints."""

from ._actions import (
    ACTION_CLASSES,
    DNAT,
    Accept,
    Action,
    ClearMark,
    Drop,
    Goto,
    Jump,
    Masquerade,
    Return,
    SetMark,
)
from ._chain import HASH_LENGTH, HASH_PREFIX, Chain, rule_hashes
from ._match import Match, MatchCriteria
from ._rules import Rule
from ._yaml_reader import ChainFileError, ParseResult, YamlReader

__all__ = [
    'ACTION_CLASSES',
    'DNAT',
    'HASH_LENGTH',
    'HASH_PREFIX',
    'Accept',
    'Action',
    'Chain',
    'ChainFileError',
    'ClearMark',
    'Drop',
    'Goto',
    'Jump',
    'Masquerade',
    'Match',
    'MatchCriteria',
    'ParseResult',
    'Return',
    'Rule',
    'SetMark',
    'YamlReader',
    'rule_hashes',
]
