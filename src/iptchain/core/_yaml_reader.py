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

"""YAML reader for loading chain definitions into Chain/Rule objects."""

import dataclasses
import logging
import pathlib

import yaml

from ._actions import (
    DNAT,
    Accept,
    ClearMark,
    Drop,
    Goto,
    Jump,
    Masquerade,
    Return,
    SetMark,
)
from ._chain import Chain
from ._match import Match
from ._rules import Rule

logger = logging.getLogger(__name__)

# Actions without parameters, written as a bare string.
_SIMPLE_ACTIONS = {
    'accept': Accept,
    'drop': Drop,
    'return': Return,
    'masquerade': Masquerade,
}

# Actions with a single parameter, written as a one-key mapping.
_TARGET_ACTIONS = {
    'goto': Goto,
    'jump': Jump,
}
_MARK_ACTIONS = {
    'clear_mark': ClearMark,
    'set_mark': SetMark,
}

MAX_MARK = 0xFFFFFFFF
MAX_PORT = 0xFFFF

# Comments end up inside double quotes in shell output.
COMMENT_FORBIDDEN_CHARS = frozenset('"$`\\\n\r')


class ChainFileError(ValueError):
    """Raised when a chain file is structurally invalid."""


@dataclasses.dataclass
class ParseResult:
    """Chains in file order plus the raw ``options:`` mapping."""

    chains: list[Chain]
    options: dict


def _parse_match(value, where):
    if value is None:
        return Match()
    if isinstance(value, str):
        return Match.from_text(value)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return Match(tuple(v.strip() for v in value if v.strip()))
    msg = f'{where}: match must be a string or a list of strings'
    raise ChainFileError(msg)


def _parse_int(value, where, name, maximum):
    # bool is an int subclass, but "set_mark: true" is certainly a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f'{where}: {name} must be an integer, got {value!r}'
        raise ChainFileError(msg)
    if value < 0:
        msg = f'{where}: {name} must not be negative'
        raise ChainFileError(msg)
    if value > maximum:
        msg = f'{where}: {name} must not exceed {maximum:#x}'
        raise ChainFileError(msg)
    return value


def _parse_action(value, where):
    if isinstance(value, str):
        cls = _SIMPLE_ACTIONS.get(value.lower())
        if cls is None:
            msg = f'{where}: unknown action {value!r}'
            raise ChainFileError(msg)
        return cls()

    if not isinstance(value, dict) or len(value) != 1:
        msg = f'{where}: action must be a name or a mapping with exactly one key'
        raise ChainFileError(msg)

    ((key, arg),) = value.items()
    key = str(key).lower()

    if key in _SIMPLE_ACTIONS:
        return _SIMPLE_ACTIONS[key]()
    if key in _TARGET_ACTIONS:
        if not isinstance(arg, str) or not arg:
            msg = f'{where}: {key} needs a target chain name'
            raise ChainFileError(msg)
        return _TARGET_ACTIONS[key](arg)
    if key in _MARK_ACTIONS:
        return _MARK_ACTIONS[key](_parse_int(arg, where, key, MAX_MARK))
    if key == 'dnat':
        if not isinstance(arg, dict) or 'addr' not in arg or 'port' not in arg:
            msg = f'{where}: dnat needs "addr" and "port"'
            raise ChainFileError(msg)
        port = _parse_int(arg['port'], where, 'port', MAX_PORT)
        return DNAT(str(arg['addr']), port)

    msg = f'{where}: unknown action {key!r}'
    raise ChainFileError(msg)


class YamlReader:
    """Parses a chain file into a :class:`ParseResult`."""

    def parse(self, input_path):
        input_path = pathlib.Path(input_path)
        with pathlib.Path.open(input_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
        result = self.parse_data(data, source=str(input_path))
        logger.info('Loaded %d chain(s) from %s', len(result.chains), input_path)
        return result

    def parse_data(self, data, source='<data>'):
        """Build a ParseResult from an already loaded YAML document."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            msg = f'{source}: top level must be a mapping'
            raise ChainFileError(msg)

        options = data.get('options') or {}
        if not isinstance(options, dict):
            msg = f'{source}: options must be a mapping'
            raise ChainFileError(msg)

        chains_data = data.get('chains') or []
        if not isinstance(chains_data, list):
            msg = f'{source}: chains must be a list'
            raise ChainFileError(msg)

        chains = []
        seen = set()
        for index, chain_data in enumerate(chains_data, start=1):
            chain = self._parse_chain(chain_data, f'{source}: chain #{index}')
            if chain.name in seen:
                msg = f'{source}: duplicate chain name {chain.name!r}'
                raise ChainFileError(msg)
            seen.add(chain.name)
            chains.append(chain)

        return ParseResult(chains=chains, options=dict(options))

    def _parse_chain(self, chain_data, where):
        if not isinstance(chain_data, dict):
            msg = f'{where}: must be a mapping'
            raise ChainFileError(msg)
        name = chain_data.get('name')
        if not isinstance(name, str) or not name:
            msg = f'{where}: missing chain name'
            raise ChainFileError(msg)

        rules_data = chain_data.get('rules') or []
        if not isinstance(rules_data, list):
            msg = f'{where} ({name}): rules must be a list'
            raise ChainFileError(msg)

        rules = [
            self._parse_rule(rule_data, f'{name}: rule #{position}')
            for position, rule_data in enumerate(rules_data, start=1)
        ]
        logger.debug('Chain %s: %d rule(s)', name, len(rules))
        return Chain(name=name, rules=rules)

    def _parse_rule(self, rule_data, where):
        if not isinstance(rule_data, dict):
            msg = f'{where}: must be a mapping'
            raise ChainFileError(msg)
        if 'action' not in rule_data:
            msg = f'{where}: missing action'
            raise ChainFileError(msg)

        comment = rule_data.get('comment') or ''
        if not isinstance(comment, str):
            msg = f'{where}: comment must be a string'
            raise ChainFileError(msg)
        bad = sorted({c for c in comment if c in COMMENT_FORBIDDEN_CHARS})
        if bad:
            msg = f'{where}: comment must not contain {", ".join(map(repr, bad))}'
            raise ChainFileError(msg)

        return Rule(
            match=_parse_match(rule_data.get('match'), where),
            action=_parse_action(rule_data['action'], where),
            comment=comment,
        )
