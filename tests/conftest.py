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


"""Shared pytest fixtures for rule rendering and hashing tests."""

import dataclasses

import pytest

from iptchain.core import (
    DNAT,
    Chain,
    ClearMark,
    Drop,
    Goto,
    Match,
    Rule,
)


@dataclasses.dataclass(frozen=True)
class StubMatch:
    """Match collaborator returning a fixed string."""

    text: str = ''

    def render(self) -> str:
        return self.text


@pytest.fixture()
def stub_match():
    """Return a factory for match collaborators rendering a fixed string."""
    return StubMatch


@pytest.fixture()
def fw_chain():
    """The cali-fw-eth0 chain from fixtures/cali.yml, built in code."""
    return Chain(
        name='cali-fw-eth0',
        rules=[
            Rule(match=Match(), action=ClearMark(0x1000000), comment='Clear mark'),
            Rule(
                match=Match.from_text('-m conntrack --ctstate INVALID'),
                action=Drop(),
                comment='Drop invalid',
            ),
            Rule(
                match=Match(('-p tcp', '--dport 80')),
                action=DNAT('10.0.0.1', 8080),
            ),
            Rule(match=Match(), action=Goto('cali-po-default')),
        ],
    )


@pytest.fixture()
def fw_chain_hashes():
    """Fingerprints of fw_chain, kept as regression values."""
    return [
        '1awRGK6VIGHA0cjs',
        'ZyzkT3rbamMWjUpa',
        'NemalF40vT7oxAYA',
        'v1T1Zallz53mc1Y5',
    ]
