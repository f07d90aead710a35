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


"""Expected output tests for the chain writer."""

from pathlib import Path

import pytest

from iptchain.core import Accept, Chain, Match, Rule, YamlReader
from iptchain.core.options import OutputFormat, RenderDefaults
from iptchain.driver import ChainWriter
from iptchain.driver._jinja2_template import template_search_paths

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
EXPECTED_OUTPUT_DIR = Path(__file__).parent / 'expected-output'


@pytest.fixture()
def chains():
    return YamlReader().parse(FIXTURES_DIR / 'cali.yml').chains


@pytest.fixture()
def writer_for(tmp_path):
    """Return a factory for writers that ignore user template overrides."""

    def _inner(**options):
        return ChainWriter(RenderDefaults(**options), template_dir=tmp_path)

    return _inner


@pytest.mark.parametrize(
    ('output_format', 'expected_name'),
    [
        (OutputFormat.SHELL, 'cali.sh'),
        (OutputFormat.RESTORE, 'cali.restore'),
    ],
)
def test_expected_output(chains, writer_for, output_format, expected_name):
    actual = writer_for(output_format=output_format).render_script(chains)
    expected = (EXPECTED_OUTPUT_DIR / expected_name).read_text(encoding='utf-8')
    assert actual == expected


def test_hash_listing(chains, writer_for):
    actual = writer_for().render_hashes(chains)
    expected = (EXPECTED_OUTPUT_DIR / 'cali.hashes').read_text(encoding='utf-8')
    assert actual == expected


def test_hash_listing_empty(writer_for):
    assert writer_for().render_hashes([]) == ''
    assert writer_for().render_hashes([Chain(name='empty')]) == ''


def test_table_and_path_options(writer_for):
    chain = Chain(name='cali-PREROUTING', rules=[Rule(match=Match(), action=Accept())])
    script = writer_for(table='raw', path_iptables='/sbin/iptables-nft').render_script(
        [chain]
    )
    assert 'IPTABLES="/sbin/iptables-nft"\n' in script
    assert '$IPTABLES -t raw -A cali-PREROUTING --jump ACCEPT\n' in script

    restore = writer_for(table='raw', output_format=OutputFormat.RESTORE).render_script(
        [chain]
    )
    assert restore.splitlines()[1:] == [
        '*raw',
        ':cali-PREROUTING - [0:0]',
        '-A cali-PREROUTING --jump ACCEPT',
        'COMMIT',
    ]


def test_user_template_override(tmp_path):
    (tmp_path / 'restore.j2').write_text(
        '{% for chain in chains %}{{ chain.name }}={{ chain.commands | length }}\n'
        '{% endfor %}',
        encoding='utf-8',
    )
    writer = ChainWriter(
        RenderDefaults(output_format=OutputFormat.RESTORE),
        template_dir=tmp_path,
    )
    chain = Chain(name='c', rules=[Rule(match=Match(), action=Accept())] * 2)
    assert writer.render_script([chain]) == 'c=2\n'


def test_template_search_paths(tmp_path):
    paths = template_search_paths('iptables', user_dir=tmp_path)
    assert paths[0] == str(tmp_path)
    assert paths[-1].endswith(str(Path('resources') / 'templates' / 'iptables'))

    missing = tmp_path / 'missing'
    assert template_search_paths('iptables', user_dir=missing) == paths[1:]
