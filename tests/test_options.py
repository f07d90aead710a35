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


"""Tests for render option resolution."""

import logging

import pytest

from iptchain.core.options import (
    RENDER_DEFAULTS,
    OutputFormat,
    RenderDefaults,
    RenderOption,
)


def test_defaults():
    assert RENDER_DEFAULTS.table == 'filter'
    assert RENDER_DEFAULTS.path_iptables == 'iptables'
    assert RENDER_DEFAULTS.output_format is OutputFormat.SHELL


def test_keys_match_schema_fields():
    fields = set(RenderDefaults.__dataclass_fields__)
    assert {key.value for key in RenderOption} == fields


def test_from_options():
    settings = RenderDefaults.from_options(
        {
            RenderOption.TABLE: 'nat',
            'path_iptables': '/sbin/iptables',
            'output_format': 'RESTORE',
        }
    )
    assert settings == RenderDefaults(
        table='nat',
        path_iptables='/sbin/iptables',
        output_format=OutputFormat.RESTORE,
    )


def test_from_options_empty_returns_base():
    base = RenderDefaults(table='raw')
    assert RenderDefaults.from_options(None, base=base) is base
    assert RenderDefaults.from_options({}) == RENDER_DEFAULTS


def test_none_values_keep_base():
    base = RenderDefaults(table='mangle', output_format=OutputFormat.RESTORE)
    settings = RenderDefaults.from_options(
        {'table': None, 'output_format': None, 'path_iptables': 'ipt'},
        base=base,
    )
    assert settings.table == 'mangle'
    assert settings.output_format is OutputFormat.RESTORE
    assert settings.path_iptables == 'ipt'


def test_unknown_key_is_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        settings = RenderDefaults.from_options({'colour': 'blue'})
    assert settings == RENDER_DEFAULTS
    assert 'Ignoring unknown option: colour' in caplog.text


def test_invalid_output_format():
    with pytest.raises(ValueError, match='Invalid output format'):
        RenderDefaults.from_options({'output_format': 'xml'})
