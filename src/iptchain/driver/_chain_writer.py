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

"""ChainWriter: turns chains into an installable script or restore file.

Two output formats are supported (see :class:`OutputFormat`):

- ``shell``: a POSIX shell script that creates (or flushes) every chain
  and appends its rules with one iptables call per rule.
- ``restore``: a document for ``iptables-restore``.

Both are rendered from Jinja2 templates in
``resources/templates/iptables/``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from iptchain.core.options import RENDER_DEFAULTS, OutputFormat, RenderDefaults
from iptchain.driver._jinja2_template import Jinja2Template

if TYPE_CHECKING:
    from collections.abc import Iterable

    from iptchain.core import Chain

logger = logging.getLogger(__name__)

TEMPLATE_PLATFORM = 'iptables'

TEMPLATE_NAMES = {
    OutputFormat.SHELL: 'script.sh.j2',
    OutputFormat.RESTORE: 'restore.j2',
}


class ChainWriter:
    """Render chains according to a set of render options."""

    def __init__(
        self,
        settings: RenderDefaults = RENDER_DEFAULTS,
        template_dir: Path | None = None,
    ) -> None:
        self.settings = settings
        self.template_dir = template_dir

    def render_script(self, chains: Iterable[Chain]) -> str:
        """Render *chains* in the configured output format."""
        chain_contexts = []
        for chain in chains:
            commands = chain.render_append_all()
            logger.debug('Rendering chain %s (%d rules)', chain.name, len(commands))
            chain_contexts.append({'name': chain.name, 'commands': commands})

        context = {
            'chains': chain_contexts,
            'table': self.settings.table,
            'iptables_path': self.settings.path_iptables,
        }
        template = Jinja2Template(
            TEMPLATE_PLATFORM,
            TEMPLATE_NAMES[self.settings.output_format],
            user_dir=self.template_dir,
        )
        return template.render(context)

    def render_hashes(self, chains: Iterable[Chain]) -> str:
        """List the fingerprint of every rule as ``<chain> <position> <hash>``.

        Positions are 1-based, matching iptables rule numbers.
        """
        lines = []
        for chain in chains:
            for position, rule_hash in enumerate(chain.rule_hashes(), start=1):
                lines.append(f'{chain.name} {position} {rule_hash}')
        if not lines:
            return ''
        return '\n'.join(lines) + '\n'
