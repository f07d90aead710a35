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

"""Typed option schemas with shared defaults.

The dataclasses below are the single source of truth for which render
options exist, their types and their default values.  The chain file
reader, the writer and the CLI all resolve options through them.
"""

import logging
from dataclasses import dataclass, replace

from iptchain.core.options._keys import OutputFormat, RenderOption

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderDefaults:
    """Default values for render options."""

    table: str = 'filter'
    path_iptables: str = 'iptables'
    output_format: OutputFormat = OutputFormat.SHELL

    @classmethod
    def from_options(cls, options: dict | None, base=None):
        """Build an instance from a plain options mapping.

        Values missing from *options* are taken from *base* (or the
        built-in defaults).  Unknown keys are ignored with a warning.

        Raises:
            ValueError: if ``output_format`` is not a known format.
        """
        result = base if base is not None else cls()
        if not options:
            return result

        known = {key.value for key in RenderOption}
        changes = {}
        for key, value in options.items():
            if key not in known:
                logger.warning('Ignoring unknown option: %s', key)
                continue
            if value is None:
                continue
            if key == RenderOption.OUTPUT_FORMAT:
                try:
                    value = OutputFormat(str(value).lower())
                except ValueError:
                    choices = ', '.join(f.value for f in OutputFormat)
                    msg = f'Invalid output format {value!r} (expected one of: {choices})'
                    raise ValueError(msg) from None
            else:
                value = str(value)
            changes[str(key)] = value

        return replace(result, **changes)


RENDER_DEFAULTS = RenderDefaults()
