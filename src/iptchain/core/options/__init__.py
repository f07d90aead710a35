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

"""Typed option keys and schemas for chain output.

This module provides:

- **StrEnum keys**: Type-safe option key names that work as dict keys
- **Dataclass schemas**: Typed defaults shared between reader, writer and CLI

Usage::

    from iptchain.core.options import RENDER_DEFAULTS, RenderDefaults

    settings = RenderDefaults.from_options({'table': 'nat'})
"""

from iptchain.core.options._keys import (
    OutputFormat,
    RenderOption,
)
from iptchain.core.options._schemas import (
    RENDER_DEFAULTS,
    RenderDefaults,
)

__all__ = [
    'RENDER_DEFAULTS',
    'OutputFormat',
    'RenderDefaults',
    'RenderOption',
]
