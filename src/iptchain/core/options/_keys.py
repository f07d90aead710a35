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

"""Canonical option key definitions using StrEnum.

The keys are used in the ``options:`` section of chain files and as
dict keys when options are passed around in code.  Typos are caught at
import time (AttributeError) instead of silently falling back to a
default.

Example:
    from iptchain.core.options import RenderOption

    table = options.get(RenderOption.TABLE, 'filter')
"""

from enum import StrEnum


class RenderOption(StrEnum):
    """Options controlling how chains are written out."""

    # iptables table the chains live in
    TABLE = 'table'

    # Path to the iptables binary used in shell output
    PATH_IPTABLES = 'path_iptables'

    # 'shell' or 'restore', see OutputFormat
    OUTPUT_FORMAT = 'output_format'


class OutputFormat(StrEnum):
    """Output formats supported by the chain writer."""

    SHELL = 'shell'
    RESTORE = 'restore'
