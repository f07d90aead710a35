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


"""Script templates for the chain writer."""

from __future__ import annotations

import importlib.resources
from pathlib import Path

import jinja2

USER_TEMPLATE_ROOT = Path('iptchain') / 'templates'


def template_search_paths(platform: str, user_dir: Path | None = None) -> list[str]:
    """Return the directories searched for *platform* templates, in order.

    *user_dir* defaults to ``~/iptchain/templates/<platform>`` and is only
    searched if it exists.  The shipped templates always come last.
    """
    if user_dir is None:
        user_dir = Path.home() / USER_TEMPLATE_ROOT / platform
    shipped = importlib.resources.files('iptchain') / 'resources' / 'templates' / platform

    paths = [str(user_dir)] if user_dir.is_dir() else []
    paths.append(str(shipped))
    return paths


class Jinja2Template:
    """A single template, e.g. ``Jinja2Template('iptables', 'restore.j2')``."""

    def __init__(
        self,
        platform: str,
        template_name: str,
        user_dir: Path | None = None,
    ) -> None:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_search_paths(platform, user_dir)),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._template = env.get_template(template_name)

    def render(self, context: dict) -> str:
        return self._template.render(context)
