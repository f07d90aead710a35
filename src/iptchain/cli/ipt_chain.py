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

"""CLI entry point: render chains from a chain file or list their rule hashes."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

import iptchain
from iptchain.core import YamlReader
from iptchain.core.options import OutputFormat, RenderDefaults, RenderOption
from iptchain.driver import ChainWriter

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Renders the iptables chains defined in a YAML chain file, either as a shell
script, as an iptables-restore document, or as a list of per-rule fingerprints."""

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='ipt-chain',
        description=DESCRIPTION,
    )

    parser.add_argument(
        'file',
        help='path to the YAML chain file',
    )

    parser.add_argument(
        '-c',
        '--chain',
        action='append',
        default=[],
        dest='CHAINS',
        help='only render this chain (repeat for several). Default: all chains',
    )

    parser.add_argument(
        '-f',
        '--format',
        choices=[f.value for f in OutputFormat],
        default=None,
        dest='OUTPUT_FORMAT',
        help='output format. Default: the file\'s "output_format" option, else "shell"',
    )

    parser.add_argument(
        '-H',
        '--hashes',
        action='store_true',
        dest='HASHES',
        help='print "<chain> <position> <hash>" for every rule instead of commands',
    )

    parser.add_argument(
        '-o',
        '--output',
        default='',
        dest='OUTPUT',
        help='write to this file instead of stdout',
    )

    parser.add_argument(
        '-p',
        '--path',
        default=None,
        dest='PATH_IPTABLES',
        help='iptables binary used in shell output',
    )

    parser.add_argument(
        '-t',
        '--table',
        default=None,
        dest='TABLE',
        help='iptables table the chains belong to',
    )

    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='VERBOSE',
        help='verbose output (repeat for higher verbosity)',
    )

    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s: v{iptchain.__version__} by {__author__}',
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVELS[min(args.VERBOSE, len(LOG_LEVELS) - 1)],
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        result = YamlReader().parse(args.file)
        settings = RenderDefaults.from_options(result.options)
        settings = RenderDefaults.from_options(
            {
                RenderOption.TABLE: args.TABLE,
                RenderOption.PATH_IPTABLES: args.PATH_IPTABLES,
                RenderOption.OUTPUT_FORMAT: args.OUTPUT_FORMAT,
            },
            base=settings,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f'Error: failed to load chains from {args.file}: {e}', file=sys.stderr)
        return 1

    chains = result.chains
    if args.CHAINS:
        by_name = {chain.name: chain for chain in chains}
        missing = [name for name in args.CHAINS if name not in by_name]
        if missing:
            print(
                f"Error: chain(s) not found in {args.file}: {', '.join(missing)}",
                file=sys.stderr,
            )
            return 1
        chains = [by_name[name] for name in args.CHAINS]

    writer = ChainWriter(settings)
    if args.HASHES:
        output = writer.render_hashes(chains)
    else:
        output = writer.render_script(chains)

    if args.OUTPUT:
        try:
            Path(args.OUTPUT).write_text(output, encoding='utf-8')
        except OSError as e:
            print(f'Error: failed to write {args.OUTPUT}: {e}', file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
