#!/usr/bin/env python3
# sdtinfo/sdtdump.py

# Copyright (c) 2020-2026, Christoph Gohlke
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""Print header metadata of Becker & Hickl SDT files.

This Python script decodes the headers of Becker & Hickl SDT files and
prints either the structured header records or the flat metadata mapping.

For command line usage run::

    python -m sdtinfo.sdtdump --help

For example, to print the MeasureInfo and block header metadata of
`file.sdt`::

    sdtdump --meta -k MeasureInfo. -k BHFileBlockHeader. file.sdt

This script depends on Python >= 3.10 and the sdtinfo, numpy, and click
libraries, which can be installed with::

    python -m pip install sdtinfo click

"""

import sys


def format_meta(meta, prefixes=()):
    """Return lines of 'key = value' for metadata keys starting with prefix."""
    return [
        f'{key} = {value!r}'
        for key, value in meta.items()
        if not prefixes or key.startswith(tuple(prefixes))
    ]


def dump(filename, meta=False, prefixes=()):
    """Return header of SDT file formatted as string."""
    from sdtinfo import SdtInfo

    sdt = SdtInfo(filename)
    if not meta:
        return str(sdt)
    return '\n'.join([repr(sdt), *format_meta(sdt.meta, prefixes)])


def main():
    """Command line usage main function."""
    import click

    from sdtinfo import __version__

    @click.version_option(version=__version__)
    @click.command(help='Print header metadata of Becker & Hickl SDT files.')
    @click.option(
        '--meta/--no-meta',
        default=False,
        help='Print flat metadata instead of header records.',
    )
    @click.option(
        '-k',
        '--key',
        'prefixes',
        multiple=True,
        help='Print only metadata keys starting with prefix.',
    )
    @click.argument('files', nargs=-1, type=click.Path(dir_okay=False))
    def run(files, meta, prefixes):
        if not files:
            msg = 'missing FILES'
            raise click.UsageError(msg)
        for filename in files:
            click.echo(dump(filename, meta, prefixes))

    run()


if __name__ == '__main__':
    sys.exit(main())

# mypy: allow-untyped-defs, allow-untyped-calls
