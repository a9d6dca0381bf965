# sdtinfo.py

# Copyright (c) 2007-2025, Christoph Gohlke
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

"""Decode headers of Becker & Hickl SDT files.

Sdtinfo is a Python library to decode the header of SDT files produced by
Becker & Hickl SPCM software. SDT files contain time correlated single photon
counting instrumentation parameters and measurement data.
Sdtinfo returns the file header, the info and setup text blocks, the
measurement description sub-records, and the first data block header as
structured records, the image dimensions needed to decode the pixel data,
and a flat mapping of metadata keys to values.

`Becker & Hickl GmbH <http://www.becker-hickl.de/>`_ is a manufacturer of
equipment for photon counting.

:License: BSD 3-Clause
:Version: 2025.3.25

Quickstart
----------

Install the sdtinfo package and all dependencies::

    python -m pip install -U sdtinfo[all]

See `Examples`_ for using the programming interface.

Requirements
------------

This revision was tested with the following requirements and dependencies
(other versions may work):

- `CPython <https://www.python.org>`_ 3.10.11, 3.11.9, 3.12.9, 3.13.2 64-bit
- `NumPy <https://pypi.org/project/numpy/>`_ 2.2.4
- `Click <https://pypi.org/project/click/>`_ 8.1.8 (optional, for sdtdump)

Revisions
---------

2025.3.25

- Initial release.

References
----------

1. W Becker. The bh TCSPC Handbook. 9th Edition. Becker & Hickl GmbH 2021.
   pp 879.
2. SPC_data_file_structure.h header file. Part of the Becker & Hickl
   SPCM software installation.

Examples
--------

Decode the header of a "SPC Setup & Data File":

>>> sdt = SdtInfo('image.sdt')  # doctest: +SKIP
>>> sdt.info.id  # doctest: +SKIP
'SPC Setup & Data File'
>>> sdt.width, sdt.height, sdt.time_bins, sdt.channels  # doctest: +SKIP
(128, 128, 256, 1)
>>> sdt.meta['MeasureInfo.scanX']  # doctest: +SKIP
128

Collect the metadata of several files into one mapping:

>>> meta = {}
>>> for filename in ('a.sdt', 'b.sdt'):  # doctest: +SKIP
...     sdt = SdtInfo(filename, meta=meta)

"""

from __future__ import annotations

__version__ = '2025.3.25'

__all__ = [
    '__version__',
    'SdtInfo',
    'FileInfo',
    'SetupBlock',
    'MeasureDescriptor',
    'BlockType',
    'FileRevision',
    'read_file_header',
    'read_info',
    'read_setup',
    'read_measure_descriptor',
    'read_block_header',
    'iter_block_headers',
    'measure_descriptor_presence',
    'setup_key_value',
    'setup_dimension',
    'block_number',
    'data_blocks',
]

import os
from typing import TYPE_CHECKING

import numpy

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping
    from typing import Any, BinaryIO

    Record = list[tuple[str, str]]
    Value = int | float | str
    Meta = MutableMapping[str, Value]

ENCODING = 'windows-1250'
"""Encoding of text blocks and strings."""

BYTEORDER = '<'
"""Byte order of all binary structures."""


class SdtInfo:
    """Header of Becker & Hickl SDT file.

    Decoding is sequential: file header, info block, setup block,
    measurement description block (if any), and first data block header.
    Metadata are written to `meta` as each part is read. If decoding fails,
    entries written so far remain in `meta`.

    Parameters:
        arg: File name or open binary file positioned at file header.
        meta: Mapping to which metadata are written.
            By default, a new dict.

    """

    filename: str
    """Name of file."""

    meta: Meta
    """Flat mapping of metadata keys to values."""

    header: numpy.record
    """File header of type FILE_HEADER."""

    info: FileInfo
    """File info text and key/value pairs."""

    setup: SetupBlock
    """Setup block text, key/value pairs, and dimension tags."""

    measure_descriptor: MeasureDescriptor | None
    """Measurement description sub-records, if any."""

    block_header: numpy.record
    """First data block header of type BLOCK_HEADER."""

    width: int
    """Number of pixels in x dimension."""

    height: int
    """Number of pixels in y dimension."""

    time_bins: int
    """Number of time bins (ADC resolution)."""

    channels: int
    """Number of routing channels."""

    timepoints: int
    """Number of timepoints (MeasureInfo.stopt)."""

    def __init__(
        self,
        arg: str | os.PathLike[Any] | BinaryIO,
        /,
        meta: Meta | None = None,
    ) -> None:
        self.meta = {} if meta is None else meta
        if isinstance(arg, (str, os.PathLike)):
            self.filename = os.fspath(arg)
            with open(arg, 'rb') as fh:
                self._fromfile(fh)
        else:
            assert hasattr(arg, 'seek')
            self.filename = ''
            self._fromfile(arg)

    def _fromfile(self, fh: BinaryIO, /) -> None:
        """Initialize instance from open file."""
        meta = self.meta

        self.header = read_file_header(fh, meta)
        self.info = read_info(fh, self.header, meta)
        self.setup = read_setup(fh, self.header, meta)

        (
            self.width,
            self.height,
            self.time_bins,
            self.channels,
        ) = self.setup.dimensions
        self.timepoints = 0

        self.measure_descriptor = None
        if self.header['noOfMeasDescBlocks'] > 0:
            self.measure_descriptor = read_measure_descriptor(
                fh, self.header, meta
            )
            mi = self.measure_descriptor.measure_info
            if mi is not None:
                # fields not set in MeasureInfo keep values from setup block
                self.timepoints = int(mi['stopt'])
                if mi['scanX'] > 0:
                    self.width = int(mi['scanX'])
                if mi['scanY'] > 0:
                    self.height = int(mi['scanY'])
                if mi['adcRE'] > 0:
                    self.time_bins = int(mi['adcRE'])
                if mi['scanRX'] > 0:
                    self.channels = int(mi['scanRX'])

        self.block_header = read_block_header(
            fh, int(self.header['dataBlockOffs']), meta
        )

    @property
    def revision(self) -> FileRevision:
        """Decoded FILE_HEADER.revision field."""
        return FileRevision(int(self.header['revision']))

    @property
    def block_type(self) -> BlockType:
        """Decoded BLOCK_HEADER.blockType field of first data block."""
        return BlockType(int(self.block_header['blockType']))

    @property
    def data_blocks(self) -> int:
        """Number of data blocks in file."""
        return data_blocks(self.header)

    @property
    def valid(self) -> bool:
        """File header is marked valid."""
        return HEADER_VALID.get(int(self.header['headerValid']), False)

    def __enter__(self) -> SdtInfo:
        return self

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        pass

    def __repr__(self) -> str:
        filename = os.path.split(self.filename)[-1]
        return f'{self.__class__.__name__}({filename!r})'

    def __str__(self) -> str:
        descriptor = self.measure_descriptor
        return indent(
            repr(self),
            self.revision,
            record_str('header', self.header),
            indent('info:', self.info.strip()),
            *(
                ()
                if descriptor is None
                else (
                    record_str(name, descriptor[name])
                    for name, _, _ in MEASURE_DESCRIPTOR
                )
            ),
            record_str('block_header', self.block_header),
            self.block_type,
            indent(
                'dimensions:',
                f'width: {self.width}',
                f'height: {self.height}',
                f'time_bins: {self.time_bins}',
                f'channels: {self.channels}',
                f'timepoints: {self.timepoints}',
            ),
            indent('setup:', self.setup),
        )


class FileInfo(str):
    """File info text and key/value pairs.

    The first and last lines (``*IDENTIFICATION`` and ``*END`` in files
    written by SPCM) are not parsed.

    Parameters:
        value: File content from FILE_HEADER infoOffs and infoLength.

    """

    fields: dict[str, str]
    """Key/value pairs of lines containing a colon."""

    id: str
    """Identification, for example, 'SPC Setup & Data File'."""

    def __init__(self, value: str, /) -> None:
        str.__init__(self)
        self.fields = {}
        lines = [line for line in value.split('\n') if line]
        for line in lines[1:-1]:
            key, sep, val = line.strip().partition(':')
            if sep:
                self.fields[key.strip()] = val.strip()
        self.id = self.fields.get('ID', '')


class SetupBlock:
    """Setup block text, key/value pairs, and dimension tags.

    Parameters:
        value: File content from FILE_HEADER setupOffs and setupLength.

    """

    ascii: str
    """ASCII data."""

    binary: bytes
    """Binary data starting at BIN_PARA_BEGIN."""

    fields: dict[str, str]
    """Key/value pairs of #SP, #DI, #PR, #MP, #TR, and #WI lines."""

    dimensions: tuple[int, int, int, int]
    """Width, height, time bins, and channels from dimension tags."""

    def __init__(self, value: bytes, /) -> None:
        i = value.find(b'BIN_PARA_BEGIN')
        if i >= 0:
            self.ascii = value[:i].decode(ENCODING, errors='replace')
            self.binary = value[i:]
        else:
            self.ascii = value.decode(ENCODING, errors='replace')
            self.binary = b''

        self.fields = {}
        dimensions = {'width': 0, 'height': 0, 'time_bins': 0, 'channels': 0}
        for line in self.ascii.split('\n'):
            if not line:
                continue
            line = line.strip()
            keyvalue = setup_key_value(line)
            if keyvalue is not None:
                self.fields[keyvalue[0]] = keyvalue[1]
            dimension = setup_dimension(line)
            if dimension is not None:
                name, number = dimension
                if name == 'channels':
                    dimensions[name] += number
                else:
                    dimensions[name] = number
        self.dimensions = (
            dimensions['width'],
            dimensions['height'],
            dimensions['time_bins'],
            dimensions['channels'],
        )

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}>'

    def __str__(self) -> str:
        if not self.binary:
            return self.ascii
        return indent(self.ascii, f'binary: {len(self.binary)} bytes')


class MeasureDescriptor:
    """Measurement description sub-records.

    Sub-records present in the file are numpy records, absent ones None.
    A sub-record is present only if all preceding sub-records are.

    Parameters:
        length: Value of FILE_HEADER.measDescBlockLength.

    """

    __slots__ = (
        'length',
        'measure_info',
        'stop_info',
        'fcs_info',
        'extended_info',
        'hist_info',
    )

    length: int
    """Declared length of measurement description block."""

    measure_info: numpy.record | None
    """MeasureInfo record."""

    stop_info: numpy.record | None
    """MeasStopInfo record."""

    fcs_info: numpy.record | None
    """MeasFCSInfo record."""

    extended_info: numpy.record | None
    """Extended MeasureInfo record (camera mode)."""

    hist_info: numpy.record | None
    """MeasHISTInfo record."""

    def __init__(self, length: int, /) -> None:
        self.length = length
        for name, _, _ in MEASURE_DESCRIPTOR:
            setattr(self, name, None)

    def __getitem__(self, name: str, /) -> numpy.record | None:
        return getattr(self, name)

    @property
    def has_measure_info(self) -> bool:
        return self.measure_info is not None

    @property
    def has_stop_info(self) -> bool:
        return self.stop_info is not None

    @property
    def has_fcs_info(self) -> bool:
        return self.fcs_info is not None

    @property
    def has_extended_info(self) -> bool:
        return self.extended_info is not None

    @property
    def has_hist_info(self) -> bool:
        return self.hist_info is not None

    def __repr__(self) -> str:
        present = [
            name for name, _, _ in MEASURE_DESCRIPTOR if self[name] is not None
        ]
        return f'<{self.__class__.__name__} {self.length} {present}>'


class BlockType:
    """BLOCK_HEADER.blockType field.

    Parameters:
        value: Value of BLOCK_HEADER.blockType.

    """

    __slots__ = ('value', 'mode', 'contents', 'dtype', 'compress')

    value: int
    """Raw value."""

    mode: str
    """BLOCK_CREATION."""

    contents: str
    """BLOCK_CONTENT."""

    dtype: numpy.dtype[Any]
    """BLOCK_DTYPE of data in block."""

    compress: bool
    """Data is compressed."""

    def __init__(self, value: int, /) -> None:
        self.value = value
        self.mode = BLOCK_CREATION.get(value & 0xF, 'Unknown')
        self.contents = BLOCK_CONTENT.get(value & 0xF0, 'Unknown')
        self.dtype = BLOCK_DTYPE.get(value & 0xF00, BLOCK_DTYPE[0])
        self.compress = bool(value & 0x1000)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.mode} {self.contents}>'

    def __str__(self) -> str:
        return indent(
            repr(self),
            f'dtype: {self.dtype}',
            f'compress: {self.compress}',
        )


class FileRevision:
    """FILE_HEADER.revision field.

    Parameters:
        value: Value of FILE_HEADER.revision.

    """

    __slots__ = ('revision', 'module', 'subtype')

    revision: int
    """Software revision."""

    module: str
    """BH module type."""

    subtype: str
    """BH module subtype."""

    def __init__(self, value: int, /) -> None:
        value &= 0xFFFF
        self.revision = value & 0b1111
        self.module = MODULE_TYPE.get((value & 0xFF0) >> 4, 'Unknown')
        self.subtype = MODULE_SUBTYPE.get(value >> 12, 'Unknown')

    def __repr__(self) -> str:
        return (
            f'<{self.__class__.__name__} {self.module!r} rev {self.revision}>'
        )


def read_file_header(fh: BinaryIO, meta: Meta, /) -> numpy.record:
    """Return FILE_HEADER record read at current file position.

    Fields are written to `meta` with prefix ``bhfileHeader.``.

    """
    header = read_record(fh, FILE_HEADER)
    record_meta(header, 'bhfileHeader.', meta)
    valid = int(header['headerValid'])
    if header['chksum'] != BH_HEADER_CHKSUM and valid != BH_HEADER_VALID:
        log_warning('SdtInfo: not a SDT file')
    elif not HEADER_VALID.get(valid, False):
        log_warning(f'SdtInfo: file header not valid ({valid:#06x})')
    return header


def read_info(
    fh: BinaryIO, header: numpy.record, meta: Meta, /
) -> FileInfo:
    """Return file info block referenced in file header.

    Key/value pairs are written to `meta` without prefix.

    """
    data = read_bytes(fh, int(header['infoOffs']), int(header['infoLength']))
    info = FileInfo(data.decode(ENCODING, errors='replace'))
    meta.update(info.fields)
    if info.id and info.id not in INFO_IDS:
        log_warning(f'SdtInfo: unknown file identification {info.id!r}')
    return info


def read_setup(
    fh: BinaryIO, header: numpy.record, meta: Meta, /
) -> SetupBlock:
    """Return setup block referenced in file header.

    Key/value pairs are written to `meta` without prefix.

    """
    data = read_bytes(
        fh, int(header['setupOffs']), int(header['setupLength'])
    )
    setup = SetupBlock(data)
    meta.update(setup.fields)
    return setup


def read_measure_descriptor(
    fh: BinaryIO, header: numpy.record, meta: Meta, /
) -> MeasureDescriptor:
    """Return measurement description sub-records referenced in file header.

    Sub-records are read back to back, as far as the declared
    measDescBlockLength allows. Fields are written to `meta` with the
    prefix of the sub-record.

    """
    length = int(header['measDescBlockLength'])
    descriptor = MeasureDescriptor(length)
    fh.seek(int(header['measDescBlockOffs']))
    for (name, prefix, record_t), present in zip(
        MEASURE_DESCRIPTOR, measure_descriptor_presence(length), strict=True
    ):
        if not present:
            break
        record = read_record(fh, record_t)
        record_meta(record, prefix, meta)
        setattr(descriptor, name, record)
    return descriptor


def read_block_header(
    fh: BinaryIO, offset: int, /, meta: Meta | None = None
) -> numpy.record:
    """Return BLOCK_HEADER record at offset.

    Fields are written to `meta`, if any, with prefix
    ``BHFileBlockHeader.``.

    """
    fh.seek(offset)
    block_header = read_record(fh, BLOCK_HEADER)
    if meta is not None:
        record_meta(block_header, 'BHFileBlockHeader.', meta)
    return block_header


def iter_block_headers(
    fh: BinaryIO, offset: int, count: int, /
) -> Iterator[numpy.record]:
    """Return iterator over chain of count BLOCK_HEADER records.

    Parameters:
        fh: Open binary file.
        offset: Position of first block header, FILE_HEADER.dataBlockOffs.
        count: Number of block headers to read, for example,
            :py:func:`data_blocks`.

    """
    for _ in range(count):
        block_header = read_block_header(fh, offset)
        yield block_header
        offset = int(block_header['nextBlockOffs'])


def measure_descriptor_presence(length: int, /) -> tuple[bool, ...]:
    """Return presence of measurement description sub-records.

    Each sub-record is present if `length` is at least the cumulative size
    of the sub-record and all preceding ones.

    >>> measure_descriptor_presence(211)
    (True, False, False, False, False)
    >>> measure_descriptor_presence(210)
    (False, False, False, False, False)

    """
    presence = []
    threshold = 0
    for _, _, record_t in MEASURE_DESCRIPTOR:
        threshold += record_dtype(record_t).itemsize
        presence.append(length >= threshold)
    return tuple(presence)


def setup_key_value(line: str, /) -> tuple[str, str] | None:
    """Return key/value pair from line of setup block, if any.

    Raise ValueError if a line with known prefix lacks brackets or commas.

    >>> setup_key_value('#SP [SP_SCAN_X,I,128]')
    ('SP_SCAN_X', '128')
    >>> setup_key_value('#TR  TRACE [A, B]')
    ('#TR  TRACE', 'A, B')

    """
    if line.startswith(('#SP', '#DI', '#PR', '#MP')):
        start = line.index('[')
        key = line[start + 1 : line.index(',', start)]
        end = line.rindex(',') + 1
        if end > len(line) - 1:
            msg = f'no value after last comma in {line!r}'
            raise ValueError(msg)
        value = line[end:-1]
        return key, value
    if line.startswith(('#TR', '#WI')):
        start = line.index('[')
        key = line[:start].strip()
        value = line[start + 1 : line.index(']', start)]
        return key, value
    return None


def setup_dimension(line: str, /) -> tuple[str, int] | None:
    """Return dimension name and size from line of setup block, if any.

    Raise ValueError if the tagged value is not an integer.

    >>> setup_dimension('#SP [SP_SCAN_RY,I,4]')
    ('channels', 4)

    """
    for tag, name in DIMENSION_TAGS:
        start = line.find(tag)
        if start < 0:
            continue
        start += len(tag)
        return name, int(line[start : line.index(']', start)])
    return None


def block_number(block_header: numpy.record, /) -> int:
    """Return number of data block in file."""
    if block_header['blockNo'] >= 0x7FFE:
        return int(block_header['lblockNo'])
    return int(block_header['blockNo'])


def data_blocks(header: numpy.record, /) -> int:
    """Return number of data blocks in file."""
    if header['noOfDataBlocks'] == 0x7FFF:
        return int(header['reserved1'])
    return int(header['noOfDataBlocks'])


def read_bytes(fh: BinaryIO, offset: int, size: int, /) -> bytes:
    """Return size bytes read from file at offset."""
    fh.seek(offset)
    data = fh.read(size)
    if len(data) != size:
        raise EOFError(
            f'expected {size} bytes at offset {offset}, got {len(data)}'
        )
    return data


def read_record(fh: BinaryIO, record: Record, /) -> numpy.record:
    """Return record read at current file position."""
    return numpy.rec.fromfile(
        # type: ignore[call-overload]
        fh,
        dtype=record_dtype(record),
        shape=1,
    )[0]


def record_dtype(record: Record, /) -> numpy.dtype[Any]:
    """Return packed numpy dtype of record in file byte order."""
    return numpy.dtype(record).newbyteorder(BYTEORDER)


def record_items(record: numpy.record, /) -> Iterator[tuple[str, Value]]:
    """Return iterator over names and Python scalar values of record."""
    for name in record.dtype.names:
        value = record[name]
        if isinstance(value, bytes):
            value = stripnull(value).decode(ENCODING, errors='replace')
            yield name, value.strip()
        elif isinstance(value, numpy.floating):
            yield name, float(value)
        else:
            yield name, int(value)


def record_meta(record: numpy.record, prefix: str, meta: Meta, /) -> None:
    """Write fields of record to metadata mapping."""
    for name, value in record_items(record):
        meta[prefix + name] = value


def record_str(name: str, record: numpy.record | None) -> str:
    """Return numpy record formatted as string."""
    if record is None:
        return f'{name}: None'
    return indent(
        f'{name}:',
        *(f'{key}: {value!r}' for key, value in record_items(record)),
    )


def indent(*args: Any) -> str:
    """Return joined string representations of objects with indented lines."""
    text = '\n'.join(str(arg) for arg in args)
    return '\n'.join(
        ('  ' + line if line else line) for line in text.splitlines() if line
    )[2:]


def stripnull(string: bytes, /) -> bytes:
    r"""Return string truncated at first null character.

    >>> stripnull(b'bytes\x00garbage')
    b'bytes'

    """
    i = string.find(b'\x00')
    return string if i < 0 else string[:i]


def log_warning(msg: object, *args: object, **kwargs: Any) -> None:
    """Log message with level WARNING."""
    import logging

    logging.getLogger(__name__).warning(msg, *args, **kwargs)


FILE_HEADER: Record = [
    ('revision', 'i2'),
    ('infoOffs', 'i4'),
    ('infoLength', 'i2'),
    ('setupOffs', 'i4'),
    ('setupLength', 'u2'),
    ('dataBlockOffs', 'i4'),
    ('noOfDataBlocks', 'i2'),
    ('dataBlockLength', 'u4'),
    ('measDescBlockOffs', 'i4'),
    ('noOfMeasDescBlocks', 'i2'),
    ('measDescBlockLength', 'i2'),
    ('headerValid', 'u2'),
    ('reserved1', 'u4'),  # noOfDataBlocks if that is 0x7FFF
    ('reserved2', 'u2'),
    ('chksum', 'u2'),
]


# Measurement description blocks
MEASURE_INFO: Record = [
    ('time', 'S9'),
    ('date', 'S11'),
    ('modSerNo', 'S16'),
    ('measMode', 'i2'),
    ('cfdLL', 'f4'),
    ('cfdLH', 'f4'),
    ('cfdZC', 'f4'),
    ('cfdHF', 'f4'),
    ('synZC', 'f4'),
    ('synFD', 'i2'),
    ('synHF', 'f4'),
    ('tacR', 'f4'),
    ('tacG', 'i2'),
    ('tacOF', 'f4'),
    ('tacLL', 'f4'),
    ('tacLH', 'f4'),
    ('adcRE', 'i2'),
    ('ealDE', 'i2'),
    ('ncx', 'i2'),
    ('ncy', 'i2'),
    ('page', 'u2'),
    ('colT', 'f4'),
    ('repT', 'f4'),
    ('stopt', 'i2'),
    ('overfl', 'u1'),
    ('useMotor', 'i2'),
    ('steps', 'u2'),
    ('offset', 'f4'),
    ('dither', 'i2'),
    ('incr', 'i2'),
    ('memBank', 'i2'),
    ('modType', 'S16'),
    ('synTH', 'f4'),
    ('deadTimeComp', 'i2'),
    ('polarityL', 'i2'),  # 2 = disabled line markers
    ('polarityF', 'i2'),
    ('polarityP', 'i2'),
    ('linediv', 'i2'),  # line predivider = 2 ** linediv
    ('accumulate', 'i2'),
    ('flbckY', 'i4'),
    ('flbckX', 'i4'),
    ('bordU', 'i4'),
    ('bordL', 'i4'),
    ('pixTime', 'f4'),
    ('pixClk', 'i2'),
    ('trigger', 'i2'),
    ('scanX', 'i4'),
    ('scanY', 'i4'),
    ('scanRX', 'i4'),
    ('scanRY', 'i4'),
    ('fifoTyp', 'i2'),
    ('epxDiv', 'i4'),
    ('modTypeCode', 'u2'),
    ('modFpgaVer', 'u2'),
    ('overflowCorrFactor', 'f4'),
    ('adcZoom', 'i4'),
    ('cycles', 'i4'),
]


# Info collected when measurement finished
MEASURE_STOP_INFO: Record = [
    ('status', 'u2'),
    ('flags', 'u2'),
    ('stopTime', 'f4'),
    ('curStep', 'i4'),
    ('curCycle', 'i4'),
    ('curPage', 'i4'),
    ('minSyncRate', 'f4'),
    ('minCfdRate', 'f4'),
    ('minTacRate', 'f4'),
    ('minAdcRate', 'f4'),
    ('maxSyncRate', 'f4'),
    ('maxCfdRate', 'f4'),
    ('maxTacRate', 'f4'),
    ('maxAdcRate', 'f4'),
    ('reserved1', 'i4'),
    ('reserved2', 'f4'),
]


# Info collected when FIFO measurement finished
MEASURE_FCS_INFO: Record = [
    ('chan', 'u2'),
    ('fcsDecayCalc', 'u2'),
    ('mtResol', 'u4'),  # 0.1 ns units
    ('cortime', 'f4'),
    ('calcPhotons', 'u4'),
    ('fcsPoints', 'i4'),
    ('endTime', 'f4'),
    ('overruns', 'u2'),
    ('fcsType', 'u2'),
    ('crossChan', 'u2'),
    ('mod', 'u2'),
    ('crossMod', 'u2'),
    ('crossMtResol', 'u4'),
]


# Camera mode or FIFO_IMAGE mode
MEASURE_INFO_EXT: Record = [
    ('imageX', 'i4'),
    ('imageY', 'i4'),
    ('imageRX', 'i4'),
    ('imageRY', 'i4'),
    ('xyGain', 'i2'),
    ('masterClock', 'i2'),
    ('adcDE', 'i2'),
    ('detType', 'i2'),
    ('xAxis', 'i2'),
]


# Extension of MeasFCSInfo for other histograms
MEASURE_HIST_INFO: Record = [
    ('fidaTime', 'f4'),
    ('fildaTime', 'f4'),
    ('fidaPoints', 'i4'),
    ('fildaPoints', 'i4'),
    ('mcsTime', 'f4'),
    ('mcsPoints', 'i4'),
]


# Sub-records of measurement description block in file order:
# attribute name, metadata prefix, record
MEASURE_DESCRIPTOR: list[tuple[str, str, Record]] = [
    ('measure_info', 'MeasureInfo.', MEASURE_INFO),
    ('stop_info', 'MeasStopInfo.', MEASURE_STOP_INFO),
    ('fcs_info', 'MeasFCSInfo.', MEASURE_FCS_INFO),
    ('extended_info', 'MeasureInfo.', MEASURE_INFO_EXT),
    ('hist_info', 'MeasHISTInfo.', MEASURE_HIST_INFO),
]


BLOCK_HEADER: Record = [
    ('blockNo', 'i2'),  # use lblockNo if >= 0x7FFE
    ('dataOffs', 'i4'),
    ('nextBlockOffs', 'i4'),
    ('blockType', 'u2'),
    ('measDescBlockNo', 'i2'),
    ('lblockNo', 'u4'),
    ('blockLength', 'u4'),
]


# Setup block tags: tag, dimension
DIMENSION_TAGS: list[tuple[str, str]] = [
    ('#SP [SP_SCAN_X,I,', 'width'),
    ('#SP [SP_SCAN_Y,I,', 'height'),
    ('#SP [SP_ADC_RE,I,', 'time_bins'),
    ('#SP [SP_SCAN_RX,I,', 'channels'),
    ('#SP [SP_SCAN_RY,I,', 'channels'),
]


# Mode of creation
BLOCK_CREATION: dict[int, str] = {
    0: 'NOT_USED',
    1: 'MEAS_DATA',
    2: 'FLOW_DATA',
    3: 'MEAS_DATA_FROM_FILE',
    4: 'CALC_DATA',
    5: 'SIM_DATA',
    8: 'FIFO_DATA',
    9: 'FIFO_DATA_FROM_FILE',
}

BLOCK_CONTENT: dict[int, str] = {
    0x0: 'DECAY_BLOCK',
    0x10: 'PAGE_BLOCK',
    0x20: 'FCS_BLOCK',
    0x30: 'FIDA_BLOCK',
    0x40: 'FILDA_BLOCK',
    0x50: 'MCS_BLOCK',
    0x60: 'IMG_BLOCK',
    0x70: 'MCSTA_BLOCK',
    0x80: 'IMG_MCS_BLOCK',
    0x90: 'MOM_BLOCK',
    0xA0: 'IMG_INT_BLOCK',
    0xB0: 'IMG_WF_BLOCK',
    0xC0: 'IMG_LIFE_BLOCK',
}

# Data type
BLOCK_DTYPE: dict[int, numpy.dtype[Any]] = {
    0x000: numpy.dtype('<u2'),
    0x100: numpy.dtype('<u4'),
    0x200: numpy.dtype('<f8'),
}

MODULE_TYPE: dict[int, str] = {
    0x20: 'SPC-130',
    0x21: 'SPC-600',
    0x22: 'SPC-630',
    0x23: 'SPC-700',
    0x24: 'SPC-730',
    0x25: 'SPC-830',
    0x26: 'SPC-140',
    0x27: 'SPC-930',
    0x28: 'SPC-150',
    0x29: 'DPC-230',
    0x2A: 'SPC-130EM',
    0x2B: 'SPC-160',
    0x2E: 'SPC-150N',
    0x80: 'SPC-150NX',
    0x81: 'SPC-160X',
    0x82: 'SPC-160PCIE',
    0x83: 'SPC-130EMN',
    0x84: 'SPC-180N',
    0x85: 'SPC-180NX',
    0x86: 'SPC-180NXX',
    0x87: 'SPC-180N-USB',
    0x88: 'SPC-130IN',
    0x89: 'SPC-130INX',
    0x8A: 'SPC-130INXX',
    0x8B: 'SPC-QC-104',
    0x8C: 'SPC-QC-004',
}

MODULE_SUBTYPE: dict[int, str] = {
    0x0: 'None',
    0x1: 'SPC-150NX-12',
}

BH_HEADER_CHKSUM = 0x55AA
BH_HEADER_NOT_VALID = 0x1111
BH_HEADER_VALID = 0x5555

HEADER_VALID: dict[int, bool] = {
    BH_HEADER_NOT_VALID: False,
    BH_HEADER_VALID: True,
}

SETUP_IDENTIFIER = 'SPC Setup Script File'
DATA_IDENTIFIER = 'SPC Setup & Data File'
FLOW_DATA_IDENTIFIER = 'SPC Flow Data File'
DLL_DATA_IDENTIFIER = 'SPC DLL Data File'
FCS_DATA_IDENTIFIER = 'SPC FCS Data File'

INFO_IDS: dict[str, str] = {
    SETUP_IDENTIFIER: 'Setup script mode: setup only',
    DATA_IDENTIFIER: 'Normal mode: setup + data',
    DLL_DATA_IDENTIFIER: 'DLL created: no setup, only data',
    FLOW_DATA_IDENTIFIER: 'Continuous Flow mode: no setup, only data',
    FCS_DATA_IDENTIFIER: (
        'FIFO mode: setup, data blocks = Decay, FCS, FIDA, FILDA & MCS '
        'curves for each used routing channel'
    ),
}


if __name__ == '__main__':
    import doctest

    doctest.testmod()

    assert record_dtype(FILE_HEADER).itemsize == 42  # BH_HDR_LENGTH
    assert record_dtype(MEASURE_INFO).itemsize == 211
    assert record_dtype(MEASURE_STOP_INFO).itemsize == 60
    assert record_dtype(MEASURE_FCS_INFO).itemsize == 38
    assert record_dtype(MEASURE_INFO_EXT).itemsize == 26
    assert record_dtype(MEASURE_HIST_INFO).itemsize == 24
    assert record_dtype(BLOCK_HEADER).itemsize == 22

# mypy: disable-error-code="no-any-return"
