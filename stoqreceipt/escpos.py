# -*- Mode: Python; coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Stoqreceipt
## Copyright (C) 2026 Stoq Tecnologia <http://stoq.com.br>
## All rights reserved
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program; if not, write to the Free Software
## Foundation, Inc., 59 Temple Place - Suite 330, Boston, MA 02111-1307,
## USA.
##
"""
ESC/POS encoding of a content sequence.

Every item is encoded on its own: whatever style it turns on is turned
off again before the next item, and the alignment always goes back to
left. The printer state after an item is the same as before it.
"""

import logging

from zope.interface import implementer

from stoqreceipt.capabilities import (BARCODE_HEIGHT, BARCODE_WIDTH,
                                      FEED_LINES, QRCODE_SIZE, CHARS_PER_LINE)
from stoqreceipt.content import BarcodeOptions, QRCodeOptions, TextStyle
from stoqreceipt.enum import PaperWidth
from stoqreceipt.format import (calculate_column_widths, create_line,
                                get_chars_per_line, pad_string)
from stoqreceipt.interfaces import IReceiptRenderer
from stoqreceipt.utils import encode_text, enum_value, int_or_default

log = logging.getLogger('stoqreceipt.escpos')

ESC = b'\x1b'  # Escape
GS = b'\x1d'  # Group Separator
LF = b'\x0a'  # Line Feed

DEFAULT_FEED_LINES = 3
DEFAULT_BARCODE_WIDTH = 2
DEFAULT_BARCODE_HEIGHT = 100
DEFAULT_QRCODE_SIZE = 6

# GS k m n d1...dn
BARCODE_TYPES = {
    'UPC-A': 0x41,
    'UPC-E': 0x42,
    'EAN13': 0x43,
    'EAN8': 0x44,
    'CODE39': 0x45,
    'ITF': 0x46,
    'CODABAR': 0x47,
    'CODE93': 0x48,
    'CODE128': 0x49,
}

# The n of GS ( k for function 169, levels L, M, Q and H
QRCODE_ERROR_LEVELS = {
    'L': 0x30,
    'M': 0x31,
    'Q': 0x32,
    'H': 0x33,
}

# The length byte of GS k only holds this much
_MAX_BARCODE_BYTES = 255


@implementer(IReceiptRenderer)
class EscPosEncoder(object):
    """ Encodes content sequences into ESC/POS bytes.

    The encoder is stateless, the same instance may be used to encode any
    number of receipts. The command constants are class attributes so a
    printer with a different dialect can subclass and override them.
    """

    INIT = ESC + b'@'  # Initialize printer

    TXT_ALIGN_LEFT = ESC + b'a\x00'  # Left justification
    TXT_ALIGN_CENTER = ESC + b'a\x01'  # Centering
    TXT_ALIGN_RIGHT = ESC + b'a\x02'  # Right justification

    TXT_BOLD_ON = ESC + b'E\x01'  # Bold font ON
    TXT_BOLD_OFF = ESC + b'E\x00'  # Bold font OFF
    TXT_UNDERLINE_ON = ESC + b'-\x01'  # Underline font 1-dot ON
    TXT_UNDERLINE_OFF = ESC + b'-\x00'  # Underline font OFF
    TXT_INVERT_ON = GS + b'B\x01'  # White/black reverse ON
    TXT_INVERT_OFF = GS + b'B\x00'  # White/black reverse OFF

    TXT_SIZE_NORMAL = ESC + b'!\x00'  # Normal text
    TXT_SIZE_DOUBLE_HEIGHT = ESC + b'!\x10'  # Double height text
    TXT_SIZE_DOUBLE_WIDTH = ESC + b'!\x20'  # Double width text
    TXT_SIZE_DOUBLE = ESC + b'!\x30'  # Double height and width

    FEED_LINES = ESC + b'd'  # Print and feed n lines

    PAPER_FULL_CUT = GS + b'V\x00'  # Full paper cut
    PAPER_PARTIAL_CUT = GS + b'VA\x00'  # Feed and partial cut

    BARCODE_HEIGHT = GS + b'h'  # Barcode Height [1-255]
    BARCODE_WIDTH = GS + b'w'  # Barcode Width  [2-6]
    BARCODE_TXT_OFF = GS + b'H\x00'  # HRI barcode chars OFF
    BARCODE_TXT_ABV = GS + b'H\x01'  # HRI barcode chars above
    BARCODE_TXT_BLW = GS + b'H\x02'  # HRI barcode chars below
    BARCODE_TXT_BTH = GS + b'H\x03'  # HRI both above and below
    BARCODE_PRINT = GS + b'k'
    BARCODE_CODE128_SET_B = b'{B'

    QRCODE_MODEL_2 = GS + b'(k\x04\x001A\x02\x00'
    QRCODE_SIZE = GS + b'(k\x03\x001C'
    QRCODE_ERROR_LEVEL = GS + b'(k\x03\x001E'
    QRCODE_STORE = GS + b'(k'
    QRCODE_PRINT = GS + b'(k\x03\x001Q0'

    IMAGE_PLACEHOLDER = b'[IMAGE]'

    def __init__(self, paper_width=PaperWidth.MM80, chars_per_line=None,
                 qrcode_size=DEFAULT_QRCODE_SIZE):
        """
        @param paper_width:     the L{PaperWidth} of the printer roll
        @param chars_per_line:  overrides the characters per line that
                                would be computed from paper_width
        @param qrcode_size:     the module size used for QR codes that
                                don't specify one
        """
        self.paper_width = paper_width
        if chars_per_line is None:
            chars_per_line = get_chars_per_line(paper_width)
        self.chars_per_line = CHARS_PER_LINE.clamp(chars_per_line)
        self.qrcode_size = qrcode_size

        self._encoders = {
            'text': self._encode_text,
            'line': self._encode_line,
            'table': self._encode_table,
            'feed': self._encode_feed,
            'cut': self._encode_cut,
            'barcode': self._encode_barcode,
            'qrcode': self._encode_qrcode,
            'image': self._encode_image,
        }

    #
    # IReceiptRenderer
    #

    def render(self, contents):
        """ Encodes the contents, in order, after an initialization command

        @returns: the bytes to be sent to the printer
        """
        data = bytearray(self.INIT)
        count = 0
        for count, content in enumerate(contents, 1):
            data += self.encode_content(content)
        log.debug("Encoded %d items in %d bytes", count, len(data))
        return bytes(data)

    #
    # Public API
    #

    def encode_content(self, content):
        """ Encodes a single content item.

        Items of an unknown type produce no bytes at all.
        """
        content_type = enum_value(getattr(content, 'content_type', None))
        encoder = None
        if isinstance(content_type, str):
            encoder = self._encoders.get(content_type)
        if encoder is None:
            log.debug("Skipping content of unknown type %r", content_type)
            return b''
        return b''.join(encoder(content))

    def get_align_command(self, align):
        align = enum_value(align)
        if align == 'center':
            return self.TXT_ALIGN_CENTER
        elif align == 'right':
            return self.TXT_ALIGN_RIGHT
        return self.TXT_ALIGN_LEFT

    def get_size_command(self, size):
        """Returns the command for the font size, None for normal"""
        return {
            'double-height': self.TXT_SIZE_DOUBLE_HEIGHT,
            'double-width': self.TXT_SIZE_DOUBLE_WIDTH,
            'double': self.TXT_SIZE_DOUBLE,
        }.get(enum_value(size))

    def get_feed_command(self, lines):
        return self.FEED_LINES + bytes([FEED_LINES.clamp(lines)])

    #
    # Private
    #

    def _get_optional_align_command(self, align):
        # Barcodes and QR codes only change the alignment when asked to
        if enum_value(align) in ('center', 'right'):
            return self.get_align_command(align)
        return b''

    def _encode_text(self, content):
        style = content.style or TextStyle()

        yield self.get_align_command(style.align)
        size_cmd = self.get_size_command(style.size)
        if size_cmd:
            yield size_cmd
        if style.bold:
            yield self.TXT_BOLD_ON
        if style.underline:
            yield self.TXT_UNDERLINE_ON
        if style.invert:
            yield self.TXT_INVERT_ON

        yield encode_text(content.value)
        yield LF

        if style.bold:
            yield self.TXT_BOLD_OFF
        if style.underline:
            yield self.TXT_UNDERLINE_OFF
        if style.invert:
            yield self.TXT_INVERT_OFF
        if style.size:
            yield self.TXT_SIZE_NORMAL
        yield self.TXT_ALIGN_LEFT

    def _encode_line(self, content):
        yield encode_text(create_line(self.chars_per_line, content.character))
        yield LF

    def _encode_table(self, content):
        for row in content.rows:
            widths = calculate_column_widths(row, self.chars_per_line)
            line = ''.join(
                pad_string('' if column.text is None else str(column.text),
                           width, column.align)
                for column, width in zip(row, widths))

            # ESC/POS can't make only a part of the line bold
            bold = any(column.bold for column in row)
            if bold:
                yield self.TXT_BOLD_ON
            yield encode_text(line)
            yield LF
            if bold:
                yield self.TXT_BOLD_OFF

    def _encode_feed(self, content):
        yield self.get_feed_command(
            int_or_default(content.lines, DEFAULT_FEED_LINES))

    def _encode_cut(self, content):
        yield self.get_feed_command(DEFAULT_FEED_LINES)
        if content.partial:
            yield self.PAPER_PARTIAL_CUT
        else:
            yield self.PAPER_FULL_CUT

    def _get_hri_command(self, options):
        position = enum_value(options.text_position)
        if position is None and options.show_text is False:
            position = 'none'
        return {
            'none': self.BARCODE_TXT_OFF,
            'above': self.BARCODE_TXT_ABV,
            'below': self.BARCODE_TXT_BLW,
            'both': self.BARCODE_TXT_BTH,
        }.get(position, self.BARCODE_TXT_BLW)

    def _encode_barcode(self, content):
        options = content.options or BarcodeOptions()

        yield self._get_optional_align_command(options.align)

        height = int_or_default(options.height, DEFAULT_BARCODE_HEIGHT)
        width = int_or_default(options.width, DEFAULT_BARCODE_WIDTH)
        yield self.BARCODE_HEIGHT + bytes([BARCODE_HEIGHT.clamp(height)])
        yield self.BARCODE_WIDTH + bytes([BARCODE_WIDTH.clamp(width)])
        yield self._get_hri_command(options)

        symbology = enum_value(options.type)
        if symbology not in BARCODE_TYPES:
            log.debug("Unknown barcode type %r, using CODE128", symbology)
            symbology = 'CODE128'
        type_code = BARCODE_TYPES[symbology]

        data = encode_text(content.value, 'ascii')
        if symbology == 'CODE128':
            # The code set selector counts as data
            limit = _MAX_BARCODE_BYTES - len(self.BARCODE_CODE128_SET_B)
            if len(data) > limit:
                log.info("Barcode data truncated to %d bytes", limit)
                data = data[:limit]
            yield (self.BARCODE_PRINT +
                   bytes([type_code,
                          len(data) + len(self.BARCODE_CODE128_SET_B)]) +
                   self.BARCODE_CODE128_SET_B)
        else:
            if len(data) > _MAX_BARCODE_BYTES:
                log.info("Barcode data truncated to %d bytes", _MAX_BARCODE_BYTES)
                data = data[:_MAX_BARCODE_BYTES]
            yield self.BARCODE_PRINT + bytes([type_code, len(data)])
        yield data

        yield LF
        yield self.TXT_ALIGN_LEFT

    def _encode_qrcode(self, content):
        # Parameters for GS ( k:
        #     pL and pH - defines (pL + pH * 256) for number of bytes
        #     according to the following parameters
        #     cn - defines symbol type (49 - QR code)
        #     fn - defines the function
        options = content.options or QRCodeOptions()

        yield self._get_optional_align_command(options.align)

        yield self.QRCODE_MODEL_2

        size = int_or_default(options.size, self.qrcode_size)
        yield self.QRCODE_SIZE + bytes([QRCODE_SIZE.clamp(size)])

        level = QRCODE_ERROR_LEVELS.get(enum_value(options.error_correction),
                                        QRCODE_ERROR_LEVELS['M'])
        yield self.QRCODE_ERROR_LEVEL + bytes([level])

        # Store data in symbols storage area:
        # 1D 28 6B pL pH cn(49) fn(80) m(48) data
        data = encode_text(content.value)
        bytes_len = len(data) + 3
        yield self.QRCODE_STORE + bytes([bytes_len & 0xff,
                                         (bytes_len >> 8) & 0xff]) + b'1P0'
        yield data

        # Print - 1D 28 6B pL(3) pH(0) cn(49) fn(81) m(48)
        yield self.QRCODE_PRINT

        yield LF
        yield self.TXT_ALIGN_LEFT

    def _encode_image(self, content):
        # Raster images are not supported, leave a mark where it would be
        yield self.IMAGE_PLACEHOLDER
        yield LF


def build_escpos_data(contents, paper_width=PaperWidth.MM80, chars_per_line=None):
    """ Encodes a content sequence for a printer using the given paper

    @param contents:        the content items, in print order
    @param paper_width:     the L{PaperWidth} of the roll
    @param chars_per_line:  an explicit override of the line length
    @returns:               the ESC/POS bytes
    """
    encoder = EscPosEncoder(paper_width, chars_per_line=chars_per_line)
    return encoder.render(contents)
