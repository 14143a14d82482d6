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
Enumerations shared by the content model, the encoder and the outputs.

The string valued enums compare equal to their plain values, so callers
may pass either ``Alignment.CENTER`` or ``'center'``.
"""

from enum import Enum, IntEnum


class PaperWidth(IntEnum):
    """Supported paper rolls, in millimeters"""

    MM58 = 58
    MM80 = 80


class Alignment(str, Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


class FontSize(str, Enum):
    NORMAL = 'normal'
    DOUBLE_HEIGHT = 'double-height'
    DOUBLE_WIDTH = 'double-width'
    DOUBLE = 'double'


class ContentType(str, Enum):
    """The closed set of content item tags"""

    TEXT = 'text'
    LINE = 'line'
    TABLE = 'table'
    BARCODE = 'barcode'
    QRCODE = 'qrcode'
    IMAGE = 'image'
    FEED = 'feed'
    CUT = 'cut'


class BarcodeType(str, Enum):
    UPC_A = 'UPC-A'
    UPC_E = 'UPC-E'
    EAN13 = 'EAN13'
    EAN8 = 'EAN8'
    CODE39 = 'CODE39'
    ITF = 'ITF'
    CODABAR = 'CODABAR'
    CODE93 = 'CODE93'
    CODE128 = 'CODE128'


class TextPosition(str, Enum):
    """Where the human readable interpretation of a barcode goes"""

    NONE = 'none'
    ABOVE = 'above'
    BELOW = 'below'
    BOTH = 'both'


class QRErrorCorrection(str, Enum):
    L = 'L'
    M = 'M'
    Q = 'Q'
    H = 'H'


class SymbolPosition(str, Enum):
    BEFORE = 'before'
    AFTER = 'after'


class OutputType(str, Enum):
    SERIAL = 'serial'
    USB = 'usb'
    SPOOL = 'spool'
    FILE = 'file'
    VIRTUAL = 'virtual'
