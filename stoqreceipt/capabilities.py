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
Protocol parameter limits.
"""

from numbers import Real
from typing import Optional

from stoqreceipt.exceptions import CapabilityError


class Capability:
    """ This class is used to represent a numeric protocol parameter,
    offering methods to validate or clamp a value with base in its limits.
    """

    def __init__(self, min_size: Optional[Real]=None,
                 max_size: Optional[Real]=None, name: str=''):
        """ Creates a new capability.

        @param min_size:   The minimum size for a value
        @type min_size:    number
        @param max_size    The maximum size for a value
        @type max_size:    number
        @param name:       A description used in error messages
        @type name:        str
        """
        if (min_size is not None and max_size is not None and
                min_size > max_size):
            raise ValueError("min_size can't be greater than max_size")
        self.min_size = min_size
        self.max_size = max_size
        self.name = name

    def check_value(self, value):
        """ Raises CapabilityError if value is outside the limits """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise CapabilityError("%s must be a number" % (self.name or 'the value'))

        if self.max_size is not None and value > self.max_size:
            raise CapabilityError("%s can't be greater than %r"
                                  % (self.name or 'the value', self.max_size))
        elif self.min_size is not None and value < self.min_size:
            raise CapabilityError("%s can't be less than %r"
                                  % (self.name or 'the value', self.min_size))

    def clamp(self, value):
        """ Returns value forced into the limits """
        if self.max_size is not None:
            value = min(self.max_size, value)
        if self.min_size is not None:
            value = max(self.min_size, value)
        return value


BARCODE_HEIGHT = Capability(min_size=1, max_size=255, name='barcode height')
BARCODE_WIDTH = Capability(min_size=2, max_size=6, name='barcode width')
QRCODE_SIZE = Capability(min_size=1, max_size=16, name='qrcode size')
FEED_LINES = Capability(min_size=0, max_size=255, name='feed lines')
CHARS_PER_LINE = Capability(min_size=1, max_size=255, name='chars per line')
