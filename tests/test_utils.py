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

import unittest

from stoqreceipt.capabilities import Capability, BARCODE_WIDTH, FEED_LINES
from stoqreceipt.enum import Alignment
from stoqreceipt.exceptions import CapabilityError
from stoqreceipt.utils import (encode_text, enum_value, get_obj_from_module,
                               int_or_default)


class TestUtils(unittest.TestCase):
    def test_get_obj_from_module(self):
        with self.assertRaises(ImportError):
            get_obj_from_module('stoqreceipt.does.not.exists.I.hope', obj_name='FooBarBaz')

        with self.assertRaises(ImportError):
            get_obj_from_module('stoqreceipt.utils', obj_name='FooBarBazDoesNotExists')

        obj = get_obj_from_module('stoqreceipt.utils', obj_name='get_obj_from_module')
        self.assertEqual(obj, get_obj_from_module)

    def test_encode_text(self):
        self.assertEqual(encode_text(None), b'')
        self.assertEqual(encode_text(b'raw'), b'raw')
        self.assertEqual(encode_text('Ação'), 'Ação'.encode('utf-8'))
        self.assertEqual(encode_text('Ação', 'ascii'), b'Acao')
        self.assertEqual(encode_text(12), b'12')

    def test_enum_value(self):
        self.assertEqual(enum_value(Alignment.RIGHT), 'right')
        self.assertEqual(enum_value('right'), 'right')
        self.assertEqual(enum_value(None), None)

    def test_int_or_default(self):
        self.assertEqual(int_or_default('5', 3), 5)
        self.assertEqual(int_or_default(None, 3), 3)
        self.assertEqual(int_or_default(True, 3), 3)
        self.assertEqual(int_or_default('many', 3), 3)


class TestCapability(unittest.TestCase):
    def test_check_value(self):
        BARCODE_WIDTH.check_value(2)
        BARCODE_WIDTH.check_value(6)
        for value in [1, 7, 'wide', None, True]:
            with self.assertRaises(CapabilityError):
                BARCODE_WIDTH.check_value(value)

    def test_clamp(self):
        self.assertEqual(FEED_LINES.clamp(-1), 0)
        self.assertEqual(FEED_LINES.clamp(10), 10)
        self.assertEqual(FEED_LINES.clamp(1000), 255)
        self.assertEqual(Capability(min_size=3).clamp(100), 100)

    def test_invalid_limits(self):
        with self.assertRaises(ValueError):
            Capability(min_size=5, max_size=1)
