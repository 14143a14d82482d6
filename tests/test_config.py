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

import os
import tempfile
import unittest
from unittest import mock

from stoqreceipt.configparser import StoqreceiptConfig
from stoqreceipt.content import CurrencyFormat
from stoqreceipt.enum import PaperWidth, SymbolPosition
from stoqreceipt.exceptions import ConfigError

CONFIG = """
[Printer]
paper_width = 58
output = usb
vendor_id = 0x0416
product_id = 0x5011
chars_per_line = 42

[Currency]
symbol = R$
symbol_position = before
thousand_separator = "."
decimal_separator = ,
decimals = 2
"""


class TestConfig(unittest.TestCase):
    def setUp(self):
        self._dir = tempfile.TemporaryDirectory()
        self._filename = self._write(CONFIG)

    def tearDown(self):
        self._dir.cleanup()

    def _write(self, text, name='stoqreceipt.conf'):
        filename = os.path.join(self._dir.name, name)
        with open(filename, 'w') as fp:
            fp.write(text)
        return filename

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            StoqreceiptConfig(os.path.join(self._dir.name, 'nothere.conf'))

    def test_search_paths(self):
        config = StoqreceiptConfig(self._filename)
        self.assertEqual(config.get_search_paths()[-1], '/etc/stoqreceipt')

        with mock.patch.object(StoqreceiptConfig, 'get_homepath',
                               return_value=self._dir.name):
            config = StoqreceiptConfig()
        self.assertEqual(config.filename, self._filename)

    def test_get_option(self):
        config = StoqreceiptConfig(self._filename)
        self.assertEqual(config.get_option('output'), 'usb')
        self.assertEqual(config.get_int_option('vendor_id'), 0x0416)
        self.assertTrue(config.has_option('product_id'))
        self.assertFalse(config.has_option('device'))
        with self.assertRaises(ConfigError):
            config.get_option('device')
        with self.assertRaises(ConfigError):
            config.get_option('symbol', 'Nothing')
        with self.assertRaises(ConfigError):
            config.get_int_option('output')

    def test_paper(self):
        config = StoqreceiptConfig(self._filename)
        self.assertEqual(config.get_paper_width(), PaperWidth.MM58)
        self.assertEqual(config.get_chars_per_line(), 42)

    def test_invalid_paper(self):
        config = StoqreceiptConfig(self._write(
            "[Printer]\npaper_width = 110\nchars_per_line = 300\n", 'bad.conf'))
        with self.assertRaises(ConfigError):
            config.get_paper_width()
        with self.assertRaises(ConfigError):
            config.get_chars_per_line()

    def test_currency(self):
        config = StoqreceiptConfig(self._filename)
        self.assertEqual(config.get_currency_format(),
                         CurrencyFormat(symbol='R$', thousand_separator='.',
                                        decimal_separator=',',
                                        symbol_position=SymbolPosition.BEFORE))

    def test_currency_defaults(self):
        config = StoqreceiptConfig(self._write("[Printer]\n", 'empty.conf'))
        self.assertEqual(config.get_currency_format(), CurrencyFormat())

    def test_invalid_currency(self):
        config = StoqreceiptConfig(self._write(
            "[Currency]\nsymbol_position = middle\n", 'bad.conf'))
        with self.assertRaises(ConfigError):
            config.get_currency_format()
