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
Configuration file handling.

A configuration file looks like::

    [Printer]
    paper_width = 58
    output = serial
    device = /dev/ttyS0
    baudrate = 9600

    [Currency]
    symbol = R$
    symbol_position = before
    thousand_separator = .
    decimal_separator = ,
"""

import configparser
import logging
import os

from stoqreceipt.capabilities import CHARS_PER_LINE
from stoqreceipt.content import CurrencyFormat
from stoqreceipt.enum import PaperWidth, SymbolPosition
from stoqreceipt.exceptions import CapabilityError, ConfigError

log = logging.getLogger('stoqreceipt.config')

PRINTER_SECTION = 'Printer'
CURRENCY_SECTION = 'Currency'


class StoqreceiptConfig:
    domain = 'stoqreceipt'

    def __init__(self, filename=None):
        self.config = configparser.ConfigParser(interpolation=None)
        self.filename = self._find_config_file(filename)
        log.info("Loading configuration from %s", self.filename)
        try:
            self.config.read(self.filename, encoding='utf-8')
        except configparser.Error as e:
            raise ConfigError("Invalid config file %s: %s" % (self.filename, e))

    def get_homepath(self):
        return os.path.join(os.path.expanduser('~'), '.' + self.domain)

    def get_search_paths(self):
        return [self.get_homepath(),
                os.path.join('/etc', self.domain)]

    def _find_config_file(self, filename):
        filename = filename or '%s.conf' % self.domain
        if os.path.isabs(filename):
            if os.path.exists(filename):
                return filename
        else:
            for path in self.get_search_paths():
                candidate = os.path.join(path, filename)
                if os.path.exists(candidate):
                    return candidate
        raise ConfigError("Config file %s not found" % filename)

    def has_option(self, name, section=PRINTER_SECTION):
        return self.config.has_option(section, name)

    def get_option(self, name, section=PRINTER_SECTION):
        if not self.config.has_section(section):
            raise ConfigError("Invalid section: %s" % section)
        elif not self.config.has_option(section, name):
            raise ConfigError("%s does not have option: %s" % (section, name))
        return self.config.get(section, name)

    def get_int_option(self, name, section=PRINTER_SECTION):
        value = self.get_option(name, section)
        try:
            return int(value, 0)
        except ValueError:
            raise ConfigError("%s.%s must be a number, got %r"
                              % (section, name, value))

    def get_paper_width(self):
        value = self.get_int_option('paper_width')
        try:
            return PaperWidth(value)
        except ValueError:
            raise ConfigError("Unsupported paper width: %r" % value)

    def get_chars_per_line(self):
        value = self.get_int_option('chars_per_line')
        try:
            CHARS_PER_LINE.check_value(value)
        except CapabilityError as e:
            raise ConfigError(str(e))
        return value

    def get_currency_format(self):
        """ The currency format in the [Currency] section.

        Options missing from the section keep the L{CurrencyFormat}
        defaults.
        """
        currency = CurrencyFormat()
        if not self.config.has_section(CURRENCY_SECTION):
            return currency

        section = self.config[CURRENCY_SECTION]
        if 'symbol' in section:
            currency.symbol = section['symbol']
        if 'decimals' in section:
            decimals = self.get_int_option('decimals', CURRENCY_SECTION)
            if decimals < 0:
                raise ConfigError("Currency decimals can't be negative")
            currency.decimals = decimals
        if 'thousand_separator' in section:
            # Spaces are stripped by configparser, allow them quoted
            currency.thousand_separator = section['thousand_separator'].strip('"\'')
        if 'decimal_separator' in section:
            currency.decimal_separator = section['decimal_separator']
        if 'symbol_position' in section:
            try:
                currency.symbol_position = SymbolPosition(
                    section['symbol_position'].lower())
            except ValueError:
                raise ConfigError("Invalid symbol position: %r"
                                  % section['symbol_position'])
        return currency
