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
Functions for general use.
"""

import codecs
from enum import Enum
from importlib import import_module
import unicodedata


def enum_value(value):
    """ Returns the plain value of an enum member, or value itself.

    Our enums mix in str, but members hash by their name, so they can't be
    used directly to look up tables keyed by plain strings.
    """
    if isinstance(value, Enum):
        return value.value
    return value


def encode_text(text, encoding='utf-8'):
    """ Converts the string 'text' to bytes in encoding 'encoding',
    dropping whatever can't be represented

    @param text:       text to convert
    @type text:        str
    @param encoding:   encoding to use
    @type encoding:    str
    @returns:          converted text
    @rtype:            bytes
    """
    if text is None:
        return b''
    if isinstance(text, bytes):
        return text
    if encoding == "ascii":
        text = unicodedata.normalize("NFKD", text)
    return codecs.encode(str(text), encoding, "ignore")


def int_or_default(value, default):
    """Best effort conversion of value to int"""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def get_obj_from_module(module_name, obj_name):
    module = import_module(module_name)
    try:
        return getattr(module, obj_name)
    except AttributeError:
        raise ImportError("Can't find class %s for module %s" % (obj_name, module_name))
