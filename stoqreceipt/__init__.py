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

import gettext
import locale
import os

_version = "1.0.0"
__version__ = tuple(int(n) for n in _version.split('.'))

__all__ = ["__version__"]


def enable_translation(domain, localedir=None, enable_global=None):
    if localedir is None:
        localedir = os.path.join(os.path.dirname(__file__), 'locale')
        if not os.path.isdir(localedir):
            localedir = None

    gettext.bindtextdomain(domain, localedir)
    # Only available on non-win32 systems
    if hasattr(locale, 'bindtextdomain'):
        locale.bindtextdomain(domain, localedir)

    if enable_global:
        gettext.textdomain(domain)
        if hasattr(locale, 'textdomain'):
            locale.textdomain(domain)


enable_translation('stoqreceipt')
