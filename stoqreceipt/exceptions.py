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
Stoqreceipt exceptions definition
"""


class StoqreceiptError(Exception):
    "Base class for stoqreceipt exceptions"


class ConfigError(StoqreceiptError):
    "Error caused by an invalid or missing configuration"


class CapabilityError(StoqreceiptError):
    "A value is outside the limits supported by the printer"


class OutputError(StoqreceiptError):
    "The encoded data could not be delivered to the printer"


class USBDriverError(OutputError):
    "The USB device could not be found or used"


class SpoolError(OutputError):
    "The operating system spooler refused the print job"
