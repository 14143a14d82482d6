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

import logging

import usb.core
import usb.util
from zope.interface import implementer

from stoqreceipt.exceptions import USBDriverError
from stoqreceipt.interfaces import IPrinterOutput

log = logging.getLogger('stoqreceipt.usb')

# Based on python-escpos's escpos.printer.Usb:
#
# https://github.com/python-escpos/python-escpos/blob/master/src/escpos/printer.py


@implementer(IPrinterOutput)
class UsbOutput(object):
    """Writes to a printer connected through USB"""

    def __init__(self, vendor_id, product_id, interface=0, timeout=0,
                 out_ep=0x01):
        self.device = None
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.interface = interface
        self.timeout = timeout
        #: Out Endpoint address
        self.out_ep = out_ep

    def __del__(self):
        """Stop using any unnecessary resources upon destruction"""
        self.close()

    def open(self):
        self.device = usb.core.find(idVendor=self.vendor_id,
                                    idProduct=self.product_id)
        if self.device is None:
            raise USBDriverError('USB Device not found using %s:%s' %
                                 (self.vendor_id, self.product_id))

        check_driver = None
        try:
            check_driver = self.device.is_kernel_driver_active(self.interface)
        except NotImplementedError:
            pass

        if check_driver is None or check_driver:
            try:
                self.device.detach_kernel_driver(self.interface)
            except usb.core.USBError as e:
                if check_driver is not None:
                    log.warning("Could not detatch kernel driver: %s", e)

        self.device.set_configuration()

    def close(self):
        """Release the USB interface"""
        if self.device is not None:
            usb.util.dispose_resources(self.device)
        self.device = None

    def write(self, data):
        """Write any data to the USB printer

        :param data: Any data to be written
        :type data: bytes
        """
        if self.device is None:
            self.open()
        log.debug(">>> %r (%d bytes)", data, len(data))
        self.device.write(self.out_ep, data, self.timeout)
