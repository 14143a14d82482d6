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

from serial import Serial, EIGHTBITS, PARITY_NONE, STOPBITS_ONE
from zope.interface import implementer

from stoqreceipt.exceptions import OutputError
from stoqreceipt.interfaces import IPrinterOutput

log = logging.getLogger('stoqreceipt.serial')


@implementer(IPrinterOutput)
class VirtualOutput:
    """ An output that keeps everything written to it in memory """

    def __init__(self):
        self.data = b''
        self.is_open = False

    def open(self):
        self.is_open = True

    def write(self, data):
        self.data += data

    def close(self):
        self.is_open = False


class SerialPort(Serial):

    def __init__(self, device, baudrate=9600):
        # WARNING: Never change these default options, most receipt printers
        # ship configured for 8N1 and we have no way to negotiate it.
        Serial.__init__(self, device, baudrate=baudrate, bytesize=EIGHTBITS,
                        parity=PARITY_NONE, stopbits=STOPBITS_ONE, timeout=3,
                        write_timeout=3)
        self.setDTR(True)
        self.reset_input_buffer()
        self.reset_output_buffer()


@implementer(IPrinterOutput)
class SerialOutput(object):
    """ Writes to a printer connected to a serial port.

    Either a device name or an already created port must be given. The
    port is only created when the output is opened.
    """

    def __init__(self, device=None, baudrate=9600, port=None):
        if device is None and port is None:
            raise OutputError("A serial device or port must be specified")
        self.device = device
        self.baudrate = baudrate
        self._port = port

    def set_port(self, port):
        self._port = port

    def get_port(self):
        return self._port

    def open(self):
        if self._port is None:
            self._port = SerialPort(self.device, self.baudrate)
        elif not self._port.is_open:
            self._port.open()

    def write(self, data):
        if self._port is None:
            self.open()
        log.debug(">>> %r (%d bytes)", data, len(data))
        self._port.write(data)

    def close(self):
        if self._port is not None and self._port.is_open:
            # Flush whaterver is pending to write, since port.close() will close it
            # *imediatally*, losing what was pending to write.
            self._port.flush()
            self._port.close()
