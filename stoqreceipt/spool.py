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
Outputs that go through the operating system instead of talking to the
device directly.
"""

import logging
import os
import platform
import subprocess
import tempfile

from zope.interface import implementer

from stoqreceipt.exceptions import OutputError, SpoolError
from stoqreceipt.interfaces import IPrinterOutput

log = logging.getLogger('stoqreceipt.spool')


@implementer(IPrinterOutput)
class SpoolOutput(object):
    """ Sends raw data to a printer queue.

    On Linux and Mac OS X the job goes through CUPS with
    C{lp -d <printer> -o raw}, on Windows it is copied in binary mode to
    the printer share.
    """

    def __init__(self, printer_name):
        if not printer_name:
            raise OutputError("A printer name must be specified")
        self.printer_name = printer_name

    def get_command(self, filename):
        if platform.system() == 'Windows':
            computer = os.environ.get('COMPUTERNAME', 'localhost')
            return ['cmd.exe', '/c', 'copy', '/b', filename,
                    '\\\\%s\\%s' % (computer, self.printer_name)]
        return ['lp', '-d', self.printer_name, '-o', 'raw', filename]

    def open(self):
        pass

    def write(self, data):
        fd, filename = tempfile.mkstemp(prefix='receipt-', suffix='.bin')
        try:
            with os.fdopen(fd, 'wb') as fp:
                fp.write(data)

            command = self.get_command(filename)
            log.debug("Spooling %d bytes with %r", len(data), command)
            try:
                proc = subprocess.run(command, stdout=subprocess.PIPE,
                                      stderr=subprocess.PIPE)
            except OSError as e:
                raise SpoolError("Could not run %s: %s" % (command[0], e))

            if proc.returncode != 0:
                stderr = proc.stderr.decode('utf-8', 'replace').strip()
                raise SpoolError(stderr or "Print failed with exit code %d"
                                 % proc.returncode)
        finally:
            try:
                os.unlink(filename)
            except OSError as e:
                log.info("Could not remove %s: %s", filename, e)

    def close(self):
        pass


@implementer(IPrinterOutput)
class DeviceFileOutput(object):
    """ Writes to a device node, such as /dev/usb/lp0 """

    def __init__(self, path):
        if not path:
            raise OutputError("A device path must be specified")
        self.path = path
        self._fp = None

    def open(self):
        if self._fp is None:
            self._fp = open(self.path, 'wb')

    def write(self, data):
        if self._fp is None:
            self.open()
        log.debug(">>> %r (%d bytes)", data, len(data))
        self._fp.write(data)
        self._fp.flush()

    def close(self):
        if self._fp is not None:
            self._fp.close()
            self._fp = None
