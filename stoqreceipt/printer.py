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
Sending receipts to a printer.
"""

import datetime
import logging
import uuid

from serial import SerialException
from usb.core import USBError

from stoqreceipt.builder import ReceiptBuilder
from stoqreceipt.configparser import StoqreceiptConfig
from stoqreceipt.content import ReceiptData
from stoqreceipt.enum import OutputType, PaperWidth
from stoqreceipt.escpos import EscPosEncoder
from stoqreceipt.exceptions import ConfigError, OutputError
from stoqreceipt.interfaces import IPrinterOutput
from stoqreceipt.utils import enum_value, get_obj_from_module, int_or_default

log = logging.getLogger('stoqreceipt.printer')

_OUTPUTS = {
    'serial': ('stoqreceipt.serialbase', 'SerialOutput'),
    'usb': ('stoqreceipt.usbbase', 'UsbOutput'),
    'spool': ('stoqreceipt.spool', 'SpoolOutput'),
    'file': ('stoqreceipt.spool', 'DeviceFileOutput'),
    'virtual': ('stoqreceipt.serialbase', 'VirtualOutput'),
}


def get_supported_outputs():
    """The output types a L{ReceiptPrinter} can be configured with"""
    return [OutputType(name) for name in sorted(_OUTPUTS)]


def _generate_job_id():
    return 'print-%s-%s' % (datetime.datetime.now().strftime('%Y%m%d%H%M%S'),
                            uuid.uuid4().hex[:7])


class PrintResult(object):
    """ The outcome of a print job

    @ivar success: if all the data was handed to the output
    @ivar job_id: an identifier for the job, also used in the logs
    @ivar error: the error message when the job failed
    """

    def __init__(self, success, job_id, error=None):
        self.success = success
        self.job_id = job_id
        self.error = error

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return '<PrintResult %s ok>' % self.job_id
        return '<PrintResult %s failed: %s>' % (self.job_id, self.error)


class ReceiptPrinter(object):
    """ Encodes receipts and hands them to an output.

    The output can either be given directly, as an object providing
    L{IPrinterOutput}, or be described by the output type and its
    parameters. Values present in the configuration file override the
    ones given here.
    """

    _config_int_fields = ['baudrate', 'vendor_id', 'product_id']

    def __init__(self, output=None, paper_width=PaperWidth.MM80,
                 chars_per_line=None, currency=None, config_file=None,
                 output_type=None, device=None, baudrate=9600,
                 vendor_id=None, product_id=None, printer_name=None):
        self.output = output
        self.paper_width = paper_width
        self.chars_per_line = chars_per_line
        self.currency = currency
        self.output_type = enum_value(output_type)
        self.device = device
        self.baudrate = baudrate
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.printer_name = printer_name
        self._load_configuration(config_file)

    def _load_configuration(self, config_file):
        try:
            self.config = StoqreceiptConfig(config_file)
        except ConfigError as e:
            log.info(e)
            self.config = None
        else:
            self._apply_config(self.config)

        if self.output is None:
            self.output = self._create_output()
        if not IPrinterOutput.providedBy(self.output):
            raise TypeError("%r does not provide IPrinterOutput" % (self.output, ))

        self.encoder = EscPosEncoder(self.paper_width,
                                     chars_per_line=self.chars_per_line)
        log.info("Receipt printer initialized: output=%s, paper_width=%s"
                 % (type(self.output).__name__, int(enum_value(self.paper_width))))

    def _apply_config(self, config):
        # The option in the file is just "output", the attribute holds a name
        if config.has_option('output'):
            self.output_type = config.get_option('output').lower()
        for field in ['device', 'printer_name']:
            if config.has_option(field):
                setattr(self, field, config.get_option(field))
        for field in self._config_int_fields:
            if config.has_option(field):
                setattr(self, field, config.get_int_option(field))
        if config.has_option('paper_width'):
            self.paper_width = config.get_paper_width()
        if config.has_option('chars_per_line'):
            self.chars_per_line = config.get_chars_per_line()
        currency = config.get_currency_format()
        if config.config.has_section('Currency') or self.currency is None:
            self.currency = currency

    def _create_output(self):
        if not self.output_type:
            raise ConfigError("Output not specified in config or constructor, giving up")
        if self.output_type not in _OUTPUTS:
            raise ConfigError("Unsupported output: %s" % (self.output_type, ))

        module_name, class_name = _OUTPUTS[self.output_type]
        output_class = get_obj_from_module(module_name, class_name)
        if self.output_type == 'serial':
            return output_class(self.device,
                                int_or_default(self.baudrate, 9600))
        elif self.output_type == 'usb':
            if self.vendor_id is None or self.product_id is None:
                raise ConfigError("USB output needs vendor_id and product_id")
            return output_class(self.vendor_id, self.product_id)
        elif self.output_type == 'spool':
            return output_class(self.printer_name)
        elif self.output_type == 'file':
            return output_class(self.device)
        return output_class()

    #
    # Public API
    #

    get_supported_outputs = staticmethod(get_supported_outputs)

    def create_builder(self):
        """A L{ReceiptBuilder} matching this printer's paper and currency"""
        return ReceiptBuilder(self.paper_width,
                              chars_per_line=self.chars_per_line,
                              currency=self.currency)

    def print_receipt(self, receipt):
        """ Prints a receipt

        @param receipt: a L{ReceiptBuilder}, a L{ReceiptData} or a mapping
                        accepted by L{ReceiptData.from_dict}
        @returns: a L{PrintResult}
        """
        if isinstance(receipt, ReceiptBuilder):
            contents = receipt.get_contents()
        elif isinstance(receipt, (ReceiptData, dict)):
            contents = self.create_builder().from_data(receipt).get_contents()
        else:
            raise TypeError("Can't print %r" % (receipt, ))
        return self.print_contents(contents)

    def print_contents(self, contents):
        return self.print_raw(self.encoder.render(contents))

    def print_raw(self, data):
        """ Hands already encoded bytes to the output

        Failures of the output are reported in the result, they are not
        raised.
        """
        job_id = _generate_job_id()
        log.info("Job %s: sending %d bytes" % (job_id, len(data)))
        try:
            self.output.open()
            try:
                self.output.write(data)
            finally:
                self.output.close()
        except (OutputError, SerialException, USBError, OSError) as e:
            log.warning("Job %s failed: %s" % (job_id, e))
            return PrintResult(False, job_id, str(e))
        return PrintResult(True, job_id)
