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
Fluent construction of receipts.

    >>> data = (create_receipt(PaperWidth.MM58)
    ...         .title('My Store')
    ...         .line()
    ...         .item_row('Coffee', 2, 3.5)
    ...         .feed()
    ...         .cut()
    ...         .build())
"""

import datetime
import logging

from stoqreceipt.content import (BarcodeContent, BarcodeOptions, CurrencyFormat,
                                 CutContent, FeedContent, ImageContent,
                                 ImageOptions, LineContent, QRCodeContent,
                                 QRCodeOptions, ReceiptData, TableColumn,
                                 TableContent, TextContent, TextStyle)
from stoqreceipt.enum import (Alignment, BarcodeType, ContentType, FontSize,
                              PaperWidth, QRErrorCorrection, TextPosition)
from stoqreceipt.escpos import (EscPosEncoder, DEFAULT_BARCODE_HEIGHT,
                                DEFAULT_BARCODE_WIDTH, DEFAULT_FEED_LINES,
                                DEFAULT_QRCODE_SIZE)
from stoqreceipt.format import (format_currency, format_date,
                                get_chars_per_line, get_paper_width)
from stoqreceipt.preview import build_html
from stoqreceipt.translation import stoqreceipt_gettext
from stoqreceipt.utils import enum_value

_ = stoqreceipt_gettext

log = logging.getLogger('stoqreceipt.builder')


def _format_quantity(quantity):
    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    return str(quantity)


class ReceiptBuilder(object):
    """ Accumulates the content of a receipt.

    Every append method returns the builder itself, so calls can be
    chained. The builder is meant to be used by a single thread while a
    receipt is being put together.
    """

    def __init__(self, paper_width=PaperWidth.MM80, chars_per_line=None,
                 currency=None):
        self._contents = []
        self._paper_width = get_paper_width(paper_width)
        self._chars_per_line = chars_per_line
        self._currency = currency or CurrencyFormat()

    #
    # Properties
    #

    @property
    def paper_width(self):
        return self._paper_width

    @property
    def chars_per_line(self):
        if self._chars_per_line is not None:
            return self._chars_per_line
        return get_chars_per_line(self._paper_width)

    @property
    def currency(self):
        return self._currency

    def set_currency(self, currency):
        self._currency = currency or CurrencyFormat()
        return self

    def format_currency(self, amount):
        return format_currency(amount, self._currency)

    #
    # Text
    #

    def text(self, value, style=None, **kwargs):
        """ Adds a line of text.

        @param style:   a L{TextStyle}
        @param kwargs:  TextStyle fields, applied over style
        """
        if kwargs:
            style = (style or TextStyle()).replace(**kwargs)
        self._contents.append(TextContent(value, style))
        return self

    def text_center(self, value, style=None):
        return self.text(value, style, align=Alignment.CENTER)

    def text_right(self, value, style=None):
        return self.text(value, style, align=Alignment.RIGHT)

    def text_bold(self, value, style=None):
        return self.text(value, style, bold=True)

    def title(self, value):
        """Centered, bold and double sized text"""
        return self.text(value, TextStyle(align=Alignment.CENTER, bold=True,
                                          size=FontSize.DOUBLE))

    def subtitle(self, value):
        """Centered and bold text"""
        return self.text(value, TextStyle(align=Alignment.CENTER, bold=True))

    #
    # Separators and paper control
    #

    def line(self, character=None):
        self._contents.append(LineContent(character))
        return self

    def dashed_line(self):
        return self.line('-')

    def double_line(self):
        return self.line('=')

    def feed(self, lines=DEFAULT_FEED_LINES):
        self._contents.append(FeedContent(lines))
        return self

    def cut(self, partial=False):
        self._contents.append(CutContent(partial))
        return self

    #
    # Tables
    #

    def table_row(self, columns):
        """ Adds a table row.

        If the last item added is a table the row goes into it, so that
        consecutive rows share a single table block. Otherwise a new table
        is started.

        @param columns: L{TableColumn}s, mappings with TableColumn fields
                        or plain strings
        """
        row = []
        for column in columns:
            if isinstance(column, TableColumn):
                row.append(column)
            elif isinstance(column, dict):
                row.append(TableColumn(**column))
            else:
                row.append(TableColumn(text=column))

        last = self._contents[-1] if self._contents else None
        if (last is not None and
                enum_value(getattr(last, 'content_type', None)) ==
                ContentType.TABLE.value):
            last.rows.append(row)
        else:
            self._contents.append(TableContent(rows=[row]))
        return self

    def row(self, label, value, label_bold=False):
        """A label on the left and a value on the right"""
        return self.table_row([
            TableColumn(text=label, align=Alignment.LEFT, bold=label_bold),
            TableColumn(text=value, align=Alignment.RIGHT),
        ])

    def item_row(self, name, quantity, price):
        return self.table_row([
            TableColumn(text=name, width='50%', align=Alignment.LEFT),
            TableColumn(text=_format_quantity(quantity), width='15%',
                        align=Alignment.CENTER),
            TableColumn(text=self.format_currency(price), width='35%',
                        align=Alignment.RIGHT),
        ])

    def total_row(self, label, amount):
        return self.table_row([
            TableColumn(text=label, align=Alignment.LEFT, bold=True),
            TableColumn(text=self.format_currency(amount),
                        align=Alignment.RIGHT, bold=True),
        ])

    #
    # Codes and images
    #

    def barcode(self, value, options=None, **kwargs):
        """ Adds a barcode, by default a centered CODE128 with the text
        below it.
        """
        options = options or BarcodeOptions()
        values = dict((f, getattr(options, f)) for f in options._fields)
        values.update(kwargs)
        self._contents.append(BarcodeContent(value, BarcodeOptions(
            type=values['type'] or BarcodeType.CODE128,
            width=values['width'] or DEFAULT_BARCODE_WIDTH,
            height=values['height'] or DEFAULT_BARCODE_HEIGHT,
            show_text=values['show_text'] is not False,
            text_position=values['text_position'] or TextPosition.BELOW,
            align=values['align'] or Alignment.CENTER)))
        return self

    def qrcode(self, value, options=None, **kwargs):
        options = options or QRCodeOptions()
        values = dict((f, getattr(options, f)) for f in options._fields)
        values.update(kwargs)
        self._contents.append(QRCodeContent(value, QRCodeOptions(
            size=values['size'] or DEFAULT_QRCODE_SIZE,
            error_correction=values['error_correction'] or QRErrorCorrection.M,
            align=values['align'] or Alignment.CENTER)))
        return self

    def image(self, source, options=None):
        self._contents.append(ImageContent(source, options))
        return self

    def raw(self, content):
        """Adds an already built content item"""
        self._contents.append(content)
        return self

    #
    # Templates
    #

    def from_data(self, data):
        """ Adds a whole receipt described by a L{ReceiptData}.

        The blocks are always added in the same order: header, metadata,
        items, totals, payment and footer, followed by a feed and a cut.
        Blocks without data are left out.

        @param data: a L{ReceiptData} or a mapping accepted by
                     L{ReceiptData.from_dict}
        """
        if isinstance(data, dict):
            data = ReceiptData.from_dict(data)

        header = data.header
        if header:
            if header.logo:
                self.image(header.logo, ImageOptions(align=Alignment.CENTER))
            if header.title:
                self.title(header.title)
            if header.subtitle:
                self.subtitle(header.subtitle)
            for address_line in header.address or []:
                self.text_center(address_line)
            if header.phone:
                self.text_center(header.phone)
            self.line()

        meta = data.meta
        if meta:
            if meta.order_number:
                self.row(_('Order #:'), str(meta.order_number))
            if meta.date:
                date = meta.date
                if isinstance(date, datetime.date):
                    date = format_date(date)
                self.row(_('Date:'), str(date))
            if meta.cashier:
                self.row(_('Cashier:'), meta.cashier)
            if meta.customer:
                self.row(_('Customer:'), meta.customer)
            self.line()

        self.table_row([
            TableColumn(text=_('Item'), width='50%', align=Alignment.LEFT,
                        bold=True),
            TableColumn(text=_('Qty'), width='15%', align=Alignment.CENTER,
                        bold=True),
            TableColumn(text=_('Price'), width='35%', align=Alignment.RIGHT,
                        bold=True),
        ])
        self.dashed_line()

        for item in data.items:
            self.item_row(item.name, item.quantity, item.price)

        self.line()

        totals = data.totals
        if totals:
            if totals.subtotal is not None:
                self.row(_('Subtotal:'), self.format_currency(totals.subtotal))
            if totals.tax is not None:
                self.row(_('Tax:'), self.format_currency(totals.tax))
            if totals.discount is not None and totals.discount > 0:
                self.row(_('Discount:'),
                         '-' + self.format_currency(totals.discount))
            self.double_line()
            self.total_row(_('TOTAL:'), totals.total)

        payment = data.payment
        if payment:
            self.feed(1)
            self.row(_('Payment:'), payment.method)
            self.row(_('Amount:'), self.format_currency(payment.amount))
            if payment.change is not None and payment.change > 0:
                self.row(_('Change:'), self.format_currency(payment.change))

        if data.footer:
            self.feed(1)
            self.line()
            for footer_line in data.footer:
                self.text_center(footer_line)

        self.feed()
        self.cut()

        log.debug("Receipt template lowered to %d items", len(self._contents))
        return self

    #
    # Output
    #

    def get_contents(self):
        """A copy of the content sequence built so far"""
        return list(self._contents)

    def clear(self):
        """Removes everything added so far"""
        self._contents = []
        return self

    def build(self):
        """Encodes the receipt into ESC/POS bytes"""
        encoder = EscPosEncoder(self._paper_width,
                                chars_per_line=self._chars_per_line)
        return encoder.render(self._contents)

    def to_html(self):
        """Renders the receipt as a HTML preview document"""
        return build_html(self._contents, self._paper_width)


def create_receipt(paper_width=PaperWidth.MM80, **kwargs):
    return ReceiptBuilder(paper_width, **kwargs)
