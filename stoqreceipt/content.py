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
The receipt content model.

A receipt is an ordered sequence of content items. Every item class has
a fixed L{ContentType} tag and carries only the fields relevant to it.
The records in here have no behavior besides comparison and repr, all
the layout and encoding logic lives in L{stoqreceipt.format} and
L{stoqreceipt.escpos}.
"""

import datetime
import logging

from stoqreceipt.enum import BarcodeType, ContentType, SymbolPosition

log = logging.getLogger('stoqreceipt.content')


class _Record(object):
    """Base for the plain value records of this module"""

    #: The attribute names that define the record, in repr order
    _fields = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return '<%s %s>' % (
            type(self).__name__,
            ' '.join('%s=%r' % (f, getattr(self, f)) for f in self._fields))


#
#  Styles and options
#

class TextStyle(_Record):
    _fields = ('bold', 'underline', 'align', 'size', 'invert')

    def __init__(self, bold=False, underline=False, align=None, size=None,
                 invert=False):
        self.bold = bold
        self.underline = underline
        self.align = align
        self.size = size
        self.invert = invert

    def replace(self, **kwargs):
        """Returns a copy of this style with the given fields changed"""
        values = dict((f, getattr(self, f)) for f in self._fields)
        values.update(kwargs)
        return TextStyle(**values)


class TableColumn(_Record):
    """ A cell of a table row.

    width is either an absolute number of characters or a percentage
    string such as '50%'. Columns without a width share what is left of
    the line.
    """

    _fields = ('text', 'width', 'align', 'bold')

    def __init__(self, text='', width=None, align=None, bold=False):
        self.text = text
        self.width = width
        self.align = align
        self.bold = bold


class BarcodeOptions(_Record):
    _fields = ('type', 'width', 'height', 'show_text', 'text_position',
               'align')

    def __init__(self, type=BarcodeType.CODE128, width=None, height=None,
                 show_text=True, text_position=None, align=None):
        self.type = type
        self.width = width
        self.height = height
        self.show_text = show_text
        self.text_position = text_position
        self.align = align


class QRCodeOptions(_Record):
    _fields = ('size', 'error_correction', 'align')

    def __init__(self, size=None, error_correction=None, align=None):
        self.size = size
        self.error_correction = error_correction
        self.align = align


class ImageOptions(_Record):
    _fields = ('width', 'align')

    def __init__(self, width=None, align=None):
        self.width = width
        self.align = align


#
#  Content items
#

class ContentItem(_Record):
    """ Base class for everything that can go in a content sequence.

    Subclasses set _content_type; it is exposed read only.
    """

    _content_type = None

    @property
    def content_type(self):
        return self._content_type


class TextContent(ContentItem):
    _content_type = ContentType.TEXT
    _fields = ('value', 'style')

    def __init__(self, value, style=None):
        self.value = value
        self.style = style


class LineContent(ContentItem):
    _content_type = ContentType.LINE
    _fields = ('character', )

    def __init__(self, character=None):
        self.character = character


class TableContent(ContentItem):
    _content_type = ContentType.TABLE
    _fields = ('rows', )

    def __init__(self, rows=None):
        self.rows = rows if rows is not None else []


class BarcodeContent(ContentItem):
    _content_type = ContentType.BARCODE
    _fields = ('value', 'options')

    def __init__(self, value, options=None):
        self.value = value
        self.options = options if options is not None else BarcodeOptions()


class QRCodeContent(ContentItem):
    _content_type = ContentType.QRCODE
    _fields = ('value', 'options')

    def __init__(self, value, options=None):
        self.value = value
        self.options = options


class ImageContent(ContentItem):
    """ An image reference. source is a path or base64 data, it is passed
    through untouched.
    """

    _content_type = ContentType.IMAGE
    _fields = ('source', 'options')

    def __init__(self, source, options=None):
        self.source = source
        self.options = options


class FeedContent(ContentItem):
    _content_type = ContentType.FEED
    _fields = ('lines', )

    def __init__(self, lines=None):
        self.lines = lines


class CutContent(ContentItem):
    _content_type = ContentType.CUT
    _fields = ('partial', )

    def __init__(self, partial=False):
        self.partial = partial


#
#  Configuration values
#

class CurrencyFormat(_Record):
    """ How amounts are written. The defaults give '1 234.50' """

    _fields = ('symbol', 'decimals', 'thousand_separator',
               'decimal_separator', 'symbol_position')

    def __init__(self, symbol='', decimals=2, thousand_separator=' ',
                 decimal_separator='.', symbol_position=SymbolPosition.AFTER):
        self.symbol = symbol
        self.decimals = decimals
        self.thousand_separator = thousand_separator
        self.decimal_separator = decimal_separator
        self.symbol_position = symbol_position


#
#  Receipt data template
#

def _get(data, *keys):
    for key in keys:
        if key in data:
            return data[key]
    return None


def _parse_date(value):
    if value is None or isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    try:
        return datetime.datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        log.info("Ignoring invalid receipt date %r", value)
        return None


class ReceiptHeader(_Record):
    _fields = ('title', 'subtitle', 'logo', 'address', 'phone')

    def __init__(self, title=None, subtitle=None, logo=None, address=None,
                 phone=None):
        self.title = title
        self.subtitle = subtitle
        self.logo = logo
        self.address = address or []
        self.phone = phone


class ReceiptItem(_Record):
    _fields = ('name', 'quantity', 'price', 'total')

    def __init__(self, name, quantity, price, total=None):
        self.name = name
        self.quantity = quantity
        self.price = price
        self.total = total


class ReceiptTotals(_Record):
    _fields = ('total', 'subtotal', 'tax', 'discount')

    def __init__(self, total, subtotal=None, tax=None, discount=None):
        self.total = total
        self.subtotal = subtotal
        self.tax = tax
        self.discount = discount


class ReceiptPayment(_Record):
    _fields = ('method', 'amount', 'change')

    def __init__(self, method, amount, change=None):
        self.method = method
        self.amount = amount
        self.change = change


class ReceiptMeta(_Record):
    _fields = ('order_number', 'date', 'cashier', 'customer')

    def __init__(self, order_number=None, date=None, cashier=None,
                 customer=None):
        self.order_number = order_number
        self.date = date
        self.cashier = cashier
        self.customer = customer


class ReceiptData(_Record):
    """ A whole receipt described as structured data.

    L{stoqreceipt.builder.ReceiptBuilder.from_data} lowers it into a
    content sequence.
    """

    _fields = ('items', 'header', 'totals', 'payment', 'footer', 'meta')

    def __init__(self, items=None, header=None, totals=None, payment=None,
                 footer=None, meta=None):
        self.items = items or []
        self.header = header
        self.totals = totals
        self.payment = payment
        self.footer = footer or []
        self.meta = meta

    @classmethod
    def from_dict(cls, data):
        """ Creates a ReceiptData from a mapping, such as decoded json.

        Both camelCase and snake_case keys are accepted.
        """
        header = data.get('header')
        if header is not None:
            header = ReceiptHeader(title=header.get('title'),
                                   subtitle=header.get('subtitle'),
                                   logo=header.get('logo'),
                                   address=list(header.get('address') or []),
                                   phone=header.get('phone'))

        items = [ReceiptItem(name=item['name'],
                             quantity=item.get('quantity', 1),
                             price=item['price'],
                             total=item.get('total'))
                 for item in data.get('items') or []]

        totals = data.get('totals')
        if totals is not None:
            totals = ReceiptTotals(total=totals['total'],
                                   subtotal=totals.get('subtotal'),
                                   tax=totals.get('tax'),
                                   discount=totals.get('discount'))

        payment = data.get('payment')
        if payment is not None:
            payment = ReceiptPayment(method=payment['method'],
                                     amount=payment['amount'],
                                     change=payment.get('change'))

        meta = data.get('meta')
        if meta is not None:
            meta = ReceiptMeta(order_number=_get(meta, 'orderNumber', 'order_number'),
                               date=_parse_date(meta.get('date')),
                               cashier=meta.get('cashier'),
                               customer=meta.get('customer'))

        return cls(items=items, header=header, totals=totals, payment=payment,
                   footer=list(data.get('footer') or []), meta=meta)

