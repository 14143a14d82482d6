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

import datetime
import unittest

from stoqreceipt.builder import ReceiptBuilder, create_receipt
from stoqreceipt.content import (BarcodeOptions, CurrencyFormat, CutContent,
                                 FeedContent, LineContent, QRCodeOptions,
                                 ReceiptData, ReceiptHeader, ReceiptItem,
                                 ReceiptMeta, ReceiptTotals, TableColumn,
                                 TextContent, TextStyle)
from stoqreceipt.enum import (Alignment, BarcodeType, ContentType, FontSize,
                              PaperWidth, QRErrorCorrection, SymbolPosition,
                              TextPosition)


def _types(builder):
    return [c.content_type.value for c in builder.get_contents()]


def _row_texts(table):
    return [[column.text for column in row] for row in table.rows]


class TestReceiptBuilder(unittest.TestCase):
    def setUp(self):
        self._builder = ReceiptBuilder(PaperWidth.MM80)

    def test_chaining(self):
        builder = self._builder
        self.assertIs(builder.text('a').line().feed().cut(), builder)
        self.assertEqual(_types(builder), ['text', 'line', 'feed', 'cut'])

    def test_properties(self):
        self.assertEqual(self._builder.paper_width, PaperWidth.MM80)
        self.assertEqual(self._builder.chars_per_line, 48)
        self.assertEqual(create_receipt(PaperWidth.MM58).chars_per_line, 32)
        self.assertEqual(create_receipt(58, chars_per_line=42).chars_per_line, 42)

    def test_other_paper_widths(self):
        builder = ReceiptBuilder(112)
        self.assertEqual(builder.paper_width, PaperWidth.MM80)
        self.assertEqual(builder.chars_per_line, 48)
        self.assertEqual(ReceiptBuilder(58).paper_width, PaperWidth.MM58)

    def test_text_styles(self):
        self._builder.text('a').text_center('b').text_right('c').text_bold('d')
        styles = [c.style for c in self._builder.get_contents()]
        self.assertEqual(styles[0], None)
        self.assertEqual(styles[1], TextStyle(align=Alignment.CENTER))
        self.assertEqual(styles[2], TextStyle(align=Alignment.RIGHT))
        self.assertEqual(styles[3], TextStyle(bold=True))

    def test_text_keyword_style(self):
        self._builder.text('a', TextStyle(bold=True), underline=True)
        content = self._builder.get_contents()[0]
        self.assertEqual(content.style, TextStyle(bold=True, underline=True))

    def test_title(self):
        self._builder.title('Shop').subtitle('Since 1990')
        title, subtitle = self._builder.get_contents()
        self.assertEqual(title.style, TextStyle(bold=True,
                                                align=Alignment.CENTER,
                                                size=FontSize.DOUBLE))
        self.assertEqual(subtitle.style, TextStyle(bold=True,
                                                   align=Alignment.CENTER))

    def test_lines(self):
        self._builder.line().dashed_line().double_line().line('*')
        characters = [c.character for c in self._builder.get_contents()]
        self.assertEqual(characters, [None, '-', '=', '*'])

    def test_feed_and_cut(self):
        self._builder.feed().feed(1).cut().cut(partial=True)
        self.assertEqual(self._builder.get_contents(),
                         [FeedContent(3), FeedContent(1),
                          CutContent(False), CutContent(True)])

    def test_table_rows_are_merged(self):
        self._builder.row('a', '1').row('b', '2')
        contents = self._builder.get_contents()
        self.assertEqual(len(contents), 1)
        self.assertEqual(_row_texts(contents[0]), [['a', '1'], ['b', '2']])

    def test_table_rows_split_by_other_content(self):
        self._builder.row('a', '1').text('x').row('b', '2')
        self.assertEqual(_types(self._builder), ['table', 'text', 'table'])

    def test_table_row_column_kinds(self):
        self._builder.table_row(['a', {'text': 'b', 'width': 5},
                                 TableColumn('c', bold=True)])
        row = self._builder.get_contents()[0].rows[0]
        self.assertEqual(row, [TableColumn('a'), TableColumn('b', width=5),
                               TableColumn('c', bold=True)])

    def test_row(self):
        self._builder.row('Label', 'Value', label_bold=True)
        row = self._builder.get_contents()[0].rows[0]
        self.assertEqual(row, [
            TableColumn('Label', align=Alignment.LEFT, bold=True),
            TableColumn('Value', align=Alignment.RIGHT)])

    def test_item_row(self):
        self._builder.item_row('Coffee', 2.0, 3.5)
        row = self._builder.get_contents()[0].rows[0]
        self.assertEqual(row, [
            TableColumn('Coffee', width='50%', align=Alignment.LEFT),
            TableColumn('2', width='15%', align=Alignment.CENTER),
            TableColumn('3.50', width='35%', align=Alignment.RIGHT)])

    def test_total_row(self):
        self._builder.total_row('TOTAL:', 1234.5)
        row = self._builder.get_contents()[0].rows[0]
        self.assertEqual(row, [
            TableColumn('TOTAL:', align=Alignment.LEFT, bold=True),
            TableColumn('1 234.50', align=Alignment.RIGHT, bold=True)])

    def test_currency(self):
        currency = CurrencyFormat(symbol='$',
                                  symbol_position=SymbolPosition.BEFORE)
        self.assertIs(self._builder.set_currency(currency), self._builder)
        self.assertIs(self._builder.currency, currency)
        self.assertEqual(self._builder.format_currency(-99.99), '$-99.99')
        self._builder.set_currency(None)
        self.assertEqual(self._builder.currency, CurrencyFormat())

    def test_barcode_defaults(self):
        self._builder.barcode('123')
        content = self._builder.get_contents()[0]
        self.assertEqual(content.options, BarcodeOptions(
            type=BarcodeType.CODE128, width=2, height=100, show_text=True,
            text_position=TextPosition.BELOW, align=Alignment.CENTER))

    def test_barcode_options(self):
        self._builder.barcode('123', BarcodeOptions(type=BarcodeType.EAN8),
                              height=50, show_text=False)
        options = self._builder.get_contents()[0].options
        self.assertEqual(options.type, BarcodeType.EAN8)
        self.assertEqual(options.height, 50)
        self.assertFalse(options.show_text)

    def test_qrcode_defaults(self):
        self._builder.qrcode('https://stoq.com.br').qrcode('x', size=3)
        first, second = self._builder.get_contents()
        self.assertEqual(first.options, QRCodeOptions(
            size=6, error_correction=QRErrorCorrection.M,
            align=Alignment.CENTER))
        self.assertEqual(second.options.size, 3)

    def test_image_and_raw(self):
        item = TextContent('raw')
        self._builder.image('logo.png').raw(item)
        contents = self._builder.get_contents()
        self.assertEqual(contents[0].source, 'logo.png')
        self.assertIs(contents[1], item)

    def test_get_contents_is_a_copy(self):
        self._builder.text('a')
        self._builder.get_contents().append(LineContent())
        self.assertEqual(len(self._builder.get_contents()), 1)

    def test_clear(self):
        self.assertIs(self._builder.text('a').clear(), self._builder)
        self.assertEqual(self._builder.get_contents(), [])

    def test_build(self):
        data = self._builder.text('Hi').build()
        self.assertEqual(data, b'\x1b@\x1ba\x00Hi\n\x1ba\x00')

    def test_to_html(self):
        html = self._builder.text('Hi').to_html()
        self.assertTrue(html.startswith('<!DOCTYPE html>'))
        self.assertIn('Hi', html)


class TestFromData(unittest.TestCase):
    def test_only_items(self):
        data = ReceiptData(items=[ReceiptItem('Coffee', 1, 3.5)])
        builder = ReceiptBuilder().from_data(data)
        self.assertEqual(_types(builder),
                         ['table', 'line', 'table', 'line', 'feed', 'cut'])

        contents = builder.get_contents()
        header = contents[0].rows[0]
        self.assertEqual([c.text for c in header], ['Item', 'Qty', 'Price'])
        self.assertEqual([c.width for c in header], ['50%', '15%', '35%'])
        self.assertTrue(all(c.bold for c in header))
        self.assertEqual(contents[1].character, '-')
        self.assertEqual(contents[4], FeedContent(3))
        self.assertEqual(contents[5], CutContent(False))

    def test_total_only(self):
        data = ReceiptData(items=[ReceiptItem('Coffee', 1, 3.5)],
                           totals=ReceiptTotals(total=3.5))
        builder = ReceiptBuilder().from_data(data)
        self.assertEqual(_types(builder),
                         ['table', 'line', 'table', 'line', 'line', 'table',
                          'feed', 'cut'])
        contents = builder.get_contents()
        self.assertEqual(contents[4].character, '=')
        self.assertEqual(_row_texts(contents[5]), [['TOTAL:', '3.50']])
        self.assertTrue(all(c.bold for c in contents[5].rows[0]))

    def test_no_items(self):
        builder = ReceiptBuilder().from_data(ReceiptData())
        self.assertEqual(_types(builder),
                         ['table', 'line', 'line', 'feed', 'cut'])

    def test_full_receipt(self):
        data = {
            'header': {'title': 'Shop', 'address': ['Main St, 1']},
            'meta': {'orderNumber': 42, 'cashier': 'Ana'},
            'items': [{'name': 'Coffee', 'quantity': 2, 'price': 3.5},
                      {'name': 'Cake', 'quantity': 1, 'price': 3}],
            'totals': {'total': 10, 'subtotal': 9, 'tax': 1, 'discount': 0},
            'payment': {'method': 'Cash', 'amount': 20, 'change': 10},
            'footer': ['Thanks!'],
        }
        builder = ReceiptBuilder().from_data(data)
        self.assertEqual(_types(builder), [
            'text', 'text', 'line',
            'table', 'line',
            'table', 'line', 'table', 'line',
            'table', 'line', 'table',
            'feed', 'table',
            'feed', 'line', 'text',
            'feed', 'cut'])

        contents = builder.get_contents()
        self.assertEqual(contents[0].value, 'Shop')
        self.assertEqual(contents[0].style.size, FontSize.DOUBLE)
        self.assertEqual(contents[1].value, 'Main St, 1')
        self.assertEqual(_row_texts(contents[3]),
                         [['Order #:', '42'], ['Cashier:', 'Ana']])
        self.assertEqual(_row_texts(contents[7]),
                         [['Coffee', '2', '3.50'], ['Cake', '1', '3.00']])
        # A zero discount is left out
        self.assertEqual(_row_texts(contents[9]),
                         [['Subtotal:', '9.00'], ['Tax:', '1.00']])
        self.assertEqual(contents[10].character, '=')
        self.assertEqual(_row_texts(contents[11]), [['TOTAL:', '10.00']])
        self.assertEqual(contents[12], FeedContent(1))
        self.assertEqual(_row_texts(contents[13]),
                         [['Payment:', 'Cash'], ['Amount:', '20.00'],
                          ['Change:', '10.00']])
        self.assertEqual(contents[16].value, 'Thanks!')
        self.assertEqual(contents[16].style.align, Alignment.CENTER)

    def test_discount_and_date(self):
        data = ReceiptData(
            meta=ReceiptMeta(date=datetime.datetime(2024, 3, 5, 9, 7)),
            totals=ReceiptTotals(total=8, discount=2))
        contents = ReceiptBuilder().from_data(data).get_contents()
        self.assertEqual(_row_texts(contents[0]),
                         [['Date:', '05.03.2024 09:07']])
        totals = [c for c in contents
                  if c.content_type == ContentType.TABLE][-1]
        self.assertEqual(_row_texts(totals), [['TOTAL:', '8.00']])
        discount = [c for c in contents
                    if c.content_type == ContentType.TABLE][-2]
        self.assertEqual(_row_texts(discount), [['Discount:', '-2.00']])

    def test_logo(self):
        data = ReceiptData(header=ReceiptHeader(logo='logo.png'))
        contents = ReceiptBuilder().from_data(data).get_contents()
        self.assertEqual(contents[0].content_type, ContentType.IMAGE)
        self.assertEqual(contents[0].source, 'logo.png')