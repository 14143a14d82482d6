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
HTML preview of a content sequence, for showing a receipt on screen.
"""

from html import escape
import logging

import qrcode
import qrcode.constants
import qrcode.exceptions
import qrcode.image.svg
from zope.interface import implementer

from stoqreceipt.enum import PaperWidth
from stoqreceipt.escpos import DEFAULT_FEED_LINES, DEFAULT_QRCODE_SIZE
from stoqreceipt.format import create_line, get_chars_per_line
from stoqreceipt.interfaces import IReceiptRenderer
from stoqreceipt.utils import enum_value, int_or_default

log = logging.getLogger('stoqreceipt.preview')

_QRCODE_ERROR_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}

_SIZE_CLASSES = {
    'double-height': 'text-double-height',
    'double-width': 'text-double-width',
    'double': 'text-double',
}

_STYLES = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: 'Courier New', Courier, monospace;
      font-size: %(font_size)s;
      line-height: 1.2;
      width: %(width)s;
      padding: 2mm;
      background: white;
      color: black;
    }
    .text { margin: 0; white-space: pre-wrap; word-wrap: break-word; }
    .text-left { text-align: left; }
    .text-center { text-align: center; }
    .text-right { text-align: right; }
    .text-bold { font-weight: bold; }
    .text-underline { text-decoration: underline; }
    .text-invert { background: black; color: white; padding: 1px 3px; }
    .text-double-height { font-size: 1.5em; }
    .text-double-width { letter-spacing: 0.5em; }
    .text-double { font-size: 1.5em; letter-spacing: 0.3em; }
    .line { white-space: pre; overflow: hidden; margin: 3px 0; }
    .table { width: 100%%; border-collapse: collapse; }
    .table td { vertical-align: top; padding: 1px 0; white-space: pre; }
    .barcode { margin: 5px 0; }
    .qrcode { margin: 5px 0; }
    .qrcode svg { max-width: 60%%; height: auto; }
    .cut { border-top: 1px dashed #ccc; margin: 10px 0; }
    @media print {
      body { width: 100%%; padding: 0; }
      @page { margin: 0; size: %(width)s auto; }
    }
"""

_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<style>%(styles)s</style>
</head>
<body>
%(body)s
</body>
</html>"""


def _align(value, default='left'):
    value = enum_value(value)
    if value in ('left', 'center', 'right'):
        return value
    return default


@implementer(IReceiptRenderer)
class HTMLRenderer(object):
    """ Renders content sequences as standalone HTML documents that look
    like the printed receipt.
    """

    def __init__(self, paper_width=PaperWidth.MM80):
        self.paper_width = paper_width
        self.chars_per_line = get_chars_per_line(paper_width)
        self._renderers = {
            'text': self._render_text,
            'line': self._render_line,
            'table': self._render_table,
            'feed': self._render_feed,
            'cut': self._render_cut,
            'barcode': self._render_barcode,
            'qrcode': self._render_qrcode,
            'image': self._render_image,
        }

    #
    # IReceiptRenderer
    #

    def render(self, contents):
        parts = []
        for content in contents:
            content_type = enum_value(getattr(content, 'content_type', None))
            renderer = None
            if isinstance(content_type, str):
                renderer = self._renderers.get(content_type)
            if renderer is not None:
                parts.append(renderer(content))

        is_narrow = int(enum_value(self.paper_width)) == PaperWidth.MM58
        styles = _STYLES % dict(width='48mm' if is_narrow else '72mm',
                                font_size='11px' if is_narrow else '12px')
        return _DOCUMENT % dict(styles=styles, body='\n'.join(parts))

    #
    # Private
    #

    def _render_text(self, content):
        style = content.style
        classes = ['text']
        if style is not None:
            if style.align:
                classes.append('text-%s' % _align(style.align))
            if style.bold:
                classes.append('text-bold')
            if style.underline:
                classes.append('text-underline')
            if style.invert:
                classes.append('text-invert')
            size_class = _SIZE_CLASSES.get(enum_value(style.size))
            if size_class:
                classes.append(size_class)
        value = '' if content.value is None else str(content.value)
        return '<p class="%s">%s</p>' % (' '.join(classes), escape(value))

    def _render_line(self, content):
        line = create_line(self.chars_per_line, content.character)
        return '<div class="line" aria-hidden="true">%s</div>' % escape(line)

    def _render_table(self, content):
        rows = []
        for row in content.rows:
            cells = []
            for column in row:
                style = 'text-align:%s;' % _align(column.align)
                if column.bold:
                    style += 'font-weight:bold;'
                width = column.width
                if width is not None and not isinstance(width, bool):
                    if isinstance(width, str):
                        style += 'width:%s;' % escape(width)
                    else:
                        style += 'width:%sch;' % int(width)
                text = '' if column.text is None else str(column.text)
                cells.append('<td style="%s">%s</td>' % (style, escape(text)))
            rows.append('<tr>%s</tr>' % ''.join(cells))
        return '<table class="table"><tbody>%s</tbody></table>' % ''.join(rows)

    def _render_feed(self, content):
        lines = int_or_default(content.lines, DEFAULT_FEED_LINES)
        return '<div class="feed" style="height:%dem"></div>' % max(lines, 0)

    def _render_cut(self, content):
        return '<div class="cut"></div>'

    def _render_barcode(self, content):
        options = content.options
        align = _align(getattr(options, 'align', None), 'center')
        value = escape(str(content.value))
        html = ('<div class="barcode" style="text-align:%s">'
                '<div style="letter-spacing:3px;font-size:14px">'
                '||| %s |||</div>' % (align, value))
        position = enum_value(getattr(options, 'text_position', None))
        show_text = getattr(options, 'show_text', True) is not False
        if show_text and position != 'none':
            html += '<div style="font-size:10px">%s</div>' % value
        return html + '</div>'

    def _render_qrcode(self, content):
        options = content.options
        align = _align(getattr(options, 'align', None), 'center')
        size = int_or_default(getattr(options, 'size', None), DEFAULT_QRCODE_SIZE)
        level = _QRCODE_ERROR_LEVELS.get(
            enum_value(getattr(options, 'error_correction', None)),
            qrcode.constants.ERROR_CORRECT_M)

        qr = qrcode.QRCode(error_correction=level, box_size=max(size, 1),
                           border=2,
                           image_factory=qrcode.image.svg.SvgImage)
        qr.add_data(str(content.value))
        try:
            qr.make(fit=True)
        except (ValueError, qrcode.exceptions.DataOverflowError) as e:
            log.info("Can't draw QR code preview: %s", e)
            return ('<div class="qrcode" style="text-align:%s">[QR CODE]</div>'
                    % align)
        svg = qr.make_image().to_string()
        if isinstance(svg, bytes):
            svg = svg.decode('utf-8')
        return '<div class="qrcode" style="text-align:%s">%s</div>' % (align, svg)

    def _render_image(self, content):
        align = _align(getattr(content.options, 'align', None), 'center')
        return ('<div class="image" style="text-align:%s">'
                '<img src="%s" style="max-width:100%%"/></div>'
                % (align, escape(str(content.source))))


def build_html(contents, paper_width=PaperWidth.MM80):
    """ Renders the contents as a HTML document

    @param contents:     the content items, in print order
    @param paper_width:  the L{PaperWidth} the preview should look like
    @returns:            the HTML document
    """
    return HTMLRenderer(paper_width).render(contents)
