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
Text layout and value formatting for fixed width receipts.

Everything in here is a pure function. Lengths are counted in characters,
the printer font is assumed to be monospaced with one cell per character.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
import re

from stoqreceipt.content import CurrencyFormat
from stoqreceipt.enum import Alignment, PaperWidth, SymbolPosition
from stoqreceipt.utils import enum_value

CHARS_PER_LINE_58 = 32
CHARS_PER_LINE_80 = 48

_DOT_WIDTHS = {
    PaperWidth.MM58: 384,
    PaperWidth.MM80: 576,
}

DEFAULT_LINE_CHARACTER = '-'
DEFAULT_DATE_FORMAT = 'dd.MM.yyyy HH:mm'

_THOUSANDS_RE = re.compile(r'\B(?=(\d{3})+(?!\d))')
_WIDTH_RE = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*(%?)')
_DATE_TOKENS_RE = re.compile('yyyy|MM|dd|HH|mm|ss')


#
#  Paper
#

def get_chars_per_line(paper_width):
    """ How many characters fit a line of the given paper.

    58mm paper gives 32 characters, anything else is treated as 80mm.
    """
    if int(enum_value(paper_width)) == PaperWidth.MM58:
        return CHARS_PER_LINE_58
    return CHARS_PER_LINE_80


def get_paper_width(paper_width):
    """ The L{PaperWidth} for paper_width, treating anything that isn't
    58mm as 80mm, like L{get_chars_per_line} does.
    """
    if int(enum_value(paper_width)) == PaperWidth.MM58:
        return PaperWidth.MM58
    return PaperWidth.MM80


def get_dot_width(paper_width):
    """The printable width, in dots, of the given paper"""
    if int(enum_value(paper_width)) == PaperWidth.MM58:
        return _DOT_WIDTHS[PaperWidth.MM58]
    return _DOT_WIDTHS[PaperWidth.MM80]


#
#  Text
#

def pad_string(text, length, align=Alignment.LEFT, pad_char=' '):
    """ Pads text to length, or cuts it if it is longer than that.

    Centered text gets the smaller half of the padding on the left.
    """
    text = text or ''
    if length <= 0:
        return ''
    if len(text) >= length:
        return text[:length]

    padding = length - len(text)
    align = enum_value(align)
    if align == 'right':
        return pad_char * padding + text
    elif align == 'center':
        left = padding // 2
        return pad_char * left + text + pad_char * (padding - left)
    return text + pad_char * padding


def create_line(length, char=DEFAULT_LINE_CHARACTER):
    """A separator made of char, exactly length characters long"""
    char = char or DEFAULT_LINE_CHARACTER
    if length <= 0:
        return ''
    return (char * length)[:length]


def truncate(text, max_length, ellipsis='...'):
    """ Cuts text to max_length, ending it with ellipsis when cut """
    if len(text) <= max_length:
        return text
    if max_length <= len(ellipsis):
        return text[:max_length]
    return text[:max_length - len(ellipsis)] + ellipsis


def iter_wrap(text, max_width):
    """ Greedy word wrapping.

    Words are packed while the line plus a separating space fits. A word
    longer than max_width is split in max_width chunks, and its last
    chunk starts the next line.
    """
    text = text or ''
    if len(text) <= max_width or max_width < 1:
        yield text
        return

    line = ''
    for word in text.split(' '):
        if len(word) > max_width:
            if line:
                yield line.strip()
                line = ''
            for i in range(0, len(word), max_width):
                if i + max_width < len(word):
                    yield word[i:i + max_width]
                else:
                    line = word[i:]
        elif len((line + ' ' + word).strip()) <= max_width:
            line = (line + ' ' + word).strip()
        else:
            if line:
                yield line.strip()
            line = word

    if line:
        yield line.strip()


def word_wrap(text, max_width):
    """The lines of L{iter_wrap} as a list"""
    return list(iter_wrap(text, max_width))


#
#  Tables
#

def _get_field(column, name, default=None):
    if isinstance(column, dict):
        return column.get(name, default)
    return getattr(column, name, default)


def _parse_width(width, total_width):
    # Returns None for flex columns
    if width is None or isinstance(width, bool):
        return None
    if isinstance(width, str):
        match = _WIDTH_RE.match(width)
        if not match:
            return None
        number, percent = match.groups()
        if percent:
            if '.' in number:
                return int(total_width * float(number) / 100)
            return total_width * int(number) // 100
        return int(float(number))
    return int(width)


def calculate_column_widths(columns, total_width):
    """ Distributes total_width among the columns.

    Columns with an absolute width take it, columns with a percentage
    take floor(total_width * percent). Whatever is left is split equally
    among the columns without a width, rounding down. The remainder of
    that division is not given to anyone, so the widths may add up to
    less than total_width. Fixed widths are not clamped either: if they
    add up to more than total_width the line will overflow.

    @param columns:      objects or mappings with an optional 'width'
    @param total_width:  the number of characters available
    @returns:            a list with one width per column
    """
    widths = []
    used = 0
    flex_count = 0
    for column in columns:
        width = _parse_width(_get_field(column, 'width'), total_width)
        if width is None:
            flex_count += 1
        else:
            used += width
        widths.append(width)

    if flex_count:
        flex_width = (total_width - used) // flex_count
        widths = [flex_width if w is None else w for w in widths]
    return widths


def format_table_row(columns, total_width, separator=' '):
    """ Lays out already sized columns in a single line.

    Each column needs 'text' and 'width', and may have 'align'.
    The result is cut at total_width.
    """
    parts = [pad_string(_get_field(col, 'text', ''),
                        _get_field(col, 'width', 0),
                        _get_field(col, 'align') or Alignment.LEFT)
             for col in columns]
    return separator.join(parts)[:total_width]


#
#  Values
#

def format_currency(amount, currency=None, **kwargs):
    """ Formats amount as money.

    The sign goes before the digits but after a leading symbol, so -5
    with a '$' before gives '$-5.00'.

    @param amount:    the value to format
    @type amount:     number
    @param currency:  a L{CurrencyFormat}, the defaults are used if None
    @param kwargs:    CurrencyFormat fields overriding the ones in currency
    """
    currency = currency or CurrencyFormat()
    if kwargs:
        values = dict((f, getattr(currency, f)) for f in currency._fields)
        values.update(kwargs)
        currency = CurrencyFormat(**values)

    decimals = int(currency.decimals)
    value = abs(Decimal(str(amount)))
    if not value.is_finite():
        return str(amount)
    with localcontext() as context:
        # Room for every integer digit plus the requested decimals
        context.prec = max(context.prec, value.adjusted() + decimals + 2)
        value = value.quantize(Decimal(1).scaleb(-decimals),
                               rounding=ROUND_HALF_UP)
    int_part, _, dec_part = '{:f}'.format(value).partition('.')

    int_part = _THOUSANDS_RE.sub(lambda m: currency.thousand_separator, int_part)
    if dec_part:
        result = int_part + currency.decimal_separator + dec_part
    else:
        result = int_part

    if amount < 0:
        result = '-' + result

    if currency.symbol:
        if enum_value(currency.symbol_position) == SymbolPosition.BEFORE.value:
            result = currency.symbol + result
        else:
            result = '%s %s' % (result, currency.symbol)
    return result


def format_date(date, fmt=DEFAULT_DATE_FORMAT):
    """ Formats date with the yyyy, MM, dd, HH, mm and ss tokens.

    The tokens are replaced in a single pass, so digits already written
    are never taken as part of another token.
    """
    values = {
        'yyyy': '%04d' % date.year,
        'MM': '%02d' % date.month,
        'dd': '%02d' % date.day,
        'HH': '%02d' % getattr(date, 'hour', 0),
        'mm': '%02d' % getattr(date, 'minute', 0),
        'ss': '%02d' % getattr(date, 'second', 0),
    }
    return _DATE_TOKENS_RE.sub(lambda m: values[m.group()], fmt)
