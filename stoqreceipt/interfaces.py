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
Stoqreceipt interfaces definition
"""

from zope.interface import Interface, Attribute

__all__ = ["IReceiptRenderer",
           "IPrinterOutput"]


class IReceiptRenderer(Interface):
    """ Turns a content sequence into a printable or viewable document.

    Renderers are pure: they hold no state between calls and never raise
    for well formed content. Items with an unknown tag produce nothing.
    """

    paper_width = Attribute("The PaperWidth the renderer lays out for")

    def render(contents):
        """ Render the given content sequence.

        @param contents:  the content items, in print order
        @type contents:   sequence
        @returns:         the rendered document (bytes for the ESC/POS
                          encoder, str for the preview)
        """


class IPrinterOutput(Interface):
    """ Somewhere the encoded byte buffer can be handed to.

    Outputs are the only place where device errors happen; they raise
    L{stoqreceipt.exceptions.OutputError} (or the transport library's own
    error) when the data could not be delivered.
    """

    def open():
        """ Acquire the underlying device, if needed """

    def write(data):
        """ Deliver the given data to the printer

        @param data:  the encoded receipt
        @type data:   bytes
        """

    def close():
        """ Release the underlying device """
