#--------------------------------------------------------------------------
#     This file is part of smilesdraw - a free chemical python library
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Small helpers for building xml.dom.minidom trees."""


#============================================
def elementUnder(parent, name, attributes=()):
	"""Create element name, append it to parent and return it.

	attributes is a sequence of (name, value) pairs, values are set as given.
	"""
	if parent.nodeType == parent.DOCUMENT_NODE:
		doc = parent
	else:
		doc = parent.ownerDocument
	element = doc.createElement(name)
	for key, value in attributes:
		element.setAttribute(key, value)
	parent.appendChild(element)
	return element


#============================================
def textOnlyElementUnder(parent, name, text, attributes=()):
	"""Like elementUnder() but the new element holds a single text node."""
	element = elementUnder(parent, name, attributes=attributes)
	element.appendChild(element.ownerDocument.createTextNode(text))
	return element
