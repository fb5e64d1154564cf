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

"""SVG writer for finished layouts."""

import xml.dom.minidom as dom

import defusedxml.minidom

from . import render_ops
from . import dom_extensions
from . import reaction_ops



class svg_out(object):

  margin = 15
  # put bonds, ring circles and labels into separate groups
  group_items = True
  show_background = True


  def __init__( self, theme=None):
    self.theme = theme


  def layout_to_svg( self, layout, before=None, after=None):
    """before and after should be methods or functions that will take one
    argument - svg_out instance and do whatever it wants with it - usually
    adding something to the resulting DOM tree"""
    self.layout = layout
    margin = max( self.margin, layout.options.padding)
    bbox = render_ops.drawing_bbox( layout)
    theme = render_ops.resolve_theme( self.theme)
    ops = render_ops.build_ops( layout, theme)
    return self.ops_to_svg( ops, bbox, margin, theme, before=before, after=after)


  def reaction_to_svg( self, reaction, layout_options=None, text_above="{reagents}", text_below=""):
    """reaction is a Reaction or a reaction SMILES; the picture is cropped
    to everything drawn plus the margin"""
    theme = render_ops.resolve_theme( self.theme)
    drawing = reaction_ops.reaction_to_ops( reaction, layout_options=layout_options, theme=theme,
                                            text_above=text_above, text_below=text_below)
    self.reaction = drawing
    bbox = render_ops.ops_bbox( drawing.ops)
    return self.ops_to_svg( drawing.ops, bbox, self.margin, theme)


  def ops_to_svg( self, ops, bbox, margin, theme, before=None, after=None):
    self.document = dom.Document()
    top = dom_extensions.elementUnder( self.document,
                                       "svg",
                                       attributes=(("xmlns", "http://www.w3.org/2000/svg"),
                                                   ("version", "1.0")))
    x1, y1, x2, y2 = bbox or (0.0, 0.0, 0.0, 0.0)
    w = int( x2 - x1 + 2*margin)
    h = int( y2 - y1 + 2*margin)
    top.setAttribute( "width", str( w))
    top.setAttribute( "height", str( h))
    top.setAttribute( "viewBox", "0 0 %d %d" % (w, h))

    if self.show_background:
      dom_extensions.elementUnder( top, "rect",
                                   (( "x", "0"),
                                    ( "y", "0"),
                                    ( "width", str( w)),
                                    ( "height", str( h)),
                                    ( "fill", render_ops.color_to_hex( theme.get_color( "BACKGROUND")))))

    self.top = dom_extensions.elementUnder( top, "g",
                                            attributes=(("stroke-linecap", "round"),
                                                        ("transform", "translate(%s,%s)" % (-x1+margin, -y1+margin))))

    if before:
      before( self)

    if self.group_items:
      for name, z_values in (("bonds", (0,)), ("rings", (1,)), ("atoms", (2, 3))):
        parent = dom_extensions.elementUnder( self.top, "g", (("id", name),))
        render_ops.ops_to_svg( parent, [op for op in ops if op.z in z_values])
    else:
      render_ops.ops_to_svg( self.top, ops)

    if after:
      after( self)

    return self.document



def pretty_print_svg( svg_text):
  """Indent serialized svg, one element per line."""
  if isinstance( svg_text, bytes):
    svg_text = svg_text.decode( "utf-8")
  doc = defusedxml.minidom.parseString( svg_text)
  text = doc.toprettyxml( indent="  ")
  # toprettyxml leaves blank lines around text nodes
  return "\n".join( line for line in text.split( "\n") if line.strip()) + "\n"


def layout_to_svg( layout, filename, theme=None):
  c = svg_out( theme=theme)
  tree = c.layout_to_svg( layout)
  with open( filename, "w", encoding="utf-8") as f:
    f.write( pretty_print_svg( tree.toxml( "utf-8")))


def reaction_to_svg( reaction, filename, layout_options=None, theme=None):
  c = svg_out( theme=theme)
  tree = c.reaction_to_svg( reaction, layout_options=layout_options)
  with open( filename, "w", encoding="utf-8") as f:
    f.write( pretty_print_svg( tree.toxml( "utf-8")))
