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

"""smilesdraw - SMILES parsing, ring perception and 2D layout of molecules."""

from . import geometry
from . import graph
from . import layout
from . import options
from . import reaction
from . import reaction_ops
from . import render_ops
from . import render_out
from . import smiles_parser
from . import sssr
from . import svg_out
from . import theme

from .graph import Graph
from .layout import Layout
from .layout import molecular_formula
from .options import Options
from .reaction import Reaction
from .render_out import reaction_to_output
from .render_out import smiles_to_layout
from .render_out import smiles_to_output
from .smiles_parser import SmilesParseError
from .smiles_parser import parse
from .theme import ThemeManager

try:
	import cairo  # noqa: F401
	CAIRO_AVAILABLE = True
except ImportError:
	CAIRO_AVAILABLE = False

__version__ = "0.1.0"

__all__ = [
	"geometry", "graph", "layout", "options", "reaction", "reaction_ops", "render_ops",
	"render_out", "smiles_parser", "sssr", "svg_out", "theme",
	"Graph", "Layout", "Options", "Reaction", "SmilesParseError",
	"CAIRO_AVAILABLE", "ThemeManager", "molecular_formula", "parse", "smiles_to_layout",
	"reaction_to_output", "smiles_to_output",
]
