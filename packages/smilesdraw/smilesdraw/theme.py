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

"""Element color themes."""


DEFAULT_THEME = "light"

THEMES = {
	"dark": {
		"C": "#fff", "O": "#e74c3c", "N": "#3498db", "F": "#27ae60",
		"CL": "#16a085", "BR": "#d35400", "I": "#8e44ad", "P": "#d35400",
		"S": "#f1c40f", "B": "#e67e22", "SI": "#e67e22", "H": "#aaa",
		"BACKGROUND": "#141414",
	},
	"light": {
		"C": "#222", "O": "#e74c3c", "N": "#3498db", "F": "#27ae60",
		"CL": "#16a085", "BR": "#d35400", "I": "#8e44ad", "P": "#d35400",
		"S": "#f1c40f", "B": "#e67e22", "SI": "#e67e22", "H": "#666",
		"BACKGROUND": "#fff",
	},
	"oldschool": {
		"C": "#000", "O": "#000", "N": "#000", "F": "#000",
		"CL": "#000", "BR": "#000", "I": "#000", "P": "#000",
		"S": "#000", "B": "#000", "SI": "#000", "H": "#000",
		"BACKGROUND": "#fff",
	},
	"solarized": {
		"C": "#586e75", "O": "#dc322f", "N": "#268bd2", "F": "#859900",
		"CL": "#16a085", "BR": "#cb4b16", "I": "#6c71c4", "P": "#d33682",
		"S": "#b58900", "B": "#2aa198", "SI": "#2aa198", "H": "#657b83",
		"BACKGROUND": "#fff",
	},
	"solarized-dark": {
		"C": "#93a1a1", "O": "#dc322f", "N": "#268bd2", "F": "#859900",
		"CL": "#16a085", "BR": "#cb4b16", "I": "#6c71c4", "P": "#d33682",
		"S": "#b58900", "B": "#2aa198", "SI": "#2aa198", "H": "#839496",
		"BACKGROUND": "#fff",
	},
	"matrix": {
		"C": "#678c61", "O": "#2fc079", "N": "#4f7e7e", "F": "#90d762",
		"CL": "#82d967", "BR": "#23755a", "I": "#409931", "P": "#c1ff8a",
		"S": "#faff00", "B": "#50b45a", "SI": "#409931", "H": "#426644",
		"BACKGROUND": "#fff",
	},
	"github": {
		"C": "#24292f", "O": "#cf222e", "N": "#0969da", "F": "#2da44e",
		"CL": "#6fdd8b", "BR": "#bc4c00", "I": "#8250df", "P": "#bf3989",
		"S": "#d4a72c", "B": "#fb8f44", "SI": "#bc4c00", "H": "#57606a",
		"BACKGROUND": "#fff",
	},
	"carbon": {
		"C": "#161616", "O": "#da1e28", "N": "#0f62fe", "F": "#198038",
		"CL": "#007d79", "BR": "#fa4d56", "I": "#8a3ffc", "P": "#ff832b",
		"S": "#f1c21b", "B": "#8a3800", "SI": "#e67e22", "H": "#525252",
		"BACKGROUND": "#fff",
	},
	"cyberpunk": {
		"C": "#ea00d9", "O": "#ff3131", "N": "#0abdc6", "F": "#00ff9f",
		"CL": "#00fe00", "BR": "#fe9f20", "I": "#ff00ff", "P": "#fe7f00",
		"S": "#fcee0c", "B": "#ff00ff", "SI": "#ffffff", "H": "#913cb1",
		"BACKGROUND": "#fff",
	},
	"gruvbox": {
		"C": "#665c54", "O": "#cc241d", "N": "#458588", "F": "#98971a",
		"CL": "#79740e", "BR": "#d65d0e", "I": "#b16286", "P": "#af3a03",
		"S": "#d79921", "B": "#689d6a", "SI": "#427b58", "H": "#7c6f64",
		"BACKGROUND": "#fbf1c7",
	},
	"gruvbox-dark": {
		"C": "#ebdbb2", "O": "#cc241d", "N": "#458588", "F": "#98971a",
		"CL": "#b8bb26", "BR": "#d65d0e", "I": "#b16286", "P": "#fe8019",
		"S": "#d79921", "B": "#8ec07c", "SI": "#83a598", "H": "#bdae93",
		"BACKGROUND": "#282828",
	},
}


#============================================
class ThemeManager(object):
	"""Color lookup in one theme; unknown elements get the carbon color."""

	def __init__(self, themes=None, theme_name=DEFAULT_THEME):
		self.themes = themes if themes is not None else THEMES
		self.theme = {}
		self.theme_name = None
		self.set_theme(theme_name)

	def get_color(self, key):
		return self.theme.get(key.upper(), self.theme["C"])

	def set_theme(self, theme_name):
		if theme_name not in self.themes:
			raise ValueError(f"Unknown theme: {theme_name}")
		self.theme = self.themes[theme_name]
		self.theme_name = theme_name
