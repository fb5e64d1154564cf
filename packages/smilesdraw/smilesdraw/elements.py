"""Element tables used for valence bookkeeping and formulas."""


# Default valences of the SMILES organic subset; hydrogen filling uses these.
MAX_BONDS = {
	"H": 1,
	"C": 4,
	"N": 3,
	"O": 2,
	"P": 3,
	"S": 2,
	"B": 3,
	"F": 1,
	"I": 1,
	"Cl": 1,
	"Br": 1,
}

SYMBOLS = (
	"H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
	"Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
	"Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
	"Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
	"Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
	"Sb", "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
	"Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
	"Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
	"Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
	"Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
	"Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
	"Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

ATOMIC_NUMBERS = {symbol: index + 1 for index, symbol in enumerate(SYMBOLS)}
# lowercase aromatic symbols map to the same element
ATOMIC_NUMBERS.update({"b": 5, "c": 6, "n": 7, "o": 8, "p": 15, "s": 16, "se": 34, "as": 33})


#============================================
def max_bonds(element):
	"""Default valence of element, or None outside the organic subset."""
	return MAX_BONDS.get(element)


#============================================
def atomic_number(element):
	return ATOMIC_NUMBERS.get(element)
