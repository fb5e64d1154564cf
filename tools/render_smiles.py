#!/usr/bin/env python3

"""Lay out a SMILES string and render it to SVG, PNG or PDF."""

# Standard Library
import argparse
import logging
import os
import subprocess
import sys


#============================================
def get_repo_root():
	"""Return the checkout this script lives in, else ask git."""
	script_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if os.path.isdir(os.path.join(script_root, "packages", "smilesdraw")):
		return script_root
	result = subprocess.run(
		["git", "rev-parse", "--show-toplevel"],
		capture_output=True,
		text=True,
	)
	if result.returncode == 0:
		return result.stdout.strip()
	return script_root


repo_root = get_repo_root()
smilesdraw_dir = os.path.join(repo_root, "packages", "smilesdraw")
if smilesdraw_dir not in sys.path:
	sys.path.insert(0, smilesdraw_dir)

# local repo modules
import smilesdraw.render_out as render_out
import smilesdraw.theme as theme


#============================================
def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description="Render a SMILES string as a 2D structure drawing"
	)
	parser.add_argument("smiles", help="SMILES string, or reaction SMILES with two '>', to draw")
	parser.add_argument(
		"-o",
		"--out",
		dest="output",
		default="molecule.svg",
		help="Output file, format taken from the extension (default: molecule.svg)",
	)
	parser.add_argument(
		"--theme",
		default=theme.DEFAULT_THEME,
		choices=sorted(theme.THEMES),
		help=f"Color theme (default: {theme.DEFAULT_THEME})",
	)
	parser.add_argument("--bond-length", type=float, default=30.0, help="Bond length (default: 30)")
	parser.add_argument(
		"--iterations",
		type=int,
		default=1,
		help="Overlap resolution iterations (default: 1)",
	)
	parser.add_argument(
		"--no-isomeric",
		dest="isomeric",
		action="store_false",
		help="Ignore stereochemistry, draw no wedges",
	)
	parser.add_argument(
		"--explicit-hydrogens",
		dest="explicit_hydrogens",
		action=argparse.BooleanOptionalAction,
		default=True,
		help="Add hidden hydrogen vertices before layout (default: on)",
	)
	parser.add_argument(
		"--experimental-sssr",
		action="store_true",
		default=False,
		help="Keep searching for rings past the expected ring count",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log layout progress")
	return parser.parse_args(argv)


#============================================
def main(argv=None):
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	layout_options = {
		"bond_length": args.bond_length,
		"bond_spacing": 0.17 * args.bond_length,
		"overlap_resolution_iterations": args.iterations,
		"isomeric": args.isomeric,
		"explicit_hydrogens": args.explicit_hydrogens,
		"experimental_sssr": args.experimental_sssr,
		"debug": args.verbose,
	}
	# reactant>reagent>product input is drawn as a reaction row
	if ">" in args.smiles:
		render = render_out.reaction_to_output
	else:
		render = render_out.smiles_to_output
	try:
		render(args.smiles, args.output, layout_options=layout_options, theme=args.theme)
	except (ValueError, RuntimeError) as exc:
		print(f"Error: {exc}", file=sys.stderr)
		raise SystemExit(1)
	print(args.output)


#============================================
if __name__ == "__main__":
	main()
